from abc import ABC, abstractmethod
from typing import Any

from ..core.rules import cargo, has_ship_captain_crew


class Agent(ABC):
    """
    Abstract base class for all Ship, Captain, and Crew agents.
    Agents must implement choose_action(view), which receives the current player's view of the game and returns an Action.
    Common agent utilities can be added here for reuse.
    """

    @abstractmethod
    def choose_action(self, view: Any):
        """
        Given the current player's view, return the next Action to take.
        Args:
            view (dict): View from DiceGame.get_view() with keys 'player_number', 'rolls_used', 'max_rolls',
                'score', 'can_roll' and 'dice' ((die_number, face_value, held) tuples).
        Returns:
            Action: The action to take.
        """
        raise NotImplementedError

    def held_faces(self, dice) -> set:
        """
        Face values of the held dice.
        Args:
            dice (iterable): (die_number, face_value, held) tuples.
        Returns:
            set[int]: Held faces.
        """
        return {face for _, face, held in dice if held}

    def has_qualified(self, dice) -> bool:
        """
        True if ship, captain and crew are all held.
        """
        return has_ship_captain_crew((face, held) for _, face, held in dice)

    def cargo(self, dice) -> int:
        """
        Points the dice would score right now if the player qualified.
        """
        return cargo(face for _, face, _ in dice)
