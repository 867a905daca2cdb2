
"""
actions.py
Defines the base Action type and concrete action classes for the Ship, Captain, and Crew engine.
Actions represent the moves a player can make during a turn (roll, hold, auto-hold, score, end turn).
Related modules:
- engine.py: DiceGame.apply_action consumes Action objects to update game state.
- agents: Agents return Action objects from choose_action.
"""

from dataclasses import dataclass



class Action:
    """
    Base class for all game actions.
    """
    pass



@dataclass(frozen=True)
class RollAction(Action):
    """
    Roll every unheld die. Uses one roll from the current player's budget.
    """
    pass



@dataclass(frozen=True)
class HoldAction(Action):
    """
    Hold a specific die.
    Args:
        die_number (int): Identifier of the die to hold (not its face value).
    """
    die_number: int



@dataclass(frozen=True)
class AutoHoldAction(Action):
    """
    Hold any die showing the given face value.
    Args:
        face_value (int): Face to hold.
    """
    face_value: int



@dataclass(frozen=True)
class ScoreAction(Action):
    """
    Score the current player from the dice as they stand.
    """
    pass



@dataclass(frozen=True)
class EndTurnAction(Action):
    """
    Finish the current player's turn and pass the dice to the next seat.
    """
    pass
