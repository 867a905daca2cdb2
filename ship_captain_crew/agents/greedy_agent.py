from .base import Agent
from ..core.actions import RollAction, AutoHoldAction, ScoreAction, EndTurnAction
from ..core.rules import SHIP, CAPTAIN, CREW
from . import register_agent


@register_agent("greedy")
class GreedyAgent(Agent):
    """
    Plays the usual table strategy: hold the ship, then the captain, then the crew, as soon as each one shows.
    Once qualified it scores, and keeps re-rolling the cargo while it is below `cargo_target` and rolls remain.
    """
    def __init__(self, cargo_target=8):
        """
        Args:
            cargo_target: Cargo at or above which the agent stops rolling (int).
        """
        self.cargo_target = cargo_target

    def choose_action(self, view):
        dice = view["dice"]
        if view["rolls_used"] == 0 and view["can_roll"]:
            return RollAction()

        held = self.held_faces(dice)
        # Crew must follow captain, captain must follow ship
        for face in (SHIP, CAPTAIN, CREW):
            if face in held:
                continue
            if any(f == face and not h for _, f, h in dice):
                return AutoHoldAction(face)
            break

        if self.has_qualified(dice):
            points = self.cargo(dice)
            if view["score"] != points:
                return ScoreAction()
            if view["can_roll"] and points < self.cargo_target:
                return RollAction()
            return EndTurnAction()

        if view["can_roll"]:
            return RollAction()
        return EndTurnAction()


@register_agent("greedy_cautious")
class CautiousGreedyAgent(GreedyAgent):
    """Banks the first cargo it scores."""
    def __init__(self):
        super().__init__(cargo_target=0)


@register_agent("greedy_bold")
class BoldGreedyAgent(GreedyAgent):
    """Keeps rolling for a cargo of 10 or more."""
    def __init__(self):
        super().__init__(cargo_target=10)
