import random

from .base import Agent
from ..core.actions import RollAction, HoldAction, AutoHoldAction, ScoreAction, EndTurnAction
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Picks uniformly among the legal actions. Always rolls first, and ends its turn with probability `end_prob`
    at each later step. Scores whenever it happens to be qualified, so a lucky hold is not wasted.
    """
    def __init__(self, rng=None, end_prob=0.15):
        """
        Args:
            rng: Optional random number generator.
            end_prob: Probability of ending the turn at each step after the first roll (float 0-1).
        """
        self.rng = rng or random.Random()
        self.end_prob = end_prob

    def choose_action(self, view):
        dice = view["dice"]
        if view["rolls_used"] == 0 and view["can_roll"]:
            return RollAction()
        if self.has_qualified(dice) and view["score"] != self.cargo(dice):
            return ScoreAction()
        if self.rng.random() < self.end_prob:
            return EndTurnAction()

        options = []
        if view["can_roll"]:
            options.append(RollAction())
        unheld = [(n, f) for n, f, h in dice if not h]
        options.extend(HoldAction(n) for n, _ in unheld)
        options.extend(AutoHoldAction(f) for f in sorted({f for _, f in unheld}))
        if not options:
            return EndTurnAction()
        return self.rng.choice(options)
