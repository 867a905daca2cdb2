import random
import unittest
from ship_captain_crew.agents.base import Agent
from ship_captain_crew.agents.greedy_agent import GreedyAgent
from ship_captain_crew.agents.random_agent import RandomAgent
from ship_captain_crew.core.actions import RollAction, ScoreAction
from ship_captain_crew.core.engine import DiceGame
from ship_captain_crew.core.match import run_turn, run_round, run_match
from helpers import ScriptedRng


class AlwaysRollAgent(Agent):
    def choose_action(self, view):
        return RollAction()


class AlwaysScoreAgent(Agent):
    def choose_action(self, view):
        return ScoreAction()


class TestMatch(unittest.TestCase):
    def test_round_with_scripted_dice(self):
        # player 1 rolls 6,5,4,6,6 and banks 12; player 2 rolls nothing but ones
        rng = ScriptedRng([6, 5, 4, 6, 6] + [1] * 15)
        game = DiceGame(2, 5, 3, rng=rng)
        summary = run_round(game, [GreedyAgent(), GreedyAgent()])
        self.assertEqual(summary["scores"], {1: 12, 2: 0})
        self.assertEqual(summary["winners"], [1])
        self.assertEqual(summary["errors"], [])
        self.assertEqual(summary["results"], "Player 1: score=12, wins=1, losses=0, "
                                             "Player 2: score=0, wins=0, losses=1")
        self.assertEqual(game.players[1].get_rolls_used(), 3)
        self.assertIn("RoundTallied", [e["type"] for e in summary["events"]])

    def test_illegal_move_ends_turn(self):
        game = DiceGame(2, 5, 2, rng=random.Random(2))
        has_next, error = run_turn(game, AlwaysRollAgent())
        self.assertTrue(has_next)
        self.assertIn("no rolls remaining", error)
        self.assertEqual(game.get_current_player_number(), 2)

    def test_step_cap_ends_turn(self):
        game = DiceGame(2, 5, 3)
        has_next, error = run_turn(game, AlwaysScoreAgent(), max_steps=5)
        self.assertTrue(has_next)
        self.assertIsNone(error)
        # five score attempts plus the closing end-turn
        self.assertEqual(len(game.turn_log), 6)

    def test_match_accumulates_wins_and_losses(self):
        game = DiceGame(3, 5, 3, rng=random.Random(21))
        agents = [GreedyAgent(), RandomAgent(rng=random.Random(4)), GreedyAgent(cargo_target=0)]
        outcome = run_match(game, agents, rounds=4)
        self.assertEqual(len(outcome["rounds"]), 4)
        for p in game.players:
            self.assertEqual(p.wins + p.losses, 4)
        best = max(game.players, key=lambda p: p.wins)
        self.assertTrue(outcome["final_winner"].startswith(f"Player {best.player_number}:"))


if __name__ == '__main__':
    unittest.main()
