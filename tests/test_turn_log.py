import unittest
from ship_captain_crew.core.engine import DiceGame, IllegalMoveError
from ship_captain_crew.core.actions import RollAction, HoldAction, AutoHoldAction, ScoreAction, EndTurnAction, Action
from ship_captain_crew.persistence import serializer
from helpers import ScriptedRng, set_faces


class TestTurnLog(unittest.TestCase):
    """
    Tests for `apply_action`, the emitted events and the per-action `turn_log` snapshots recorded by `DiceGame`.
    These tests verify:
      - An initial snapshot is recorded at the start of the round.
      - After each action a snapshot is appended containing the action, players and dice.
      - Rolling past the budget and unknown actions raise `IllegalMoveError`.
    """

    def test_initial_and_action_snapshots(self):
        game = DiceGame(2, 5, 3, rng=ScriptedRng([6, 5, 4, 1, 2]))
        game.start_new_game()
        self.assertEqual(len(game.turn_log), 1)
        self.assertIsNone(game.turn_log[0]['action'])
        game.apply_action(RollAction())
        last = game.turn_log[-1]
        self.assertEqual(last['action'], {'type': 'Roll'})
        self.assertEqual([d['face_value'] for d in last['dice']], [6, 5, 4, 1, 2])
        self.assertEqual(last['players'][0]['rolls_used'], 1)
        game.apply_action(HoldAction(2))
        self.assertEqual(game.turn_log[-1]['action'], {'type': 'Hold', 'die_number': 2})
        self.assertTrue(game.turn_log[-1]['dice'][1]['held'])

    def test_turn_log_is_json_serializable(self):
        game = DiceGame(2, 5, 3, rng=ScriptedRng([6, 5, 4, 1, 2]))
        game.start_new_game()
        game.apply_action(RollAction())
        restored = serializer.loads(serializer.dumps(game.turn_log))
        self.assertEqual(restored, game.turn_log)

    def test_roll_over_budget_is_illegal(self):
        game = DiceGame(2, 5, 1, rng=ScriptedRng([1, 2, 3, 4, 5]))
        game.apply_action(RollAction())
        with self.assertRaises(IllegalMoveError):
            game.apply_action(RollAction())
        self.assertEqual(game.get_current_player().get_rolls_used(), 1)

    def test_unknown_action_is_illegal(self):
        game = DiceGame(2, 5, 3)
        with self.assertRaises(IllegalMoveError):
            game.apply_action(Action())

    def test_action_results(self):
        game = DiceGame(2, 5, 3)
        set_faces(game, [6, 5, 4, 3, 3])
        self.assertFalse(game.apply_action(AutoHoldAction(2)))
        for face in (6, 5, 4):
            self.assertTrue(game.apply_action(AutoHoldAction(face)))
        self.assertTrue(game.apply_action(ScoreAction()))
        self.assertEqual(game.get_current_player_score(), 6)

    def test_end_turn_resets_dice_and_advances(self):
        game = DiceGame(2, 5, 3)
        set_faces(game, [6, 5, 4, 3, 3])
        game.player_hold(1)
        self.assertTrue(game.apply_action(EndTurnAction()))
        self.assertEqual(game.get_current_player_number(), 2)
        self.assertFalse(any(d.is_held() for d in game.dice))
        self.assertFalse(game.apply_action(EndTurnAction()))
        self.assertEqual(game.get_current_player_number(), 2)

    def test_events(self):
        game = DiceGame(2, 5, 3, rng=ScriptedRng([6, 5, 4, 1, 2]))
        game.start_new_game()
        game.roll_dice()
        for face in (6, 5, 4):
            game.auto_hold(face)
        game.score_current_player()
        types = [e['type'] for e in game.pop_events()]
        self.assertEqual(types, ['RoundStarted', 'DiceRolled', 'DieHeld', 'DieHeld', 'DieHeld', 'PlayerScored'])
        self.assertEqual(game.get_events(), [])
        game.get_game_results()
        ev = game.get_events()
        self.assertEqual(ev[0], {'type': 'RoundTallied', 'high_score': 3, 'winners': [1]})
        self.assertEqual(ev[1], {'type': 'PlayersRanked', 'order': [1, 2]})

    def test_view(self):
        game = DiceGame(2, 3, 2, rng=ScriptedRng([3, 2, 1]))
        game.roll_dice()
        game.player_hold(1)
        view = game.get_view()
        self.assertEqual(view['player_number'], 1)
        self.assertEqual(view['rolls_used'], 1)
        self.assertEqual(view['max_rolls'], 2)
        self.assertTrue(view['can_roll'])
        self.assertEqual(view['dice'], ((1, 3, True), (2, 2, False), (3, 1, False)))


if __name__ == '__main__':
    unittest.main()
