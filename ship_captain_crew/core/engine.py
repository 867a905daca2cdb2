
"""
engine.py
Implements the DiceGame class, which owns the players and dice, enforces the roll budget and hold rules, scores turns, and tallies rounds.
Related modules:
- config.py: GameConfig can be used to build a DiceGame.
- die.py / player.py: Collaborators owned by the game.
- actions.py: Actions are applied to update state.
- rules.py: Helpers for detecting ship, captain and crew and computing cargo.
"""

import random
from typing import Dict, List, Optional

from .config import GameConfig
from .die import Die
from .player import Player
from .actions import Action, RollAction, HoldAction, AutoHoldAction, ScoreAction, EndTurnAction
from .rules import SHIP, CAPTAIN, CREW, cargo


class InvalidConfiguration(Exception):
    """
    Raised when a game is constructed with an unplayable setup (fewer than two players).
    """
    pass


class IllegalMoveError(Exception):
    """
    Raised when an action cannot be applied (no rolls left, unknown action).
    """
    pass


class DiceGame:
    """
    Turn-resolution core for Ship, Captain, and Crew.
    Driven externally, one call per user action. The current player is tracked as an index into the player list.
    """
    def __init__(self, player_count: int, dice_count: int, max_rolls: int,
                 rng: Optional[random.Random] = None, sides: int = 6,
                 stop_when_all_held: bool = False):
        """
        Build the players and dice for a new game session.
        Args:
            player_count (int): Number of players (at least 2).
            dice_count (int): Number of dice.
            max_rolls (int): Rolls allowed per player per turn.
            rng (random.Random|None): Random source shared by all dice.
            sides (int): Sides on every die.
            stop_when_all_held (bool): Also refuse rolls once every die is held.
        Raises:
            InvalidConfiguration: If player_count is less than 2.
        """
        if player_count < 2:
            raise InvalidConfiguration(f"at least 2 players are required, got {player_count}")
        self.rng = rng or random.Random()
        self._players: List[Player] = [Player(n) for n in range(1, player_count + 1)]
        self._dice: List[Die] = [Die(sides, n, self.rng) for n in range(1, dice_count + 1)]
        self.max_rolls = max_rolls
        self.stop_when_all_held = stop_when_all_held
        self.current_index = 0
        self._events = []
        # turn_log will contain per-action snapshots that can be serialized to JSON
        self.turn_log = []

    @classmethod
    def from_config(cls, config: GameConfig) -> "DiceGame":
        """
        Build a game from a GameConfig. A seed gives a deterministic random source.
        """
        return cls(config.num_players, config.num_dice, config.max_rolls,
                   rng=random.Random(config.rng_seed), sides=config.sides,
                   stop_when_all_held=config.stop_when_all_held)

    @property
    def players(self):
        return tuple(self._players)

    @property
    def dice(self):
        return tuple(self._dice)

    def get_current_player(self) -> Player:
        return self._players[self.current_index]

    # Events are simple dicts, as in the turn log
    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        """
        return list(self._events)

    def _snapshot(self, action: Dict = None):
        """
        Internal: Record a snapshot of the current state for logging/replay.
        Args:
            action (dict|None): Action that produced this state.
        Returns:
            dict: Snapshot of state.
        """
        snap = {
            "action": action,
            "current_player": self.get_current_player_number(),
            "players": [
                {
                    "player_number": p.player_number,
                    "score": p.score,
                    "rolls_used": p.rolls_used,
                    "wins": p.wins,
                    "losses": p.losses,
                }
                for p in self._players
            ],
            "dice": [
                {"die_number": d.die_number, "face_value": d.face_value, "held": d.held}
                for d in self._dice
            ],
        }
        self.turn_log.append(snap)
        return snap

    def _all_dice_held(self) -> bool:
        return all(d.is_held() for d in self._dice)

    def _is_holding_die(self, face_value: int) -> bool:
        return any(d.is_held() and d.get_face_value() == face_value for d in self._dice)

    def current_player_can_roll(self) -> bool:
        """
        Returns True if the current player has rolls remaining.
        With stop_when_all_held set, also requires at least one unheld die.
        """
        if self.stop_when_all_held and self._all_dice_held():
            return False
        return self.get_current_player().get_rolls_used() < self.max_rolls

    def get_current_player_number(self) -> int:
        return self.get_current_player().get_player_number()

    def get_current_player_score(self) -> int:
        return self.get_current_player().get_score()

    def get_dice_results(self) -> str:
        return ", ".join(str(d) for d in self._dice)

    def roll_dice(self) -> None:
        """
        Log the roll for the current player, then roll each die. Held dice keep their faces.
        """
        player = self.get_current_player()
        player.roll()
        for d in self._dice:
            d.roll()
        self._emit({"type": "DiceRolled", "player": player.player_number,
                    "roll": player.rolls_used, "dice": [d.face_value for d in self._dice]})

    def player_hold(self, die_number: int) -> None:
        """
        Hold the die with the given die number (not face value). Does nothing if no die matches.
        """
        die = next((d for d in self._dice if d.get_identifier() == die_number), None)
        if die is not None:
            die.hold()
            self._emit({"type": "DieHeld", "die": die.die_number, "face": die.face_value})

    def auto_hold(self, face_value: int) -> bool:
        """
        Hold a die showing face_value without naming which one.
        Returns:
            bool: True if a die showing face_value is (now) held, False if no die shows it.
        """
        if self._is_holding_die(face_value):
            return True
        die = next((d for d in self._dice if d.get_face_value() == face_value), None)
        if die is None:
            return False
        die.hold()
        self._emit({"type": "DieHeld", "die": die.die_number, "face": die.face_value})
        return True

    def score_current_player(self) -> bool:
        """
        If a ship (6), captain (5) and crew (4) are held, set the current player's score to the cargo:
        the sum of all dice minus 15. Otherwise the score is left as it was.
        Returns:
            bool: True if the player qualified and was scored.
        """
        if not (self._is_holding_die(SHIP) and self._is_holding_die(CAPTAIN) and self._is_holding_die(CREW)):
            return False
        player = self.get_current_player()
        player.set_score(cargo(d.get_face_value() for d in self._dice))
        self._emit({"type": "PlayerScored", "player": player.player_number, "score": player.score})
        return True

    def next_player(self) -> bool:
        """
        If there is a seat after the current player, make it current and return True. Otherwise return False.
        """
        if self.current_index + 1 < len(self._players):
            self.current_index += 1
            return True
        return False

    def start_new_game(self) -> None:
        """
        Start a new round: the first player in the list goes first and all players are reset.
        After rank_by_score the list is sorted by score, so the last round's winner leads.
        Dice are not reset here.
        """
        self.current_index = 0
        self.reset_players()
        self._emit({"type": "RoundStarted", "first_player": self.get_current_player_number()})
        # snapshot initial state of the round (no action)
        self._snapshot(action=None)

    def reset_dice(self) -> None:
        for d in self._dice:
            d.reset()

    def reset_players(self) -> None:
        for p in self._players:
            p.reset_player()

    def tally_round(self) -> None:
        """
        Award a win to every player holding the highest nonzero score, and a loss to everyone else.
        If nobody scored, everyone takes a loss.
        """
        high_score = max(p.get_score() for p in self._players)
        winners = []
        for p in self._players:
            if p.get_score() == high_score and high_score != 0:
                p.add_win()
                winners.append(p.player_number)
            else:
                p.add_loss()
        self._emit({"type": "RoundTallied", "high_score": high_score, "winners": winners})

    def rank_by_score(self) -> List[Player]:
        """
        Sort the players by score, highest first. Ties keep their current relative order.
        This changes the seating order used by next_player and start_new_game.
        Returns:
            list[Player]: The new ordering.
        """
        self._players.sort(key=lambda p: p.get_score(), reverse=True)
        self._emit({"type": "PlayersRanked", "order": [p.player_number for p in self._players]})
        return list(self._players)

    def get_game_results(self) -> str:
        """
        Tally the round, then rank players by score.
        Returns:
            str: Each player's string form, in the new order, joined with ", ".
        """
        self.tally_round()
        ranked = self.rank_by_score()
        return ", ".join(str(p) for p in ranked)

    def get_final_winner(self) -> str:
        """
        Returns the string form of the player with the most wins (first one on ties), or "" with no players.
        """
        if not self._players:
            return ""
        return str(max(self._players, key=lambda p: p.get_wins()))

    def get_view(self) -> Dict:
        """
        Get the current player's view of the game for agent decision-making.
        Returns:
            dict: Player number, roll budget, score and dice as (die_number, face_value, held).
        """
        player = self.get_current_player()
        return {
            "player_number": player.player_number,
            "rolls_used": player.rolls_used,
            "max_rolls": self.max_rolls,
            "score": player.score,
            "can_roll": self.current_player_can_roll(),
            "dice": tuple((d.die_number, d.face_value, d.held) for d in self._dice),
        }

    def apply_action(self, action: Action):
        """
        Apply an action for the current player, then snapshot the resulting state.
        Args:
            action (Action): The action to apply.
        Returns:
            The result of the underlying operation (bool for auto-hold, score and end turn; None otherwise).
        Raises:
            IllegalMoveError: If the player has no rolls left or the action is unknown.
        """
        result = None
        if isinstance(action, RollAction):
            if not self.current_player_can_roll():
                raise IllegalMoveError(f"Player {self.get_current_player_number()} has no rolls remaining")
            self.roll_dice()
            action_ser = {"type": "Roll"}
        elif isinstance(action, HoldAction):
            self.player_hold(action.die_number)
            action_ser = {"type": "Hold", "die_number": action.die_number}
        elif isinstance(action, AutoHoldAction):
            result = self.auto_hold(action.face_value)
            action_ser = {"type": "AutoHold", "face_value": action.face_value}
        elif isinstance(action, ScoreAction):
            result = self.score_current_player()
            action_ser = {"type": "Score"}
        elif isinstance(action, EndTurnAction):
            self._emit({"type": "TurnEnded", "player": self.get_current_player_number(),
                        "score": self.get_current_player_score()})
            self.reset_dice()
            result = self.next_player()
            action_ser = {"type": "EndTurn"}
        else:
            raise IllegalMoveError("Unknown action")

        self._snapshot(action=action_ser)
        return result
