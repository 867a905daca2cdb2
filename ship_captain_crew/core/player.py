
"""
player.py
Defines the Player class, which keeps one seat's score, rolls used this turn, and win/loss tally across rounds.
Related modules:
- engine.py: DiceGame owns the players and updates them during play.
"""


class Player:
    """
    Score and roll bookkeeping for a single player.
    Fields:
        player_number (int): 1-based seat number, fixed at creation.
        score (int): Score for the current round (overwritten by each scoring).
        rolls_used (int): Rolls taken this turn.
        wins (int): Rounds won so far.
        losses (int): Rounds lost so far.
    """
    def __init__(self, player_number: int):
        self._player_number = player_number
        self.score = 0
        self.rolls_used = 0
        self.wins = 0
        self.losses = 0

    @property
    def player_number(self) -> int:
        return self._player_number

    def roll(self) -> None:
        """Log one roll for this player."""
        self.rolls_used += 1

    def get_rolls_used(self) -> int:
        return self.rolls_used

    def get_player_number(self) -> int:
        return self._player_number

    def get_score(self) -> int:
        return self.score

    def set_score(self, value: int) -> None:
        self.score = value

    def add_win(self) -> None:
        self.wins += 1

    def add_loss(self) -> None:
        self.losses += 1

    def get_wins(self) -> int:
        return self.wins

    def get_losses(self) -> int:
        return self.losses

    def reset_player(self) -> None:
        """
        Clear score and roll count for a new round. Wins and losses are kept.
        """
        self.score = 0
        self.rolls_used = 0

    def __str__(self) -> str:
        return f"Player {self._player_number}: score={self.score}, wins={self.wins}, losses={self.losses}"

    def __repr__(self) -> str:
        return f"Player({self._player_number}, score={self.score}, rolls_used={self.rolls_used})"
