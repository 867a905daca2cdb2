
"""
config.py
Defines the GameConfig dataclass, which centralizes all rule options and numeric constraints for a Ship, Captain, and Crew game.
Related modules:
- engine.py: DiceGame.from_config builds a game from a GameConfig.
- match.py: Uses max_turn_steps to cap agent turns.
"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options and numeric constraints for a Ship, Captain, and Crew game.
    Fields:
        num_players (int): Number of players (at least 2).
        num_dice (int): Number of dice shared by all players.
        max_rolls (int): Rolls allowed per player per turn.
        sides (int): Sides on every die.
        rng_seed (int|None): Seed for deterministic games.
        stop_when_all_held (bool): If True, a player may not roll once every die is held.
        max_turn_steps (int): Max actions an agent may take in one turn.
    """
    num_players: int = 2
    num_dice: int = 5
    max_rolls: int = 3
    sides: int = 6
    rng_seed: Optional[int] = None
    # off by default: the roll budget alone decides whether a player may roll
    stop_when_all_held: bool = False
    max_turn_steps: int = 64
