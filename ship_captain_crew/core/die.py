
"""
die.py
Defines the Die class: a single die with a hold flag, a stable die number, and an injectable random source.
Related modules:
- engine.py: DiceGame creates, rolls, holds and resets dice.
"""

import random
from typing import Optional


class Die:
    """
    A single die. Rolling draws a new face from the injected RNG unless the die is held.
    Args:
        sides (int): Number of faces (default 6).
        die_number (int): Stable identifier used by players to hold this die.
        rng (random.Random|None): RNG instance; a fresh unseeded one is used if None.
    Raises:
        ValueError: If sides is less than 1.
    """
    def __init__(self, sides: int = 6, die_number: int = 1, rng: Optional[random.Random] = None):
        if sides < 1:
            raise ValueError("a die needs at least one side")
        self.sides = sides
        self._die_number = die_number
        self.rng = rng or random.Random()
        self.face_value = 1
        self.held = False

    @property
    def die_number(self) -> int:
        return self._die_number

    def roll(self) -> int:
        """
        Roll the die using the provided random number generator. Held dice keep their face.
        Returns:
            int: The face value after the roll.
        """
        if not self.held:
            self.face_value = self.rng.randint(1, self.sides)
        return self.face_value

    def hold(self) -> None:
        self.held = True

    def reset(self) -> None:
        """Release the die and put it back on its default face."""
        self.held = False
        self.face_value = 1

    def get_face_value(self) -> int:
        return self.face_value

    def get_identifier(self) -> int:
        return self._die_number

    def is_held(self) -> bool:
        return self.held

    def __str__(self) -> str:
        return f"{self._die_number}:{self.face_value}"

    def __repr__(self) -> str:
        return f"Die({self._die_number}, face={self.face_value}, held={self.held})"
