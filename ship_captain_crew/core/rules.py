
"""
rules.py
Scoring helpers for Ship, Captain, and Crew: detecting the held 6-5-4 combination and computing cargo.
Related modules:
- engine.py: DiceGame.score_current_player uses these helpers.
- agents: Agents use them to reason about their view of the dice.
"""

from typing import Iterable, Tuple

SHIP = 6
CAPTAIN = 5
CREW = 4
# ship + captain + crew, subtracted from the dice total to get the cargo
CREW_TOTAL = SHIP + CAPTAIN + CREW


def held_faces(dice: Iterable[Tuple[int, bool]]) -> list:
    """
    Faces of the held dice.
    Args:
        dice (iterable): (face_value, held) pairs.
    Returns:
        list[int]: Face values of held dice, in order.
    """
    return [face for face, held in dice if held]


def has_ship_captain_crew(dice: Iterable[Tuple[int, bool]]) -> bool:
    """
    Check whether a 6, a 5 and a 4 are each held. Since the faces differ, three distinct dice are needed.
    Args:
        dice (iterable): (face_value, held) pairs.
    Returns:
        bool: True if ship, captain and crew are all held.
    """
    faces = set(held_faces(dice))
    return SHIP in faces and CAPTAIN in faces and CREW in faces


def cargo(faces: Iterable[int]) -> int:
    """
    Sum of all faces minus the ship, captain and crew.
    Args:
        faces (iterable): Face values of every die, held or not.
    Returns:
        int: Cargo points.
    """
    return sum(faces) - CREW_TOTAL
