"""
serializer.py
Provides utility functions for serializing game turn logs and round summaries to/from JSON.
Used by the CLI and the tournament script to save turn logs for replay or analysis.
"""

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Serialize a Python object (including plain classes such as Player or Die) to a JSON string.
    Args:
        obj: Object to serialize.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=lambda o: getattr(o, '__dict__', str(o)))


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)


def save_turn_log(turn_log, path: str) -> None:
    """
    Write a DiceGame.turn_log to a JSON file.
    Args:
        turn_log (list[dict]): Snapshots recorded by the engine.
        path (str): Output file path.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(turn_log))


def load_turn_log(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return loads(f.read())
