
"""
reward.py
Defines reward calculation for trajectory rows written by the match scripts.
Allows easy modification of reward schemes for different experiments.
"""

def get_reward(event_type, event, player):
    """
    Returns the reward for a given event and player.
    Default scheme:
      - 0 for intermediate steps
      - +1 for each round winner at RoundTallied, -1 for everyone else
      - -1 for error events
    Args:
        event_type (str): Type of event (e.g., 'DiceRolled', 'RoundTallied', 'Error').
        event (dict): The event payload.
        player (int|None): Player number the reward is for.
    Returns:
        int: Reward value.
    """
    if event_type == "Error":
        return -1
    if event_type == "RoundTallied" and player is not None:
        return 1 if player in event.get("winners", ()) else -1
    return 0
