
"""
match.py
Drives a DiceGame with agents: one turn per seat, rounds of turns, and matches of rounds.
Related modules:
- engine.py: The DiceGame being driven.
- agents: Agents choose the actions applied each step.
- scripts/run_tournament.py, UI/cli.py: Use these loops to play games.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .actions import EndTurnAction
from .engine import DiceGame, IllegalMoveError


def run_turn(game: DiceGame, agent, max_steps: int = 64) -> Tuple[bool, Optional[str]]:
    """
    Let an agent play the current player's turn, then end the turn.
    The turn also ends when the agent makes an illegal move or uses max_steps actions.
    Args:
        game (DiceGame): Game to drive.
        agent (Agent): Agent playing the current seat.
        max_steps (int): Cap on actions for this turn.
    Returns:
        tuple: (True if another seat follows, error message or None).
    """
    error = None
    steps = 0
    while steps < max_steps:
        action = agent.choose_action(game.get_view())
        if isinstance(action, EndTurnAction):
            break
        try:
            game.apply_action(action)
        except IllegalMoveError as e:
            # illegal move ends the turn and is recorded
            error = str(e)
            break
        steps += 1
    return game.apply_action(EndTurnAction()), error


def run_round(game: DiceGame, agents: Sequence[Any], max_steps: int = 64) -> Dict[str, Any]:
    """
    Play one round: every seat takes a turn in order, then the round is tallied and ranked.
    Args:
        game (DiceGame): Game to drive.
        agents (sequence): agents[n - 1] plays player number n.
        max_steps (int): Cap on actions per turn.
    Returns:
        dict: Round summary with scores, winners, results string, errors and the events emitted.
    """
    game.start_new_game()
    game.reset_dice()
    scores: Dict[int, int] = {}
    errors: List[Dict[str, Any]] = []
    while True:
        player = game.get_current_player()
        agent = agents[player.player_number - 1]
        has_next, error = run_turn(game, agent, max_steps)
        scores[player.player_number] = player.score
        if error is not None:
            errors.append({"player": player.player_number, "error": error})
        if not has_next:
            break

    results = game.get_game_results()
    high_score = max(scores.values())
    winners = [n for n, s in scores.items() if s == high_score and high_score != 0]
    return {
        "scores": scores,
        "high_score": high_score,
        "winners": winners,
        "results": results,
        "errors": errors,
        "events": game.pop_events(),
    }


def run_match(game: DiceGame, agents: Sequence[Any], rounds: int, max_steps: int = 64) -> Dict[str, Any]:
    """
    Play several rounds on the same game; wins and losses carry over between rounds.
    Returns:
        dict: Per-round summaries and the final winner's string form.
    """
    summaries = [run_round(game, agents, max_steps) for _ in range(rounds)]
    return {"rounds": summaries, "final_winner": game.get_final_winner()}
