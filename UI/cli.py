import sys
from typing import List, Optional

from ship_captain_crew.core.config import GameConfig
from ship_captain_crew.core.engine import DiceGame, InvalidConfiguration
from ship_captain_crew.core.actions import RollAction, HoldAction, AutoHoldAction, ScoreAction, EndTurnAction, Action
from ship_captain_crew.core.match import run_round
from ship_captain_crew.core.reward import get_reward
from ship_captain_crew.agents.base import Agent
from ship_captain_crew.agents import AGENT_MAP
from ship_captain_crew.persistence import csv_io, serializer

import os
import datetime
import hashlib


def print_state(view):
    """
    Print the current player's dice and roll budget to the terminal.
    Args:
        view (dict): View from DiceGame.get_view().
    """
    print(f"\n=== PLAYER {view['player_number']} ===")
    dice = ", ".join(f"{n}:{f}{'*' if h else ''}" for n, f, h in view["dice"])
    print(f"Dice (number:face, * = held): {dice}")
    print(f"Rolls used: {view['rolls_used']}/{view['max_rolls']}")
    print(f"Score: {view['score']}")


def prompt_action(view) -> Optional[Action]:
    """
    Prompt the human player for an action.
    Args:
        view (dict): View from DiceGame.get_view().
    Returns:
        Action or None: The chosen action, or None if input is invalid.
    """
    print("\nChoose action:")
    print("  1) Roll")
    print("  2) Hold a die (by die number)")
    print("  3) Hold a face value")
    print("  4) Score")
    print("  5) End turn")
    choice = input("Enter choice (1-5): ").strip()
    if choice == "1":
        if not view["can_roll"]:
            print("No rolls remaining.")
            return None
        return RollAction()
    if choice in ("2", "3"):
        prompt = "Enter die number: " if choice == "2" else "Enter face (1-6): "
        try:
            value = int(input(prompt).strip())
        except ValueError:
            print("Please enter a valid integer.")
            return None
        return HoldAction(value) if choice == "2" else AutoHoldAction(value)
    if choice == "4":
        return ScoreAction()
    if choice == "5":
        return EndTurnAction()
    print("Choice not recognized.")
    return None


class HumanAgent(Agent):
    """
    Agent backed by terminal input, so human seats can go through the same round loop as bots.
    """
    def choose_action(self, view):
        print_state(view)
        action = None
        while action is None:
            action = prompt_action(view)
        return action


def choose_agent(name: str) -> Agent:
    """
    Return an Agent instance by name.
    Args:
        name (str): Name of the agent (e.g., 'greedy').
    Returns:
        Agent: The corresponding agent instance.
    Raises:
        ValueError: If the agent name is unknown.
    """
    name = name.lower()
    if name == "human":
        return HumanAgent()
    if name in AGENT_MAP:
        return AGENT_MAP[name]()
    raise ValueError(f"Unknown agent: {name}")


def show_rules(config: GameConfig):
    """
    Print the current game rules and configuration to the terminal.
    Args:
        config (GameConfig): The game configuration.
    """
    print("\n=== GAME RULES ===")
    print(f"Players: {config.num_players}")
    print(f"Dice: {config.num_dice} x d{config.sides}")
    print(f"Rolls per turn: {config.max_rolls}")
    print("Hold a 6 (ship), a 5 (captain) and a 4 (crew), then score the rest (the cargo).")
    print("The highest cargo wins the round; if nobody scores, nobody wins.")


def play(agent_names: List[str], rounds: int = 3, config: Optional[GameConfig] = None):
    """
    Play a match in the terminal. Seat 1 is the human; the remaining seats are agents.
    Args:
        agent_names (list[str]): Agent names for seats 2..N.
        rounds (int): Rounds to play.
        config (GameConfig, optional): Game configuration. If None, uses default config.
    """
    seats = ["human"] + list(agent_names)
    if config is None:
        config = GameConfig(num_players=len(seats))
    game = DiceGame.from_config(config)
    agents = [choose_agent(n) for n in seats]

    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    raw_id = f"cli_{timestamp}_{os.getpid()}_{'_'.join(seats)}"
    game_id = hashlib.sha256(raw_id.encode()).hexdigest()[:16]
    data_dir = "data"
    os.makedirs(data_dir, exist_ok=True)

    summary_rows = []
    trajectory_rows = []
    for round_index in range(1, rounds + 1):
        print(f"\n##### ROUND {round_index} #####")
        summary = run_round(game, agents, config.max_turn_steps)
        print("\n--- ROUND ENDED ---")
        for number, score in summary["scores"].items():
            print(f"Player {number} ({seats[number - 1]}): {score}")
        print(f"Results: {summary['results']}")
        for ev in summary["events"]:
            player = ev.get("player")
            trajectory_rows.append({
                "game_id": game_id,
                "round": round_index,
                "event_type": ev["type"],
                "player": player,
                "player_type": seats[player - 1] if player else None,
                "payload": str(ev),
                "timestamp": timestamp,
                "reward": get_reward(ev["type"], ev, player),
            })
        summary_rows.append({
            "game_id": game_id,
            "round": round_index,
            "timestamp": timestamp,
            "agents": ",".join(seats),
            "scores": str(summary["scores"]),
            "high_score": summary["high_score"],
            "winners": str(summary["winners"]),
            "results": summary["results"],
            "errors": str(summary["errors"]) if summary["errors"] else None,
        })

    print(f"\nFinal winner: {game.get_final_winner()}")

    trajectory_csv = os.path.join(data_dir, "game_trajectory.csv")
    csv_io.append_rows_to_csv(trajectory_rows, trajectory_csv, csv_io.get_trajectory_header())
    summary_csv = os.path.join(data_dir, "game_summary.csv")
    csv_io.append_rows_to_csv(summary_rows, summary_csv, csv_io.get_summary_header())
    log_path = os.path.join(data_dir, f"turn_log_{game_id}.json")
    serializer.save_turn_log(game.turn_log, log_path)
    print(f"[Game summary saved to {summary_csv}, turn log to {log_path}]")


if __name__ == "__main__":
    # Simple launcher: opponents come from argv, e.g. `python UI/cli.py greedy random`
    opponents = sys.argv[1:] or ["greedy"]
    cfg = GameConfig(num_players=len(opponents) + 1)
    print("Welcome to Ship, Captain, and Crew (CLI)")
    while True:
        print("\nMenu:\n  1) Show rules\n  2) Play\n  3) Quit")
        sel = input("Choose: ").strip()
        if sel == "1":
            show_rules(cfg)
            continue
        if sel == "2":
            try:
                play(opponents, config=cfg)
            except (InvalidConfiguration, ValueError) as e:
                print(f"Cannot start game: {e}")
            except KeyboardInterrupt:
                print("\nExiting play loop.")
            break
        if sel == "3":
            print("Goodbye")
            break
        print("Unknown choice")
