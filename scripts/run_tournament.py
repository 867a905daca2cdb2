"""
Run a round-robin tournament between agents and save results + a win% chart.
Each game is a match of several rounds between two agents; the seat with more round wins takes the game.
Usage: python scripts/run_tournament.py --agents all --games 10 --rounds 5 --data-dir data
"""
import os
import argparse
import datetime
import itertools
import csv
from collections import defaultdict
from typing import List, Any, Dict, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from ship_captain_crew.persistence import csv_io
from ship_captain_crew.agents import AGENT_MAP
from ship_captain_crew.core.config import GameConfig
from ship_captain_crew.core.engine import DiceGame
from ship_captain_crew.core.match import run_round
from ship_captain_crew.core.reward import get_reward

import hashlib


def generate_game_id(agent0_cls, agent1_cls, timestamp: str) -> str:
    raw = f"{timestamp}_{agent0_cls.__name__}_{agent1_cls.__name__}"
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def run_game(agent0_cls, agent1_cls, cfg: GameConfig, rounds: int, game_id: str, timestamp: str) -> Tuple[Dict[str, Any], List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Play one match and return (game result, round summary rows, trajectory rows).
    The result's 'winner' is 1 or 2 (player number) or None on a draw.
    """
    game = DiceGame.from_config(cfg)
    agents = [agent0_cls(), agent1_cls()]
    names = [agent0_cls.__name__, agent1_cls.__name__]

    summary_rows = []
    trajectory_rows = []
    errors = 0
    for round_index in range(1, rounds + 1):
        summary = run_round(game, agents, cfg.max_turn_steps)
        errors += len(summary['errors'])
        for ev in summary['events']:
            t = ev.get('type')
            if t == 'RoundTallied':
                # one reward row per seat
                for number in (1, 2):
                    trajectory_rows.append({
                        'game_id': game_id,
                        'round': round_index,
                        'event_type': t,
                        'player': number,
                        'player_type': names[number - 1],
                        'payload': str(ev),
                        'timestamp': timestamp,
                        'reward': get_reward(t, ev, number),
                    })
                continue
            player = ev.get('player')
            trajectory_rows.append({
                'game_id': game_id,
                'round': round_index,
                'event_type': t,
                'player': player,
                'player_type': names[player - 1] if player else None,
                'payload': str(ev),
                'timestamp': timestamp,
                'reward': get_reward(t, ev, player),
            })
        for err in summary['errors']:
            trajectory_rows.append({
                'game_id': game_id,
                'round': round_index,
                'event_type': 'Error',
                'player': err['player'],
                'player_type': names[err['player'] - 1],
                'payload': err['error'],
                'timestamp': timestamp,
                'reward': get_reward('Error', err, err['player']),
            })
        summary_rows.append({
            'game_id': game_id,
            'round': round_index,
            'timestamp': timestamp,
            'agents': ','.join(names),
            'scores': str(summary['scores']),
            'high_score': summary['high_score'],
            'winners': str(summary['winners']),
            'results': summary['results'],
            'errors': str(summary['errors']) if summary['errors'] else None,
        })

    wins = {p.player_number: p.wins for p in game.players}
    if wins[1] == wins[2]:
        winner = None
    else:
        winner = 1 if wins[1] > wins[2] else 2
    result = {'winner': winner, 'wins': wins, 'errors': errors}
    return result, summary_rows, trajectory_rows


def write_rows_to_csv(rows: List[dict], path: str, header: List[str]):
    write_header = not os.path.exists(path)
    with open(path, 'a', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for r in rows:
            writer.writerow(r)


def aggregate_and_plot(agent_stats: Dict[str, dict], out_path: str):
    agents = sorted(agent_stats.keys())
    wins = [agent_stats[a].get('wins', 0) for a in agents]
    games = [agent_stats[a].get('games', 0) for a in agents]
    win_perc = [(w / g * 100.0) if g > 0 else 0.0 for w, g in zip(wins, games)]

    width = max(6, int(len(agents) * 0.6))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(agents, win_perc, color='C0')
    plt.ylabel('Win percentage (%)')
    plt.ylim(0, 100)
    plt.title('Tournament: win% per agent')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 1.0, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def run_tournament(agent_keys: List[str], games_per_pair: int, rounds: int, data_dir: str, seed=None):
    os.makedirs(data_dir, exist_ok=True)
    summary_csv = os.path.join(data_dir, 'game_summary.csv')
    trajectory_csv = os.path.join(data_dir, 'game_trajectory.csv')
    tournament_csv = os.path.join(data_dir, 'tournament_summary.csv')
    agent_csv = os.path.join(data_dir, 'agent_stats.csv')
    chart_png = os.path.join(data_dir, 'win_percentages.png')

    agent_stats = defaultdict(lambda: defaultdict(int))
    tournament_rows = []

    summary_header = csv_io.get_summary_header()
    trajectory_header = csv_io.get_trajectory_header()

    pairs = list(itertools.product(agent_keys, agent_keys))
    total_games = len(pairs) * games_per_pair
    game_counter = 0
    timestamp_base = datetime.datetime.now(datetime.timezone.utc).isoformat()

    for (a0_key, a1_key) in pairs:
        a0_cls = AGENT_MAP[a0_key]
        a1_cls = AGENT_MAP[a1_key]
        pair_wins = {'a0': 0, 'a1': 0}
        pair_draws = 0
        pair_errors = 0

        for i in range(games_per_pair):
            game_counter += 1
            ts = datetime.datetime.now(datetime.timezone.utc).isoformat()
            game_id = generate_game_id(a0_cls, a1_cls, f"{ts}_{i}")
            cfg = GameConfig(rng_seed=None if seed is None else seed + game_counter)
            print(f"Running {game_counter}/{total_games}: {a0_key} (1) vs {a1_key} (2) game {i+1}/{games_per_pair}...", end=' ')
            result, summary_rows, trajectory_rows = run_game(a0_cls, a1_cls, cfg, rounds, game_id, ts)
            # persist
            csv_io.append_rows_to_csv(summary_rows, summary_csv, summary_header)
            if trajectory_rows:
                csv_io.append_rows_to_csv(trajectory_rows, trajectory_csv, trajectory_header)

            winner = result['winner']
            if winner == 1:
                pair_wins['a0'] += 1
                agent_stats[a0_key]['wins'] += 1
                agent_stats[a0_key]['wins_as_first'] += 1
            elif winner == 2:
                pair_wins['a1'] += 1
                agent_stats[a1_key]['wins'] += 1
                agent_stats[a1_key]['wins_as_second'] += 1
            else:
                pair_draws += 1
            agent_stats[a0_key]['games'] += 1
            agent_stats[a1_key]['games'] += 1
            pair_errors += result['errors']

            print('done')

        games_played = games_per_pair
        row = {
            'timestamp': timestamp_base,
            'agent0': a0_key,
            'agent1': a1_key,
            'games': games_played,
            'rounds_per_game': rounds,
            'wins_agent0': pair_wins['a0'],
            'wins_agent1': pair_wins['a1'],
            'draws': pair_draws,
            'first_seat_win_ratio': (pair_wins['a0'] / games_played) if games_played > 0 else 0.0,
            'errors': pair_errors,
        }
        tournament_rows.append(row)

    # write tournament summary
    tour_header = ['timestamp', 'agent0', 'agent1', 'games', 'rounds_per_game', 'wins_agent0', 'wins_agent1', 'draws', 'first_seat_win_ratio', 'errors']
    write_rows_to_csv(tournament_rows, tournament_csv, tour_header)

    # agent aggregates
    agent_rows = []
    agent_header = ['agent', 'games', 'wins', 'win_percent', 'wins_as_first', 'wins_as_second']
    for agent in sorted(agent_keys):
        g = agent_stats[agent].get('games', 0)
        w = agent_stats[agent].get('wins', 0)
        win_percent = (w / g * 100.0) if g > 0 else 0.0
        agent_rows.append({
            'agent': agent,
            'games': g,
            'wins': w,
            'win_percent': f"{win_percent:.3f}",
            'wins_as_first': agent_stats[agent].get('wins_as_first', 0),
            'wins_as_second': agent_stats[agent].get('wins_as_second', 0),
        })
    write_rows_to_csv(agent_rows, agent_csv, agent_header)

    # plot
    aggregate_and_plot(agent_stats, chart_png)

    print(f"Tournament finished. Round summaries saved to {summary_csv}, trajectories to {trajectory_csv}")
    print(f"Tournament summary: {tournament_csv}")
    print(f"Per-agent stats: {agent_csv}")
    print(f"Win percentage chart: {chart_png}")


def parse_agent_list(s: str) -> List[str]:
    if s.strip().lower() == 'all':
        return sorted(list(AGENT_MAP.keys()))
    return [x.strip() for x in s.split(',') if x.strip()]


def main():
    parser = argparse.ArgumentParser(description='Run a round-robin 1v1 tournament between agents')
    parser.add_argument('--agents', type=str, default='all', help='Comma-separated list of agent keys from AGENT_MAP or "all"')
    parser.add_argument('--games', type=int, default=10, help='Number of games per ordered pairing')
    parser.add_argument('--rounds', type=int, default=5, help='Rounds per game')
    parser.add_argument('--seed', type=int, default=None, help='Base RNG seed for reproducible tournaments')
    parser.add_argument('--data-dir', type=str, default='data', help='Directory to save csv and charts')
    args = parser.parse_args()

    agent_keys = parse_agent_list(args.agents)
    unknown = [a for a in agent_keys if a not in AGENT_MAP]
    if unknown:
        raise SystemExit(f"Unknown agents: {unknown}. Supported: {list(AGENT_MAP.keys())}")

    run_tournament(agent_keys, args.games, args.rounds, args.data_dir, args.seed)


if __name__ == '__main__':
    main()
