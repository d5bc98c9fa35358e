"""Compare RandomPolicy vs GreedyPolicy on the quick-start matchup.

Runs a batch for every player/opponent policy pairing, prints a text
report per pairing and saves a chart.

Usage:
    uv run python scripts/compare_policies.py [--runs N] [--parallel]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from poke_arena.balance import compute_matchup_metrics, compute_move_usage, generate_text_report
from poke_arena.sim.play_agents import GreedyPolicy, RandomPolicy
from poke_arena.sim.runner import BatchRunner
from poke_arena.sim.teams import default_opponent_team, quick_start_team

_PAIRINGS = [
    ("Random vs Random", RandomPolicy, RandomPolicy),
    ("Greedy vs Random", GreedyPolicy, RandomPolicy),
    ("Random vs Greedy", RandomPolicy, GreedyPolicy),
    ("Greedy vs Greedy", GreedyPolicy, GreedyPolicy),
]


def run_comparison(n_runs: int = 500, parallel: bool = False) -> None:
    results = {}
    for label, player_cls, opponent_cls in _PAIRINGS:
        print(f"\nRunning {n_runs} battles: {label}...")
        runner = BatchRunner(
            quick_start_team(), default_opponent_team(),
            player_policy_class=player_cls, opponent_policy_class=opponent_cls,
        )
        t0 = time.time()
        telemetry = runner.run_batch(n_runs=n_runs, base_seed=0, parallel=parallel)
        elapsed = time.time() - t0

        metrics = compute_matchup_metrics(telemetry)
        usage = compute_move_usage(telemetry, "player") + compute_move_usage(telemetry, "opponent")
        print(generate_text_report(metrics, usage, title=label))
        print(f"  Time: {elapsed:.1f}s ({elapsed / n_runs * 1000:.1f}ms/battle)")

        results[label] = {
            "win_rate": metrics.player_win_rate * 100,
            "turns": [t.turns for t in telemetry],
        }

    generate_charts(results, n_runs)


def generate_charts(results: dict, n_runs: int) -> None:
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle(f"Policy Comparison: {n_runs} battles per pairing", fontsize=16, fontweight="bold")
    labels = list(results.keys())

    # --- Chart 1: Player win rate ---
    ax = axes[0]
    win_rates = [results[l]["win_rate"] for l in labels]
    bars = ax.bar(labels, win_rates, color="#3498db", edgecolor="black", linewidth=0.5)
    for bar, rate in zip(bars, win_rates):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.5,
                f"{rate:.1f}%", ha="center", va="bottom", fontsize=11, fontweight="bold")
    ax.set_ylabel("Player Win Rate (%)")
    ax.set_ylim(0, 110)

    # --- Chart 2: Battle length ---
    ax = axes[1]
    max_turns = max(max(results[l]["turns"]) for l in labels)
    bins = np.arange(0.5, max_turns + 1.5, 1)
    for label in labels:
        turns = results[label]["turns"]
        ax.hist(turns, bins=bins, alpha=0.5, label=f"{label} (avg={np.mean(turns):.1f})",
                edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Moves Resolved")
    ax.set_ylabel("Count")
    ax.set_title("Battle Length Distribution")
    ax.legend()

    plt.tight_layout()
    out_path = "policy_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=500, help="Number of battles per pairing")
    parser.add_argument("--parallel", action="store_true", help="Use a process pool")
    args = parser.parse_args()
    run_comparison(args.runs, args.parallel)
