"""Pure metric computation functions for matchup analysis.

All functions take a list of BattleTelemetry and return structured metrics.
No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from poke_arena.balance.models import MatchupMetrics, MoveUsageMetrics

if TYPE_CHECKING:
    from poke_arena.sim.telemetry import BattleTelemetry


def _hp_fraction(end: int, start: int) -> float:
    return end / start if start > 0 else 0.0


def compute_matchup_metrics(results: list[BattleTelemetry]) -> MatchupMetrics:
    """Compute aggregate statistics for a batch of battles."""
    total = len(results)
    if total == 0:
        return MatchupMetrics(
            total_battles=0, player_wins=0, opponent_wins=0, draws=0,
            player_win_rate=0.0, avg_turns=0.0,
            avg_player_hp_remaining=0.0, avg_opponent_hp_remaining=0.0,
            avg_player_damage=0.0, avg_opponent_damage=0.0,
        )

    outcomes = Counter(r.winner for r in results)

    return MatchupMetrics(
        total_battles=total,
        player_wins=outcomes["player"],
        opponent_wins=outcomes["opponent"],
        draws=outcomes["draw"],
        player_win_rate=outcomes["player"] / total,
        avg_turns=sum(r.turns for r in results) / total,
        avg_player_hp_remaining=sum(
            _hp_fraction(r.player_hp_end, r.player_hp_start) for r in results
        ) / total,
        avg_opponent_hp_remaining=sum(
            _hp_fraction(r.opponent_hp_end, r.opponent_hp_start) for r in results
        ) / total,
        avg_player_damage=sum(r.damage_dealt["player"] for r in results) / total,
        avg_opponent_damage=sum(r.damage_dealt["opponent"] for r in results) / total,
    )


def compute_move_usage(
    results: list[BattleTelemetry],
    side: str,
) -> list[MoveUsageMetrics]:
    """Per-move usage for *side*, most used first.

    Struggle is reported as its own entry when it occurred.
    """
    counts: Counter[str] = Counter()
    for r in results:
        counts.update(r.moves_used[side])
        if r.struggles[side]:
            counts["Struggle"] += r.struggles[side]

    total_used = sum(counts.values())
    n_battles = len(results)
    if total_used == 0:
        return []

    return [
        MoveUsageMetrics(
            side=side,
            move_name=name,
            times_used=used,
            usage_share=used / total_used,
            avg_uses_per_battle=used / n_battles,
        )
        for name, used in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
