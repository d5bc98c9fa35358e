"""Text report generation for matchup analysis."""

from __future__ import annotations

from poke_arena.balance.models import MatchupMetrics, MoveUsageMetrics


def generate_text_report(
    metrics: MatchupMetrics,
    usage: list[MoveUsageMetrics] | None = None,
    title: str = "Matchup Report",
) -> str:
    """Generate a human-readable summary of a batch of battles."""
    m = metrics
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(title)
    lines.append(f"Battles: {m.total_battles:,}")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Outcomes")
    lines.append(f"  Player win rate:   {m.player_win_rate:.1%} ({m.player_wins}/{m.total_battles})")
    lines.append(f"  Opponent wins:     {m.opponent_wins}")
    lines.append(f"  Draws:             {m.draws}")
    lines.append(f"  Avg moves/battle:  {m.avg_turns:.1f}")

    lines.append("")
    lines.append("## Attrition")
    lines.append(f"  Player HP kept:    {m.avg_player_hp_remaining:.1%}")
    lines.append(f"  Opponent HP kept:  {m.avg_opponent_hp_remaining:.1%}")
    lines.append(f"  Player damage:     {m.avg_player_damage:.1f}")
    lines.append(f"  Opponent damage:   {m.avg_opponent_damage:.1f}")

    if usage:
        lines.append("")
        lines.append("## Move Usage")
        for u in usage:
            lines.append(
                f"  [{u.side:8s}] {u.move_name:20s}  used={u.times_used:5d}"
                f"  share={u.usage_share:.2f}  per_battle={u.avg_uses_per_battle:.2f}"
            )

    return "\n".join(lines)
