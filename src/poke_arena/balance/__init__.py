"""Balance analysis: matchup metrics and reports from batch simulations."""

from poke_arena.balance.metrics import compute_matchup_metrics, compute_move_usage
from poke_arena.balance.models import MatchupMetrics, MoveUsageMetrics
from poke_arena.balance.report import generate_text_report

__all__ = [
    "MatchupMetrics",
    "MoveUsageMetrics",
    "compute_matchup_metrics",
    "compute_move_usage",
    "generate_text_report",
]
