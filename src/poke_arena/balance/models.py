"""Pydantic v2 models for matchup analysis.

These models are the structured output of batch simulations: aggregate
matchup statistics and per-move usage.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class MatchupMetrics(BaseModel):
    """Aggregate statistics for one player-vs-opponent matchup."""

    total_battles: int
    player_wins: int
    opponent_wins: int
    draws: int
    player_win_rate: float
    """player_wins / total_battles."""
    avg_turns: float
    """Average number of moves resolved per battle (both sides)."""
    avg_player_hp_remaining: float
    """Average fraction (0-1) of starting HP the player's combatant kept."""
    avg_opponent_hp_remaining: float
    avg_player_damage: float
    avg_opponent_damage: float


class MoveUsageMetrics(BaseModel):
    """How often one side used a move across a batch."""

    side: str
    move_name: str
    times_used: int
    usage_share: float
    """times_used / all moves used by that side."""
    avg_uses_per_battle: float
