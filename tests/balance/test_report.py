"""Tests for report generation."""

from __future__ import annotations

from poke_arena.balance.models import MatchupMetrics, MoveUsageMetrics
from poke_arena.balance.report import generate_text_report


def _make_metrics() -> MatchupMetrics:
    return MatchupMetrics(
        total_battles=1000,
        player_wins=620,
        opponent_wins=370,
        draws=10,
        player_win_rate=0.62,
        avg_turns=7.4,
        avg_player_hp_remaining=0.31,
        avg_opponent_hp_remaining=0.12,
        avg_player_damage=142.5,
        avg_opponent_damage=88.0,
    )


class TestGenerateTextReport:
    def test_headline_numbers(self):
        report = generate_text_report(_make_metrics())
        assert "Matchup Report" in report
        assert "Battles: 1,000" in report
        assert "62.0% (620/1000)" in report
        assert "Avg moves/battle:  7.4" in report
        assert "## Move Usage" not in report

    def test_custom_title(self):
        assert "Greedy vs Random" in generate_text_report(_make_metrics(), title="Greedy vs Random")

    def test_move_usage_section(self):
        usage = [
            MoveUsageMetrics(
                side="player", move_name="Thunderbolt", times_used=3000,
                usage_share=0.5, avg_uses_per_battle=3.0,
            ),
        ]
        report = generate_text_report(_make_metrics(), usage)
        assert "## Move Usage" in report
        assert "Thunderbolt" in report
        assert "share=0.50" in report
