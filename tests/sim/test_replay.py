"""Tests for timed playback of turn outcomes."""

from __future__ import annotations

import pytest

from poke_arena.sim.core.rng import BattleRNG
from poke_arena.sim.engine import BattleEngine
from poke_arena.sim.replay import BattlePlayback, RevealTiming, iter_frames


class _MaxRollRNG(BattleRNG):
    def __init__(self) -> None:
        super().__init__(0)

    def random_uniform(self, low: float, high: float) -> float:
        return high

    def random_index(self, length: int) -> int:
        return 0

    def fork(self, name: str) -> BattleRNG:
        return self


def _exchange(player_team, opponent_team):
    """A full, non-terminal exchange: four events."""
    engine = BattleEngine(rng=_MaxRollRNG())
    session = engine.start_battle(player_team, opponent_team)
    return engine.select_move(session, 0)


def _knockout(player_team, opponent_team):
    """A player move that knocks the opponent out: three events."""
    opponent_team[0].current_hp = 1
    engine = BattleEngine(rng=_MaxRollRNG())
    session = engine.start_battle(player_team, opponent_team)
    return engine.select_move(session, 0)


class TestIterFrames:
    def test_delays_for_an_exchange(self, player_team, opponent_team):
        outcome = _exchange(player_team, opponent_team)
        delays = [delay for delay, _ in iter_frames(outcome)]
        # move pause, damage pause plus opponent pause, move pause
        assert delays == pytest.approx([0.0, 1.0, 1.8, 1.0])

    def test_custom_timing(self, player_team, opponent_team):
        outcome = _exchange(player_team, opponent_team)
        timing = RevealTiming(move_delay=0.0, damage_delay=0.0, opponent_delay=0.0)
        assert all(delay == 0.0 for delay, _ in iter_frames(outcome, timing))

    def test_events_in_log_order(self, player_team, opponent_team):
        outcome = _exchange(player_team, opponent_team)
        assert [event.message for _, event in iter_frames(outcome)] == outcome.log_lines


class TestBattlePlayback:
    def test_plays_every_event(self, player_team, opponent_team):
        sleeps: list[float] = []
        seen: list[str] = []
        playback = BattlePlayback(sleep=sleeps.append)

        delivered = playback.play(_exchange(player_team, opponent_team), lambda e: seen.append(e.message))

        assert delivered == 4
        assert seen[0] == "pikachu used Thunderbolt!"
        assert sleeps == pytest.approx([1.0, 1.8, 1.0])

    def test_terminal_outcome_pauses_for_result(self, player_team, opponent_team):
        sleeps: list[float] = []
        playback = BattlePlayback(sleep=sleeps.append)

        delivered = playback.play(_knockout(player_team, opponent_team), lambda e: None)

        assert delivered == 3
        assert sleeps == pytest.approx([1.0, 0.8, 2.0])

    def test_cancel_stops_reveal(self, player_team, opponent_team):
        sleeps: list[float] = []
        playback = BattlePlayback(sleep=sleeps.append)

        delivered = playback.play(
            _knockout(player_team, opponent_team), lambda e: playback.cancel(),
        )

        assert delivered == 1
        assert playback.cancelled
        assert sleeps == []

    def test_cancel_does_not_touch_battle_state(self, player_team, opponent_team):
        engine = BattleEngine(rng=_MaxRollRNG())
        session = engine.start_battle(player_team, opponent_team)
        outcome = engine.select_move(session, 0)
        log_before = session.battle_log

        playback = BattlePlayback(sleep=lambda _: None)
        playback.cancel()
        assert playback.play(outcome, lambda e: None) == 0
        assert session.battle_log == log_before
