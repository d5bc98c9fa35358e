"""Tests for BattleSession and the snapshot models."""

import pytest
from pydantic import ValidationError

from poke_arena.sim.core.game_state import (
    BattleResult,
    BattleSession,
    EnginePhase,
    HpSnapshot,
    Side,
    TurnOutcome,
)
from poke_arena.sim.teams import default_opponent_team, quick_start_team


def _make_session(**kwargs) -> BattleSession:
    defaults = dict(player_team=quick_start_team(), opponent_team=default_opponent_team())
    defaults.update(kwargs)
    return BattleSession(**defaults)


class TestSide:
    def test_other(self):
        assert Side.PLAYER.other is Side.OPPONENT
        assert Side.OPPONENT.other is Side.PLAYER


class TestBattleSession:
    def test_defaults(self):
        session = _make_session()
        assert session.battle_log == ("Battle started!",)
        assert session.turn_owner is Side.PLAYER
        assert session.phase is EnginePhase.AWAITING_PLAYER_CHOICE
        assert session.config.battle_type == "single"
        assert not session.is_over

    def test_active_combatants(self):
        session = _make_session()
        assert session.player_pokemon.name == "pikachu"
        assert session.opponent_pokemon.name == "charizard"
        assert session.active(Side.OPPONENT) is session.opponent_pokemon

    def test_hp_snapshots(self):
        session = _make_session()
        session.opponent_pokemon.take_damage(50)
        player_hp, opponent_hp = session.hp_snapshots()
        assert player_hp == HpSnapshot(name="pikachu", current_hp=100, max_hp=100)
        assert opponent_hp.current_hp == 100

    def test_record_appends(self):
        session = _make_session()
        view = session.battle_log
        session.record("pikachu used Thunderbolt!")
        assert view == ("Battle started!",)
        assert session.battle_log == ("Battle started!", "pikachu used Thunderbolt!")

    def test_log_cannot_be_edited(self):
        session = _make_session()
        with pytest.raises(AttributeError):
            session.battle_log.append("pikachu fainted!")
        with pytest.raises(TypeError):
            session.battle_log[0] = "Battle over!"
        assert session.battle_log == ("Battle started!",)

    def test_log_not_serialized_as_field(self):
        assert "battle_log" not in _make_session().model_dump()

    def test_terminal_phase_is_over(self):
        session = _make_session(phase=EnginePhase.TERMINAL)
        assert session.is_over

    def test_rng_not_serialized(self):
        session = _make_session()
        assert "rng" not in session.model_dump()


class TestBattleResult:
    def test_frozen(self):
        result = BattleResult(
            winner="player", turns=3, player_pokemon_remaining=1,
            opponent_pokemon_remaining=0, experience_gained=100,
            battle_log=("Battle started!",),
        )
        with pytest.raises(ValidationError):
            result.winner = "opponent"

    def test_unknown_winner_rejected(self):
        with pytest.raises(ValidationError):
            BattleResult(
                winner="nobody", turns=0, player_pokemon_remaining=1,
                opponent_pokemon_remaining=1, experience_gained=0, battle_log=(),
            )


class TestTurnOutcome:
    def test_empty_outcome(self):
        hp = HpSnapshot(name="pikachu", current_hp=100, max_hp=100)
        outcome = TurnOutcome(
            player_hp=hp, opponent_hp=hp, turn_owner=Side.PLAYER,
            phase=EnginePhase.AWAITING_PLAYER_CHOICE,
        )
        assert outcome.log_lines == []
        assert not outcome.is_terminal
