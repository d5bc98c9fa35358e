"""Tests for the move effect stage."""

import pytest
from pydantic import ValidationError

from poke_arena.sim.core.entities import BaseStats, BattleMove, BattlePokemon, MoveCategory
from poke_arena.sim.core.rng import BattleRNG
from poke_arena.sim.mechanics.effects import StateDelta, apply_delta, standard_effect


def _make_move(**kwargs) -> BattleMove:
    defaults = dict(id=1, name="Tackle", type="normal", power=40, pp=35, category=MoveCategory.PHYSICAL)
    defaults.update(kwargs)
    return BattleMove(**defaults)


def _make_pokemon(name: str = "eevee", hp: int = 100) -> BattlePokemon:
    return BattlePokemon(
        id=133, name=name, types=["normal"], level=50, current_hp=hp, max_hp=100,
        stats=BaseStats(
            hp=100, attack=100, defense=100, special_attack=100, special_defense=100, speed=50,
        ),
        moves=[_make_move()],
    )


class TestStandardEffect:
    def test_damaging_move(self):
        deltas = standard_effect(_make_move(), _make_pokemon(), _make_pokemon(), BattleRNG(0))
        assert len(deltas) == 1
        assert deltas[0].kind == "damage"
        assert deltas[0].target == "defender"
        # base 19 -> floor(19 * [0.85, 1.0])
        assert 16 <= deltas[0].amount <= 19

    def test_status_move(self):
        move = _make_move(name="Growl", power=0, category=MoveCategory.STATUS)
        deltas = standard_effect(move, _make_pokemon(), _make_pokemon(), BattleRNG(0))
        assert deltas == [StateDelta(kind="no_effect")]

    def test_status_category_with_power_deals_damage(self):
        move = _make_move(name="Odd Beam", power=90, category=MoveCategory.STATUS)
        deltas = standard_effect(move, _make_pokemon(), _make_pokemon(), BattleRNG(0))
        assert deltas[0].kind == "damage"
        # base 41 -> floor(41 * [0.85, 1.0])
        assert 34 <= deltas[0].amount <= 41

    def test_zero_power_non_status_move(self):
        move = _make_move(name="Splash", power=0)
        deltas = standard_effect(move, _make_pokemon(), _make_pokemon(), BattleRNG(0))
        assert deltas[0].kind == "no_effect"

    def test_effect_does_not_mutate(self):
        defender = _make_pokemon()
        standard_effect(_make_move(), _make_pokemon(), defender, BattleRNG(0))
        assert defender.current_hp == 100


class TestApplyDelta:
    def test_damage_to_defender(self):
        attacker, defender = _make_pokemon("a"), _make_pokemon("d")
        lost = apply_delta(StateDelta(kind="damage", amount=30), attacker, defender)
        assert lost == 30
        assert defender.current_hp == 70
        assert attacker.current_hp == 100

    def test_damage_to_attacker(self):
        attacker, defender = _make_pokemon("a"), _make_pokemon("d")
        apply_delta(StateDelta(kind="damage", target="attacker", amount=30), attacker, defender)
        assert attacker.current_hp == 70
        assert defender.current_hp == 100

    def test_overkill_clamps(self):
        attacker, defender = _make_pokemon("a"), _make_pokemon("d", hp=10)
        assert apply_delta(StateDelta(kind="damage", amount=47), attacker, defender) == 10
        assert defender.current_hp == 0

    def test_no_effect(self):
        attacker, defender = _make_pokemon("a"), _make_pokemon("d")
        assert apply_delta(StateDelta(kind="no_effect"), attacker, defender) == 0
        assert defender.current_hp == 100

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            StateDelta(kind="damage", amount=-1)
