"""Move effect stage -- what a move does once it has been chosen and paid for.

The engine calls a ``MoveEffect`` for every resolved move and applies the
returned ``StateDelta`` list in order.  The standard effect only knows two
outcomes (formula damage to the defender, or nothing at all), but a
custom effect can be dropped in to model healing, recoil or type
effectiveness without touching the turn loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

from poke_arena.sim.mechanics.damage import apply_damage, calculate_damage

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattleMove, BattlePokemon
    from poke_arena.sim.core.rng import BattleRNG


class StateDelta(BaseModel):
    """A single state change produced by a move."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["damage", "no_effect"]
    target: Literal["attacker", "defender"] = "defender"
    amount: int = Field(default=0, ge=0)


class MoveEffect(Protocol):
    def __call__(
        self,
        move: BattleMove,
        attacker: BattlePokemon,
        defender: BattlePokemon,
        rng: BattleRNG,
    ) -> list[StateDelta]: ...


def standard_effect(
    move: BattleMove,
    attacker: BattlePokemon,
    defender: BattlePokemon,
    rng: BattleRNG,
) -> list[StateDelta]:
    """Formula damage for any move with power; no effect for zero-power moves."""
    if not move.is_damaging:
        return [StateDelta(kind="no_effect")]
    damage = calculate_damage(attacker, defender, move, rng)
    return [StateDelta(kind="damage", target="defender", amount=damage)]


def apply_delta(
    delta: StateDelta,
    attacker: BattlePokemon,
    defender: BattlePokemon,
) -> int:
    """Apply *delta* and return the HP it removed (0 for ``no_effect``)."""
    if delta.kind == "no_effect":
        return 0
    target = defender if delta.target == "defender" else attacker
    return apply_damage(target, delta.amount)
