"""Damage calculation and application.

Implements the simplified classic damage formula:

    base   = floor(((2*L/5 + 2) * P * A / D) / 50 + 2)
    damage = floor(base * r),  r uniform in [0.85, 1.00]

No type effectiveness, critical hits, same-type bonus or stat stages are
applied.  Zero-power moves bypass the formula entirely.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from poke_arena.sim.core.entities import MoveCategory

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattleMove, BattlePokemon
    from poke_arena.sim.core.rng import BattleRNG

RANDOM_FACTOR_MIN = 0.85
RANDOM_FACTOR_MAX = 1.00


def calculate_base_damage(level: int, power: int, attack: int, defense: int) -> int:
    """Return the pre-roll damage for the given level, power and stat pair."""
    if power <= 0:
        return 0
    if defense <= 0:
        raise ValueError(f"defense must be > 0, got {defense}")
    return math.floor(((2 * level / 5 + 2) * power * attack / defense) / 50 + 2)


def relevant_stats(
    attacker: BattlePokemon,
    defender: BattlePokemon,
    move: BattleMove,
) -> tuple[int, int]:
    """Pick the ``(attack, defense)`` pair for *move*'s category.

    Physical uses attack/defense; special and status moves
    use special-attack/special-defense.
    """
    if move.category == MoveCategory.PHYSICAL:
        return attacker.stats.attack, defender.stats.defense
    return attacker.stats.special_attack, defender.stats.special_defense


def calculate_damage(
    attacker: BattlePokemon,
    defender: BattlePokemon,
    move: BattleMove,
    rng: BattleRNG,
) -> int:
    """Calculate final damage for *move*, including the random roll.

    Zero-power moves return 0 without consuming a random value.
    """
    if not move.is_damaging:
        return 0
    attack, defense = relevant_stats(attacker, defender, move)
    base = calculate_base_damage(attacker.level, move.power, attack, defense)
    roll = rng.random_uniform(RANDOM_FACTOR_MIN, RANDOM_FACTOR_MAX)
    return max(0, math.floor(base * roll))


def damage_range(
    attacker: BattlePokemon,
    defender: BattlePokemon,
    move: BattleMove,
) -> tuple[int, int]:
    """Inclusive ``(min, max)`` damage *move* can roll against *defender*."""
    if not move.is_damaging:
        return 0, 0
    attack, defense = relevant_stats(attacker, defender, move)
    base = calculate_base_damage(attacker.level, move.power, attack, defense)
    return math.floor(base * RANDOM_FACTOR_MIN), math.floor(base * RANDOM_FACTOR_MAX)


def apply_damage(defender: BattlePokemon, amount: int) -> int:
    """Subtract *amount* from *defender*'s HP, clamping at 0.

    Returns the HP actually lost.
    """
    return defender.take_damage(max(0, amount))
