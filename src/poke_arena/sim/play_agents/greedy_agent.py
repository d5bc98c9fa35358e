"""Greedy move policy -- always goes for the biggest expected hit.

The ``GreedyPolicy`` is a simple stand-in for a "hard" AI:

- Scores every usable move by its expected damage against the current
  opponent (base damage times the mean random roll).
- Prefers a move that is guaranteed to knock the opponent out, using the
  minimum roll, when one exists.
- Ties are broken by the lowest slot index so choices are stable.
- Zero-power moves score 0 and are only chosen when nothing else has PP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from poke_arena.sim.mechanics.damage import (
    RANDOM_FACTOR_MAX,
    RANDOM_FACTOR_MIN,
    calculate_base_damage,
    damage_range,
    relevant_stats,
)
from poke_arena.sim.play_agents.base import MovePolicy

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattleMove, BattlePokemon
    from poke_arena.sim.core.rng import BattleRNG

_MEAN_ROLL = (RANDOM_FACTOR_MIN + RANDOM_FACTOR_MAX) / 2


class GreedyPolicy(MovePolicy):
    """Deterministic policy maximising expected damage per move."""

    def choose(
        self,
        combatant: BattlePokemon,
        opponent: BattlePokemon,
        rng: BattleRNG,
    ) -> int:
        usable = combatant.usable_move_indices()
        if not usable:
            return 0

        # Guaranteed knockout beats everything else.
        for idx in usable:
            min_damage, _ = damage_range(combatant, opponent, combatant.moves[idx])
            if min_damage >= opponent.current_hp > 0:
                return idx

        best_idx = usable[0]
        best_score = -1.0
        for idx in usable:
            score = self.expected_damage(combatant, opponent, combatant.moves[idx])
            if score > best_score:
                best_idx, best_score = idx, score
        return best_idx

    @staticmethod
    def expected_damage(
        attacker: BattlePokemon,
        defender: BattlePokemon,
        move: BattleMove,
    ) -> float:
        if not move.is_damaging:
            return 0.0
        attack, defense = relevant_stats(attacker, defender, move)
        return calculate_base_damage(attacker.level, move.power, attack, defense) * _MEAN_ROLL

    def __repr__(self) -> str:
        return "GreedyPolicy()"
