"""Random move policy -- picks a move slot uniformly at random.

This is the default opponent AI.  It deliberately ignores PP, power and
matchup: every slot is equally likely, including slots with no PP left.
The engine turns an empty slot into the first usable move (or Struggle),
so the policy never needs to retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from poke_arena.sim.play_agents.base import MovePolicy

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattlePokemon
    from poke_arena.sim.core.rng import BattleRNG


class RandomPolicy(MovePolicy):
    """Uniform choice over all of the combatant's move slots."""

    def choose(
        self,
        combatant: BattlePokemon,
        opponent: BattlePokemon,
        rng: BattleRNG,
    ) -> int:
        return rng.random_index(len(combatant.moves))

    def __repr__(self) -> str:
        return "RandomPolicy()"
