"""Base class for policies that pick moves for an autonomous side.

The engine calls ``choose`` whenever the opponent is granted the turn.
The simulation runner also uses policies to drive the player side, so
the same classes serve both roles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattlePokemon
    from poke_arena.sim.core.rng import BattleRNG


class MovePolicy(ABC):
    """Base class for move-selection policies."""

    @abstractmethod
    def choose(
        self,
        combatant: BattlePokemon,
        opponent: BattlePokemon,
        rng: BattleRNG,
    ) -> int:
        """Choose a move slot for *combatant*.

        Parameters
        ----------
        combatant:
            The combatant about to act.
        opponent:
            The combatant it will act against.
        rng:
            The battle's seeded RNG.  Policies must draw all randomness
            from it so that battles replay deterministically.

        Returns
        -------
        int
            An index into ``combatant.moves``.  Policies are not required
            to respect PP; the caller re-maps unusable slots.
        """
