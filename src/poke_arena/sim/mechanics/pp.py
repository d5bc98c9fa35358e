"""PP bookkeeping and the out-of-PP fallback.

PP is decremented on use and never replenished mid-battle.  When a
combatant has nothing left to use it falls back to ``Struggle``, which
costs no PP, so autonomous play can never stall on an empty move set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poke_arena.sim.core.entities import BattleMove, MoveCategory

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattlePokemon

logger = logging.getLogger(__name__)

STRUGGLE_ID = 165


def make_struggle() -> BattleMove:
    """Return a fresh Struggle move.

    Its PP pool is never consumed; the engine skips ``consume_pp`` for it.
    """
    return BattleMove(
        id=STRUGGLE_ID,
        name="Struggle",
        type="typeless",
        power=50,
        accuracy=100,
        pp=1,
        current_pp=1,
        category=MoveCategory.PHYSICAL,
        description="Used only when no other move has PP left.",
    )


def consume_pp(move: BattleMove) -> None:
    """Spend one PP of *move*.  Raises ``ValueError`` when it has none."""
    move.consume_pp()


def resolve_autonomous_choice(
    combatant: BattlePokemon,
    index: int,
) -> tuple[int | None, BattleMove]:
    """Turn a policy's slot choice into a move that can actually be used.

    * A valid slot with PP left is used as-is.
    * An out-of-range slot or a slot with no PP is replaced by the first
      usable slot in order.
    * With no usable slot at all, Struggle is returned with slot ``None``.
    """
    if 0 <= index < len(combatant.moves) and combatant.moves[index].has_pp:
        return index, combatant.moves[index]

    usable = combatant.usable_move_indices()
    if not usable:
        logger.debug("%s has no PP left on any move; using Struggle", combatant.name)
        return None, make_struggle()

    fallback = usable[0]
    logger.debug(
        "%s picked unusable slot %d; falling back to slot %d (%s)",
        combatant.name, index, fallback, combatant.moves[fallback].name,
    )
    return fallback, combatant.moves[fallback]
