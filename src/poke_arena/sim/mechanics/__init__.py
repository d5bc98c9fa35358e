"""Core battle mechanics.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from poke_arena.sim.mechanics import (
        calculate_base_damage, calculate_damage, apply_damage,
        consume_pp, make_struggle, resolve_autonomous_choice,
        standard_effect, apply_delta,
    )
"""

# -- damage ------------------------------------------------------------------
from .damage import (
    apply_damage,
    calculate_base_damage,
    calculate_damage,
    damage_range,
    relevant_stats,
)

# -- pp ----------------------------------------------------------------------
from .pp import consume_pp, make_struggle, resolve_autonomous_choice

# -- effects -----------------------------------------------------------------
from .effects import MoveEffect, StateDelta, apply_delta, standard_effect

__all__ = [
    # damage
    "apply_damage",
    "calculate_base_damage",
    "calculate_damage",
    "damage_range",
    "relevant_stats",
    # pp
    "consume_pp",
    "make_struggle",
    "resolve_autonomous_choice",
    # effects
    "MoveEffect",
    "StateDelta",
    "apply_delta",
    "standard_effect",
]
