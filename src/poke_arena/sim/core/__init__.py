"""Core simulation primitives for the battle engine."""

from poke_arena.sim.core.entities import (
    BaseStats,
    BattleMove,
    BattlePokemon,
    MoveCategory,
    StatusCondition,
)
from poke_arena.sim.core.game_state import (
    BattleEvent,
    BattleResult,
    BattleSession,
    EnginePhase,
    HpSnapshot,
    Side,
    TurnOutcome,
)
from poke_arena.sim.core.rng import BattleRNG

__all__ = [
    # rng
    "BattleRNG",
    # entities
    "BaseStats",
    "BattleMove",
    "BattlePokemon",
    "MoveCategory",
    "StatusCondition",
    # game_state
    "BattleEvent",
    "BattleResult",
    "BattleSession",
    "EnginePhase",
    "HpSnapshot",
    "Side",
    "TurnOutcome",
]
