"""Battle session state and the value objects the engine hands back.

Houses the full mutable state of one battle (``BattleSession``) plus the
immutable snapshots produced from it: ``BattleEvent`` for each step of a
resolved move, ``TurnOutcome`` for each call into the engine, and the
terminal ``BattleResult``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from poke_arena.ir.setup import BattleSetupConfig
from poke_arena.sim.core.entities import BattlePokemon


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Side(str, Enum):
    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class EnginePhase(str, Enum):
    """States of the turn-resolution state machine.

    ``TERMINAL`` is absorbing.
    """

    AWAITING_PLAYER_CHOICE = "awaiting_player_choice"
    RESOLVING_PLAYER_MOVE = "resolving_player_move"
    AWAITING_OPPONENT_CHOICE = "awaiting_opponent_choice"
    RESOLVING_OPPONENT_MOVE = "resolving_opponent_move"
    TERMINAL = "terminal"


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

class HpSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    current_hp: int
    max_hp: int

    @classmethod
    def of(cls, pokemon: BattlePokemon) -> HpSnapshot:
        return cls(name=pokemon.name, current_hp=pokemon.current_hp, max_hp=pokemon.max_hp)


class BattleEvent(BaseModel):
    """One narrated step of a resolved move.

    ``message`` is the exact line appended to the battle log; the HP
    snapshots reflect state *after* this step, so a presentation layer can
    replay a turn without re-deriving anything.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["move_used", "damage", "no_effect", "fainted", "struggle"]
    actor: Side
    target: Side | None = None
    move_name: str | None = None
    amount: int = 0
    message: str
    player_hp: HpSnapshot
    opponent_hp: HpSnapshot


class BattleResult(BaseModel):
    """Terminal snapshot of a finished battle.  Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    winner: Literal["player", "opponent", "draw"]
    turns: int
    player_pokemon_remaining: int
    opponent_pokemon_remaining: int
    experience_gained: int
    battle_log: tuple[str, ...]


class TurnOutcome(BaseModel):
    """What one call into the engine produced."""

    model_config = ConfigDict(frozen=True)

    events: tuple[BattleEvent, ...] = ()
    player_hp: HpSnapshot
    opponent_hp: HpSnapshot
    turn_owner: Side | None
    """``None`` once the battle is over."""

    phase: EnginePhase
    result: BattleResult | None = None
    player_must_struggle: bool = False
    """True when every player move is out of PP; the host should call
    ``BattleEngine.struggle``."""

    @property
    def log_lines(self) -> list[str]:
        return [event.message for event in self.events]

    @property
    def is_terminal(self) -> bool:
        return self.result is not None


# ---------------------------------------------------------------------------
# BattleSession
# ---------------------------------------------------------------------------

class BattleSession(BaseModel):
    """Full mutable state of a single battle.

    The session is the handle the host passes back into the engine.  It is
    owned by exactly one caller and never shared between battles.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_team: list[BattlePokemon]
    opponent_team: list[BattlePokemon]
    player_active: int = 0
    opponent_active: int = 0
    turn_owner: Side = Side.PLAYER
    phase: EnginePhase = EnginePhase.AWAITING_PLAYER_CHOICE
    is_busy: bool = False
    turn: int = 0
    """Number of moves resolved so far (both sides)."""

    result: BattleResult | None = None
    abandoned: bool = False
    config: BattleSetupConfig = Field(default_factory=BattleSetupConfig)
    rng: Any = Field(default=None, exclude=True)
    """Session-specific ``BattleRNG``.  Excluded from serialization."""

    _battle_log: list[str] = PrivateAttr(default_factory=lambda: ["Battle started!"])

    # -- queries -------------------------------------------------------------

    @property
    def player_pokemon(self) -> BattlePokemon:
        return self.player_team[self.player_active]

    @property
    def opponent_pokemon(self) -> BattlePokemon:
        return self.opponent_team[self.opponent_active]

    @property
    def is_over(self) -> bool:
        return self.phase is EnginePhase.TERMINAL

    def active(self, side: Side) -> BattlePokemon:
        return self.player_pokemon if side is Side.PLAYER else self.opponent_pokemon

    def hp_snapshots(self) -> tuple[HpSnapshot, HpSnapshot]:
        return HpSnapshot.of(self.player_pokemon), HpSnapshot.of(self.opponent_pokemon)

    @property
    def battle_log(self) -> tuple[str, ...]:
        """Read-only copy of the battle log."""
        return tuple(self._battle_log)

    # -- mutation ------------------------------------------------------------

    def record(self, message: str) -> None:
        """Append *message* to the log.  Entries are never edited or removed."""
        self._battle_log.append(message)
