"""Combatant and move models for the battle engine.

All data classes use Pydantic v2 BaseModel for validation and
serialization.  Field aliases accept the camelCase / hyphenated keys used
by the web front-end and PokeAPI payloads, so records coming from the
data layer validate without a translation step.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------

class MoveCategory(str, Enum):
    """Selects which attack/defense stat pair the damage formula uses."""

    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"


class BattleMove(BaseModel):
    """A single move slot on a combatant, with its own PP pool."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    type: str
    power: int = Field(ge=0)
    """0 for status / non-damaging moves."""

    accuracy: int = Field(default=100, ge=0, le=100)
    """Percentage.  Carried for display; the engine does not roll for hits."""

    pp: int = Field(ge=0)
    current_pp: int = Field(alias="currentPp", ge=0)
    category: MoveCategory
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_current_pp(cls, data: Any) -> Any:
        if isinstance(data, dict) and "current_pp" not in data and "currentPp" not in data:
            data = {**data, "current_pp": data.get("pp")}
        return data

    @model_validator(mode="after")
    def _check_pp_bounds(self) -> BattleMove:
        if self.current_pp > self.pp:
            raise ValueError(
                f"current_pp ({self.current_pp}) exceeds pp ({self.pp}) for {self.name!r}"
            )
        return self

    # -- queries -------------------------------------------------------------

    @property
    def has_pp(self) -> bool:
        return self.current_pp > 0

    @property
    def is_damaging(self) -> bool:
        return self.power > 0

    # -- mutation ------------------------------------------------------------

    def consume_pp(self) -> None:
        """Spend one PP.  PP is never replenished within a battle."""
        if self.current_pp <= 0:
            raise ValueError(f"{self.name!r} has no PP left")
        self.current_pp -= 1


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

class BaseStats(BaseModel):
    """The six base stat values of a species."""

    model_config = ConfigDict(populate_by_name=True)

    hp: int = Field(ge=1)
    attack: int = Field(ge=1)
    defense: int = Field(ge=1)
    special_attack: int = Field(alias="special-attack", ge=1)
    special_defense: int = Field(alias="special-defense", ge=1)
    speed: int = Field(ge=0)


class StatusCondition(BaseModel):
    """Placeholder for non-volatile status.  Never applied by the core."""

    type: Literal["poison", "burn", "freeze", "paralysis", "sleep", "confusion"]
    turns_remaining: int | None = None


# ---------------------------------------------------------------------------
# Combatant
# ---------------------------------------------------------------------------

class BattlePokemon(BaseModel):
    """A battle-ready snapshot of a species.

    Created once per battle, mutated only by damage application, and
    discarded when the battle ends.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    types: list[str] = Field(min_length=1, max_length=2)
    sprite: str | None = None
    level: int = Field(ge=1)
    current_hp: int = Field(alias="currentHp", ge=0)
    max_hp: int = Field(alias="maxHp", ge=1)
    stats: BaseStats
    moves: list[BattleMove] = Field(min_length=1, max_length=4)
    status: StatusCondition | None = None

    @model_validator(mode="after")
    def _check_hp_bounds(self) -> BattlePokemon:
        if self.current_hp > self.max_hp:
            raise ValueError(
                f"current_hp ({self.current_hp}) exceeds max_hp ({self.max_hp}) for {self.name!r}"
            )
        return self

    # -- HP ------------------------------------------------------------------

    @property
    def is_fainted(self) -> bool:
        return self.current_hp == 0

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamping HP at 0.

        Returns the HP actually lost.
        """
        if amount < 0:
            raise ValueError(f"take_damage amount must be >= 0, got {amount}")
        hp_lost = min(self.current_hp, amount)
        self.current_hp -= hp_lost
        return hp_lost

    # -- moves ---------------------------------------------------------------

    def usable_move_indices(self) -> list[int]:
        """Indices of move slots that still have PP."""
        return [i for i, move in enumerate(self.moves) if move.has_pp]

    @property
    def has_usable_moves(self) -> bool:
        return any(move.has_pp for move in self.moves)
