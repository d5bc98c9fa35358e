"""Saved-team records -- the shape the team builder persists.

The key-value store that holds these records is an external
collaborator; this module only describes what a stored team looks like
so that :mod:`poke_arena.sim.teams` can turn one into battle-ready
combatants.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from poke_arena.sim.core.entities import BaseStats


class SavedPokemon(BaseModel):
    """A team member as stored by the team builder (no moves, no level)."""

    id: int
    name: str
    types: list[str] = Field(min_length=1, max_length=2)
    sprite: str | None = None
    stats: BaseStats


class SavedTeam(BaseModel):
    """A named team of up to six species."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    pokemon: list[SavedPokemon] = Field(min_length=1, max_length=6)
    created_at: datetime | None = Field(default=None, alias="createdAt")
