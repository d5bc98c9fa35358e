"""Shared fixtures for simulation tests."""

from __future__ import annotations

import pytest

from poke_arena.sim.core.entities import BattlePokemon
from poke_arena.sim.teams import default_opponent_team, quick_start_team


@pytest.fixture
def player_team() -> list[BattlePokemon]:
    """Fresh quick-start team (pikachu)."""
    return quick_start_team()


@pytest.fixture
def opponent_team() -> list[BattlePokemon]:
    """Fresh default opponent team (charizard)."""
    return default_opponent_team()
