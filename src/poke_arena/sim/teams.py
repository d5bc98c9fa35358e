"""Team construction -- turning saved teams into battle-ready combatants.

This is a pure mapping step outside the engine.  Saved teams carry no
level and no move information, so every member is brought to
``BATTLE_LEVEL`` with full HP and given the default move set.  The
quick-start team and the default opponent are fixed rosters used when
the user has no saved teams.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from poke_arena.ir.teams import SavedTeam
from poke_arena.sim.core.entities import BaseStats, BattleMove, BattlePokemon, MoveCategory

logger = logging.getLogger(__name__)

BATTLE_LEVEL = 50

_ARTWORK_URL = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/"
    "other/official-artwork/{id}.png"
)


def _move(
    move_id: int,
    name: str,
    move_type: str,
    power: int,
    accuracy: int,
    pp: int,
    category: MoveCategory,
) -> BattleMove:
    return BattleMove(
        id=move_id, name=name, type=move_type, power=power,
        accuracy=accuracy, pp=pp, current_pp=pp, category=category,
    )


def default_moveset() -> list[BattleMove]:
    """Moves given to any species whose source data has none.

    Returns fresh objects on every call so PP is never shared.
    """
    return [
        _move(1, "Tackle", "normal", 40, 100, 35, MoveCategory.PHYSICAL),
        _move(2, "Quick Attack", "normal", 40, 100, 30, MoveCategory.PHYSICAL),
        _move(3, "Rest", "psychic", 0, 100, 10, MoveCategory.STATUS),
        _move(4, "Hyper Beam", "normal", 150, 90, 5, MoveCategory.SPECIAL),
    ]


def convert_to_battle_team(team: SavedTeam) -> list[BattlePokemon]:
    """Map every member of *team* to a level-50, full-HP combatant."""
    return [
        BattlePokemon(
            id=member.id,
            name=member.name,
            types=list(member.types),
            sprite=member.sprite,
            level=BATTLE_LEVEL,
            current_hp=member.stats.hp,
            max_hp=member.stats.hp,
            stats=member.stats.model_copy(),
            moves=default_moveset(),
        )
        for member in team.pokemon
    ]


def load_saved_teams(payload: Iterable[Any] | None) -> list[SavedTeam]:
    """Validate the raw list stored under the saved-teams key.

    Malformed entries are skipped with a warning rather than failing the
    whole load.  ``None`` (nothing stored yet) yields an empty list.
    """
    if payload is None:
        return []
    teams: list[SavedTeam] = []
    for i, raw in enumerate(payload):
        try:
            teams.append(SavedTeam.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Skipping malformed saved team at index %d: %s", i, exc.errors()[0]["msg"])
    return teams


def quick_start_team() -> list[BattlePokemon]:
    """The fixed one-member team offered when no saved team exists."""
    return [
        BattlePokemon(
            id=25,
            name="pikachu",
            types=["electric"],
            sprite=_ARTWORK_URL.format(id=25),
            level=BATTLE_LEVEL,
            current_hp=100,
            max_hp=100,
            stats=BaseStats(
                hp=100, attack=90, defense=70,
                special_attack=110, special_defense=80, speed=120,
            ),
            moves=[
                _move(1, "Thunderbolt", "electric", 90, 100, 15, MoveCategory.SPECIAL),
                _move(2, "Quick Attack", "normal", 40, 100, 30, MoveCategory.PHYSICAL),
                _move(3, "Iron Tail", "steel", 100, 75, 15, MoveCategory.PHYSICAL),
                _move(4, "Agility", "psychic", 0, 100, 30, MoveCategory.STATUS),
            ],
        ),
    ]


def default_opponent_team() -> list[BattlePokemon]:
    """The opponent used when none is supplied."""
    return [
        BattlePokemon(
            id=6,
            name="charizard",
            types=["fire", "flying"],
            sprite=_ARTWORK_URL.format(id=6),
            level=BATTLE_LEVEL,
            current_hp=150,
            max_hp=150,
            stats=BaseStats(
                hp=150, attack=120, defense=90,
                special_attack=130, special_defense=100, speed=110,
            ),
            moves=[
                _move(1, "Flamethrower", "fire", 90, 100, 15, MoveCategory.SPECIAL),
                _move(2, "Dragon Claw", "dragon", 80, 100, 15, MoveCategory.PHYSICAL),
                _move(3, "Air Slash", "flying", 75, 95, 15, MoveCategory.SPECIAL),
                _move(4, "Roost", "flying", 0, 100, 10, MoveCategory.STATUS),
            ],
        ),
    ]
