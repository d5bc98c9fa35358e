"""Tests for saved-team conversion and the fixed rosters."""

from __future__ import annotations

import logging

import pytest

from poke_arena.ir.teams import SavedTeam
from poke_arena.sim.core.entities import MoveCategory
from poke_arena.sim.teams import (
    BATTLE_LEVEL,
    convert_to_battle_team,
    default_moveset,
    default_opponent_team,
    load_saved_teams,
    quick_start_team,
)


def _saved_team_payload(**kwargs) -> dict:
    payload = {
        "id": 1,
        "name": "Kanto Starters",
        "pokemon": [
            {
                "id": 1,
                "name": "bulbasaur",
                "types": ["grass", "poison"],
                "sprite": "https://example.invalid/1.png",
                "stats": {
                    "hp": 45, "attack": 49, "defense": 49,
                    "special-attack": 65, "special-defense": 65, "speed": 45,
                },
            },
            {
                "id": 4,
                "name": "charmander",
                "types": ["fire"],
                "stats": {
                    "hp": 39, "attack": 52, "defense": 43,
                    "special-attack": 60, "special-defense": 50, "speed": 65,
                },
            },
        ],
        "createdAt": "2024-03-01T12:00:00Z",
    }
    payload.update(kwargs)
    return payload


class TestDefaultMoveset:
    def test_four_moves(self):
        moves = default_moveset()
        assert [m.name for m in moves] == ["Tackle", "Quick Attack", "Rest", "Hyper Beam"]
        assert moves[2].category is MoveCategory.STATUS
        assert all(m.current_pp == m.pp for m in moves)

    def test_fresh_objects(self):
        a, b = default_moveset(), default_moveset()
        a[0].consume_pp()
        assert b[0].current_pp == b[0].pp


class TestConvertToBattleTeam:
    def test_members_are_battle_ready(self):
        team = convert_to_battle_team(SavedTeam.model_validate(_saved_team_payload()))
        assert [p.name for p in team] == ["bulbasaur", "charmander"]
        bulbasaur = team[0]
        assert bulbasaur.level == BATTLE_LEVEL
        assert bulbasaur.current_hp == bulbasaur.max_hp == 45
        assert bulbasaur.stats.special_attack == 65
        assert len(bulbasaur.moves) == 4

    def test_members_do_not_share_pp(self):
        team = convert_to_battle_team(SavedTeam.model_validate(_saved_team_payload()))
        team[0].moves[0].consume_pp()
        assert team[1].moves[0].current_pp == team[1].moves[0].pp


class TestLoadSavedTeams:
    def test_nothing_stored(self):
        assert load_saved_teams(None) == []

    def test_valid_payload(self):
        teams = load_saved_teams([_saved_team_payload()])
        assert len(teams) == 1
        assert teams[0].created_at is not None
        assert teams[0].pokemon[1].sprite is None

    def test_malformed_entries_skipped(self, caplog):
        bad = _saved_team_payload(pokemon=[])
        with caplog.at_level(logging.WARNING, logger="poke_arena.sim.teams"):
            teams = load_saved_teams([bad, _saved_team_payload(id=2)])
        assert [t.id for t in teams] == [2]
        assert "index 0" in caplog.text

    def test_too_many_members_rejected(self):
        member = _saved_team_payload()["pokemon"][0]
        assert load_saved_teams([_saved_team_payload(pokemon=[member] * 7)]) == []


class TestFixedRosters:
    def test_quick_start_team(self):
        (pikachu,) = quick_start_team()
        assert pikachu.name == "pikachu"
        assert pikachu.current_hp == pikachu.max_hp == 100
        assert [m.name for m in pikachu.moves] == [
            "Thunderbolt", "Quick Attack", "Iron Tail", "Agility",
        ]

    def test_default_opponent(self):
        (charizard,) = default_opponent_team()
        assert charizard.name == "charizard"
        assert charizard.max_hp == 150
        assert charizard.types == ["fire", "flying"]

    @pytest.mark.parametrize("factory", [quick_start_team, default_opponent_team])
    def test_rosters_are_fresh(self, factory):
        first = factory()
        first[0].take_damage(10)
        assert factory()[0].current_hp == factory()[0].max_hp
