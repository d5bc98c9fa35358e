"""Input records for the battle engine.

Setup configuration and saved-team shapes are Pydantic models that
validate JSON payloads from the front-end directly.
"""

from .setup import BattleRules, BattleSetupConfig, implemented_options
from .teams import SavedPokemon, SavedTeam

__all__ = [
    # setup
    "BattleRules",
    "BattleSetupConfig",
    "implemented_options",
    # teams
    "SavedPokemon",
    "SavedTeam",
]
