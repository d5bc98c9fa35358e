"""Telemetry data for simulated battles.

``BattleTelemetry`` captures everything needed to compare policies and
rosters without storing the full battle state.  It is a plain
``dataclass`` (not a Pydantic model) to keep collection cheap during
batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BattleTelemetry:
    """Stats from a single simulated battle.

    Attributes
    ----------
    seed:
        Engine seed used for this battle.
    winner:
        ``"player"``, ``"opponent"`` or ``"draw"`` (turn cap reached).
    turns:
        Number of moves resolved by both sides.
    player_hp_start / player_hp_end:
        HP of the player's active combatant before and after the battle.
    opponent_hp_start / opponent_hp_end:
        Same for the opponent.
    damage_dealt:
        Total damage dealt by each side (``"player"`` / ``"opponent"``).
    moves_used:
        Per side, ``move name -> times used``.
    struggles:
        Number of Struggle uses per side.
    """

    seed: int
    winner: str
    turns: int
    player_hp_start: int
    player_hp_end: int
    opponent_hp_start: int
    opponent_hp_end: int
    damage_dealt: dict[str, int] = field(default_factory=lambda: {"player": 0, "opponent": 0})
    moves_used: dict[str, dict[str, int]] = field(
        default_factory=lambda: {"player": {}, "opponent": {}}
    )
    struggles: dict[str, int] = field(default_factory=lambda: {"player": 0, "opponent": 0})
    battle_log: list[str] = field(default_factory=list)
