"""Battle setup configuration -- the options chosen before a battle starts.

Mirrors the setup screen of the web front-end.  Every option is accepted
and validated, but the engine only honours a subset of them; see
:func:`implemented_options`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class BattleRules(BaseModel):
    """Optional rule set.  Accepted but not enforced by the engine."""

    model_config = ConfigDict(populate_by_name=True)

    level_cap: int | None = Field(default=50, alias="levelCap", ge=1)
    allow_legendaries: bool = Field(default=False, alias="allowLegendaries")
    turn_time_limit: int | None = Field(default=30, alias="turnTimeLimit", gt=0)
    """Seconds per move choice.  A hook only; choices are never timed out."""


class BattleSetupConfig(BaseModel):
    """Top-level battle configuration."""

    model_config = ConfigDict(populate_by_name=True)

    battle_type: Literal["single", "double", "triple"] = Field(
        default="single", alias="battleType",
    )
    opponent_type: Literal["ai", "random", "custom"] = Field(
        default="ai", alias="opponentType",
    )
    difficulty: Literal["easy", "medium", "hard"] = "medium"
    rules: BattleRules = Field(default_factory=BattleRules)

    def unimplemented_options(self) -> list[str]:
        """Names of options set to values the engine does not act on."""
        ignored: list[str] = []
        if self.battle_type != "single":
            ignored.append(f"battle_type={self.battle_type}")
        if self.opponent_type == "custom":
            ignored.append("opponent_type=custom")
        return ignored


def implemented_options() -> dict[str, list[str]]:
    """Return, per option, the values the engine actually implements.

    Options mapped to an empty list are accepted and stored but have no
    effect on resolution.
    """
    return {
        "battle_type": ["single"],
        "opponent_type": ["ai", "random"],
        "difficulty": [],
        "rules.level_cap": [],
        "rules.allow_legendaries": [],
        "rules.turn_time_limit": [],
    }
