"""Generator payload shapes and turn results."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from docadventure.models.stats import CATEGORICAL_STATS, NUMERIC_STATS, STAT_NAMES


class TurnKind(str, Enum):
    """Kind of a playing turn."""

    SITUATION = "situation"
    EVENT = "event"


class SituationPayload(BaseModel):
    """A situation the player must respond to."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    text: StrictStr = Field(min_length=1, description="Situation description, including the options")
    options: list[StrictStr] = Field(min_length=2, max_length=4, description="2-4 options for the player to choose from")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    @field_validator("options")
    @classmethod
    def options_not_blank(cls, value: list[str]) -> list[str]:
        if any(not option.strip() for option in value):
            raise ValueError("options must not be blank")
        return value


class OutcomePayload(BaseModel):
    """Outcome of a situation answer, or a standalone event."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    text: StrictStr = Field(min_length=1, description="Outcome description")
    stats: dict[StrictStr, Union[StrictInt, StrictStr]] = Field(
        description="New values of the stats that changed, keyed by stat name"
    )
    achievement: Optional[StrictStr] = Field(default=None, description="Newly unlocked achievement, if any")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    @field_validator("stats")
    @classmethod
    def stats_whitelisted(cls, value: dict[str, Any]) -> dict[str, Any]:
        for stat_name, stat_value in value.items():
            if stat_name not in STAT_NAMES:
                raise ValueError(f"unknown stat '{stat_name}'")
            if stat_name in NUMERIC_STATS and not isinstance(stat_value, int):
                raise ValueError(f"stat '{stat_name}' must be an integer")
            if stat_name in CATEGORICAL_STATS and not isinstance(stat_value, str):
                raise ValueError(f"stat '{stat_name}' must be a string")
        return value

    @field_validator("achievement")
    @classmethod
    def blank_achievement_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class TurnResult(BaseModel):
    """What a completed turn did to the character."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    kind: TurnKind = Field(description="Turn kind")
    text: str = Field(description="Outcome text shown to the player")
    delta: dict[str, Any] = Field(default_factory=dict, description="Stat update as returned by the generator")
    achievement: Optional[str] = Field(default=None, description="Achievement newly unlocked by this turn")
    choice: Optional[str] = Field(default=None, description="Player answer, for situations")
