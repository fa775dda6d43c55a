"""Life stat models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docadventure.config import DEFAULT_JOB, DEFAULT_MARITAL_STATUS, DEFAULT_STARTING_RICE_PURITY
from docadventure.errors import InvariantViolation

STAT_MIN = 0
STAT_MAX = 100

# Wire names, in the order the stat sheet shows them
BOUNDED_STATS = ("ricePurityScore", "looks", "luck", "strength", "health", "happiness", "discipline")
UNBOUNDED_STATS = ("netWorth", "income")
CATEGORICAL_STATS = ("job", "maritalStatus")
NUMERIC_STATS = UNBOUNDED_STATS + BOUNDED_STATS
STAT_NAMES = ("netWorth", "income", "job", "maritalStatus") + BOUNDED_STATS

# Rolled once when the character is named
PERSONALITY_STATS = ("looks", "luck", "strength", "health", "happiness", "discipline")


def clamp_stat(value: int, low: int = STAT_MIN, high: int = STAT_MAX) -> int:
    """Constrain value to [low, high]."""
    return max(low, min(high, value))


class StatBlock(BaseModel):
    """Complete life statistics for one character.

    Attributes are snake_case; the camelCase aliases are the names the
    content generator reads and writes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)  # Immutable model

    net_worth: int = Field(default=0, alias="netWorth", description="Net worth in dollars, unbounded")
    income: int = Field(default=0, alias="income", description="Yearly income in dollars, unbounded")
    job: str = Field(default=DEFAULT_JOB, alias="job", description="Current occupation")
    marital_status: str = Field(default=DEFAULT_MARITAL_STATUS, alias="maritalStatus", description="Marital status")
    rice_purity_score: int = Field(
        default=DEFAULT_STARTING_RICE_PURITY,
        ge=STAT_MIN,
        le=STAT_MAX,
        alias="ricePurityScore",
        description="Rice purity score",
    )
    looks: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="looks", description="Looks stat")
    luck: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="luck", description="Luck stat")
    strength: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="strength", description="Strength stat")
    health: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="health", description="Health stat")
    happiness: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="happiness", description="Happiness stat")
    discipline: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX, alias="discipline", description="Discipline stat")

    @staticmethod
    def attribute_for(stat_name: str) -> str:
        """Map a wire stat name (e.g. ``netWorth``) to its attribute name."""
        for attribute, field in StatBlock.model_fields.items():
            if field.alias == stat_name:
                return attribute
        raise KeyError(stat_name)

    def get(self, stat_name: str) -> Any:
        """Get a stat by its wire name."""
        return getattr(self, self.attribute_for(stat_name))

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the wire (camelCase) names."""
        return self.model_dump(by_alias=True)

    def check_bounds(self) -> None:
        """Raise InvariantViolation if any bounded stat escaped [0, 100]."""
        for stat_name in BOUNDED_STATS:
            value = self.get(stat_name)
            if not STAT_MIN <= value <= STAT_MAX:
                raise InvariantViolation(stat_name, value, STAT_MIN, STAT_MAX)
