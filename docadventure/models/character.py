"""Character model."""

import random
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from docadventure.config import DEFAULT_STARTING_AGE
from docadventure.models.stats import PERSONALITY_STATS, STAT_MAX, StatBlock


class Character(BaseModel):
    """The player character: the single mutable aggregate of a game session."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1, frozen=True, description="Player name, set once")
    age: int = Field(default=DEFAULT_STARTING_AGE, ge=DEFAULT_STARTING_AGE, description="Current age in years")
    stats: StatBlock = Field(default_factory=StatBlock, description="Current life stats")
    achievements: list[str] = Field(default_factory=list, description="Unlocked achievements, in unlock order")
    history: list[str] = Field(default_factory=list, description="Committed player inputs, in order")

    @classmethod
    def create(cls, name: str, rng: Optional[random.Random] = None) -> "Character":
        """Create a new character and roll the personality stats in [0, 100)."""
        rng = rng or random.Random()
        rolled = {stat_name: rng.randrange(STAT_MAX) for stat_name in PERSONALITY_STATS}
        return cls(name=name, stats=StatBlock.model_validate(rolled))

    def age_up(self) -> int:
        """Increment age by one year and return the new age."""
        self.age = self.age + 1
        return self.age

    def commit_input(self, text: str) -> None:
        """Append a committed player input to the history."""
        self.history.append(text)

    def stat_sheet(self) -> list[tuple[str, str]]:
        """Rows of the stats sidebar: (label, value)."""
        stats = self.stats
        rows = [
            ("Age", str(self.age)),
            ("Net Worth", f"${stats.net_worth}"),
            ("Income", f"${stats.income}/year"),
            ("Job", stats.job),
            ("Marital Status", stats.marital_status),
            ("Rice Purity Score", str(stats.rice_purity_score)),
            ("Looks", str(stats.looks)),
            ("Luck", str(stats.luck)),
            ("Strength", str(stats.strength)),
            ("Health", str(stats.health)),
            ("Happiness", str(stats.happiness)),
            ("Discipline", str(stats.discipline)),
        ]
        rows.extend(("Achievement", achievement) for achievement in self.achievements)
        return rows
