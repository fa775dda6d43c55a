"""Data models module for DocAdventure."""

# Stats
from docadventure.models.stats import (
    BOUNDED_STATS,
    CATEGORICAL_STATS,
    NUMERIC_STATS,
    PERSONALITY_STATS,
    STAT_NAMES,
    UNBOUNDED_STATS,
    StatBlock,
)

# Character
from docadventure.models.character import Character

# Generator payloads and turn results
from docadventure.models.payloads import OutcomePayload, SituationPayload, TurnKind, TurnResult

__all__ = [
    # Stats
    "StatBlock",
    "STAT_NAMES",
    "BOUNDED_STATS",
    "UNBOUNDED_STATS",
    "CATEGORICAL_STATS",
    "NUMERIC_STATS",
    "PERSONALITY_STATS",
    # Character
    "Character",
    # Payloads
    "SituationPayload",
    "OutcomePayload",
    "TurnKind",
    "TurnResult",
]
