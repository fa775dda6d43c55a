"""Game engine package."""

from docadventure.engine.achievements import AchievementTracker
from docadventure.engine.age_signal import AgeUpSignal
from docadventure.engine.game_loop import GameLoop, GamePhase
from docadventure.engine.stat_applier import StatApplier
from docadventure.engine.turn_draw import TurnDrawer

__all__ = [
    "AchievementTracker",
    "AgeUpSignal",
    "GameLoop",
    "GamePhase",
    "StatApplier",
    "TurnDrawer",
]
