"""Presentation adapters: the game loop's only way to talk to a player."""

from docadventure.presentation.base import Presenter
from docadventure.presentation.console import ConsolePresenter
from docadventure.presentation.web import TranscriptEntry, WebPresenter

__all__ = [
    "Presenter",
    "ConsolePresenter",
    "WebPresenter",
    "TranscriptEntry",
]
