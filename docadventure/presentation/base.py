"""Presentation adapter boundary."""

from abc import ABC, abstractmethod

from docadventure.models.character import Character


class Presenter(ABC):
    """Renders game text and collects player input for the game loop."""

    @abstractmethod
    def display(self, text: str) -> None:
        """Show a piece of game text to the player."""
        raise NotImplementedError

    @abstractmethod
    def await_input(self) -> str:
        """
        Block until the player commits a line of text.
        Returns the trimmed line; empty submissions are not returned.
        """
        raise NotImplementedError

    def show_stats(self, character: Character) -> None:
        """Refresh the stat sheet. Adapters without one ignore this."""
        return None
