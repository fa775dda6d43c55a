"""Presentation adapter for sessions driven over HTTP."""

import queue
import threading
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from docadventure.config import DEFAULT_SESSION_POLL_INTERVAL
from docadventure.errors import SessionClosed
from docadventure.models.character import Character
from docadventure.presentation.base import Presenter


class TranscriptEntry(BaseModel):
    """One displayed piece of text."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    index: int = Field(ge=0, description="Position in the transcript")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the text was displayed")
    text: str = Field(description="Displayed text")


class WebPresenter(Presenter):
    """Buffers displayed text for polling and feeds submitted input to the loop thread."""

    def __init__(self, poll_interval: float = DEFAULT_SESSION_POLL_INTERVAL) -> None:
        self._poll_interval = poll_interval
        self._lock = threading.Lock()
        self._transcript: list[TranscriptEntry] = []
        self._inputs: "queue.Queue[str]" = queue.Queue()
        self._closed = threading.Event()
        self._awaiting_input = False
        self._stat_sheet: Optional[dict[str, Any]] = None

    def display(self, text: str) -> None:
        with self._lock:
            self._transcript.append(TranscriptEntry(index=len(self._transcript), text=text))

    def await_input(self) -> str:
        """Block until submit() delivers a line; the poll only exists to notice close()."""
        with self._lock:
            self._awaiting_input = True
        try:
            while True:
                if self._closed.is_set():
                    raise SessionClosed("Session closed while waiting for input")
                try:
                    return self._inputs.get(timeout=self._poll_interval)
                except queue.Empty:
                    continue
        finally:
            with self._lock:
                self._awaiting_input = False

    def show_stats(self, character: Character) -> None:
        sheet = {
            "name": character.name,
            "age": character.age,
            "stats": character.stats.to_wire(),
            "achievements": list(character.achievements),
            "rows": [{"label": label, "value": value} for label, value in character.stat_sheet()],
        }
        with self._lock:
            self._stat_sheet = sheet

    def submit(self, text: str) -> bool:
        """Queue a line of player text. Empty submissions are ignored and return False."""
        text = text.strip()
        if not text or self._closed.is_set():
            return False
        self._inputs.put(text)
        return True

    def close(self) -> None:
        """Wake the loop thread so it can exit."""
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    @property
    def awaiting_input(self) -> bool:
        with self._lock:
            return self._awaiting_input

    @property
    def stat_sheet(self) -> Optional[dict[str, Any]]:
        with self._lock:
            return self._stat_sheet

    def transcript(self, since: int = 0) -> list[TranscriptEntry]:
        """Displayed entries from index `since` on."""
        with self._lock:
            return self._transcript[max(since, 0):]
