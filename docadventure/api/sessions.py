"""Game sessions hosted by the API, one loop thread each."""

import logging
import random
import threading
from datetime import datetime
from typing import Any, Optional

from docadventure.agents.generator import ContentGenerator
from docadventure.config import DEFAULT_SITUATION_PROBABILITY
from docadventure.engine.age_signal import AgeUpSignal
from docadventure.engine.game_loop import GameLoop
from docadventure.errors import SessionClosed
from docadventure.presentation.web import WebPresenter

logger = logging.getLogger(__name__)


class GameSession:
    """A game loop running on its own daemon thread behind a WebPresenter."""

    def __init__(
        self,
        game_id: str,
        generator: ContentGenerator,
        seed: Optional[int] = None,
        situation_probability: float = DEFAULT_SITUATION_PROBABILITY,
        presenter: Optional[WebPresenter] = None,
    ) -> None:
        """
        Initialize session (the loop does not run until start()).

        Args:
            game_id: Unique game identifier
            generator: Content generator for this game
            seed: Optional seed for the game's random source
            situation_probability: Chance that a turn is a situation
            presenter: Web presenter (a new one by default)
        """
        self.game_id = game_id
        self.created_at = datetime.now()
        self.presenter = presenter or WebPresenter()
        self.age_signal = AgeUpSignal()
        self.loop = GameLoop(
            generator=generator,
            presenter=self.presenter,
            age_signal=self.age_signal,
            rng=random.Random(seed),
            situation_probability=situation_probability,
        )
        self.error: Optional[str] = None
        self._thread = threading.Thread(target=self._run, name=f"game-{game_id}", daemon=True)

    def start(self) -> None:
        """Start the loop thread."""
        self._thread.start()
        logger.info(f"Started game {self.game_id}")

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop the loop and wake it if it waits for input.
        A generator call already in flight is not cancelled; it finishes first.
        """
        self.loop.stop()
        self.presenter.close()
        if self._thread.is_alive():
            self._thread.join(timeout)
        logger.info(f"Stopped game {self.game_id}")

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def _run(self) -> None:
        try:
            self.loop.run()
        except SessionClosed:
            logger.info(f"Game {self.game_id} closed while waiting for input")
        except Exception as e:
            self.error = f"{type(e).__name__}: {e}"
            logger.error(f"Game {self.game_id} crashed: {e}", exc_info=True)
            raise

    def snapshot(self, since: int = 0) -> dict[str, Any]:
        """Serialize the session for the API."""
        character = self.loop.character
        return {
            "game_id": self.game_id,
            "created_at": self.created_at.isoformat(),
            "phase": self.loop.phase.value,
            "alive": self.alive,
            "error": self.error,
            "awaiting_input": self.presenter.awaiting_input,
            "pending_age_ups": self.age_signal.pending,
            "turns_played": self.loop.turns_played,
            "character": character.model_dump(mode="json", by_alias=True) if character else None,
            "stat_sheet": self.presenter.stat_sheet,
            "transcript": [entry.model_dump(mode="json") for entry in self.presenter.transcript(since)],
        }
