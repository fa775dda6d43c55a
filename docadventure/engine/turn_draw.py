"""Turn kind draw."""

import random
from typing import Optional

from docadventure.config import DEFAULT_SITUATION_PROBABILITY
from docadventure.models.payloads import TurnKind


class TurnDrawer:
    """Draws the kind of each playing turn independently of previous draws."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        situation_probability: float = DEFAULT_SITUATION_PROBABILITY,
    ) -> None:
        if not 0.0 <= situation_probability <= 1.0:
            raise ValueError(f"situation_probability must be in [0, 1], got {situation_probability}")
        self._rng = rng or random.Random()
        self.situation_probability = situation_probability

    def draw(self) -> TurnKind:
        """Draw a situation with probability situation_probability, else an event."""
        if self._rng.random() < self.situation_probability:
            return TurnKind.SITUATION
        return TurnKind.EVENT
