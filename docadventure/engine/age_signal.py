"""Queued age-up signal."""

import threading


class AgeUpSignal:
    """Collects age-up requests from any thread until the game loop drains them.

    The loop only drains between turns, so a request that arrives while a
    generator call is in flight is applied after that turn completes.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = 0

    def trigger(self) -> None:
        """Request one year of aging."""
        with self._lock:
            self._pending += 1

    @property
    def pending(self) -> int:
        with self._lock:
            return self._pending

    def drain(self) -> int:
        """Take all pending requests, returning how many there were."""
        with self._lock:
            count, self._pending = self._pending, 0
            return count
