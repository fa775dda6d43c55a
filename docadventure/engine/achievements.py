"""Achievement tracking."""

from collections.abc import Sequence
from typing import Optional


class AchievementTracker:
    """Keeps the unlocked achievements unique and in unlock order."""

    @staticmethod
    def record(achievements: Sequence[str], candidate: Optional[str]) -> list[str]:
        """
        Record a candidate achievement.

        Args:
            achievements: Achievements unlocked so far
            candidate: Newly reported achievement, or None

        Returns:
            New list with the candidate appended, unless it is None or already present
        """
        if candidate is None or candidate in achievements:
            return list(achievements)
        return [*achievements, candidate]
