"""Stat update system."""

from collections.abc import Mapping
from typing import Any

from docadventure.errors import SchemaError
from docadventure.models.stats import BOUNDED_STATS, STAT_NAMES, StatBlock, clamp_stat


class StatApplier:
    """Merges generated stat updates into a StatBlock."""

    @staticmethod
    def apply(current: StatBlock, delta: Mapping[str, Any]) -> StatBlock:
        """
        Apply a stat update to a StatBlock.

        Bounded stats are clamped to [0, 100]; net worth, income and the
        categorical stats are taken as given. Stats absent from the update
        keep their current value.

        Args:
            current: Current stats (not modified)
            delta: New stat values keyed by wire name (e.g. ``happiness``)

        Returns:
            New StatBlock with the update merged in
        """
        updates: dict[str, Any] = {}
        for stat_name, value in delta.items():
            if stat_name not in STAT_NAMES:
                raise SchemaError(f"Unknown stat '{stat_name}'")
            if stat_name in BOUNDED_STATS:
                value = clamp_stat(value)
            updates[StatBlock.attribute_for(stat_name)] = value

        updated = current.model_copy(update=updates)
        updated.check_bounds()
        return updated
