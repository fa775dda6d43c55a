"""Validates content generator outputs against the payload schemas."""

import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from docadventure.config import DEFAULT_MAX_STAT_CHANGE
from docadventure.errors import SchemaError
from docadventure.models.payloads import OutcomePayload, SituationPayload
from docadventure.models.stats import BOUNDED_STATS, StatBlock, clamp_stat

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(?P<body>.*?)\n?\s*```$", re.DOTALL)


class ResponseValidator:
    """Parses raw generator output into situation or outcome payloads."""

    def __init__(self, max_stat_change: int = DEFAULT_MAX_STAT_CHANGE) -> None:
        """Initialize response validator."""
        self.max_stat_change = max_stat_change

    @staticmethod
    def parse_json(output: Any) -> dict[str, Any]:
        """
        Parse raw output into a JSON object.
        A single surrounding Markdown code fence is removed; nothing else is coerced.
        """
        if isinstance(output, Mapping):
            return dict(output)
        if not isinstance(output, str):
            raise SchemaError(f"Output must be a JSON string, got {type(output).__name__}", raw_output=output)

        content = output.strip()
        match = _CODE_FENCE.match(content)
        if match:
            content = match.group("body").strip()

        try:
            parsed = json.loads(content)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and integer literals past the digit limit
            raise SchemaError(f"Output is not valid JSON: {content[:100]}", raw_output=output) from e

        if not isinstance(parsed, dict):
            raise SchemaError(f"Output must be a JSON object, got {type(parsed).__name__}", raw_output=output)
        return parsed

    def validate(self, output: Any, schema: type[T]) -> T:
        """Validate output against a Pydantic schema, raising SchemaError on failure."""
        payload = self.parse_json(output)
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"{schema.__name__} validation failed: {e.errors()}")
            raise SchemaError(
                f"{schema.__name__} validation failed: {e.error_count()} error(s)",
                raw_output=output,
                errors=e.errors(),
            ) from e

    def validate_situation(self, output: Any) -> SituationPayload:
        """Validate a situation payload: non-empty text and 2-4 options."""
        return self.validate(output, SituationPayload)

    def validate_outcome(self, output: Any, current: Optional[StatBlock] = None) -> OutcomePayload:
        """
        Validate an outcome payload.

        Args:
            output: Raw generator output
            current: Stats before the update; when given, stat moves larger than
                max_stat_change are logged (they are still accepted)

        Returns:
            Validated OutcomePayload
        """
        outcome = self.validate(output, OutcomePayload)
        if current is not None:
            self.check_stat_moves(outcome, current)
        return outcome

    def check_stat_moves(self, outcome: OutcomePayload, current: StatBlock) -> list[str]:
        """Return (and log) the bounded stats whose clamped move exceeds max_stat_change."""
        oversized: list[str] = []
        for stat_name, value in outcome.stats.items():
            if stat_name not in BOUNDED_STATS:
                continue
            move = clamp_stat(value) - current.get(stat_name)
            if abs(move) > self.max_stat_change:
                oversized.append(stat_name)
        if oversized:
            logger.warning(f"Generated stat moves larger than {self.max_stat_change}: {oversized}")
        return oversized
