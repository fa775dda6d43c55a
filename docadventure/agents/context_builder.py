"""Turn context building for the content generator."""

import json
from typing import Any

from pydantic import BaseModel

from docadventure.config import DEFAULT_HISTORY_CONTEXT_LIMIT, DEFAULT_MAX_STAT_CHANGE
from docadventure.models.character import Character
from docadventure.models.payloads import OutcomePayload, SituationPayload, TurnKind
from docadventure.models.stats import BOUNDED_STATS, STAT_MAX, STAT_MIN, STAT_NAMES
from docadventure.security.prompt_builder import PromptBuilder

_SITUATION_TEMPLATE = """
You are running a life simulation game. Generate a situation for the player to respond to.

Current game state:
{state}

Rules:
- Keep the situation to 1-2 lines and make it fit the character's age and circumstances.
- Mix positive and negative situations; occasionally refer back to the player's earlier choices.
- Offer 2-4 clear options, each with consequences for the character's stats.
"""

_OUTCOME_TEMPLATE = """
You are running a life simulation game. The player was given this situation:
{situation}

Options offered:
{options}

The player answered: {choice}

Current game state:
{state}

Rules:
- Describe the outcome of the player's answer in 1-2 lines.
- Return the new values of the stats that changed. Allowed stat names: {stat_names}.
- Move each stat by at most {max_change} points; {bounded} stay within {low}-{high}.
"""

_EVENT_TEMPLATE = """
You are running a life simulation game. Generate a random event that happens to the player.

Current game state:
{state}

Rules:
- Keep the event to 1-2 lines and make it fit the character's age and circumstances.
- Mix positive and negative events; occasionally refer back to the player's earlier choices.
- Return the new values of the stats that changed. Allowed stat names: {stat_names}.
- Move each stat by at most {max_change} points; {bounded} stay within {low}-{high}.
"""

_HISTORY_TEMPLATE = """
The player's most recent responses, oldest first:
{history}
"""

_SCHEMA_TEMPLATE = """
Return only a JSON object matching this JSON schema, with no text outside of it:
{schema}
"""


class TurnContextBuilder:
    """Builds the textual request context for each generator call."""

    def __init__(
        self,
        history_limit: int = DEFAULT_HISTORY_CONTEXT_LIMIT,
        max_stat_change: int = DEFAULT_MAX_STAT_CHANGE,
    ) -> None:
        """
        Initialize context builder.

        Args:
            history_limit: How many recent player inputs to include for continuity
            max_stat_change: Largest stat move the generator is asked to make
        """
        self.history_limit = history_limit
        self.max_stat_change = max_stat_change
        self._situation_prompt = PromptBuilder.create_prompt(_SITUATION_TEMPLATE)
        self._outcome_prompt = PromptBuilder.create_prompt(_OUTCOME_TEMPLATE)
        self._event_prompt = PromptBuilder.create_prompt(_EVENT_TEMPLATE)
        self._history_prompt = PromptBuilder.create_prompt(_HISTORY_TEMPLATE)
        self._schema_prompt = PromptBuilder.create_prompt(_SCHEMA_TEMPLATE)

    @staticmethod
    def serialize_character(character: Character) -> dict[str, Any]:
        """Serialize the parts of the character the generator may see."""
        return {
            "name": character.name,
            "age": character.age,
            "stats": character.stats.to_wire(),
            "achievements": list(character.achievements),
        }

    def recent_history(self, character: Character) -> list[str]:
        """Last history_limit committed inputs, oldest first."""
        if self.history_limit <= 0:
            return []
        return character.history[-self.history_limit:]

    def build(self, character: Character, kind: TurnKind) -> str:
        """Build the opening context of a turn of the given kind."""
        if kind == TurnKind.SITUATION:
            return self.build_situation_context(character)
        return self.build_event_context(character)

    def build_situation_context(self, character: Character) -> str:
        """Context asking for a situation payload."""
        body = PromptBuilder.format_prompt(self._situation_prompt, state=self._state_json(character))
        return self._finish(body, character, SituationPayload)

    def build_outcome_context(self, character: Character, situation: SituationPayload, choice: str) -> str:
        """Context asking for the outcome of the player's answer to a situation."""
        body = PromptBuilder.format_prompt(
            self._outcome_prompt,
            situation=situation.text,
            options="\n".join(f"- {option}" for option in situation.options),
            choice=choice,
            state=self._state_json(character),
            **self._stat_rules(),
        )
        return self._finish(body, character, OutcomePayload)

    def build_event_context(self, character: Character) -> str:
        """Context asking for a standalone event (outcome-shaped payload)."""
        body = PromptBuilder.format_prompt(
            self._event_prompt,
            state=self._state_json(character),
            **self._stat_rules(),
        )
        return self._finish(body, character, OutcomePayload)

    def _finish(self, body: str, character: Character, schema: type[BaseModel]) -> str:
        history = self.recent_history(character)
        continuity = ""
        if history:
            continuity = PromptBuilder.format_prompt(
                self._history_prompt, history="\n".join(f"- {entry}" for entry in history)
            )
        schema_section = PromptBuilder.format_prompt(
            self._schema_prompt, schema=json.dumps(schema.model_json_schema(), indent=2)
        )
        return PromptBuilder.join_sections(body, continuity, schema_section)

    def _state_json(self, character: Character) -> str:
        return json.dumps(self.serialize_character(character), indent=2)

    def _stat_rules(self) -> dict[str, Any]:
        return {
            "stat_names": ", ".join(STAT_NAMES),
            "max_change": self.max_stat_change,
            "bounded": ", ".join(BOUNDED_STATS),
            "low": STAT_MIN,
            "high": STAT_MAX,
        }
