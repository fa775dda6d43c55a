"""Tests for TurnContextBuilder."""

import json

from docadventure.agents.context_builder import TurnContextBuilder
from docadventure.models.payloads import SituationPayload, TurnKind


class TestTurnContextBuilder:
    """Test suite for TurnContextBuilder."""

    def test_serialize_character(self, character):
        """Test the state the generator sees."""
        state = TurnContextBuilder.serialize_character(character)
        assert state["name"] == "Alice"
        assert state["age"] == 5
        assert state["stats"]["happiness"] == 90
        assert state["stats"]["ricePurityScore"] == 100
        assert state["achievements"] == []
        assert "history" not in state

    def test_situation_context_contents(self, character):
        """Test that the situation context carries state and schema."""
        context = TurnContextBuilder().build_situation_context(character)
        assert '"name": "Alice"' in context
        assert '"age": 5' in context
        assert '"happiness": 90' in context
        assert '"options"' in context  # schema
        assert "JSON" in context

    def test_no_continuity_without_history(self, character):
        """Test that the continuity section is omitted when history is empty."""
        context = TurnContextBuilder().build_event_context(character)
        assert "most recent responses" not in context

    def test_continuity_with_history(self, character):
        """Test that recent history is included."""
        character.commit_input("Take it")
        context = TurnContextBuilder().build_event_context(character)
        assert "most recent responses" in context
        assert "- Take it" in context

    def test_history_window(self, character):
        """Test that only the last history_limit entries are included."""
        for i in range(5):
            character.commit_input(f"answer {i}")
        builder = TurnContextBuilder(history_limit=2)
        assert builder.recent_history(character) == ["answer 3", "answer 4"]
        context = builder.build_situation_context(character)
        assert "answer 2" not in context
        assert "answer 4" in context

    def test_zero_history_window(self, character):
        """Test that a zero window drops continuity entirely."""
        character.commit_input("Take it")
        builder = TurnContextBuilder(history_limit=0)
        assert builder.recent_history(character) == []
        assert "Take it" not in builder.build_situation_context(character)

    def test_outcome_context_folds_in_choice(self, character, situation_payload):
        """Test that the outcome context carries the situation and the answer."""
        situation = SituationPayload.model_validate(situation_payload)
        context = TurnContextBuilder().build_outcome_context(character, situation, "Refuse")
        assert situation.text in context
        assert "- Tell the teacher" in context
        assert "The player answered: Refuse" in context
        assert "ricePurityScore" in context
        assert '"achievement"' in context  # schema

    def test_braces_in_player_text(self, character, situation_payload):
        """Test that braces in player text are substituted verbatim."""
        situation = SituationPayload.model_validate(situation_payload)
        context = TurnContextBuilder().build_outcome_context(character, situation, "say {hello}")
        assert "say {hello}" in context

    def test_build_dispatches_on_kind(self, character):
        """Test that build() picks the opening context by turn kind."""
        builder = TurnContextBuilder()
        assert builder.build(character, TurnKind.SITUATION) == builder.build_situation_context(character)
        assert builder.build(character, TurnKind.EVENT) == builder.build_event_context(character)

    def test_no_side_effects(self, character):
        """Test that building a context does not touch the character."""
        before = character.model_dump()
        TurnContextBuilder().build_event_context(character)
        assert character.model_dump() == before

    def test_schema_is_machine_readable(self, character):
        """Test that the embedded schema parses as JSON."""
        context = TurnContextBuilder().build_event_context(character)
        schema = json.loads(context.split("no text outside of it:", 1)[1])
        assert "stats" in schema["properties"]
