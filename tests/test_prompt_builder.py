"""Tests for PromptBuilder."""

from langchain_core.prompts import PromptTemplate

from docadventure.security.prompt_builder import PromptBuilder


class TestPromptBuilder:
    """Test suite for PromptBuilder."""

    def test_create_prompt(self):
        """Test creation of a prompt template."""
        prompt = PromptBuilder.create_prompt("Hello {name}")
        assert isinstance(prompt, PromptTemplate)
        assert prompt.input_variables == ["name"]

    def test_format_prompt(self):
        """Test formatting of a prompt template."""
        prompt = PromptBuilder.create_prompt("  Hello {name}  \n")
        assert PromptBuilder.format_prompt(prompt, name="World") == "Hello World"

    def test_format_prompt_keeps_braces_in_values(self):
        """Test that braces inside values are substituted verbatim."""
        prompt = PromptBuilder.create_prompt("State: {state}")
        formatted = PromptBuilder.format_prompt(prompt, state='{"age": 5}')
        assert formatted == 'State: {"age": 5}'

    def test_join_sections(self):
        """Test that empty sections are skipped."""
        joined = PromptBuilder.join_sections(" first ", "", "   ", "second\n")
        assert joined == "first\n\nsecond"
