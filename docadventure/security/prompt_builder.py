"""Prompt building using LangChain templates."""

from typing import Any

from langchain_core.prompts import PromptTemplate


class PromptBuilder:
    """Builds generator prompts using LangChain templates."""

    @staticmethod
    def create_prompt(template: str) -> PromptTemplate:
        """
        Create a prompt template.
        Game state and player text must only ever enter through template
        variables, never by concatenation into the template itself.
        """
        return PromptTemplate.from_template(template)

    @staticmethod
    def format_prompt(template: PromptTemplate, **kwargs: Any) -> str:
        """
        Format a prompt template with its variables.
        Values are substituted verbatim, so braces in player text or JSON
        are never interpreted as template fields.
        """
        return template.format(**kwargs).strip()

    @staticmethod
    def join_sections(*sections: str) -> str:
        """Join non-empty prompt sections with blank lines."""
        return "\n\n".join(section.strip() for section in sections if section and section.strip())
