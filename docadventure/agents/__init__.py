"""Agents package: the content generator boundary and the context sent to it."""

from docadventure.agents.context_builder import TurnContextBuilder
from docadventure.agents.generator import ContentGenerator, LLMContentGenerator

__all__ = [
    "ContentGenerator",
    "LLMContentGenerator",
    "TurnContextBuilder",
]
