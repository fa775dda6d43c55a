"""Input sanitization, prompt building and response validation for DocAdventure."""

from docadventure.security.input_sanitizer import InputSanitizer
from docadventure.security.prompt_builder import PromptBuilder
from docadventure.security.response_validator import ResponseValidator

__all__ = [
    "InputSanitizer",
    "PromptBuilder",
    "ResponseValidator",
]
