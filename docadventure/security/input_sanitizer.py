"""Input sanitization for player text."""

import re
import unicodedata

from docadventure.config import DEFAULT_MAX_INPUT_LENGTH


class InputSanitizer:
    """Sanitizes player input before it is committed to history and sent to the generator."""

    # Special tokens that could be used for prompt injection
    DANGEROUS_TOKENS = [
        "{",
        "}",
        "<|",
        "|>",
        "[INST]",
        "[/INST]",
        "<|im_start|>",
        "<|im_end|>",
        "<|system|>",
        "<|user|>",
        "<|assistant|>",
        "<<SYS>>",
        "<</SYS>>",
        "[SYSTEM]",
        "[/SYSTEM]",
        "```",
    ]

    def __init__(self, max_length: int = DEFAULT_MAX_INPUT_LENGTH) -> None:
        """Initialize sanitizer with configurable limits."""
        self.max_length = max_length

    def sanitize(self, input_text: str) -> str:
        """
        Sanitize input text by:
        1. Normalizing unicode
        2. Stripping dangerous tokens
        3. Collapsing line breaks (a committed input is one line)
        4. Truncating to max length
        5. Stripping whitespace
        """
        if not isinstance(input_text, str):
            raise TypeError(f"Input must be a string, got {type(input_text)}")

        # Normalize unicode (NFKC: compatibility decomposition + composition)
        normalized = unicodedata.normalize("NFKC", input_text)

        # Longer tokens first so "<|system|>" is not left as "system" by the "<|" rule
        sanitized = normalized
        for token in sorted(self.DANGEROUS_TOKENS, key=len, reverse=True):
            sanitized = sanitized.replace(token, "")

        # Remove control characters, then fold line breaks and tabs into spaces
        sanitized = re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", sanitized)
        sanitized = re.sub(r"[\r\n\t]+", " ", sanitized)

        # Truncate to max length
        if len(sanitized) > self.max_length:
            sanitized = sanitized[: self.max_length]

        return sanitized.strip()

    @staticmethod
    def is_affirmative(input_text: str, answers: frozenset[str]) -> bool:
        """Whether the text is one of the accepted affirmative answers (case-insensitive)."""
        return input_text.strip().lower().rstrip("!.") in answers
