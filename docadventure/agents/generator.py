"""Content generator boundary and its LangChain implementation."""

import logging
from typing import Callable, Optional, Protocol, Union

from langchain.chat_models import BaseChatModel

from docadventure.errors import GenerationFailure
from docadventure.helpers.debug import log_call

logger = logging.getLogger(__name__)


class ContentGenerator(Protocol):
    """Opaque text generator: prompt text in, raw response text out.

    Implementations may block for as long as they need and raise
    GenerationFailure when the backing service is unavailable.
    """

    def generate(self, prompt_text: str) -> str:
        ...


class LLMContentGenerator:
    """ContentGenerator backed by a LangChain chat model."""

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        llm_getter: Optional[Callable[[], BaseChatModel]] = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            llm: Fixed LangChain chat model instance
            llm_getter: Called on every request instead, so hot-reloaded configs apply
        """
        if llm is None and llm_getter is None:
            raise ValueError("Either llm or llm_getter is required")
        self._llm = llm
        self._llm_getter = llm_getter

    def update_llm(self, llm: BaseChatModel) -> None:
        """Update the LLM instance (for hot-reconfiguration)."""
        self._llm = llm
        self._llm_getter = None

    @log_call
    def generate(self, prompt_text: str) -> str:
        """Invoke the model, converting every failure into GenerationFailure."""
        try:
            llm = self._llm if self._llm is not None else self._llm_getter()
            response = llm.invoke(prompt_text)
        except Exception as e:
            logger.warning(f"Content generation failed: {e}")
            raise GenerationFailure(str(e)) from e

        return self._extract_text(response.content if hasattr(response, "content") else response)

    @staticmethod
    def _extract_text(content: Union[str, list, object]) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            # Handle content blocks
            parts = []
            for item in content:
                if isinstance(item, dict):
                    parts.append(str(item.get("text", "")))
                else:
                    parts.append(str(item))
            return "".join(parts)
        return str(content)
