"""Central configuration defaults and constants for DocAdventure."""

import os

# LLM Provider Defaults
DEFAULT_LLM_PROVIDER = os.getenv("DOCADVENTURE_LLM_PROVIDER", "openai")
DEFAULT_OLLAMA_BASE_URL = os.getenv("DOCADVENTURE_OLLAMA_BASE_URL", "http://localhost:11434/")
DEFAULT_OPENAI_BASE_URL = os.getenv("DOCADVENTURE_OPENAI_BASE_URL", "https://api.openai.com/v1")
DEFAULT_OPENAI_API_KEY = os.getenv("DOCADVENTURE_OPENAI_API_KEY", "")
DEFAULT_LLM_BASE_URL = os.getenv("DOCADVENTURE_LLM_BASE_URL") or None  # None means "provider default"
DEFAULT_LLM_MODEL = os.getenv("DOCADVENTURE_LLM_MODEL", "gpt-4o-mini")
DEFAULT_LLM_TEMPERATURE = float(os.getenv("DOCADVENTURE_LLM_TEMPERATURE", "0.9"))
DEFAULT_LLM_TIMEOUT = int(os.getenv("DOCADVENTURE_LLM_TIMEOUT", "60"))
DEFAULT_LLM_NUM_CTX = int(os.getenv("DOCADVENTURE_LLM_NUM_CTX", str(2**13)))  # 8192 tokens context window

# Ollama API Key (Ollama doesn't require real API key, but some libraries expect it)
DEFAULT_OLLAMA_API_KEY = os.getenv("DOCADVENTURE_OLLAMA_API_KEY", "ollama")

# Character Defaults
DEFAULT_STARTING_AGE = int(os.getenv("DOCADVENTURE_STARTING_AGE", "5"))
DEFAULT_STARTING_RICE_PURITY = 100
DEFAULT_JOB = "Student"
DEFAULT_MARITAL_STATUS = "Single"

# Turn Draw Defaults
DEFAULT_SITUATION_PROBABILITY = float(os.getenv("DOCADVENTURE_SITUATION_PROBABILITY", "0.7"))

# Context Defaults
DEFAULT_HISTORY_CONTEXT_LIMIT = int(os.getenv("DOCADVENTURE_HISTORY_CONTEXT_LIMIT", "10"))  # Last N player inputs for context
DEFAULT_MAX_STAT_CHANGE = 10  # Soft contract for generated stat moves, never enforced on parse

# Player Input
DEFAULT_MAX_INPUT_LENGTH = int(os.getenv("DOCADVENTURE_MAX_INPUT_LENGTH", "1000"))
AFFIRMATIVE_ANSWERS = frozenset({"yes", "y", "yeah", "yep", "sure", "ok", "okay", "ready"})

# In-world messages
GENERATION_FAILURE_MESSAGE = os.getenv(
    "DOCADVENTURE_GENERATION_FAILURE_MESSAGE",
    "The fates are silent for a moment. Life goes on...",
)
SCHEMA_ERROR_MESSAGE = os.getenv(
    "DOCADVENTURE_SCHEMA_ERROR_MESSAGE",
    "Your memory of that moment is hazy. Life goes on...",
)

# Web Sessions
DEFAULT_SESSION_POLL_INTERVAL = float(os.getenv("DOCADVENTURE_SESSION_POLL_INTERVAL", "0.5"))  # Seconds between shutdown checks
