"""Tests for LLM configuration."""

import pytest
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from docadventure.api.llm_config import LLMConfig, LLMConfigManager, create_llm
from docadventure.config import (
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_PROVIDER,
    DEFAULT_LLM_TEMPERATURE,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_SITUATION_PROBABILITY,
)


class TestConfigSmoke:
    """Smoke tests to validate LLM configuration is valid and can be used."""

    def test_config_imports_successfully(self):
        """Test that all config constants can be imported without errors."""
        assert DEFAULT_LLM_PROVIDER in ("openai", "ollama")
        assert DEFAULT_LLM_MODEL
        assert 0.0 <= DEFAULT_SITUATION_PROBABILITY <= 1.0

    def test_llm_config_defaults(self):
        """Test that LLMConfig picks up the defaults."""
        config = LLMConfig()
        assert config.provider == DEFAULT_LLM_PROVIDER
        assert config.model == DEFAULT_LLM_MODEL
        assert config.temperature == DEFAULT_LLM_TEMPERATURE
        assert config.timeout == DEFAULT_LLM_TIMEOUT
        assert config.json_mode is True

    def test_llm_config_rejects_bad_values(self):
        """Test validation of provider and temperature."""
        with pytest.raises(ValidationError):
            LLMConfig(provider="anthropic")
        with pytest.raises(ValidationError):
            LLMConfig(temperature=3.0)


class TestCreateLLM:
    """Test suite for create_llm."""

    def test_create_ollama(self):
        """Test that the ollama provider builds a ChatOllama in JSON mode."""
        llm = create_llm(LLMConfig(provider="ollama", model="llama3", base_url="http://localhost:11434/"))
        assert isinstance(llm, ChatOllama)
        assert llm.format == "json"

    def test_create_openai(self):
        """Test that the openai provider builds a ChatOpenAI in JSON mode."""
        llm = create_llm(LLMConfig(provider="openai", api_key="test-key"))
        assert isinstance(llm, ChatOpenAI)
        assert llm.model_kwargs["response_format"] == {"type": "json_object"}

    def test_create_openai_without_json_mode(self):
        """Test that JSON mode can be switched off."""
        llm = create_llm(LLMConfig(provider="openai", api_key="test-key", json_mode=False))
        assert "response_format" not in llm.model_kwargs


class TestLLMConfigManager:
    """Test suite for LLMConfigManager."""

    def test_lazy_creation(self):
        """Test that the model is only built on first use and then reused."""
        manager = LLMConfigManager(LLMConfig(provider="openai", api_key="test-key"))
        assert manager._llm_instance is None
        llm = manager.get_llm()
        assert manager.get_llm() is llm

    def test_update_config_resets_instance(self):
        """Test that updating the config rebuilds the model on next use."""
        manager = LLMConfigManager(LLMConfig(provider="openai", api_key="test-key"))
        first = manager.get_llm()
        manager.update_config(LLMConfig(provider="ollama", model="llama3"))
        assert manager.config.provider == "ollama"
        second = manager.get_llm()
        assert second is not first
        assert isinstance(second, ChatOllama)
