"""Tests for environment configuration."""

import os
import pytest
from unittest.mock import patch

from src.config import Settings, load_settings


def test_load_settings_defaults():
    """Test defaults when only the API key is set."""
    with patch.dict(os.environ, {"GOOGLE_API_KEY": "test-key"}, clear=True):
        settings = load_settings()

    assert settings == Settings(google_api_key="test-key")
    assert settings.llm_model == "gemini-2.5-flash"
    assert settings.llm_max_retries == 3


def test_load_settings_overrides():
    """Test that FNOL_* variables override defaults."""
    env = {
        "GOOGLE_API_KEY": "test-key",
        "FNOL_LLM_MODEL": "gemini-2.5-pro",
        "FNOL_LLM_TEMPERATURE": "0.2",
        "FNOL_LLM_MAX_RETRIES": "5",
        "FNOL_MAX_FILE_SIZE_MB": "20",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    assert settings.llm_model == "gemini-2.5-pro"
    assert settings.llm_temperature == 0.2
    assert settings.llm_max_retries == 5
    assert settings.max_file_size_mb == 20


def test_load_settings_without_api_key():
    """Test that settings load without a key until one is required."""
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings()

    assert settings.google_api_key is None
    with pytest.raises(ValueError, match="GOOGLE_API_KEY environment variable is not set"):
        settings.require_api_key()


def test_load_settings_invalid_number():
    """Test that a non-numeric setting raises ValueError."""
    with patch.dict(os.environ, {"FNOL_LLM_MAX_RETRIES": "many"}, clear=True):
        with pytest.raises(ValueError, match="FNOL_LLM_MAX_RETRIES must be a number"):
            load_settings()


def test_load_settings_rejects_zero_retries():
    """Test that at least one extraction attempt is required."""
    with patch.dict(os.environ, {"FNOL_LLM_MAX_RETRIES": "0"}, clear=True):
        with pytest.raises(ValueError, match="at least 1"):
            load_settings()
