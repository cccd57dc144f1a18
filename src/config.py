"""Configuration for the claim processing pipeline."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Pipeline settings read from the environment."""

    google_api_key: Optional[str] = None
    llm_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.0
    llm_max_retries: int = 3
    max_file_size_mb: int = 10

    def require_api_key(self) -> str:
        """Return the Gemini API key.

        Raises:
            ValueError: If GOOGLE_API_KEY environment variable is not set
        """
        if not self.google_api_key:
            raise ValueError(
                "GOOGLE_API_KEY environment variable is not set. "
                "Get your API key from https://aistudio.google.com/app/apikey"
            )
        return self.google_api_key


def load_settings() -> Settings:
    """Load settings from environment variables.

    Returns:
        Settings populated from FNOL_* variables and GOOGLE_API_KEY

    Raises:
        ValueError: If a numeric setting cannot be parsed or is out of range
    """
    settings = Settings(
        google_api_key=os.environ.get("GOOGLE_API_KEY"),
        llm_model=os.environ.get("FNOL_LLM_MODEL", Settings.llm_model),
        llm_temperature=_env_number("FNOL_LLM_TEMPERATURE", Settings.llm_temperature, float),
        llm_max_retries=_env_number("FNOL_LLM_MAX_RETRIES", Settings.llm_max_retries, int),
        max_file_size_mb=_env_number("FNOL_MAX_FILE_SIZE_MB", Settings.max_file_size_mb, int),
    )
    if settings.llm_max_retries < 1:
        raise ValueError("FNOL_LLM_MAX_RETRIES must be at least 1")
    if settings.max_file_size_mb < 1:
        raise ValueError("FNOL_MAX_FILE_SIZE_MB must be at least 1")
    return settings


def _env_number(name, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
