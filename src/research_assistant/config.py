"""
Configuration utilities for the Research Paper Assistant.

Central place to configure:
- Backend base URL (used by the Streamlit UI)
- Chat-completion endpoint, models and generation limits
- Optional server-side API key and log level

Every value has a default and can be overridden from the environment.
"""

import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    # Base URL where the FastAPI backend is running.
    api_base_url: str = os.getenv("RESEARCH_API_BASE_URL", "http://localhost:8000")

    # Chat-completion API (OpenAI compatible)
    openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    chat_completions_path: str = "/chat/completions"
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY") or None
    request_timeout: float = 120.0

    # Model tiers per research mode
    basic_model: str = os.getenv("RESEARCH_BASIC_MODEL", "gpt-3.5-turbo")
    advanced_model: str = os.getenv("RESEARCH_ADVANCED_MODEL", "gpt-4")

    # Generation parameters
    temperature: float = 0.7
    title_max_tokens: int = 100
    section_max_tokens: int = 2000

    log_level: str = os.getenv("RESEARCH_LOG_LEVEL", "INFO")

    @property
    def chat_completions_url(self) -> str:
        return f"{self.openai_base_url.rstrip('/')}{self.chat_completions_path}"


settings = Settings()
