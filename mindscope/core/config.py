"""
Unified settings

Type-safe configuration with pydantic-settings
- loaded from environment variables (and `.env`)
- validated on load
- sensible defaults so the engine runs in template-only mode
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholder shipped in the sample `.env.local`
PLACEHOLDER_API_KEY = "your_groq_api_key_here"


class AISettings(BaseSettings):
    """LLM provider settings"""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(default="", alias="GROQ_API_KEY", description="Groq API key")
    base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        alias="AI_THERAPIST_BASE_URL",
        description="OpenAI-compatible endpoint",
    )
    model: str = Field(default="llama3-8b-8192", alias="AI_THERAPIST_MODEL")
    timeout: int = Field(default=30, alias="AI_THERAPIST_TIMEOUT", description="Request timeout (s)")

    # therapeutic profile
    max_tokens: int = Field(default=1000, alias="AI_THERAPIST_MAX_TOKENS")
    temperature: float = Field(default=0.7, alias="AI_THERAPIST_TEMPERATURE")
    history_window: int = Field(default=6, alias="AI_THERAPIST_HISTORY_WINDOW")

    # casual profile
    casual_max_tokens: int = Field(default=150, alias="AI_CASUAL_MAX_TOKENS")
    casual_temperature: float = Field(default=0.3, alias="AI_CASUAL_TEMPERATURE")
    casual_history_window: int = Field(default=4, alias="AI_CASUAL_HISTORY_WINDOW")

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    @field_validator("temperature", "casual_temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("temperature must be between 0.0 and 2.0")
        return v

    @property
    def is_configured(self) -> bool:
        """Whether a usable API key is present"""
        return (
            bool(self.api_key)
            and self.api_key != PLACEHOLDER_API_KEY
            and len(self.api_key) > 10
        )


class SecuritySettings(BaseSettings):
    """HTTP API security settings"""

    model_config = SettingsConfigDict(
        env_prefix="MINDSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # comma separated
    api_keys_str: str = Field(default="", alias="MINDSCOPE_API_KEYS", description="Accepted API keys")
    api_key_header: str = Field(default="X-API-Key", description="API key header name")

    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=60, description="Requests per window")
    rate_limit_window: int = Field(default=60, description="Window (s)")

    @property
    def api_keys(self) -> List[str]:
        if not self.api_keys_str:
            return []
        return [k.strip() for k in self.api_keys_str.split(",") if k.strip()]


class MindScopeSettings(BaseSettings):
    """Top-level settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    debug: bool = Field(default=False, alias="MINDSCOPE_DEBUG")
    log_level: str = Field(default="INFO", alias="MINDSCOPE_LOG_LEVEL")
    default_language: str = Field(default="en", alias="MINDSCOPE_DEFAULT_LANGUAGE")

    ai: AISettings = Field(default_factory=AISettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")

    @classmethod
    def load(cls) -> "MindScopeSettings":
        """Load settings including nested sections"""
        return cls(ai=AISettings(), security=SecuritySettings())


@lru_cache()
def get_settings() -> MindScopeSettings:
    """
    Cached settings

    Example:
        settings = get_settings()
        print(settings.ai.model)
    """
    return MindScopeSettings.load()


def reload_settings() -> MindScopeSettings:
    """Drop the cache and reload from the environment"""
    get_settings.cache_clear()
    return get_settings()
