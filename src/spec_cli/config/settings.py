"""Runtime configuration settings for spec-cli.

This module uses Pydantic Settings for configuration that comes from
environment variables (and the project's .env file, loaded by the CLI).
This provides:
- Type validation
- Environment variable support
- Default values
- Easy testing via dependency injection
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.exceptions import ConfigurationError

DEFAULT_LLM_MODEL = "gpt-5-mini"
DEFAULT_LLM_BASE_URL = "https://api.openai.com/v1"
DEFAULT_LLM_TIMEOUT_MS = 8000
DEFAULT_LLM_MAX_ATTEMPTS = 3


class GitSettings(BaseSettings):
    """Git operation settings.

    These settings control git command behavior.
    Can be overridden via environment variables with SPEC_GIT_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="SPEC_GIT_")

    command_timeout_seconds: float = Field(
        default=30.0,
        description="Git command timeout in seconds",
    )


class LLMSettings(BaseSettings):
    """Slug generator settings.

    The variable names follow the OpenAI conventions for the credential and
    endpoint, and the SPEC_ prefix for everything spec-cli owns:

        OPENAI_API_KEY          API credential (required for the openai provider)
        OPENAI_BASE_URL         OpenAI-compatible endpoint
        SPEC_OPENAI_MODEL       Model identifier
        SPEC_LLM_TIMEOUT_MS     Request timeout in milliseconds
        SPEC_LLM_MAX_ATTEMPTS   Attempts per slug generation
        SPEC_LLM_PROVIDER       "openai" (hosted) or "local" (offline keywords)
    """

    model_config = SettingsConfigDict(extra="ignore")

    api_key: str | None = Field(
        default=None,
        validation_alias="OPENAI_API_KEY",
        description="API credential for the hosted model",
    )
    base_url: str = Field(
        default=DEFAULT_LLM_BASE_URL,
        validation_alias="OPENAI_BASE_URL",
        description="OpenAI-compatible API base URL",
    )
    model: str = Field(
        default=DEFAULT_LLM_MODEL,
        validation_alias="SPEC_OPENAI_MODEL",
        description="Model identifier",
    )
    timeout_ms: int = Field(
        default=DEFAULT_LLM_TIMEOUT_MS,
        validation_alias="SPEC_LLM_TIMEOUT_MS",
        description="Network timeout in milliseconds",
    )
    max_attempts: int = Field(
        default=DEFAULT_LLM_MAX_ATTEMPTS,
        validation_alias="SPEC_LLM_MAX_ATTEMPTS",
        description="Attempts per generation; zero or negative disables generation",
    )
    provider: Literal["openai", "local"] = Field(
        default="openai",
        validation_alias="SPEC_LLM_PROVIDER",
        description="Slug generator backend",
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("model", mode="before")
    @classmethod
    def _default_model(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_LLM_MODEL
        return value

    @field_validator("timeout_ms", mode="before")
    @classmethod
    def _coerce_timeout(cls, value: Any) -> int:
        # Non-numeric and non-positive values fall back to the default
        parsed = _parse_int(value)
        if parsed is None or parsed <= 0:
            return DEFAULT_LLM_TIMEOUT_MS
        return parsed

    @field_validator("max_attempts", mode="before")
    @classmethod
    def _coerce_max_attempts(cls, value: Any) -> int:
        # Zero and negative budgets are honored; only garbage falls back
        parsed = _parse_int(value)
        if parsed is None:
            return DEFAULT_LLM_MAX_ATTEMPTS
        return parsed

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or "openai"
        return value

    @property
    def timeout_seconds(self) -> float:
        """Request timeout in seconds, as httpx expects it."""
        return self.timeout_ms / 1000


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def get_llm_settings() -> LLMSettings:
    """Read generator settings from the current environment.

    Raises:
        ConfigurationError: If a variable holds a value that cannot be used
            (e.g. an unknown SPEC_LLM_PROVIDER)
    """
    try:
        return LLMSettings()
    except ValidationError as e:
        details = ", ".join(
            f"{'.'.join(str(p) for p in item['loc'])}: {item['msg']}" for item in e.errors()
        )
        raise ConfigurationError(ERROR_MESSAGES["settings_invalid"].format(details=details)) from e


# Singleton instance for easy import
git_settings = GitSettings()
