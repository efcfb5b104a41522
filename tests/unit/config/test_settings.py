"""Tests for generator settings and generator selection."""

import pytest

from spec_cli.config.settings import LLMSettings, get_llm_settings
from spec_cli.exceptions import ConfigurationError, PreconditionError
from spec_cli.generation.factory import create_generator
from spec_cli.generation.local import KeywordSlugGenerator
from spec_cli.generation.openai_compat import OpenAICompatGenerator
from spec_cli.models.enums import ExitCode

# =============================================================================
# LLMSettings
# =============================================================================


class TestLLMSettings:
    """Tests for reading LLMSettings from the environment."""

    def test_defaults(self) -> None:
        settings = get_llm_settings()
        assert settings.api_key is None
        assert settings.model == "gpt-5-mini"
        assert settings.base_url == "https://api.openai.com/v1"
        assert settings.timeout_ms == 8000
        assert settings.timeout_seconds == pytest.approx(8.0)
        assert settings.max_attempts == 3
        assert settings.provider == "openai"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:11434/v1")
        monkeypatch.setenv("SPEC_OPENAI_MODEL", "llama3")
        monkeypatch.setenv("SPEC_LLM_TIMEOUT_MS", "2500")
        monkeypatch.setenv("SPEC_LLM_MAX_ATTEMPTS", "5")

        settings = LLMSettings()
        assert settings.api_key == "sk-live"
        assert settings.base_url == "http://localhost:11434/v1"
        assert settings.model == "llama3"
        assert settings.timeout_seconds == pytest.approx(2.5)
        assert settings.max_attempts == 5

    def test_blank_api_key_is_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "   ")
        assert LLMSettings().api_key is None

    def test_blank_model_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEC_OPENAI_MODEL", "")
        assert LLMSettings().model == "gpt-5-mini"

    @pytest.mark.parametrize("raw", ["soon", "0", "-100", ""])
    def test_bad_timeout_falls_back(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("SPEC_LLM_TIMEOUT_MS", raw)
        assert LLMSettings().timeout_ms == 8000

    def test_non_numeric_attempts_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEC_LLM_MAX_ATTEMPTS", "many")
        assert LLMSettings().max_attempts == 3

    def test_unknown_provider_is_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SPEC_LLM_PROVIDER", "anthropic")

        with pytest.raises(ConfigurationError) as exc_info:
            get_llm_settings()

        assert exc_info.value.message.startswith("Invalid generator settings: ")
        assert "provider" in exc_info.value.message.lower()
        assert "'local'" in exc_info.value.message
        assert exc_info.value.exit_code == ExitCode.CONFIG_ERROR

    @pytest.mark.parametrize("raw,expected", [("0", 0), ("-2", -2)])
    def test_non_positive_attempts_are_kept(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
    ) -> None:
        monkeypatch.setenv("SPEC_LLM_MAX_ATTEMPTS", raw)
        assert LLMSettings().max_attempts == expected

    def test_provider_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEC_LLM_PROVIDER", "LOCAL")
        assert LLMSettings().provider == "local"


# =============================================================================
# create_generator()
# =============================================================================


class TestCreateGenerator:
    """Tests for picking a generator from settings."""

    def test_local_provider_needs_no_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEC_LLM_PROVIDER", "local")
        assert isinstance(create_generator(LLMSettings()), KeywordSlugGenerator)

    def test_missing_key_is_llm_precondition(self) -> None:
        with pytest.raises(PreconditionError) as exc_info:
            create_generator(LLMSettings())
        assert exc_info.value.exit_code == ExitCode.LLM_ERROR
        assert "OPENAI_API_KEY" in exc_info.value.message

    def test_hosted_provider_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
        monkeypatch.setenv("SPEC_LLM_TIMEOUT_MS", "1500")

        generator = create_generator(LLMSettings())
        try:
            assert isinstance(generator, OpenAICompatGenerator)
            assert generator.api_key == "sk-live"
            assert generator.model == "gpt-5-mini"
            assert generator.timeout == pytest.approx(1.5)
        finally:
            generator.close()
