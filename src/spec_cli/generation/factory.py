"""Build the configured slug generator."""

import logging

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.config.settings import LLMSettings
from spec_cli.exceptions import PreconditionError
from spec_cli.generation.base import SlugGenerator
from spec_cli.generation.local import KeywordSlugGenerator
from spec_cli.generation.openai_compat import OpenAICompatGenerator
from spec_cli.models.enums import ExitCode

logger = logging.getLogger(__name__)


def create_generator(settings: LLMSettings) -> SlugGenerator:
    """Create a slug generator from settings.

    Args:
        settings: Generator settings read from the environment.

    Returns:
        Generator for the configured provider.

    Raises:
        PreconditionError: If the hosted provider is selected and no API key
            is set. Raised before any generation attempt.
    """
    if settings.provider == "local":
        logger.info("Using offline keyword slug generator")
        return KeywordSlugGenerator()

    if not settings.api_key:
        raise PreconditionError(ERROR_MESSAGES["missing_api_key"], exit_code=ExitCode.LLM_ERROR)

    logger.info(f"Using OpenAI-compatible slug generator with model {settings.model}")
    return OpenAICompatGenerator(
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
    )
