"""Slug generation through an OpenAI-compatible chat completions API.

Works with OpenAI itself and any server implementing /chat/completions
(Azure-style gateways, vLLM, LM Studio, Ollama's /v1 endpoints, ...).
"""

import logging
import re
from collections.abc import Sequence

import httpx

from spec_cli.constants import MAX_SLUG_LENGTH
from spec_cli.exceptions import GeneratorBackendError

logger = logging.getLogger(__name__)


SLUG_PROMPT = (
    "Generate a kebab-case slug (lowercase letters, numbers, and hyphens) "
    "from the following description. The slug should be:\n"
    """- Maximum {max_length} characters
- Only lowercase letters, numbers, and hyphens
- Descriptive and concise
- No special characters or spaces

Description: {description}
{existing_context}
Return only the slug itself, nothing else."""
)

EXISTING_SLUGS_NOTE = (
    "\nNote: The following slugs are already taken: {slugs}. "
    "Please generate a different slug.\n"
)

FEEDBACK_NOTE = (
    "\n\nPrevious attempt failed: {feedback}. "
    "Please correct the slug according to the requirements."
)

# Patterns for reasoning model chain-of-thought tokens.
# Order matters: try the most specific patterns first.
_REASONING_PATTERNS = [
    # <think>...</think>answer  (DeepSeek, Qwen, GLM, many others)
    re.compile(r"<think>[\s\S]*?</think>\s*", re.IGNORECASE),
    # <reasoning>...</reasoning>answer
    re.compile(r"<reasoning>[\s\S]*?</reasoning>\s*", re.IGNORECASE),
]


def build_prompt(description: str, excluded: Sequence[str], feedback: str | None = None) -> str:
    """Render the slug request sent to the model.

    Args:
        description: Feature description.
        excluded: Slugs the model should avoid.
        feedback: Why the previous candidate was rejected.

    Returns:
        Prompt text.
    """
    existing_context = ""
    if excluded:
        existing_context = EXISTING_SLUGS_NOTE.format(slugs=", ".join(excluded))

    prompt = SLUG_PROMPT.format(
        max_length=MAX_SLUG_LENGTH,
        description=description,
        existing_context=existing_context,
    )
    if feedback:
        prompt += FEEDBACK_NOTE.format(feedback=feedback)
    return prompt


def clean_model_output(raw_output: str) -> str:
    """Strip reasoning blocks, whitespace and wrapping quotes from a reply.

    No other normalization happens here; the retry controller decides
    whether the result is a valid slug.
    """
    text = raw_output
    for pattern in _REASONING_PATTERNS:
        stripped = pattern.sub("", text).strip()
        if stripped and stripped != text.strip():
            logger.debug(f"Stripped reasoning tokens ({len(text)} → {len(stripped)} chars)")
            text = stripped
            break
    return text.strip().strip("\"'`").strip()


class OpenAICompatGenerator:
    """Slug generator backed by a hosted chat model.

    Satisfies the SlugGenerator protocol.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 8.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the generator.

        Args:
            api_key: Bearer token for the API.
            model: Model identifier.
            base_url: API base URL including the /v1 segment.
            timeout: Request timeout in seconds.
            client: Optional preconfigured httpx client (used by tests).
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with auth."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def generate(
        self,
        description: str,
        excluded: Sequence[str],
        feedback: str | None = None,
    ) -> str:
        """Ask the model for a slug.

        Raises:
            GeneratorBackendError: On network errors, timeouts, non-200
                responses and replies without message content.
        """
        prompt = build_prompt(description, excluded, feedback)

        try:
            response = self._client.post(
                f"{self.base_url}/chat/completions",
                headers=self._get_headers(),
                json={
                    "model": self.model,
                    "messages": [{"role": "user", "content": prompt}],
                    "temperature": 0,
                },
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise GeneratorBackendError(
                f"LLM request timed out after {self.timeout * 1000:.0f}ms"
            ) from e
        except httpx.HTTPError as e:
            raise GeneratorBackendError(f"LLM request failed: {e}") from e

        if response.status_code != 200:
            logger.debug(f"Response body: {response.text[:500]}")
            raise GeneratorBackendError(f"LLM API returned {response.status_code}")

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GeneratorBackendError("LLM API returned an unexpected response") from e

        if not isinstance(content, str):
            raise GeneratorBackendError("LLM API returned no message content")

        candidate = clean_model_output(content)
        logger.debug(f"Model proposed slug {candidate!r}")
        return candidate

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
