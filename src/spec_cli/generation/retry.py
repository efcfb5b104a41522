"""Retry loop around a slug generator.

SlugRetryController asks a SlugGenerator for candidates until one is well
formed and not already excluded, feeding the reason for each rejection back
into the next request. Between attempts it sleeps for an exponentially
growing delay. The loop is a small explicit state machine:

    ATTEMPTING -> SUCCEEDED | RETRYING | EXHAUSTED
    RETRYING   -> ATTEMPTING

Failure provenance is kept distinct:
    - GenerationExhausted: every attempt returned an invalid or excluded slug
    - TransportFailure: the backend call failed on the final attempt
"""

import logging
import time
from collections.abc import Callable, Sequence

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.constants import BACKOFF_BASE_SECONDS
from spec_cli.exceptions import GenerationExhausted, GeneratorBackendError, TransportFailure
from spec_cli.generation.base import GenerationAttempt, SlugGenerator
from spec_cli.generation.validation import describe_rejection, validate_slug
from spec_cli.models.enums import RetryState

logger = logging.getLogger(__name__)

BackoffPolicy = Callable[[int], float]


def exponential_backoff(attempt: int, base_seconds: float = BACKOFF_BASE_SECONDS) -> float:
    """Delay before the attempt following ``attempt``: 2^attempt * base.

    Args:
        attempt: 1-based number of the attempt that just failed.
        base_seconds: Base delay (100ms by default).

    Returns:
        Delay in seconds.
    """
    return (2**attempt) * base_seconds


def no_backoff(attempt: int) -> float:
    """Backoff policy that never waits."""
    return 0.0


class SlugRetryController:
    """Generate a valid, non-excluded slug within a fixed attempt budget.

    Example:
        >>> controller = SlugRetryController(generator, max_attempts=3)
        >>> controller.generate("Add dark mode", excluded=["dark-mode"])
        'add-dark-mode'
    """

    def __init__(
        self,
        generator: SlugGenerator,
        max_attempts: int,
        backoff: BackoffPolicy = exponential_backoff,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the controller.

        Args:
            generator: Backend that proposes raw candidates.
            max_attempts: Attempt budget per generate() call. Zero or negative
                fails immediately without calling the backend.
            backoff: Maps a failed attempt number to a delay in seconds.
            sleep: Function used to wait between attempts.
        """
        self.generator = generator
        self.max_attempts = max_attempts
        self.backoff = backoff
        self.sleep = sleep
        self.state = RetryState.ATTEMPTING
        self.history: list[GenerationAttempt] = []

    def generate(self, description: str, excluded: Sequence[str]) -> str:
        """Return the first acceptable candidate from the generator.

        Args:
            description: Feature description passed through to the generator.
            excluded: Slugs the caller already knows are unusable.

        Returns:
            A slug that matches the grammar and is not in ``excluded``.

        Raises:
            GenerationExhausted: Budget consumed by invalid or excluded candidates,
                or a non-positive budget.
            TransportFailure: Backend call failed on the final attempt.
        """
        self.state = RetryState.ATTEMPTING
        self.history = []

        if self.max_attempts <= 0:
            self.state = RetryState.EXHAUSTED
            raise GenerationExhausted(
                ERROR_MESSAGES["generation_exhausted"].format(attempts=self.max_attempts),
                attempts=self.max_attempts,
            )

        excluded_list = list(excluded)
        excluded_lookup = set(excluded_list)
        last_reason: str | None = None

        for attempt in range(1, self.max_attempts + 1):
            self.state = RetryState.ATTEMPTING
            try:
                candidate = self.generator.generate(description, excluded_list, last_reason)
            except GeneratorBackendError as e:
                if attempt >= self.max_attempts:
                    self.state = RetryState.EXHAUSTED
                    logger.warning(f"Slug generation failed on final attempt {attempt}: {e}")
                    raise TransportFailure(
                        ERROR_MESSAGES["transport_failure"].format(
                            attempts=self.max_attempts, error=e.message
                        ),
                        attempts=self.max_attempts,
                        cause=e,
                    ) from e
                last_reason = e.message
                self._reject(attempt, None, last_reason)
                continue

            outcome = validate_slug(candidate)
            reason = describe_rejection(candidate, outcome)
            if reason is None and candidate in excluded_lookup:
                reason = f"Slug '{candidate}' already exists"

            if reason is None:
                self.history.append(GenerationAttempt(attempt, candidate))
                self.state = RetryState.SUCCEEDED
                logger.debug(f"Accepted slug '{candidate}' on attempt {attempt}")
                return candidate

            last_reason = reason
            self._reject(attempt, candidate, reason)

        self.state = RetryState.EXHAUSTED
        message = ERROR_MESSAGES["generation_exhausted"].format(attempts=self.max_attempts)
        if last_reason:
            message = f"{message}: {last_reason}"
        raise GenerationExhausted(message, attempts=self.max_attempts, last_reason=last_reason)

    def _reject(self, attempt: int, candidate: str | None, reason: str) -> None:
        """Record a failed attempt and wait before the next one."""
        self.history.append(GenerationAttempt(attempt, candidate, reason))
        logger.debug(f"Attempt {attempt}/{self.max_attempts} rejected {candidate!r}: {reason}")
        if attempt >= self.max_attempts:
            return
        self.state = RetryState.RETRYING
        delay = self.backoff(attempt)
        if delay > 0:
            self.sleep(delay)
