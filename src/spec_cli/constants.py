"""Constants for spec-cli.

This module contains:
- VERSION: Package version
- Slug grammar and limits
- Retry budgets and backoff timing

For paths, messages, and runtime settings, import from:
- spec_cli.config.paths
- spec_cli.config.messages
- spec_cli.config.settings

For type-safe enums, import from:
- spec_cli.models.enums
"""

import re

from spec_cli import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Slug Grammar
# =============================================================================

SLUG_PATTERN_TEXT = "[a-z0-9]+(-[a-z0-9]+)*"
SLUG_PATTERN = re.compile(rf"^{SLUG_PATTERN_TEXT}$")
MAX_SLUG_LENGTH = 50

# =============================================================================
# Retry Configuration
# =============================================================================

# Outer loop: candidates checked against docs, branches and scaffold paths
DEFAULT_UNIQUENESS_ATTEMPTS = 5

# Inner loop backoff: delay = 2^attempt * base
BACKOFF_BASE_SECONDS = 0.1

# =============================================================================
# Commit Messages
# =============================================================================

SCAFFOLD_COMMIT_MESSAGE = "feat({slug}): scaffold feature structure"

# =============================================================================
# Local Slug Generator
# =============================================================================

# Words dropped by the offline generator before building a slug
SLUG_STOPWORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "as",
        "for",
        "in",
        "of",
        "on",
        "or",
        "the",
        "to",
        "with",
    }
)
LOCAL_SLUG_MAX_WORDS = 5
LOCAL_SLUG_HASH_LENGTH = 6
