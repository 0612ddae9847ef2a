"""Pytest configuration for the contentjson test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from contentjson.content import ContentDefinition, MappingContent, StaticMetadata
from contentjson.locale_utils import clear_locale_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_locale_cache() -> Iterator[None]:
    """Isolate the parsed locale cache between tests."""
    clear_locale_cache()
    yield
    clear_locale_cache()


@pytest.fixture
def article() -> MappingContent:
    """Two-locale article with nested values."""
    return MappingContent(
        ContentDefinition("article"),
        {
            "en": {"title": "Hello", "tags": ["a", "b"], "teaser": {"text": "Read on"}},
            "de": {"title": "Hallo", "tags": ["x"], "teaser": {"text": "Weiter"}},
        },
    )


@pytest.fixture
def metadata() -> StaticMetadata:
    """Resource metadata with one public and one internal property."""
    return StaticMetadata(
        resource_path="/sites/default/news/article.xml",
        resource_link="https://example.org/news/article.xml",
        resource_properties={"Title": "Article", "internal.note": "secret"},
        resource_attributes={"type": "article", "size": 512},
    )
