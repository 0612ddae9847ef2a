"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used by the negotiator and by
content implementations. Request parameters arrive in BCP-47 form (en-US)
while Babel and most content stores use POSIX form (en_US).

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "locale_key",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Surrounding whitespace is removed; case is preserved.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


def locale_key(locale_code: str) -> str:
    """Return the case-insensitive comparison key for a locale code.

    Locale tags are case-insensitive, so "en_US", "en-us" and "EN_us"
    share the key "en_us".

    Example:
        >>> locale_key("en-US")
        'en_us'
    """
    return normalize_locale(locale_code).lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)


def clear_locale_cache() -> None:
    """Clear the parsed Babel locale cache."""
    get_babel_locale.cache_clear()
