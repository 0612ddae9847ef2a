"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "LocaleCode",
    "LocalePredicate",
]

type LocaleCode = str
"""Locale tag as offered by content (e.g., 'en', 'en_US', 'zh_Hans_CN')."""

type LocalePredicate = Callable[[LocaleCode], bool]
"""'Has locale' check supplied by content."""
