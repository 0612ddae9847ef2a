"""Locale negotiation against the locales a content offers.

Selects the best available locale for a requested tag by trimming the
tag itself, most specific form first:

    1. exact match (case-insensitive, BCP-47 and POSIX spellings equal)
    2. language and territory, variant dropped ('en_US_POSIX' -> 'en_US')
    3. language only ('en_US' -> 'en')

The ladder only moves toward less specific tags. A request for 'de' never
selects 'de_DE', and no default or secondary locales are tried: 'de'
against {'en', 'fr'} yields None rather than the first available locale.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from contentjson.locale_utils import get_babel_locale, locale_key

from .types import LocaleCode, LocalePredicate

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["fallback_keys", "negotiate_locale", "parse_locale_tag"]

logger = logging.getLogger(__name__)


def _parse(requested: str) -> Locale | None:
    if not requested or not requested.strip():
        return None
    try:
        return get_babel_locale(requested)
    except (ValueError, TypeError, UnknownLocaleError) as e:
        logger.debug("Unparseable locale tag %r: %s", requested, e)
        return None


def parse_locale_tag(requested: str) -> LocaleCode | None:
    """Parse a requested locale tag into canonical POSIX form.

    Args:
        requested: Raw locale tag (e.g., 'en-us', 'de_DE', 'zh-Hans-CN')

    Returns:
        Canonical tag (e.g., 'en_US'), or None if Babel does not know it

    Example:
        >>> parse_locale_tag("en-us")
        'en_US'
        >>> parse_locale_tag("xx") is None
        True
    """
    locale = _parse(requested)
    return None if locale is None else str(locale)


def fallback_keys(requested: str) -> tuple[str, ...]:
    """Comparison keys tried for a requested tag, most specific first.

    Returns an empty tuple when Babel does not know the tag.

    Example:
        >>> fallback_keys("en-US-POSIX")
        ('en_us_posix', 'en_us', 'en')
    """
    locale = _parse(requested)
    if locale is None:
        return ()
    keys = [locale_key(requested), locale_key(str(locale))]
    if locale.territory:
        keys.append(locale_key(f"{locale.language}_{locale.territory}"))
    keys.append(locale_key(locale.language))
    return tuple(dict.fromkeys(keys))


def negotiate_locale(
    requested: str,
    available: Iterable[LocaleCode],
    *,
    has_locale: LocalePredicate | None = None,
) -> LocaleCode | None:
    """Select the best available locale for a requested tag.

    Args:
        requested: Raw locale tag from the request
        available: Locale tags the content offers
        has_locale: Optional 'has locale' check of the content. A matched tag
            failing this check is not trusted and yields None.

    Returns:
        The matched tag spelled as in ``available``, or None

    Example:
        >>> negotiate_locale("en-US", ["en", "de"])
        'en'
        >>> negotiate_locale("de", ["de_DE", "fr"]) is None
        True
    """
    keys = fallback_keys(requested)
    if not keys:
        return None

    by_key: dict[str, LocaleCode] = {}
    for tag in available:
        by_key.setdefault(locale_key(tag), tag)

    selected = next((by_key[key] for key in keys if key in by_key), None)
    if selected is None:
        logger.debug("No locale match for %r among %s", requested, list(by_key.values()))
        return None
    if has_locale is not None and not has_locale(selected):
        logger.warning("Negotiated locale %r rejected by content", selected)
        return None
    return selected
