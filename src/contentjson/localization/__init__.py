"""Locale negotiation package.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, LocalePredicate)
    negotiator - negotiate_locale, parse_locale_tag, fallback_keys

Python 3.13+. Uses Babel for i18n.
"""

from contentjson.localization.negotiator import (
    fallback_keys,
    negotiate_locale,
    parse_locale_tag,
)
from contentjson.localization.types import LocaleCode, LocalePredicate

__all__ = [
    "LocaleCode",
    "LocalePredicate",
    "fallback_keys",
    "negotiate_locale",
    "parse_locale_tag",
]
