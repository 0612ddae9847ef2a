"""Shared constants for contentjson.

This module provides centralized configuration constants used across
the rendering, localization, and handler packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Request parameters: Names of the recognised request parameters
- Path expressions: Delimiters of the path mini-language
- Handlers and renderers: Defaults for handler ordering and renderer lookup
- Response messages: Fixed messages surfaced to clients

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Request parameters
    "PARAM_LOCALE",
    "PARAM_PATH",
    # Path expressions
    "PATH_DELIMITERS",
    "PATH_SPLIT_PATTERN",
    # Handlers and renderers
    "DEFAULT_HANDLER_ORDER",
    "DEFAULT_RENDERER_NAME",
    "FLAT_RENDERER_NAME",
    # Full document keys
    "KEY_ATTRIBUTES",
    "KEY_LINK",
    "KEY_LOCALES",
    "KEY_PATH",
    "KEY_PROPERTIES",
    # Response messages
    "MESSAGE_LOCALE_NOT_FOUND",
    "MESSAGE_NO_HANDLER",
    "MESSAGE_PATH_NOT_FOUND",
    "MESSAGE_PATH_REQUIRES_LOCALE",
]

# ============================================================================
# REQUEST PARAMETERS
# ============================================================================

# Names are part of the external interface and must not change.
PARAM_LOCALE: str = "locale"
PARAM_PATH: str = "path"

# ============================================================================
# PATH EXPRESSIONS
# ============================================================================

# Characters separating path tokens: "a/0/b" and "a[0]/b" address the same value.
PATH_DELIMITERS: str = "/[]"

# Regular expression source used with re.split() to tokenize a path.
PATH_SPLIT_PATTERN: str = f"[{re.escape(PATH_DELIMITERS)}]"

# ============================================================================
# HANDLERS AND RENDERERS
# ============================================================================

# Handlers in a chain are consulted in ascending order.
DEFAULT_HANDLER_ORDER: float = 100.0

# Registry identifiers of the built-in renderers.
DEFAULT_RENDERER_NAME: str = "default"
FLAT_RENDERER_NAME: str = "flat"

# ============================================================================
# FULL DOCUMENT KEYS
# ============================================================================

KEY_PROPERTIES: str = "properties"
KEY_ATTRIBUTES: str = "attributes"
KEY_LOCALES: str = "locales"
KEY_PATH: str = "path"
KEY_LINK: str = "link"

# ============================================================================
# RESPONSE MESSAGES
# ============================================================================

MESSAGE_PATH_REQUIRES_LOCALE: str = "path parameter requires locale parameter"
MESSAGE_LOCALE_NOT_FOUND: str = "Locale not found"
MESSAGE_PATH_NOT_FOUND: str = "Path not found"
MESSAGE_NO_HANDLER: str = "No JSON handler for resource"
