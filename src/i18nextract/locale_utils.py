"""Locale utilities for configured catalog locales.

Locales name output directories, so they are kept exactly as configured.
Normalization to POSIX form happens only for the Babel lookup that checks
a locale is real.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def validate_locale(locale_code: str) -> str:
    """Check that locale_code is a safe directory name and a known locale.

    Args:
        locale_code: Configured locale, e.g. "en" or "pt-BR"

    Returns:
        locale_code unchanged

    Raises:
        ValueError: If the code is empty, contains path components, or is
            not recognized by Babel
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not locale_code or not locale_code.strip():
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if "/" in locale_code or "\\" in locale_code:
        msg = f"Path separators not allowed in locale code: '{locale_code}'"
        raise ValueError(msg)
    if ".." in locale_code:
        msg = f"Path traversal sequences not allowed in locale code: '{locale_code}'"
        raise ValueError(msg)
    try:
        get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        msg = f"Unknown locale: '{locale_code}'"
        raise ValueError(msg) from e
    return locale_code
