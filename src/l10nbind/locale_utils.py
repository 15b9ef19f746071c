"""Locale helpers backed by Babel.

The engine treats locale codes as opaque strings: resource documents are
looked up with the code exactly as the caller supplied it. These helpers
exist for diagnostics and for hosts that need a default locale.

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "is_known_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("fr-CA")
        'fr_CA'
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


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel recognizes a locale code.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        True if Babel has CLDR data for the locale, False otherwise

    Example:
        >>> is_known_locale("fr-CA")
        True
        >>> is_known_locale("xx-nope")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    The result is returned in BCP-47 form (``de-DE``), matching the keys
    resource documents are usually written with. "C" and "POSIX"
    pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en" as fallback.

    Returns:
        Detected locale code, or "en" if not determinable

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return system_locale.split(".")[0].replace("_", "-")
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return value.split(".")[0].replace("_", "-")

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en"
