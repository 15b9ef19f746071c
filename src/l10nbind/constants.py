"""Shared constants for l10nbind.

Centralized defaults used by the configuration dataclasses, the loader,
and the binding layer. Placing them here avoids circular imports between
the localization and runtime packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Loader limits
    "DEFAULT_FETCH_TIMEOUT",
    "MAX_REDIRECT_DEPTH",
    # Markup contract
    "DEFAULT_KEY_ATTRIBUTE",
    "DEFAULT_ARGS_ATTRIBUTE",
    "DEFAULT_TARGET",
    "ATTRIBUTE_WHITELIST",
    "RESOURCE_MEDIA_TYPE",
    # Placeholder syntax
    "PLACEHOLDER_PATTERN",
]

# ============================================================================
# LOADER LIMITS
# ============================================================================

# Seconds to wait for a single resource fetch before failing the load.
# Resource files are small and static; a stalled request is a transport fault.
DEFAULT_FETCH_TIMEOUT: float = 5.0

# Maximum redirect hops followed for one locale within one resource chain.
# Chains this long are malformed even when they do not cycle.
MAX_REDIRECT_DEPTH: int = 16

# ============================================================================
# MARKUP CONTRACT
# ============================================================================

DEFAULT_KEY_ATTRIBUTE: str = "data-l10n-id"
DEFAULT_ARGS_ATTRIBUTE: str = "data-l10n-args"

# Write target used when the key carries no whitelisted suffix.
DEFAULT_TARGET: str = "textContent"

# Key suffixes (after the last dot) that redirect the write target.
ATTRIBUTE_WHITELIST: frozenset[str] = frozenset({"title", "innerHTML", "alt", "textContent"})

# <link type="..."> value marking a translation resource declaration.
RESOURCE_MEDIA_TYPE: str = "application/l10n+json"

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================

# {{ key }} with ASCII letters and dots, optional inner whitespace.
PLACEHOLDER_PATTERN: str = r"\{\{\s*([a-zA-Z.]+)\s*\}\}"
