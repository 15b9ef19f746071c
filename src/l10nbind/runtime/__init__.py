"""Runtime package: placeholder substitution and element binding.

Depends on the localization package only for type aliases.

Python 3.13+.
"""

from .binding import (
    ApplyReport,
    BindingApplier,
    BindingTarget,
    apply_bindings,
    parse_arguments,
    target_for_key,
)
from .substitution import format_argument, resolve_key, resolve_placeholders

__all__ = [
    "ApplyReport",
    "BindingApplier",
    "BindingTarget",
    "apply_bindings",
    "format_argument",
    "parse_arguments",
    "resolve_key",
    "resolve_placeholders",
    "target_for_key",
]
