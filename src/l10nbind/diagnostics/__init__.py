"""Diagnostic system for l10nbind errors.

Provides structured error diagnostics with codes, hints, and the exception
hierarchy raised by the loader and collected by the binding layer.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArgumentParseError,
    BindingError,
    FetchError,
    L10nError,
    LocaleNotFoundError,
    MalformedResourceError,
    MissingArgumentOrKeyError,
    NoTranslatableTextError,
    ParseError,
    RedirectCycleError,
    ResourceLoadError,
)
from .templates import ErrorTemplate

__all__ = [
    "ArgumentParseError",
    "BindingError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FetchError",
    "L10nError",
    "LocaleNotFoundError",
    "MalformedResourceError",
    "MissingArgumentOrKeyError",
    "NoTranslatableTextError",
    "ParseError",
    "RedirectCycleError",
    "ResourceLoadError",
]
