"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic message carried by every
l10nbind exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resource loading errors (fatal to the current localize call)
        2000-2999: Substitution errors (per string)
        3000-3999: Binding errors (per element)
    """

    # Resource loading errors (1000-1999)
    FETCH_FAILED = 1001
    FETCH_TIMEOUT = 1002
    RESOURCE_NOT_JSON = 1003
    RESOURCE_NOT_OBJECT = 1004
    LOCALE_NOT_FOUND = 1005
    TRANSLATIONS_NOT_FLAT = 1006
    REDIRECT_EMPTY = 1007
    REDIRECT_CYCLE = 1008
    REDIRECT_DEPTH_EXCEEDED = 1009
    REDIRECT_INVALID = 1010

    # Substitution errors (2000-2999)
    PLACEHOLDER_UNRESOLVED = 2001
    KEY_NOT_FOUND = 2002

    # Binding errors (3000-3999)
    ARGUMENTS_INVALID = 3001
    NO_TRANSLATABLE_TEXT = 3002


def _escape_control_chars(text: str) -> str:
    """Escape newlines and other control characters (log injection prevention)."""
    return "".join(
        ch if ch.isprintable() or ch == " " else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        resource_id: Resource involved (loading errors)
        locale: Locale involved (loading errors)
        key: Translation key or placeholder involved (substitution/binding errors)
        severity: Error severity level
        redirect_chain: Resources visited before the error (redirect errors)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    resource_id: str | None = None
    locale: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"
    redirect_chain: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in a multi-line, compiler-style layout.

        Example output:
            error[LOCALE_NOT_FOUND]: Resource 'app.json' has no entry for locale 'fr'
              --> app.json
              = locale: fr
              = help: Add a 'fr' entry or remove the locale from the fallback list

        Returns:
            Formatted error message with control characters escaped
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control_chars(self.message)}"]
        if self.resource_id is not None:
            lines.append(f"  --> {_escape_control_chars(self.resource_id)}")
        if self.locale is not None:
            lines.append(f"  = locale: {_escape_control_chars(self.locale)}")
        if self.key is not None:
            lines.append(f"  = key: {_escape_control_chars(self.key)}")
        if self.redirect_chain:
            chain = " -> ".join(_escape_control_chars(r) for r in self.redirect_chain)
            lines.append(f"  = chain: {chain}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape_control_chars(self.hint)}")
        return "\n".join(lines)
