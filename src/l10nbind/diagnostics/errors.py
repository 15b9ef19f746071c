"""l10nbind exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Hierarchy:
    L10nError (base)
    ├─ ResourceLoadError (aborts the current load/localize call)
    │  ├─ FetchError
    │  ├─ ParseError
    │  ├─ LocaleNotFoundError
    │  ├─ MalformedResourceError
    │  └─ RedirectCycleError
    └─ BindingError (isolated to one element or string)
       ├─ ArgumentParseError
       ├─ MissingArgumentOrKeyError
       └─ NoTranslatableTextError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArgumentParseError",
    "BindingError",
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


class L10nError(Exception):
    """Base exception for all l10nbind errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L10nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ResourceLoadError(L10nError):
    """Loading a translation resource failed.

    Fatal to the load() or localize() call in progress, never to the
    session: a later call may succeed.

    Attributes:
        resource_id: Resource being processed when the failure occurred
        locale: Locale being loaded
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        resource_id: str = "",
        locale: str = "",
    ) -> None:
        """Initialize ResourceLoadError.

        Args:
            message: Error message string OR Diagnostic object
            resource_id: Resource being processed
            locale: Locale being loaded
        """
        super().__init__(message)
        self.resource_id = resource_id
        self.locale = locale


class FetchError(ResourceLoadError):
    """Transport failure, non-success status, or fetch timeout."""


class ParseError(ResourceLoadError):
    """Resource body is not a JSON object."""


class LocaleNotFoundError(ResourceLoadError):
    """Resource has no entry for the requested locale."""


class MalformedResourceError(ResourceLoadError):
    """Locale entry is neither a redirect nor a flat string mapping.

    Also raised for empty or unresolvable redirects and redirect chains
    longer than LoaderConfig.max_redirect_depth.
    """


class RedirectCycleError(ResourceLoadError):
    """Redirect chain revisits a resource already being resolved.

    Example:
        a.json: {"en": "b.json"}
        b.json: {"en": "a.json"}  ← Infinite loop!
    """


class BindingError(L10nError):
    """Element- or string-level failure.

    Never propagated out of the binding layer: collected in ApplyReport or
    returned from resolve_placeholders(), and logged as a warning.
    """


class ArgumentParseError(BindingError):
    """Element argument attribute is not a JSON object.

    Fallback: translate with an empty argument bag.
    """


class MissingArgumentOrKeyError(BindingError):
    """Placeholder or key names neither an argument nor a translation key.

    Fallback: substitution stops; the rest of the string is left verbatim.
    """


class NoTranslatableTextError(BindingError):
    """Element with child elements contains no non-blank text node.

    Fallback: element left unchanged.
    """
