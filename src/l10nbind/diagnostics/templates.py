"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every template returns a Diagnostic, which the exception classes accept
    directly.
    """

    @staticmethod
    def fetch_failed(resource_id: str, reason: str) -> Diagnostic:
        """Transport-level fetch failure.

        Args:
            resource_id: Resource that could not be fetched
            reason: Transport error or HTTP status description

        Returns:
            Diagnostic for FETCH_FAILED
        """
        msg = f"Failed to load '{resource_id}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FETCH_FAILED,
            message=msg,
            hint="Check that the resource exists and is reachable",
            resource_id=resource_id,
        )

    @staticmethod
    def fetch_timeout(resource_id: str, timeout: float) -> Diagnostic:
        """Fetch did not complete within the configured timeout.

        Args:
            resource_id: Resource being fetched
            timeout: Timeout in seconds

        Returns:
            Diagnostic for FETCH_TIMEOUT
        """
        msg = f"Timed out after {timeout:g}s loading '{resource_id}'"
        return Diagnostic(
            code=DiagnosticCode.FETCH_TIMEOUT,
            message=msg,
            hint="Raise LoaderConfig.fetch_timeout or check the transport",
            resource_id=resource_id,
        )

    @staticmethod
    def resource_not_json(resource_id: str, reason: str) -> Diagnostic:
        """Resource body is not valid JSON.

        Args:
            resource_id: Resource whose body failed to decode
            reason: Decoder error description

        Returns:
            Diagnostic for RESOURCE_NOT_JSON
        """
        msg = f"Resource '{resource_id}' couldn't be parsed as JSON: {reason}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_JSON,
            message=msg,
            hint="Resource files must contain a single UTF-8 JSON object",
            resource_id=resource_id,
        )

    @staticmethod
    def resource_not_object(resource_id: str, type_name: str) -> Diagnostic:
        """Resource body decoded to something other than an object.

        Args:
            resource_id: Resource involved
            type_name: Python type name of the decoded value

        Returns:
            Diagnostic for RESOURCE_NOT_OBJECT
        """
        msg = f"Resource '{resource_id}' must be a JSON object keyed by locale, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_OBJECT,
            message=msg,
            hint='Use {"<locale>": {"key": "text"}} or {"<locale>": "other.json"}',
            resource_id=resource_id,
        )

    @staticmethod
    def locale_not_found(resource_id: str, locale: str) -> Diagnostic:
        """Resource has no entry for the requested locale.

        Args:
            resource_id: Resource involved
            locale: Locale that was requested

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        msg = f"Couldn't find translations for '{locale}' in '{resource_id}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint=f"Add a '{locale}' entry or remove the locale from the fallback list",
            resource_id=resource_id,
            locale=locale,
        )

    @staticmethod
    def translations_not_flat(resource_id: str, locale: str, detail: str) -> Diagnostic:
        """Locale entry is neither a redirect nor a flat string mapping.

        Args:
            resource_id: Resource involved
            locale: Locale entry that is malformed
            detail: What was wrong with the entry

        Returns:
            Diagnostic for TRANSLATIONS_NOT_FLAT
        """
        msg = f"Translations for '{locale}' in '{resource_id}' must be a flat object: {detail}"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATIONS_NOT_FLAT,
            message=msg,
            hint="Map each translation key to a string; nested objects are not supported",
            resource_id=resource_id,
            locale=locale,
        )

    @staticmethod
    def redirect_empty(resource_id: str, locale: str) -> Diagnostic:
        """Locale entry is an empty redirect string.

        Args:
            resource_id: Resource involved
            locale: Locale entry holding the empty redirect

        Returns:
            Diagnostic for REDIRECT_EMPTY
        """
        msg = f"Redirect for '{locale}' in '{resource_id}' is empty"
        return Diagnostic(
            code=DiagnosticCode.REDIRECT_EMPTY,
            message=msg,
            hint="A string entry must name the resource holding the translations",
            resource_id=resource_id,
            locale=locale,
        )

    @staticmethod
    def redirect_cycle(locale: str, chain: Sequence[str]) -> Diagnostic:
        """Redirect chain revisits a resource already being resolved.

        Args:
            locale: Locale being loaded
            chain: Resources on the chain, ending with the revisited one

        Returns:
            Diagnostic for REDIRECT_CYCLE
        """
        path = " -> ".join(chain)
        msg = f"Redirect cycle for '{locale}': {path}"
        return Diagnostic(
            code=DiagnosticCode.REDIRECT_CYCLE,
            message=msg,
            hint="Point one of the redirects at a resource containing translations",
            resource_id=chain[-1] if chain else None,
            locale=locale,
            redirect_chain=tuple(chain),
        )

    @staticmethod
    def redirect_depth_exceeded(locale: str, chain: Sequence[str], max_depth: int) -> Diagnostic:
        """Redirect chain is longer than the configured maximum.

        Args:
            locale: Locale being loaded
            chain: Resources visited so far
            max_depth: Configured maximum hop count

        Returns:
            Diagnostic for REDIRECT_DEPTH_EXCEEDED
        """
        msg = f"Redirect chain for '{locale}' exceeds {max_depth} hops"
        return Diagnostic(
            code=DiagnosticCode.REDIRECT_DEPTH_EXCEEDED,
            message=msg,
            hint="Shorten the redirect chain or raise LoaderConfig.max_redirect_depth",
            resource_id=chain[-1] if chain else None,
            locale=locale,
            redirect_chain=tuple(chain),
        )

    @staticmethod
    def redirect_invalid(resource_id: str, reference: str, reason: str) -> Diagnostic:
        """Redirect string cannot be turned into a resource identifier.

        Args:
            resource_id: Resource holding the redirect
            reference: Redirect string as written
            reason: Why resolution failed

        Returns:
            Diagnostic for REDIRECT_INVALID
        """
        msg = f"Redirect '{reference}' in '{resource_id}' is not a valid reference: {reason}"
        return Diagnostic(
            code=DiagnosticCode.REDIRECT_INVALID,
            message=msg,
            hint="Use a relative path or an absolute URL for the redirect target",
            resource_id=resource_id,
        )

    @staticmethod
    def placeholder_unresolved(placeholder: str) -> Diagnostic:
        """Placeholder names neither an argument nor a translation key.

        Args:
            placeholder: Key named inside {{ }}

        Returns:
            Diagnostic for PLACEHOLDER_UNRESOLVED
        """
        msg = f"Could not find argument {{{{{placeholder}}}}}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNRESOLVED,
            message=msg,
            hint=f"Pass '{placeholder}' in the arguments or define it as a translation key",
            key=placeholder,
            severity="warning",
        )

    @staticmethod
    def key_not_found(key: str) -> Diagnostic:
        """Translation key absent from the effective table.

        Args:
            key: Translation key requested

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Translation key '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Check that the key is defined for at least one requested locale",
            key=key,
            severity="warning",
        )

    @staticmethod
    def arguments_invalid(key: str, reason: str) -> Diagnostic:
        """Element argument attribute is not a JSON object.

        Args:
            key: Translation key of the element
            reason: Decoder error or type description

        Returns:
            Diagnostic for ARGUMENTS_INVALID
        """
        msg = f"Couldn't parse args for '{key}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENTS_INVALID,
            message=msg,
            hint='Arguments must be a JSON object, e.g. {"name": "Ana"}',
            key=key,
            severity="warning",
        )

    @staticmethod
    def no_translatable_text(key: str) -> Diagnostic:
        """Element with child elements has no non-blank text node.

        Args:
            key: Translation key of the element

        Returns:
            Diagnostic for NO_TRANSLATABLE_TEXT
        """
        msg = f"Could not translate element content for '{key}': no text node found"
        return Diagnostic(
            code=DiagnosticCode.NO_TRANSLATABLE_TEXT,
            message=msg,
            hint="Put placeholder text directly inside the element, or use a '.innerHTML' key",
            key=key,
            severity="warning",
        )
