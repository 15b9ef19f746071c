"""Transport layer for translation resources.

Provides the protocol the loader fetches through, an HTTP implementation on
httpx, and a filesystem implementation with path-traversal protection.

Components:
    ResourceFetcher - Protocol for fetching raw resource bodies (structural typing)
    HttpResourceFetcher - httpx.AsyncClient based fetcher
    PathResourceFetcher - Local directory fetcher

Fetchers only move bytes. Decoding, validation, caching and timeouts are the
loader's job.

Python 3.13+. Requires httpx.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import httpx

from l10nbind.diagnostics import ErrorTemplate, FetchError, MalformedResourceError
from l10nbind.localization.types import ResourceId

__all__ = [
    "HttpResourceFetcher",
    "PathResourceFetcher",
    "ResourceFetcher",
]

logger = logging.getLogger(__name__)


class ResourceFetcher(Protocol):
    """Protocol for fetching translation resources.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom transports.

    Example:
        >>> class DictFetcher:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     async def fetch(self, resource_id: str) -> str:
        ...         return self.files[resource_id]
        ...     def resolve_reference(self, base: str, reference: str) -> str:
        ...         return reference
    """

    async def fetch(self, resource_id: ResourceId) -> str | bytes:
        """Fetch the raw body of a resource.

        Args:
            resource_id: Resource identifier

        Returns:
            Resource body (JSON text or UTF-8 bytes)

        Raises:
            FetchError: If the resource cannot be retrieved
        """
        ...

    def resolve_reference(self, base: ResourceId, reference: str) -> ResourceId:
        """Resolve a redirect target relative to the resource naming it.

        Args:
            base: Resource containing the redirect
            reference: Redirect string found in that resource

        Returns:
            Resource identifier to fetch next

        Raises:
            MalformedResourceError: If the reference cannot be resolved
        """
        ...


class HttpResourceFetcher:
    """Fetch resources over HTTP with httpx.

    Only status 200 counts as success. Transport errors and any other status
    are reported as FetchError.

    The fetcher owns its client unless one is supplied; use it as an async
    context manager (or call aclose()) to release connections.

    Example:
        >>> async with HttpResourceFetcher(base_url="https://example.org/") as fetcher:
        ...     body = await fetcher.fetch("l10n/app.json")
    """

    __slots__ = ("_base_url", "_client", "_owns_client")

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize HTTP fetcher.

        Args:
            client: Client to use; a new one is created (and owned) if omitted
            base_url: Base URL relative resource ids are resolved against
            timeout: httpx timeout for an owned client (None keeps httpx defaults)
        """
        self._owns_client = client is None
        if client is None:
            client = (
                httpx.AsyncClient(timeout=timeout)
                if timeout is not None
                else httpx.AsyncClient()
            )
        self._client = client
        self._base_url = base_url

    async def __aenter__(self) -> HttpResourceFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()

    def _absolute(self, resource_id: ResourceId) -> str:
        if self._base_url is None:
            return resource_id
        return str(httpx.URL(self._base_url).join(resource_id))

    async def fetch(self, resource_id: ResourceId) -> bytes:
        """Fetch a resource with GET.

        Args:
            resource_id: Absolute URL, or URL relative to base_url

        Returns:
            Response body bytes

        Raises:
            FetchError: On transport error, invalid URL, or non-200 status
        """
        try:
            url = self._absolute(resource_id)
            response = await self._client.get(
                url, headers={"Accept": "application/json"}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                ErrorTemplate.fetch_failed(resource_id, f"{type(e).__name__}: {e}"),
                resource_id=resource_id,
            ) from e

        if response.status_code != httpx.codes.OK:
            raise FetchError(
                ErrorTemplate.fetch_failed(resource_id, f"HTTP {response.status_code}"),
                resource_id=resource_id,
            )
        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return response.content

    def resolve_reference(self, base: ResourceId, reference: str) -> ResourceId:
        """Resolve a redirect as a URL relative to the referencing resource.

        Raises:
            MalformedResourceError: If the redirect is not a valid URL reference
        """
        try:
            return str(httpx.URL(self._absolute(base)).join(reference))
        except httpx.InvalidURL as e:
            raise MalformedResourceError(
                ErrorTemplate.redirect_invalid(base, reference, str(e)), resource_id=base
            ) from e


@dataclass(frozen=True, slots=True)
class PathResourceFetcher:
    """File system resource fetcher.

    Resource ids are POSIX-style paths relative to ``root_dir``. File reads
    run in a worker thread so the event loop is never blocked.

    Security:
        Absolute ids, ".." segments, and paths resolving outside root_dir are
        rejected with FetchError.

    Attributes:
        root_dir: Directory all resources live under
    """

    root_dir: str
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def _validate_resource_id(self, resource_id: ResourceId) -> Path:
        """Map a resource id to a path inside the root directory.

        Raises:
            FetchError: If the id is empty, absolute, or escapes the root
        """
        if not resource_id or resource_id != resource_id.strip():
            reason = "empty or whitespace-padded resource id"
        elif resource_id.startswith(("/", "\\")) or Path(resource_id).is_absolute():
            reason = "absolute paths not allowed"
        elif ".." in resource_id.replace("\\", "/").split("/"):
            reason = "path traversal sequences not allowed"
        elif "\x00" in resource_id:
            reason = "null byte in resource id"
        else:
            try:
                full_path = (self._resolved_root / resource_id).resolve()
            except (OSError, ValueError) as e:
                raise FetchError(
                    ErrorTemplate.fetch_failed(resource_id, f"{type(e).__name__}: {e}"),
                    resource_id=resource_id,
                ) from e
            try:
                full_path.relative_to(self._resolved_root)
            except ValueError:
                reason = "resolved path escapes root directory"
            else:
                return full_path
        raise FetchError(
            ErrorTemplate.fetch_failed(resource_id, reason), resource_id=resource_id
        )

    async def fetch(self, resource_id: ResourceId) -> bytes:
        """Read a resource file.

        Args:
            resource_id: Path relative to root_dir

        Returns:
            File contents

        Raises:
            FetchError: If the id is unsafe or the file cannot be read
        """
        path = self._validate_resource_id(resource_id)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise FetchError(
                ErrorTemplate.fetch_failed(resource_id, f"{type(e).__name__}: {e}"),
                resource_id=resource_id,
            ) from e

    def resolve_reference(self, base: ResourceId, reference: str) -> ResourceId:
        """Resolve a redirect as a path relative to the referencing resource's directory."""
        return posixpath.normpath(posixpath.join(posixpath.dirname(base), reference))
