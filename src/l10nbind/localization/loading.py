"""Load tracking records for ResourceLoader.

Every resource fetched for a locale produces one immutable
ResourceLoadResult; LoadSummary aggregates them for diagnostics.

Components:
    ResourceLoadResult - Immutable result of a single resource load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from l10nbind.enums import LoadStatus
from l10nbind.localization.types import LocaleCode, ResourceId

__all__ = ["LoadSummary", "ResourceLoadResult"]


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single resource for a single locale.

    Attributes:
        locale: Locale being loaded
        resource_id: Configured resource identifier (start of the chain)
        status: Load status (success, error)
        error: Exception if status is ERROR, None otherwise
        redirect_chain: Resources visited, starting with resource_id. The last
            element is the resource that held the translations on success.
        key_count: Number of translation keys contributed (0 on error)
    """

    locale: LocaleCode
    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    redirect_chain: tuple[ResourceId, ...] = ()
    key_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if resource loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if resource load failed with an error."""
        return self.status == LoadStatus.ERROR

    @property
    def was_redirected(self) -> bool:
        """Check if at least one redirect was followed."""
        return len(self.redirect_chain) > 1

    @property
    def final_resource_id(self) -> ResourceId:
        """Last resource visited (the one holding translations on success)."""
        return self.redirect_chain[-1] if self.redirect_chain else self.resource_id


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results.

    All statistics are computed properties derived from the ``results`` tuple.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> summary = loader.get_load_summary()
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.locale}/{result.resource_id}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"errors={self.errors}, "
            f"redirected={self.redirected})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def redirected(self) -> int:
        """Number of loads that followed at least one redirect."""
        return sum(1 for r in self.results if r.was_redirected)

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def has_errors(self) -> bool:
        """Check if any resources failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted load succeeded.

        Returns:
            True if errors == 0 (vacuously True when nothing was attempted)
        """
        return self.errors == 0
