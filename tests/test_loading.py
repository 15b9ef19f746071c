"""Tests for ResourceLoadResult and LoadSummary.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from l10nbind.diagnostics import FetchError
from l10nbind.enums import LoadStatus
from l10nbind.localization.loading import LoadSummary, ResourceLoadResult


def _ok(locale: str = "en", chain: tuple[str, ...] = ("app.json",)) -> ResourceLoadResult:
    return ResourceLoadResult(
        locale=locale,
        resource_id=chain[0],
        status=LoadStatus.SUCCESS,
        redirect_chain=chain,
        key_count=3,
    )


def _failed(locale: str = "en") -> ResourceLoadResult:
    return ResourceLoadResult(
        locale=locale,
        resource_id="app.json",
        status=LoadStatus.ERROR,
        error=FetchError("HTTP 404"),
        redirect_chain=("app.json",),
    )


class TestResourceLoadResult:
    """Test single-result properties."""

    def test_success(self) -> None:
        result = _ok()
        assert result.is_success
        assert not result.is_error
        assert not result.was_redirected
        assert result.final_resource_id == "app.json"

    def test_redirected(self) -> None:
        result = _ok(chain=("app.json", "fr.json"))
        assert result.was_redirected
        assert result.final_resource_id == "fr.json"

    def test_error(self) -> None:
        result = _failed()
        assert result.is_error
        assert isinstance(result.error, FetchError)

    def test_empty_chain_falls_back_to_resource_id(self) -> None:
        result = ResourceLoadResult(locale="en", resource_id="a.json", status=LoadStatus.ERROR)
        assert result.final_resource_id == "a.json"


class TestLoadSummary:
    """Test aggregate statistics."""

    def test_empty(self) -> None:
        summary = LoadSummary(results=())
        assert summary.total_attempted == 0
        assert summary.all_successful
        assert not summary.has_errors

    def test_counts_and_filters(self) -> None:
        summary = LoadSummary(
            results=(_ok("en"), _ok("fr", ("app.json", "fr.json")), _failed("de"))
        )

        assert summary.total_attempted == 3
        assert summary.successful == 2
        assert summary.errors == 1
        assert summary.redirected == 1
        assert summary.has_errors
        assert not summary.all_successful
        assert [r.locale for r in summary.get_errors()] == ["de"]
        assert [r.locale for r in summary.get_successful()] == ["en", "fr"]
        assert summary.get_by_locale("fr")[0].final_resource_id == "fr.json"
        assert repr(summary) == "LoadSummary(total=3, ok=2, errors=1, redirected=1)"

    @given(outcomes=st.lists(st.booleans(), max_size=10))
    def test_successful_plus_errors_is_total(self, outcomes: list[bool]) -> None:
        """Property: every result is either a success or an error."""
        summary = LoadSummary(results=tuple(_ok() if ok else _failed() for ok in outcomes))
        event(f"errors={summary.errors}")
        assert summary.successful + summary.errors == summary.total_attempted
