"""Tests for the top-level package exports.

Python 3.13+.
"""

import l10nbind
from l10nbind import localization, runtime


class TestPublicApi:
    """Every advertised name must resolve."""

    def test_top_level_all(self) -> None:
        for name in l10nbind.__all__:
            assert hasattr(l10nbind, name), name

    def test_subpackage_all(self) -> None:
        for package in (localization, runtime):
            for name in package.__all__:
                assert hasattr(package, name), f"{package.__name__}.{name}"

    def test_version_string(self) -> None:
        assert isinstance(l10nbind.__version__, str)
        assert l10nbind.__version__
