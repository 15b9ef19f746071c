"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale, is_known_locale, and
get_system_locale. Includes property-based tests with Hypothesis for locale
normalization.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from l10nbind.locale_utils import (
    get_babel_locale,
    get_system_locale,
    is_known_locale,
    normalize_locale,
)
from tests.strategies.localization import locale_chains


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_posix(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    @given(st.text(alphabet="abcXYZ-_", max_size=12))
    def test_no_hyphens_remain(self, code: str) -> None:
        """Property: output never contains hyphens and keeps its length."""
        result = normalize_locale(code)
        event(f"had_hyphen={'-' in code}")
        assert "-" not in result
        assert len(result) == len(code)


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_simple_locale(self) -> None:
        locale = get_babel_locale("fr")
        assert locale.language == "fr"
        assert locale.territory is None

    def test_caching(self) -> None:
        """Repeated calls return the cached Locale object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")


class TestIsKnownLocale:
    """Test is_known_locale function."""

    @given(locale_chains(min_size=1, max_size=1))
    def test_pool_locales_known(self, chain: list[str]) -> None:
        """Property: every locale the strategies produce is known to Babel."""
        assert is_known_locale(chain[0])

    @pytest.mark.parametrize("code", ["", "zz", "invalid_locale_code_xyz", "12"])
    def test_unknown(self, code: str) -> None:
        assert not is_known_locale(code)


class TestGetSystemLocale:
    """Test get_system_locale function with environment and OS detection."""

    def test_getlocale_success(self) -> None:
        """OS-level locale is returned in BCP-47 form."""
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en-US"

    def test_getlocale_encoding_stripped(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de-DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_pseudo_locales_fall_back_to_env(self, pseudo: str) -> None:
        with (
            patch("locale.getlocale", return_value=(pseudo, None)),
            patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "fr-FR"

    def test_env_priority(self) -> None:
        """LC_ALL wins over LC_MESSAGES, which wins over LANG."""
        env = {"LC_ALL": "lv_LV", "LC_MESSAGES": "et_EE", "LANG": "lt_LT"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "lv-LV"

    def test_getlocale_value_error_falls_back(self) -> None:
        with (
            patch("locale.getlocale", side_effect=ValueError("unknown locale")),
            patch.dict(os.environ, {"LC_MESSAGES": "ja_JP"}, clear=True),
        ):
            assert get_system_locale() == "ja-JP"

    def test_default_en(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == "en"

    def test_raise_on_failure(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LANG": "C"}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)
