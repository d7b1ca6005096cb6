"""Tests for locale_utils.py: culture parsing and LCID lookup.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import event, given

from resx2json.constants import LCID_CUSTOM_UNSPECIFIED
from resx2json.locale_utils import (
    CultureTag,
    canonical_name,
    clear_locale_cache,
    culture_subtags,
    get_babel_locale,
    lookup_lcid,
    normalize_locale,
    parse_culture,
)
from tests.strategies import culture_segments


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 hyphens become POSIX underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        """POSIX codes pass through unchanged."""
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        """Every hyphen is converted."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self) -> None:
        """BCP-47 format locale parsed correctly."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_caching(self) -> None:
        """Repeated calls return the cached Locale object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_invalid_locale_raises(self) -> None:
        """Malformed codes raise ValueError."""
        with pytest.raises(ValueError, match="not a valid locale identifier"):
            get_babel_locale("not-a-culture")


class TestClearLocaleCache:
    """Test clear_locale_cache function."""

    def test_cache_emptied(self) -> None:
        """clear_locale_cache() drops every cached Locale."""
        get_babel_locale("de-DE")
        assert get_babel_locale.cache_info().currsize > 0

        clear_locale_cache()

        assert get_babel_locale.cache_info().currsize == 0


class TestCultureSubtags:
    """Test culture_subtags function."""

    def test_cased_parts(self) -> None:
        """Language lower, territory upper, script title case."""
        assert culture_subtags("SR-latn-rs") == ("sr", "RS", "Latn", None)

    @pytest.mark.parametrize("segment", ["zh-TW", "zh-CN", "sr-RS", "uz-UZ", "az-AZ"])
    def test_no_likely_script_added(self, segment: str) -> None:
        """Only subtags present in the segment are returned."""
        assert culture_subtags(segment)[2] is None


class TestCanonicalName:
    """Test canonical_name function."""

    def test_lowercase_input_canonicalized(self) -> None:
        """Territory is upper-cased in the canonical name."""
        assert canonical_name("en-us") == "en-US"

    def test_language_only(self) -> None:
        """Neutral cultures have no territory part."""
        assert canonical_name("fr") == "fr"

    def test_script_kept(self) -> None:
        """Script subtags appear between language and territory."""
        assert canonical_name("sr-latn-rs") == "sr-Latn-RS"

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("zh-TW", "zh-TW"),
            ("zh-CN", "zh-CN"),
            ("sr-RS", "sr-RS"),
            ("uz-UZ", "uz-UZ"),
            ("az-AZ", "az-AZ"),
        ],
    )
    def test_implied_script_not_added(self, segment: str, expected: str) -> None:
        """Cultures whose script Babel infers keep their written name."""
        assert canonical_name(segment) == expected


class TestLookupLcid:
    """Test lookup_lcid function."""

    @pytest.mark.parametrize(
        ("language", "territory", "lcid"),
        [
            ("en", "US", 1033),
            ("en", "GB", 2057),
            ("de", "DE", 1031),
            ("fr", "FR", 1036),
            ("ja", "JP", 1041),
            ("zh", "TW", 1028),
            ("zh", "CN", 2052),
        ],
    )
    def test_specific_cultures(self, language: str, territory: str, lcid: int) -> None:
        """Specific cultures map to their Windows identifier."""
        assert lookup_lcid(language, territory) == lcid

    def test_duplicate_name_uses_override(self) -> None:
        """es-ES reports the modern-sort identifier, as .NET does."""
        assert lookup_lcid("es", "ES") == 3082

    @pytest.mark.parametrize(("language", "lcid"), [("en", 9), ("de", 7), ("fr", 12)])
    def test_neutral_cultures(self, language: str, lcid: int) -> None:
        """Neutral cultures map to the primary language identifier."""
        assert lookup_lcid(language) == lcid

    @pytest.mark.parametrize(
        ("language", "lcid"),
        [("zh", 0x7804), ("sr", 0x7C1A), ("bs", 0x781A)],
    )
    def test_neutral_cultures_with_own_identifier(self, language: str, lcid: int) -> None:
        """Neutral cultures whose LCID is not the primary language id."""
        assert lookup_lcid(language) == lcid

    @pytest.mark.parametrize(
        ("language", "territory", "script", "lcid"),
        [
            ("sr", "RS", "Latn", 0x241A),
            ("sr", "RS", "Cyrl", 0x281A),
            ("zh", None, "Hans", 0x0004),
            ("zh", None, "Hant", 0x7C04),
            ("uz", "UZ", "Cyrl", 0x0843),
        ],
    )
    def test_script_qualified_cultures(
        self, language: str, territory: str | None, script: str, lcid: int
    ) -> None:
        """Script-qualified cultures use their own identifiers."""
        assert lookup_lcid(language, territory, script) == lcid

    def test_unlisted_script_is_custom(self) -> None:
        """A script the overrides do not list is never mapped by territory alone."""
        assert lookup_lcid("en", "US", "Dsrt") == LCID_CUSTOM_UNSPECIFIED

    def test_culture_without_windows_identifier(self) -> None:
        """Recognized cultures missing from the Windows table get 4096."""
        assert lookup_lcid("en", "150") == LCID_CUSTOM_UNSPECIFIED


class TestParseCulture:
    """Test parse_culture function."""

    def test_en_us(self) -> None:
        """en-US yields a full CultureTag."""
        tag = parse_culture("en-US")
        assert isinstance(tag, CultureTag)
        assert tag.name == "en-US"
        assert tag.lcid == 1033
        assert tag.locale.territory == "US"

    def test_case_insensitive(self) -> None:
        """Culture segments are matched case-insensitively."""
        tag = parse_culture("EN-us")
        assert tag is not None
        assert tag.name == "en-US"

    @pytest.mark.parametrize(
        ("segment", "name", "lcid"),
        [
            ("zh-TW", "zh-TW", 1028),
            ("zh-CN", "zh-CN", 2052),
            ("sr-Latn-RS", "sr-Latn-RS", 0x241A),
            ("zh", "zh", 0x7804),
        ],
    )
    def test_name_uses_written_subtags(self, segment: str, name: str, lcid: int) -> None:
        """lang names only the subtags in the file name; Babel may infer more."""
        tag = parse_culture(segment)
        assert tag is not None
        assert (tag.name, tag.lcid) == (name, lcid)

    def test_locale_keeps_inferred_script(self) -> None:
        """The Babel Locale still carries the likely script."""
        tag = parse_culture("zh-TW")
        assert tag is not None
        assert tag.name == "zh-TW"
        assert tag.locale.script == "Hant"

    @pytest.mark.parametrize("segment", ["", "Designer", "Resources", "v2", "not-a-culture"])
    def test_unrecognized_segments_yield_none(self, segment: str) -> None:
        """Non-culture segments are treated as the neutral culture."""
        assert parse_culture(segment) is None

    @given(case=culture_segments())
    def test_property_known_and_bogus_segments(
        self, case: tuple[str, tuple[str, int] | None]
    ) -> None:
        """PROPERTY: parse_culture matches the expected name and LCID or None."""
        segment, expected = case
        tag = parse_culture(segment)
        if expected is None:
            assert tag is None
            event("outcome=none")
        else:
            assert tag is not None
            assert (tag.name, tag.lcid) == expected
            event("outcome=tag")
