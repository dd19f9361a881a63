"""Tests for ISO-639 language lookup."""

import pytest

from mediapick.core.languages import LANGUAGES, long_name, to_iso639_2


@pytest.mark.parametrize(
    "language,expected",
    [
        ("en", "eng"),
        ("EN", "eng"),
        ("es", "spa"),
        ("fr", "fre"),
        ("de", "ger"),
        ("eng", "eng"),
        ("SPA", "spa"),
        ("English", "eng"),
        ("spanish", "spa"),
        ("xx", None),
        ("zzz", None),
        ("Klingon", None),
        ("e", None),
        ("", None),
        (None, None),
    ],
)
def test_to_iso639_2(language, expected) -> None:
    assert to_iso639_2(language) == expected


def test_long_name() -> None:
    assert long_name("fre") == "French"
    assert long_name("ita") == "Italian"
    assert long_name("zzz") is None
    assert long_name(None) is None


def test_table_codes_are_consistent() -> None:
    for iso1, iso2, name in LANGUAGES:
        assert len(iso1) == 2
        assert len(iso2) == 3
        assert to_iso639_2(iso1) == iso2
