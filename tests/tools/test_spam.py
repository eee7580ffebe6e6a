"""Tests for the gibberish name detection."""

import pytest

from teamintake.tools.spam import is_likely_spam


@pytest.mark.parametrize(
    "name",
    [
        "John",
        "Maria",
        "Jonathan",
        "Christopher",
        "Garcia",
        "O'Brien",
        "Anne-Marie",
    ],
)
def test_real_names_are_not_spam(name):
    """Common names pass the check."""
    assert is_likely_spam(name) is False


@pytest.mark.parametrize("name", [None, "", "   ", "ab", "Bo", "Xzq", "  Al  "])
def test_short_or_empty_names_are_never_spam(name):
    """Names under 4 characters are never flagged."""
    assert is_likely_spam(name) is False


@pytest.mark.parametrize(
    "name",
    [
        "xkcdfghj",  # consonant cluster
        "asdfghjkl",
        "bcdfg",
        "xqzjklm",
        "Pfft",  # no vowel
        "aaaaaron",  # repeated character
        "zzzz",
        "aaaaaa",  # repeated vowel
    ],
)
def test_gibberish_is_spam(name):
    """Keyboard mashing is flagged."""
    assert is_likely_spam(name) is True


def test_high_consonant_ratio_is_spam():
    """More than 4 consonants per vowel in a name longer than 6 characters is flagged."""
    assert is_likely_spam("bcdfabcdf") is True
    assert is_likely_spam("bcdfa") is False


def test_y_is_not_a_vowel():
    """Names spelled with "y" as only vowel are flagged."""
    assert is_likely_spam("Lynn") is True


def test_check_ignores_case_and_surrounding_whitespace():
    """The name is stripped and lowercased before the checks."""
    assert is_likely_spam("  XKCDFGHJ  ") is True
    assert is_likely_spam("  MARIA ") is False
