"""Gibberish detection for free-text name fields."""

import re

CONSONANTS = "bcdfghjklmnpqrstvwxz"
VOWELS = "aeiou"

CONSONANT_CLUSTER_RE = re.compile(f"[{CONSONANTS}]{{5,}}")
REPEATED_CHARACTER_RE = re.compile(r"(.)\1{3,}")

MIN_LENGTH = 4
MAX_CONSONANT_RATIO = 4
RATIO_MIN_LENGTH = 6


def is_likely_spam(text: str | None) -> bool:
    """
    Return True when a name looks like keyboard mashing or bot output.

    Normal English has roughly 1.5 to 2 consonants per vowel, gibberish usually 4 or
    more. Names shorter than 4 characters are never flagged.
    """
    if not text:
        return False

    text = text.strip().lower()
    if len(text) < MIN_LENGTH:
        return False

    if CONSONANT_CLUSTER_RE.search(text):
        return True

    vowels = sum(1 for char in text if char in VOWELS)
    consonants = sum(1 for char in text if char in CONSONANTS)

    if vowels and consonants / vowels > MAX_CONSONANT_RATIO and len(text) > RATIO_MIN_LENGTH:
        return True

    if not vowels:
        return True

    return bool(REPEATED_CHARACTER_RE.search(text))
