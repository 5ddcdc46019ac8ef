"""
Script classification by codepoint thresholds.

These are approximations, not Unicode script lookups: "Latin" means every
character sits at or below U+024F, "Latin, Greek or Cyrillic" means at or below
U+052F. Combining marks, punctuation and digits below the threshold count as
Latin. An empty string is vacuously Latin.
"""

from localized_names.localized_names_data import (
    CJK_RANGE,
    LATIN_GREEK_CYRILLIC_MAX_CODEPOINT,
    LATIN_MAX_CODEPOINT,
)


def _all_at_most(text: str, max_codepoint: int) -> bool:
    for char in text:
        if ord(char) > max_codepoint:
            return False
    return True


def is_latin(text: str, max_codepoint: int = LATIN_MAX_CODEPOINT) -> bool:
    return _all_at_most(text, max_codepoint)


def is_latin_or_greek_or_cyrillic(text: str, max_codepoint: int = LATIN_GREEK_CYRILLIC_MAX_CODEPOINT) -> bool:
    return _all_at_most(text, max_codepoint)


def contains_cjk(text: str) -> bool:
    """True if any character is a CJK unified ideograph (U+4E00..U+9FFF)."""
    low, high = CJK_RANGE
    for char in text:
        if low <= ord(char) <= high:
            return True
    return False
