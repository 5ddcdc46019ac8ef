"""
Behavior of the four label entry points.

Transliteration is replaced by a table-backed fake so that the expected labels
do not depend on the romanization libraries.
"""

import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import localized_names
sys.path.insert(0, str(Path(__file__).parent.parent))

from localized_names.localized_names import NameResolver, get_localized_placename, get_localized_streetname
from localized_names.transliteration import TransliterationError


class FakeTransliterator:
    """Looks names up in a fixed table and records the location hints it was given."""

    TABLE = {
        "القاهرة": "al-Qahira",
        "Москва": "Moskva",
        "東京": "Tokyo",
    }

    def __init__(self):
        self.calls = []

    def transliterate(self, text, geo_context=None):
        self.calls.append((text, geo_context))
        return self.TABLE[text]


class FailingTransliterator:
    def transliterate(self, text, geo_context=None):
        raise TransliterationError(f"cannot romanize '{text}'")


class NoneTransliterator:
    def transliterate(self, text, geo_context=None):
        return None


@pytest.fixture
def transliterator():
    return FakeTransliterator()


@pytest.fixture
def resolver(transliterator):
    return NameResolver(transliterator=transliterator)


# (name, local_name, int_name, name_en, loc_in_brackets) -> expected
PLACENAME_TEST_CASES = [
    (("Москва́", "Moskau", None, "Moscow", True), "Москва́ (Moskau)"),
    (("Москва́", "Moskau", None, "Moscow", False), "Moskau (Москва́)"),
    (("القاهرة", "Kairo", "Cairo", "Cairo", False), "Kairo"),
    (("القاهرة", "Kairo", "Cairo", "Cairo", True), "Kairo"),
    (("Brixen Bressanone", "Brixen", None, None, False), "Brixen"),
    (("Brixen Bressanone", "Brixen", None, None, True), "Brixen Bressanone"),
    (("Αθήνα", "Athen", None, None, True), "Αθήνα (Athen)"),
    (("Bozen (Bolzano)", "Bozen", None, None, False), "Bozen"),
    (("Bolzano", "Bozen (BZ)", None, None, True), "Bolzano"),
    (("Bolzano", "Bozen (BZ)", None, None, False), "Bozen (BZ)"),
    ((None, "Moskau", None, None, True), "Moskau"),
    # no local name
    ((None, None, None, None, False), None),
    (("", None, None, None, False), ""),
    (("Berlin", None, None, None, False), "Berlin"),
    (("القاهرة", None, None, None, False), "al-Qahira (القاهرة)"),
    (("القاهرة", None, None, None, True), "القاهرة (al-Qahira)"),
    (("القاهرة", None, None, "Cairo", False), "Cairo"),
    (("القاهرة", None, "Al Qahira", "Cairo", False), "Al Qahira"),
    (("München", None, None, "Munich", False), "München"),
    (("München", None, "Munich", None, False), "München"),
    (("Cairo", None, None, "Cairo", False), "Cairo"),
    (("Cairo", None, "Cairo", None, False), "Cairo"),
    # a missing name never compares unequal
    ((None, None, None, "Moscow", False), None),
    ((None, None, "Moscow", None, False), None),
]

STREETNAME_TEST_CASES = [
    (("Doktor-No-Straße", None, None, None, False), "Dr.-No-Str."),
    (("Dr. No Street", "Professor-Doktor-No-Straße", None, None, False), "Prof.-Dr.-No-Str. (Dr. No Street)"),
    (("Dr. No Street", "Professor-Doktor-No-Straße", None, None, True), "Dr. No Street (Prof.-Dr.-No-Str.)"),
    (("Hauptstraße", None, None, None, False), "Hauptstraße"),
    (("Bürgermeister-Smidt-Straße", None, None, None, False), "Bgm.-Smidt-Str."),
    # both halves are short, the combined label is not
    (("Am Markt", "Marktstraße", None, None, False), "Marktstr. (Am Markt)"),
    (("Sankt-Georgs-Platz", None, "Sankt-Georgs-Platz", None, False), "St.-Georgs-Pl."),
    (("Professor-Kurt-Huber-Platz", None, None, "Professor-Kurt-Huber-Platz", False), "Prof.-Kurt-Huber-Pl."),
    (("Professor-Kurt-Huber-Platz", None, None, "Professor Kurt Huber Square", False), "Prof.-Kurt-Huber-Pl."),
    ((None, "Bürgermeister-Smidt-Straße", None, None, False), "Bgm.-Smidt-Str."),
    (("Bürgermeister-Smidt-Straße", "Bürgermeister-Smidt", None, None, True), "Bgm.-Smidt-Str."),
    # fallback names are used as given
    (("Москва", None, None, "Professor Street Moscow", False), "Professor Street Moscow"),
    ((None, None, None, None, False), None),
    (("", None, None, None, False), ""),
]

WITHOUT_BRACKETS_TEST_CASES = [
    (("Dr. No Street", "Doktor-No-Straße", None, None), "Doktor-No-Straße"),
    (("Brixen Bressanone", "Brixen", None, None), "Brixen"),
    (("Bozen (Bolzano)", "Bozen (BZ)", None, None), "Bozen (BZ)"),
    (("Москва", "Moskau", None, "Moscow"), "Moskau"),
    ((None, "Moskau", None, None), "Moskau"),
    (("القاهرة", None, None, None), "al-Qahira"),
    (("القاهرة", None, "Al Qahira", "Cairo"), "Al Qahira"),
    (("München", None, None, "Munich"), "München"),
    ((None, None, None, None), None),
    (("", None, None, None), ""),
]

LATIN_NAME_TEST_CASES = [
    (("München", "Munich", "Munich", "Munich"), "München"),
    (("Москва", "Moskau", "Moscow Int", "Moscow"), "Moskau"),
    (("Москва", None, "Moscow Int", "Moscow"), "Moscow Int"),
    (("Москва", None, None, "Moscow"), "Moscow"),
    (("Москва", None, None, "Москва"), "Москва"),
    (("القاهرة", None, None, None), "al-Qahira"),
    (("", "Moskau", None, None), "Moskau"),
    ((None, None, None, "Moscow"), "Moscow"),
    ((None, None, None, None), None),
    (("", None, None, None), ""),
]


def _run_cases(method, cases):
    failed = []
    for args, expected in cases:
        result = method(*args)
        if result != expected:
            failed.append(f"{args}: expected {expected!r}, got {result!r}")
    assert not failed, f"{len(failed)} failures out of {len(cases)} cases:\n" + "\n".join(failed)


def test_placename_with_expected_results(resolver):
    _run_cases(resolver.get_localized_placename, PLACENAME_TEST_CASES)


def test_streetname_with_expected_results(resolver):
    _run_cases(resolver.get_localized_streetname, STREETNAME_TEST_CASES)


def test_name_without_brackets_with_expected_results(resolver):
    _run_cases(resolver.get_localized_name_without_brackets, WITHOUT_BRACKETS_TEST_CASES)


def test_latin_name_with_expected_results(resolver):
    _run_cases(resolver.get_latin_name, LATIN_NAME_TEST_CASES)


def test_without_brackets_never_adds_parentheses(resolver):
    for (name, local_name, int_name, name_en), _ in WITHOUT_BRACKETS_TEST_CASES:
        result = resolver.get_localized_name_without_brackets(name, local_name, int_name, name_en)
        assert result is None or result in (name, local_name, int_name, name_en, "al-Qahira")


@pytest.mark.parametrize("int_name", [None, "Moscow", "Moskva"])
@pytest.mark.parametrize("name_en", [None, "Moscow", "Москва"])
def test_local_name_takes_precedence(resolver, int_name, name_en):
    assert resolver.get_localized_placename("Москва", "Moskau", int_name, name_en, False) == "Moskau (Москва)"
    assert resolver.get_localized_streetname("Москва", "Moskau", int_name, name_en, True) == "Москва (Moskau)"
    assert resolver.get_localized_name_without_brackets("Москва", "Moskau", int_name, name_en) == "Moskau"
    assert resolver.get_latin_name("Москва", "Moskau", int_name, name_en) == "Moskau"


def test_int_name_shadows_name_en(resolver):
    assert resolver.get_localized_placename("東京", None, "Tokyo Int", "Tokyo", False) == "Tokyo Int"
    assert resolver.get_localized_placename("東京", None, "東京", "Tokyo", False) == "東京"


def test_equality_is_exact(resolver):
    assert resolver.get_localized_placename("Москва", None, None, "москва", False) == "москва"
    assert resolver.get_localized_placename("Москва", None, None, "Москва ", False) == "Москва "


def test_latin_names_are_not_transliterated(resolver, transliterator):
    resolver.get_localized_placename("Zürich", None, None, None, False)
    resolver.get_latin_name("Zürich", None, None, None)
    assert transliterator.calls == []


def test_geo_context_is_passed_through(resolver, transliterator):
    place = object()
    resolver.get_localized_placename("東京", None, None, None, True, place)
    resolver.get_latin_name("東京", None, None, None, place)
    resolver.get_localized_name_without_brackets("東京", None, None, None, geo_context=place)

    assert [ctx for _, ctx in transliterator.calls] == [place, place, place]


def test_transliteration_failure_propagates():
    resolver = NameResolver(transliterator=FailingTransliterator())

    with pytest.raises(TransliterationError):
        resolver.get_localized_placename("القاهرة", None, None, None, False)
    with pytest.raises(TransliterationError):
        resolver.get_latin_name("القاهرة", None, None, None)

    # no transliteration needed, no failure
    assert resolver.get_localized_placename("القاهرة", "Kairo", None, None, False) == "Kairo"


def test_missing_transliteration_is_an_error():
    resolver = NameResolver(transliterator=NoneTransliterator())

    with pytest.raises(TransliterationError):
        resolver.get_localized_name_without_brackets("القاهرة", None, None, None)


def test_module_level_functions():
    assert get_localized_placename("Brixen Bressanone", "Brixen", None, None, False) == "Brixen"
    assert get_localized_streetname("Dr. No Street", "Professor-Doktor-No-Straße", None, None, False) == (
        "Prof.-Dr.-No-Str. (Dr. No Street)"
    )
    assert get_localized_placename(None, None, None, None, False) is None
    assert get_localized_streetname("", None, None, None, True) == ""
