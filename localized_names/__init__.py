from localized_names.localized_names import (
    LocalizedNameConfig,
    NameResolver,
    ResolutionProfile,
    StreetAbbreviator,
    abbreviate_street,
    get_latin_name,
    get_localized_name_without_brackets,
    get_localized_placename,
    get_localized_streetname,
    resolve_latin_name,
    resolve_name_without_brackets,
    resolve_place_name,
    resolve_street_name,
)
from localized_names.script_classifier import contains_cjk, is_latin, is_latin_or_greek_or_cyrillic
from localized_names.transliteration import GeoContext, GeoTransliterator, TransliterationError

__all__ = [
    "LocalizedNameConfig",
    "NameResolver",
    "ResolutionProfile",
    "StreetAbbreviator",
    "abbreviate_street",
    "get_latin_name",
    "get_localized_name_without_brackets",
    "get_localized_placename",
    "get_localized_streetname",
    "resolve_latin_name",
    "resolve_name_without_brackets",
    "resolve_place_name",
    "resolve_street_name",
    "contains_cjk",
    "is_latin",
    "is_latin_or_greek_or_cyrillic",
    "GeoContext",
    "GeoTransliterator",
    "TransliterationError",
]
