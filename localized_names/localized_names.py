"""
Localized Name Selection for Map Labels

This module picks the label a map renderer should show for a place or street, given the
feature's native `name` and up to three alternatives (`local_name` in the rendering
language, `int_name`, `name_en`).

## Precedence

`local_name` > `int_name` > `name_en` > transliteration of `name`

- A Latin `name` is always shown. Alternatives only replace a non-Latin `name`.
- With a `local_name`, the label combines both names as "local (native)" or
  "native (local)", depending on `loc_in_brackets`, unless one already contains the
  other, either contains a parenthesis, or the native name is outside the
  Latin/Greek/Cyrillic family.
- A non-Latin `name` without alternatives is transliterated and shown next to the
  original.

`None` and `""` are different results: a missing name stays missing, an empty name
stays empty.

## Usage Examples

```python
from localized_names.localized_names import get_localized_placename, get_localized_streetname

get_localized_placename("Москва́", "Moskau", None, "Moscow", True)
# Returns: "Москва́ (Moskau)"

get_localized_placename("Brixen Bressanone", "Brixen", None, None, False)
# Returns: "Brixen"

get_localized_streetname("Dr. No Street", "Professor-Doktor-No-Straße", None, None, False)
# Returns: "Prof.-Dr.-No-Str. (Dr. No Street)"
```

## Architecture

- **LocalizedNameConfig**: thresholds and abbreviation rules, immutable
- **ResolutionProfile**: the switches separating the four public entry points
- **StreetAbbreviator**: data-driven German street name abbreviations
- **NameResolver**: the decision tree, with an injectable transliterator

## Thread Safety

Resolution is pure apart from the transliterator's memo cache. The module-level
resolver can be shared between threads.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Tuple

from localized_names.localized_names_data import (
    ABBREVIATION_MIN_LENGTH,
    LATIN_GREEK_CYRILLIC_MAX_CODEPOINT,
    LATIN_MAX_CODEPOINT,
    STREET_ABBREVIATION_RULES,
)
from localized_names.script_classifier import is_latin, is_latin_or_greek_or_cyrillic
from localized_names.transliteration import GeoTransliterator, TransliterationError, Transliterator


# ════════════════════════════════════════════════════════════════════════════════
# ABBREVIATION RULES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class AbbreviationRule:
    """One replacement, applied only when `guard` occurs in the text."""

    guard: str
    pattern: str
    replacement: str
    whole_word: bool
    regex: Optional[re.Pattern[str]] = None

    @classmethod
    def create(cls, guard: str, pattern: str, replacement: str, whole_word: bool) -> "AbbreviationRule":
        regex = re.compile(re.escape(pattern) + r"\b") if whole_word else None
        return cls(guard=guard, pattern=pattern, replacement=replacement, whole_word=whole_word, regex=regex)

    def apply(self, text: str) -> str:
        if self.guard not in text:
            return text
        if self.regex is not None:
            return self.regex.sub(lambda _m: self.replacement, text)
        return text.replace(self.pattern, self.replacement)


def _build_default_rules() -> Tuple[AbbreviationRule, ...]:
    return tuple(
        AbbreviationRule.create(guard, pattern, replacement, whole_word)
        for guard, replacements in STREET_ABBREVIATION_RULES
        for pattern, replacement, whole_word in replacements
    )


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class LocalizedNameConfig:
    """Thresholds and rule table used by the resolver."""

    latin_max_codepoint: int
    latin_greek_cyrillic_max_codepoint: int
    abbreviation_min_length: int
    abbreviation_rules: Tuple[AbbreviationRule, ...]

    @classmethod
    def create_default(cls) -> "LocalizedNameConfig":
        return cls(
            latin_max_codepoint=LATIN_MAX_CODEPOINT,
            latin_greek_cyrillic_max_codepoint=LATIN_GREEK_CYRILLIC_MAX_CODEPOINT,
            abbreviation_min_length=ABBREVIATION_MIN_LENGTH,
            abbreviation_rules=_build_default_rules(),
        )

    def with_abbreviation_min_length(self, min_length: int) -> "LocalizedNameConfig":
        return replace(self, abbreviation_min_length=min_length)

    def with_thresholds(self, latin_max: int, latin_greek_cyrillic_max: int) -> "LocalizedNameConfig":
        return replace(
            self,
            latin_max_codepoint=latin_max,
            latin_greek_cyrillic_max_codepoint=latin_greek_cyrillic_max,
        )


@dataclass(frozen=True)
class ResolutionProfile:
    """Switches that distinguish the public entry points."""

    apply_abbreviation: bool = False
    allow_brackets: bool = True
    prefer_pure_latin_first: bool = False


PLACE_PROFILE = ResolutionProfile()
STREET_PROFILE = ResolutionProfile(apply_abbreviation=True)
WITHOUT_BRACKETS_PROFILE = ResolutionProfile(allow_brackets=False)
LATIN_PROFILE = ResolutionProfile(allow_brackets=False, prefer_pure_latin_first=True)


# ════════════════════════════════════════════════════════════════════════════════
# STREET ABBREVIATION
# ════════════════════════════════════════════════════════════════════════════════


class StreetAbbreviator:
    """Shortens long German street names (Straße -> Str., Doktor -> Dr., ...)."""

    def __init__(self, config: Optional[LocalizedNameConfig] = None):
        self._config = config or LocalizedNameConfig.create_default()

    def abbreviate(self, text: Optional[str]) -> Optional[str]:
        if text is None or len(text) < self._config.abbreviation_min_length:
            return text
        for rule in self._config.abbreviation_rules:
            text = rule.apply(text)
        return text


# ════════════════════════════════════════════════════════════════════════════════
# NAME RESOLVER
# ════════════════════════════════════════════════════════════════════════════════


def _identity(text: Optional[str]) -> Optional[str]:
    return text


def _bracketed(native: str, other: str, loc_in_brackets: bool) -> str:
    if loc_in_brackets:
        return f"{native} ({other})"
    return f"{other} ({native})"


class NameResolver:
    """Chooses the display name of a feature from its candidate name fields."""

    def __init__(
        self,
        config: Optional[LocalizedNameConfig] = None,
        transliterator: Optional[Transliterator] = None,
    ):
        self._config = config or LocalizedNameConfig.create_default()
        self._abbreviator = StreetAbbreviator(self._config)
        self._transliterator = transliterator or GeoTransliterator()

    @property
    def config(self) -> LocalizedNameConfig:
        return self._config

    # Public API methods
    def get_localized_placename(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        loc_in_brackets: bool,
        geo_context: Optional[Any] = None,
    ) -> Optional[str]:
        return self.resolve(name, local_name, int_name, name_en, loc_in_brackets, geo_context, PLACE_PROFILE)

    def get_localized_streetname(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        loc_in_brackets: bool,
        geo_context: Optional[Any] = None,
    ) -> Optional[str]:
        return self.resolve(name, local_name, int_name, name_en, loc_in_brackets, geo_context, STREET_PROFILE)

    def get_localized_name_without_brackets(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        geo_context: Optional[Any] = None,
    ) -> Optional[str]:
        return self.resolve(name, local_name, int_name, name_en, False, geo_context, WITHOUT_BRACKETS_PROFILE)

    def get_latin_name(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        geo_context: Optional[Any] = None,
    ) -> Optional[str]:
        return self.resolve(name, local_name, int_name, name_en, False, geo_context, LATIN_PROFILE)

    def abbreviate_street(self, text: Optional[str]) -> Optional[str]:
        return self._abbreviator.abbreviate(text)

    def resolve(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        loc_in_brackets: bool = False,
        geo_context: Optional[Any] = None,
        profile: ResolutionProfile = PLACE_PROFILE,
    ) -> Optional[str]:
        """
        Run the shared decision tree with the switches of `profile`.

        Raises TransliterationError if `name` has to be transliterated and the
        transliterator fails.
        """
        if profile.prefer_pure_latin_first:
            return self._resolve_latin_first(name, local_name, int_name, name_en, geo_context)

        finish: Callable[[Optional[str]], Optional[str]] = (
            self._abbreviator.abbreviate if profile.apply_abbreviation else _identity
        )

        if local_name is not None:
            return self._resolve_with_local_name(name, local_name, loc_in_brackets, profile, finish)

        # int_name wins over name_en, name_en is not consulted at all then
        fallback = int_name if int_name is not None else name_en
        if fallback is not None:
            # NULL never compares unequal, so a missing name is returned as is
            if name is not None and fallback != name:
                return finish(name) if self._is_latin(name) else fallback
            return finish(name)

        if name is None:
            return None
        if name == "":
            return ""
        if self._is_latin(name):
            return finish(name)

        transliterated = self._transliterate(name, geo_context)
        if not profile.allow_brackets:
            return transliterated
        return finish(_bracketed(name, transliterated, loc_in_brackets))

    def _resolve_with_local_name(
        self,
        name: Optional[str],
        local_name: str,
        loc_in_brackets: bool,
        profile: ResolutionProfile,
        finish: Callable[[Optional[str]], Optional[str]],
    ) -> Optional[str]:
        if name is None or not profile.allow_brackets:
            return finish(local_name)

        # a native name in another script family adds nothing readable to the label
        if not self._is_latin_or_greek_or_cyrillic(name):
            return finish(local_name)

        if local_name in name or "(" in name or "(" in local_name:
            return finish(name if loc_in_brackets else local_name)

        return finish(_bracketed(name, local_name, loc_in_brackets))

    def _resolve_latin_first(
        self,
        name: Optional[str],
        local_name: Optional[str],
        int_name: Optional[str],
        name_en: Optional[str],
        geo_context: Optional[Any],
    ) -> Optional[str]:
        if name and self._is_latin(name):
            return name

        for candidate in (local_name, int_name, name_en):
            if candidate is not None:
                return candidate

        if not name:
            return name
        return self._transliterate(name, geo_context)

    def _is_latin(self, text: str) -> bool:
        return is_latin(text, self._config.latin_max_codepoint)

    def _is_latin_or_greek_or_cyrillic(self, text: str) -> bool:
        return is_latin_or_greek_or_cyrillic(text, self._config.latin_greek_cyrillic_max_codepoint)

    def _transliterate(self, name: str, geo_context: Optional[Any]) -> str:
        logging.debug(f"Transliterating '{name}'")
        result = self._transliterator.transliterate(name, geo_context)
        if result is None:
            logging.warning(f"Transliterator returned no result for '{name}'")
            raise TransliterationError(f"no transliteration for '{name}'")
        return result


# Global resolver instance for module-level functions
_global_resolver: Optional[NameResolver] = None


def _get_global_resolver() -> NameResolver:
    """Get or create the global resolver instance."""
    global _global_resolver
    if _global_resolver is None:
        _global_resolver = NameResolver()
    return _global_resolver


def get_localized_placename(
    name: Optional[str],
    local_name: Optional[str],
    int_name: Optional[str],
    name_en: Optional[str],
    loc_in_brackets: bool,
    geo_context: Optional[Any] = None,
) -> Optional[str]:
    """
    Label for a place: "local (native)" style when both names are useful.

    Args:
        name: Native name of the feature
        local_name: Name in the rendering language
        int_name: International name
        name_en: English name
        loc_in_brackets: Put the local name in brackets instead of the native one
        geo_context: Location hint handed to the transliterator

    Returns:
        The label, "" for an empty name, or None if there is no name at all
    """
    return _get_global_resolver().get_localized_placename(
        name, local_name, int_name, name_en, loc_in_brackets, geo_context
    )


def get_localized_streetname(
    name: Optional[str],
    local_name: Optional[str],
    int_name: Optional[str],
    name_en: Optional[str],
    loc_in_brackets: bool,
    geo_context: Optional[Any] = None,
) -> Optional[str]:
    """Same as get_localized_placename, with German street abbreviations on names of 16+ chars."""
    return _get_global_resolver().get_localized_streetname(
        name, local_name, int_name, name_en, loc_in_brackets, geo_context
    )


def get_localized_name_without_brackets(
    name: Optional[str],
    local_name: Optional[str],
    int_name: Optional[str],
    name_en: Optional[str],
    geo_context: Optional[Any] = None,
) -> Optional[str]:
    """Single name, never a bracketed pair."""
    return _get_global_resolver().get_localized_name_without_brackets(name, local_name, int_name, name_en, geo_context)


def get_latin_name(
    name: Optional[str],
    local_name: Optional[str],
    int_name: Optional[str],
    name_en: Optional[str],
    geo_context: Optional[Any] = None,
) -> Optional[str]:
    """Latin name if there is one, else local_name, int_name, name_en, then a transliteration."""
    return _get_global_resolver().get_latin_name(name, local_name, int_name, name_en, geo_context)


def abbreviate_street(text: Optional[str]) -> Optional[str]:
    return _get_global_resolver().abbreviate_street(text)


resolve_place_name = get_localized_placename
resolve_street_name = get_localized_streetname
resolve_name_without_brackets = get_localized_name_without_brackets
resolve_latin_name = get_latin_name
