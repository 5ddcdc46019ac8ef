"""
Transliteration of non-Latin names.

The resolver in `localized_names.localized_names` only needs something with a
`transliterate(text, geo_context=None) -> str` method. `GeoTransliterator` is the
default implementation:

- Runs of CJK ideographs are romanized with pypinyin (Mandarin readings).
- Everything else goes through unidecode.

The location hint is opaque to the resolver and is handed to the transliterator
unchanged. `GeoTransliterator` accepts it but does not use it, so its output is
the same for every location. Transliterators that read place names in a local
language (Japanese readings of kanji, for example) can be injected into
`NameResolver` and use the `country_code` of a `GeoContext`.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import pypinyin
from unidecode import unidecode

from localized_names.script_classifier import contains_cjk


_HAN_RUN_PATTERN = re.compile(r"([\u4e00-\u9fff]+)")


class TransliterationError(ValueError):
    """Raised when a name cannot be transliterated."""


@dataclass(frozen=True)
class GeoContext:
    """Location hint for transliteration: ISO 3166-1 country code of the feature."""

    country_code: Optional[str] = None


class Transliterator(Protocol):
    def transliterate(self, text: str, geo_context: Optional[Any] = None) -> str: ...


class GeoTransliterator:
    """Default transliteration service with an in-memory cache."""

    def __init__(self) -> None:
        self._cache: Dict[str, str] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def transliterate(self, text: str, geo_context: Optional[Any] = None) -> str:
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        result = self._transliterate_uncached(text)
        if text and not result.strip():
            logging.warning(f"Transliteration of '{text}' produced an empty result")
            raise TransliterationError(f"empty transliteration for '{text}'")

        self._cache[text] = result
        return result

    def _transliterate_uncached(self, text: str) -> str:
        if not contains_cjk(text):
            return self._generic(text).strip()

        parts: List[str] = []
        for chunk in _HAN_RUN_PATTERN.split(text):
            if not chunk:
                continue
            if _HAN_RUN_PATTERN.fullmatch(chunk):
                parts.append(self._han_to_pinyin(chunk))
            else:
                parts.append(self._generic(chunk))
        return "".join(parts).strip()

    def _han_to_pinyin(self, han_str: str) -> str:
        try:
            syllables = pypinyin.lazy_pinyin(han_str, style=pypinyin.Style.NORMAL)
        except (AttributeError, ValueError, TypeError) as e:
            logging.warning(f"Pypinyin failed for '{han_str}': {e}")
            raise TransliterationError(str(e)) from e
        return "".join(syllables).capitalize()

    def _generic(self, text: str) -> str:
        try:
            return unidecode(text)
        except (AttributeError, ValueError, TypeError) as e:
            logging.warning(f"Unidecode failed for '{text}': {e}")
            raise TransliterationError(str(e)) from e
