# ═════════════════════════════════════════════════════════════════════════════════
# STATIC DATA FOR NAME LOCALIZATION
# ═════════════════════════════════════════════════════════════════════════════════
#
# Two kinds of data live here:
# 1. CODEPOINT THRESHOLDS: upper bounds used to approximate script families
# 2. STREET_ABBREVIATION_RULES: ordered German street-name abbreviations
#
# Rules are applied group by group in the order listed. A group only runs when
# its guard substring occurs in the (already partially abbreviated) text.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# Highest codepoint still treated as Latin (end of Latin Extended-B, U+024F)
LATIN_MAX_CODEPOINT = 591

# Highest codepoint of the Latin/Greek/Cyrillic family (end of Cyrillic Supplement, U+052F)
LATIN_GREEK_CYRILLIC_MAX_CODEPOINT = 1327

# CJK Unified Ideographs block
CJK_RANGE = (0x4E00, 0x9FFF)

# Names shorter than this are never abbreviated
ABBREVIATION_MIN_LENGTH = 16

# (guard, ((pattern, replacement, whole_word), ...))
# whole_word=True: pattern must end at a word boundary, every occurrence
# whole_word=False: literal replacement of every occurrence
STREET_ABBREVIATION_RULES = (
    (
        "traße",
        (
            ("Straße", "Str.", True),
            ("straße", "str.", True),
        ),
    ),
    (
        "asse",
        (
            ("Strasse", "Str.", True),
            ("strasse", "str.", True),
            ("Gasse", "G.", True),
            ("gasse", "g.", True),
        ),
    ),
    (
        "latz",
        (
            ("Platz", "Pl.", True),
            ("platz", "pl.", True),
        ),
    ),
    (
        "Professor",
        (
            ("Professor ", "Prof. ", False),
            ("Professor-", "Prof.-", False),
        ),
    ),
    (
        "Doktor",
        (
            ("Doktor ", "Dr. ", False),
            ("Doktor-", "Dr.-", False),
        ),
    ),
    (
        "Bürgermeister",
        (
            ("Bürgermeister ", "Bgm. ", False),
            ("Bürgermeister-", "Bgm.-", False),
        ),
    ),
    (
        "Sankt",
        (
            ("Sankt ", "St. ", False),
            ("Sankt-", "St.-", False),
        ),
    ),
)

# Human readable names for the resolution modes, used by the CLI
RESOLUTION_MODES = MappingProxyType(
    {
        "place": "get_localized_placename",
        "street": "get_localized_streetname",
        "plain": "get_localized_name_without_brackets",
        "latin": "get_latin_name",
    }
)
