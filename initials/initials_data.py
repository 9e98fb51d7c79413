# ═════════════════════════════════════════════════════════════════════════════════
# CHARACTER FILTERING TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data used by the character filter, applied in this order:
# 1. SPECIAL_CHARACTERS: punctuation stripped unless special characters are allowed
# 2. FRIENDLY_CHARACTERS: accented/diacritic letters folded to their ASCII base
# 3. PRINTABLE_ASCII_*: bounds of the codepoints that survive the final pass
#
# All tables are read-only after import.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType
from typing import Dict

# Characters that split a name into words
WORD_DELIMITERS = frozenset({" ", "-"})

# Punctuation removed from names by default
SPECIAL_CHARACTERS = frozenset('!@#$%^&*(),.?":{}|<>_')

# Inclusive codepoint range kept by the printable-ASCII pass
PRINTABLE_ASCII_MIN = 0x20
PRINTABLE_ASCII_MAX = 0x7E

# Plain ASCII replacement → accented variants folded into it
_FRIENDLY_VARIANTS = {
    # Lowercase, Latin-1 Supplement
    "a": "àáâãäåāăą",
    "c": "çćĉċč",
    "d": "ðďđ",
    "e": "èéêëēĕėęě",
    "g": "ĝğġģ",
    "h": "ĥħ",
    "i": "ìíîïĩīĭįı",
    "j": "ĵ",
    "k": "ķ",
    "l": "ĺļľŀł",
    "n": "ñńņňŉ",
    "o": "òóôõöøōŏő",
    "r": "ŕŗř",
    "s": "śŝşš",
    "t": "ţťŧ",
    "u": "ùúûüũūŭůűų",
    "w": "ŵ",
    "y": "ýÿŷ",
    "z": "źżž",
    # Uppercase
    "A": "ÀÁÂÃÄÅĀĂĄ",
    "C": "ÇĆĈĊČ",
    "D": "ÐĎĐ",
    "E": "ÈÉÊËĒĔĖĘĚ",
    "G": "ĜĞĠĢ",
    "H": "ĤĦ",
    "I": "ÌÍÎÏĨĪĬĮİ",
    "J": "Ĵ",
    "K": "Ķ",
    "L": "ĹĻĽĿŁ",
    "N": "ÑŃŅŇ",
    "O": "ÒÓÔÕÖØŌŎŐ",
    "R": "ŔŖŘ",
    "S": "ŚŜŞŠ",
    "T": "ŢŤŦ",
    "U": "ÙÚÛÜŨŪŬŮŰŲ",
    "W": "Ŵ",
    "Y": "ÝŸŶ",
    "Z": "ŹŻŽ",
    # Ligatures and letters without a single-letter base
    "ss": "ß",
    "ae": "æ",
    "AE": "Æ",
    "oe": "œ",
    "OE": "Œ",
    "th": "þ",
    "TH": "Þ",
}

FRIENDLY_CHARACTERS = MappingProxyType({key: tuple(variants) for key, variants in _FRIENDLY_VARIANTS.items()})


def _build_friendly_translation() -> MappingProxyType:
    """Invert FRIENDLY_CHARACTERS into a str.translate table, rejecting variants mapped twice."""
    table: Dict[int, str] = {}
    for replacement, variants in FRIENDLY_CHARACTERS.items():
        for variant in variants:
            codepoint = ord(variant)
            if codepoint in table:
                raise ValueError(
                    f"Friendly character {variant!r} mapped to both {table[codepoint]!r} and {replacement!r}"
                )
            table[codepoint] = replacement
    return MappingProxyType(table)


# Codepoint → ASCII replacement, ready for str.translate
FRIENDLY_TRANSLATION = _build_friendly_translation()
