"""
Component tests for the initials pipeline.

Exercises the pieces behind `get_initials` directly:
- InitialsConfig defaults, immutability and fallback of malformed values
- CaseMode parsing
- CharacterFilter stages
- Length apportionment rules
- InitialsGenerator.explain traces
"""

import dataclasses
import logging
import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import initials
sys.path.insert(0, str(Path(__file__).parent.parent))

from initials import (
    CaseMode,
    CharacterFilter,
    InitialsConfig,
    InitialsGenerator,
    InitialsResult,
    apportion_length,
    get_initials,
    with_length,
)
from initials.initials import _map_codepoints
from initials.initials_data import FRIENDLY_CHARACTERS, FRIENDLY_TRANSLATION, SPECIAL_CHARACTERS


@pytest.fixture(scope="module")
def character_filter():
    return CharacterFilter()


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


def test_default_config():
    config = InitialsConfig.create_default()
    assert config.separator == ""
    assert config.case_mode is CaseMode.UPPERCASE
    assert config.special_characters is False
    assert config.length == 2
    assert config.word_length is False
    assert config == InitialsConfig()


def test_config_is_immutable():
    config = InitialsConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.length = 5


def test_with_methods_return_copies():
    config = InitialsConfig()
    updated = config.with_separator(".").with_length(4).with_case_mode(CaseMode.LOWERCASE).with_word_length()
    assert updated.separator == "."
    assert updated.length == 4
    assert updated.case_mode is CaseMode.LOWERCASE
    assert updated.word_length is True
    assert config == InitialsConfig()


@pytest.mark.parametrize("length", [-1, -100, "3", 2.5, True, None])
def test_malformed_length_falls_back_to_default(length, caplog):
    with caplog.at_level(logging.WARNING):
        config = InitialsConfig(length=length)
    assert config.length == 2
    assert "Invalid initials length" in caplog.text


def test_zero_length_is_valid(caplog):
    with caplog.at_level(logging.WARNING):
        config = InitialsConfig(length=0)
    assert config.length == 0
    assert caplog.text == ""
    assert get_initials("John Doe", with_length(0)) == ""


def test_none_separator_falls_back_to_empty():
    assert InitialsConfig(separator=None).separator == ""
    assert get_initials("John Doe", config=InitialsConfig(separator=None)) == "JD"


def test_non_string_separator_is_stringified():
    assert get_initials("John Doe", config=InitialsConfig(separator=0)) == "J0D"


def test_config_is_hashable():
    assert hash(InitialsConfig(separator=".")) == hash(InitialsConfig(separator="."))


# ════════════════════════════════════════════════════════════════════════════════
# CASE MODE
# ════════════════════════════════════════════════════════════════════════════════

CASE_MODE_NAMES = [
    ("sensitive", CaseMode.SENSITIVE),
    ("as-is", CaseMode.SENSITIVE),
    ("lower", CaseMode.LOWERCASE),
    ("LOWERCASE", CaseMode.LOWERCASE),
    ("upper", CaseMode.UPPERCASE),
    ("uppercase", CaseMode.UPPERCASE),
    ("camelCase", CaseMode.CAMEL_CASE),
    ("camel_case", CaseMode.CAMEL_CASE),
    ("camel-case", CaseMode.CAMEL_CASE),
    (CaseMode.LOWERCASE, CaseMode.LOWERCASE),
]


def test_case_mode_parse():
    for value, expected in CASE_MODE_NAMES:
        assert CaseMode.parse(value) is expected, f"{value!r} parsed wrong"


def test_unknown_case_mode_falls_back_to_uppercase(caplog):
    with caplog.at_level(logging.WARNING):
        config = InitialsConfig(case_mode="shouting")
    assert config.case_mode is CaseMode.UPPERCASE
    assert "Unknown case mode" in caplog.text


def test_case_mode_from_string_config():
    config = InitialsConfig(case_mode="camelCase", length=3)
    assert get_initials("john doe", config=config) == "JDo"


def test_case_mapping_keeps_one_codepoint_per_codepoint():
    assert _map_codepoints("ﬀ", str.upper) == "ﬀ"
    assert _map_codepoints("և", str.upper) == "և"
    assert _map_codepoints("İ", str.lower) == "İ"
    assert _map_codepoints("ωﬀa", str.upper) == "ΩﬀA"
    assert _map_codepoints("ÀB", str.lower) == "àb"


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER FILTER
# ════════════════════════════════════════════════════════════════════════════════


def test_strip_special_characters(character_filter):
    assert character_filter.strip_special_characters('!@#$%^&*(),.?":{}|<>_') == ""
    assert character_filter.strip_special_characters("M@ry O'Brien-Smith") == "Mry O'Brien-Smith"


def test_special_characters_kept_when_allowed():
    assert CharacterFilter(special_characters=True).apply("M@ry O.") == "M@ry O."
    assert CharacterFilter(special_characters=False).apply("M@ry O.") == "Mry O"


def test_fold_friendly_characters(character_filter):
    assert character_filter.fold_friendly_characters("àáâãäå ÀÁÂÃÄÅ") == "aaaaaa AAAAAA"
    assert character_filter.fold_friendly_characters("çñý ÇÑÝ") == "cny CNY"
    assert character_filter.fold_friendly_characters("Straße Ærø") == "Strasse AEro"


def test_friendly_table_covers_latin1_accented_letters():
    for base in "aeioucnyAEIOUCNY":
        assert FRIENDLY_CHARACTERS[base], f"No variants for {base!r}"
    for variant in "àáâãäåèéêëìíîïòóôõöùúûüçñýÿÀÁÂÃÄÅÈÉÊËÌÍÎÏÒÓÔÕÖÙÚÛÜÇÑÝ":
        assert FRIENDLY_TRANSLATION[ord(variant)].lower() in "aeioucny", f"{variant!r} not folded"


def test_friendly_table_is_read_only():
    with pytest.raises(TypeError):
        FRIENDLY_CHARACTERS["q"] = ("ꝗ",)


def test_special_characters_set():
    assert SPECIAL_CHARACTERS == frozenset('!@#$%^&*(),.?":{}|<>_')
    assert "'" not in SPECIAL_CHARACTERS
    assert "-" not in SPECIAL_CHARACTERS


def test_strip_non_printable(character_filter):
    assert character_filter.strip_non_printable("J😅hn Doe") == "Jhn Doe"
    assert character_filter.strip_non_printable("John 😅") == "John 😅"
    assert character_filter.strip_non_printable("李-Wang") == "李-Wang"
    assert character_filter.strip_non_printable("\t \x00") == " "
    assert character_filter.strip_non_printable("😅\u200b") == "😅"


def test_filter_keeps_delimiters(character_filter):
    assert character_filter.apply("Mary-Kate  Olsen") == "Mary-Kate  Olsen"
    assert character_filter.apply("M@ry-Zoë 😅") == "Mry-Zoe 😅"


def test_filter_never_empties_non_ascii_words(character_filter):
    for name in ["😅", "李小龙", "Ωμέγα", "😅 🙂", "Иван Петров"]:
        filtered = character_filter.apply(name)
        assert character_filter.segment(filtered), f"'{name}' lost all its words"


def test_invisible_words_are_dropped():
    for name in ["\u200b", "\x01", "\u200b \x01", "\ufeff-\x7f"]:
        assert get_initials(name) == "", f"{name!r} produced initials"
    assert get_initials("\u200b 😅") == "😅"
    assert get_initials("\x01John \u200bDoe") == "JD"


def test_segment(character_filter):
    assert character_filter.segment("John Doe") == ("John", "Doe")
    assert character_filter.segment("Mary-Kate Olsen") == ("Mary", "Kate", "Olsen")
    assert character_filter.segment(" -- John - -Doe-- ") == ("John", "Doe")
    assert character_filter.segment(" - ") == ()
    assert character_filter.segment("") == ()


# ════════════════════════════════════════════════════════════════════════════════
# LENGTH APPORTIONMENT
# ════════════════════════════════════════════════════════════════════════════════

# (index, word_count, remaining, expected)
APPORTION_CASES = [
    # First of several words always yields one
    (0, 2, 2, 1),
    (0, 2, 10, 1),
    (0, 5, 20, 1),
    # Single word takes the whole budget
    (0, 1, 1, 1),
    (0, 1, 5, 5),
    # Budget below words left
    (1, 4, 2, 1),
    # Budget equal to words left
    (1, 3, 2, 1),
    # Budget above words left is split evenly, rounding down
    (1, 3, 4, 2),
    (1, 3, 5, 2),
    (1, 4, 9, 3),
    # Last word consumes the rest
    (1, 2, 1, 1),
    (1, 2, 7, 7),
    (2, 3, 3, 3),
]


def test_apportion_length():
    for index, word_count, remaining, expected in APPORTION_CASES:
        result = apportion_length(index, word_count, remaining)
        assert result == expected, f"apportion_length({index}, {word_count}, {remaining}) = {result}, want {expected}"


# ════════════════════════════════════════════════════════════════════════════════
# GENERATOR TRACES
# ════════════════════════════════════════════════════════════════════════════════


def test_explain_trace():
    result = InitialsGenerator().explain("Zoë Saldaña")
    assert result == InitialsResult(
        raw="Zoë Saldaña",
        filtered="Zoe Saldana",
        words=("Zoe", "Saldana"),
        lengths=(1, 1),
        initials="ZS",
    )


def test_explain_clamped_lengths():
    result = InitialsGenerator(InitialsConfig(length=10)).explain("John Doe")
    assert result.lengths == (1, 3)
    assert result.initials == "JDOE"


def test_explain_stops_when_budget_exhausted():
    result = InitialsGenerator(InitialsConfig(length=2)).explain("John Ronald Reuel Tolkien")
    assert result.words == ("John", "Ronald", "Reuel", "Tolkien")
    assert result.lengths == (1, 1)
    assert result.initials == "JR"


def test_explain_counts_codepoints():
    result = InitialsGenerator(InitialsConfig(length=3)).explain("😅😅😅😅 Smile")
    assert result.lengths == (1, 2)
    assert result.initials == "😅SM"


def test_explain_empty():
    result = InitialsGenerator().explain(" -@- ")
    assert result.words == ()
    assert result.initials == ""


def test_generator_default_config():
    generator = InitialsGenerator()
    assert generator.config == InitialsConfig.create_default()
    assert generator.generate("Ada Lovelace") == "AL"


def test_generator_docstring_example():
    generator = InitialsGenerator(InitialsConfig(separator=" ", case_mode=CaseMode.LOWERCASE))
    assert generator.generate("Ada Lovelace") == "a l"
    assert generator.explain("Ada Lovelace").lengths == (1, 1)
