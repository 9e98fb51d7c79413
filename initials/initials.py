"""
Name Initials Generation Module

This module turns a full name ("John Doe", "Mary-Kate Olsen", "Zoë Saldaña") into a compact initials
string ("JD", "MKO", "ZS") with configurable casing, separator, target length and character filtering.

## Overview

The core functionality is provided by the `InitialsGenerator` class, which runs every name through a
fixed pipeline:

1. **Character Filtering**: Strips special punctuation, folds accented letters to ASCII, drops
   non-printable codepoints
2. **Word Segmentation**: Splits on runs of spaces and hyphens
3. **Length Apportionment**: Distributes the target length across the words
4. **Initial Extraction**: Takes the leading codepoints of each word and applies the case mode
5. **Assembly**: Joins the initials with the configured separator

## Architecture

- **InitialsConfig**: Immutable configuration with documented defaults and `with_*` update methods
- **CharacterFilter**: Pure normalization of the raw input
- **InitialsGenerator**: Main engine, reusable across any number of names
- **Option setters**: Composable functions (`with_separator`, `with_length`, ...) for `get_initials`

## Usage Examples

```python
from initials import get_initials, with_separator, with_length, with_camel_case, with_word_length

get_initials("John Doe")
# Returns: "JD"

get_initials("John Doe", with_separator("."))
# Returns: "J.D"

get_initials("John Doe", with_length(3), with_camel_case())
# Returns: "JDo"

get_initials("Mary-Kate Olsen", with_word_length())
# Returns: "MKO"

# Reusable engine with an explicit configuration
from initials import InitialsConfig, InitialsGenerator, CaseMode

generator = InitialsGenerator(InitialsConfig(separator=" ", case_mode=CaseMode.LOWERCASE))
generator.generate("Ada Lovelace")
# Returns: "a l"

generator.explain("Ada Lovelace").lengths
# Returns: (1, 1)
```

## Length Apportionment

The target length is a budget of codepoints. The first word of a multi-word name always yields one
codepoint, middle words yield `floor(budget / words_left)` once the budget exceeds the words left, and
the last word takes whatever budget remains. Every length is clamped to the word itself, so
`get_initials("John Doe", with_length(10))` returns "JDOE" with no padding.

## Error Handling

Generation never raises. Empty input, delimiter-only input and names that filter down to nothing all
return "". Malformed configuration values fall back to the documented defaults with a logged warning.

## Thread Safety

Configurations are frozen and generators hold no per-call state, so a single generator (or the
module-level `get_initials`) can be used from any number of threads without locking.
"""

from __future__ import annotations
import logging
import re
import time
import unicodedata
from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from typing import Callable, List, Optional, Tuple, Union

from initials.initials_data import (
    FRIENDLY_TRANSLATION,
    PRINTABLE_ASCII_MAX,
    PRINTABLE_ASCII_MIN,
    SPECIAL_CHARACTERS,
    WORD_DELIMITERS,
)

DEFAULT_LENGTH = 2
DEFAULT_SEPARATOR = ""


# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

_DELIMITER_CLASS = "[" + "".join(re.escape(d) for d in sorted(WORD_DELIMITERS)) + "]+"

# Capturing group keeps the delimiters in re.split output
_DELIMITER_RUN_PATTERN = re.compile(f"({_DELIMITER_CLASS})")
_WORD_SPLIT_PATTERN = re.compile(_DELIMITER_CLASS)
_NON_PRINTABLE_PATTERN = re.compile(f"[^\\x{PRINTABLE_ASCII_MIN:02X}-\\x{PRINTABLE_ASCII_MAX:02X}]")


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


class CaseMode(Enum):
    """Casing applied to each extracted initial. Exactly one mode is active."""

    SENSITIVE = "sensitive"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    CAMEL_CASE = "camel_case"

    @classmethod
    def parse(cls, value: Union["CaseMode", str, None]) -> "CaseMode":
        """
        Resolve a case mode from an enum member or a loose string name.

        Accepts "upper", "UPPERCASE", "camelCase", "camel-case" and similar spellings.
        Anything unrecognised falls back to UPPERCASE.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = re.sub(r"[\s_-]", "", value).lower()
            mode = _CASE_MODE_ALIASES.get(key)
            if mode is not None:
                return mode
        logging.warning(f"Unknown case mode {value!r}, falling back to {cls.UPPERCASE.value}")
        return cls.UPPERCASE


_CASE_MODE_ALIASES = {
    "sensitive": CaseMode.SENSITIVE,
    "casesensitive": CaseMode.SENSITIVE,
    "asis": CaseMode.SENSITIVE,
    "lower": CaseMode.LOWERCASE,
    "lowercase": CaseMode.LOWERCASE,
    "upper": CaseMode.UPPERCASE,
    "uppercase": CaseMode.UPPERCASE,
    "camel": CaseMode.CAMEL_CASE,
    "camelcase": CaseMode.CAMEL_CASE,
}


@dataclass(frozen=True)
class InitialsConfig:
    """Immutable generator configuration. Invalid values are replaced by defaults on construction."""

    separator: str = DEFAULT_SEPARATOR
    case_mode: CaseMode = CaseMode.UPPERCASE
    special_characters: bool = False
    length: int = DEFAULT_LENGTH
    word_length: bool = False

    def __post_init__(self):
        if self.separator is None:
            object.__setattr__(self, "separator", DEFAULT_SEPARATOR)
        elif not isinstance(self.separator, str):
            object.__setattr__(self, "separator", str(self.separator))

        if not isinstance(self.case_mode, CaseMode):
            object.__setattr__(self, "case_mode", CaseMode.parse(self.case_mode))

        # bool is an int subclass but never a meaningful length
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 0:
            logging.warning(f"Invalid initials length {self.length!r}, falling back to {DEFAULT_LENGTH}")
            object.__setattr__(self, "length", DEFAULT_LENGTH)

        object.__setattr__(self, "special_characters", bool(self.special_characters))
        object.__setattr__(self, "word_length", bool(self.word_length))

    @classmethod
    def create_default(cls) -> "InitialsConfig":
        """Factory for the documented defaults: no separator, uppercase, length 2."""
        return cls()

    def with_separator(self, separator: str) -> "InitialsConfig":
        return replace(self, separator=separator)

    def with_case_mode(self, case_mode: Union[CaseMode, str]) -> "InitialsConfig":
        return replace(self, case_mode=case_mode)

    def with_length(self, length: int) -> "InitialsConfig":
        return replace(self, length=length)

    def with_word_length(self, enabled: bool = True) -> "InitialsConfig":
        return replace(self, word_length=enabled)

    def with_special_characters(self, enabled: bool = True) -> "InitialsConfig":
        return replace(self, special_characters=enabled)


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class InitialsResult:
    """Trace of a single generation run."""

    raw: str  # Original input: "Zoë Saldaña"
    filtered: str  # After special/friendly/printable filtering: "Zoe Saldana"
    words: Tuple[str, ...]  # After delimiter splitting: ("Zoe", "Saldana")
    lengths: Tuple[int, ...]  # Codepoints taken from each contributing word: (1, 1)
    initials: str  # Final output: "ZS"

    @classmethod
    def empty(cls, raw: str = "", filtered: str = "") -> "InitialsResult":
        """Factory for input that yields no words."""
        return cls(raw, filtered, (), (), "")


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER FILTER
# ════════════════════════════════════════════════════════════════════════════════


class CharacterFilter:
    """Pure normalization of raw names ahead of segmentation."""

    def __init__(self, special_characters: bool = False):
        self._special_characters = special_characters
        self._special_tr = str.maketrans("", "", "".join(sorted(SPECIAL_CHARACTERS)))

    def apply(self, name: str) -> str:
        """
        Filter a raw name, keeping its delimiters in place.

        Args:
            name: Raw input, e.g. "M@ry-Zoë 😅"

        Returns:
            Filtered text, e.g. "Mry-Zoe 😅"
        """
        if not self._special_characters:
            name = self.strip_special_characters(name)
        name = self.fold_friendly_characters(name)
        return self.strip_non_printable(name)

    def strip_special_characters(self, name: str) -> str:
        return name.translate(self._special_tr)

    @staticmethod
    def fold_friendly_characters(name: str) -> str:
        return name.translate(FRIENDLY_TRANSLATION)

    @staticmethod
    def strip_non_printable(name: str) -> str:
        """
        Drop codepoints outside printable ASCII, one word at a time.

        A word made only of such codepoints (emoji, non-Latin scripts) keeps its visible codepoints
        so that filtering can never erase a word entirely. Whitespace and control characters are
        always dropped.
        """
        parts = _DELIMITER_RUN_PATTERN.split(name)
        # re.split with a capturing group alternates word, delimiter, word, ...
        for i in range(0, len(parts), 2):
            word = parts[i]
            if not word:
                continue
            stripped = _NON_PRINTABLE_PATTERN.sub("", word)
            if not stripped:
                stripped = "".join(c for c in word if not c.isspace() and not unicodedata.category(c).startswith("C"))
                if stripped:
                    logging.debug(f"Keeping non-ASCII word {word!r} unfiltered")
            parts[i] = stripped
        return "".join(parts)

    @staticmethod
    def segment(text: str) -> Tuple[str, ...]:
        """Split on runs of spaces and hyphens, dropping empty fields."""
        return tuple(word for word in _WORD_SPLIT_PATTERN.split(text) if word)


# ════════════════════════════════════════════════════════════════════════════════
# LENGTH APPORTIONMENT
# ════════════════════════════════════════════════════════════════════════════════


def apportion_length(index: int, word_count: int, remaining: int) -> int:
    """
    Number of codepoints to request from word `index` given the remaining budget.

    The caller stops before asking once `remaining` reaches zero and clamps the result to the word.

    Args:
        index: 0-based position of the word
        word_count: Total number of words in the name
        remaining: Budget still unallocated before this word

    Returns:
        Requested length for this word
    """
    words_left = word_count - index
    length = 1

    if index == 0 and word_count > 1:
        length = 1
    elif remaining < words_left:
        length = 1
    elif remaining > words_left:
        length = remaining // words_left

    # Last word consumes whatever is left
    if index == word_count - 1:
        length = remaining

    return length


# ════════════════════════════════════════════════════════════════════════════════
# GENERATOR
# ════════════════════════════════════════════════════════════════════════════════


class InitialsGenerator:
    """Main initials engine bound to one configuration."""

    def __init__(self, config: Optional[InitialsConfig] = None):
        self._config = config if config is not None else InitialsConfig.create_default()
        self._filter = CharacterFilter(self._config.special_characters)

    @property
    def config(self) -> InitialsConfig:
        return self._config

    def generate(self, name: Optional[str]) -> str:
        """Return the initials for `name`, or "" when it contains no words."""
        return self.explain(name).initials

    def explain(self, name: Optional[str]) -> InitialsResult:
        """Run the full pipeline and return every intermediate stage."""
        raw = name if name is not None else ""
        if not isinstance(raw, str):
            raw = str(raw)

        filtered = self._filter.apply(raw)
        words = self._filter.segment(filtered)
        if not words:
            return InitialsResult.empty(raw, filtered)

        word_count = len(words)
        remaining = word_count if self._config.word_length else self._config.length

        parts: List[str] = []
        lengths: List[int] = []
        for i, word in enumerate(words):
            if remaining == 0:
                break

            length = apportion_length(i, word_count, remaining)
            taken = word[:length]
            parts.append(self._apply_case(taken))
            lengths.append(len(taken))
            remaining -= len(taken)

        # Separator only sits between contributing words, never after the last
        initials = self._config.separator.join(parts)
        return InitialsResult(raw, filtered, words, tuple(lengths), initials)

    def _apply_case(self, initial: str) -> str:
        mode = self._config.case_mode
        if mode is CaseMode.SENSITIVE:
            return initial
        if mode is CaseMode.LOWERCASE:
            return _map_codepoints(initial, str.lower)
        if mode is CaseMode.CAMEL_CASE:
            return _map_codepoints(initial[:1], str.upper) + initial[1:]
        return _map_codepoints(initial, str.upper)


def _map_codepoints(text: str, case_map: Callable[[str], str]) -> str:
    """
    Case-map one codepoint at a time, keeping any codepoint whose mapping is not a single codepoint.

    Full Unicode case mapping can expand a codepoint ("ﬀ" → "FF", "և" → "ԵՒ"), which would push the
    output past the length budget already charged for it.
    """
    mapped = []
    for c in text:
        converted = case_map(c)
        mapped.append(converted if len(converted) == 1 else c)
    return "".join(mapped)


# ════════════════════════════════════════════════════════════════════════════════
# OPTION SETTERS
# ════════════════════════════════════════════════════════════════════════════════

Option = Callable[[InitialsConfig], InitialsConfig]


def with_separator(separator: str) -> Option:
    """Separator placed between initials."""
    return lambda config: config.with_separator(separator)


def with_sensitive() -> Option:
    """Keep initials exactly as they appear in the name."""
    return lambda config: config.with_case_mode(CaseMode.SENSITIVE)


def with_lowercase() -> Option:
    return lambda config: config.with_case_mode(CaseMode.LOWERCASE)


def with_uppercase() -> Option:
    return lambda config: config.with_case_mode(CaseMode.UPPERCASE)


def with_camel_case() -> Option:
    """Uppercase the first codepoint of each initial, keep the rest as found."""
    return lambda config: config.with_case_mode(CaseMode.CAMEL_CASE)


def with_length(length: int) -> Option:
    """Target number of codepoints in the result."""
    return lambda config: config.with_length(length)


def with_word_length() -> Option:
    """Use the number of words as the target length."""
    return lambda config: config.with_word_length(True)


def with_special_characters() -> Option:
    """Keep punctuation such as "@" or "." instead of stripping it."""
    return lambda config: config.with_special_characters(True)


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=128)
def _get_generator(config: InitialsConfig) -> InitialsGenerator:
    """Get or create the generator for a configuration."""
    return InitialsGenerator(config)


def get_initials(name: Optional[str], *options: Option, config: Optional[InitialsConfig] = None) -> str:
    """
    Module-level convenience function for initials generation.

    Args:
        name: Input name string
        *options: Option setters applied in order; the last case mode wins
        config: Base configuration, defaults to InitialsConfig.create_default()

    Returns:
        Initials string, possibly empty
    """
    resolved = config if config is not None else InitialsConfig.create_default()
    for option in options:
        resolved = option(resolved)
    return _get_generator(resolved).generate(name)


def clear_cache() -> None:
    """Drop cached generators."""
    _get_generator.cache_clear()


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE CHECK
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test() -> None:
    """Print throughput for a mix of plain, accented, hyphenated and emoji names."""
    import random

    first_names = ["John", "Mary-Kate", "Zoë", "François", "Åsa", "Ødegaard", "M@ry", "Jean-Luc", "😅"]
    last_names = ["Doe", "Olsen", "Saldaña", "Müller", "Núñez", "O'Brien", "Łukasz", "Smith", "李"]
    configs = [
        InitialsConfig.create_default(),
        InitialsConfig(separator=".", length=3),
        InitialsConfig(case_mode=CaseMode.CAMEL_CASE, length=4),
        InitialsConfig(word_length=True),
    ]

    names = [f"{random.choice(first_names)} {random.choice(last_names)}" for _ in range(10_000)]

    for config in configs:
        generator = InitialsGenerator(config)
        start = time.perf_counter()
        for name in names:
            generator.generate(name)
        elapsed = time.perf_counter() - start

        rate = len(names) / elapsed
        per_name = (elapsed / len(names)) * 1_000_000
        print(f"{config}: {rate:.0f} names/second ({per_name:.1f} μs/name)")


if __name__ == "__main__":
    run_performance_test()
