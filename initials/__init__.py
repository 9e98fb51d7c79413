from initials.initials import (
    CaseMode,
    CharacterFilter,
    InitialsConfig,
    InitialsGenerator,
    InitialsResult,
    Option,
    apportion_length,
    clear_cache,
    get_initials,
    with_camel_case,
    with_length,
    with_lowercase,
    with_separator,
    with_sensitive,
    with_special_characters,
    with_uppercase,
    with_word_length,
)

__all__ = [
    "CaseMode",
    "CharacterFilter",
    "InitialsConfig",
    "InitialsGenerator",
    "InitialsResult",
    "Option",
    "apportion_length",
    "clear_cache",
    "get_initials",
    "with_camel_case",
    "with_length",
    "with_lowercase",
    "with_separator",
    "with_sensitive",
    "with_special_characters",
    "with_uppercase",
    "with_word_length",
]
