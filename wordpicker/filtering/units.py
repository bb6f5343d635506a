"""Predicate filter units.

Each option family contributes one independent unit; a word survives the
filter stage when every registered unit accepts it. Units are registered in a
fixed order so rejection statistics and custom filter calls are predictable.
"""

import re
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from wordpicker.core.config import SelectionConfig
from wordpicker.filtering.linguistic import find_unsupported_options
from wordpicker.scoring import scrabble_score
from wordpicker.utils.constants import Constants

_DIGIT = re.compile(r"[0-9]")
_NON_LETTER = re.compile(r"[^a-zA-Z]")


@dataclass(frozen=True)
class WordFilter:
    """A named predicate that a word must satisfy to stay in the pool."""

    name: str
    predicate: Callable[[str], bool]

    def __call__(self, word: str) -> bool:
        return bool(self.predicate(word))


def _lowered(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.lower() for value in values)


def _contains_any(word: str, parts: tuple[str, ...]) -> bool:
    lowered = word.lower()
    return any(part in lowered for part in parts)


def _has_repeats(word: str) -> bool:
    lowered = word.lower()
    return len(set(lowered)) != len(lowered)


def _exceeds_repeat_limit(word: str, limit: int) -> bool:
    return any(count > limit for count in Counter(word.lower()).values())


def _count_vowels(word: str) -> int:
    return sum(1 for char in word.lower() if char in Constants.VOWELS)


def _rhyme_suffix(target: str) -> str:
    return target[-Constants.RHYME_SUFFIX_LENGTH :].lower()


def _membership_units(config: SelectionConfig) -> list[WordFilter]:
    units = []
    if config.whitelist is not None:
        allowed = frozenset(_lowered(config.whitelist))
        units.append(WordFilter("whitelist", lambda w: w.lower() in allowed))
    if config.blacklist is not None:
        blocked = frozenset(_lowered(config.blacklist))
        units.append(WordFilter("blacklist", lambda w: w.lower() not in blocked))
    return units


def _length_units(config: SelectionConfig) -> list[WordFilter]:
    units = []
    if config.fix_length is not None:
        fixed = config.fix_length
        units.append(WordFilter("fix_length", lambda w: len(w) == fixed))
    if config.length_min is not None:
        minimum = config.length_min
        units.append(WordFilter("length_min", lambda w: len(w) >= minimum))
    if config.length_max is not None:
        maximum = config.length_max
        units.append(WordFilter("length_max", lambda w: len(w) <= maximum))
    return units


def _substring_units(config: SelectionConfig) -> list[WordFilter]:
    units = []
    if config.exclude_ambiguous:
        ambiguous = Constants.AMBIGUOUS_CHARACTERS
        units.append(
            WordFilter("exclude_ambiguous", lambda w: not any(c in ambiguous for c in w))
        )
    if config.filter_starts_with:
        prefixes = _lowered(config.filter_starts_with)
        units.append(WordFilter("filter_starts_with", lambda w: w.lower().startswith(prefixes)))
    if config.filter_ends_with:
        suffixes = _lowered(config.filter_ends_with)
        units.append(WordFilter("filter_ends_with", lambda w: w.lower().endswith(suffixes)))
    if config.exclude_substrings:
        substrings = _lowered(config.exclude_substrings)
        units.append(
            WordFilter("exclude_substrings", lambda w: not _contains_any(w, substrings))
        )
    if config.pattern is not None:
        pattern = config.pattern
        units.append(WordFilter("pattern", lambda w: pattern.search(w) is not None))
    return units


def _history_unit(history: set[str]) -> WordFilter:
    return WordFilter("history", lambda w: w.lower() not in history)


def _character_units(config: SelectionConfig) -> list[WordFilter]:
    units = []
    if config.unique_characters:
        units.append(WordFilter("unique_characters", lambda w: not _has_repeats(w)))
    if config.max_repeat_letters is not None and config.max_repeat_letters > 0:
        limit = config.max_repeat_letters
        units.append(
            WordFilter("max_repeat_letters", lambda w: not _exceeds_repeat_limit(w, limit))
        )
    if not config.allow_numbers:
        units.append(WordFilter("allow_numbers", lambda w: _DIGIT.search(w) is None))
    if not config.allow_special_chars:
        units.append(WordFilter("allow_special_chars", lambda w: _NON_LETTER.search(w) is None))
    return units


def _letter_units(config: SelectionConfig) -> list[WordFilter]:
    units = []
    if config.limit_vowels:
        vowels = _lowered(config.limit_vowels)
        units.append(WordFilter("limit_vowels", lambda w: _contains_any(w, vowels)))
    if config.exclude_specific_vowels:
        excluded_vowels = _lowered(config.exclude_specific_vowels)
        units.append(
            WordFilter(
                "exclude_specific_vowels", lambda w: not _contains_any(w, excluded_vowels)
            )
        )
    if config.include_rhyme_with:
        rhyme = _rhyme_suffix(config.include_rhyme_with)
        units.append(WordFilter("include_rhyme_with", lambda w: w.lower().endswith(rhyme)))
    if config.exclude_rhyme_with:
        non_rhyme = _rhyme_suffix(config.exclude_rhyme_with)
        units.append(
            WordFilter("exclude_rhyme_with", lambda w: not w.lower().endswith(non_rhyme))
        )
    if config.scrabble_score_range is not None:
        low, high = config.scrabble_score_range
        units.append(
            WordFilter("scrabble_score_range", lambda w: low <= scrabble_score(w) <= high)
        )
    if config.exclude_letters:
        excluded_letters = _lowered(config.exclude_letters)
        units.append(
            WordFilter("exclude_letters", lambda w: not _contains_any(w, excluded_letters))
        )
    if config.include_letters:
        included_letters = _lowered(config.include_letters)
        units.append(
            WordFilter("include_letters", lambda w: _contains_any(w, included_letters))
        )
    if config.must_contain_all_letters:
        required = _lowered(config.must_contain_all_letters)
        units.append(
            WordFilter(
                "must_contain_all_letters",
                lambda w: all(letter in w.lower() for letter in required),
            )
        )
    if config.must_contain_any_letters:
        any_of = _lowered(config.must_contain_any_letters)
        units.append(WordFilter("must_contain_any_letters", lambda w: _contains_any(w, any_of)))
    if config.exclude_words_with_repeating_letters:
        units.append(
            WordFilter("exclude_words_with_repeating_letters", lambda w: not _has_repeats(w))
        )
    if config.min_consonants is not None:
        min_consonants = config.min_consonants
        units.append(
            WordFilter("min_consonants", lambda w: len(w) - _count_vowels(w) >= min_consonants)
        )
    if config.min_vowels is not None:
        min_vowels = config.min_vowels
        units.append(WordFilter("min_vowels", lambda w: _count_vowels(w) >= min_vowels))
    return units


def build_filter_units(config: SelectionConfig, history: set[str]) -> list[WordFilter]:
    """Build the ordered list of filter units for a configuration.

    When any option needs linguistic metadata, a single unit rejecting every
    word is returned instead.

    Args:
        config: Selection configuration
        history: Words already issued, lowercase

    Returns:
        Filter units in evaluation order
    """
    unsupported = find_unsupported_options(config)
    if unsupported:
        logger.warning(
            f"Options {', '.join(unsupported)} require linguistic metadata that plain "
            "word lists do not carry; every word will be excluded"
        )
        return [WordFilter("linguistic_metadata", lambda w: False)]

    units = _membership_units(config)
    units.extend(_length_units(config))
    units.extend(_substring_units(config))
    units.append(_history_unit(history))
    units.extend(_character_units(config))
    units.extend(_letter_units(config))
    if config.custom_filter is not None:
        units.append(WordFilter("custom_filter", config.custom_filter))
    return units


def first_rejecting_unit(word: str, units: list[WordFilter]) -> WordFilter | None:
    """Return the first unit that rejects a word, or None if all accept it."""
    for unit in units:
        if not unit(word):
            return unit
    return None
