"""Constants used throughout the wordpicker codebase."""

import math


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Selection limits
    MAX_SELECTION_ATTEMPTS = 1000
    """Upper bound on iterations of the selection loop."""

    # Character classes
    VOWELS = frozenset("aeiou")
    """Fixed vowel set used by vowel and consonant counting."""

    AMBIGUOUS_CHARACTERS = frozenset("lL1I0oO")
    """Glyphs easily confused in print. Lowercase 'i' is dotted and not included."""

    # Entropy
    BITS_PER_LETTER = math.log2(26)
    """Entropy contributed by one distinct character in the default estimate."""

    # Phonetic codes
    PHONETIC_CODE_LENGTH = 4
    """Length of a phonetic code after padding/truncation."""

    # Rhyme heuristic
    RHYME_SUFFIX_LENGTH = 2
    """Number of trailing characters compared by the rhyme filters."""

    # Output
    STRING_SEPARATOR = ", "
    """Separator used when the selection is returned as a single string."""

    # Word sources
    WORDFREQ_SOURCE = "wordfreq"
    """Name of the built-in source backed by wordfreq's frequency lists."""

    ENGLISH_WORDS_SOURCE = "english-words"
    """Name of the built-in source backed by the english-words package."""

    DEFAULT_TOP_N = 5000
    """Number of words pulled from wordfreq when no source is given."""

    WORDFREQ_LANGUAGE = "en"
    """Language used for wordfreq lookups."""

    # Progress display
    PROGRESS_THRESHOLD = 10000
    """Inputs larger than this get a progress bar in verbose mode."""
