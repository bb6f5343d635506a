"""Detection of options that need linguistic metadata plain strings lack.

Words arrive as bare strings with no part-of-speech, origin, syllable or
language annotation. Any option filtering on such a dimension cannot be
evaluated, so the whole input is rejected for that call instead of the
option being ignored.
"""

from wordpicker.core.config import SelectionConfig

# Options whose value is a sequence; active when non-empty
LINGUISTIC_LIST_OPTIONS = (
    "languages",
    "exclude_parts_of_speech",
    "include_parts_of_speech",
    "exclude_word_origins",
    "include_word_origins",
    "synonyms",
)

# Options whose value is a number; active when set
LINGUISTIC_NUMBER_OPTIONS = (
    "syllable_count",
    "limit_syllables",
)

# Options whose value is a flag; active when True
LINGUISTIC_FLAG_OPTIONS = (
    "exclude_proper_nouns",
    "exclude_slang",
    "exclude_homonyms",
    "include_homonyms",
    "exclude_compound_words",
    "exclude_abbreviations",
    "only_monosyllabic",
    "only_polysyllabic",
)

# Options accepted for compatibility that never change the selection
INERT_OPTIONS = (
    "batch_size",
    "validate_words",
    "min_entropy",
    "return_entropy",
    "include_definitions",
    "include_examples",
)


def find_unsupported_options(config: SelectionConfig) -> list[str]:
    """List the linguistic options set in a configuration.

    Args:
        config: Selection configuration

    Returns:
        Names of active options that require linguistic metadata, in
        declaration order
    """
    active = [name for name in LINGUISTIC_LIST_OPTIONS if getattr(config, name)]
    active.extend(name for name in LINGUISTIC_NUMBER_OPTIONS if getattr(config, name) is not None)
    active.extend(name for name in LINGUISTIC_FLAG_OPTIONS if getattr(config, name))
    return active


def find_inert_options(config: SelectionConfig) -> list[str]:
    """List options that are set but have no effect on the selection."""
    return [name for name in INERT_OPTIONS if getattr(config, name) not in (None, False)]
