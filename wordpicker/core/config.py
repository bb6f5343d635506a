"""Selection configuration model and loading."""

import argparse
import json
import re
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from re import Pattern
from typing import Any

import yaml
from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    SkipValidation,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel, to_snake

from wordpicker.core.errors import ConfigurationError
from wordpicker.utils.helpers import expand_file_path


class SortOrder(str, Enum):
    """Alphabetical ordering applied after shuffling."""

    ASC = "asc"
    DESC = "desc"


class CaseOption(str, Enum):
    """Case transform applied to selected words."""

    UPPER = "upper"
    LOWER = "lower"
    CAPITALIZE = "capitalize"  # First character uppercased, rest untouched


# Options parsed from comma-separated strings when given as text
_STRING_LIST_FIELDS = (
    "filter_starts_with",
    "filter_ends_with",
    "exclude_substrings",
    "blacklist",
    "whitelist",
    "languages",
    "exclude_parts_of_speech",
    "include_parts_of_speech",
    "exclude_word_origins",
    "include_word_origins",
    "synonyms",
    "limit_vowels",
    "exclude_specific_vowels",
    "exclude_letters",
    "include_letters",
    "must_contain_all_letters",
    "must_contain_any_letters",
)

# Keys consumed by the command line that are not selection options
_CLI_ONLY_KEYS = frozenset({"config", "count", "words", "reports"})


class SelectionConfig(BaseModel):
    """Immutable set of selection options.

    Every field is optional; an unset field places no constraint on the
    selection. Fields can be given by their snake_case names or by their
    camelCase aliases (``lengthMin``, ``caseOption``...).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    # Length
    length_min: int | None = None
    length_max: int | None = None
    fix_length: int | None = None

    # Output shaping
    reverse: bool = False
    as_string: bool = False
    sort: SortOrder | None = None
    case_option: CaseOption | None = None
    include_metadata: bool = False

    # Substring and membership
    filter_starts_with: tuple[str, ...] | None = None
    filter_ends_with: tuple[str, ...] | None = None
    exclude_substrings: tuple[str, ...] | None = None
    blacklist: tuple[str, ...] | None = None
    whitelist: tuple[str, ...] | None = None

    # Character classes
    exclude_ambiguous: bool = False
    allow_numbers: bool = False
    allow_special_chars: bool = False
    pattern: Pattern[str] | None = None

    # Phonetics, history and randomness
    phonetic_distinct: bool = True
    history: SkipValidation[set[str] | None] = None
    seed: int | float | str | None = None
    weighted_selection: dict[str, int] | None = None

    # Caller-supplied procedures
    custom_shuffle: Callable[[list[str]], Any] | None = None
    validate_words: Callable[..., Any] | None = None
    custom_entropy_calculator: Callable[[str], float] | None = None
    custom_filter: Callable[[str], Any] | None = None

    # Uniqueness
    unique_characters: bool = False
    max_repeat_letters: int | None = None
    exclude_words_with_repeating_letters: bool = False

    # Vowels and letters
    limit_vowels: tuple[str, ...] | None = None
    exclude_specific_vowels: tuple[str, ...] | None = None
    exclude_letters: tuple[str, ...] | None = None
    include_letters: tuple[str, ...] | None = None
    must_contain_all_letters: tuple[str, ...] | None = None
    must_contain_any_letters: tuple[str, ...] | None = None
    min_consonants: int | None = None
    min_vowels: int | None = None

    # Rhyme and score
    include_rhyme_with: str | None = None
    exclude_rhyme_with: str | None = None
    scrabble_score_range: tuple[float, float] | None = None

    # Linguistic dimensions (require metadata that plain strings do not carry)
    languages: tuple[str, ...] | None = None
    syllable_count: int | float | None = None
    limit_syllables: int | float | None = None
    exclude_parts_of_speech: tuple[str, ...] | None = None
    include_parts_of_speech: tuple[str, ...] | None = None
    exclude_word_origins: tuple[str, ...] | None = None
    include_word_origins: tuple[str, ...] | None = None
    synonyms: tuple[str, ...] | None = None
    exclude_proper_nouns: bool = False
    exclude_slang: bool = False
    exclude_homonyms: bool = False
    include_homonyms: bool = False
    exclude_compound_words: bool = False
    exclude_abbreviations: bool = False
    only_monosyllabic: bool = False
    only_polysyllabic: bool = False

    # Accepted for compatibility, no effect on the selection
    batch_size: int | None = None
    min_entropy: float | None = None
    return_entropy: bool = False
    include_definitions: bool = False
    include_examples: bool = False

    # Diagnostics
    verbose: bool = False
    debug: bool = False
    debug_words: frozenset[str] = frozenset()

    @field_validator(*_STRING_LIST_FIELDS, mode="before")
    @classmethod
    def parse_string_list(cls, value: Any) -> Any:
        """Split comma-separated strings into a tuple of entries."""
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_debug_words(cls, value: Any) -> Any:
        """Normalize debug words to a lowercase set."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(word.strip().lower() for word in value if word.strip())

    @field_validator("pattern", mode="before")
    @classmethod
    def compile_pattern(cls, value: Any) -> Any:
        """Compile pattern strings into regular expressions."""
        if isinstance(value, str):
            try:
                return re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid pattern: {e}") from e
        return value

    @field_validator("history", mode="before")
    @classmethod
    def check_history(cls, value: Any) -> Any:
        """Keep history sets by reference; sequences from config files become new sets."""
        if value is None or isinstance(value, set):
            return value
        if isinstance(value, (list, tuple, frozenset)):
            return {str(word).lower() for word in value}
        raise ValueError("history must be a set of lowercase words")

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "SelectionConfig":
        """Check option combinations."""
        if self.weighted_selection:
            negative = [word for word, weight in self.weighted_selection.items() if weight < 0]
            if negative:
                raise ValueError(f"weighted_selection weights must be >= 0: {negative}")

        if (
            self.length_min is not None
            and self.length_max is not None
            and self.length_min > self.length_max
        ):
            logger.warning(
                f"length_min ({self.length_min}) exceeds length_max ({self.length_max}); "
                "no word can match"
            )

        if self.scrabble_score_range and self.scrabble_score_range[0] > self.scrabble_score_range[1]:
            logger.warning(
                f"scrabble_score_range {self.scrabble_score_range} is empty; no word can match"
            )

        return self

    @classmethod
    def from_options(cls, options: "SelectionConfig | Mapping[str, Any] | None") -> "SelectionConfig":
        """Build a configuration from a mapping, passing existing configs through.

        Raises:
            ConfigurationError: If the mapping does not describe a valid configuration
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"configuration must be a mapping or SelectionConfig, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def _read_config_file(config_path: str) -> dict[str, Any]:
    """Read a JSON or YAML configuration file into a dict with snake_case keys."""
    path = Path(expand_file_path(config_path) or config_path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of options")

    return {to_snake(key): value for key, value in data.items()}


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> SelectionConfig:
    """Load configuration from a JSON/YAML file and command line arguments.

    Command line values override file values; arguments left at None are ignored.

    Args:
        config_path: Optional path to a .json, .yaml or .yml file
        args: Parsed command line arguments
        parser: Parser used to report errors (exits the program)

    Returns:
        Validated SelectionConfig

    Raises:
        ConfigurationError: If the configuration is invalid and no parser is given
    """
    data: dict[str, Any] = {}

    if config_path:
        try:
            data = _read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            if parser:
                parser.error(f"Could not read config file {config_path}: {e}")
            raise ConfigurationError(f"Could not read config file {config_path}: {e}") from e

    if args is not None:
        for key, value in vars(args).items():
            if key in _CLI_ONLY_KEYS or value is None:
                continue
            data[key] = value

    try:
        return SelectionConfig.model_validate(data)
    except ValidationError as e:
        if parser:
            parser.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e
