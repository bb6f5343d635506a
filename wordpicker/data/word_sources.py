"""Word source loading."""

import json
from collections.abc import Sequence
from pathlib import Path

from english_words import get_english_words_set
from loguru import logger
from wordfreq import top_n_list

from wordpicker.core.errors import SourceLoadError
from wordpicker.utils.constants import Constants
from wordpicker.utils.helpers import expand_file_path, strip_quotes

WordSource = Sequence[str] | str | Path | None


def load_text_words(filepath: str | Path) -> list[str]:
    """Load words from a text file, one per line.

    Lines are trimmed, surrounding quotes and trailing commas are stripped,
    and empty lines are skipped.
    """
    words = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            word = strip_quotes(line)
            if word:
                words.append(word)
    return words


def load_json_words(filepath: str | Path) -> list[str]:
    """Load words from a JSON file containing an array of strings."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise SourceLoadError(f"{filepath} must contain a JSON array of words")
    return _check_strings(data, str(filepath))


def load_wordfreq_words(top_n: int = Constants.DEFAULT_TOP_N) -> list[str]:
    """Get the top N most frequent English words from wordfreq."""
    return top_n_list(Constants.WORDFREQ_LANGUAGE, top_n)


def load_english_words() -> list[str]:
    """Get the english-words web2 dictionary, sorted."""
    return sorted(get_english_words_set(["web2"], lower=True))


def _check_strings(words: Sequence[object], origin: str) -> list[str]:
    bad = [word for word in words if not isinstance(word, str)]
    if bad:
        raise SourceLoadError(f"{origin} contains {len(bad)} non-string entries")
    return [str(word) for word in words]


def _load_path(source: str | Path) -> list[str]:
    path = Path(expand_file_path(str(source)) or source)
    if not path.is_file():
        raise SourceLoadError(f"Word source not found: {path}")

    try:
        if path.suffix.lower() == ".json":
            return load_json_words(path)
        return load_text_words(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SourceLoadError(f"Could not read word source {path}: {e}") from e


def load_words(source: WordSource = None, verbose: bool = False) -> list[str]:
    """Resolve a word source into an ordered list of words.

    Args:
        source: A list of words, a path to a .txt or .json file, the name of
            a built-in source ("wordfreq" or "english-words"), or None for
            the wordfreq default
        verbose: Whether to log where the words came from

    Returns:
        Ordered list of words

    Raises:
        SourceLoadError: If the source cannot be resolved or read
    """
    if source is None or source == Constants.WORDFREQ_SOURCE:
        words = load_wordfreq_words()
        origin = f"wordfreq (top {Constants.DEFAULT_TOP_N})"
    elif source == Constants.ENGLISH_WORDS_SOURCE:
        words = load_english_words()
        origin = "english-words"
    elif isinstance(source, (str, Path)):
        words = _load_path(source)
        origin = str(source)
    elif isinstance(source, (list, tuple)):
        words = _check_strings(source, "custom word list")
        origin = "custom word list"
    else:
        raise SourceLoadError(
            f"Unsupported word source type: {type(source).__name__}"
        )

    if verbose:
        logger.info(f"Loaded {len(words)} words from {origin}")

    return words
