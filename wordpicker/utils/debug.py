"""Debug tracing for individual words through the selection stages."""

from collections.abc import Iterable

from loguru import logger


def is_debug_word(word: str, debug_words: Iterable[str]) -> bool:
    """Check if a word is being traced.

    Args:
        word: Word to check (any case)
        debug_words: Lowercase words to trace

    Returns:
        True if the word is traced
    """
    return word.lower() in debug_words


def log_debug_word(word: str, message: str, stage: str = "") -> None:
    """Log a trace message for a debug word."""
    stage_marker = f"[{stage}] " if stage else ""
    logger.debug(f"[DEBUG WORD: '{word}'] {stage_marker}{message}")


def log_if_debug_word(
    word: str,
    message: str,
    debug_words: Iterable[str],
    stage: str = "",
) -> None:
    """Log a trace message if the word is being traced.

    Args:
        word: The word the message is about
        message: Description of what happened to the word
        debug_words: Lowercase words to trace
        stage: Stage marker, e.g. "Stage 1"
    """
    if is_debug_word(word, debug_words):
        log_debug_word(word, message, stage)
