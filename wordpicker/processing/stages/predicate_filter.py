"""Stage 1: Predicate filtering."""

from collections import Counter
from collections.abc import Sequence

from loguru import logger
from tqdm import tqdm

from wordpicker.filtering import WordFilter, first_rejecting_unit
from wordpicker.utils.constants import Constants
from wordpicker.utils.debug import log_if_debug_word


def filter_words(
    words: Sequence[str],
    units: list[WordFilter],
    debug_words: frozenset[str] = frozenset(),
    verbose: bool = False,
) -> tuple[list[str], dict[str, int]]:
    """Keep the words accepted by every filter unit, preserving order.

    Args:
        words: Candidate words
        units: Filter units from build_filter_units
        debug_words: Lowercase words to trace
        verbose: Whether to show progress for large inputs

    Returns:
        Tuple of (surviving words, rejection count per unit name)
    """
    survivors = []
    rejections: Counter[str] = Counter()

    words_iter: Sequence[str] = words
    if verbose and len(words) > Constants.PROGRESS_THRESHOLD:
        words_iter = tqdm(words, desc="Filtering words", unit="word")

    for word in words_iter:
        rejected_by = first_rejecting_unit(word, units)
        if rejected_by is None:
            survivors.append(word)
            log_if_debug_word(word, "Passed all filters", debug_words, "Stage 1")
        else:
            rejections[rejected_by.name] += 1
            log_if_debug_word(
                word, f"Rejected by filter '{rejected_by.name}'", debug_words, "Stage 1"
            )

    if verbose:
        logger.info(f"  {len(survivors)} of {len(words)} words passed {len(units)} filters")

    return survivors, dict(rejections)
