"""Stage 4: Shuffling and sorting."""

import locale
import random
from collections.abc import Callable
from typing import Any

from wordpicker.core.config import SortOrder


def fisher_yates_shuffle(words: list[str], rng: random.Random) -> None:
    """Shuffle a list in place."""
    for i in range(len(words) - 1, 0, -1):
        j = rng.randrange(i + 1)
        words[i], words[j] = words[j], words[i]


def shuffle_words(
    words: list[str],
    rng: random.Random,
    custom_shuffle: Callable[[list[str]], Any] | None = None,
) -> None:
    """Shuffle a list in place with the caller's procedure or Fisher-Yates.

    The return value of a custom shuffle is ignored.
    """
    if custom_shuffle is not None:
        custom_shuffle(words)
        return
    fisher_yates_shuffle(words, rng)


def _collation_key(word: str) -> str:
    return locale.strxfrm(word.lower())


def sort_words(words: list[str], order: SortOrder | None) -> list[str]:
    """Sort case-insensitively using the current locale's collation.

    Collation follows the process's LC_COLLATE, which the command line sets
    from the environment; library callers that never call
    `locale.setlocale` get code-point order under the "C" locale. Equal keys
    keep their shuffled order in both directions.
    """
    if order is None:
        return words
    return sorted(words, key=_collation_key, reverse=order == SortOrder.DESC)


def order_words(
    words: list[str],
    rng: random.Random,
    order: SortOrder | None = None,
    custom_shuffle: Callable[[list[str]], Any] | None = None,
) -> list[str]:
    """Shuffle and then optionally sort the pool.

    Args:
        words: Pool to order; shuffled in place
        rng: Random source for the default shuffle
        order: Optional alphabetical order that overrides the shuffle
        custom_shuffle: Optional in-place shuffle procedure

    Returns:
        The ordered pool
    """
    shuffle_words(words, rng, custom_shuffle)
    return sort_words(words, order)
