"""Stage 2: Phonetic deduplication."""

from wordpicker.scoring import phonetic_code
from wordpicker.utils.debug import log_if_debug_word


def deduplicate_phonetically(
    words: list[str],
    debug_words: frozenset[str] = frozenset(),
) -> list[str]:
    """Drop words whose phonetic code was already seen earlier in the list.

    Args:
        words: Words in iteration order
        debug_words: Lowercase words to trace

    Returns:
        The first word for each phonetic code, order preserved
    """
    seen: dict[str, str] = {}
    distinct = []

    for word in words:
        code = phonetic_code(word)
        if code in seen:
            log_if_debug_word(
                word,
                f"Dropped: phonetic code {code} already taken by '{seen[code]}'",
                debug_words,
                "Stage 2",
            )
            continue
        seen[code] = word
        distinct.append(word)

    return distinct
