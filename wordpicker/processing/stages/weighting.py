"""Stage 3: Weighted pool expansion."""


def expand_weights(words: list[str], weights: dict[str, int] | None) -> list[str]:
    """Repeat each word by its weight to bias the later shuffle.

    Weights are looked up by the lowercase word. Unlisted words count once and
    a weight of 0 leaves the word out of the expanded pool.

    Args:
        words: Words surviving the earlier stages
        weights: Mapping of lowercase word to repeat count

    Returns:
        Expanded pool; the input list itself when no weights are given
    """
    if weights is None:
        return words

    pool = []
    for word in words:
        pool.extend([word] * weights.get(word.lower(), 1))
    return pool
