"""Entropy estimates for selected words."""

from collections.abc import Callable

from wordpicker.utils.constants import Constants

EntropyCalculator = Callable[[str], float]


def entropy_estimate(word: str) -> float:
    """Estimate a word's entropy in bits.

    Counts distinct characters (case-insensitive) at log2(26) bits each. This
    is a rough measure of variety, not the entropy of a passphrase drawn
    from a given list.
    """
    return len(set(word.lower())) * Constants.BITS_PER_LETTER


def resolve_entropy_calculator(custom: EntropyCalculator | None = None) -> EntropyCalculator:
    """Return the caller's entropy calculator, or the default estimate."""
    return custom if custom is not None else entropy_estimate
