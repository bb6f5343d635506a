"""Pure scoring functions used by the selection stages."""

from .entropy import EntropyCalculator, entropy_estimate, resolve_entropy_calculator
from .phonetic import phonetic_code
from .scrabble import SCRABBLE_POINTS, scrabble_score

__all__ = [
    "EntropyCalculator",
    "SCRABBLE_POINTS",
    "entropy_estimate",
    "phonetic_code",
    "resolve_entropy_calculator",
    "scrabble_score",
]
