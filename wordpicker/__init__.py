"""wordpicker - Constrained word selection for passphrases.

Pick a bounded set of words from a word list under filtering, phonetic
deduplication, weighting and ordering rules.
"""

from .core import (
    CaseOption,
    ConfigurationError,
    SelectionConfig,
    SortOrder,
    SourceLoadError,
    WordMetadata,
    WordPickerError,
    load_config,
)
from .processing import PipelineStats, SelectionPipeline, select_words
from .scoring import entropy_estimate, phonetic_code, scrabble_score

__version__ = "0.1.0"
__all__ = [
    "CaseOption",
    "ConfigurationError",
    "PipelineStats",
    "SelectionConfig",
    "SelectionPipeline",
    "SortOrder",
    "SourceLoadError",
    "WordMetadata",
    "WordPickerError",
    "entropy_estimate",
    "load_config",
    "phonetic_code",
    "scrabble_score",
    "select_words",
]
