"""Selection pipeline stages.

Stages run in strict order: predicate filtering, phonetic deduplication,
weighted pool expansion, ordering, then selection and post-processing.
"""

from .data_models import PipelineStats
from .ordering import fisher_yates_shuffle, order_words, shuffle_words, sort_words
from .phonetic_dedup import deduplicate_phonetically
from .predicate_filter import filter_words
from .selection import (
    apply_case,
    finalize_selection,
    record_history,
    shape_result,
    take_words,
)
from .weighting import expand_weights

__all__ = [
    # Data models
    "PipelineStats",
    # Stage functions
    "filter_words",
    "deduplicate_phonetically",
    "expand_weights",
    "order_words",
    "finalize_selection",
    # Stage helpers
    "apply_case",
    "fisher_yates_shuffle",
    "record_history",
    "shape_result",
    "shuffle_words",
    "sort_words",
    "take_words",
]
