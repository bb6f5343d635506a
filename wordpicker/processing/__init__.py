"""Selection pipeline for wordpicker."""

from .pipeline import SelectionPipeline, select_words, validate_amount
from .stages import PipelineStats

__all__ = ["PipelineStats", "SelectionPipeline", "select_words", "validate_amount"]
