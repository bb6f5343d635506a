"""Predicate filter units for the selection pipeline."""

from .linguistic import find_inert_options, find_unsupported_options
from .units import WordFilter, build_filter_units, first_rejecting_unit

__all__ = [
    "WordFilter",
    "build_filter_units",
    "find_inert_options",
    "find_unsupported_options",
    "first_rejecting_unit",
]
