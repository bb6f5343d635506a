"""Utility functions for wordpicker."""

from wordpicker.utils.constants import Constants
from wordpicker.utils.debug import is_debug_word, log_debug_word, log_if_debug_word
from wordpicker.utils.helpers import expand_file_path, is_number, strip_quotes
from wordpicker.utils.logging import setup_logger
from wordpicker.utils.random_source import create_random_source

__all__ = [
    "Constants",
    "create_random_source",
    "expand_file_path",
    "is_debug_word",
    "is_number",
    "log_debug_word",
    "log_if_debug_word",
    "setup_logger",
    "strip_quotes",
]
