"""Word source loading for wordpicker."""

from .word_sources import (
    WordSource,
    load_english_words,
    load_json_words,
    load_text_words,
    load_wordfreq_words,
    load_words,
)

__all__ = [
    "WordSource",
    "load_english_words",
    "load_json_words",
    "load_text_words",
    "load_wordfreq_words",
    "load_words",
]
