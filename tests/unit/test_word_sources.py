"""Unit tests for word source loading and its line helpers."""

import json
from decimal import Decimal
from fractions import Fraction

import pytest

from wordpicker.core import SourceLoadError
from wordpicker.data import load_words
from wordpicker.utils.helpers import is_number, strip_quotes


class TestStripQuotes:
    """Test strip_quotes behavior."""

    def test_strips_double_quotes_and_comma(self) -> None:
        """Quoted array-style lines lose quotes and trailing comma."""
        assert strip_quotes('  "apple",\n') == "apple"

    def test_strips_single_quotes(self) -> None:
        """Single quotes are stripped too."""
        assert strip_quotes("'pear'") == "pear"

    def test_keeps_inner_apostrophes(self) -> None:
        """Only the outermost quotes are removed."""
        assert strip_quotes("don't") == "don't"


class TestIsNumber:
    """Test is_number behavior."""

    @pytest.mark.parametrize("value", [3, 2.5, Fraction(1, 2), float("inf")])
    def test_real_numbers(self, value) -> None:
        """Every real number type counts."""
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, "3", None, Decimal("1"), 1j])
    def test_non_real_values(self, value) -> None:
        """Bools, strings, None and non-Real numerics do not count."""
        assert not is_number(value)


class TestLoadWords:
    """Test load_words behavior."""

    def test_custom_list_is_used_in_order(self) -> None:
        """A list of words is returned in the same order."""
        assert load_words(["pear", "apple"]) == ["pear", "apple"]

    def test_custom_list_is_copied(self) -> None:
        """The caller's list is not handed to the pipeline."""
        words = ["pear"]
        assert load_words(words) is not words

    def test_rejects_non_string_entries(self) -> None:
        """Lists must contain only strings."""
        with pytest.raises(SourceLoadError):
            load_words(["pear", 3])

    def test_reads_text_file(self, tmp_path) -> None:
        """Text files are split on lines, trimmed and quote-stripped."""
        words_file = tmp_path / "words.txt"
        words_file.write_text('"apple",\n  pear  \n\n\'fig\'\n')

        assert load_words(str(words_file)) == ["apple", "pear", "fig"]

    def test_reads_json_array(self, tmp_path) -> None:
        """JSON files must contain an array of words."""
        words_file = tmp_path / "words.json"
        words_file.write_text(json.dumps(["apple", "pear"]))

        assert load_words(words_file) == ["apple", "pear"]

    def test_json_object_is_rejected(self, tmp_path) -> None:
        """A JSON object is not a word list."""
        words_file = tmp_path / "words.json"
        words_file.write_text(json.dumps({"words": ["apple"]}))

        with pytest.raises(SourceLoadError):
            load_words(words_file)

    def test_invalid_json_is_rejected(self, tmp_path) -> None:
        """Unparseable JSON is a load error."""
        words_file = tmp_path / "words.json"
        words_file.write_text("[apple")

        with pytest.raises(SourceLoadError):
            load_words(words_file)

    def test_missing_file_is_rejected(self, tmp_path) -> None:
        """A path that does not exist is a load error."""
        with pytest.raises(SourceLoadError):
            load_words(str(tmp_path / "missing.txt"))

    def test_unsupported_type_is_rejected(self) -> None:
        """Only lists, tuples, paths and source names are accepted."""
        with pytest.raises(SourceLoadError):
            load_words(42)

    def test_default_source_is_wordfreq(self, monkeypatch) -> None:
        """Without a source the wordfreq top list is used."""
        monkeypatch.setattr(
            "wordpicker.data.word_sources.top_n_list", lambda lang, n: ["the", "of"]
        )
        assert load_words(None) == ["the", "of"]

    def test_english_words_source_is_sorted(self, monkeypatch) -> None:
        """The english-words source is returned in sorted order."""
        monkeypatch.setattr(
            "wordpicker.data.word_sources.get_english_words_set",
            lambda sources, lower: {"pear", "apple"},
        )
        assert load_words("english-words") == ["apple", "pear"]

    def test_verbose_logs_origin(self, log_capture) -> None:
        """Verbose loading reports how many words came from where."""
        load_words(["a", "b"], verbose=True)
        assert "Loaded 2 words from custom word list" in log_capture.getvalue()
