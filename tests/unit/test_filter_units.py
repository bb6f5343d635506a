"""Unit tests for predicate filter units - focusing on behavior, not implementation."""

import re

from wordpicker.core import SelectionConfig
from wordpicker.filtering import (
    build_filter_units,
    find_inert_options,
    find_unsupported_options,
    first_rejecting_unit,
)
from wordpicker.processing.stages import filter_words


def _survivors(words: list[str], history: set[str] | None = None, **options) -> list[str]:
    """Run the filter stage for a set of options."""
    config = SelectionConfig(**options)
    units = build_filter_units(config, history if history is not None else set())
    survivors, _ = filter_words(words, units)
    return survivors


class TestMembershipFilters:
    """Whitelist and blacklist behavior."""

    def test_whitelist_is_case_insensitive(self) -> None:
        """Only whitelisted words pass, regardless of case."""
        assert _survivors(["apple", "pear"], whitelist=["APPLE"]) == ["apple"]

    def test_empty_whitelist_rejects_everything(self) -> None:
        """A provided but empty whitelist admits no words."""
        assert _survivors(["apple", "pear"], whitelist=[]) == []

    def test_blacklist_rejects_listed_words(self) -> None:
        """Blacklisted words are removed."""
        assert _survivors(["Apple", "pear"], blacklist=["apple"]) == ["pear"]

    def test_whitelist_is_evaluated_before_blacklist(self) -> None:
        """A word rejected by both lists is attributed to the whitelist."""
        config = SelectionConfig(whitelist=["pear"], blacklist=["apple"])
        units = build_filter_units(config, set())
        assert first_rejecting_unit("apple", units).name == "whitelist"


class TestLengthFilters:
    """Length bounds behavior."""

    def test_fix_length_requires_exact_length(self) -> None:
        """Only words of the fixed length pass."""
        assert _survivors(["pear", "apple", "fig"], fix_length=4) == ["pear"]

    def test_length_bounds_are_inclusive(self) -> None:
        """Words at both bounds pass."""
        assert _survivors(["fig", "pear", "apple", "banana"], length_min=4, length_max=5) == [
            "pear",
            "apple",
        ]

    def test_zero_minimum_is_an_active_bound(self) -> None:
        """A zero minimum keeps every word."""
        assert _survivors(["fig"], length_min=0) == ["fig"]


class TestSubstringFilters:
    """Prefix, suffix and substring behavior."""

    def test_starts_with_any_prefix(self) -> None:
        """Words matching any prefix pass, case-insensitively."""
        assert _survivors(["Apple", "banana", "cherry"], filter_starts_with=["a", "C"]) == [
            "Apple",
            "cherry",
        ]

    def test_ends_with_any_suffix(self) -> None:
        """Words matching any suffix pass."""
        assert _survivors(["apple", "banana", "cherry"], filter_ends_with=["NA", "y"]) == [
            "banana",
            "cherry",
        ]

    def test_exclude_substrings_rejects_any_match(self) -> None:
        """Words containing any excluded substring are rejected."""
        assert _survivors(["apple", "banana", "cherry"], exclude_substrings=["AN", "rr"]) == [
            "apple"
        ]

    def test_empty_prefix_list_is_inactive(self) -> None:
        """An empty prefix list places no constraint."""
        assert _survivors(["apple"], filter_starts_with=[]) == ["apple"]


class TestCharacterClassFilters:
    """Ambiguous glyph, digit and special character behavior."""

    def test_excludes_ambiguous_glyphs(self) -> None:
        """Words with l, o or uppercase I are rejected; lowercase i is fine."""
        assert _survivors(["Lion", "Owl", "fish"], exclude_ambiguous=True) == ["fish"]

    def test_uppercase_i_is_ambiguous(self) -> None:
        """Uppercase I is confusable with l and 1."""
        assert _survivors(["bIrd", "bird"], exclude_ambiguous=True) == ["bird"]

    def test_digits_rejected_by_default(self) -> None:
        """Words with digits are rejected unless numbers are allowed."""
        assert _survivors(["abc1", "abc"]) == ["abc"]

    def test_digits_still_need_special_chars_allowed(self) -> None:
        """Allowing numbers alone does not admit digits past the letter-only rule."""
        assert _survivors(["abc1"], allow_numbers=True) == []

    def test_digits_allowed_with_both_options(self) -> None:
        """Digits pass when numbers and special characters are both allowed."""
        assert _survivors(["abc1"], allow_numbers=True, allow_special_chars=True) == ["abc1"]

    def test_non_ascii_letters_are_special(self) -> None:
        """Accented letters and punctuation are outside the ASCII letter range."""
        assert _survivors(["café", "don't", "plain"]) == ["plain"]


class TestPatternAndHistoryFilters:
    """Regular expression and history behavior."""

    def test_pattern_string_is_compiled(self) -> None:
        """A pattern given as text keeps only matching words."""
        assert _survivors(["apple", "banana"], pattern="^b") == ["banana"]

    def test_pattern_matches_anywhere(self) -> None:
        """Patterns use search semantics, not full matches."""
        assert _survivors(["apple", "banana"], pattern=re.compile("an")) == ["banana"]

    def test_history_excludes_seen_words(self) -> None:
        """Words already in history are rejected case-insensitively."""
        assert _survivors(["Apple", "pear"], history={"apple"}) == ["pear"]


class TestUniquenessFilters:
    """Repeated character behavior."""

    def test_unique_characters(self) -> None:
        """Words with any repeated character are rejected."""
        assert _survivors(["apple", "pear"], unique_characters=True) == ["pear"]

    def test_unique_characters_ignores_case(self) -> None:
        """'A' and 'a' count as the same character."""
        assert _survivors(["Aardvark", "pear"], unique_characters=True) == ["pear"]

    def test_max_repeat_letters(self) -> None:
        """Words exceeding the repeat bound are rejected."""
        assert _survivors(["apple", "pear"], max_repeat_letters=1) == ["pear"]

    def test_max_repeat_letters_within_bound(self) -> None:
        """Words at the bound pass."""
        assert _survivors(["apple"], max_repeat_letters=2) == ["apple"]

    def test_zero_max_repeat_letters_is_inactive(self) -> None:
        """A zero bound places no constraint."""
        assert _survivors(["apple"], max_repeat_letters=0) == ["apple"]

    def test_exclude_words_with_repeating_letters(self) -> None:
        """Any repeated letter rejects the word."""
        assert _survivors(["apple", "pear"], exclude_words_with_repeating_letters=True) == [
            "pear"
        ]


class TestLetterFilters:
    """Vowel, letter and count behavior."""

    def test_limit_vowels_requires_one_listed_vowel(self) -> None:
        """Words without any listed vowel are rejected."""
        assert _survivors(["dog", "cat", "fun"], limit_vowels=["o", "U"]) == ["dog", "fun"]

    def test_exclude_specific_vowels(self) -> None:
        """Words with an excluded vowel are rejected."""
        assert _survivors(["dog", "cat"], exclude_specific_vowels=["a"]) == ["dog"]

    def test_exclude_letters(self) -> None:
        """Words with an excluded letter are rejected."""
        assert _survivors(["dog", "cat"], exclude_letters=["D"]) == ["cat"]

    def test_include_letters(self) -> None:
        """Words need at least one listed letter."""
        assert _survivors(["dog", "cat", "fun"], include_letters=["t", "f"]) == ["cat", "fun"]

    def test_must_contain_all_letters(self) -> None:
        """Words need every listed letter."""
        assert _survivors(["cat", "act", "can"], must_contain_all_letters=["c", "t"]) == [
            "cat",
            "act",
        ]

    def test_must_contain_any_letters(self) -> None:
        """Words need at least one listed letter."""
        assert _survivors(["cat", "dog"], must_contain_any_letters=["g", "z"]) == ["dog"]

    def test_letters_given_as_comma_separated_text(self) -> None:
        """Letter lists can be given as a comma-separated string."""
        assert _survivors(["cat", "dog"], exclude_letters="c, x") == ["dog"]

    def test_min_consonants(self) -> None:
        """Words with too few consonants are rejected."""
        assert _survivors(["apple", "aloe"], min_consonants=3) == ["apple"]

    def test_min_vowels(self) -> None:
        """Words with too few vowels are rejected."""
        assert _survivors(["aloe", "crab"], min_vowels=2) == ["aloe"]


class TestRhymeAndScoreFilters:
    """Rhyme heuristic and Scrabble range behavior."""

    def test_include_rhyme_compares_last_two_characters(self) -> None:
        """Words ending like the target's last two characters pass."""
        assert _survivors(["bat", "BOAT", "dog"], include_rhyme_with="Cat") == ["bat", "BOAT"]

    def test_exclude_rhyme(self) -> None:
        """Words ending like the target are rejected."""
        assert _survivors(["bat", "dog"], exclude_rhyme_with="cat") == ["dog"]

    def test_empty_rhyme_target_is_inactive(self) -> None:
        """An empty target places no constraint."""
        assert _survivors(["dog"], include_rhyme_with="") == ["dog"]

    def test_scrabble_range_excludes_out_of_range(self) -> None:
        """ace (5) and quiz (22) both fall outside [1, 3]."""
        assert _survivors(["ace", "quiz"], scrabble_score_range=(1, 3)) == []

    def test_scrabble_range_is_inclusive(self) -> None:
        """A word scoring exactly the bound passes."""
        assert _survivors(["ace", "quiz"], scrabble_score_range=[5, 5]) == ["ace"]


class TestCustomFilter:
    """Caller-supplied predicate behavior."""

    def test_custom_filter_is_applied(self) -> None:
        """Words rejected by the custom predicate are removed."""
        assert _survivors(["bat", "cat"], custom_filter=lambda w: w.startswith("b")) == ["bat"]

    def test_custom_filter_runs_last(self) -> None:
        """Words rejected by built-in filters never reach the custom predicate."""
        seen = []

        def record(word: str) -> bool:
            seen.append(word)
            return True

        _survivors(["apple", "fig"], length_min=4, custom_filter=record)
        assert seen == ["apple"]


class TestLinguisticOptions:
    """Options that need linguistic metadata exclude every word."""

    def test_languages_exclude_everything(self) -> None:
        """A language list yields no survivors."""
        assert _survivors(["apple", "pear"], languages=["en"]) == []

    def test_flag_options_exclude_everything(self) -> None:
        """A linguistic flag yields no survivors."""
        assert _survivors(["apple"], only_monosyllabic=True) == []

    def test_zero_syllable_count_still_excludes(self) -> None:
        """A numeric option is active whenever it is set."""
        assert _survivors(["apple"], syllable_count=0) == []

    def test_empty_language_list_is_inactive(self) -> None:
        """An empty list does not trigger the policy."""
        assert _survivors(["apple"], languages=[]) == ["apple"]

    def test_lists_triggering_options(self) -> None:
        """All active linguistic options are reported."""
        config = SelectionConfig(synonyms=["big"], exclude_slang=True, limit_syllables=2)
        assert find_unsupported_options(config) == ["synonyms", "limit_syllables", "exclude_slang"]

    def test_reports_single_unit(self) -> None:
        """The policy is one reject-all unit."""
        config = SelectionConfig(languages=["en"], exclude_slang=True)
        assert [unit.name for unit in build_filter_units(config, set())] == ["linguistic_metadata"]

    def test_logs_triggering_options(self, log_capture) -> None:
        """The warning names the options that triggered the policy."""
        build_filter_units(SelectionConfig(include_homonyms=True), set())
        assert "include_homonyms" in log_capture.getvalue()

    def test_lists_inert_options(self) -> None:
        """Accepted options without effect are reported."""
        config = SelectionConfig(min_entropy=10, include_definitions=True)
        assert find_inert_options(config) == ["min_entropy", "include_definitions"]


class TestFilterStage:
    """Filter stage behavior."""

    def test_counts_rejections_per_unit(self) -> None:
        """Each rejected word is attributed to the first unit rejecting it."""
        units = build_filter_units(SelectionConfig(length_min=4, blacklist=["pear"]), set())
        _, rejections = filter_words(["fig", "pear", "apple", "kiwi1"], units)
        assert rejections == {"length_min": 1, "blacklist": 1, "allow_numbers": 1}

    def test_filtering_is_idempotent(self) -> None:
        """Filtering the survivors again changes nothing."""
        words = ["apple", "Lion", "banana", "fig", "quiz", "cherry", "x1"]
        options = {"length_min": 3, "exclude_ambiguous": True, "exclude_letters": ["q"]}
        once = _survivors(words, **options)
        assert _survivors(once, **options) == once

    def test_traces_debug_words(self, log_capture) -> None:
        """Rejections of traced words are logged with the stage marker."""
        units = build_filter_units(SelectionConfig(length_min=4), set())
        filter_words(["fig"], units, debug_words=frozenset({"fig"}))
        assert "[DEBUG WORD: 'fig'] [Stage 1] Rejected by filter 'length_min'" in (
            log_capture.getvalue()
        )
