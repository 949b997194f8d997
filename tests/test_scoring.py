"""Tests for the scoring strategies."""

import pytest

from fuzzyrank.exceptions import ConfigurationError
from fuzzyrank.similarity.processing import full_process, sorted_tokens, tokenize
from fuzzyrank.similarity.scoring import (
    Scorer,
    WeightedRatioSettings,
    partial_ratio,
    ratio,
    token_set_partial_ratio,
    token_set_ratio,
    token_sort_partial_ratio,
    token_sort_ratio,
    weighted_ratio,
)

ALL_SCORERS = [
    ratio,
    partial_ratio,
    token_sort_ratio,
    token_sort_partial_ratio,
    token_set_ratio,
    token_set_partial_ratio,
    weighted_ratio,
]


class TestProcessing:
    """Tests for string preparation."""

    def test_full_process(self):
        """Test lowercasing and punctuation stripping."""
        assert full_process("  Hello, World!  ") == "hello  world"

    def test_full_process_keeps_unicode_letters(self):
        """Test that non-ASCII letters survive processing."""
        assert full_process("Ærøskøbing") == "ærøskøbing"

    def test_tokenize_collapses_whitespace(self):
        """Test that runs of whitespace split tokens once."""
        assert tokenize("  words   out\tof  ") == ["words", "out", "of"]

    def test_sorted_tokens(self):
        """Test alphabetical token joining."""
        assert sorted_tokens("order words out of") == "of order out words"


class TestEmptyInputs:
    """Tests for empty string handling across scorers."""

    @pytest.mark.parametrize("scorer", ALL_SCORERS)
    def test_empty_vs_empty(self, scorer):
        """Test that two empty strings score 100."""
        assert scorer("", "") == 100

    @pytest.mark.parametrize("scorer", ALL_SCORERS)
    def test_empty_vs_non_empty(self, scorer):
        """Test that empty vs non-empty scores 0."""
        assert scorer("", "abc") == 0
        assert scorer("abc", "") == 0


class TestPartialRatio:
    """Tests for partial ratio."""

    def test_contained(self):
        """Test that a substring scores 100."""
        assert partial_ratio("abc", "xxabcxx") == 100

    def test_contained_symmetric(self):
        """Test that argument order does not matter for substrings."""
        assert partial_ratio("xxabcxx", "abc") == 100

    def test_best_window(self):
        """Test scoring the best equal-length window."""
        assert partial_ratio("similar", "somewhresimlrbetweenthisstring") == 71

    def test_equal_length_is_ratio(self):
        """Test that equal lengths reduce to plain ratio."""
        assert partial_ratio("abc", "abd") == ratio("abc", "abd")


class TestTokenSort:
    """Tests for token sort ratios."""

    def test_word_order_ignored(self):
        """Test that word order does not matter."""
        assert token_sort_ratio("order words out of", "words out of order") == 100

    def test_extra_whitespace_tolerated(self):
        """Test that extra whitespace does not matter."""
        assert token_sort_ratio("order words out of", "  words out of order") == 100
        assert token_sort_partial_ratio("order words out of", "  words out of order") == 100

    def test_processing_strips_punctuation(self):
        """Test that punctuation is removed by default."""
        assert token_sort_ratio("Hello, World!", "world hello") == 100

    def test_without_processor(self):
        """Test that processor=None compares raw strings."""
        assert token_sort_ratio("Hello, World!", "world hello", processor=None) < 100

    def test_reordering_beats_plain_ratio(self):
        """Test that reordered words score higher than plain ratio."""
        a, b = "fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear"
        assert ratio(a, b) == 91
        assert token_sort_ratio(a, b) == 100


class TestTokenSet:
    """Tests for token set ratios."""

    def test_repeated_tokens(self):
        """Test that repeated tokens are ignored."""
        assert token_set_ratio("fuzzy was a bear", "fuzzy fuzzy fuzzy bear") == 100

    def test_repeated_tokens_partial(self):
        """Test repeated tokens with the partial variant."""
        assert token_set_partial_ratio("fuzzy was a bear", "fuzzy fuzzy fuzzy bear") == 100

    def test_subset(self):
        """Test that a token subset scores 100."""
        assert token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear") == 100

    def test_disjoint(self):
        """Test disjoint token sets."""
        assert token_set_ratio("abc", "xyz") == 0

    def test_partial_disjoint(self):
        """Test disjoint token sets with the partial variant."""
        assert token_set_partial_ratio("abc", "xyz") == 0


class TestWeightedRatio:
    """Tests for the weighted ratio."""

    def test_misspellings_and_case(self):
        """Test a near match with typos and case differences."""
        score = weighted_ratio(
            "The quick brown fox jimps ofver the small lazy dog",
            "the quick brown fox jumps over the small lazy dog",
        )
        assert score == 97
        assert score > 85

    def test_short_query_in_long_choice(self):
        """Test the partial path for a short query."""
        # Length ratio 2: partial match scaled by 0.9
        assert weighted_ratio("cowboys", "dallas cowboys") == 90

    def test_very_long_choice(self):
        """Test the long partial scale for very long choices."""
        # Length ratio above 8: partial match scaled by 0.6
        assert weighted_ratio("cat", "the cat sat on the mat today") == 60

    def test_custom_weights(self):
        """Test that custom weights change the score."""
        weights = WeightedRatioSettings(long_partial_scale=0.8)
        assert weighted_ratio("cat", "the cat sat on the mat today", weights=weights) == 80

    def test_identical(self):
        """Test that identical strings score 100."""
        assert weighted_ratio("new york jets", "NEW YORK JETS") == 100

    def test_punctuation_only_vs_empty(self):
        """Test that punctuation-only input processes to empty."""
        assert weighted_ratio("!!!", "") == 100


class TestWeightedRatioSettings:
    """Tests for weighted ratio settings."""

    def test_defaults(self):
        """Test the default constants."""
        weights = WeightedRatioSettings.from_settings(None)
        assert weights == WeightedRatioSettings()

    def test_from_settings(self):
        """Test reading constants from settings."""
        weights = WeightedRatioSettings.from_settings({"weighted_ratio": {"partial_scale": 0.8}})
        assert weights.partial_scale == 0.8
        assert weights.unbase_scale == 0.95

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigurationError, match="bogus"):
            WeightedRatioSettings.from_settings({"weighted_ratio": {"bogus": 1}})

    def test_non_numeric(self):
        """Test that non-numeric values are rejected."""
        with pytest.raises(ConfigurationError):
            WeightedRatioSettings.from_settings({"weighted_ratio": {"partial_scale": "high"}})


class TestScorer:
    """Tests for the Scorer enum."""

    def test_seven_strategies(self):
        """Test that exactly seven strategies exist."""
        assert len(Scorer) == 7

    @pytest.mark.parametrize(
        ("scorer", "function"),
        [
            (Scorer.RATIO, ratio),
            (Scorer.PARTIAL_RATIO, partial_ratio),
            (Scorer.TOKEN_SORT_RATIO, token_sort_ratio),
            (Scorer.TOKEN_SORT_PARTIAL_RATIO, token_sort_partial_ratio),
            (Scorer.TOKEN_SET_RATIO, token_set_ratio),
            (Scorer.TOKEN_SET_PARTIAL_RATIO, token_set_partial_ratio),
            (Scorer.WEIGHTED_RATIO, weighted_ratio),
        ],
    )
    def test_apply_dispatches(self, scorer: Scorer, function):
        """Test that apply calls the matching function."""
        pair = ("fuzzy was a bear", "fuzzy fuzzy bear")
        assert scorer.apply(*pair) == function(*pair)

    def test_apply_passes_weights(self):
        """Test that apply forwards weights to weighted ratio."""
        weights = WeightedRatioSettings(long_partial_scale=0.8)
        assert Scorer.WEIGHTED_RATIO.apply("cat", "the cat sat on the mat today", weights=weights) == 80

    @pytest.mark.parametrize("value", ["token_set_ratio", "TOKEN_SET_RATIO", " token_set_ratio "])
    def test_resolve_names(self, value: str):
        """Test resolving members by value or name."""
        assert Scorer.resolve(value) is Scorer.TOKEN_SET_RATIO

    def test_resolve_member(self):
        """Test that members resolve to themselves."""
        assert Scorer.resolve(Scorer.RATIO) is Scorer.RATIO

    def test_resolve_unknown(self):
        """Test that unknown names raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Scorer.resolve("levenshtein")

    def test_resolve_unknown_is_value_error(self):
        """Test that the error is also a ValueError."""
        with pytest.raises(ValueError):
            Scorer.resolve(42)
