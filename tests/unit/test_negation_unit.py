"""
Unit tests for movieclassifier/features/negation.py

Tests scope opening on markers, scope closing on punctuation tokens, and the
token predicates.
"""

import pytest

from movieclassifier.features.negation import (
    apply_negation_scope,
    is_punctuation_token,
    is_word_token,
)

MARKERS = {"not", "n't"}


class TestPredicates:
    """Tests for is_word_token / is_punctuation_token."""

    @pytest.mark.parametrize("token, expected", [
        ("good", True),
        ("10/10", False),
        ("a1", True),
        ("...", False),
        ("'s", True),
        ("", False),
    ])
    def test_is_word_token(self, token, expected):
        assert is_word_token(token) is expected

    @pytest.mark.parametrize("token", [".", ",", "!", "?", "-"])
    def test_punctuation_tokens(self, token):
        assert is_punctuation_token(token)

    @pytest.mark.parametrize("token", ["good.", "..", ";", ":", "(", "--", ""])
    def test_not_punctuation_tokens(self, token):
        assert not is_punctuation_token(token)


class TestApplyNegationScope:
    """Tests for apply_negation_scope."""

    def test_no_marker_returns_text_unchanged(self):
        text = "a  great\tfilm ,\nreally"
        assert apply_negation_scope(text, MARKERS, "NOT_") is text

    def test_simple_negation(self):
        assert apply_negation_scope("this is not good", {"not"}, "NOT_") == "this is NOT_good"

    def test_scope_ends_at_punctuation(self):
        result = apply_negation_scope("not good , bad movie", MARKERS, "NOT_")
        assert result == "NOT_good , bad movie"

    def test_scope_runs_to_end_without_punctuation(self):
        result = apply_negation_scope("i did n't like the ending", MARKERS, "NOT_")
        assert result == "i did NOT_like NOT_the NOT_ending"

    def test_contraction_inside_word(self):
        result = apply_negation_scope("don't like it . great", MARKERS, "NOT_")
        assert result == "do NOT_like NOT_it . great"

    def test_words_after_punctuation_are_never_prefixed(self, negated_review):
        result = apply_negation_scope(negated_review, MARKERS, "NOT_")
        assert result == (
            "the plot is NOT_clever , but the acting is NOT_bad NOT_at NOT_all ."
        )
        after_comma = result.split(" , ")[1].split(" is ")[0]
        assert "NOT_" not in after_comma

    def test_non_word_tokens_pass_through_inside_scope(self):
        result = apply_negation_scope("not 10 / 10 good", MARKERS, "NOT_")
        assert result == "10 / 10 NOT_good"

    def test_attached_punctuation_does_not_end_scope(self):
        result = apply_negation_scope("not good. bad", MARKERS, "NOT_")
        assert result == "NOT_good. NOT_bad"

    def test_new_marker_reopens_scope(self):
        result = apply_negation_scope("not good . not bad", MARKERS, "NOT_")
        assert result == "NOT_good . NOT_bad"

    def test_marker_inside_word(self):
        """Markers are substrings: 'nothing' opens a scope on 'hing'."""
        result = apply_negation_scope("nothing works", MARKERS, "NOT_")
        assert result == "NOT_hing NOT_works"

    def test_whitespace_is_normalized_when_rewritten(self):
        result = apply_negation_scope("not   good\nfilm", MARKERS, "NOT_")
        assert result == "NOT_good NOT_film"

    def test_custom_prefix(self):
        assert apply_negation_scope("not fun", MARKERS, "NEG_") == "NEG_fun"

    def test_empty_markers(self):
        assert apply_negation_scope("not fun", set(), "NOT_") == "not fun"

    def test_idempotent_without_markers(self):
        text = "a fine film"
        once = apply_negation_scope(text, MARKERS, "NOT_")
        assert apply_negation_scope(once, MARKERS, "NOT_") == text

    def test_case_is_kept(self):
        assert apply_negation_scope("not Good", MARKERS, "NOT_") == "NOT_Good"
