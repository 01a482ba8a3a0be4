"""Tests for the syntactic analyzer."""

import pytest

from voice_fingerprint.ingest.tokenizer import tokenize
from voice_fingerprint.style.syntactic import (
    CLAUSE_MARKER_WEIGHT,
    analyze_syntactic,
    clause_weighted_complexity,
    count_clause_markers,
    punctuation_style,
)


class TestComplexity:
    """Test the clause-weighted complexity score."""

    def test_weighted_mean(self):
        assert clause_weighted_complexity([10, 20], [1, 0], marker_weight=2.0) == 16.0

    def test_default_weight(self):
        assert clause_weighted_complexity([10], [1]) == 10 + CLAUSE_MARKER_WEIGHT

    def test_weight_adjustable(self):
        assert clause_weighted_complexity([10], [3], marker_weight=0.0) == 10.0

    def test_empty(self):
        assert clause_weighted_complexity([], []) == 0.0

    def test_clause_markers(self):
        sentence = "When it rained, we stayed in because the roof, which leaked, held."
        words = [w.strip(",.").lower() for w in sentence.split()]
        # three commas plus "because" and "which"
        assert count_clause_markers(sentence, words) == 5


class TestPunctuationStyle:
    """Test per-sentence punctuation shares."""

    def test_shares(self):
        style = punctuation_style(["A, b.", "C!", "D; e."])
        assert style.periods == pytest.approx(2 / 3)
        assert style.commas == pytest.approx(1 / 3)
        assert style.semicolons == pytest.approx(1 / 3)
        assert style.exclamations == pytest.approx(1 / 3)

    def test_not_normalized_to_one(self):
        style = punctuation_style(["Yes, no; maybe!."])
        assert style.periods == style.commas == style.semicolons == style.exclamations == 1.0

    def test_empty(self):
        assert punctuation_style([]).periods == 0.0


class TestAnalyzeSyntactic:
    """Test the full syntactic signature."""

    def test_no_sentences_is_an_error(self):
        with pytest.raises(ValueError):
            analyze_syntactic([], [])

    def test_academic_more_complex_than_casual(self, academic_text, casual_anecdote):
        academic = tokenize(academic_text)
        casual = tokenize(casual_anecdote)
        a = analyze_syntactic(academic.sentences, academic.sentence_words)
        c = analyze_syntactic(casual.sentences, casual.sentence_words)
        assert a.sentence_complexity > c.sentence_complexity
        assert a.avg_sentence_length > c.avg_sentence_length
        assert c.punctuation_style.exclamations > 0
