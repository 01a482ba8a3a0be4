"""Tests for tokenization and segmentation."""

import pytest

from voice_fingerprint.errors import EncodingError, InsufficientContent, SampleTooLong, SampleTooShort
from voice_fingerprint.ingest.tokenizer import (
    extract_punctuation,
    split_into_paragraphs,
    split_into_sentences,
    split_into_words,
    tokenize,
)


def numbered_words(n: int) -> str:
    return " ".join(f"word{i}" for i in range(n)) + "."


class TestSentenceSplitting:
    """Test sentence boundary detection."""

    def test_simple_sentences(self):
        text = "This is sentence one. This is sentence two. And a third!"
        sentences = split_into_sentences(text)
        assert len(sentences) == 3
        assert sentences[0] == "This is sentence one."
        assert sentences[1] == "This is sentence two."
        assert sentences[2] == "And a third!"

    def test_abbreviations(self):
        text = "Mr. Baggins went to see Dr. Gandalf. They talked for hours."
        sentences = split_into_sentences(text)
        assert len(sentences) == 2
        assert "Mr. Baggins" in sentences[0]
        assert "Dr. Gandalf" in sentences[0]

    def test_latin_abbreviations(self):
        text = "Bring fruit, e.g. Apples or pears. Then leave."
        sentences = split_into_sentences(text)
        assert len(sentences) == 2

    def test_dialogue(self):
        text = '"Hello," said Frodo. "Where are you going?" asked Sam.'
        sentences = split_into_sentences(text)
        assert len(sentences) == 2

    def test_question_and_exclamation(self):
        text = "What is this? It is the Ring! We must destroy it."
        sentences = split_into_sentences(text)
        assert len(sentences) == 3

    def test_lowercase_continuation_does_not_split(self):
        text = "It cost 3.5 dollars. prices rose. Then they fell."
        sentences = split_into_sentences(text)
        assert sentences == ["It cost 3.5 dollars. prices rose.", "Then they fell."]

    def test_unicode_punctuation_and_spaces(self):
        text = "Wait… Then what happened? “Nothing,” she said. Really."
        sentences = split_into_sentences(text)
        assert sentences == [
            "Wait…",
            "Then what happened?",
            "“Nothing,” she said.",
            "Really.",
        ]

    def test_trailing_text_without_terminator(self):
        sentences = split_into_sentences("One here. And a fragment")
        assert sentences == ["One here.", "And a fragment"]


class TestParagraphSplitting:
    """Test paragraph boundary detection."""

    def test_double_newline(self):
        text = "First paragraph.\n\nSecond paragraph."
        assert len(split_into_paragraphs(text)) == 2

    def test_multiple_newlines(self):
        text = "First.\n\n\n\nSecond."
        assert len(split_into_paragraphs(text)) == 2

    def test_empty_paragraphs_filtered(self):
        text = "First.\n\n   \n\nSecond."
        assert len(split_into_paragraphs(text)) == 2


class TestWordsAndPunctuation:
    """Test word and punctuation tokens."""

    def test_contractions_and_hyphens_stay_whole(self):
        words = split_into_words("We don’t re-use well-known tricks; it's 2026.")
        assert words == ["We", "don’t", "re-use", "well-known", "tricks", "it's", "2026"]

    def test_lowercase_view_normalizes_apostrophes(self):
        tokens = tokenize("Don’t " + numbered_words(60))
        assert tokens.words[0] == "Don’t"
        assert tokens.lower_words[0] == "don't"

    def test_punctuation_includes_unicode_marks(self):
        assert extract_punctuation("Hi, there! «Yes» — ok.") == [
            ",", "!", "«", "»", "—", ".",
        ]

    def test_sentence_words_are_lowercase(self):
        tokens = tokenize("Alpha Beta gamma. Next " + numbered_words(60))
        assert tokens.sentence_words[0] == ["alpha", "beta", "gamma"]


class TestValidation:
    """Test length and encoding checks."""

    def test_too_short(self):
        with pytest.raises(SampleTooShort) as exc_info:
            tokenize(numbered_words(49), sample_id="tiny")
        assert exc_info.value.sample_id == "tiny"
        assert str(exc_info.value).startswith("[tiny]")

    def test_too_short_is_insufficient_content(self):
        with pytest.raises(InsufficientContent):
            tokenize("just a few words")

    def test_exactly_minimum_is_accepted(self):
        assert tokenize(numbered_words(50)).word_count == 50

    def test_too_long(self):
        with pytest.raises(SampleTooLong):
            tokenize(numbered_words(20), min_words=1, max_words=10)

    def test_character_guard(self):
        with pytest.raises(SampleTooLong):
            tokenize("x" * 2000, min_words=1, max_words=10)

    @pytest.mark.parametrize("bad", [b"bytes are not text", None, 42])
    def test_non_text_rejected(self, bad):
        with pytest.raises(EncodingError):
            tokenize(bad)

    def test_nul_rejected(self):
        with pytest.raises(EncodingError):
            tokenize(numbered_words(60) + "\x00")

    def test_lone_surrogate_rejected(self):
        with pytest.raises(EncodingError):
            tokenize(numbered_words(60) + "\ud800")

    def test_counts(self, formal_email):
        tokens = tokenize(formal_email)
        assert tokens.word_count > 100
        assert tokens.sentence_count >= 8
        assert len(tokens.paragraphs) == 3
