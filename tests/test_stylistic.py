"""Tests for the stylistic analyzer."""

import pytest

from voice_fingerprint.ingest.tokenizer import tokenize
from voice_fingerprint.style.lexicon import HEDGE_PHRASES, IDIOMS
from voice_fingerprint.style.stylistic import (
    analyze_stylistic,
    count_phrases,
    detect_rhetorical_devices,
    rate,
)


def stylistic_for(text: str):
    tokens = tokenize(text, min_words=1)
    return analyze_stylistic(tokens.text, tokens.lower_words, tokens.sentences, tokens.sentence_words)


class TestPhraseCounting:
    """Test phrase lookups."""

    def test_hedge_phrases(self):
        assert count_phrases("I think it is sort of fine, I think.", HEDGE_PHRASES) == 3

    def test_longer_idiom_wins(self):
        assert count_phrases("She hit the nail on the head again.", IDIOMS) == 1

    def test_whole_words_only(self):
        assert count_phrases("The unkind offer", HEDGE_PHRASES) == 0

    def test_curly_apostrophes(self):
        assert count_phrases("It’s time to call it a day.", IDIOMS) == 1


class TestRates:
    """Test per-word rates."""

    def test_rate_bounds(self):
        assert rate(0, 0) == 0.0
        assert rate(3, 2) == 1.0
        assert rate(1, 4) == 0.25

    def test_contractions_and_hedges(self):
        sig = stylistic_for("I don't know. Perhaps we can't go. Maybe later then.")
        # 10 words: two contractions, two hedges
        assert sig.contraction_usage == pytest.approx(0.2)
        assert sig.hedge_frequency == pytest.approx(0.2)
        assert sig.idiom_usage == 0.0
        assert not sig.voice_characteristics.uses_idioms

    def test_idioms_flagged(self):
        sig = stylistic_for("Honestly the exam was a piece of cake for everyone.")
        assert sig.idiom_usage > 0
        assert sig.voice_characteristics.uses_idioms

    def test_rates_within_unit_interval(self, casual_anecdote):
        sig = stylistic_for(casual_anecdote)
        for value in (sig.contraction_usage, sig.hedge_frequency, sig.idiom_usage):
            assert 0.0 <= value <= 1.0
        assert sig.contraction_usage > 0.05


class TestVoiceCharacteristics:
    """Test secondary voice flags."""

    def test_rhetorical_devices(self):
        sentences = ["Why bother?", "We try.", "We win."]
        words = [["why", "bother"], ["we", "try"], ["we", "win"]]
        assert detect_rhetorical_devices(sentences, words) == [
            "rhetorical_questions", "anaphora", "parallelism",
        ]

    def test_no_devices(self):
        sentences = ["Short one.", "This sentence is quite a lot longer than that."]
        words = [["short", "one"], ["this", "sentence", "is", "quite", "a", "lot", "longer", "than", "that"]]
        assert detect_rhetorical_devices(sentences, words) == []

    def test_ratios(self):
        sig = stylistic_for("I wrote this. The report was approved? It was approved! However, we left.")
        vc = sig.voice_characteristics
        assert vc.question_ratio == pytest.approx(0.25)
        assert vc.exclamation_ratio == pytest.approx(0.25)
        assert vc.active_voice_ratio == pytest.approx(0.5)
        assert vc.transition_usage == pytest.approx(0.25)
        assert vc.first_person_usage > 0
