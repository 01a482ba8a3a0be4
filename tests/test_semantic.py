"""Tests for the semantic/tone analyzer."""

import pytest

from voice_fingerprint.ingest.tokenizer import tokenize
from voice_fingerprint.style.semantic import (
    analyze_semantic,
    formality_score,
    is_informal_marker,
    is_passive,
    pick_tone,
    tone_scores,
    topical_interests,
)
from voice_fingerprint.style.signatures import TonalProfile


class TestFormality:
    """Test the formality heuristic."""

    def test_neutral_without_markers(self):
        assert formality_score(100, 0, 0, 0.0) == 0.5

    def test_bounded(self):
        assert formality_score(10, 10, 0, 1.0) == 1.0
        assert formality_score(10, 0, 10, 0.0) == 0.0

    def test_formal_connectives_raise(self):
        assert formality_score(100, 3, 0, 0.0) > formality_score(100, 0, 0, 0.0)

    def test_passive_raises(self):
        assert formality_score(100, 0, 0, 0.5) > formality_score(100, 0, 0, 0.0)

    @pytest.mark.parametrize("formal,passive", [(0, 0.0), (2, 0.3), (5, 1.0)])
    def test_monotone_in_informal_count(self, formal, passive):
        scores = [formality_score(100, formal, informal, passive) for informal in range(0, 30)]
        assert all(b <= a for a, b in zip(scores, scores[1:]))

    @pytest.mark.parametrize("markers", [["you"], ["gonna", "you"], ["don't", "yeah", "your", "stuff"]])
    def test_adding_informal_markers_never_raises(self, formal_email, markers):
        tokens = tokenize(formal_email)
        words = tokens.lower_words
        sentence_words = tokens.sentence_words

        base = analyze_semantic(words, sentence_words).formality_level
        more = analyze_semantic(
            words + markers, sentence_words[:-1] + [sentence_words[-1] + markers]
        ).formality_level
        assert more <= base

    def test_register_ordering(self, formal_email, casual_anecdote):
        formal = tokenize(formal_email)
        casual = tokenize(casual_anecdote)
        f = analyze_semantic(formal.lower_words, formal.sentence_words).formality_level
        c = analyze_semantic(casual.lower_words, casual.sentence_words).formality_level
        assert f > 0.6
        assert c < 0.2

    def test_informal_markers(self):
        assert is_informal_marker("don't")
        assert is_informal_marker("you")
        assert is_informal_marker("gonna")
        assert not is_informal_marker("therefore")


class TestPassive:
    """Test passive-voice detection."""

    @pytest.mark.parametrize("sentence,expected", [
        ("the report was approved", True),
        ("the letter was quickly written", True),
        ("results were given to the board", True),
        ("it was often late", False),
        ("she is happy", False),
        ("we were open all night", False),
    ])
    def test_detection(self, sentence, expected):
        assert is_passive(sentence.split()) is expected


class TestTone:
    """Test tone scoring and tie-breaking."""

    def test_ties_follow_priority(self):
        assert pick_tone({TonalProfile.WARM: 2, TonalProfile.ANALYTICAL: 2}) == TonalProfile.ANALYTICAL
        assert pick_tone({TonalProfile.WARM: 1, TonalProfile.ASSERTIVE: 1}) == TonalProfile.ASSERTIVE
        assert pick_tone({TonalProfile.PLAYFUL: 3, TonalProfile.WARM: 3}) == TonalProfile.WARM

    def test_no_hits_is_neutral(self):
        assert pick_tone({tone: 0 for tone in TonalProfile}) == TonalProfile.NEUTRAL

    def test_highest_wins(self):
        assert pick_tone({TonalProfile.PLAYFUL: 4, TonalProfile.ANALYTICAL: 1}) == TonalProfile.PLAYFUL

    def test_exclamations_count_as_playful(self):
        assert tone_scores(["hello"], exclamation_count=2)[TonalProfile.PLAYFUL] == 2

    def test_academic_is_analytical(self, academic_text):
        tokens = tokenize(academic_text)
        sig = analyze_semantic(tokens.lower_words, tokens.sentence_words)
        assert sig.tonal_profile == TonalProfile.ANALYTICAL


class TestTopics:
    """Test topical interests."""

    def test_nouns_after_determiners_and_suffixes(self):
        words = "the garden and the garden and a river improvement".split()
        assert topical_interests(words) == [("garden", 2), ("improvement", 1), ("river", 1)]

    def test_capped(self, academic_text):
        tokens = tokenize(academic_text)
        assert len(topical_interests(tokens.lower_words)) <= 5
