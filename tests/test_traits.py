"""Tests for trait and pitfall rules and the narrative summary."""

from dataclasses import replace

import pytest

from voice_fingerprint.models.records import PitfallSeverity
from voice_fingerprint.style.signatures import TonalProfile
from voice_fingerprint.voice import summarize
from voice_fingerprint.voice.traits import (
    CHOPPY_RHYTHM,
    EXCESSIVE_HEDGING,
    EXCLAMATION_OVERUSE,
    LIMITED_VOCABULARY,
    OVERLY_COMPLEX_SENTENCES,
    OVERLY_FORMAL,
    TOO_CASUAL,
    VOCABULARY_BUCKETS,
    bucket,
    identify_pitfalls,
    identify_traits,
)


def tweak(vp, richness=None, complexity=None, formality=None, contractions=None,
          hedges=None, exclamations=None, tone=None):
    """Copy of ``vp`` with selected headline values overridden."""
    lexical, syntactic, semantic, stylistic = vp.lexical, vp.syntactic, vp.semantic, vp.stylistic
    if richness is not None:
        lexical = replace(lexical, vocabulary_richness=richness)
    if complexity is not None:
        syntactic = replace(syntactic, sentence_complexity=complexity)
    if exclamations is not None:
        syntactic = replace(
            syntactic, punctuation_style=replace(syntactic.punctuation_style, exclamations=exclamations)
        )
    if formality is not None:
        semantic = replace(semantic, formality_level=formality)
    if tone is not None:
        semantic = replace(semantic, tonal_profile=tone)
    if contractions is not None:
        stylistic = replace(stylistic, contraction_usage=contractions)
    if hedges is not None:
        stylistic = replace(stylistic, hedge_frequency=hedges)
    return replace(vp, lexical=lexical, syntactic=syntactic, semantic=semantic, stylistic=stylistic)


class TestTraits:
    """Tests for identify_traits."""

    def test_headline_traits_first(self, active_voiceprint):
        ids = [t.id for t in identify_traits(active_voiceprint)]
        assert ids[:4] == ["vocabulary", "sentence_complexity", "tone", "formality"]

    def test_optional_traits(self, active_voiceprint):
        ids = {t.id for t in identify_traits(active_voiceprint)}
        assert {"balanced_tone", "active_voice", "rhetorical_devices"} <= ids
        assert "idiomatic_voice" not in ids
        assert "personal_perspective" not in ids

    def test_strengths_bounded(self, active_voiceprint):
        vp = tweak(active_voiceprint, complexity=80.0, richness=1.0)
        for trait in identify_traits(vp):
            assert 0.0 <= trait.strength <= 1.0

    def test_descriptions_follow_buckets(self, active_voiceprint):
        traits = {t.id: t for t in identify_traits(tweak(active_voiceprint, formality=0.9, richness=0.3))}
        assert "formal register" in traits["formality"].description
        assert "focused vocabulary" in traits["vocabulary"].description
        assert "balanced_tone" not in traits


class TestPitfalls:
    """Each pitfall fires past its boundary and stays quiet at it."""

    @pytest.mark.parametrize("rule,quiet,fires", [
        (LIMITED_VOCABULARY, {"richness": 0.5}, {"richness": 0.49}),
        (OVERLY_COMPLEX_SENTENCES, {"complexity": 25.0}, {"complexity": 25.5}),
        (CHOPPY_RHYTHM, {"complexity": 8.0}, {"complexity": 7.9}),
        (OVERLY_FORMAL, {"contractions": 0.01}, {"contractions": 0.009}),
        (TOO_CASUAL, {"formality": 0.2}, {"formality": 0.19}),
        (EXCESSIVE_HEDGING, {"hedges": 0.03}, {"hedges": 0.031}),
        (EXCLAMATION_OVERUSE, {"exclamations": 0.3}, {"exclamations": 0.31}),
    ])
    def test_boundaries(self, active_voiceprint, rule, quiet, fires):
        assert rule.evaluate(tweak(active_voiceprint, **quiet)) is None
        pitfall = rule.evaluate(tweak(active_voiceprint, **fires))
        assert pitfall is not None
        assert pitfall.id == rule.id

    @pytest.mark.parametrize("rule,kwargs,expected", [
        (LIMITED_VOCABULARY, {"richness": 0.4}, PitfallSeverity.MEDIUM),
        (LIMITED_VOCABULARY, {"richness": 0.2}, PitfallSeverity.HIGH),
        (OVERLY_COMPLEX_SENTENCES, {"complexity": 28.0}, PitfallSeverity.MEDIUM),
        (OVERLY_COMPLEX_SENTENCES, {"complexity": 31.0}, PitfallSeverity.HIGH),
        (EXCESSIVE_HEDGING, {"hedges": 0.04}, PitfallSeverity.MEDIUM),
        (EXCESSIVE_HEDGING, {"hedges": 0.06}, PitfallSeverity.HIGH),
        (OVERLY_FORMAL, {"contractions": 0.0}, PitfallSeverity.LOW),
    ])
    def test_severity(self, active_voiceprint, rule, kwargs, expected):
        assert rule.evaluate(tweak(active_voiceprint, **kwargs)).severity == expected

    def test_none_for_balanced_profile(self, active_voiceprint):
        assert identify_pitfalls(active_voiceprint) == []

    def test_sorted_by_severity(self, active_voiceprint):
        vp = tweak(active_voiceprint, richness=0.4, contractions=0.0, complexity=35.0)
        pitfalls = identify_pitfalls(vp)
        assert [p.id for p in pitfalls] == ["overly_complex_sentences", "limited_vocabulary", "overly_formal"]


class TestNarrative:
    """Tests for the templated summary."""

    def test_bucket(self):
        assert bucket(0.44, VOCABULARY_BUCKETS) == "low"
        assert bucket(0.45, VOCABULARY_BUCKETS) == "medium"
        assert bucket(0.65, VOCABULARY_BUCKETS) == "high"

    def test_balanced_profile(self, active_voiceprint):
        summary = summarize(active_voiceprint)
        assert summary.summary == (
            "A neutral voice with varied vocabulary, balanced sentences and a balanced register "
            "(medium contraction use). Signature trait: balanced tone."
        )

    def test_mentions_top_pitfall(self, active_voiceprint):
        vp = tweak(active_voiceprint, complexity=35.0, tone=TonalProfile.ANALYTICAL, formality=0.8)
        summary = summarize(vp)
        assert summary.summary.startswith("An analytical voice with varied vocabulary, long, layered sentences")
        assert summary.summary.endswith("Watch for overly complex sentences.")

    def test_to_dict(self, active_voiceprint):
        data = summarize(active_voiceprint).to_dict()
        assert set(data) == {"traits", "pitfalls", "summary"}
        assert data["traits"][0]["category"] == "lexical"
