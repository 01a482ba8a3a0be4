"""
Voice Comparison

Similarity between two VoicePrints and a summary of how a voice evolved.
"""

import math

from voice_fingerprint.models.records import EvolutionTrend, VoiceEvolution

from .profile import VoicePrint

SIMILARITY_WEIGHTS = {
    "vocabulary": 0.25,
    "sentence_structure": 0.20,
    "tone": 0.20,
    "formality": 0.15,
    "punctuation": 0.10,
    "phrases": 0.10,
}

# Complexity difference at which sentence-structure similarity reaches zero
COMPLEXITY_SPAN = 50.0
# Tone similarity when labels differ
TONE_MISMATCH = 0.5

# Significant-change cutoffs for evolution
VOCABULARY_CHANGE = 0.15
COMPLEXITY_CHANGE = 5.0

# Trend cutoffs on the vocabulary-richness delta
STABLE_LIMIT = 0.05
EVOLVING_LIMIT = 0.15

RECOMMENDATIONS = {
    "vocabulary_complexity": "Your vocabulary usage has shifted. Consider whether this fits your intended audience.",
    "sentence_patterns": "Your sentence structure has evolved. This may affect readability.",
    "emotional_tone": "Your emotional tone has changed. Make sure it matches your communication goals.",
}


def jaccard(a: set, b: set) -> float:
    union = a | b
    return len(a & b) / len(union) if union else 1.0


def dimension_similarities(a: VoicePrint, b: VoicePrint) -> dict[str, float]:
    """Per-dimension similarity in [0, 1], keyed like SIMILARITY_WEIGHTS."""
    pa, pb = a.syntactic.punctuation_style, b.syntactic.punctuation_style
    punct_diffs = [
        abs(pa.periods - pb.periods),
        abs(pa.commas - pb.commas),
        abs(pa.semicolons - pb.semicolons),
        abs(pa.exclamations - pb.exclamations),
    ]
    return {
        "vocabulary": jaccard(
            {w for w, _ in a.lexical.preferred_words}, {w for w, _ in b.lexical.preferred_words}
        ),
        "sentence_structure": max(
            0.0, 1 - abs(a.syntactic.sentence_complexity - b.syntactic.sentence_complexity) / COMPLEXITY_SPAN
        ),
        "tone": 1.0 if a.semantic.tonal_profile == b.semantic.tonal_profile else TONE_MISMATCH,
        "formality": max(0.0, 1 - abs(a.semantic.formality_level - b.semantic.formality_level)),
        "punctuation": max(0.0, 1 - math.fsum(punct_diffs) / len(punct_diffs)),
        "phrases": jaccard(
            {p for p, _ in a.lexical.phrase_patterns}, {p for p, _ in b.lexical.phrase_patterns}
        ),
    }


def compare_voices(a: VoicePrint, b: VoicePrint) -> int:
    """Weighted similarity of two voices, 0-100. Symmetric."""
    similarities = dimension_similarities(a, b)
    score = math.fsum(similarities[k] * w for k, w in SIMILARITY_WEIGHTS.items())
    score /= math.fsum(SIMILARITY_WEIGHTS.values())
    return round(score * 100)


def changed_dimensions(old: VoicePrint, new: VoicePrint) -> list[str]:
    changes = []
    if abs(old.lexical.vocabulary_richness - new.lexical.vocabulary_richness) > VOCABULARY_CHANGE:
        changes.append("vocabulary_complexity")
    if abs(old.syntactic.sentence_complexity - new.syntactic.sentence_complexity) > COMPLEXITY_CHANGE:
        changes.append("sentence_patterns")
    if old.semantic.tonal_profile != new.semantic.tonal_profile:
        changes.append("emotional_tone")
    return changes


def evolution_trend(old: VoicePrint, new: VoicePrint) -> EvolutionTrend:
    diff = abs(old.lexical.vocabulary_richness - new.lexical.vocabulary_richness)
    if diff < STABLE_LIMIT:
        return EvolutionTrend.STABLE
    if diff < EVOLVING_LIMIT:
        return EvolutionTrend.EVOLVING
    return EvolutionTrend.SHIFTING


def detect_evolution(old: VoicePrint, new: VoicePrint) -> VoiceEvolution:
    """How the voice in ``new`` differs from ``old``."""
    changes = changed_dimensions(old, new)
    return VoiceEvolution(
        drift_score=100 - compare_voices(old, new),
        changed_dimensions=changes,
        trend=evolution_trend(old, new),
        recommendations=[RECOMMENDATIONS[c] for c in changes],
    )
