"""
Fingerprint Aggregator

Joins per-sample SampleMetrics into one VoicePrint: word-count weighted
signatures, consistency and confidence scores, and per-metric threshold bands.
"""

import logging
from collections import Counter
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Optional

from voice_fingerprint.errors import InsufficientSamples
from voice_fingerprint.style.lexical import PHRASE_PATTERNS_LIMIT, PREFERRED_WORDS_LIMIT, rank_terms
from voice_fingerprint.style.semantic import TOPIC_LIMIT, pick_tone
from voice_fingerprint.style.signatures import (
    TRACKED_METRICS,
    Dimension,
    LexicalSignature,
    PunctuationStyle,
    SampleMetrics,
    SemanticSignature,
    StylisticSignature,
    SyntacticSignature,
    TonalProfile,
    VoiceCharacteristics,
)

from .profile import ProfileStatus, VoicePrint, generate_voiceprint_id
from .scoring import confidence_score, consistency_score, threshold_band, weighted_mean

logger = logging.getLogger(__name__)

# A rhetorical device is kept when at least this share of samples shows it
DEVICE_MAJORITY = 0.5


@dataclass
class AggregationProgress:
    """Progress tracking for profile aggregation."""
    phase: str  # a ProfileStatus value
    current: int
    total: int
    message: str = ""


class FingerprintAggregator:
    """
    Builds a VoicePrint from already-analyzed samples.

    The result does not depend on the order of ``metrics``: samples are sorted
    into a canonical order and all sums are exactly rounded.

    Usage:
        aggregator = FingerprintAggregator()
        voiceprint = aggregator.aggregate(metrics, user_id="u-1")
    """

    def __init__(
        self,
        min_samples: int = 3,
        optimal_samples: int = 5,
        progress_callback: Optional[Callable[[AggregationProgress], None]] = None,
    ):
        self.min_samples = min_samples
        self.optimal_samples = optimal_samples
        self.progress_callback = progress_callback

    def _report_progress(self, phase: ProfileStatus, current: int, total: int, message: str = ""):
        """Report progress if callback is set."""
        if self.progress_callback:
            self.progress_callback(AggregationProgress(phase.value, current, total, message))

    def aggregate(
        self,
        metrics: list[SampleMetrics],
        user_id: str,
        analyzed_at: Optional[datetime] = None,
        previous: Optional[VoicePrint] = None,
    ) -> VoicePrint:
        """
        Aggregate sample metrics into an active VoicePrint.

        Args:
            metrics: one SampleMetrics per valid sample
            user_id: owner of the profile
            analyzed_at: timestamp for ``last_analyzed`` (defaults to now, UTC)
            previous: profile being rebuilt; the new one gets the next version

        Raises:
            InsufficientSamples: fewer than ``min_samples`` samples
        """
        if len(metrics) < self.min_samples:
            raise InsufficientSamples(
                f"{len(metrics)} valid samples supplied; at least {self.min_samples} required"
            )
        if previous is not None and previous.user_id != user_id:
            raise ValueError(f"Cannot rebuild a profile owned by {previous.user_id} for {user_id}")

        samples = sorted(metrics, key=SampleMetrics.sort_key)
        n = len(samples)
        self._report_progress(ProfileStatus.COMPUTING, 0, n, "Aggregating signatures")

        lexical = _aggregate_lexical(_healthy(samples, Dimension.LEXICAL))
        syntactic = _aggregate_syntactic(_healthy(samples, Dimension.SYNTACTIC))
        semantic = _aggregate_semantic(_healthy(samples, Dimension.SEMANTIC))
        stylistic = _aggregate_stylistic(_healthy(samples, Dimension.STYLISTIC))

        consistency = consistency_score(
            {
                name: [spec.getter(m) for m in _healthy(samples, spec.dimension)]
                for name, spec in TRACKED_METRICS.items()
            },
            {name: spec.scale for name, spec in TRACKED_METRICS.items()},
        )
        degraded_pairs = sum(len(m.degraded) for m in samples)
        confidence = confidence_score(
            n,
            consistency,
            degraded_fraction=degraded_pairs / (n * len(Dimension)),
            optimal_samples=self.optimal_samples,
        )
        self._report_progress(ProfileStatus.COMPUTING, n, n, "Scored confidence and consistency")

        version = previous.version + 1 if previous else 1
        sample_ids = [m.sample_id for m in samples]
        voiceprint = VoicePrint(
            id=generate_voiceprint_id(user_id, sample_ids, version),
            user_id=user_id,
            lexical=lexical,
            syntactic=syntactic,
            semantic=semantic,
            stylistic=stylistic,
            confidence_score=confidence,
            consistency_score=consistency,
            status=ProfileStatus.COMPUTING,
            version=version,
            last_analyzed=analyzed_at or datetime.now(timezone.utc),
            sample_count=n,
            total_word_count=sum(m.word_count for m in samples),
            source_sample_ids=sample_ids,
        )
        thresholds = {
            name: threshold_band(spec, spec.getter(voiceprint), confidence)
            for name, spec in TRACKED_METRICS.items()
        }
        voiceprint = replace(voiceprint, thresholds=thresholds).activate(self.min_samples)

        if degraded_pairs:
            logger.warning(
                "Profile %s built with %d degraded sample dimensions", voiceprint.id, degraded_pairs
            )
        logger.info(
            "Profile %s v%d: %d samples, confidence %.3f, consistency %.3f",
            voiceprint.id, version, n, confidence, consistency,
        )
        self._report_progress(ProfileStatus.ACTIVE, n, n, "Profile active")
        return voiceprint


def _healthy(samples: list[SampleMetrics], dimension: Dimension) -> list[SampleMetrics]:
    """Samples whose ``dimension`` was really measured; all samples if none were."""
    healthy = [m for m in samples if dimension.value not in m.degraded]
    return healthy or samples


def _weights(samples: list[SampleMetrics]) -> list[float]:
    return [float(max(m.word_count, 1)) for m in samples]


def _mean(samples: list[SampleMetrics], getter: Callable[[SampleMetrics], float]) -> float:
    return weighted_mean([getter(m) for m in samples], _weights(samples))


def merge_ranked(lists: list[list[tuple[str, int]]], limit: int) -> list[tuple[str, int]]:
    """Merge per-sample (term, count) rankings by summed count."""
    totals: Counter = Counter()
    for ranked in lists:
        for term, count in ranked:
            totals[term] += count
    return rank_terms(totals, limit)


def _aggregate_lexical(samples: list[SampleMetrics]) -> LexicalSignature:
    return LexicalSignature(
        vocabulary_richness=_mean(samples, lambda m: m.lexical.vocabulary_richness),
        avg_word_length=_mean(samples, lambda m: m.lexical.avg_word_length),
        preferred_words=merge_ranked([m.lexical.preferred_words for m in samples], PREFERRED_WORDS_LIMIT),
        phrase_patterns=merge_ranked([m.lexical.phrase_patterns for m in samples], PHRASE_PATTERNS_LIMIT),
    )


def _aggregate_syntactic(samples: list[SampleMetrics]) -> SyntacticSignature:
    return SyntacticSignature(
        sentence_complexity=_mean(samples, lambda m: m.syntactic.sentence_complexity),
        avg_sentence_length=_mean(samples, lambda m: m.syntactic.avg_sentence_length),
        clause_markers_per_sentence=_mean(samples, lambda m: m.syntactic.clause_markers_per_sentence),
        punctuation_style=PunctuationStyle(
            periods=_mean(samples, lambda m: m.syntactic.punctuation_style.periods),
            commas=_mean(samples, lambda m: m.syntactic.punctuation_style.commas),
            semicolons=_mean(samples, lambda m: m.syntactic.punctuation_style.semicolons),
            exclamations=_mean(samples, lambda m: m.syntactic.punctuation_style.exclamations),
        ),
    )


def _aggregate_semantic(samples: list[SampleMetrics]) -> SemanticSignature:
    votes: dict[TonalProfile, float] = {}
    for m, weight in zip(samples, _weights(samples)):
        votes[m.semantic.tonal_profile] = votes.get(m.semantic.tonal_profile, 0.0) + weight
    return SemanticSignature(
        formality_level=_mean(samples, lambda m: m.semantic.formality_level),
        tonal_profile=pick_tone(votes),
        topical_interests=merge_ranked([m.semantic.topical_interests for m in samples], TOPIC_LIMIT),
    )


def _aggregate_stylistic(samples: list[SampleMetrics]) -> StylisticSignature:
    contraction_usage = _mean(samples, lambda m: m.stylistic.contraction_usage)
    hedge_frequency = _mean(samples, lambda m: m.stylistic.hedge_frequency)
    idiom_usage = _mean(samples, lambda m: m.stylistic.idiom_usage)

    device_counts = Counter(
        device for m in samples for device in set(m.stylistic.voice_characteristics.rhetorical_devices)
    )
    devices = sorted(d for d, c in device_counts.items() if c / len(samples) >= DEVICE_MAJORITY)

    def vc(m: SampleMetrics) -> VoiceCharacteristics:
        return m.stylistic.voice_characteristics

    characteristics = VoiceCharacteristics(
        contraction_usage=contraction_usage,
        hedge_frequency=hedge_frequency,
        idiom_usage=idiom_usage,
        uses_idioms=any(vc(m).uses_idioms for m in samples),
        first_person_usage=_mean(samples, lambda m: vc(m).first_person_usage),
        question_ratio=_mean(samples, lambda m: vc(m).question_ratio),
        exclamation_ratio=_mean(samples, lambda m: vc(m).exclamation_ratio),
        transition_usage=_mean(samples, lambda m: vc(m).transition_usage),
        active_voice_ratio=_mean(samples, lambda m: vc(m).active_voice_ratio),
        rhetorical_devices=devices,
    )
    return StylisticSignature(
        contraction_usage=contraction_usage,
        hedge_frequency=hedge_frequency,
        idiom_usage=idiom_usage,
        voice_characteristics=characteristics,
    )
