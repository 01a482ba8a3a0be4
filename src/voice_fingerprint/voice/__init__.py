"""
Voice Profile Module

Aggregates per-sample signatures into a VoicePrint, detects drift against
it, and renders traits, pitfalls and comparisons.
"""

from .profile import ProfileStatus, VoicePrint, generate_voiceprint_id
from .aggregator import AggregationProgress, FingerprintAggregator
from .drift import DriftDetector
from .traits import PITFALL_RULES, TRAIT_RULES, VoiceSummary, summarize
from .compare import compare_voices, detect_evolution

__all__ = [
    "ProfileStatus",
    "VoicePrint",
    "generate_voiceprint_id",
    "AggregationProgress",
    "FingerprintAggregator",
    "DriftDetector",
    "PITFALL_RULES",
    "TRAIT_RULES",
    "VoiceSummary",
    "summarize",
    "compare_voices",
    "detect_evolution",
]
