"""Records exchanged with persistence and UI collaborators."""

from voice_fingerprint.models.records import (
    DriftEvent,
    DriftSeverity,
    EvolutionTrend,
    Pitfall,
    PitfallCategory,
    PitfallSeverity,
    ThresholdBand,
    Trait,
    TraitCategory,
    VoiceEvolution,
)
from voice_fingerprint.models.sample import WritingSample

__all__ = [
    "DriftEvent",
    "DriftSeverity",
    "EvolutionTrend",
    "Pitfall",
    "PitfallCategory",
    "PitfallSeverity",
    "ThresholdBand",
    "Trait",
    "TraitCategory",
    "VoiceEvolution",
    "WritingSample",
]
