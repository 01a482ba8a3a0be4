"""
VoicePrint

The aggregated, durable representation of a user's writing voice.
"""

import hashlib
import json
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from voice_fingerprint.models.records import ThresholdBand
from voice_fingerprint.style.signatures import (
    LexicalSignature,
    SemanticSignature,
    StylisticSignature,
    SyntacticSignature,
    lexical_from_dict,
    metric_values,
    semantic_from_dict,
    stylistic_from_dict,
    syntactic_from_dict,
)


class ProfileStatus(str, Enum):
    COMPUTING = "computing"
    ACTIVE = "active"
    STALE = "stale"


@dataclass(frozen=True)
class VoicePrint:
    """
    A user's voice profile.

    Instances are immutable: status changes and rebuilds return new objects,
    so callers can keep an append-only history of versions.
    """

    id: str
    user_id: str
    lexical: LexicalSignature
    syntactic: SyntacticSignature
    semantic: SemanticSignature
    stylistic: StylisticSignature
    confidence_score: float = 0.0
    consistency_score: float = 0.0
    status: ProfileStatus = ProfileStatus.COMPUTING
    version: int = 1
    last_analyzed: Optional[datetime] = None

    # Provenance
    sample_count: int = 0
    total_word_count: int = 0
    source_sample_ids: list[str] = field(default_factory=list)

    # Per-metric target bands
    thresholds: dict[str, ThresholdBand] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status == ProfileStatus.ACTIVE

    def metric_values(self) -> dict[str, float]:
        return metric_values(self)

    def band(self, metric_name: str) -> ThresholdBand:
        return self.thresholds[metric_name]

    # === Status transitions ===

    def activate(self, min_samples: int = 3) -> "VoicePrint":
        """computing -> active, once enough samples have been aggregated."""
        if self.status != ProfileStatus.COMPUTING:
            raise ValueError(f"Cannot activate a {self.status.value} profile")
        if self.sample_count < min_samples:
            raise ValueError(
                f"Cannot activate with {self.sample_count} samples; {min_samples} required"
            )
        return replace(self, status=ProfileStatus.ACTIVE)

    def mark_stale(self) -> "VoicePrint":
        """active -> stale, when re-analysis is requested."""
        if self.status != ProfileStatus.ACTIVE:
            raise ValueError(f"Cannot mark a {self.status.value} profile stale")
        return replace(self, status=ProfileStatus.STALE)

    def refresh_status(self, now: datetime, stale_after: timedelta) -> "VoicePrint":
        """Mark an active profile stale once the inactivity window has elapsed."""
        if self.is_active and self.last_analyzed is not None and now - self.last_analyzed > stale_after:
            return self.mark_stale()
        return self

    # === Serialization ===

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        d = {
            "id": self.id,
            "user_id": self.user_id,
            "lexical": asdict(self.lexical),
            "syntactic": asdict(self.syntactic),
            "semantic": asdict(self.semantic),
            "stylistic": asdict(self.stylistic),
            "confidence_score": self.confidence_score,
            "consistency_score": self.consistency_score,
            "status": self.status.value,
            "version": self.version,
            "last_analyzed": self.last_analyzed.isoformat() if self.last_analyzed else None,
            "sample_count": self.sample_count,
            "total_word_count": self.total_word_count,
            "source_sample_ids": list(self.source_sample_ids),
            "thresholds": {name: band.model_dump() for name, band in self.thresholds.items()},
        }
        d["semantic"]["tonal_profile"] = self.semantic.tonal_profile.value
        return d

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> "VoicePrint":
        """Create from dictionary."""
        last = d.get("last_analyzed")
        return cls(
            id=d["id"],
            user_id=d["user_id"],
            lexical=lexical_from_dict(d["lexical"]),
            syntactic=syntactic_from_dict(d["syntactic"]),
            semantic=semantic_from_dict(d["semantic"]),
            stylistic=stylistic_from_dict(d["stylistic"]),
            confidence_score=d.get("confidence_score", 0.0),
            consistency_score=d.get("consistency_score", 0.0),
            status=ProfileStatus(d.get("status", "computing")),
            version=d.get("version", 1),
            last_analyzed=datetime.fromisoformat(last) if last else None,
            sample_count=d.get("sample_count", 0),
            total_word_count=d.get("total_word_count", 0),
            source_sample_ids=list(d.get("source_sample_ids", [])),
            thresholds={
                name: ThresholdBand(**band) for name, band in d.get("thresholds", {}).items()
            },
        )

    @classmethod
    def from_json(cls, json_str: str) -> "VoicePrint":
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def summary(self) -> str:
        """Generate a human-readable summary of the profile."""
        lines = [
            f"=== VoicePrint {self.id} (v{self.version}, {self.status.value}) ===",
            "",
            "[Corpus]",
            f"   Samples: {self.sample_count}",
            f"   Total words: {self.total_word_count:,}",
            f"   Confidence: {self.confidence_score:.2f}",
            f"   Consistency: {self.consistency_score:.2f}",
            "",
            "[Lexical]",
            f"   Vocabulary richness: {self.lexical.vocabulary_richness:.3f}",
            f"   Avg word length: {self.lexical.avg_word_length:.2f} chars",
        ]
        if self.lexical.preferred_words:
            lines.append(f"   Preferred words: {', '.join(w for w, _ in self.lexical.preferred_words)}")
        lines.extend([
            "",
            "[Syntactic]",
            f"   Sentence complexity: {self.syntactic.sentence_complexity:.1f}",
            f"   Avg sentence length: {self.syntactic.avg_sentence_length:.1f} words",
            "",
            "[Semantic]",
            f"   Formality: {self.semantic.formality_level:.2f}",
            f"   Tone: {self.semantic.tonal_profile.value}",
        ])
        if self.semantic.topical_interests:
            lines.append(f"   Interests: {', '.join(w for w, _ in self.semantic.topical_interests)}")
        lines.extend([
            "",
            "[Stylistic]",
            f"   Contractions: {self.stylistic.contraction_usage * 100:.1f}%",
            f"   Hedging: {self.stylistic.hedge_frequency * 100:.1f}%",
            f"   Idioms: {self.stylistic.idiom_usage * 100:.2f}%",
        ])
        return "\n".join(lines)


def generate_voiceprint_id(user_id: str, sample_ids: list[str], version: int) -> str:
    """Stable ID from the owner, the (unordered) sample set and the version."""
    key = "|".join([user_id, *sorted(sample_ids), str(version)])
    return "vp_" + hashlib.sha256(key.encode("utf-8")).hexdigest()[:16]
