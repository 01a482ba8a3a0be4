"""Derived records exposed to persistence and UI collaborators."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ThresholdBand(BaseModel):
    """Acceptable range around a metric's optimal value for one profile."""

    metric_name: str
    min: float
    max: float
    optimal: float

    @model_validator(mode="after")
    def _check_order(self) -> "ThresholdBand":
        if not (self.min <= self.optimal <= self.max):
            raise ValueError(
                f"band for {self.metric_name} violates min <= optimal <= max: "
                f"{self.min} / {self.optimal} / {self.max}"
            )
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class TraitCategory(str, Enum):
    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    SEMANTIC = "semantic"
    STYLISTIC = "stylistic"


class Trait(BaseModel):
    """A positive, human-readable description of the voice."""

    id: str
    name: str
    description: str
    strength: float = Field(ge=0.0, le=1.0)
    category: TraitCategory


class PitfallSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PitfallCategory(str, Enum):
    CLARITY = "clarity"
    ENGAGEMENT = "engagement"
    CONSISTENCY = "consistency"
    FORMALITY = "formality"


class Pitfall(BaseModel):
    """A habit worth watching, triggered by a fixed rule threshold."""

    id: str
    name: str
    description: str = ""
    severity: PitfallSeverity
    suggestion: str
    category: PitfallCategory


class DriftSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"


class DriftEvent(BaseModel):
    """Append-only log entry for one metric leaving its threshold band."""

    dimension: str  # lexical, syntactic, semantic, stylistic
    metric: str
    change_percent: float
    timestamp: datetime
    description: str
    severity: DriftSeverity

    model_config = {"frozen": True}


class EvolutionTrend(str, Enum):
    STABLE = "stable"
    EVOLVING = "evolving"
    SHIFTING = "shifting"


class VoiceEvolution(BaseModel):
    """How a voice changed between two profiles."""

    drift_score: int = Field(ge=0, le=100)
    changed_dimensions: list[str] = Field(default_factory=list)
    trend: EvolutionTrend
    recommendations: list[str] = Field(default_factory=list)
