"""
Signature Records

Typed per-sample metric bundles shared by the analyzers, the aggregator and
the drift detector. A VoicePrint carries the same four signature types, so
every metric in TRACKED_METRICS reads the same way from a sample or a profile.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Callable, Optional


class TonalProfile(str, Enum):
    """Tone labels, declared in tie-break priority order."""
    ANALYTICAL = "analytical"
    ASSERTIVE = "assertive"
    WARM = "warm"
    PLAYFUL = "playful"
    NEUTRAL = "neutral"


# Earlier entries win ties
TONE_PRIORITY: tuple[TonalProfile, ...] = tuple(TonalProfile)


class Dimension(str, Enum):
    LEXICAL = "lexical"
    SYNTACTIC = "syntactic"
    SEMANTIC = "semantic"
    STYLISTIC = "stylistic"


@dataclass(frozen=True)
class LexicalSignature:
    """Vocabulary-level signature."""
    vocabulary_richness: float  # type-token ratio, 0-1
    avg_word_length: float
    preferred_words: list[tuple[str, int]] = field(default_factory=list)  # top 10
    phrase_patterns: list[tuple[str, int]] = field(default_factory=list)  # top 5

    @classmethod
    def neutral(cls) -> "LexicalSignature":
        return cls(vocabulary_richness=0.5, avg_word_length=4.7)


@dataclass(frozen=True)
class PunctuationStyle:
    """Share of sentences using each mark, 0-1 per symbol."""
    periods: float = 0.0
    commas: float = 0.0
    semicolons: float = 0.0
    exclamations: float = 0.0


@dataclass(frozen=True)
class SyntacticSignature:
    """Sentence-structure signature."""
    sentence_complexity: float
    avg_sentence_length: float = 0.0
    clause_markers_per_sentence: float = 0.0
    punctuation_style: PunctuationStyle = field(default_factory=PunctuationStyle)

    @classmethod
    def neutral(cls) -> "SyntacticSignature":
        return cls(
            sentence_complexity=18.0,
            avg_sentence_length=15.0,
            clause_markers_per_sentence=1.5,
            punctuation_style=PunctuationStyle(periods=0.9, commas=0.5),
        )


@dataclass(frozen=True)
class SemanticSignature:
    """Register and tone signature."""
    formality_level: float  # 0 = casual, 1 = formal
    tonal_profile: TonalProfile = TonalProfile.NEUTRAL
    topical_interests: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def neutral(cls) -> "SemanticSignature":
        return cls(formality_level=0.5)


@dataclass(frozen=True)
class VoiceCharacteristics:
    """Secondary stylistic flags consumed by traits and drift."""
    contraction_usage: float = 0.0
    hedge_frequency: float = 0.0
    idiom_usage: float = 0.0
    uses_idioms: bool = False
    first_person_usage: float = 0.0
    question_ratio: float = 0.0
    exclamation_ratio: float = 0.0
    transition_usage: float = 0.0  # transition words per sentence
    active_voice_ratio: float = 1.0
    rhetorical_devices: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StylisticSignature:
    """Habitual-marker signature; all rates are per word, 0-1."""
    contraction_usage: float
    hedge_frequency: float
    idiom_usage: float
    voice_characteristics: VoiceCharacteristics = field(default_factory=VoiceCharacteristics)

    @classmethod
    def neutral(cls) -> "StylisticSignature":
        return cls(contraction_usage=0.01, hedge_frequency=0.005, idiom_usage=0.0)


@dataclass(frozen=True)
class SampleMetrics:
    """All four signatures for one writing sample. Computed once, never mutated."""
    lexical: LexicalSignature
    syntactic: SyntacticSignature
    semantic: SemanticSignature
    stylistic: StylisticSignature
    sample_id: str = ""
    word_count: int = 0
    degraded: tuple[str, ...] = ()  # dimensions replaced by neutral defaults

    def metric_values(self) -> dict[str, float]:
        return metric_values(self)

    def sort_key(self) -> tuple:
        """Canonical ordering so aggregation ignores input order."""
        return (self.sample_id, self.word_count, tuple(self.metric_values().values()))

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "SampleMetrics":
        return cls(
            lexical=lexical_from_dict(d["lexical"]),
            syntactic=syntactic_from_dict(d["syntactic"]),
            semantic=semantic_from_dict(d["semantic"]),
            stylistic=stylistic_from_dict(d["stylistic"]),
            sample_id=d.get("sample_id", ""),
            word_count=d.get("word_count", 0),
            degraded=tuple(d.get("degraded", ())),
        )


def lexical_from_dict(d: dict) -> LexicalSignature:
    return LexicalSignature(
        vocabulary_richness=d["vocabulary_richness"],
        avg_word_length=d["avg_word_length"],
        preferred_words=[tuple(x) for x in d.get("preferred_words", [])],
        phrase_patterns=[tuple(x) for x in d.get("phrase_patterns", [])],
    )


def syntactic_from_dict(d: dict) -> SyntacticSignature:
    return SyntacticSignature(
        sentence_complexity=d["sentence_complexity"],
        avg_sentence_length=d.get("avg_sentence_length", 0.0),
        clause_markers_per_sentence=d.get("clause_markers_per_sentence", 0.0),
        punctuation_style=PunctuationStyle(**d.get("punctuation_style", {})),
    )


def semantic_from_dict(d: dict) -> SemanticSignature:
    return SemanticSignature(
        formality_level=d["formality_level"],
        tonal_profile=TonalProfile(d.get("tonal_profile", "neutral")),
        topical_interests=[tuple(x) for x in d.get("topical_interests", [])],
    )


def stylistic_from_dict(d: dict) -> StylisticSignature:
    vc = dict(d.get("voice_characteristics", {}))
    vc["rhetorical_devices"] = list(vc.get("rhetorical_devices", []))
    return StylisticSignature(
        contraction_usage=d["contraction_usage"],
        hedge_frequency=d["hedge_frequency"],
        idiom_usage=d["idiom_usage"],
        voice_characteristics=VoiceCharacteristics(**vc),
    )


@dataclass(frozen=True)
class MetricSpec:
    """A numeric metric tracked across samples, thresholds and drift."""
    name: str
    dimension: Dimension
    label: str
    getter: Callable[[object], float]
    scale: float  # typical spread; normalizes std-dev and small denominators
    lower: float = 0.0
    upper: Optional[float] = None

    def clamp(self, value: float) -> float:
        value = max(self.lower, value)
        if self.upper is not None:
            value = min(self.upper, value)
        return value


TRACKED_METRICS: dict[str, MetricSpec] = {
    spec.name: spec
    for spec in [
        MetricSpec("vocabulary_richness", Dimension.LEXICAL, "Vocabulary richness",
                   lambda b: b.lexical.vocabulary_richness, scale=0.5, upper=1.0),
        MetricSpec("avg_word_length", Dimension.LEXICAL, "Average word length",
                   lambda b: b.lexical.avg_word_length, scale=5.0),
        MetricSpec("sentence_complexity", Dimension.SYNTACTIC, "Sentence complexity",
                   lambda b: b.syntactic.sentence_complexity, scale=20.0),
        MetricSpec("period_usage", Dimension.SYNTACTIC, "Period usage",
                   lambda b: b.syntactic.punctuation_style.periods, scale=1.0, upper=1.0),
        MetricSpec("comma_usage", Dimension.SYNTACTIC, "Comma usage",
                   lambda b: b.syntactic.punctuation_style.commas, scale=1.0, upper=1.0),
        MetricSpec("semicolon_usage", Dimension.SYNTACTIC, "Semicolon usage",
                   lambda b: b.syntactic.punctuation_style.semicolons, scale=1.0, upper=1.0),
        MetricSpec("exclamation_usage", Dimension.SYNTACTIC, "Exclamation usage",
                   lambda b: b.syntactic.punctuation_style.exclamations, scale=1.0, upper=1.0),
        MetricSpec("formality_level", Dimension.SEMANTIC, "Formality",
                   lambda b: b.semantic.formality_level, scale=1.0, upper=1.0),
        MetricSpec("contraction_usage", Dimension.STYLISTIC, "Contraction usage",
                   lambda b: b.stylistic.contraction_usage, scale=0.1, upper=1.0),
        MetricSpec("hedge_frequency", Dimension.STYLISTIC, "Hedging",
                   lambda b: b.stylistic.hedge_frequency, scale=0.05, upper=1.0),
        MetricSpec("idiom_usage", Dimension.STYLISTIC, "Idiom usage",
                   lambda b: b.stylistic.idiom_usage, scale=0.05, upper=1.0),
    ]
}


def metric_values(bundle: object) -> dict[str, float]:
    """Read every tracked metric from a SampleMetrics or VoicePrint."""
    return {name: spec.getter(bundle) for name, spec in TRACKED_METRICS.items()}
