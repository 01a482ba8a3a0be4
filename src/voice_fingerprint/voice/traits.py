"""
Trait Summarizer

Turns a VoicePrint's numbers into human-readable traits, pitfalls and a
templated narrative. Every rule is a named module-level object so it can be
tested on its own.
"""

from dataclasses import dataclass, field
from typing import Callable

from voice_fingerprint.models.records import (
    Pitfall,
    PitfallCategory,
    PitfallSeverity,
    Trait,
    TraitCategory,
)
from voice_fingerprint.style.signatures import TonalProfile

from .profile import VoicePrint
from .scoring import clamp01

# Bucket boundaries for the narrative: (low/medium, medium/high)
VOCABULARY_BUCKETS = (0.45, 0.65)
COMPLEXITY_BUCKETS = (12.0, 22.0)
FORMALITY_BUCKETS = (0.35, 0.65)
CONTRACTION_BUCKETS = (0.01, 0.04)

_SEVERITY_ORDER = {PitfallSeverity.HIGH: 0, PitfallSeverity.MEDIUM: 1, PitfallSeverity.LOW: 2}


def bucket(value: float, boundaries: tuple[float, float]) -> str:
    """'low' below the first boundary, 'high' at or above the second."""
    low, high = boundaries
    if value < low:
        return "low"
    if value >= high:
        return "high"
    return "medium"


@dataclass(frozen=True)
class TraitRule:
    """A positive trait, produced whenever ``applies`` holds."""
    id: str
    name: str
    category: TraitCategory
    describe: Callable[[VoicePrint], str]
    strength: Callable[[VoicePrint], float]
    applies: Callable[[VoicePrint], bool] = lambda vp: True

    def evaluate(self, vp: VoicePrint) -> Trait | None:
        if not self.applies(vp):
            return None
        return Trait(
            id=self.id,
            name=self.name,
            description=self.describe(vp),
            strength=clamp01(self.strength(vp)),
            category=self.category,
        )


@dataclass(frozen=True)
class PitfallRule:
    """A habit worth flagging once ``triggers`` holds."""
    id: str
    name: str
    description: str
    suggestion: str
    category: PitfallCategory
    triggers: Callable[[VoicePrint], bool]
    severity: Callable[[VoicePrint], PitfallSeverity]

    def evaluate(self, vp: VoicePrint) -> Pitfall | None:
        if not self.triggers(vp):
            return None
        return Pitfall(
            id=self.id,
            name=self.name,
            description=self.description,
            severity=self.severity(vp),
            suggestion=self.suggestion,
            category=self.category,
        )


def _richness(vp: VoicePrint) -> float:
    return vp.lexical.vocabulary_richness


def _complexity(vp: VoicePrint) -> float:
    return vp.syntactic.sentence_complexity


def _formality(vp: VoicePrint) -> float:
    return vp.semantic.formality_level


_VOCABULARY_WORDS = {"low": "focused", "medium": "varied", "high": "rich"}
_COMPLEXITY_WORDS = {"low": "short, direct", "medium": "balanced", "high": "long, layered"}
_FORMALITY_WORDS = {"low": "conversational", "medium": "balanced", "high": "formal"}

_TONE_DESCRIPTIONS = {
    TonalProfile.ANALYTICAL: "Reasons through evidence and explanation.",
    TonalProfile.ASSERTIVE: "States positions directly and with conviction.",
    TonalProfile.WARM: "Writes with friendliness and appreciation.",
    TonalProfile.PLAYFUL: "Brings humor and energy to the page.",
    TonalProfile.NEUTRAL: "Keeps an even, matter-of-fact tone.",
}


# === Trait rules ===

VOCABULARY_TRAIT = TraitRule(
    id="vocabulary",
    name="Vocabulary",
    category=TraitCategory.LEXICAL,
    describe=lambda vp: (
        f"Uses {_VOCABULARY_WORDS[bucket(_richness(vp), VOCABULARY_BUCKETS)]} vocabulary "
        f"(type-token ratio {_richness(vp):.2f})."
    ),
    strength=_richness,
)

SENTENCE_COMPLEXITY_TRAIT = TraitRule(
    id="sentence_complexity",
    name="Sentence Complexity",
    category=TraitCategory.STRUCTURAL,
    describe=lambda vp: (
        f"Favors {_COMPLEXITY_WORDS[bucket(_complexity(vp), COMPLEXITY_BUCKETS)]} sentences "
        f"averaging {vp.syntactic.avg_sentence_length:.0f} words."
    ),
    strength=lambda vp: _complexity(vp) / 30.0,
)

TONE_TRAIT = TraitRule(
    id="tone",
    name="Tone",
    category=TraitCategory.SEMANTIC,
    describe=lambda vp: _TONE_DESCRIPTIONS[vp.semantic.tonal_profile],
    strength=lambda vp: 0.5 if vp.semantic.tonal_profile == TonalProfile.NEUTRAL else vp.confidence_score,
)

FORMALITY_TRAIT = TraitRule(
    id="formality",
    name="Formality",
    category=TraitCategory.STYLISTIC,
    describe=lambda vp: (
        f"Writes in a {_FORMALITY_WORDS[bucket(_formality(vp), FORMALITY_BUCKETS)]} register."
    ),
    strength=_formality,
)

BALANCED_TONE_TRAIT = TraitRule(
    id="balanced_tone",
    name="Balanced Tone",
    category=TraitCategory.STYLISTIC,
    describe=lambda vp: "Strikes a balance between formal precision and accessible warmth.",
    strength=lambda vp: 1 - abs(0.5 - _formality(vp)) * 2,
    applies=lambda vp: 0.3 < _formality(vp) < 0.7,
)

IDIOMATIC_TRAIT = TraitRule(
    id="idiomatic_voice",
    name="Idiomatic Voice",
    category=TraitCategory.STYLISTIC,
    describe=lambda vp: "Reaches for familiar expressions that give the writing color.",
    strength=lambda vp: vp.stylistic.idiom_usage / 0.01,
    applies=lambda vp: vp.stylistic.voice_characteristics.uses_idioms,
)

PERSONAL_PERSPECTIVE_TRAIT = TraitRule(
    id="personal_perspective",
    name="Personal Perspective",
    category=TraitCategory.STYLISTIC,
    describe=lambda vp: "Writes from a first-person point of view.",
    strength=lambda vp: vp.stylistic.voice_characteristics.first_person_usage / 0.08,
    applies=lambda vp: vp.stylistic.voice_characteristics.first_person_usage > 0.03,
)

ACTIVE_VOICE_TRAIT = TraitRule(
    id="active_voice",
    name="Active Voice",
    category=TraitCategory.STRUCTURAL,
    describe=lambda vp: "Prefers active constructions that keep the subject up front.",
    strength=lambda vp: vp.stylistic.voice_characteristics.active_voice_ratio,
    applies=lambda vp: vp.stylistic.voice_characteristics.active_voice_ratio >= 0.85,
)

RHETORICAL_TRAIT = TraitRule(
    id="rhetorical_devices",
    name="Rhetorical Flair",
    category=TraitCategory.STRUCTURAL,
    describe=lambda vp: (
        "Uses " + ", ".join(d.replace("_", " ") for d in vp.stylistic.voice_characteristics.rhetorical_devices) + "."
    ),
    strength=lambda vp: len(vp.stylistic.voice_characteristics.rhetorical_devices) / 3,
    applies=lambda vp: bool(vp.stylistic.voice_characteristics.rhetorical_devices),
)

TRAIT_RULES: list[TraitRule] = [
    VOCABULARY_TRAIT,
    SENTENCE_COMPLEXITY_TRAIT,
    TONE_TRAIT,
    FORMALITY_TRAIT,
    BALANCED_TONE_TRAIT,
    IDIOMATIC_TRAIT,
    PERSONAL_PERSPECTIVE_TRAIT,
    ACTIVE_VOICE_TRAIT,
    RHETORICAL_TRAIT,
]


# === Pitfall rules ===

LIMITED_VOCABULARY = PitfallRule(
    id="limited_vocabulary",
    name="Limited Vocabulary",
    description="Reuses the same words often, which can flatten reader engagement.",
    suggestion="Expand word choice with synonyms and varied expressions.",
    category=PitfallCategory.ENGAGEMENT,
    triggers=lambda vp: _richness(vp) < 0.5,
    severity=lambda vp: PitfallSeverity.HIGH if _richness(vp) < 0.3 else PitfallSeverity.MEDIUM,
)

OVERLY_COMPLEX_SENTENCES = PitfallRule(
    id="overly_complex_sentences",
    name="Overly Complex Sentences",
    description="Long, clause-heavy sentences may challenge comprehension.",
    suggestion="Break longer sentences into shorter, more digestible ones.",
    category=PitfallCategory.CLARITY,
    triggers=lambda vp: _complexity(vp) > 25,
    severity=lambda vp: PitfallSeverity.HIGH if _complexity(vp) > 30 else PitfallSeverity.MEDIUM,
)

CHOPPY_RHYTHM = PitfallRule(
    id="choppy_rhythm",
    name="Choppy Rhythm",
    description="Very short sentences can make the reading feel abrupt.",
    suggestion="Combine related ideas into longer, flowing sentences.",
    category=PitfallCategory.ENGAGEMENT,
    triggers=lambda vp: _complexity(vp) < 8,
    severity=lambda vp: PitfallSeverity.MEDIUM,
)

OVERLY_FORMAL = PitfallRule(
    id="overly_formal",
    name="Overly Formal",
    description="Almost no contractions; the tone may feel distant.",
    suggestion="Let a few contractions and conversational turns into the text.",
    category=PitfallCategory.FORMALITY,
    triggers=lambda vp: vp.stylistic.contraction_usage < 0.01,
    severity=lambda vp: PitfallSeverity.LOW,
)

TOO_CASUAL = PitfallRule(
    id="too_casual",
    name="Too Casual",
    description="A very informal register may undermine credibility in professional contexts.",
    suggestion="Add more formal vocabulary and structured expressions.",
    category=PitfallCategory.FORMALITY,
    triggers=lambda vp: _formality(vp) < 0.2,
    severity=lambda vp: PitfallSeverity.MEDIUM,
)

EXCESSIVE_HEDGING = PitfallRule(
    id="excessive_hedging",
    name="Excessive Hedging",
    description="Frequent qualifiers can make claims sound uncertain.",
    suggestion="Commit to the claims you are confident about.",
    category=PitfallCategory.CLARITY,
    triggers=lambda vp: vp.stylistic.hedge_frequency > 0.03,
    severity=lambda vp: PitfallSeverity.HIGH if vp.stylistic.hedge_frequency > 0.05 else PitfallSeverity.MEDIUM,
)

EXCLAMATION_OVERUSE = PitfallRule(
    id="exclamation_overuse",
    name="Exclamation Overuse",
    description="Many sentences end in exclamation marks, diluting their emphasis.",
    suggestion="Save exclamation marks for the moments that need them.",
    category=PitfallCategory.ENGAGEMENT,
    triggers=lambda vp: vp.syntactic.punctuation_style.exclamations > 0.3,
    severity=lambda vp: PitfallSeverity.LOW,
)

PITFALL_RULES: list[PitfallRule] = [
    LIMITED_VOCABULARY,
    OVERLY_COMPLEX_SENTENCES,
    CHOPPY_RHYTHM,
    OVERLY_FORMAL,
    TOO_CASUAL,
    EXCESSIVE_HEDGING,
    EXCLAMATION_OVERUSE,
]


@dataclass
class VoiceSummary:
    """Traits, pitfalls and narrative for one VoicePrint."""
    traits: list[Trait] = field(default_factory=list)
    pitfalls: list[Pitfall] = field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "traits": [t.model_dump(mode="json") for t in self.traits],
            "pitfalls": [p.model_dump(mode="json") for p in self.pitfalls],
            "summary": self.summary,
        }


def identify_traits(vp: VoicePrint, rules: list[TraitRule] = TRAIT_RULES) -> list[Trait]:
    """Traits in rule order; the four headline traits always come first."""
    return [t for t in (rule.evaluate(vp) for rule in rules) if t is not None]


def identify_pitfalls(vp: VoicePrint, rules: list[PitfallRule] = PITFALL_RULES) -> list[Pitfall]:
    """Triggered pitfalls, most severe first (stable within a severity)."""
    pitfalls = [p for p in (rule.evaluate(vp) for rule in rules) if p is not None]
    return sorted(pitfalls, key=lambda p: _SEVERITY_ORDER[p.severity])


def narrative(vp: VoicePrint, traits: list[Trait], pitfalls: list[Pitfall]) -> str:
    """Templated summary built from the low/medium/high bucket of each headline metric."""
    vocabulary = _VOCABULARY_WORDS[bucket(_richness(vp), VOCABULARY_BUCKETS)]
    complexity = _COMPLEXITY_WORDS[bucket(_complexity(vp), COMPLEXITY_BUCKETS)]
    formality = _FORMALITY_WORDS[bucket(_formality(vp), FORMALITY_BUCKETS)]
    contractions = bucket(vp.stylistic.contraction_usage, CONTRACTION_BUCKETS)

    tone = vp.semantic.tonal_profile.value
    article = "An" if tone[0] in "aeiou" else "A"
    text = (
        f"{article} {tone} voice with {vocabulary} vocabulary, "
        f"{complexity} sentences and a {formality} register "
        f"({contractions} contraction use)."
    )
    extras = [t for t in traits if t.id not in {"vocabulary", "sentence_complexity", "tone", "formality"}]
    if extras:
        strongest = max(extras, key=lambda t: t.strength)
        text += f" Signature trait: {strongest.name.lower()}."
    if pitfalls:
        text += f" Watch for {pitfalls[0].name.lower()}."
    return text


def summarize(vp: VoicePrint) -> VoiceSummary:
    """Derive traits, pitfalls and narrative from a VoicePrint."""
    traits = identify_traits(vp)
    pitfalls = identify_pitfalls(vp)
    return VoiceSummary(traits=traits, pitfalls=pitfalls, summary=narrative(vp, traits, pitfalls))
