"""Shared fixtures: realistic writing samples and synthetic metric bundles."""

from datetime import datetime, timezone

import pytest

from voice_fingerprint.config import Settings
from voice_fingerprint.models import WritingSample
from voice_fingerprint.style.signatures import (
    LexicalSignature,
    PunctuationStyle,
    SampleMetrics,
    SemanticSignature,
    StylisticSignature,
    SyntacticSignature,
    TonalProfile,
    VoiceCharacteristics,
)

FORMAL_EMAIL = """Dear Ms. Carter,

Following last week's meeting, the revised budget proposal has been reviewed by our finance committee. Several adjustments were requested regarding travel expenses and equipment purchases. Furthermore, the quarterly forecast was updated to reflect current supplier pricing. The committee therefore recommends postponing the hardware upgrade until the second quarter. Consequently, project timelines will be adjusted accordingly, and affected departments have been notified. Attached documents include detailed figures, supporting invoices, and a summary of outstanding questions. Moreover, a brief call has been scheduled for Thursday morning to resolve any remaining concerns. Kindly confirm attendance at the earliest convenience. With sincere appreciation for continued cooperation.

Sincerely,
Daniel Reeves
Operations Manager
"""

CASUAL_ANECDOTE = """So this weekend was totally wild. My buddy Jake and I drove up to the lake because we'd heard the fishing was awesome. Honestly, we didn't catch a single thing! It's kinda funny, actually. You'd think two grown guys could outsmart a fish, right? Nope. We spent hours casting, swapping snacks, and arguing about which lure worked best. Then it started pouring, so we ran back to the truck soaked and laughing. I'm pretty sure Jake's phone is ruined, and he's still mad about it. Anyway, we grabbed burgers at this tiny diner near the highway. The waitress told us stuff about the town that you wouldn't believe. Next time I'm bringing a better rain jacket, more coffee, and maybe a real fisherman. Yeah, it wasn't exactly a success, but I'd totally do it again.
"""

ACADEMIC_EXPLANATION = """Photosynthesis is the process by which green plants convert light energy into chemical energy. During the light-dependent reactions, photons are absorbed by chlorophyll molecules embedded within thylakoid membranes. This absorbed energy drives the splitting of water, which releases oxygen as a byproduct. Furthermore, an electron transport chain generates a proton gradient that powers the synthesis of adenosine triphosphate. The resulting energy carriers are subsequently consumed in the Calvin cycle, where carbon dioxide is fixed into three-carbon sugars. Numerous studies have demonstrated that the efficiency of this pathway depends on temperature, light intensity, and carbon dioxide concentration. Moreover, certain species have evolved specialized mechanisms to minimize photorespiration under hot, arid conditions. C4 plants, for instance, spatially separate initial carbon fixation from the Calvin cycle, whereas CAM plants separate these steps temporally by opening their stomata at night. Consequently, such adaptations allow desert vegetation to conserve water while maintaining productive growth. Researchers continue to examine these variations because improving photosynthetic performance could substantially increase agricultural yields. Therefore, a deeper understanding of leaf biochemistry remains essential for addressing global food security, particularly as climate patterns become increasingly unpredictable.
"""

# 40 words, below the minimum
SHORT_NOTE = (
    "Quick update on the garden: the tomatoes finally ripened and the basil is thriving. "
    "Peppers are still green, though the neighbor swears they will turn red soon. "
    "Next weekend we plan to build a small trellis for beans and peas."
)

FIXED_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def scenario_samples() -> list[WritingSample]:
    return [
        WritingSample(id="email", title="Budget follow-up", content=FORMAL_EMAIL),
        WritingSample(id="anecdote", title="Fishing trip", content=CASUAL_ANECDOTE),
        WritingSample(id="academic", title="Photosynthesis", content=ACADEMIC_EXPLANATION),
    ]


@pytest.fixture
def make_metrics():
    """Factory for synthetic SampleMetrics with the tracked values set directly."""

    def _make(
        sample_id: str = "s1",
        word_count: int = 200,
        richness: float = 0.6,
        word_length: float = 4.8,
        complexity: float = 18.0,
        periods: float = 0.9,
        commas: float = 0.5,
        semicolons: float = 0.05,
        exclamations: float = 0.0,
        formality: float = 0.5,
        tone: TonalProfile = TonalProfile.NEUTRAL,
        contractions: float = 0.02,
        hedges: float = 0.01,
        idioms: float = 0.0,
        preferred: list[tuple[str, int]] | None = None,
        degraded: tuple[str, ...] = (),
    ) -> SampleMetrics:
        return SampleMetrics(
            lexical=LexicalSignature(
                vocabulary_richness=richness,
                avg_word_length=word_length,
                preferred_words=preferred if preferred is not None else [("garden", 3), ("river", 2)],
                phrase_patterns=[("river bank", 2)],
            ),
            syntactic=SyntacticSignature(
                sentence_complexity=complexity,
                avg_sentence_length=complexity * 0.8,
                clause_markers_per_sentence=1.2,
                punctuation_style=PunctuationStyle(
                    periods=periods, commas=commas, semicolons=semicolons, exclamations=exclamations
                ),
            ),
            semantic=SemanticSignature(
                formality_level=formality,
                tonal_profile=tone,
                topical_interests=[("garden", 3)],
            ),
            stylistic=StylisticSignature(
                contraction_usage=contractions,
                hedge_frequency=hedges,
                idiom_usage=idioms,
                voice_characteristics=VoiceCharacteristics(
                    contraction_usage=contractions,
                    hedge_frequency=hedges,
                    idiom_usage=idioms,
                    uses_idioms=idioms > 0,
                    first_person_usage=0.02,
                    active_voice_ratio=0.9,
                    rhetorical_devices=["parallelism"],
                ),
            ),
            sample_id=sample_id,
            word_count=word_count,
            degraded=degraded,
        )

    return _make


@pytest.fixture
def active_voiceprint(make_metrics):
    """An active profile built from three identical synthetic samples."""
    from voice_fingerprint.voice import FingerprintAggregator

    metrics = [make_metrics(sample_id=f"s{i}") for i in range(3)]
    return FingerprintAggregator().aggregate(metrics, user_id="user-1", analyzed_at=FIXED_TIME)


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def formal_email() -> str:
    return FORMAL_EMAIL


@pytest.fixture
def casual_anecdote() -> str:
    return CASUAL_ANECDOTE


@pytest.fixture
def academic_text() -> str:
    return ACADEMIC_EXPLANATION


@pytest.fixture
def short_note() -> str:
    return SHORT_NOTE
