"""
Semantic/Tone Analyzer

Formality level, a tonal label and topical interests, from fixed word lists.
"""

from collections import Counter

from .lexical import rank_terms
from .lexicon import (
    ANALYTICAL_WORDS,
    ASSERTIVE_WORDS,
    CONTRACTIONS,
    DETERMINERS,
    FORMAL_CONNECTIVES,
    INFORMAL_WORDS,
    IRREGULAR_PARTICIPLES,
    NON_NOUN_SUFFIXES,
    NOUN_SUFFIXES,
    PASSIVE_AUXILIARIES,
    PLAYFUL_WORDS,
    SECOND_PERSON,
    STOPWORDS,
    WARM_WORDS,
)
from .signatures import TONE_PRIORITY, SemanticSignature, TonalProfile

FORMALITY_BASE = 0.5
FORMAL_CONNECTIVE_WEIGHT = 6.0  # per connective-per-word
PASSIVE_WEIGHT = 0.2            # per passive-sentence share
INFORMAL_WEIGHT = 5.0           # per informal-marker-per-word

_PARTICIPLE_LOOKALIKES = frozenset(["often", "even", "open", "seven", "eleven", "need", "feed", "speed", "seed"])

TOPIC_LIMIT = 5
MIN_TOPIC_LENGTH = 4

TONE_LEXICONS: dict[TonalProfile, frozenset] = {
    TonalProfile.ANALYTICAL: ANALYTICAL_WORDS,
    TonalProfile.ASSERTIVE: ASSERTIVE_WORDS,
    TonalProfile.WARM: WARM_WORDS,
    TonalProfile.PLAYFUL: PLAYFUL_WORDS,
}


def is_informal_marker(word: str) -> bool:
    """Contractions, casual words and second-person address."""
    return word in CONTRACTIONS or word in INFORMAL_WORDS or word in SECOND_PERSON


def is_passive(sentence_words: list[str]) -> bool:
    """
    Detect a "to be" + past participle construction.

    Allows one intervening -ly adverb ("was quickly approved").
    """
    for i, word in enumerate(sentence_words[:-1]):
        if word not in PASSIVE_AUXILIARIES:
            continue
        nxt = sentence_words[i + 1]
        if nxt.endswith("ly") and i + 2 < len(sentence_words):
            nxt = sentence_words[i + 2]
        if nxt in IRREGULAR_PARTICIPLES:
            return True
        if len(nxt) > 3 and nxt.endswith(("ed", "en")) and nxt not in _PARTICIPLE_LOOKALIKES:
            return True
    return False


def formality_score(
    word_count: int,
    formal_count: int,
    informal_count: int,
    passive_ratio: float,
) -> float:
    """
    Bounded formality score in [0, 1].

    Starts neutral, rises with formal connectives and passive sentences,
    falls with informal markers. Adding informal markers to fixed text can
    only lower the score.
    """
    if word_count <= 0:
        return FORMALITY_BASE
    score = (
        FORMALITY_BASE
        + FORMAL_CONNECTIVE_WEIGHT * formal_count / word_count
        + PASSIVE_WEIGHT * passive_ratio
        - INFORMAL_WEIGHT * informal_count / word_count
    )
    return min(1.0, max(0.0, score))


def tone_scores(words: list[str], exclamation_count: int = 0) -> dict[TonalProfile, int]:
    """Hits per tone bucket; exclamation marks count toward playful."""
    scores = {tone: sum(1 for w in words if w in lexicon) for tone, lexicon in TONE_LEXICONS.items()}
    scores[TonalProfile.PLAYFUL] += exclamation_count
    return scores


def pick_tone(scores: dict[TonalProfile, float]) -> TonalProfile:
    """Highest-scoring tone; ties go to the earlier label in TONE_PRIORITY."""
    best = TonalProfile.NEUTRAL
    best_score = 0.0
    for tone in TONE_PRIORITY:
        score = scores.get(tone, 0)
        if score > best_score:
            best, best_score = tone, score
    return best


def looks_like_noun(previous: str | None, word: str) -> bool:
    """Heuristic content-noun test: follows a determiner or carries a noun suffix."""
    if word in STOPWORDS or len(word) < MIN_TOPIC_LENGTH or not word.isalpha():
        return False
    if word.endswith(NOUN_SUFFIXES):
        return True
    if previous in DETERMINERS and not word.endswith(NON_NOUN_SUFFIXES):
        return True
    return False


def topical_interests(words: list[str], limit: int = TOPIC_LIMIT) -> list[tuple[str, int]]:
    """Most frequent content nouns, ties broken alphabetically."""
    counts: Counter = Counter()
    previous = None
    for word in words:
        if looks_like_noun(previous, word):
            counts[word] += 1
        previous = word
    return rank_terms(counts, limit)


def analyze_semantic(
    words: list[str],
    sentence_words: list[list[str]],
    exclamation_count: int = 0,
) -> SemanticSignature:
    """
    Calculate the semantic signature.

    Args:
        words: lowercase words in order
        sentence_words: lowercase words of each sentence
        exclamation_count: number of exclamation marks in the text

    Returns:
        SemanticSignature
    """
    formal = sum(1 for w in words if w in FORMAL_CONNECTIVES)
    informal = sum(1 for w in words if is_informal_marker(w))

    sentences = [s for s in sentence_words if s]
    passive_ratio = sum(1 for s in sentences if is_passive(s)) / len(sentences) if sentences else 0.0

    return SemanticSignature(
        formality_level=formality_score(len(words), formal, informal, passive_ratio),
        tonal_profile=pick_tone(tone_scores(words, exclamation_count)),
        topical_interests=topical_interests(words),
    )
