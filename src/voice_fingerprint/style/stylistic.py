"""
Stylistic Analyzer

Contraction, hedge and idiom rates plus secondary voice flags.
"""

import re

from .lexicon import (
    CONTRACTIONS,
    FIRST_PERSON,
    HEDGE_PHRASES,
    HEDGE_WORDS,
    IDIOMS,
    TRANSITION_WORDS,
)
from .semantic import is_passive
from .signatures import StylisticSignature, VoiceCharacteristics

# Sentence pairs within this many words of each other count as parallel
PARALLELISM_TOLERANCE = 1


def count_phrases(text: str, phrases: tuple[str, ...]) -> int:
    """Count non-overlapping whole-word occurrences of each phrase; longer phrases win."""
    normalized = " ".join(re.findall(r"[^\W_]+(?:'[^\W_]+)*", text.replace("’", "'").lower()))
    padded = f" {normalized} "
    total = 0
    for phrase in sorted(phrases, key=len, reverse=True):
        needle = f" {phrase} "
        hits = padded.count(needle)
        if hits:
            total += hits
            padded = padded.replace(needle, " | ")
    return total


def rate(count: int, total: int) -> float:
    return min(1.0, count / total) if total > 0 else 0.0


def detect_rhetorical_devices(sentences: list[str], sentence_words: list[list[str]]) -> list[str]:
    """Rhetorical questions, anaphora (repeated openers) and parallel sentence lengths."""
    devices = []

    if any(s.rstrip("\"')”’").endswith("?") for s in sentences):
        devices.append("rhetorical_questions")

    openers = [words[0] for words in sentence_words if words]
    if len(openers) != len(set(openers)):
        devices.append("anaphora")

    lengths = [len(words) for words in sentence_words if words]
    if any(abs(a - b) <= PARALLELISM_TOLERANCE for a, b in zip(lengths, lengths[1:])):
        devices.append("parallelism")

    return devices


def analyze_stylistic(
    text: str,
    words: list[str],
    sentences: list[str],
    sentence_words: list[list[str]],
) -> StylisticSignature:
    """
    Calculate the stylistic signature.

    Args:
        text: the raw sample text (for phrase lookups)
        words: lowercase words in order
        sentences: sentence strings
        sentence_words: lowercase words of each sentence

    Returns:
        StylisticSignature
    """
    total = len(words)

    contractions = sum(1 for w in words if w in CONTRACTIONS)
    hedges = sum(1 for w in words if w in HEDGE_WORDS) + count_phrases(text, HEDGE_PHRASES)
    idioms = count_phrases(text, IDIOMS)

    contraction_usage = rate(contractions, total)
    hedge_frequency = rate(hedges, total)
    idiom_usage = rate(idioms, total)

    n_sentences = len(sentences)
    questions = sum(1 for s in sentences if s.rstrip("\"')”’").endswith("?"))
    exclamations = sum(1 for s in sentences if s.rstrip("\"')”’").endswith("!"))
    passive = sum(1 for s in sentence_words if s and is_passive(s))

    characteristics = VoiceCharacteristics(
        contraction_usage=contraction_usage,
        hedge_frequency=hedge_frequency,
        idiom_usage=idiom_usage,
        uses_idioms=idioms > 0,
        first_person_usage=rate(sum(1 for w in words if w in FIRST_PERSON), total),
        question_ratio=rate(questions, n_sentences),
        exclamation_ratio=rate(exclamations, n_sentences),
        transition_usage=sum(1 for w in words if w in TRANSITION_WORDS) / n_sentences if n_sentences else 0.0,
        active_voice_ratio=1.0 - rate(passive, n_sentences),
        rhetorical_devices=detect_rhetorical_devices(sentences, sentence_words),
    )

    return StylisticSignature(
        contraction_usage=contraction_usage,
        hedge_frequency=hedge_frequency,
        idiom_usage=idiom_usage,
        voice_characteristics=characteristics,
    )
