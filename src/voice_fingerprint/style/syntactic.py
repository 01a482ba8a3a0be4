"""
Syntactic Analyzer

Sentence length and complexity, and per-sentence punctuation habits.
"""

import re

from .lexicon import SUBORDINATORS
from .signatures import PunctuationStyle, SyntacticSignature

# Extra words of "length" credited per subordinate-clause marker
CLAUSE_MARKER_WEIGHT = 2.0

_CLAUSE_PUNCT_RE = re.compile(r"[,;:—]")


def clause_weighted_complexity(
    words_per_sentence: list[int],
    markers_per_sentence: list[int],
    marker_weight: float = CLAUSE_MARKER_WEIGHT,
) -> float:
    """
    Average words per sentence plus a bonus per clause marker.

    Each sentence scores ``words + marker_weight * markers``; the result is
    the mean over sentences.
    """
    if not words_per_sentence:
        return 0.0
    scores = [
        words + marker_weight * markers
        for words, markers in zip(words_per_sentence, markers_per_sentence)
    ]
    return sum(scores) / len(scores)


def count_clause_markers(sentence: str, sentence_words: list[str]) -> int:
    """Commas, semicolons, colons, dashes and subordinating words in one sentence."""
    punct = len(_CLAUSE_PUNCT_RE.findall(sentence))
    subordinators = sum(1 for w in sentence_words if w in SUBORDINATORS)
    return punct + subordinators


def punctuation_style(sentences: list[str]) -> PunctuationStyle:
    """Share of sentences that use each mark."""
    if not sentences:
        return PunctuationStyle()

    def share(marks: str) -> float:
        return sum(1 for s in sentences if any(m in s for m in marks)) / len(sentences)

    return PunctuationStyle(
        periods=share(".。"),
        commas=share(",、，"),
        semicolons=share(";；"),
        exclamations=share("!！"),
    )


def analyze_syntactic(sentences: list[str], sentence_words: list[list[str]]) -> SyntacticSignature:
    """
    Calculate the syntactic signature.

    Args:
        sentences: sentence strings in order
        sentence_words: lowercase words of each sentence

    Returns:
        SyntacticSignature
    """
    pairs = [(s, w) for s, w in zip(sentences, sentence_words) if w]
    if not pairs:
        raise ValueError("no sentences with words to analyze")

    word_counts = [len(w) for _, w in pairs]
    marker_counts = [count_clause_markers(s, w) for s, w in pairs]

    return SyntacticSignature(
        sentence_complexity=clause_weighted_complexity(word_counts, marker_counts),
        avg_sentence_length=sum(word_counts) / len(word_counts),
        clause_markers_per_sentence=sum(marker_counts) / len(marker_counts),
        punctuation_style=punctuation_style([s for s, _ in pairs]),
    )
