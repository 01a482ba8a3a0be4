"""
Lexical Analyzer

Vocabulary richness, word length, preferred words and recurring phrases.
All values are pure functions of the word list.
"""

from collections import Counter

from .lexicon import STOPWORDS
from .signatures import LexicalSignature

PREFERRED_WORDS_LIMIT = 10
PHRASE_PATTERNS_LIMIT = 5
MIN_PHRASE_FREQUENCY = 2
MIN_PREFERRED_WORD_LENGTH = 3


def analyze_lexical(words: list[str]) -> LexicalSignature:
    """
    Calculate the lexical signature for a tokenized sample.

    Args:
        words: words in order, case preserved or lowercase

    Returns:
        LexicalSignature
    """
    lower = [w.lower() for w in words]

    return LexicalSignature(
        vocabulary_richness=type_token_ratio(lower),
        avg_word_length=average_word_length(words),
        preferred_words=preferred_words(lower),
        phrase_patterns=phrase_patterns(lower),
    )


def type_token_ratio(words: list[str]) -> float:
    """Unique lowercase words / total words."""
    if not words:
        return 0.0
    return len(set(words)) / len(words)


def average_word_length(words: list[str]) -> float:
    """Mean character length with punctuation stripped."""
    lengths = [sum(1 for ch in w if ch.isalnum()) for w in words]
    lengths = [n for n in lengths if n > 0]
    return sum(lengths) / len(lengths) if lengths else 0.0


def rank_terms(counts: Counter, limit: int, min_count: int = 1) -> list[tuple[str, int]]:
    """Top terms by frequency, ties broken alphabetically."""
    ranked = sorted(
        ((term, count) for term, count in counts.items() if count >= min_count),
        key=lambda x: (-x[1], x[0]),
    )
    return ranked[:limit]


def preferred_words(words: list[str], limit: int = PREFERRED_WORDS_LIMIT) -> list[tuple[str, int]]:
    """Most frequent non-stopword words."""
    counts = Counter(
        w for w in words
        if w not in STOPWORDS and len(w) >= MIN_PREFERRED_WORD_LENGTH and not w.isdigit()
    )
    return rank_terms(counts, limit)


def phrase_patterns(
    words: list[str],
    limit: int = PHRASE_PATTERNS_LIMIT,
    min_occurrences: int = MIN_PHRASE_FREQUENCY,
) -> list[tuple[str, int]]:
    """Recurring bigrams and trigrams that appear at least ``min_occurrences`` times."""
    ngram_counts: Counter = Counter()

    for n in (2, 3):
        for i in range(len(words) - n + 1):
            gram = words[i:i + n]
            # Skip phrases made only of function words ("of the", "it is")
            if all(w in STOPWORDS for w in gram):
                continue
            ngram_counts[" ".join(gram)] += 1

    return rank_terms(ngram_counts, limit, min_count=min_occurrences)
