"""
Sample Analyzer

Main entry point for per-sample analysis. Tokenizes a writing sample and runs
the four signature analyzers over it, producing one SampleMetrics.
"""

import logging
import math
from dataclasses import fields, is_dataclass
from typing import Callable, Optional, TypeVar

from voice_fingerprint.errors import DegenerateText
from voice_fingerprint.ingest.tokenizer import MIN_WORDS, TokenizedText, tokenize
from voice_fingerprint.models.sample import WritingSample

from .lexical import analyze_lexical
from .semantic import analyze_semantic
from .signatures import (
    Dimension,
    LexicalSignature,
    SampleMetrics,
    SemanticSignature,
    StylisticSignature,
    SyntacticSignature,
)
from .stylistic import analyze_stylistic
from .syntactic import analyze_syntactic

logger = logging.getLogger(__name__)

# Below either limit the text is treated as degenerate (e.g. one word repeated)
MIN_DISTINCT_WORDS = 5
DEGENERATE_RICHNESS = 0.05

T = TypeVar("T")


class SampleAnalyzer:
    """
    Analyzes one writing sample into a SampleMetrics bundle.

    Stateless apart from its limits, so one instance can be shared across
    worker threads.

    Usage:
        analyzer = SampleAnalyzer()
        metrics = analyzer.analyze_text(text, sample_id="email-1")
    """

    def __init__(self, min_words: int = MIN_WORDS, max_words: Optional[int] = None):
        """
        Initialize the analyzer.

        Args:
            min_words: reject samples with fewer words
            max_words: reject samples with more words (None for no limit)
        """
        self.min_words = min_words
        self.max_words = max_words

    def tokenize(self, text: str, sample_id: Optional[str] = None) -> TokenizedText:
        """Tokenize and run every structural check, raising on the first failure."""
        tokens = tokenize(text, min_words=self.min_words, max_words=self.max_words, sample_id=sample_id)
        check_degenerate(tokens, sample_id=sample_id)
        return tokens

    def analyze_sample(self, sample: WritingSample) -> SampleMetrics:
        """Analyze a stored writing sample."""
        return self.analyze_text(sample.content, sample_id=sample.id)

    def analyze_text(self, text: str, sample_id: str = "") -> SampleMetrics:
        """Validate and analyze raw text."""
        tokens = self.tokenize(text, sample_id=sample_id or None)
        return self.analyze_tokens(tokens, sample_id=sample_id)

    def analyze_tokens(self, tokens: TokenizedText, sample_id: str = "") -> SampleMetrics:
        """
        Run the four analyzers over already-validated tokens.

        A fault inside one analyzer does not abort the sample: that dimension
        falls back to its neutral default and is listed in ``degraded``.
        """
        words = tokens.lower_words
        sentence_words = tokens.sentence_words
        degraded: list[str] = []

        def run(dimension: Dimension, analyze: Callable[[], T], neutral: Callable[[], T]) -> T:
            try:
                result = analyze()
                if not _all_finite(result):
                    raise ValueError("non-finite metric value")
                return result
            except (ArithmeticError, ValueError) as e:
                logger.warning(
                    "Sample %s: %s analysis failed (%s); using neutral defaults",
                    sample_id or "<text>", dimension.value, e,
                )
                degraded.append(dimension.value)
                return neutral()

        lexical = run(Dimension.LEXICAL, lambda: analyze_lexical(words), LexicalSignature.neutral)
        syntactic = run(
            Dimension.SYNTACTIC,
            lambda: analyze_syntactic(tokens.sentences, sentence_words),
            SyntacticSignature.neutral,
        )
        semantic = run(
            Dimension.SEMANTIC,
            lambda: analyze_semantic(words, sentence_words, exclamation_count=tokens.punctuation.count("!")),
            SemanticSignature.neutral,
        )
        stylistic = run(
            Dimension.STYLISTIC,
            lambda: analyze_stylistic(tokens.text, words, tokens.sentences, sentence_words),
            StylisticSignature.neutral,
        )

        metrics = SampleMetrics(
            lexical=lexical,
            syntactic=syntactic,
            semantic=semantic,
            stylistic=stylistic,
            sample_id=sample_id,
            word_count=tokens.word_count,
            degraded=tuple(degraded),
        )
        logger.debug("Sample %s: %s", sample_id or "<text>", metrics.metric_values())
        return metrics


def check_degenerate(tokens: TokenizedText, sample_id: Optional[str] = None) -> None:
    """Reject text with near-zero lexical variety."""
    distinct = len(set(tokens.lower_words))
    richness = distinct / tokens.word_count if tokens.word_count else 0.0
    if distinct < MIN_DISTINCT_WORDS or richness < DEGENERATE_RICHNESS:
        raise DegenerateText(
            f"Only {distinct} distinct words in {tokens.word_count} (richness {richness:.3f})",
            sample_id=sample_id,
        )


def _all_finite(obj: object) -> bool:
    """True when every float inside a (nested) signature dataclass is finite."""
    for f in fields(obj):
        value = getattr(obj, f.name)
        if isinstance(value, float) and not math.isfinite(value):
            return False
        if is_dataclass(value) and not _all_finite(value):
            return False
    return True
