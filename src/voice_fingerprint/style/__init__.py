"""
Style Analysis Module

Per-sample signatures: lexical, syntactic, semantic/tone and stylistic.
"""

from .signatures import (
    TRACKED_METRICS,
    Dimension,
    LexicalSignature,
    MetricSpec,
    PunctuationStyle,
    SampleMetrics,
    SemanticSignature,
    StylisticSignature,
    SyntacticSignature,
    TonalProfile,
    VoiceCharacteristics,
)
from .lexical import analyze_lexical
from .syntactic import analyze_syntactic
from .semantic import analyze_semantic
from .stylistic import analyze_stylistic
from .analyzer import SampleAnalyzer

__all__ = [
    # Signatures
    "TRACKED_METRICS",
    "Dimension",
    "LexicalSignature",
    "MetricSpec",
    "PunctuationStyle",
    "SampleMetrics",
    "SemanticSignature",
    "StylisticSignature",
    "SyntacticSignature",
    "TonalProfile",
    "VoiceCharacteristics",
    # Analyzers
    "analyze_lexical",
    "analyze_syntactic",
    "analyze_semantic",
    "analyze_stylistic",
    "SampleAnalyzer",
]
