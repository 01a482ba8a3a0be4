"""Errors raised by the voice fingerprint engine."""

from typing import Optional


class VoicePrintError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, sample_id: Optional[str] = None):
        super().__init__(message)
        self.sample_id = sample_id

    def __str__(self) -> str:
        message = super().__str__()
        if self.sample_id:
            return f"[{self.sample_id}] {message}"
        return message


class InsufficientContent(VoicePrintError):
    """Text does not contain enough words to analyze."""


class SampleTooShort(InsufficientContent):
    """A sample is below the minimum word count."""


class SampleTooLong(VoicePrintError):
    """A sample (or the whole submission) exceeds the accepted length."""


class InsufficientSamples(VoicePrintError):
    """Too few valid samples to build a VoicePrint."""


class DegenerateText(VoicePrintError):
    """Text has near-zero lexical variety (e.g. one word repeated)."""


class EncodingError(VoicePrintError):
    """Non-text content reached the analyzer."""


class ProfileNotActive(VoicePrintError):
    """Drift was requested against a VoicePrint that is not active."""


class AnalysisCancelled(VoicePrintError):
    """Profile creation was abandoned before the aggregation join."""
