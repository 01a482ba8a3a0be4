"""Text ingestion and tokenization."""

from voice_fingerprint.ingest.loader import load_sample
from voice_fingerprint.ingest.tokenizer import TokenizedText, tokenize

__all__ = ["TokenizedText", "load_sample", "tokenize"]
