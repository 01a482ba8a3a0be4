"""Writing sample model supplied by collaborators."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator


class WritingSample(BaseModel):
    """A piece of the user's own writing, immutable once stored."""

    id: str
    title: str = ""
    content: str
    word_count: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _derive_word_count(cls, data):
        if isinstance(data, dict) and not data.get("word_count") and isinstance(data.get("content"), str):
            # deferred: ingest.loader imports this module
            from voice_fingerprint.ingest.tokenizer import split_into_words

            data = {**data, "word_count": len(split_into_words(data["content"]))}
        return data
