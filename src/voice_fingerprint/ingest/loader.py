"""Load writing samples from plain-text files."""

from datetime import datetime, timezone
from pathlib import Path

from voice_fingerprint.errors import EncodingError
from voice_fingerprint.models.sample import WritingSample

SUPPORTED_SUFFIXES = {".txt", ".md", ".text"}


def load_sample(path: Path, sample_id: str | None = None) -> WritingSample:
    """
    Load a writing sample from file.

    Supports plain text and Markdown. Richer formats (PDF, DOCX) are
    extracted upstream before they reach the engine.
    """
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise EncodingError(f"Unsupported file format: {suffix}", sample_id=sample_id or path.stem)

    content = load_txt(path)
    modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)

    return WritingSample(
        id=sample_id or path.stem,
        title=path.stem.replace("_", " ").replace("-", " ").title(),
        content=content,
        created_at=modified,
    )


def load_txt(path: Path) -> str:
    """Load a plain text file."""
    raw = path.read_bytes()
    if b"\x00" in raw:
        raise EncodingError(f"{path.name} looks like binary content", sample_id=path.stem)

    # Try common encodings
    for encoding in ["utf-8-sig", "cp1252"]:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue

    raise EncodingError(f"Could not decode {path} with any common encoding", sample_id=path.stem)
