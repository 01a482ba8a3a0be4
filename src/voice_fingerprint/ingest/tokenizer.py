"""Split raw text into words, sentences and punctuation tokens."""

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

from voice_fingerprint.errors import EncodingError, SampleTooLong, SampleTooShort

MIN_WORDS = 50

# Upper bound on characters per word used for the pre-tokenization length guard
MAX_CHARS_PER_WORD = 40

# Letter/digit runs, joined by internal apostrophes or hyphens
WORD_RE = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")

TERMINATORS = ".!?…。！？"
CLOSERS = "\"')]”’»"
OPENERS = "\"'(“‘«"

# Candidate boundary: terminal punctuation, optional closing quotes, then whitespace
_BOUNDARY_RE = re.compile(rf"[{re.escape(TERMINATORS)}]+[{re.escape(CLOSERS)}]*\s+")

# Abbreviations that don't end sentences
ABBREVIATIONS = {
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "vs", "etc",
    "i.e", "e.g", "cf", "al", "st", "mt", "ft", "inc", "ltd",
}

_ABBREV_RE = re.compile(r"([^\W\d_]+(?:\.[^\W\d_]+)*)\.$")


@dataclass
class TokenizedText:
    """Ordered tokens for one piece of text."""

    text: str
    words: list[str] = field(default_factory=list)
    sentences: list[str] = field(default_factory=list)
    paragraphs: list[str] = field(default_factory=list)
    punctuation: list[str] = field(default_factory=list)

    @property
    def lower_words(self) -> list[str]:
        """Normalized lowercase view of the word list."""
        return [normalize_word(w) for w in self.words]

    @property
    def sentence_words(self) -> list[list[str]]:
        """Lowercase words of each sentence, in order."""
        return [[normalize_word(w) for w in WORD_RE.findall(s)] for s in self.sentences]

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)


def normalize_word(word: str) -> str:
    """Lowercase a word and fold curly apostrophes to straight ones."""
    return word.replace("’", "'").lower()


def tokenize(
    text: str,
    min_words: int = MIN_WORDS,
    max_words: Optional[int] = None,
    sample_id: Optional[str] = None,
) -> TokenizedText:
    """
    Tokenize raw text and enforce word-count limits.

    Raises:
        EncodingError: if the input is not clean text
        SampleTooShort: if there are fewer than ``min_words`` words
        SampleTooLong: if there are more than ``max_words`` words
    """
    check_text(text, sample_id=sample_id)

    if max_words is not None and len(text) > max_words * MAX_CHARS_PER_WORD:
        raise SampleTooLong(
            f"Text is {len(text):,} characters, too long for {max_words:,} words",
            sample_id=sample_id,
        )

    words = split_into_words(text)

    if len(words) < min_words:
        raise SampleTooShort(
            f"Sample has {len(words)} words; at least {min_words} are required",
            sample_id=sample_id,
        )
    if max_words is not None and len(words) > max_words:
        raise SampleTooLong(
            f"Sample has {len(words)} words; at most {max_words} are accepted",
            sample_id=sample_id,
        )

    return TokenizedText(
        text=text,
        words=words,
        sentences=split_into_sentences(text),
        paragraphs=split_into_paragraphs(text),
        punctuation=extract_punctuation(text),
    )


def check_text(text: object, sample_id: Optional[str] = None) -> None:
    """Reject content that is not analyzable text."""
    if not isinstance(text, str):
        raise EncodingError(
            f"Expected text, got {type(text).__name__}", sample_id=sample_id
        )
    if "\x00" in text:
        raise EncodingError("Text contains NUL bytes (binary content?)", sample_id=sample_id)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Text is not valid Unicode: {e.reason}", sample_id=sample_id) from e


def split_into_words(text: str) -> list[str]:
    """Split text into case-preserved words."""
    return WORD_RE.findall(text)


def split_into_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs."""
    paragraphs = re.split(r"\n\s*\n+", text)
    paragraphs = [p.strip() for p in paragraphs]
    return [p for p in paragraphs if p]


def split_into_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    A sentence ends at terminal punctuation followed by whitespace and an
    uppercase letter, or at the end of the text. Handles common abbreviations.
    """
    # Normalize whitespace (str.split covers Unicode spaces too)
    text = " ".join(text.split())

    sentences: list[str] = []
    start = 0

    for match in _BOUNDARY_RE.finditer(text):
        if not _starts_sentence(text, match.end()):
            continue
        candidate = text[start:match.end()].strip()
        if _ends_with_abbreviation(candidate):
            continue
        sentences.append(candidate)
        start = match.end()

    tail = text[start:].strip()
    if tail:
        sentences.append(tail)

    return sentences


def _starts_sentence(text: str, pos: int) -> bool:
    """Check whether the text at ``pos`` opens a sentence (uppercase, maybe quoted)."""
    while pos < len(text) and text[pos] in OPENERS:
        pos += 1
    return pos < len(text) and text[pos].isupper()


def _ends_with_abbreviation(candidate: str) -> bool:
    last = candidate.rsplit(" ", 1)[-1]
    match = _ABBREV_RE.search(last.lstrip(OPENERS))
    return bool(match) and match.group(1).lower() in ABBREVIATIONS


def extract_punctuation(text: str) -> list[str]:
    """Every punctuation character in order (any Unicode P* category)."""
    return [ch for ch in text if unicodedata.category(ch).startswith("P")]
