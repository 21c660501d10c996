from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class TextCounts:
    """Raw counts every formula is built from."""

    lexicon_count: int
    sentence_count: int
    syllable_count: int
    char_count: int
    letter_count: int
    poly_syllable_count: int
    difficult_words: int


@dataclass(slots=True)
class ReadabilityReport:
    """Every formula score and the fused grades for a single document."""

    doc_id: str
    counts: TextCounts
    flesch_reading_ease: float
    flesch_reading_ease_grade: float
    flesch_kincaid_grade: float
    smog_index: float
    coleman_liau_index: float
    automated_readability_index: float
    linsear_write_formula: float
    dale_chall_readability_score: float
    dale_chall_grade: float
    gunning_fog: float
    lix: float
    rix: float
    text_standard: float
    text_standard_label: str
    text_median: float
    difficult_word_list: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the report."""
        return asdict(self)
