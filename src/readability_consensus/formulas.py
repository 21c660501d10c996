"""
Classical readability formulas.

Every formula takes the raw text plus a :class:`TextMetrics` and returns a
float. Intermediate ratios are rounded with :func:`legacy_round` before they
are combined, and a text without words scores ``0.0`` instead of raising.
"""

from __future__ import annotations

import math

from .metrics import TextMetrics
from .textutils import legacy_round, safe_ratio

LINSEAR_WRITE_SAMPLE_SIZE = 100
LONG_WORD_LENGTH = 6


def flesch_reading_ease(text: str, metrics: TextMetrics) -> float:
    sentence_length = metrics.average_sentence_length(text)
    syllables_per_word = metrics.average_syllable_per_word(text)
    flesch = 206.835 - (1.015 * sentence_length) - (84.6 * syllables_per_word)
    return legacy_round(flesch, 2)


def flesch_reading_ease_to_grade(score: float) -> float:
    """Map a Flesch Reading Ease score onto a school grade."""
    if 90 <= score < 100:
        return 5
    if 80 <= score < 90:
        return 6
    if 70 <= score < 80:
        return 7
    if 60 <= score < 70:
        return 8.5
    if 50 <= score < 60:
        return 11
    if 40 <= score < 50:
        return 13  # college
    if 30 <= score < 40:
        return 15
    return 16


def flesch_kincaid_grade(text: str, metrics: TextMetrics) -> float:
    sentence_length = metrics.average_sentence_length(text)
    syllables_per_word = metrics.average_syllable_per_word(text)
    grade = 0.39 * sentence_length + 11.8 * syllables_per_word - 15.59
    return legacy_round(grade, 1)


def smog_index(text: str, metrics: TextMetrics) -> float:
    """SMOG grade; texts with fewer than three sentences score 0.0."""
    sentences = metrics.sentence_count(text)
    if sentences < 3:
        return 0.0
    poly_syllables = metrics.poly_syllable_count(text)
    smog = 1.043 * math.sqrt(30 * (poly_syllables / sentences)) + 3.1291
    return legacy_round(smog, 1)


def coleman_liau_index(text: str, metrics: TextMetrics) -> float:
    if not metrics.lexicon_count(text):
        return 0.0
    letters = legacy_round(metrics.average_letter_per_word(text) * 100, 2)
    sentences = legacy_round(metrics.average_sentence_per_word(text) * 100, 2)
    coleman = 0.058 * letters - 0.296 * sentences - 15.8
    return legacy_round(coleman, 2)


def automated_readability_index(text: str, metrics: TextMetrics) -> float:
    words = metrics.lexicon_count(text)
    if not words:
        return 0.0
    characters_per_word = metrics.char_count(text) / words
    words_per_sentence = words / metrics.sentence_count(text)
    readability = (
        4.71 * legacy_round(characters_per_word, 2)
        + 0.5 * legacy_round(words_per_sentence, 2)
        - 21.43
    )
    return legacy_round(readability, 1)


def linsear_write_formula(text: str, metrics: TextMetrics) -> float:
    """
    Linsear Write grade over the first hundred words.

    Words under three syllables weigh 1, the rest weigh 3. The sentence count
    is taken from the truncated sample, re-joined with single spaces.
    """
    easy_words = 0
    hard_words = 0
    sample = metrics.split_words(text)[:LINSEAR_WRITE_SAMPLE_SIZE]
    for word in sample:
        if metrics.syllable_count(word) < 3:
            easy_words += 1
        else:
            hard_words += 1

    number = (easy_words * 1 + hard_words * 3) / metrics.sentence_count(" ".join(sample))
    grade = (number - 2) / 2 if number <= 20 else number / 2
    return legacy_round(grade, 1)


def dale_chall_readability_score(text: str, metrics: TextMetrics) -> float:
    """New Dale-Chall score from the share of words outside the easy-word list."""
    word_count = metrics.lexicon_count(text)
    if not word_count:
        return 0.0
    familiar = word_count - metrics.difficult_words(text)
    difficult_percentage = 100 - (familiar / word_count * 100)
    score = 0.1579 * difficult_percentage + 0.0496 * metrics.average_sentence_length(text)
    if difficult_percentage > 5:
        score += 3.6365
    return legacy_round(score, 2)


def dale_chall_to_grade(score: float) -> float:
    if score <= 4.9:
        return 4
    if score < 5.9:
        return 5
    if score < 6.9:
        return 7
    if score < 7.9:
        return 9
    if score < 8.9:
        return 11
    if score < 9.9:
        return 13
    return 16


def gunning_fog(text: str, metrics: TextMetrics) -> float:
    """Gunning Fog index; only words of three or more syllables are complex."""
    word_count = metrics.lexicon_count(text)
    if not word_count:
        return 0.0
    difficult_percentage = metrics.difficult_words(text, 3) / word_count * 100
    grade = 0.4 * (metrics.average_sentence_length(text) + difficult_percentage)
    return legacy_round(grade, 2)


def lix(text: str, metrics: TextMetrics) -> float:
    """Läsbarhetsindex: sentence length plus the percentage of long raw tokens."""
    words = metrics.split_words(text)
    if not words:
        return 0.0
    long_words = sum(1 for word in words if len(word) > LONG_WORD_LENGTH)
    long_word_percentage = long_words * 100 / len(words)
    return legacy_round(metrics.average_sentence_length(text) + long_word_percentage, 2)


def rix(text: str, metrics: TextMetrics) -> float:
    words = metrics.split_words(text)
    long_words = sum(1 for word in words if len(word) > LONG_WORD_LENGTH)
    return legacy_round(safe_ratio(long_words, metrics.sentence_count(text)), 2)


def get_grade_suffix(grade: float) -> str:
    """
    Ordinal suffix for a grade.

    Only 1, 2 and 3 get "st", "nd" and "rd"; 21, 22 and 23 come out as "th".
    Existing consensus strings depend on this.
    """
    grade = math.floor(grade)
    grade_map = {1: "st", 2: "nd", 3: "rd"}
    return grade_map.get(grade, "th")
