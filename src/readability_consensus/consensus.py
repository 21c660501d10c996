from __future__ import annotations

import math
from typing import Callable, Dict, List, Sequence, Tuple

from . import formulas
from .metrics import TextMetrics
from .textutils import legacy_round

Formula = Callable[[str, TextMetrics], float]


def _dale_chall_grade(text: str, metrics: TextMetrics) -> float:
    return formulas.dale_chall_to_grade(formulas.dale_chall_readability_score(text, metrics))


def _flesch_reading_ease_grade(text: str, metrics: TextMetrics) -> float:
    return formulas.flesch_reading_ease_to_grade(formulas.flesch_reading_ease(text, metrics))


# Each score votes twice: its rounded grade and its ceiling grade.
SPLIT_VOTE_FORMULAS: Tuple[Tuple[str, Formula], ...] = (
    ("flesch_kincaid_grade", formulas.flesch_kincaid_grade),
    ("smog_index", formulas.smog_index),
    ("coleman_liau_index", formulas.coleman_liau_index),
    ("automated_readability_index", formulas.automated_readability_index),
    ("dale_chall_grade", _dale_chall_grade),
    ("linsear_write_formula", formulas.linsear_write_formula),
    ("gunning_fog", formulas.gunning_fog),
)

MEDIAN_FORMULAS: Tuple[Tuple[str, Formula], ...] = (
    ("flesch_kincaid_grade", formulas.flesch_kincaid_grade),
    ("flesch_reading_ease_grade", _flesch_reading_ease_grade),
    ("smog_index", formulas.smog_index),
    ("coleman_liau_index", formulas.coleman_liau_index),
    ("automated_readability_index", formulas.automated_readability_index),
    ("dale_chall_grade", _dale_chall_grade),
    ("linsear_write_formula", formulas.linsear_write_formula),
    ("gunning_fog", formulas.gunning_fog),
)


def split_vote(score: float) -> Tuple[int, int]:
    """Return the (rounded, ceiling) grade pair a score contributes."""
    return math.floor(legacy_round(score)), math.floor(math.ceil(score))


def grade_votes(text: str, metrics: TextMetrics) -> List[float]:
    """
    Collect the fifteen grade votes for text.

    Flesch-Kincaid votes first, then the single Flesch Reading Ease grade,
    then the remaining split-vote formulas in declaration order.
    """
    votes: List[float] = []
    for name, formula in SPLIT_VOTE_FORMULAS:
        votes.extend(split_vote(formula(text, metrics)))
        if name == "flesch_kincaid_grade":
            votes.append(_flesch_reading_ease_grade(text, metrics))
    return votes


def most_common_grade(votes: Sequence[float]) -> float:
    """
    Return the grade with the most votes.

    Distinct grades are visited in first-seen order and a later grade replaces
    the current winner on a tie.
    """
    if not votes:
        raise ValueError("At least one grade vote is required.")
    counts: Dict[float, int] = {}
    for vote in votes:
        counts[vote] = counts.get(vote, 0) + 1

    winner, best = next(iter(counts.items()))
    for grade, count in counts.items():
        if count >= best:
            winner, best = grade, count
    return winner


def format_grade_range(grade: float) -> str:
    """Render a grade as ``"7th and 8th grade"``."""
    lower_score = math.floor(grade) - 1
    upper_score = lower_score + 1
    return (
        f"{lower_score}{formulas.get_grade_suffix(lower_score)} and "
        f"{upper_score}{formulas.get_grade_suffix(upper_score)} grade"
    )


def text_standard(
    text: str, metrics: TextMetrics, float_output: bool = False
) -> float | str:
    """Consensus grade of every formula, as a float or a grade-range string."""
    score = most_common_grade(grade_votes(text, metrics))
    if float_output:
        return float(score)
    return format_grade_range(score)


def median_grades(text: str, metrics: TextMetrics) -> List[float]:
    return [formula(text, metrics) for _, formula in MEDIAN_FORMULAS]


def median_grade(grades: Sequence[float]) -> float:
    """
    Middle grade of a list.

    The two middle values are averaged only when half the length is odd;
    otherwise the value at index ``len // 2`` is returned. For the eight
    median formulas that is always the fifth smallest grade.
    """
    if not grades:
        raise ValueError("At least one grade is required.")
    ordered = sorted(grades)
    half = len(ordered) // 2
    if half & 1:
        return (ordered[half - 1] + ordered[half]) / 2
    return ordered[half]


def text_median(text: str, metrics: TextMetrics) -> float:
    return float(median_grade(median_grades(text, metrics)))
