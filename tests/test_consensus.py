import re

import pytest

from readability_consensus import consensus
from tests.utils import SIMPLE_PARAGRAPH, make_readability

GRADE_LABEL_RE = re.compile(r"^-?\d+(st|nd|rd|th) and -?\d+(st|nd|rd|th) grade$")


def test_grade_votes_follow_formula_order():
    votes = consensus.grade_votes(SIMPLE_PARAGRAPH, make_readability())
    assert len(votes) == 15
    assert votes == [1, 2, 5, 3, 4, -3, -2, -4, -2, 5, 5, 2, 3, 3, 3]


def test_split_vote_uses_legacy_round_and_ceiling():
    assert consensus.split_vote(1.2) == (1, 2)
    assert consensus.split_vote(2.5) == (3, 3)
    assert consensus.split_vote(-2.27) == (-3, -2)
    assert consensus.split_vote(4.0) == (4, 4)


def test_most_common_grade_prefers_later_value_on_tie():
    assert consensus.most_common_grade([4, 5, 5, 4]) == 5
    assert consensus.most_common_grade([5, 4, 4, 5]) == 4
    assert consensus.most_common_grade([7, 7, 3, 8, 8, 3]) == 8
    assert consensus.most_common_grade([6, 6, 6, 2]) == 6


def test_most_common_grade_requires_votes():
    with pytest.raises(ValueError):
        consensus.most_common_grade([])


def test_text_standard_float_and_label():
    metrics = make_readability()
    score = consensus.text_standard(SIMPLE_PARAGRAPH, metrics, float_output=True)
    assert isinstance(score, float)
    assert score == 3.0
    label = consensus.text_standard(SIMPLE_PARAGRAPH, metrics)
    assert label == "2nd and 3rd grade"
    assert GRADE_LABEL_RE.match(label)


def test_format_grade_range_keeps_suffix_quirk():
    assert consensus.format_grade_range(8.5) == "7th and 8th grade"
    assert consensus.format_grade_range(2) == "1st and 2nd grade"
    assert consensus.format_grade_range(23) == "22th and 23th grade"
    assert GRADE_LABEL_RE.match(consensus.format_grade_range(-1))


def test_text_standard_on_empty_text_still_formats():
    label = consensus.text_standard("", make_readability())
    assert GRADE_LABEL_RE.match(label)


def test_median_grade_for_eight_values_is_fifth_smallest():
    grades = [8, 1, 7, 2, 6, 3, 5, 4]
    assert consensus.median_grade(grades) == 5


def test_median_grade_averages_when_half_is_odd():
    assert consensus.median_grade([1, 2, 3, 4, 5, 6]) == 3.5
    assert consensus.median_grade([3, 1, 2]) == 1.5
    assert consensus.median_grade([9]) == 9


def test_text_median_for_simple_paragraph():
    metrics = make_readability()
    grades = consensus.median_grades(SIMPLE_PARAGRAPH, metrics)
    assert grades == [1.2, 5, 3.1, -2.27, -2.9, 5, 2.3, 2.68]
    assert consensus.text_median(SIMPLE_PARAGRAPH, metrics) == 2.68
