from __future__ import annotations

import re

from readability_consensus.estimators.base import Singularizer, SyllableEstimator
from readability_consensus.lexicon import EasyWordDictionary
from readability_consensus.readability import Readability

VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

FIXTURE_EASY_WORDS = [
    "a",
    "big",
    "cat",
    "dog",
    "force",
    "fun",
    "had",
    "like",
    "lot",
    "made",
    "mat",
    "my",
    "of",
    "on",
    "park",
    "pie",
    "ran",
    "sat",
    "smile",
    "the",
    "there",
    "to",
    "we",
]

# Three sentences, twenty words, twenty-four vowel groups.
SIMPLE_PARAGRAPH = (
    "The little dog ran to the park. We had a lot of fun there. "
    "My sister made a big pie."
)


class VowelGroupSyllableEstimator(SyllableEstimator):
    """Counts runs of vowels; deterministic so pinned scores stay stable."""

    def estimate(self, word: str) -> int:
        if not word:
            return 0
        return max(1, len(VOWEL_GROUP_RE.findall(word)))


class SuffixSingularizer(Singularizer):
    def singularize(self, word: str) -> str:
        if len(word) > 3 and word.endswith("s") and not word.endswith("ss"):
            return word[:-1]
        return word


def fixture_dictionary() -> EasyWordDictionary:
    return EasyWordDictionary.from_words(FIXTURE_EASY_WORDS)


def make_readability(dictionary: EasyWordDictionary | None = None) -> Readability:
    return Readability(
        dictionary or fixture_dictionary(),
        VowelGroupSyllableEstimator(),
        SuffixSingularizer(),
    )
