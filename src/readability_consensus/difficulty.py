from __future__ import annotations

from typing import Callable, List, Set

from .estimators.base import Singularizer
from .lexicon import EasyWordDictionary, normalize_for_dictionary
from .tokenization import difficult_word_candidates

SyllableCounter = Callable[[str], int]


def difficult_words_list(
    text: str,
    dictionary: EasyWordDictionary,
    singularizer: Singularizer,
    syllable_count: SyllableCounter,
    syllable_threshold: int = 2,
) -> List[str]:
    """
    Return the distinct difficult words of text in first-seen order.

    A word is difficult when its normalized form is missing from the
    dictionary and the surface form has at least ``syllable_threshold``
    syllables. Words are de-duplicated by surface form, so "Cats" and "cats"
    are two entries.
    """
    seen: dict[str, None] = {}
    for word in difficult_word_candidates(text):
        if word in seen:
            continue
        normalized = normalize_for_dictionary(word, dictionary, singularizer)
        if normalized not in dictionary and syllable_count(word) >= syllable_threshold:
            seen[word] = None
    return list(seen)


def difficult_words_set(
    text: str,
    dictionary: EasyWordDictionary,
    singularizer: Singularizer,
    syllable_count: SyllableCounter,
    syllable_threshold: int = 2,
) -> Set[str]:
    return set(
        difficult_words_list(
            text, dictionary, singularizer, syllable_count, syllable_threshold
        )
    )


def difficult_words(
    text: str,
    dictionary: EasyWordDictionary,
    singularizer: Singularizer,
    syllable_count: SyllableCounter,
    syllable_threshold: int = 2,
) -> int:
    """Count the distinct difficult words of text."""
    return len(
        difficult_words_set(
            text, dictionary, singularizer, syllable_count, syllable_threshold
        )
    )
