from __future__ import annotations

import re
from typing import List

from . import textutils

WORD_SPLIT_PATTERN = re.compile(r",| |\n|\r")
SENTENCE_BOUNDARY_PATTERN = re.compile(r" *[.?!]['\")\]]*[ |\n](?=[A-Z])")
# ASCII \w to keep accented letters from joining a candidate token.
DIFFICULT_WORD_PATTERN = re.compile(r"[\w=\u2018\u2019]+", re.ASCII)


def split_words(text: str) -> List[str]:
    """Split text on commas, spaces and line breaks, dropping empty tokens."""
    return [token for token in WORD_SPLIT_PATTERN.split(text) if token]


def split_sentences(text: str) -> List[str]:
    """
    Split text at sentence boundaries.

    A boundary is end punctuation, optional closing quotes or brackets, then a
    space or newline followed by an uppercase letter. Abbreviations such as
    "Dr. Smith" are split as well.
    """
    return SENTENCE_BOUNDARY_PATTERN.split(text)


def lexicon_count(text: str, remove_punctuation: bool = True) -> int:
    """Count the words in text, optionally ignoring punctuation-only tokens."""
    if remove_punctuation:
        text = textutils.remove_punctuation(text)
    return len(split_words(text))


def sentence_count(text: str) -> int:
    """Count sentences longer than two words; never less than one."""
    ignored = 0
    sentences = split_sentences(text)
    for sentence in sentences:
        if lexicon_count(sentence) <= 2:
            ignored += 1
    valid = len(sentences) - ignored
    return valid if valid > 1 else 1


def char_count(text: str, ignore_spaces: bool = True) -> int:
    if ignore_spaces:
        text = text.replace(" ", "")
    return len(text)


def letter_count(text: str, ignore_spaces: bool = True) -> int:
    if ignore_spaces:
        text = text.replace(" ", "")
    return len(textutils.remove_punctuation(text))


def difficult_word_candidates(text: str) -> List[str]:
    """Return the word-like tokens scanned by the difficult-word classifier."""
    return DIFFICULT_WORD_PATTERN.findall(text)
