from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator

from .estimators.base import Singularizer

LOGGER = logging.getLogger(__name__)

EASY_WORDS_RESOURCE = "easy_words.txt"


@dataclass(frozen=True, slots=True)
class EasyWordDictionary:
    """Read-only set of lowercase words considered familiar to early readers."""

    words: FrozenSet[str]

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "EasyWordDictionary":
        return cls(frozenset(_clean_lines(words)))

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


def load_easy_words(path: str | Path | None = None) -> EasyWordDictionary:
    """
    Load an easy-word list, one word per line.

    Parameters
    ----------
    path:
        Custom word list. Defaults to the Dale-Chall style list shipped in
        ``readability_consensus/data``.
    """
    if path is None:
        source = resources.files("readability_consensus") / "data" / EASY_WORDS_RESOURCE
        contents = source.read_text(encoding="utf-8")
        origin = f"package:{EASY_WORDS_RESOURCE}"
    else:
        contents = Path(path).read_text(encoding="utf-8")
        origin = str(path)

    dictionary = EasyWordDictionary.from_words(contents.splitlines())
    if not dictionary:
        raise ValueError(f"Easy-word list {origin} does not contain any words.")
    LOGGER.debug("Loaded %d easy words from %s", len(dictionary), origin)
    return dictionary


@lru_cache(maxsize=1)
def default_easy_words() -> EasyWordDictionary:
    """Return the packaged dictionary, loading it on first use only."""
    return load_easy_words()


def present_tense(word: str, dictionary: EasyWordDictionary) -> str:
    """
    Strip a past or progressive suffix from a long word.

    Only words of six characters or more are touched. ``-ed`` drops the ``d``
    when that leaves an easy word (liked -> like), otherwise both letters.
    ``-ing`` becomes ``e`` when that leaves an easy word (forcing -> force),
    otherwise it is dropped. Irregular verbs come out wrong.
    """
    if len(word) < 6:
        return word
    if word.endswith("ed"):
        if word[:-1] in dictionary:
            return word[:-1]
        return word[:-2]
    if word.endswith("ing"):
        suffix_ing_to_e = word[:-3] + "e"
        if suffix_ing_to_e in dictionary:
            return suffix_ing_to_e
        return word[:-3]
    return word


def normalize_for_dictionary(
    word: str, dictionary: EasyWordDictionary, singularizer: Singularizer
) -> str:
    """Lowercase, singularize and de-inflect a word for a dictionary lookup."""
    return present_tense(singularizer.singularize(word.lower()), dictionary)


def _clean_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = line.strip().lower()
        if word and not word.startswith("#"):
            yield word
