from __future__ import annotations

from abc import ABC, abstractmethod


class SyllableEstimator(ABC):
    """Abstract estimator returning the number of syllables in a word."""

    lang: str = "en-US"

    @abstractmethod
    def estimate(self, word: str) -> int:
        """Return a non-negative syllable count for a lowercase, punctuation-free word."""
        raise NotImplementedError


class Singularizer(ABC):
    """Abstract reducer from plural noun forms to their singular."""

    @abstractmethod
    def singularize(self, word: str) -> str:
        raise NotImplementedError


class IdentitySingularizer(Singularizer):
    """Leaves every word untouched; selected with ``singularizer: none``."""

    def singularize(self, word: str) -> str:
        return word
