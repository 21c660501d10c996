from __future__ import annotations

import logging

from .base import IdentitySingularizer, Singularizer, SyllableEstimator
from .textstat_estimator import TextstatSyllableEstimator
from .wordnet_singularizer import WordNetSingularizer, download_nltk_data

__all__ = [
    "SyllableEstimator",
    "Singularizer",
    "IdentitySingularizer",
    "TextstatSyllableEstimator",
    "WordNetSingularizer",
    "create_syllable_estimator",
    "create_singularizer",
    "download_nltk_data",
]

LOGGER = logging.getLogger(__name__)


def create_syllable_estimator(name: str, lang: str = "en-US") -> SyllableEstimator:
    """Factory for building syllable estimators by name."""
    normalized = name.lower().strip()
    LOGGER.debug("Building syllable estimator %r for %s", normalized, lang)
    if normalized == "textstat":
        return TextstatSyllableEstimator(lang=lang)
    raise ValueError(f"Unknown syllable estimator '{name}'.")


def create_singularizer(name: str) -> Singularizer:
    """Factory for building singularizers by name."""
    normalized = name.lower().strip()
    LOGGER.debug("Building singularizer %r", normalized)
    if normalized in {"wordnet", "nltk"}:
        return WordNetSingularizer()
    if normalized in {"none", "identity"}:
        return IdentitySingularizer()
    raise ValueError(f"Unknown singularizer '{name}'.")
