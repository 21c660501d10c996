from __future__ import annotations

from importlib import import_module
from typing import Any

from .base import Singularizer

_lemmatizer_cls: type[Any] | None = None


class WordNetSingularizer(Singularizer):
    """
    Reduce plural nouns to their singular with NLTK's WordNet lemmatizer.

    The WordNet corpus is loaded lazily on the first call; a missing corpus
    raises ``LookupError`` pointing at ``readability-consensus download-data``.
    """

    def __init__(self) -> None:
        self._lemmatizer = _ensure_lemmatizer_cls()()

    def singularize(self, word: str) -> str:
        if not word:
            return word
        try:
            return str(self._lemmatizer.lemmatize(word, pos="n"))
        except LookupError as exc:
            raise LookupError(
                "The NLTK WordNet corpus is not installed. "
                "Run `readability-consensus download-data` to fetch it."
            ) from exc


NLTK_DATA_PACKAGES = ("wordnet", "omw-1.4", "cmudict")


def download_nltk_data(quiet: bool = True) -> bool:
    """Fetch the NLTK corpora used for singularizing and syllable counts."""
    nltk = _import_nltk("nltk")
    results = [bool(nltk.download(package, quiet=quiet)) for package in NLTK_DATA_PACKAGES]
    return all(results)


def _ensure_lemmatizer_cls() -> type[Any]:
    global _lemmatizer_cls
    if _lemmatizer_cls is None:
        stem_module = _import_nltk("nltk.stem")
        _lemmatizer_cls = getattr(stem_module, "WordNetLemmatizer")
    return _lemmatizer_cls


def _import_nltk(name: str) -> Any:
    try:
        return import_module(name)
    except ModuleNotFoundError as exc:  # pragma: no cover - informative
        raise ImportError(
            "nltk is required for WordNetSingularizer. Install it with `pip install nltk`."
        ) from exc
