from __future__ import annotations

import importlib
import threading
from typing import Any, cast

from .base import SyllableEstimator

textstat: Any | None = None
_active_lang: str | None = None
# textstat keeps its language as module state shared by every estimator.
_lang_lock = threading.Lock()


class TextstatSyllableEstimator(SyllableEstimator):
    """
    Syllable estimator backed by the ``textstat`` package.

    ``textstat`` keeps its language as module state, so the language is only
    switched when an estimator for a different locale runs, and the switch
    and the count happen under one lock. English counts read NLTK's
    ``cmudict`` corpus; a missing corpus raises ``LookupError`` pointing at
    ``readability-consensus download-data``.
    """

    def __init__(self, lang: str = "en-US") -> None:
        self.lang = lang
        self._textstat_lang = lang.replace("-", "_")
        self._textstat = _ensure_textstat()

    def estimate(self, word: str) -> int:
        if not word:
            return 0
        try:
            with _lang_lock:
                _switch_lang(self._textstat, self._textstat_lang)
                count = self._textstat.syllable_count(word)
        except LookupError as exc:
            raise LookupError(
                "The NLTK cmudict corpus is not installed. "
                "Run `readability-consensus download-data` to fetch it."
            ) from exc
        return max(0, int(count))


def _switch_lang(module: Any, lang: str) -> None:
    global _active_lang
    if _active_lang != lang:
        module.set_lang(lang)
        _active_lang = lang


def _ensure_textstat() -> Any:
    global textstat
    if textstat is not None:
        return textstat
    try:  # pragma: no cover - import guard
        textstat_module = cast(Any, importlib.import_module("textstat"))
    except ImportError as exc:  # pragma: no cover - import guard
        raise ImportError(
            "textstat is required for TextstatSyllableEstimator. "
            "Install it with `pip install textstat`."
        ) from exc
    textstat = textstat_module
    return textstat
