from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List

from . import consensus, formulas, tokenization
from .config import ReadabilityConfig
from .estimators import (
    Singularizer,
    SyllableEstimator,
    create_singularizer,
    create_syllable_estimator,
)
from .lexicon import (
    EasyWordDictionary,
    default_easy_words,
    load_easy_words,
    present_tense,
)
from .metrics import TextMetrics
from .models import ReadabilityReport, TextCounts

LOGGER = logging.getLogger(__name__)


class Readability(TextMetrics):
    """
    One-stop readability calculator.

    Exposes the counting primitives inherited from :class:`TextMetrics`, every
    formula, and the consensus/median aggregators as methods on a single
    object, so callers only wire the collaborators once.
    """

    @staticmethod
    def split(text: str) -> List[str]:
        return tokenization.split_words(text)

    @staticmethod
    def get_grade_suffix(grade: float) -> str:
        return formulas.get_grade_suffix(grade)

    def present_tense(self, word: str) -> str:
        return present_tense(word, self.dictionary)

    def flesch_reading_ease(self, text: str) -> float:
        return formulas.flesch_reading_ease(text, self)

    def flesch_reading_ease_to_grade(self, score: float) -> float:
        return formulas.flesch_reading_ease_to_grade(score)

    def flesch_kincaid_grade(self, text: str) -> float:
        return formulas.flesch_kincaid_grade(text, self)

    def smog_index(self, text: str) -> float:
        return formulas.smog_index(text, self)

    def coleman_liau_index(self, text: str) -> float:
        return formulas.coleman_liau_index(text, self)

    def automated_readability_index(self, text: str) -> float:
        return formulas.automated_readability_index(text, self)

    def linsear_write_formula(self, text: str) -> float:
        return formulas.linsear_write_formula(text, self)

    def dale_chall_readability_score(self, text: str) -> float:
        return formulas.dale_chall_readability_score(text, self)

    def dale_chall_to_grade(self, score: float) -> float:
        return formulas.dale_chall_to_grade(score)

    def gunning_fog(self, text: str) -> float:
        return formulas.gunning_fog(text, self)

    def lix(self, text: str) -> float:
        return formulas.lix(text, self)

    def rix(self, text: str) -> float:
        return formulas.rix(text, self)

    def text_standard(self, text: str, float_output: bool = False) -> float | str:
        return consensus.text_standard(text, self, float_output)

    def text_median(self, text: str) -> float:
        return consensus.text_median(text, self)

    def report(self, text: str, doc_id: str = "text") -> ReadabilityReport:
        """Compute every score for text in one pass over the formula list."""
        flesch = self.flesch_reading_ease(text)
        dale_chall = self.dale_chall_readability_score(text)
        consensus_grade = consensus.most_common_grade(consensus.grade_votes(text, self))
        return ReadabilityReport(
            doc_id=doc_id,
            counts=TextCounts(
                lexicon_count=self.lexicon_count(text),
                sentence_count=self.sentence_count(text),
                syllable_count=self.syllable_count(text),
                char_count=self.char_count(text),
                letter_count=self.letter_count(text),
                poly_syllable_count=self.poly_syllable_count(text),
                difficult_words=self.difficult_words(text),
            ),
            flesch_reading_ease=flesch,
            flesch_reading_ease_grade=self.flesch_reading_ease_to_grade(flesch),
            flesch_kincaid_grade=self.flesch_kincaid_grade(text),
            smog_index=self.smog_index(text),
            coleman_liau_index=self.coleman_liau_index(text),
            automated_readability_index=self.automated_readability_index(text),
            linsear_write_formula=self.linsear_write_formula(text),
            dale_chall_readability_score=dale_chall,
            dale_chall_grade=self.dale_chall_to_grade(dale_chall),
            gunning_fog=self.gunning_fog(text),
            lix=self.lix(text),
            rix=self.rix(text),
            text_standard=float(consensus_grade),
            text_standard_label=consensus.format_grade_range(consensus_grade),
            text_median=self.text_median(text),
            difficult_word_list=self.difficult_words_list(text),
        )


def build_readability_from_config(
    config: ReadabilityConfig,
    *,
    dictionary: EasyWordDictionary | None = None,
    syllable_estimator: SyllableEstimator | None = None,
    singularizer: Singularizer | None = None,
) -> Readability:
    """Wire a Readability from config; explicit collaborators take precedence."""
    if dictionary is None:
        dictionary = (
            load_easy_words(config.easy_words_path)
            if config.easy_words_path
            else default_easy_words()
        )
    if syllable_estimator is None:
        syllable_estimator = create_syllable_estimator(
            config.syllable_estimator, lang=config.lang
        )
    if singularizer is None:
        singularizer = create_singularizer(config.singularizer)
    LOGGER.debug(
        "Readability ready: lang=%s, %d easy words, estimator=%s, singularizer=%s",
        config.lang,
        len(dictionary),
        type(syllable_estimator).__name__,
        type(singularizer).__name__,
    )
    return Readability(dictionary, syllable_estimator, singularizer, lang=config.lang)


def create_readability(**overrides: Any) -> Readability:
    """Build a Readability from the default config with field overrides."""
    return build_readability_from_config(replace(ReadabilityConfig(), **overrides))
