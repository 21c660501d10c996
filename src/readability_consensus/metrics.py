from __future__ import annotations

from typing import List

from . import difficulty, tokenization
from .estimators.base import Singularizer, SyllableEstimator
from .lexicon import EasyWordDictionary
from .textutils import legacy_round, remove_punctuation, safe_ratio


class TextMetrics:
    """
    Counting primitives shared by every readability formula.

    Binds the easy-word dictionary, the syllable estimator and the
    singularizer so that all formulas count words, sentences and syllables
    the same way. Instances hold no per-text state.
    """

    def __init__(
        self,
        dictionary: EasyWordDictionary,
        syllable_estimator: SyllableEstimator,
        singularizer: Singularizer,
        lang: str = "en-US",
    ) -> None:
        self.dictionary = dictionary
        self.syllable_estimator = syllable_estimator
        self.singularizer = singularizer
        self.lang = lang

    # Tokenizer pass-throughs.

    def remove_punctuation(self, text: str) -> str:
        return remove_punctuation(text)

    def split_words(self, text: str) -> List[str]:
        return tokenization.split_words(text)

    def lexicon_count(self, text: str, remove_punctuation: bool = True) -> int:
        return tokenization.lexicon_count(text, remove_punctuation)

    def sentence_count(self, text: str) -> int:
        return tokenization.sentence_count(text)

    def char_count(self, text: str, ignore_spaces: bool = True) -> int:
        return tokenization.char_count(text, ignore_spaces)

    def letter_count(self, text: str, ignore_spaces: bool = True) -> int:
        return tokenization.letter_count(text, ignore_spaces)

    # Syllables and difficult words.

    def syllable_count(self, text: str) -> int:
        """Total syllables of text; 0 when nothing but punctuation remains."""
        text = remove_punctuation(text.lower())
        if not text:
            return 0
        return sum(self.syllable_estimator.estimate(word) for word in text.split())

    def poly_syllable_count(self, text: str) -> int:
        """Number of words with three or more syllables."""
        return sum(
            1 for word in tokenization.split_words(text) if self.syllable_count(word) >= 3
        )

    def difficult_words(self, text: str, syllable_threshold: int = 2) -> int:
        return difficulty.difficult_words(
            text,
            self.dictionary,
            self.singularizer,
            self.syllable_count,
            syllable_threshold,
        )

    def difficult_words_list(self, text: str, syllable_threshold: int = 2) -> List[str]:
        return difficulty.difficult_words_list(
            text,
            self.dictionary,
            self.singularizer,
            self.syllable_count,
            syllable_threshold,
        )

    # Ratios, rounded the legacy way.

    def average_sentence_length(self, text: str) -> float:
        asl = safe_ratio(self.lexicon_count(text), self.sentence_count(text))
        return legacy_round(asl, 1)

    def average_syllable_per_word(self, text: str) -> float:
        syllables_per_word = safe_ratio(self.syllable_count(text), self.lexicon_count(text))
        return legacy_round(syllables_per_word, 1)

    def average_character_per_word(self, text: str) -> float:
        characters_per_word = safe_ratio(self.char_count(text), self.lexicon_count(text))
        return legacy_round(characters_per_word, 2)

    def average_letter_per_word(self, text: str) -> float:
        letters_per_word = safe_ratio(self.letter_count(text), self.lexicon_count(text))
        return legacy_round(letters_per_word, 2)

    def average_sentence_per_word(self, text: str) -> float:
        sentences_per_word = safe_ratio(self.sentence_count(text), self.lexicon_count(text))
        return legacy_round(sentences_per_word, 2)
