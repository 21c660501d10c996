"""
readability_consensus package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .lexicon import EasyWordDictionary, load_easy_words
from .metrics import TextMetrics
from .pipeline import process_corpus, process_document
from .readability import Readability, build_readability_from_config, create_readability
from .textutils import legacy_round, remove_punctuation

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "EasyWordDictionary",
    "load_easy_words",
    "TextMetrics",
    "Readability",
    "build_readability_from_config",
    "create_readability",
    "process_corpus",
    "process_document",
    "legacy_round",
    "remove_punctuation",
]

__version__ = "0.1.0"
