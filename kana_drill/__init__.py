"""
kana-drill: Kana reading practice engine

Romanizes hiragana and katakana, grades typed romaji answers syllable
by syllable, and picks practice words covering a set of kana.

Basic Usage:
    import kana_drill

    # Romanize
    kana_drill.to_romaji("コーヒー")          # 'kōhī'
    kana_drill.split_romaji("きって")         # ['ki', 't', 'te']

    # Grade an answer
    match = kana_drill.check_answer("ひらがな", "hiragama")
    match.is_match                            # False
    match.fails                               # ['な']

    # Build a word set
    corpus = kana_drill.WordCorpus.from_records([("ねこ", 120), ("いぬ", 95)])
    word_set = kana_drill.build_set("ねこいぬ", 0, corpus)
"""

from kana_drill.constants import (
    DEFAULT_BUDGET,
    SET_ALL,
    SET_ALL_RARE,
    SET_HIRAGANA,
    SET_KATAKANA,
    SET_RARE,
)
from kana_drill.diff import Diff, DiffOp, diff, diff_cost
from kana_drill.matching import Match, check_answer
from kana_drill.romaji import romaji_equals, to_ascii, to_romaji
from kana_drill.splits import split_romaji
from kana_drill.tables import DuplicateKanaError, lookup
from kana_drill.words import WordCorpus, WordRecord, get_default_corpus, load_corpus
from kana_drill.wordset import WordSet, build_set

__version__ = "0.1.0"


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Romanization
    "split_romaji",
    "to_romaji",
    "to_ascii",
    "romaji_equals",
    "lookup",
    # Grading
    "diff",
    "diff_cost",
    "Diff",
    "DiffOp",
    "check_answer",
    "Match",
    # Word sets
    "WordRecord",
    "WordCorpus",
    "load_corpus",
    "get_default_corpus",
    "WordSet",
    "build_set",
    # Character sets
    "SET_HIRAGANA",
    "SET_KATAKANA",
    "SET_RARE",
    "SET_ALL",
    "SET_ALL_RARE",
    "DEFAULT_BUDGET",
    # Exceptions
    "DuplicateKanaError",
    # Version
    "get_version",
    "__version__",
]
