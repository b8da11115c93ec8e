"""
Answer checking for kana-drill.

Grades a typed romaji answer against a kana word and reports which kana
characters were missed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from kana_drill.constants import LONG_DASH, LONG_MARK
from kana_drill.diff import Diff, DiffOp, diff
from kana_drill.romaji import to_ascii, to_romaji
from kana_drill.splits import split_romaji


@dataclass(slots=True)
class Match:
    """
    Result of matching a kana word with a romaji answer.

    Attributes:
        kana: The kana word
        romaji: The answer, normalized for comparison
        actual: Romanization of `kana`
        split: Characters of `kana`
        diff: Diff from the answer to the syllables of `kana`
        fails: Characters of `kana` answered wrong, in order
    """
    kana: str
    romaji: str
    actual: str
    split: List[str] = field(default_factory=list)
    diff: List[Diff] = field(default_factory=list)
    fails: List[str] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        """True if the answer matches the kana exactly."""
        return all(op.op is DiffOp.SAME for op in self.diff)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_match": self.is_match,
            "kana": self.kana,
            "romaji": self.romaji,
            "actual": self.actual,
            "split": self.split,
            "diff": [op.to_dict() for op in self.diff],
            "fails": self.fails,
        }


def normalize_answer(text: str) -> str:
    """
    Prepare a typed answer for the diff.

    Lowercases, folds long vowel glyphs to doubled letters and turns a
    typed dash into the long mark, which is what split_romaji emits for
    a long mark it cannot attach to a vowel.
    """
    return to_ascii(text.lower()).replace(LONG_DASH, LONG_MARK)


def failed_chars(ops: List[Diff], chars: List[str]) -> List[str]:
    """
    Map diff operations back to the kana characters they belong to.

    SAME, INSERT and CHANGE advance one character; INSERT and CHANGE
    mark it as failed. DELETE has no kana counterpart.
    """
    fails = []
    index = 0
    for op in ops:
        if op.op is DiffOp.DELETE:
            continue
        if op.op is not DiffOp.SAME:
            fails.append(chars[index])
        index += 1
    return fails


def check_answer(kana: str, answer: str) -> Match:
    """
    Check a romaji answer for a kana word.

    Args:
        kana: The kana word shown to the learner
        answer: What the learner typed

    Returns:
        Match with the diff and the failed characters

    Example:
        >>> check_answer("まって", "MATTE").is_match
        True
        >>> check_answer("ひらがな", "hiragama").fails
        ['な']
    """
    syllables = split_romaji(kana)
    romaji = normalize_answer(answer)
    ops = diff(syllables, romaji)
    chars = list(kana)

    return Match(
        kana=kana,
        romaji=romaji,
        actual=to_romaji(kana),
        split=chars,
        diff=ops,
        fails=failed_chars(ops, chars),
    )
