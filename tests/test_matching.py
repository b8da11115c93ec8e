"""Tests for answer checking (matching.py)."""

from kana_drill.diff import Diff, DiffOp
from kana_drill.matching import check_answer, failed_chars, normalize_answer


def test_normalize_answer():
    assert normalize_answer("KŌHĪ") == "koohii"
    assert normalize_answer("x-") == "xー"
    assert normalize_answer("Neko") == "neko"


def test_check_answer_exact():
    match = check_answer("まって", "matte")
    assert match.is_match
    assert match.fails == []
    assert match.actual == "matte"
    assert match.split == ["ま", "っ", "て"]


def test_check_answer_ignores_case():
    assert check_answer("まって", "MATTE").is_match


def test_check_answer_long_vowel_forms():
    assert check_answer("コーヒー", "koohii").is_match
    assert check_answer("コーヒー", "kōhī").is_match
    assert not check_answer("コーヒー", "kohi").is_match


def test_check_answer_long_bar_without_vowel():
    assert check_answer("ー", "-").is_match


def test_check_answer_wrong_syllable():
    match = check_answer("ひらがな", "hiragama")
    assert not match.is_match
    assert match.fails == ["な"]
    assert match.diff[-1] == Diff.change("ma", "na")


def test_check_answer_missing_syllable():
    match = check_answer("ひらがな", "hiraga")
    assert match.fails == ["な"]
    assert match.diff[-1] == Diff.insert("na")


def test_check_answer_extra_text_not_failed():
    match = check_answer("ねこ", "nekoo")
    assert not match.is_match
    assert match.fails == []
    assert match.diff[-1].op is DiffOp.DELETE


def test_check_answer_small_tsu():
    match = check_answer("きって", "kiite")
    assert match.fails == ["っ"]


def test_check_answer_to_dict():
    data = check_answer("ねこ", "neko").to_dict()
    assert data["is_match"] is True
    assert data["actual"] == "neko"
    assert data["split"] == ["ね", "こ"]
    assert data["diff"] == [
        {"op": "same", "text": "ne"},
        {"op": "same", "text": "ko"},
    ]
    assert data["fails"] == []


def test_failed_chars_skips_delete():
    ops = [Diff.delete("x"), Diff.same("a"), Diff.insert("b"), Diff.delete("y"), Diff.change("z", "c")]
    assert failed_chars(ops, ["A", "B", "C"]) == ["B", "C"]
