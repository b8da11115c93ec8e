"""Tests for syllable splitting (splits.py)."""

from kana_drill.splits import doubling_letter, split_romaji


# ── Basic cases ───────────────────────────────────────────────────────────────

def test_split_empty():
    assert split_romaji("") == []


def test_split_non_kana_passthrough():
    assert split_romaji("abc") == ["a", "b", "c"]


def test_split_hiragana():
    assert split_romaji("あそび あそばせ") == ["a", "so", "bi", " ", "a", "so", "ba", "se"]


def test_split_katakana():
    assert split_romaji("アソビ アソバセ") == ["a", "so", "bi", " ", "a", "so", "ba", "se"]


def test_split_one_entry_per_character():
    for text in ["だって", "きゃにゅびょ", "ハーハー", "ッハッッイョ", "シェフュ", "あっ"]:
        assert len(split_romaji(text)) == len(text), text


# ── Small tsu ─────────────────────────────────────────────────────────────────

def test_split_small_tsu():
    assert split_romaji("だって") == ["da", "t", "te"]
    assert split_romaji("ダッテ") == ["da", "t", "te"]


def test_split_small_tsu_chi():
    assert split_romaji("こっち") == ["ko", "t", "chi"]


def test_split_small_tsu_stacked():
    assert split_romaji("っっコ") == ["k", "k", "ko"]


def test_split_small_tsu_non_kana():
    assert split_romaji("っk") == ["k", "k"]


def test_split_small_tsu_at_end():
    assert split_romaji("あっ") == ["a", "~tsu"]
    assert split_romaji("っっ") == ["~tsu", "~tsu"]


def test_doubling_letter():
    assert doubling_letter("chi") == "t"
    assert doubling_letter("ka") == "k"
    assert doubling_letter("tsu") == "t"


# ── Long bar ──────────────────────────────────────────────────────────────────

def test_split_long_bar():
    assert split_romaji("ハーハー") == ["ha", "a", "ha", "a"]
    assert split_romaji("ンー") == ["n", "n"]
    assert split_romaji("xー") == ["x", "x"]


def test_split_long_bar_at_start():
    assert split_romaji("ー") == ["ー"]
    assert split_romaji("ーア") == ["ー", "a"]


# ── Digraphs ──────────────────────────────────────────────────────────────────

def test_split_digraphs_basic():
    assert split_romaji("きゃにゅびょ") == ["k", "ya", "n", "yu", "b", "yo"]
    assert split_romaji("キャニュビョ") == ["k", "ya", "n", "yu", "b", "yo"]


def test_split_digraphs_dropping_y():
    assert split_romaji("しゃじゃちゃぢゃシェフュ") == [
        "sh", "a", "j", "a", "ch", "a", "dj", "a", "sh", "e", "f", "yu",
    ]


def test_split_digraphs_alternate_prefix():
    assert split_romaji("イョ") == ["y", "o"]
    assert split_romaji("ウィ") == ["w", "i"]
    assert split_romaji("クォ") == ["kw", "o"]
    assert split_romaji("グァ") == ["gw", "a"]


def test_split_digraphs_vu():
    assert split_romaji("ヴァ") == ["v", "a"]
    assert split_romaji("ヴア") == ["vu", "a"]
    assert split_romaji("ヴヴ") == ["vu", "vu"]


def test_split_small_kana_alone():
    assert split_romaji("ゃ") == ["ya"]
    assert split_romaji("ァ") == ["a"]


# ── Small tsu with digraphs ───────────────────────────────────────────────────

def test_split_tsu_with_digraph():
    assert split_romaji("ッイョ") == ["y", "y", "o"]
    assert split_romaji("ッッイョ") == ["y", "y", "y", "o"]
    assert split_romaji("ハッイョ") == ["ha", "y", "y", "o"]
    assert split_romaji("ハッッイョ") == ["ha", "y", "y", "y", "o"]
    assert split_romaji("ッハッッイョ") == ["h", "ha", "y", "y", "y", "o"]
    assert split_romaji("ッハッッイイョ") == ["h", "ha", "i", "i", "i", "y", "o"]
    assert split_romaji("ッハッッイッッッイョ") == [
        "h", "ha", "i", "i", "i", "y", "y", "y", "y", "o",
    ]


def test_split_tsu_with_y_digraph():
    assert split_romaji("ファッション") == ["f", "a", "s", "sh", "o", "n"]
    assert split_romaji("ッチャ") == ["t", "ch", "a"]
