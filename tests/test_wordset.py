"""Tests for the word set builder (wordset.py)."""

import random

import pytest

from kana_drill.words import WordCorpus, WordRecord
from kana_drill.wordset import WordSet, build_set, choose_word


def covered(word_set):
    return {char for record in word_set.words for char in record.word}


# ── Coverage ──────────────────────────────────────────────────────────────────

def test_build_set_covers_charset(latin_corpus, rng):
    word_set = build_set("abc", 0, latin_corpus, rng)
    assert covered(word_set) >= set("abc")
    assert word_set.missing == []
    assert word_set.chars == sum(len(r.word) for r in word_set.words)


def test_build_set_corpus_order(latin_corpus, rng):
    word_set = build_set("abc", 100, latin_corpus, rng)
    indexes = [latin_corpus.words.index(r) for r in word_set.words]
    assert indexes == sorted(indexes)


def test_build_set_reports_missing(latin_corpus, rng):
    word_set = build_set("abz", 0, latin_corpus, rng)
    assert word_set.missing == ["z"]
    assert covered(word_set) >= set("ab")


def test_build_set_nothing_to_cover(latin_corpus, rng):
    word_set = build_set("zy", 0, latin_corpus, rng)
    assert word_set.words == []
    assert word_set.chars == 0
    assert word_set.missing == ["y", "z"]


def test_build_set_kana(kana_corpus, rng):
    word_set = build_set("ねこいぬ", 0, kana_corpus, rng)
    assert [r.word for r in word_set.words] == ["ねこ", "いぬ"]
    assert word_set.chars == 4
    assert word_set.missing == []


def test_build_set_skips_zero_count(rng):
    corpus = WordCorpus.from_records([("ab", 0), ("c", 2)])
    word_set = build_set("abc", 0, corpus, rng)
    assert word_set.words == [WordRecord("c", 2)]
    assert word_set.missing == ["a", "b"]


def test_build_set_negative_budget(latin_corpus):
    with pytest.raises(ValueError):
        build_set("abc", -1, latin_corpus)


# ── Budget ────────────────────────────────────────────────────────────────────

def test_build_set_fill_under_budget(latin_corpus, rng):
    # The corpus runs out before the budget is reached
    word_set = build_set("abc", 100, latin_corpus, rng)
    assert len(word_set.words) == 4
    assert word_set.chars == 8
    assert word_set.missing == []


def test_build_set_fill_reaches_budget(rng):
    corpus = WordCorpus.from_records([(f"a{n}", 1) for n in range(10)])
    word_set = build_set("a", 10, corpus, rng)
    assert word_set.chars == 10
    assert len(word_set.words) == 5


def test_build_set_budget_reached_before_coverage(latin_corpus, rng):
    word_set = build_set("abc", 1, latin_corpus, rng)
    assert len(word_set.words) == 1
    assert word_set.missing == sorted(set("abc") - covered(word_set))


def test_build_set_is_reproducible(latin_corpus):
    first = build_set("abc", 6, latin_corpus, random.Random(7))
    second = build_set("abc", 6, latin_corpus, random.Random(7))
    assert first == second


# ── choose_word ───────────────────────────────────────────────────────────────

def test_choose_word(latin_corpus, rng):
    assert choose_word(latin_corpus, "a", set(), rng) in (0, 2)
    assert choose_word(latin_corpus, "a", {0}, rng) == 2
    assert choose_word(latin_corpus, "a", {0, 2}, rng) is None
    assert choose_word(latin_corpus, "z", set(), rng) is None


# ── WordSet ───────────────────────────────────────────────────────────────────

@pytest.fixture
def word_set():
    return WordSet(
        words=[WordRecord(word, 1) for word in ["ねこ", "いぬ", "さかな", "とり"]],
        chars=9,
    )


def test_swap_current_last_index(word_set, rng):
    before = list(word_set.words)
    assert word_set.swap_current(3, rng) == 3
    assert word_set.words == before


def test_swap_current_moves_forward(word_set):
    for seed in range(20):
        rng = random.Random(seed)
        index = seed % 3
        current = word_set.words[index]
        new_index = word_set.swap_current(index, rng)
        assert new_index > index
        assert word_set.words[new_index] == current


def test_swap_current_empty(rng):
    assert WordSet().swap_current(0, rng) == 0


def test_shuffle(word_set, rng):
    before = list(word_set.words)
    word_set.shuffle(rng)
    assert sorted(word_set.words) == sorted(before)
    assert len(word_set) == 4
