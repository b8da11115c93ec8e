"""Shared test fixtures."""

import random

import pytest

from kana_drill.words import WordCorpus


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def latin_corpus() -> WordCorpus:
    """Corpus of Latin words; they romanize to themselves."""
    return WordCorpus.from_records([
        ("ab", 10),
        ("bc", 5),
        ("ca", 3),
        ("cc", 1),
    ])


@pytest.fixture
def kana_corpus() -> WordCorpus:
    """Small kana corpus with one invalid entry."""
    return WordCorpus.from_records([
        ("ねこ", 120),
        ("いぬ", 95),
        ("さかな", 60),
        ("コーヒー", 40),
        ("猫", 200),
        ("あっ", 30),
    ])
