"""
Word set builder for kana-drill.

Picks practice words so that every character of a target set appears in
at least one word, preferring common words:

1. Coverage: while some target character is not covered, pick one at
   random and add a word containing it, chosen with probability
   proportional to its frequency.
2. Fill: if a character budget was given and is not reached yet, keep
   adding one word per target character (in random order) until the
   budget is reached or no word can be added.

All randomness comes from a random.Random passed by the caller, so a
seeded generator reproduces the same set.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Set

from kana_drill.words import WordCorpus, WordRecord

logger = logging.getLogger(__name__)


@dataclass
class WordSet:
    """
    Words chosen for a training session.

    Attributes:
        words: Chosen words
        chars: Total number of characters in the chosen words
        missing: Target characters not covered by any chosen word, sorted
    """
    words: List[WordRecord] = field(default_factory=list)
    chars: int = 0
    missing: List[str] = field(default_factory=list)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the words in place."""
        rng = rng or random.Random()
        rng.shuffle(self.words)

    def swap_current(self, index: int, rng: Optional[random.Random] = None) -> int:
        """
        Swap the word at `index` with a random word after it.

        Used to postpone the current word. Does nothing for the last word.

        Returns:
            The new index of the word that was at `index`
        """
        size = len(self.words)
        if index >= size - 1:
            return index

        rng = rng or random.Random()
        next_index = rng.randrange(index + 1, size)
        self.words[index], self.words[next_index] = self.words[next_index], self.words[index]
        return next_index

    def __len__(self) -> int:
        return len(self.words)


def choose_word(corpus: WordCorpus, char: str, chosen: Set[int], rng: random.Random) -> Optional[int]:
    """
    Pick a word containing `char` that is not chosen yet.

    Words are weighted by their count. Returns None when no word with a
    positive count is left.
    """
    indexes = [index for index in corpus.candidates(char) if index not in chosen]
    weights = [max(corpus[index].count, 0) for index in indexes]
    if not indexes or sum(weights) <= 0:
        return None
    return rng.choices(indexes, weights=weights, k=1)[0]


def build_set(
    charset: str,
    budget: int,
    corpus: WordCorpus,
    rng: Optional[random.Random] = None,
) -> WordSet:
    """
    Build a word set covering the characters in `charset`.

    Args:
        charset: Target characters
        budget: Minimum total characters wanted. With 0 the set stops as
            soon as every character is covered.
        corpus: Words to choose from
        rng: Random source. A new unseeded generator if not given.

    Returns:
        WordSet with the words in corpus order. With a budget the set may
        end up smaller than the budget if the corpus runs out of words.

    Raises:
        ValueError: If budget is negative
    """
    if budget < 0:
        raise ValueError("budget must be >= 0")

    rng = rng or random.Random()

    required = set(charset)
    chosen: Set[int] = set()
    missing: Set[str] = set()
    chars = 0

    # Coverage phase
    while required and (budget == 0 or chars < budget):
        # Pick the character first so that characters with many words
        # do not dominate the set
        char = rng.choice(sorted(required))
        required.discard(char)

        index = choose_word(corpus, char, chosen, rng)
        if index is None:
            missing.add(char)
            continue

        chosen.add(index)
        for word_char in corpus[index].word:
            chars += 1
            required.discard(word_char)

    # Characters left when the budget ran out
    missing.update(required)

    logger.debug(f"Coverage phase: {len(chosen)} words, {chars} chars, {len(missing)} missing")

    # Fill phase
    letters = list(charset)
    changed = True
    while chars < budget and changed:
        changed = False
        rng.shuffle(letters)
        for char in letters:
            index = choose_word(corpus, char, chosen, rng)
            if index is None:
                continue
            chosen.add(index)
            changed = True
            chars += len(corpus[index].word)
            if chars >= budget:
                break

    logger.debug(f"Word set: {len(chosen)} words, {chars} chars")

    return WordSet(
        words=[corpus[index] for index in sorted(chosen)],
        chars=chars,
        missing=sorted(missing),
    )
