"""
Word list for kana-drill.

Holds the (word, frequency) pairs used to build practice word sets.

Words are kept only if their romanization is plain ASCII letters, digits
and hyphens, which filters out entries with kanji, stray symbols or
kana that do not romanize cleanly. The valid words are indexed by
character so the word-set builder can find every word containing a
given kana.

The word list is read from either:
- a text file: a header line, then `rank,word,count` lines
- a compiled marisa_trie.RecordTrie (word -> count), memory-mapped

The compiled file is built with scripts/build_wordlist.py.
"""

import csv
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import marisa_trie

from kana_drill.romaji import to_ascii, to_romaji

logger = logging.getLogger(__name__)

# Record format of the compiled word list: the count as int32
RECORD_FORMAT = "<i"

TEXT_SUFFIXES = (".csv", ".txt")

_VALID_ROMAJI_RE = re.compile(r"^[-a-zA-Z0-9]+$")


class WordRecord(NamedTuple):
    """A word with its number of occurrences."""
    word: str
    count: int


def is_valid_word(word: str) -> bool:
    """Check if a word romanizes to ASCII letters, digits and hyphens only."""
    return _VALID_ROMAJI_RE.match(to_ascii(to_romaji(word))) is not None


# ============================================================================
# Corpus
# ============================================================================

class WordCorpus:
    """
    Valid words of a word list, indexed by character.

    Built once from the raw records and not modified afterwards.

    Attributes:
        words: Valid word records, in input order
        by_char: Character -> indexes in `words` of the words containing it
    """

    def __init__(self, words: Sequence[WordRecord]):
        self.words: List[WordRecord] = list(words)
        self.by_char: Dict[str, List[int]] = {}
        for index, record in enumerate(self.words):
            for char in dict.fromkeys(record.word):
                self.by_char.setdefault(char, []).append(index)

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, int]]) -> "WordCorpus":
        """
        Build a corpus from raw (word, count) pairs, dropping invalid words.
        """
        valid = []
        skipped = 0
        for word, count in records:
            if is_valid_word(word):
                valid.append(WordRecord(word, int(count)))
            else:
                skipped += 1
        logger.debug(f"Word corpus: {len(valid)} valid words, {skipped} skipped")
        return cls(valid)

    def candidates(self, char: str) -> List[int]:
        """Indexes of the words containing `char`."""
        return self.by_char.get(char, [])

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> WordRecord:
        return self.words[index]

    def __repr__(self) -> str:
        return f"<WordCorpus({len(self.words)} words, {len(self.by_char)} chars)>"


# ============================================================================
# Word List Files
# ============================================================================

def get_wordlist_path() -> Path:
    """Get the default compiled word list path."""
    return Path(__file__).parent / "data" / "words.dic"


def read_word_csv(path: Path) -> List[WordRecord]:
    """
    Read a word list text file.

    The first line is a header. Every other non-blank line is
    `rank,word,count`, extra columns are ignored.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a line has missing columns or a bad count
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found at {path}")

    records = []
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if not row or not "".join(row).strip():
                continue
            if len(row) < 3:
                raise ValueError(f"{path}:{reader.line_num}: expected rank,word,count")
            try:
                count = int(row[2])
            except ValueError:
                raise ValueError(f"{path}:{reader.line_num}: invalid count {row[2]!r}")
            records.append(WordRecord(row[1].strip(), count))

    return records


def save_word_records(records: Iterable[Tuple[str, int]], path: Path) -> marisa_trie.RecordTrie:
    """Compile word records into a RecordTrie file."""
    path = Path(path)
    trie = marisa_trie.RecordTrie(RECORD_FORMAT, ((word, (int(count),)) for word, count in records))
    path.parent.mkdir(parents=True, exist_ok=True)
    trie.save(str(path))
    return trie


def load_word_records(path: Path) -> List[WordRecord]:
    """
    Load a compiled word list.

    Records are returned most frequent first.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Word list not found at {path}. "
            "Run 'python scripts/build_wordlist.py' to build it."
        )

    trie = marisa_trie.RecordTrie(RECORD_FORMAT)
    trie.mmap(str(path))

    records = [WordRecord(word, record[0]) for word, record in trie.items()]
    records.sort(key=lambda r: (-r.count, r.word))
    return records


def load_corpus(path: Optional[Path] = None) -> WordCorpus:
    """
    Load a word list file into a corpus.

    Args:
        path: Text (.csv, .txt) or compiled word list. Uses the default
            compiled list if not specified.
    """
    if path is None:
        path = get_wordlist_path()
    path = Path(path)

    if path.suffix in TEXT_SUFFIXES:
        records = read_word_csv(path)
    else:
        records = load_word_records(path)

    logger.info(f"Loaded {len(records)} words from {path}")
    return WordCorpus.from_records(records)


# Module-level singleton
_CORPUS: Optional[WordCorpus] = None


def get_default_corpus() -> WordCorpus:
    """Get the corpus for the default word list. Loads it on first use."""
    global _CORPUS
    if _CORPUS is None:
        _CORPUS = load_corpus()
    return _CORPUS


def unload_corpus():
    """Drop the cached default corpus."""
    global _CORPUS
    _CORPUS = None
