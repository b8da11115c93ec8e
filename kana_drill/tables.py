"""
Kana table for kana-drill.

Maps every supported hiragana and katakana character to a descriptor of
how it romanizes. The descriptor is one of five variants:

- SmallTsu: っ/ッ, doubles the following consonant
- Small: small ゃ/ャ, ぁ/ァ, ... used as the second half of a digraph
- Bar: the katakana long bar ー
- Chr: a plain syllable (e.g. か -> ka)
- Dig: a plain syllable that also has an alternate digraph prefix
  (e.g. ク -> ku, but クォ -> kwo)

The module also holds the digraph rules, multi-character katakana
sequences romanized as a single syllable (e.g. ティ -> ti). They are
stored in a marisa_trie.Trie for prefix matching.

Both tables are built once at import time and never modified.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

import marisa_trie

logger = logging.getLogger(__name__)


class DuplicateKanaError(Exception):
    """Raised when the kana table maps the same character twice."""
    pass


# ============================================================================
# Descriptors
# ============================================================================

@dataclass(frozen=True, slots=True)
class SmallTsu:
    """Gemination marker (っ or ッ)."""
    char: str


@dataclass(frozen=True, slots=True)
class Small:
    """Small kana used as a digraph suffix (e.g. ゃ -> "ya")."""
    char: str
    suffix: str


@dataclass(frozen=True, slots=True)
class Bar:
    """Long vowel mark (ー)."""
    char: str


@dataclass(frozen=True, slots=True)
class Chr:
    """Plain syllable."""
    char: str
    romaji: str


@dataclass(frozen=True, slots=True)
class Dig:
    """
    Plain syllable that forms a custom digraph with a small kana.

    Attributes:
        char: The kana character
        romaji: Romaji when used alone
        prefix: Syllable used as the digraph base (e.g. "kwa" for ク)
    """
    char: str
    romaji: str
    prefix: str


Kana = Union[SmallTsu, Small, Bar, Chr, Dig]


# ============================================================================
# Kana Table
# ============================================================================

# Digraph suffixes of the small kana
SUFFIX_YA = "ya"
SUFFIX_YU = "yu"
SUFFIX_YO = "yo"

# Alternate digraph prefixes
PREFIX_W = "wa"    # ウ
PREFIX_Y = "ya"    # イ
PREFIX_K = "kwa"   # ク
PREFIX_G = "gwa"   # グ

TABLE: Tuple[Kana, ...] = (
    #
    # Katakana
    #
    SmallTsu('ッ'),
    Small('ャ', SUFFIX_YA),
    Small('ュ', SUFFIX_YU),
    Small('ョ', SUFFIX_YO),
    Small('ァ', 'a'),
    Small('ィ', 'i'),
    Small('ゥ', 'u'),
    Small('ェ', 'e'),
    Small('ォ', 'o'),
    Chr('ヴ', 'vu'),
    Bar('ー'),
    # A
    Chr('ア', 'a'), Dig('イ', 'i', PREFIX_Y), Dig('ウ', 'u', PREFIX_W), Chr('エ', 'e'), Chr('オ', 'o'),
    # KA
    Chr('カ', 'ka'), Chr('キ', 'ki'), Dig('ク', 'ku', PREFIX_K), Chr('ケ', 'ke'), Chr('コ', 'ko'),
    # GA
    Chr('ガ', 'ga'), Chr('ギ', 'gi'), Dig('グ', 'gu', PREFIX_G), Chr('ゲ', 'ge'), Chr('ゴ', 'go'),
    # SA
    Chr('サ', 'sa'), Chr('シ', 'shi'), Chr('ス', 'su'), Chr('セ', 'se'), Chr('ソ', 'so'),
    # ZA
    Chr('ザ', 'za'), Chr('ジ', 'ji'), Chr('ズ', 'zu'), Chr('ゼ', 'ze'), Chr('ゾ', 'zo'),
    # TA
    Chr('タ', 'ta'), Chr('チ', 'chi'), Chr('ツ', 'tsu'), Chr('テ', 'te'), Chr('ト', 'to'),
    # DA
    Chr('ダ', 'da'), Chr('ヂ', 'dji'), Chr('ヅ', 'dzu'), Chr('デ', 'de'), Chr('ド', 'do'),
    # NA
    Chr('ナ', 'na'), Chr('ニ', 'ni'), Chr('ヌ', 'nu'), Chr('ネ', 'ne'), Chr('ノ', 'no'),
    # HA
    Chr('ハ', 'ha'), Chr('ヒ', 'hi'), Chr('フ', 'fu'), Chr('ヘ', 'he'), Chr('ホ', 'ho'),
    # BA
    Chr('バ', 'ba'), Chr('ビ', 'bi'), Chr('ブ', 'bu'), Chr('ベ', 'be'), Chr('ボ', 'bo'),
    # PA
    Chr('パ', 'pa'), Chr('ピ', 'pi'), Chr('プ', 'pu'), Chr('ペ', 'pe'), Chr('ポ', 'po'),
    # MA
    Chr('マ', 'ma'), Chr('ミ', 'mi'), Chr('ム', 'mu'), Chr('メ', 'me'), Chr('モ', 'mo'),
    # YA
    Chr('ヤ', 'ya'), Chr('ユ', 'yu'), Chr('ヨ', 'yo'),
    # RA
    Chr('ラ', 'ra'), Chr('リ', 'ri'), Chr('ル', 'ru'), Chr('レ', 're'), Chr('ロ', 'ro'),
    # WA
    Chr('ワ', 'wa'), Chr('ヲ', 'wo'), Chr('ン', 'n'),
    #
    # Hiragana
    #
    SmallTsu('っ'),
    Small('ゃ', SUFFIX_YA),
    Small('ゅ', SUFFIX_YU),
    Small('ょ', SUFFIX_YO),
    Small('ぁ', 'a'),
    Small('ぃ', 'i'),
    Small('ぅ', 'u'),
    Small('ぇ', 'e'),
    Small('ぉ', 'o'),
    # A
    Chr('あ', 'a'), Chr('い', 'i'), Chr('う', 'u'), Chr('え', 'e'), Chr('お', 'o'),
    # KA
    Chr('か', 'ka'), Chr('き', 'ki'), Chr('く', 'ku'), Chr('け', 'ke'), Chr('こ', 'ko'),
    # GA
    Chr('が', 'ga'), Chr('ぎ', 'gi'), Chr('ぐ', 'gu'), Chr('げ', 'ge'), Chr('ご', 'go'),
    # SA
    Chr('さ', 'sa'), Chr('し', 'shi'), Chr('す', 'su'), Chr('せ', 'se'), Chr('そ', 'so'),
    # ZA
    Chr('ざ', 'za'), Chr('じ', 'ji'), Chr('ず', 'zu'), Chr('ぜ', 'ze'), Chr('ぞ', 'zo'),
    # TA
    Chr('た', 'ta'), Chr('ち', 'chi'), Chr('つ', 'tsu'), Chr('て', 'te'), Chr('と', 'to'),
    # DA
    Chr('だ', 'da'), Chr('ぢ', 'dji'), Chr('づ', 'dzu'), Chr('で', 'de'), Chr('ど', 'do'),
    # NA
    Chr('な', 'na'), Chr('に', 'ni'), Chr('ぬ', 'nu'), Chr('ね', 'ne'), Chr('の', 'no'),
    # HA
    Chr('は', 'ha'), Chr('ひ', 'hi'), Chr('ふ', 'fu'), Chr('へ', 'he'), Chr('ほ', 'ho'),
    # BA
    Chr('ば', 'ba'), Chr('び', 'bi'), Chr('ぶ', 'bu'), Chr('べ', 'be'), Chr('ぼ', 'bo'),
    # PA
    Chr('ぱ', 'pa'), Chr('ぴ', 'pi'), Chr('ぷ', 'pu'), Chr('ぺ', 'pe'), Chr('ぽ', 'po'),
    # MA
    Chr('ま', 'ma'), Chr('み', 'mi'), Chr('む', 'mu'), Chr('め', 'me'), Chr('も', 'mo'),
    # YA
    Chr('や', 'ya'), Chr('ゆ', 'yu'), Chr('よ', 'yo'),
    # RA
    Chr('ら', 'ra'), Chr('り', 'ri'), Chr('る', 'ru'), Chr('れ', 're'), Chr('ろ', 'ro'),
    # WA
    Chr('わ', 'wa'), Chr('を', 'wo'), Chr('ん', 'n'),
)


def build_table(entries: Iterable[Kana]) -> Dict[str, Kana]:
    """
    Build the character lookup map from a list of descriptors.

    Args:
        entries: Kana descriptors

    Returns:
        Dict mapping each character to its descriptor

    Raises:
        DuplicateKanaError: If a character appears more than once
    """
    table: Dict[str, Kana] = {}
    for entry in entries:
        if entry.char in table:
            raise DuplicateKanaError(f"Character {entry.char!r} duplicated in kana table")
        table[entry.char] = entry
    logger.debug(f"Built kana table with {len(table)} characters")
    return table


KANA_TABLE: Dict[str, Kana] = build_table(TABLE)


def lookup(char: str) -> Optional[Kana]:
    """Get the descriptor for a kana character, or None if not in the table."""
    return KANA_TABLE.get(char)


def is_kana(char: str) -> bool:
    """Check if a character is in the kana table."""
    return char in KANA_TABLE


# ============================================================================
# Digraph Rules
# ============================================================================

# Katakana sequences romanized as a single syllable. No rule is a prefix
# of another, so the order is not significant.
DIGRAPH_RULES: Tuple[Tuple[str, str], ...] = (
    ('ティ', 'ti'), ('ディ', 'di'),
    ('トゥ', 'tu'), ('ドゥ', 'du'),
    ('テュ', 'tyu'), ('デュ', 'dyu'),
    ('ファ', 'fa'), ('フィ', 'fi'), ('フェ', 'fe'), ('フォ', 'fo'), ('フュ', 'fyu'),
    ('ウィ', 'wi'), ('ウェ', 'we'), ('ウォ', 'wo'),
    ('ヴァ', 'va'), ('ヴィ', 'vi'), ('ヴェ', 've'), ('ヴォ', 'vo'),
    ('シェ', 'she'), ('ジェ', 'je'), ('チェ', 'che'),
    ('ツァ', 'tsa'), ('ツィ', 'tsi'), ('ツェ', 'tse'), ('ツォ', 'tso'),
    ('クァ', 'kwa'), ('クィ', 'kwi'), ('クェ', 'kwe'), ('クォ', 'kwo'),
    ('グァ', 'gwa'),
    ('イェ', 'ye'),
)

DIGRAPH_MAP: Dict[str, str] = dict(DIGRAPH_RULES)

DIGRAPH_TRIE = marisa_trie.Trie(DIGRAPH_MAP.keys())

DIGRAPH_MAX_LENGTH = max(len(key) for key in DIGRAPH_MAP)


class Piece(NamedTuple):
    """
    One unit of text after digraph substitution.

    `romaji` is set when `text` matched a digraph rule, otherwise `text`
    is a single character of the input.
    """
    text: str
    romaji: Optional[str] = None


def apply_digraphs(text: str) -> List[Piece]:
    """
    Replace digraph rule matches in text.

    Scans left to right taking the longest rule matching at each
    position; characters not covered by a rule are returned one per
    piece.

    Args:
        text: Kana text

    Returns:
        List of Piece objects covering the whole text in order
    """
    pieces: List[Piece] = []
    i = 0
    n = len(text)

    while i < n:
        matches = DIGRAPH_TRIE.prefixes(text[i:i + DIGRAPH_MAX_LENGTH])
        if matches:
            key = max(matches, key=len)
            pieces.append(Piece(key, DIGRAPH_MAP[key]))
            i += len(key)
        else:
            pieces.append(Piece(text[i]))
            i += 1

    return pieces
