"""
Constants shared by the kana-drill modules.

Placeholders used in the romanization, the long vowel glyphs and the
character sets offered for practice.
"""

from typing import Dict


# ============================================================================
# Romanization Placeholders
# ============================================================================

# A small tsu with no consonant to double
TSU_PLACEHOLDER = "~tsu"

# Digraph base after a small tsu or a digraph. Two characters so that
# dropping the trailing vowel still leaves a prefix.
INVALID_PREFIX = "~~"

# Long bar that cannot lengthen the previous sound
LONG_DASH = "-"

# Katakana long bar
LONG_MARK = "ー"

VOWELS = "aiueo"

# Glide suffixes drop their `y` after these prefixes (しゃ -> sha). `y`
# comes from the イ prefix: イョ -> yo, not yyo.
Y_DROP_PREFIXES = ("ch", "sh", "j", "y")


# ============================================================================
# Long Vowels
# ============================================================================

LONG_VOWELS: Dict[str, str] = {
    'a': 'ā',
    'i': 'ī',
    'u': 'ū',
    'e': 'ē',
    'o': 'ō',
}

# Long `n` is written with a combining macron (two characters)
LONG_N = "n\u0304"

# Folding of the long forms back to doubled ASCII letters
ASCII_LONG_FORMS: Dict[str, str] = {
    **{glyph: vowel * 2 for vowel, glyph in LONG_VOWELS.items()},
    LONG_N: "nn",
}


# ============================================================================
# Practice Character Sets
# ============================================================================

SET_RARE = "ぺぢヌヅを"

SET_HIRAGANA = (
    "あいうえおかきくけこがぎぐげごさしすせそざじずぜぞたちつてとだづでど"
    "なにぬねのはひふへほばびぶべぼぱぴぷぽまみむめもやゆよらりるれろわん"
)

SET_KATAKANA = (
    "アイウエオカキクケコガギグゲゴサシスセソザジズゼゾタチツテトダヂデド"
    "ナニヌネノハヒフヘホバビブベボパピプペポマミムメモヤユヨラリルレロワヲン"
)

SET_ALL = SET_HIRAGANA + SET_KATAKANA
SET_ALL_RARE = SET_HIRAGANA + SET_KATAKANA + SET_RARE

# Names accepted by the command line for the sets above
CHARACTER_SETS: Dict[str, str] = {
    'hiragana': SET_HIRAGANA,
    'katakana': SET_KATAKANA,
    'rare': SET_RARE,
    'all': SET_ALL,
    'all-rare': SET_ALL_RARE,
}

# Default character budget for a training word set
DEFAULT_BUDGET = 500
