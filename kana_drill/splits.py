"""
Syllable splitting for kana-drill.

Splits kana text into romaji syllables, one entry per kana character:

    だって -> ["da", "t", "te"]
    きゃく -> ["k", "ya", "ku"]
    ハーハー -> ["ha", "a", "ha", "a"]

The split is the unit used to grade answers: every entry maps back to a
character of the original text, so a wrong entry identifies the kana
that was missed. Characters outside the kana table pass through as
one-character entries.
"""

from typing import List

from kana_drill.constants import INVALID_PREFIX, TSU_PLACEHOLDER, Y_DROP_PREFIXES
from kana_drill.tables import Bar, Chr, Dig, Small, SmallTsu, lookup


def doubling_letter(syllable: str) -> str:
    """
    Get the consonant doubled by a small tsu before a syllable.

    `ch` is doubled as `t` (こっち -> kotchi, めっちゃ -> metcha),
    anything else by its first letter.
    """
    if syllable.startswith("ch"):
        return "t"
    return syllable[0]


def split_romaji(text: str) -> List[str]:
    """
    Split kana text into romaji syllables.

    Args:
        text: Text to split, any characters allowed

    Returns:
        List of syllables. Joining them gives the plain ASCII romaji
        (long vowels as doubled letters).

    Example:
        >>> split_romaji("ッハッッイョ")
        ['h', 'ha', 'y', 'y', 'y', 'o']
    """
    out: List[str] = []

    # Small tsu seen and waiting for the next syllable
    pending = 0
    # Duplicates pushed right before the last entry
    doubled = 0
    # Syllable a following small kana forms the digraph with
    base = INVALID_PREFIX

    def push(value: str) -> None:
        nonlocal pending, doubled
        if pending:
            out.extend([doubling_letter(value)] * pending)
        doubled, pending = pending, 0
        out.append(value)

    for char in text:
        kana = lookup(char)

        if kana is None:
            push(char)
            base = char

        elif isinstance(kana, Chr):
            push(kana.romaji)
            base = kana.romaji

        elif isinstance(kana, Dig):
            push(kana.romaji)
            base = kana.prefix

        elif isinstance(kana, SmallTsu):
            pending += 1
            base = INVALID_PREFIX

        elif isinstance(kana, Bar):
            last = out[-1][-1:] if out else ""
            push(last or kana.char)
            base = out[-1]

        elif isinstance(kana, Small):
            if not out:
                push(kana.suffix)
            else:
                suffix = kana.suffix
                prefix = base[:-1]
                if suffix.startswith("y") and prefix.endswith(Y_DROP_PREFIXES):
                    suffix = suffix[1:]

                out[-1] = prefix

                # Consonants doubled for the syllable follow its new prefix
                if doubled and prefix:
                    for k in range(doubled):
                        out[-2 - k] = doubling_letter(prefix)
                doubled = 0

                out.append(suffix)
            base = INVALID_PREFIX

        else:
            raise TypeError(f"Unknown kana descriptor: {kana!r}")

    out.extend([TSU_PLACEHOLDER] * pending)
    return out
