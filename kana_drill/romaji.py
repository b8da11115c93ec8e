"""
Kana to romaji conversion for kana-drill.

Unlike split_romaji, which keeps one syllable per kana for grading, this
module produces the romanization shown to the learner:

    コーヒー -> kōhī
    ラーメン -> rāmen
    ティーシャツ -> tīshatsu

Long vowels use macron glyphs, a long `n` is written `n̄`. to_ascii()
folds these back to doubled letters, and romaji_equals() compares two
romanizations accepting either form.
"""

from typing import Optional

from kana_drill.constants import (
    ASCII_LONG_FORMS,
    LONG_DASH,
    LONG_N,
    LONG_VOWELS,
    TSU_PLACEHOLDER,
    VOWELS,
    Y_DROP_PREFIXES,
)
from kana_drill.splits import doubling_letter
from kana_drill.tables import Bar, Chr, Dig, Kana, Small, SmallTsu, apply_digraphs, lookup


def to_romaji(text: str) -> str:
    """
    Convert kana text to romaji.

    Characters outside the kana table are copied unchanged. The result
    depends only on `text`.

    Args:
        text: Kana text

    Returns:
        Romanized text

    Example:
        >>> to_romaji("まって")
        'matte'
        >>> to_romaji("パーティー")
        'pātī'
    """
    out = ""
    pending = False

    def append(syllable: str) -> None:
        nonlocal out, pending
        if pending and syllable:
            if syllable[0] in VOWELS or syllable.startswith("~"):
                out += TSU_PLACEHOLDER
            else:
                out += doubling_letter(syllable)
            pending = False
        out += syllable

    # Descriptor of the previous piece, None after a digraph rule
    previous: Optional[Kana] = None

    for piece in apply_digraphs(text):
        if piece.romaji is not None:
            append(piece.romaji)
            previous = None
            continue

        kana = lookup(piece.text)

        if kana is None:
            append(piece.text)

        elif isinstance(kana, (Chr, Dig)):
            append(kana.romaji)

        elif isinstance(kana, SmallTsu):
            # Only the last of a run of small tsu doubles the consonant
            if pending:
                out += TSU_PLACEHOLDER
            pending = True

        elif isinstance(kana, Bar):
            last = out[-1:]
            if last and last in VOWELS:
                out = out[:-1] + LONG_VOWELS[last]
            elif last == "n":
                out = out[:-1] + LONG_N
            else:
                out += LONG_DASH

        elif isinstance(kana, Small):
            if pending:
                out += TSU_PLACEHOLDER
                pending = False

            # グ + ォ -> gwo, イ + ョ -> yo
            if isinstance(previous, Dig):
                out = out[:-len(previous.romaji)] + previous.prefix[:-1]

            # き + ゃ -> kya, し + ゃ -> sha
            if out.endswith("i"):
                out = out[:-1]
            suffix = kana.suffix
            if suffix.startswith("y") and out.endswith(Y_DROP_PREFIXES):
                suffix = suffix[1:]
            out += suffix

        else:
            raise TypeError(f"Unknown kana descriptor: {kana!r}")

        previous = kana

    if pending:
        out += TSU_PLACEHOLDER

    return out


def to_ascii(romaji: str) -> str:
    """
    Replace long vowel and long `n` glyphs with doubled ASCII letters.

    Example:
        >>> to_ascii("kōhī")
        'koohii'
    """
    # Long n first: its combining macron is not a long vowel glyph
    text = romaji.replace(LONG_N, ASCII_LONG_FORMS[LONG_N])
    for glyph, ascii_form in ASCII_LONG_FORMS.items():
        text = text.replace(glyph, ascii_form)
    return text


def romaji_equals(a: str, b: str) -> bool:
    """
    Compare two romanizations ignoring case and long vowel spelling.

    `kōhī`, `KOOHII` and `koohī` are all equal.
    """
    return to_ascii(a.lower()) == to_ascii(b.lower())
