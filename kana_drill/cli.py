"""
CLI interface for kana-drill.

Usage:
    kana-drill romaji "コーヒー"
    kana-drill split --json "きって"
    kana-drill check "ひらがな" "hiragana"
    kana-drill wordset --chars hiragana --budget 500 --words words.txt
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from kana_drill import __version__
from kana_drill.constants import CHARACTER_SETS, DEFAULT_BUDGET
from kana_drill.diff import DiffOp
from kana_drill.matching import Match, check_answer
from kana_drill.romaji import to_ascii, to_romaji
from kana_drill.splits import split_romaji
from kana_drill.words import load_corpus
from kana_drill.wordset import WordSet, build_set


# ============================================================================
# Output Formatting
# ============================================================================

def format_match(match: Match) -> str:
    """
    Format an answer check for the terminal.

    Shows the expected romaji, then each diff operation on its own line.
    """
    lines = []
    status = "OK" if match.is_match else "WRONG"
    lines.append(f"{status}: {match.kana} = {match.actual}")

    if not match.is_match:
        lines.append("─" * 40)
        for op in match.diff:
            if op.op is DiffOp.SAME:
                lines.append(f"  = {op.text}")
            elif op.op is DiffOp.DELETE:
                lines.append(f"  - {op.text}")
            elif op.op is DiffOp.INSERT:
                lines.append(f"  + {op.text}")
            else:
                lines.append(f"  ~ {op.text} → {op.source}")
        lines.append(f"Missed: {' '.join(match.fails)}")

    return "\n".join(lines)


def format_word_set(word_set: WordSet) -> str:
    """Format a word set as a summary followed by `word - count` lines."""
    lines = [f"Loaded {len(word_set.words)} words with {word_set.chars} chars"]
    if word_set.missing:
        lines.append(f"Missing: {' '.join(word_set.missing)}")
    lines.append("")
    for record in word_set.words:
        lines.append(f"{record.word} - {record.count}")
    return "\n".join(lines)


def resolve_charset(value: str) -> str:
    """Get the characters for a set name, or the value itself."""
    return CHARACTER_SETS.get(value, value)


# ============================================================================
# Commands
# ============================================================================

def cmd_romaji(args) -> int:
    romaji = to_romaji(args.text)
    print(to_ascii(romaji) if args.ascii else romaji)
    return 0


def cmd_split(args) -> int:
    syllables = split_romaji(args.text)
    if args.json:
        print(json.dumps(syllables, ensure_ascii=False))
    else:
        print(" | ".join(syllables))
    return 0


def cmd_check(args) -> int:
    match = check_answer(args.kana, args.answer)
    if args.json:
        print(json.dumps(match.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_match(match))
    return 0 if match.is_match else 1


def cmd_wordset(args) -> int:
    corpus = load_corpus(args.words)
    rng = random.Random(args.seed)
    word_set = build_set(resolve_charset(args.chars), args.budget, corpus, rng)
    if args.shuffle:
        word_set.shuffle(rng)

    if args.json:
        data = {
            "words": [{"word": r.word, "count": r.count} for r in word_set.words],
            "chars": word_set.chars,
            "missing": word_set.missing,
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        print(format_word_set(word_set))
    return 0


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kana-drill",
        description="Kana romanization, answer checking and practice word sets",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"kana-drill {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("romaji", help="Romanize kana text")
    p.add_argument("text", help="Kana text")
    p.add_argument("--ascii", "-a", action="store_true", help="Write long vowels as doubled letters")
    p.set_defaults(func=cmd_romaji)

    p = subparsers.add_parser("split", help="Split kana text into syllables")
    p.add_argument("text", help="Kana text")
    p.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    p.set_defaults(func=cmd_split)

    p = subparsers.add_parser("check", help="Check a romaji answer")
    p.add_argument("kana", help="Kana word")
    p.add_argument("answer", help="Typed romaji")
    p.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    p.set_defaults(func=cmd_check)

    p = subparsers.add_parser("wordset", help="Build a practice word set")
    p.add_argument(
        "--chars", "-c",
        default="all-rare",
        help=f"Set name ({', '.join(CHARACTER_SETS)}) or literal characters (default: all-rare)",
    )
    p.add_argument(
        "--budget", "-b",
        type=int,
        default=DEFAULT_BUDGET,
        help=f"Character budget, 0 to stop once covered (default: {DEFAULT_BUDGET})",
    )
    p.add_argument("--words", "-w", type=Path, default=None, help="Word list (.dic, .csv or .txt)")
    p.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    p.add_argument("--shuffle", action="store_true", help="Shuffle the chosen words")
    p.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    p.set_defaults(func=cmd_wordset)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
