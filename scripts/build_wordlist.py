#!/usr/bin/env python3
"""
Word List Builder for kana-drill.

This script compiles the word frequency list (a header line followed by
`rank,word,count` lines) into a marisa_trie.RecordTrie file that
kana-drill memory-maps at startup.

Usage:
    python scripts/build_wordlist.py [--input PATH] [--output PATH]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kana_drill.words import WordCorpus, read_word_csv, save_word_records

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_INPUT = Path(__file__).parent.parent / "data" / "words.txt"
DEFAULT_OUTPUT = Path(__file__).parent.parent / "kana_drill" / "data" / "words.dic"


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build kana-drill word list from a word frequency file"
    )
    parser.add_argument(
        '--input', '-i',
        type=Path,
        default=DEFAULT_INPUT,
        help=f"Path to the word frequency file (default: {DEFAULT_INPUT})"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output word list path (default: {DEFAULT_OUTPUT})"
    )

    args = parser.parse_args()

    if not args.input.exists():
        logger.error(f"Word frequency file not found: {args.input}")
        sys.exit(1)

    start_time = time.time()

    logger.info(f"Reading {args.input}...")
    records = read_word_csv(args.input)
    logger.info(f"Read {len(records)} words")

    corpus = WordCorpus.from_records(records)
    logger.info(f"  Valid words: {len(corpus)} ({len(records) - len(corpus)} skipped)")

    logger.info("Building marisa_trie.RecordTrie...")
    save_word_records(records, args.output)

    file_size = args.output.stat().st_size / 1024
    logger.info(f"Saved word list to {args.output} ({file_size:.1f} KB)")

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
