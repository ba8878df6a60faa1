#!/usr/bin/env python3
"""Word ranking CLI."""

import argparse
import json
import logging
import signal
import sys
import threading
from pathlib import Path

from .config import RankConfig, parse_key_value_args
from .engine import WordRanker
from .errors import WordRankError
from .sources import open_source


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordrank",
        description="Rank the most frequent words in a text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                        # Top 10 words
  %(prog)s book.txt -n 25 --counts         # Top 25 with counts
  %(prog)s https://example.com/book.txt    # Fetch over HTTP
  cat *.txt | %(prog)s - --json            # Read stdin, print JSON
  %(prog)s book.txt --config rank.yml --set max_word_length=40 overlong=skip
        """,
    )

    parser.add_argument("input", help="Input file path, URL, or - for stdin")
    parser.add_argument(
        "-n", "--top", type=int, metavar="N", help="Number of words to print (default: 10)"
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config")
    parser.add_argument(
        "--set",
        nargs="+",
        metavar="KEY=VALUE",
        help="Override config values (e.g., --set hash=djb2 capacity=1024)",
    )

    # Output
    parser.add_argument("--counts", action="store_true", help="Print counts next to words")
    parser.add_argument("--json", action="store_true", help="Print a JSON document")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _load_config(args: argparse.Namespace) -> RankConfig:
    config = RankConfig.from_yaml(args.config) if args.config else RankConfig()
    if args.set:
        config.override(parse_key_value_args(args.set))
    if args.top is not None:
        config.override({"top": args.top})
    return config


def main() -> int:
    """Rank words and print them."""
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Load config
    if args.config and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = _load_config(args)
    except WordRankError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Ctrl-C stops reading and prints what was counted so far. Signal handlers
    # can only be installed from the main thread.
    cancel = threading.Event()
    installed = threading.current_thread() is threading.main_thread()
    if installed:
        previous = signal.signal(signal.SIGINT, lambda signum, frame: cancel.set())

    ranker = WordRanker(config)
    source = open_source(args.input, chunk_size=config.chunk_size, timeout=config.timeout)
    try:
        entries, partial = ranker.rank_entries(source, cancel=cancel)
    except WordRankError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if installed:
            signal.signal(signal.SIGINT, previous)

    if partial:
        print("Interrupted: ranking covers only the input read so far.", file=sys.stderr)

    if args.json:
        document = {
            "input": args.input,
            "top_n": config.top,
            "partial": partial,
            "words": [e.word for e in entries],
        }
        if args.counts:
            document["counts"] = {e.word: e.count for e in entries}
        print(json.dumps(document, indent=2))
    else:
        for e in entries:
            print(f"{e.word}\t{e.count}" if args.counts else e.word)

    return 0


if __name__ == "__main__":
    sys.exit(main())
