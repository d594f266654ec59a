#!/usr/bin/env python3
"""Debug script to inspect how an input is tokenized and parsed."""

import argparse
import logging
import sys
from pathlib import Path

from minihtml import MiniHTML, ParseError, tokenize


def debug_input(source, show_tree=True, trace=False):
    print(f"=== Input ({len(source)} chars) ===")
    print(repr(source))

    print("\nTokens:")
    try:
        tokens = tokenize(source)
    except ParseError as e:
        print(f"\n!!! TOKENIZER FAILED: {e}")
        return False
    for tok in tokens:
        print(f"  {tok!r}")

    if not show_tree:
        return True

    print("\nTree:")
    try:
        doc = MiniHTML(source, debug=trace)
    except ParseError as e:
        print(f"\n!!! PARSE FAILED: {e}")
        return False
    print(doc.to_test_format() or "  (empty forest)")
    print("\nRe-serialized:")
    print(doc.to_html())
    return True


def main():
    parser = argparse.ArgumentParser(description="Dump tokens and the parsed tree for some markup")
    parser.add_argument("source", help="Markup to inspect, or a path with --file, or '-' for stdin")
    parser.add_argument("--file", action="store_true", help="Treat SOURCE as a file path")
    parser.add_argument("--tokens-only", action="store_true", help="Skip parsing")
    parser.add_argument("--trace", action="store_true", help="Log every grammar rule while parsing")
    args = parser.parse_args()

    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")

    if args.source == "-":
        source = sys.stdin.read()
    elif args.file:
        source = Path(args.source).read_text(encoding="utf-8")
    else:
        source = args.source

    ok = debug_input(source, show_tree=not args.tokens_only, trace=args.trace)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
