#!/usr/bin/env python3
"""Profile the tokenize and parse stages of minihtml separately.

Usage:
    python profile_parser.py                  # both stages, 200 sections
    python profile_parser.py --stage tokenize
    python profile_parser.py --sections 50 --depth 100 --top 20
"""

import argparse
import cProfile
import io
import pstats
import time

from minihtml import Parser, ParserOpts, Tokenizer, to_html

SECTION = """
<!-- section {i} -->
<div class="section" data-index="{i}">
    <h2 id="s{i}">Section {i}: tokens, trees &amp; errors</h2>
    <p>Plain text with punctuation, a - b = c! and <b>bold</b> words.</p>
    <img src="img/{i}.png" alt='figure "{i}"'/>
    <ul><li>one</li><li>two</li><li>three</li></ul>
</div>
"""


def build_document(sections, depth):
    body = "".join(SECTION.format(i=i) for i in range(sections))
    nested = "<span>" * depth + "deep" + "</span>" * depth
    return f"<!DOCTYPE html>\n<html><body>{body}{nested}</body></html>\n"


def profile_stage(label, func, repeat, top):
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    for _ in range(repeat):
        result = func()
    profiler.disable()
    elapsed = time.perf_counter() - start

    print(f"== {label}: {repeat} runs in {elapsed:.3f}s ({elapsed / repeat * 1000:.2f} ms/run)")
    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats("cumulative").print_stats(top)
    print(stream.getvalue())
    return result


def main():
    arg_parser = argparse.ArgumentParser(description="Profile minihtml tokenizing and parsing")
    arg_parser.add_argument("--stage", choices=["tokenize", "parse", "all"], default="all")
    arg_parser.add_argument("--sections", type=int, default=200, help="Repeated sections in the sample")
    arg_parser.add_argument("--depth", type=int, default=64, help="Nesting depth of the trailing chain")
    arg_parser.add_argument("--repeat", type=int, default=10)
    arg_parser.add_argument("--top", type=int, default=30, help="Functions shown per stage")
    args = arg_parser.parse_args()

    # The document's own elements add two levels on top of the chain
    opts = ParserOpts(max_depth=max(args.depth + 2, 16))
    html = build_document(args.sections, args.depth)
    print(f"Sample: {len(html)} characters, {args.sections} sections, depth {args.depth}\n")

    tokenizer = Tokenizer()
    tokens = tokenizer.run(html)
    print(f"{len(tokens)} tokens\n")

    if args.stage in ("tokenize", "all"):
        profile_stage("tokenize", lambda: tokenizer.run(html), args.repeat, args.top)

    if args.stage in ("parse", "all"):
        parser = Parser(opts)
        nodes = profile_stage("parse", lambda: parser.parse(tokens), args.repeat, args.top)
        # Sanity check that the profiled output is still a faithful tree
        assert Parser(opts).parse(Tokenizer().run(to_html(nodes))) == nodes


if __name__ == "__main__":
    main()
