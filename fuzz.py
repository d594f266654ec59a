#!/usr/bin/env python3
"""
Random fuzzer for the minihtml tokenizer and parser.
Generates invalid/malformed markup to test parser robustness.

A ParseError is an expected outcome for bad input. Anything else raised
(IndexError, RecursionError, ...) is a crash, a parse taking longer than
five seconds is a hang, and a successful parse whose re-serialization
parses to a different forest is a round-trip failure.
"""

import argparse
import random
import string
import sys
import time
import traceback

from minihtml import MiniHTML, ParseError, to_html

# Fuzzing strategies
TAGS = [
    "div", "span", "p", "a", "img", "table", "tr", "td", "ul", "li", "br", "hr",
    "html", "head", "body", "title", "h1", "h2", "my-widget", "x-el", "DIV", "Span",
]

ATTRIBUTES = ["id", "class", "href", "src", "alt", "title", "data-x", "aria-label", "HREF"]

SPECIAL_CHARS = [
    "\x00", "\x0b", "\x0c", "\r", "\u00a0", "\u2028", "\u200b", "\ufeff", "\ufffd",
    "\u00e9", "\u65e5\u672c", "_", ",", ".", ";", "?", "&", "=", "!", "-", "/", ">", "<", "'", '"',
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_whitespace():
    """Generate random whitespace (including characters that are not whitespace here)."""
    ws = [" ", "\t", "\n", "\r", "\f", ""]
    return "".join(random.choices(ws, k=random.randint(0, 4)))


def fuzz_tag_name():
    """Generate tag names, some of them malformed."""
    strategies = [
        lambda: random.choice(TAGS),
        lambda: random_string(1, 8),
        lambda: "",
        lambda: random.choice(TAGS) + "-",
        lambda: "-" + random.choice(TAGS),
        lambda: random.choice(TAGS).upper(),
        lambda: random.choice(SPECIAL_CHARS),
    ]
    return random.choice(strategies)()


def fuzz_attribute():
    """Generate attributes, quoted, bare, missing or unterminated."""
    name = random.choice(ATTRIBUTES + [random_string(1, 6)])
    value = random_string(0, 10)
    strategies = [
        lambda: f'{name}="{value}"',
        lambda: f"{name}='{value}'",
        lambda: f"{name}={value}",
        lambda: name,
        lambda: f'{name}="{value}',
        lambda: f'{name} = "{value}"',
        lambda: f"{name}='say \"{value}\"'",
    ]
    return random.choice(strategies)()


def fuzz_open_tag():
    name = fuzz_tag_name()
    attrs = " ".join(fuzz_attribute() for _ in range(random.randint(0, 3)))
    closing = random.choice([">", "/>", " />", "", ">>"])
    return f"<{random_whitespace()}{name} {attrs}{random_whitespace()}{closing}"


def fuzz_close_tag():
    name = fuzz_tag_name()
    return random.choice([f"</{name}>", f"</{name} >", f"</{name}", "</>", f"< /{name}>"])


def fuzz_comment():
    body = random_string(0, 15)
    return random.choice([
        f"<!--{body}-->",
        f"<!-- {body} -->",
        f"<!--{body}--->",
        f"<!--{body}",
        f"<!-{body}->",
        f"<!--{body}--!>",
        "<!---->",
        f"<!-- a--b -- {body} -->",
    ])


def fuzz_doctype():
    return random.choice([
        "<!DOCTYPE html>",
        "<!doctype html>",
        "<!DOCTYPE>",
        "<!DOCTYPEhtml>",
        "<!DOCTYPE html",
        f"<!DOCTYPE {random_string(1, 6)} >",
        '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN">',
        "<!element html>",
    ])


def fuzz_text():
    parts = []
    for _ in range(random.randint(1, 6)):
        if random.random() < 0.2:
            parts.append(random.choice(SPECIAL_CHARS))
        else:
            parts.append(random_string(1, 8))
        parts.append(random_whitespace())
    return "".join(parts)


def fuzz_nested_structure(depth=0, max_depth=8):
    """Generate mostly balanced nesting, sometimes breaking it."""
    if depth >= max_depth or random.random() < 0.3:
        return fuzz_text()
    name = random.choice(TAGS)
    inner = "".join(fuzz_nested_structure(depth + 1, max_depth) for _ in range(random.randint(0, 3)))
    close = name if random.random() < 0.9 else random.choice(TAGS)
    return f"<{name}>{inner}</{close}>"


def fuzz_deeply_nested():
    depth = random.choice([10, 100, 255, 256, 257, 1000, 5000])
    name = random.choice(TAGS)
    return f"<{name}>" * depth + "x" + f"</{name}>" * depth


def fuzz_many_attributes():
    attrs = " ".join(f'a{i}="{random_string(0, 4)}"' for i in range(random.randint(10, 200)))
    return f"<div {attrs}></div>"


def generate_fuzzed_html():
    """Generate a random fuzzed markup document."""
    generators = [
        fuzz_open_tag,
        fuzz_close_tag,
        fuzz_comment,
        fuzz_doctype,
        fuzz_text,
        fuzz_nested_structure,
        fuzz_deeply_nested,
        fuzz_many_attributes,
    ]
    weights = [3, 2, 2, 1, 3, 6, 1, 1]
    pieces = random.choices(generators, weights=weights, k=random.randint(1, 5))
    return "".join(piece() for piece in pieces)


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against the parser."""
    if seed is not None:
        random.seed(seed)

    crashes = []
    hangs = []
    round_trip_failures = []
    successes = 0
    rejected = 0

    print(f"Fuzzing minihtml with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        html = generate_fuzzed_html()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        start = time.perf_counter()
        try:
            nodes = MiniHTML(html).nodes
        except ParseError:
            rejected += 1
            continue
        except Exception as e:
            crashes.append({
                "test_num": i,
                "html": html,
                "error": f"{type(e).__name__}: {e}",
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue
        finally:
            elapsed = time.perf_counter() - start
            if elapsed > 5.0:
                hangs.append({"test_num": i, "html": html, "time": elapsed})
                if verbose:
                    print(f"  HANG: Test {i} took {elapsed:.2f}s")

        successes += 1
        again = MiniHTML(to_html(nodes)).nodes
        if again != nodes:
            round_trip_failures.append({"test_num": i, "html": html})
            if verbose:
                print(f"  ROUND-TRIP: Test {i}")

    elapsed_total = time.time() - start_time

    # Report results
    print(f"\n{'='*60}")
    print("FUZZING RESULTS: minihtml")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Parsed:         {successes}")
    print(f"Rejected:       {rejected}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Round-trip:     {len(round_trip_failures)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/elapsed_total:.1f}")

    if crashes:
        print(f"\n{'='*60}")
        print("CRASH DETAILS:")
        print(f"{'='*60}")
        for crash in crashes[:10]:  # Show first 10
            print(f"\nTest #{crash['test_num']}:")
            print(f"  HTML: {crash['html'][:200]!r}...")
            print(f"  Error: {crash['error']}")
        if len(crashes) > 10:
            print(f"\n... and {len(crashes) - 10} more crashes")

    if round_trip_failures:
        print(f"\n{'='*60}")
        print("ROUND-TRIP DETAILS:")
        print(f"{'='*60}")
        for failure in round_trip_failures[:5]:
            print(f"\nTest #{failure['test_num']}:")
            print(f"  HTML: {failure['html'][:200]!r}...")

    if save_failures and (crashes or hangs or round_trip_failures):
        filename = f"fuzz_failures_minihtml_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"HTML:\n{crash['html']}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"HTML:\n{hang['html']}\n\n")
            for failure in round_trip_failures:
                f.write(f"=== ROUND-TRIP #{failure['test_num']} ===\n")
                f.write(f"HTML:\n{failure['html']}\n\n")
        print(f"\nFailures saved to {filename}")

    return not crashes and not hangs and not round_trip_failures


def main():
    parser = argparse.ArgumentParser(description="Fuzz the minihtml parser with invalid input")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed documents (no parsing)",
    )
    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i + 1} ===")
            print(generate_fuzzed_html())
            print()
        return

    ok = run_fuzzer(args.num_tests, seed=args.seed, verbose=args.verbose, save_failures=args.save_failures)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
