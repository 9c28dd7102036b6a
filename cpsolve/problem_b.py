"""Decide whether one cell can reach another with fixed-size jumps."""

import argparse
import sys


def can_reach(w, h, a, b, x1, y1, x2, y2):
    """Return True if ``(x2, y2)`` is reachable from ``(x1, y1)``.

    The board dimensions ``w`` and ``h`` do not affect the answer.
    """
    dx = abs(x1 - x2)
    dy = abs(y1 - y2)
    if dy % b and dx % a:
        return False
    if (dy < b and dx % a) or (dx < a and dy % b):
        return False
    return True


def _next(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv=None):
    """Read test cases and print YES or NO for each."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    tokens = iter(text.split())
    for _ in range(_next(tokens)):
        values = [_next(tokens) for _ in range(8)]
        print("YES" if can_reach(*values) else "NO")
    return 0