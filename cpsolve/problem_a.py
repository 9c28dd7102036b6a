"""Maximum number of purchases when two item types share one budget."""

import argparse
import sys


def _count(budget, cost, step):
    if budget < cost:
        return 0
    return (budget - cost) // step + 1


def _greedy(budget, first_cost, first_step, second_cost, second_step):
    first = _count(budget, first_cost, first_step)
    return first + _count(budget - first * first_step, second_cost, second_step)


def max_purchases(k, a, b, x, y):
    """Best count from buying greedily one type first, then the other.

    Each purchase needs the budget to be at least ``a`` (or ``b``) and
    consumes ``x`` (or ``y``).
    """
    if x <= 0 or y <= 0:
        raise ValueError("costs per purchase must be positive")
    return max(_greedy(k, a, x, b, y), _greedy(k, b, y, a, x))


def _next(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv=None):
    """Read test cases and print one answer per line."""
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
        k, a, b, x, y = (_next(tokens) for _ in range(5))
        print(max_purchases(k, a, b, x, y))
    return 0