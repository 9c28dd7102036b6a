"""Longest prefix length satisfying a threshold condition, by binary search."""

import argparse
import sys


def feasible(a, b, x):
    """Return True if length ``x`` satisfies the condition for ``a`` and ``b``."""
    n = len(a)
    threshold = min([2 * n, *b[: max(n - x + 1, 0)]])
    below = [i for i, value in enumerate(a[:x]) if value < threshold]
    if len(below) > 1:
        return False
    if not below:
        return True
    return any(value > threshold for value in a[x:])


def best_length(a, b):
    """Return the largest feasible length between 0 and ``len(a)``."""
    n = len(a)
    if len(b) != n:
        raise ValueError("sequences must have the same length")
    if min([2 * n, *a]) >= n + 1:
        return n
    if max([1, *a]) <= n:
        return 0
    low, high, best = 1, n, 0
    while low <= high:
        mid = (low + high) // 2
        if feasible(a, b, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


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
        n = _next(tokens)
        a = [_next(tokens) for _ in range(n)]
        b = [_next(tokens) for _ in range(n)]
        print(best_length(a, b))
    return 0