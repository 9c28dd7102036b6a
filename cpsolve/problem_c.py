"""Maximum gold collected by a single square explosion on an empty cell."""

import argparse
import sys


def max_gold(grid, k):
    """Return the most gold cells (``g``) that survive outside one blast.

    The blast is centred on an empty cell (``.``) and destroys gold within
    Chebyshev distance ``k - 1``; all gold outside it is collected.
    """
    if k < 1:
        raise ValueError("blast size must be at least 1")
    rows = list(grid)
    n = len(rows)
    m = len(rows[0]) if rows else 0
    if any(len(row) != m for row in rows):
        raise ValueError("grid rows must all have the same length")

    prefix = [[0] * (m + 1) for _ in range(n + 1)]
    for i, row in enumerate(rows, 1):
        running = 0
        for j, cell in enumerate(row, 1):
            running += cell == "g"
            prefix[i][j] = prefix[i - 1][j] + running
    total = prefix[n][m]

    def gold_in(top, bottom, left, right):
        return (
            prefix[bottom][right]
            - prefix[top][right]
            - prefix[bottom][left]
            + prefix[top][left]
        )

    least = total
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == ".":
                lost = gold_in(
                    max(i - k + 1, 0), min(i + k, n), max(j - k + 1, 0), min(j + k, m)
                )
                least = min(least, lost)
    return total - least


def _next(tokens):
    try:
        return next(tokens)
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
    for _ in range(int(_next(tokens))):
        n, m, k = (int(_next(tokens)) for _ in range(3))
        pending = ""
        grid = []
        for _ in range(n):
            while len(pending) < m:
                pending += _next(tokens)
            grid.append(pending[:m])
            pending = pending[m:]
        if pending:
            raise ValueError("grid row longer than declared width")
        print(max_gold(grid, k))
    return 0