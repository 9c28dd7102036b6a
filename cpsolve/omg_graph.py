"""Size of the connected group each user belongs to, given shared groups."""

import argparse
import sys

from .dsu import DisjointSet


def group_sizes(n, groups):
    """Return, for each of ``n`` users, the size of its connected component.

    ``groups`` is an iterable of sequences of 1-based user numbers; users in
    the same sequence are connected.
    """
    dsu = DisjointSet(n)
    for group in groups:
        members = list(group)
        for member in members:
            if not 1 <= member <= n:
                raise ValueError(f"user {member} out of range 1..{n}")
        if not members:
            continue
        head, *rest = (member - 1 for member in members)
        for member in rest:
            dsu.union(member, head)
    return [dsu.component_size(user) for user in range(n)]


def _next(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv=None):
    """Read users and groups, then print each user's component size."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    tokens = iter(text.split())
    n, m = _next(tokens), _next(tokens)
    groups = []
    for _ in range(m):
        count = _next(tokens)
        groups.append([_next(tokens) for _ in range(count)])
    print(" ".join(map(str, group_sizes(n, groups))))
    return 0