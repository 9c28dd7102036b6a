"""Graph traversal helpers."""


def reachable(adj, start):
    """Return the set of nodes reachable from ``start`` in adjacency list ``adj``."""
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for neighbour in adj[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen