"""Disjoint-set union with path compression and union by size."""


class DisjointSet:
    """A union-find structure over the elements ``0 .. n-1``."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, u):
        """Return the representative of the set containing ``u``."""
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u, v):
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        a, b = self.find(u), self.find(v)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def component_size(self, u):
        """Return the number of elements in the set containing ``u``."""
        return self._size[self.find(u)]