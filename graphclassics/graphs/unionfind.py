"""
Union-Find (disjoint set) over dense integer ids.

Union by size with path compression; used by Kruskal's algorithm to
reject edges that would close a cycle.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import List

from ..exceptions import GraphError
from .core import check_vertex


class UnionFind:
    """
    Disjoint-set forest over elements ``0 .. n-1``.

    Complexity: near O(1) amortized per operation (inverse Ackermann).

    Example:
        >>> uf = UnionFind(3)
        >>> uf.unite(0, 1)
        True
        >>> uf.unite(1, 0)
        False
        >>> uf.same(0, 2)
        False
    """

    def __init__(self, n: int):
        """
        Initialize ``n`` singleton sets.

        Args:
            n: Number of elements.
        """
        if n < 0:
            raise GraphError(f"UnionFind size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """
        Return the representative of the set containing ``x``.

        Raises:
            InvalidVertexIndex: If ``x`` is out of range.
        """
        check_vertex(x, len(self.parent))
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if the sets were distinct and have been merged,
            False if ``x`` and ``y`` were already connected.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        return True

    def same(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` belong to the same set."""
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Return the number of elements in the set containing ``x``."""
        return self._size[self.find(x)]
