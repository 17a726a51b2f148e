"""Union-find over integer-labelled elements."""

from __future__ import annotations

from typing import List


class DisjointSet:
    """Disjoint subsets of ``range(size)`` with path compression and union by rank.

    ``parent`` holds the next element up each tree (an element that is its own
    parent is the representative of its subset) and ``rank`` bounds the height
    of the tree rooted at each representative.
    """

    def __init__(self, size: int) -> None:
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        """Return the representative of the subset containing ``i``."""

        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the subsets of ``i`` and ``j``.

        Returns ``False`` when both already belong to the same subset.
        """

        i_root = self.find(i)
        j_root = self.find(j)
        if i_root == j_root:
            return False
        if self.rank[i_root] < self.rank[j_root]:
            self.parent[i_root] = j_root
        else:
            self.parent[j_root] = i_root
            if self.rank[i_root] == self.rank[j_root]:
                self.rank[i_root] += 1
        return True


__all__ = ["DisjointSet"]
