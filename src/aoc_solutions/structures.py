"""Basic data structures."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List


@dataclass
class DisjointSet:
    """Union-find forest over the indices ``0..size-1``.

    Parents and sizes live in flat lists. ``find`` compresses paths and
    ``union`` attaches the smaller tree under the larger one; on equal sizes
    the root of ``right`` goes under the root of ``left``.
    """

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.sizes = [1] * self.size
        self.component_count = self.size

    def find(self, index: int) -> int:
        parent = self.parent[index]
        if parent != index:
            parent = self.find(parent)
            self.parent[index] = parent
        return parent

    def union(self, left: int, right: int) -> bool:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self.sizes[root_left] < self.sizes[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.sizes[root_left] += self.sizes[root_right]
        self.component_count -= 1
        return True

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def size_of(self, index: int) -> int:
        return self.sizes[self.find(index)]

    def groups(self) -> Dict[int, List[int]]:
        """Return a mapping of root index to member indices in index order."""

        members: Dict[int, List[int]] = defaultdict(list)
        for index in range(self.size):
            members[self.find(index)].append(index)
        return dict(members)
