"""
Ordering colors so that neighbors look alike.

Colors have no natural total order. ``sorted_colors`` builds a minimum
spanning tree over the CIEDE2000 distances and walks it depth first from the
darkest color, which keeps each step between consecutive colors small.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Sequence, Tuple

from .colors import Color, distance_ciede2000

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


class DisjointSet:
    """Union-find over the integers ``0 .. n-1``."""

    __slots__ = ('parent', 'rank')

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, i: int) -> int:
        parent = self.parent
        while parent[i] != i:
            # Path halving.
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if they were already one set."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False

        if self.rank[root_i] < self.rank[root_j]:
            self.parent[root_i] = root_j
        elif self.rank[root_i] > self.rank[root_j]:
            self.parent[root_j] = root_i
        else:
            self.parent[root_j] = root_i
            self.rank[root_i] += 1
        return True


def _sorted_edges(colors: Sequence[Color]) -> List[Edge]:
    """All (u, v) with u < v, by increasing CIEDE2000 distance (stable)."""
    n = len(colors)
    weighted = [
        (distance_ciede2000(colors[u], colors[v]), u, v)
        for u in range(n - 1)
        for v in range(u + 1, n)
    ]
    weighted.sort(key=lambda e: e[0])
    return [(u, v) for _, u, v in weighted]


def minimum_spanning_tree(n: int, edges: Sequence[Edge]) -> Dict[int, List[int]]:
    """
    Kruskal's algorithm on a distance-sorted edge list.

    Returns:
        Adjacency lists of the tree, both directions, neighbors ascending
    """
    sets = DisjointSet(n)
    adjacency: Dict[int, List[int]] = {i: [] for i in range(n)}
    for u, v in edges:
        if sets.union(u, v):
            adjacency[u].append(v)
            adjacency[v].append(u)
    for neighbors in adjacency.values():
        neighbors.sort()
    return adjacency


def _walk_prefix(adjacency: Dict[int, List[int]], root: int) -> List[int]:
    order = []
    visited = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        # Reversed so the smallest neighbor is popped first.
        stack.extend(c for c in reversed(adjacency[node]) if c not in visited)
    return order


def sorted_colors(colors: Sequence[Color]) -> List[Color]:
    """
    Order colors so that consecutive colors are perceptually close.

    Args:
        colors: Colors to order; not modified

    Returns:
        A new list holding the same Color objects, starting with the color
        closest to black
    """
    if len(colors) < 2:
        return list(colors)

    edges = _sorted_edges(colors)
    adjacency = minimum_spanning_tree(len(colors), edges)

    black = Color(0.0, 0.0, 0.0)
    darkest = 0
    lightness = float('inf')
    for i, color in enumerate(colors):
        d = distance_ciede2000(black, color)
        if d < lightness:
            darkest = i
            lightness = d

    order = _walk_prefix(adjacency, darkest)
    logger.debug(
        f"Sorted {len(colors)} colors over {sum(map(len, adjacency.values())) // 2} tree edges"
    )
    return [colors[i] for i in order]
