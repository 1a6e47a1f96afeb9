"""Searches over word ladders, undirected and weighted directed graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def _one_letter_apart(first: str, second: str) -> bool:
    return sum(a != b for a, b in zip(first, second)) == 1


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Number of words in the shortest ladder to end_word, or 0 if none.

    Each step changes exactly one letter and must land on a word from word_list.
    """
    remaining = [word for word in word_list if word != begin_word]
    queue = deque([(begin_word, 1)])
    while queue:
        word, length = queue.popleft()
        if word == end_word:
            return length
        unreached = []
        for candidate in remaining:
            if _one_letter_apart(word, candidate):
                queue.append((candidate, length + 1))
            else:
                unreached.append(candidate)
        remaining = unreached
    return 0


def find_redundant_connection(
    edges: Iterable[Sequence[int]],
) -> tuple[int, int] | None:
    """Return the first edge that closes a cycle, or None if there is none."""
    parent: dict[int, int] = {}
    size: dict[int, int] = {}

    def find(node: int) -> int:
        root = node
        while parent.setdefault(root, root) != root:
            root = parent[root]
        while node != root:
            parent[node], node = root, parent[node]
        return root

    for a, b in edges:
        root_a, root_b = find(a), find(b)
        if root_a == root_b:
            return a, b
        if size.get(root_a, 1) < size.get(root_b, 1):
            root_a, root_b = root_b, root_a
        parent[root_b] = root_a
        size[root_a] = size.get(root_a, 1) + size.get(root_b, 1)
    return None


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Whether the undirected graph given as adjacency lists can be two-coloured."""
    colour: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if colour[neighbour] == colour[node]:
                    return False
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
    return True


class WeightedGraph:
    """Directed graph with non-negative edge costs and shortest-path queries."""

    def __init__(self, n: int, edges: Iterable[Sequence[int]] = ()) -> None:
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: Sequence[int]) -> None:
        """Add a directed edge given as (from, to, cost)."""
        source, target, cost = edge
        self._adjacency[source].append((target, cost))

    def shortest_path(self, node1: int, node2: int) -> int:
        """Cost of the cheapest path from node1 to node2, or -1 if unreachable."""
        n = len(self._adjacency)
        if not (0 <= node1 < n and 0 <= node2 < n):
            raise IndexError("node out of range")
        distance = {node1: 0}
        heap = [(0, node1)]
        while heap:
            cost, node = heapq.heappop(heap)
            if cost > distance[node]:
                continue
            if node == node2:
                return cost
            for neighbour, weight in self._adjacency[node]:
                candidate = cost + weight
                if candidate < distance.get(neighbour, candidate + 1):
                    distance[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        return -1