"""Undirected graph stored as adjacency lists, with DFS and BFS traversals."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class UndirectedGraph:
    """An undirected graph on vertices ``0 .. node_count - 1``.

    Each adjacency list keeps the most recently added neighbour first, so
    traversals visit neighbours in reverse order of edge insertion.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("number of nodes must not be negative")
        self.node_count = node_count
        self._adjacency: list[deque[int]] = [deque() for _ in range(node_count)]

    @classmethod
    def from_text(cls, text: str) -> UndirectedGraph:
        """Build a graph from "<nodes> <edges>" followed by that many vertex pairs."""
        tokens = text.split()
        try:
            numbers = [int(token) for token in tokens]
        except ValueError as exc:
            raise ValueError("graph description must hold integers only") from exc
        if len(numbers) < 2:
            raise ValueError("missing graph dimensions")
        node_count, edge_count = numbers[0], numbers[1]
        if edge_count < 0:
            raise ValueError("number of edges must not be negative")
        pairs = numbers[2:]
        if len(pairs) < 2 * edge_count:
            raise ValueError("fewer edges given than announced")
        graph = cls(node_count)
        edges = iter(pairs[: 2 * edge_count])
        for v1, v2 in zip(edges, edges):
            graph.add_edge(v1, v2)
        return graph

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.node_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def neighbours(self, vertex: int) -> list[int]:
        """The neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def add_edge(self, v1: int, v2: int) -> None:
        """Add the edge v1 -- v2 at the front of both adjacency lists."""
        self._check(v1)
        self._check(v2)
        self._adjacency[v1].appendleft(v2)
        self._adjacency[v2].appendleft(v1)

    def remove_edge(self, v1: int, v2: int) -> None:
        """Remove one occurrence of the edge v1 -- v2, if present."""
        self._check(v1)
        self._check(v2)
        for here, there in ((v1, v2), (v2, v1)):
            try:
                self._adjacency[here].remove(there)
            except ValueError:
                pass

    def remove_node(self, vertex: int) -> None:
        """Remove every edge touching ``vertex``; the vertex itself remains."""
        self._check(vertex)
        adjacency = self._adjacency[vertex]
        while adjacency:
            self.remove_edge(vertex, adjacency[0])

    def dfs(self, start: int) -> list[int]:
        """Vertices in depth-first visiting order; empty for an invalid start."""
        if not 0 <= start < self.node_count:
            return []
        visited = [False] * self.node_count
        order = [start]
        visited[start] = True
        stack: list[Iterator[int]] = [iter(list(self._adjacency[start]))]
        while stack:
            for vertex in stack[-1]:
                if not visited[vertex]:
                    visited[vertex] = True
                    order.append(vertex)
                    stack.append(iter(list(self._adjacency[vertex])))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first visiting order; empty for an invalid start."""
        if not 0 <= start < self.node_count:
            return []
        visited = [False] * self.node_count
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def format(self) -> str:
        """Render the adjacency lists as text."""
        lines = ["Graph Adjacency Lists:"]
        for vertex, adjacency in enumerate(self._adjacency):
            body = "".join(f"{neighbour} " for neighbour in adjacency)
            lines.append(f"{vertex:2d}: [ {body}]")
        return "\n".join(lines) + "\n\n"