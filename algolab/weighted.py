"""Weighted undirected graph with Dijkstra shortest paths and Prim's spanning tree."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import NamedTuple, Sequence

from algolab.minheap import HeapItem, MinPriorityQueue

INF = 999999
DEFAULT_INPUT = "../data/graph.in"


class Edge(NamedTuple):
    """An entry of an adjacency list: the far vertex and the edge cost."""

    vertex: int
    cost: int


class SpanningEdge(NamedTuple):
    """An edge chosen by Prim's algorithm; ``parent`` is -1 if never reached."""

    parent: int
    vertex: int
    weight: int


class WeightedGraph:
    """An undirected graph with integer edge costs on vertices ``0 .. node_count - 1``.

    Adjacency lists keep the most recently added edge first.
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("number of nodes must not be negative")
        self.node_count = node_count
        self._adjacency: list[deque[Edge]] = [deque() for _ in range(node_count)]

    @classmethod
    def from_text(cls, text: str) -> WeightedGraph:
        """Build a graph from "<nodes> <edges>" followed by that many "v1 v2 cost" triples."""
        try:
            numbers = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError("graph description must hold integers only") from exc
        if len(numbers) < 2:
            raise ValueError("missing graph dimensions")
        node_count, edge_count = numbers[0], numbers[1]
        if edge_count < 0:
            raise ValueError("number of edges must not be negative")
        triples = numbers[2:]
        if len(triples) < 3 * edge_count:
            raise ValueError("fewer edges given than announced")
        graph = cls(node_count)
        values = iter(triples[: 3 * edge_count])
        for v1, v2, cost in zip(values, values, values):
            graph.add_edge(v1, v2, cost)
        return graph

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.node_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def neighbours(self, vertex: int) -> list[Edge]:
        """The edges leaving ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def add_edge(self, v1: int, v2: int, cost: int) -> None:
        """Add the edge v1 -- v2 with ``cost`` at the front of both lists."""
        self._check(v1)
        self._check(v2)
        self._adjacency[v1].appendleft(Edge(v2, cost))
        self._adjacency[v2].appendleft(Edge(v1, cost))

    def _drop(self, here: int, there: int) -> None:
        adjacency = self._adjacency[here]
        for edge in adjacency:
            if edge.vertex == there:
                adjacency.remove(edge)
                return

    def remove_edge(self, v1: int, v2: int) -> None:
        """Remove one occurrence of the edge v1 -- v2, if present."""
        self._check(v1)
        self._check(v2)
        self._drop(v1, v2)
        self._drop(v2, v1)

    def remove_node(self, vertex: int) -> None:
        """Remove every edge touching ``vertex``; the vertex itself remains."""
        self._check(vertex)
        adjacency = self._adjacency[vertex]
        while adjacency:
            self.remove_edge(vertex, adjacency[0].vertex)

    def dijkstra(self, source: int) -> list[int]:
        """Shortest distances from ``source``; unreachable vertices get ``INF``."""
        self._check(source)
        dist = [INF] * self.node_count
        dist[source] = 0
        queue = MinPriorityQueue(self.node_count)
        queue.insert(HeapItem(source, 0))
        while queue:
            u = queue.remove_min().content
            for v, cost in self._adjacency[u]:
                if dist[u] + cost < dist[v]:
                    dist[v] = dist[u] + cost
                    queue.insert(HeapItem(v, dist[v]))
        return dist

    def prim(self) -> list[SpanningEdge]:
        """Spanning tree edges grown from vertex 0, one per vertex 1 .. n-1."""
        n = self.node_count
        if n == 0:
            return []
        parents = [-1] * n
        keys = [INF] * n
        queue = MinPriorityQueue(n)
        for v in range(1, n):
            queue.insert(HeapItem(v, keys[v]))
        keys[0] = 0
        queue.insert(HeapItem(0, 0))
        while queue:
            u = queue.remove_min().content
            for v, cost in self._adjacency[u]:
                if cost < keys[v]:
                    keys[v] = cost
                    parents[v] = u
                    queue.insert(HeapItem(v, cost))
        return [SpanningEdge(parents[v], v, keys[v]) for v in range(1, n)]

    def format(self) -> str:
        """Render the adjacency lists as "v : n(c) n(c) " lines."""
        lines = ["Adjacency List:"]
        for vertex, adjacency in enumerate(self._adjacency):
            body = "".join(f"{edge.vertex}({edge.cost}) " for edge in adjacency)
            lines.append(f"{vertex} : {body}")
        return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a weighted graph and print it, its shortest paths and spanning tree."""
    parser = argparse.ArgumentParser(
        description="Dijkstra and Prim on a weighted undirected graph."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="graph input file")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            graph = WeightedGraph.from_text(handle.read())
    except OSError as exc:
        print(f"Error: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1
    except (ValueError, IndexError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print()
    print(graph.format(), end="")

    if graph.node_count > 0:
        print("\nVertex  Distance from Source")
        for vertex, distance in enumerate(graph.dijkstra(0)):
            print(f"{vertex}\t\t{distance}")

    print("\nEdge  Weight")
    for edge in graph.prim():
        print(f"{edge.parent} - {edge.vertex}\t{edge.weight}")
    return 0


if __name__ == "__main__":
    sys.exit(main())