"""Weighted graph, directed or undirected, stored as ordered adjacency lists."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

INFINITY = 999999


@dataclass(frozen=True)
class Arc:
    """An entry of an adjacency list: the target vertex and the arc cost."""

    vertex: int
    cost: int


class Graph:
    """A graph on vertices ``0 .. vertex_count - 1``.

    Arcs are kept in insertion order.  In an undirected graph every edge is
    stored in the lists of both of its ends.
    """

    def __init__(self, vertex_count: int, directed: bool) -> None:
        if vertex_count <= 0:
            raise ValueError("invalid number of vertices")
        self.vertex_count = vertex_count
        self.directed = bool(directed)
        self._adjacency: list[list[Arc]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_text(cls, text: str) -> Graph:
        """Build a graph from "<V> <type>", "<M>" and M "u v cost" triples.

        A type of 0 means undirected; anything else means directed.
        """
        try:
            numbers = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError("graph description must hold integers only") from exc
        if len(numbers) < 3:
            raise ValueError("missing graph header")
        vertex_count, kind, edge_count = numbers[0], numbers[1], numbers[2]
        if edge_count < 0:
            raise ValueError("number of edges must not be negative")
        triples = numbers[3:]
        if len(triples) < 3 * edge_count:
            raise ValueError("fewer edges given than announced")
        graph = cls(vertex_count, kind != 0)
        values = iter(triples[: 3 * edge_count])
        for u, v, cost in zip(values, values, values):
            graph.insert_edge(u, v, cost)
        return graph

    def _valid(self, vertex: int) -> bool:
        return 0 <= vertex < self.vertex_count

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not self._valid(vertex):
                raise IndexError(f"vertex {vertex} is out of range")

    def neighbours(self, vertex: int) -> list[Arc]:
        """The arcs leaving ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def insert_edge(self, u: int, v: int, cost: int) -> None:
        """Append the arc u -> v; an undirected graph also gets v -> u."""
        self._check(u, v)
        self._adjacency[u].append(Arc(v, cost))
        if not self.directed:
            self._adjacency[v].append(Arc(u, cost))

    def delete_edge(self, u: int, v: int, cost: int) -> None:
        """Remove the first arc u -> v with ``cost`` (and its mirror if undirected)."""
        self._check(u, v)
        self._discard(u, Arc(v, cost))
        if not self.directed:
            self._discard(v, Arc(u, cost))

    def _discard(self, vertex: int, arc: Arc) -> None:
        try:
            self._adjacency[vertex].remove(arc)
        except ValueError:
            pass

    def is_arc(self, u: int, v: int) -> bool:
        """True when an arc u -> v exists; False for out-of-range vertices."""
        if not (self._valid(u) and self._valid(v)):
            return False
        return any(arc.vertex == v for arc in self._adjacency[u])

    def cost(self, u: int, v: int) -> int:
        """Cost of the first arc u -> v, or ``INFINITY`` if there is none."""
        if not (self._valid(u) and self._valid(v)):
            return INFINITY
        for arc in self._adjacency[u]:
            if arc.vertex == v:
                return arc.cost
        return INFINITY

    def to_dot(self) -> str:
        """Describe the graph in the Graphviz dot language."""
        lines = [
            f"{'digraph' if self.directed else 'graph'} G {{",
            '    node [fontname="Arial", shape=circle, style=filled, fillcolor=yellow];',
        ]
        for u, arcs in enumerate(self._adjacency):
            for arc in arcs:
                if self.directed:
                    lines.append(f"    {u} -> {arc.vertex};")
                elif u < arc.vertex:
                    lines.append(f"    {u} -- {arc.vertex};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def draw(self, name: Union[str, os.PathLike]) -> Optional[Path]:
        """Write the dot description to ``name`` and render a PNG next to it.

        Rendering pipes ``dot`` into ``neato``.  Returns the PNG path, or
        None when the Graphviz tools could not be run or failed.
        """
        dot_name = os.fspath(name)
        Path(dot_name).write_text(self.to_dot(), encoding="utf-8")
        base = dot_name[:-4] if len(dot_name) > 4 and dot_name.endswith(".dot") else dot_name
        png = f"{base}.png"
        try:
            layout = subprocess.Popen(["dot", dot_name], stdout=subprocess.PIPE)
            try:
                render = subprocess.run(
                    ["neato", "-n", "-Tpng", "-o", png],
                    stdin=layout.stdout,
                    check=False,
                )
            finally:
                if layout.stdout is not None:
                    layout.stdout.close()
                layout.wait()
        except OSError as exc:
            logger.error("failed to execute Graphviz command: %s", exc)
            return None
        if render.returncode != 0:
            logger.error("Graphviz exited with status %d", render.returncode)
            return None
        return Path(png)

    def format(self) -> str:
        """Render the graph as a header line and one adjacency line per vertex."""
        kind = "Directed graph" if self.directed else "Undirected graph"
        lines = [f"{kind} with {self.vertex_count} nodes"]
        for u, arcs in enumerate(self._adjacency):
            body = "".join(f"({arc.vertex}, {arc.cost}) -> " for arc in arcs)
            lines.append(f"{u}: {body}NULL")
        return "\n".join(lines) + "\n"