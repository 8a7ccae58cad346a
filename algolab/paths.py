"""Topological sorting and shortest paths over a :class:`~algolab.digraph.Graph`."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from algolab.digraph import INFINITY, Arc, Graph

SCORE_PER_CHECK = 1.5
DEFAULT_DATA_DIR = "../data"


def topological_sort(graph: Graph) -> list[int]:
    """Order the vertices so that every arc u -> v has u before v.

    Depth-first searches start from every unvisited vertex in increasing
    order; vertices come out in reverse order of completion.
    """
    visited = [False] * graph.vertex_count
    finished: list[int] = []
    for root in range(graph.vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[Arc]]] = [(root, iter(graph.neighbours(root)))]
        while stack:
            vertex, arcs = stack[-1]
            for arc in arcs:
                if not visited[arc.vertex]:
                    visited[arc.vertex] = True
                    stack.append((arc.vertex, iter(graph.neighbours(arc.vertex))))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished


def bellman_ford(graph: Graph, start: int) -> list[int]:
    """Single-source shortest distances from ``start``.

    Distances begin as the direct arc costs from ``start`` and are relaxed
    over every arc ``vertex_count - 2`` times.  Unreachable vertices keep
    ``INFINITY``.
    """
    if not 0 <= start < graph.vertex_count:
        raise IndexError(f"vertex {start} is out of range")
    n = graph.vertex_count
    distances = [graph.cost(start, v) for v in range(n)]
    distances[start] = 0
    for _ in range(n - 2):
        for u in range(n):
            if distances[u] == INFINITY:
                continue
            for arc in graph.neighbours(u):
                candidate = distances[u] + arc.cost
                if distances[arc.vertex] > candidate:
                    distances[arc.vertex] = candidate
    return distances


def floyd_warshall(graph: Graph) -> list[list[int]]:
    """All-pairs distance matrix.

    Entries start as the direct arc costs (``INFINITY`` where there is no
    arc, the diagonal included).  A path i -> j is improved through k using
    the direct arc i -> k followed by the current distance k -> j.
    """
    n = graph.vertex_count
    distances = [[graph.cost(i, j) for j in range(n)] for i in range(n)]
    for k in range(n):
        row_k = distances[k]
        for i in range(n):
            step = graph.cost(i, k)
            if step == INFINITY:
                continue
            row_i = distances[i]
            for j in range(n):
                if row_k[j] == INFINITY:
                    continue
                candidate = row_k[j] + step
                if row_i[j] > candidate:
                    row_i[j] = candidate
    return distances


@dataclass(frozen=True)
class _Case:
    name: str
    dot_file: str
    expected_order: tuple[int, ...]
    expected_distances: tuple[int, ...]


_CASES = (
    _Case("test0", "graph0.dot", (0, 3, 2, 1, 4, 5), (0, 1, 3, 5, 0, 3)),
    _Case("test1", "graph1.dot", (0, 3, 5, 2, 1, 4, 6), (0, 1, 3, 5, 0, 4, 3)),
)


def _matches(result: Sequence[int], expected: Sequence[int]) -> bool:
    return len(expected) >= len(result) and list(result) == list(expected[: len(result)])


def _verdict(correct: bool) -> float:
    print("Correct" if correct else "Incorrect")
    return SCORE_PER_CHECK if correct else 0.0


def _read_reference(path: Path) -> Optional[list[int]]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return None
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def _process(case: _Case, data_dir: Path, draw: bool) -> float:
    input_path = data_dir / f"{case.name}.in"
    try:
        graph = Graph.from_text(input_path.read_text(encoding="utf-8"))
    except OSError as exc:
        print(f"Error: cannot read {input_path}: {exc}", file=sys.stderr)
        return 0.0
    except (ValueError, IndexError) as exc:
        print(f"Error: failed to initialize graph: {exc}", file=sys.stderr)
        return 0.0

    print(graph.format(), end="")
    if draw:
        graph.draw(case.dot_file)

    score = 0.0
    order = topological_sort(graph)
    print("\nTopological Sort Result: " + "".join(f"{v} " for v in order))
    score += _verdict(_matches(order, case.expected_order))

    distances = bellman_ford(graph, 0)
    print("\nBellman-Ford Result: " + "".join(f"{d} " for d in distances))
    score += _verdict(_matches(distances, case.expected_distances))

    matrix = floyd_warshall(graph)
    print("\nFloyd-Warshall Result:")
    reference_path = data_dir / f"{case.name}.ref"
    reference = _read_reference(reference_path)
    if reference is None:
        print(f"Error: Unable to open reference file: {reference_path}", file=sys.stderr)
        return score
    flat = [value for row in matrix for value in row]
    for row in matrix:
        print("".join(f"{value:6d} " for value in row))
    score += _verdict(reference[: len(flat)] == flat)
    return score


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorting and shortest-path checks on the bundled test cases."""
    parser = argparse.ArgumentParser(
        description="Topological sort, Bellman-Ford and Floyd-Warshall checks."
    )
    parser.add_argument(
        "--data-dir", default=DEFAULT_DATA_DIR, help="directory holding the test inputs"
    )
    parser.add_argument(
        "--no-draw", action="store_true", help="do not render the graphs with Graphviz"
    )
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)

    total = 0.0
    for case in _CASES:
        print("=" * 45)
        print(f"Processing test case: {case.name}.in")
        total += _process(case, data_dir, not args.no_draw)

    print("=" * 45)
    print(f"Total Score: {total:.2f}")
    print("Note: 1 bonus point is awarded if no memory leaks/errors occur.")
    return 0


if __name__ == "__main__":
    sys.exit(main())