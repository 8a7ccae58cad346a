import pytest

from algolab.digraph import INFINITY, Graph
from algolab.paths import bellman_ford, floyd_warshall, main, topological_sort


def _dag() -> Graph:
    return Graph.from_text(
        "6 1\n7\n0 1 1\n0 2 4\n1 3 2\n2 3 1\n3 4 3\n2 5 2\n4 5 1\n"
    )


def test_topological_sort_respects_every_arc():
    graph = _dag()
    order = topological_sort(graph)
    assert sorted(order) == list(range(graph.vertex_count))
    position = {v: i for i, v in enumerate(order)}
    for u in range(graph.vertex_count):
        for arc in graph.neighbours(u):
            assert position[u] < position[arc.vertex]


def test_topological_sort_diamond():
    graph = Graph.from_text("4 1 4  0 1 1  0 2 1  1 3 1  2 3 1")
    assert topological_sort(graph) == [0, 2, 1, 3]


def test_topological_sort_covers_disconnected_vertices():
    graph = Graph.from_text("3 1 0")
    assert sorted(topological_sort(graph)) == [0, 1, 2]


def test_bellman_ford_chain():
    graph = Graph.from_text("3 1 2  0 1 2  1 2 3")
    assert bellman_ford(graph, 0) == [0, 2, 5]


def test_bellman_ford_unreachable_is_infinity():
    graph = Graph.from_text("3 1 1  0 1 2")
    assert bellman_ford(graph, 0)[2] == INFINITY


def test_bellman_ford_never_exceeds_direct_cost():
    graph = _dag()
    distances = bellman_ford(graph, 0)
    assert distances[0] == 0
    for arc in graph.neighbours(0):
        assert distances[arc.vertex] <= arc.cost


def test_bellman_ford_rejects_bad_start():
    with pytest.raises(IndexError):
        bellman_ford(_dag(), 9)


def test_floyd_warshall_agrees_with_bellman_ford_off_diagonal():
    graph = Graph.from_text("3 1 2  0 1 2  1 2 3")
    matrix = floyd_warshall(graph)
    distances = bellman_ford(graph, 0)
    assert matrix[0][1:] == distances[1:]


def test_floyd_warshall_diagonal_stays_infinite_without_loops():
    graph = Graph.from_text("3 1 2  0 1 2  1 2 3")
    matrix = floyd_warshall(graph)
    assert all(matrix[i][i] == INFINITY for i in range(3))


def test_main_without_data_scores_nothing(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path), "--no-draw"]) == 0
    out = capsys.readouterr().out
    assert "Total Score: 0.00" in out


def test_main_scores_matching_case(tmp_path, capsys):
    (tmp_path / "test0.in").write_text("1 1\n0\n")
    (tmp_path / "test0.ref").write_text(f"{INFINITY}\n")
    assert main(["--data-dir", str(tmp_path), "--no-draw"]) == 0
    out = capsys.readouterr().out
    assert out.count("Correct") == 3
    assert "Incorrect" not in out
    assert "Total Score: 4.50" in out