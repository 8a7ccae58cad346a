from unittest.mock import patch

import pytest

from algolab.digraph import INFINITY, Arc, Graph


def test_invalid_vertex_count():
    with pytest.raises(ValueError):
        Graph(0, False)


def test_undirected_edge_stored_both_ways():
    graph = Graph(3, False)
    graph.insert_edge(0, 1, 5)
    assert graph.neighbours(0) == [Arc(1, 5)]
    assert graph.neighbours(1) == [Arc(0, 5)]
    assert graph.neighbours(2) == []


def test_directed_edge_stored_one_way():
    graph = Graph(3, True)
    graph.insert_edge(0, 1, 5)
    assert graph.is_arc(0, 1)
    assert not graph.is_arc(1, 0)


def test_arcs_kept_in_insertion_order():
    graph = Graph(4, True)
    graph.insert_edge(0, 3, 1)
    graph.insert_edge(0, 1, 2)
    graph.insert_edge(0, 2, 3)
    assert [arc.vertex for arc in graph.neighbours(0)] == [3, 1, 2]


def test_insert_out_of_range():
    graph = Graph(2, True)
    with pytest.raises(IndexError):
        graph.insert_edge(0, 2, 1)
    with pytest.raises(IndexError):
        graph.insert_edge(-1, 0, 1)


def test_cost_and_missing_arc():
    graph = Graph(3, True)
    graph.insert_edge(0, 2, 4)
    assert graph.cost(0, 2) == 4
    assert graph.cost(2, 0) == INFINITY
    assert graph.cost(0, 9) == 999999
    assert not graph.is_arc(0, 9)


def test_delete_edge_removes_first_match_only():
    graph = Graph(2, True)
    graph.insert_edge(0, 1, 3)
    graph.insert_edge(0, 1, 3)
    graph.delete_edge(0, 1, 3)
    assert graph.neighbours(0) == [Arc(1, 3)]


def test_delete_undirected_edge_both_sides():
    graph = Graph(2, False)
    graph.insert_edge(0, 1, 3)
    graph.delete_edge(0, 1, 3)
    assert graph.neighbours(0) == []
    assert graph.neighbours(1) == []


def test_delete_missing_edge_is_noop():
    graph = Graph(2, True)
    graph.insert_edge(0, 1, 3)
    graph.delete_edge(0, 1, 4)
    assert graph.neighbours(0) == [Arc(1, 3)]


def test_to_dot_undirected_lists_each_edge_once():
    graph = Graph(2, False)
    graph.insert_edge(0, 1, 1)
    dot = graph.to_dot()
    assert dot.startswith("graph G {\n")
    assert dot.count("--") == 1
    assert "    0 -- 1;" in dot
    assert dot.endswith("}\n")


def test_to_dot_directed():
    graph = Graph(2, True)
    graph.insert_edge(1, 0, 1)
    dot = graph.to_dot()
    assert dot.startswith("digraph G {\n")
    assert "    1 -> 0;" in dot


def test_format_shape():
    graph = Graph(2, False)
    graph.insert_edge(0, 1, 7)
    lines = graph.format().splitlines()
    assert lines[0] == "Undirected graph with 2 nodes"
    assert lines[1] == "0: (1, 7) -> NULL"
    assert all(line.endswith("NULL") for line in lines[1:])


def test_from_text_round_trip():
    graph = Graph.from_text("3 1\n2\n0 1 4\n1 2 6\n")
    assert graph.directed
    assert graph.vertex_count == 3
    assert graph.cost(0, 1) == 4
    assert graph.cost(1, 2) == 6
    assert not graph.is_arc(2, 1)


def test_from_text_short_input():
    with pytest.raises(ValueError):
        Graph.from_text("3 0\n2\n0 1 4\n")


def test_draw_writes_dot_file_without_graphviz(tmp_path):
    graph = Graph(2, True)
    graph.insert_edge(0, 1, 1)
    target = tmp_path / "graph0.dot"
    with patch("algolab.digraph.subprocess.Popen", side_effect=FileNotFoundError):
        result = graph.draw(target)
    assert result is None
    assert target.read_text(encoding="utf-8") == graph.to_dot()