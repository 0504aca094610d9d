import random

import pytest

from traverses.fixtures import mk_fixture_graph, FIXTURE_EDGES
from traverses.graph import Graph, VertexOutOfRangeError


def reachable(graph: Graph, start: int):
    seen = {start}
    frontier = [start]
    while frontier:
        vertex = frontier.pop()
        for dest in graph.adj_lists[vertex]:
            if dest not in seen:
                seen.add(dest)
                frontier.append(dest)
    return seen


def mk_random_graph(n_vertices, n_edges) -> Graph:
    graph = Graph(n_vertices)
    for _ in range(n_edges):
        graph.add_edge(random.randrange(n_vertices), random.randrange(n_vertices))
    return graph


def test_dfs():
    assert mk_fixture_graph().dfs(0) == [0, 1, 2, 4, 3]


def test_dfs_marks_visited():
    graph = mk_fixture_graph()
    graph.dfs(1)
    assert graph.visited == [False, True, True, False, True]


def test_repeated_dfs_keeps_visited_marks():
    graph = mk_fixture_graph()
    assert graph.dfs(0) == [0, 1, 2, 4, 3]
    assert graph.dfs(0) == [0]
    assert graph.dfs(3) == [3]


def test_dfs_after_partial_dfs_skips_marked_vertices():
    graph = mk_fixture_graph()
    assert graph.dfs(2) == [2, 4]
    assert graph.dfs(0) == [0, 1, 3]


def test_fresh_graph_restarts():
    mk_fixture_graph().dfs(0)
    assert mk_fixture_graph().dfs(0) == [0, 1, 2, 4, 3]


def test_neighbours_in_insertion_order():
    graph = Graph(4)
    graph.add_edge(0, 3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.dfs(0) == [0, 3, 1, 2]


def test_duplicate_edges_and_cycles():
    graph = Graph(3)
    for src, dest in [(0, 1), (0, 1), (1, 0), (1, 2), (2, 2), (2, 0), (0, 2)]:
        graph.add_edge(src, dest)
    assert graph.adj_lists == [[1, 1, 2], [0, 2], [2, 0]]
    assert graph.dfs(0) == [0, 1, 2]


def test_isolated_vertex():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.dfs(2) == [2]


def test_each_reachable_vertex_visited_once():
    random.seed(42)
    for n_vertices in range(1, 30):
        for attempt in range(5):
            graph = mk_random_graph(n_vertices, n_edges=random.randint(0, 3 * n_vertices))
            start = random.randrange(n_vertices)
            expected = reachable(graph, start)
            result = graph.dfs(start)
            assert result[0] == start
            assert len(result) == len(set(result))
            assert set(result) == expected


@pytest.mark.parametrize("src,dest", [(5, 0), (0, 5), (-1, 0), (0, -1), (7, 9)])
def test_add_edge_out_of_range(src, dest):
    graph = mk_fixture_graph()
    with pytest.raises(VertexOutOfRangeError):
        graph.add_edge(src, dest)
    assert [(s, d) for s, dests in enumerate(graph.adj_lists) for d in dests] == FIXTURE_EDGES


@pytest.mark.parametrize("vertex", [5, -1, 100])
def test_dfs_out_of_range(vertex):
    graph = mk_fixture_graph()
    with pytest.raises(IndexError):
        graph.dfs(vertex)
    assert not any(graph.visited)


@pytest.mark.parametrize("v", [-1, 2.5, "3"])
def test_bad_vertex_count(v):
    with pytest.raises(ValueError):
        Graph(v)


def test_empty_graph():
    graph = Graph(0)
    assert graph.size() == 0
    with pytest.raises(VertexOutOfRangeError):
        graph.dfs(0)
