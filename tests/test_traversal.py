import pytest

from algokit.traversal import Graph, TraversalResult, main

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (3, 5), (4, 5)]


def example_graph():
    graph = Graph(6)
    for u, v in EDGES:
        graph.add_edge(u, v)
    return graph


def assert_tree_edges_exist(graph, result):
    for vertex, parent in enumerate(result.parents):
        if parent is not None:
            assert vertex in graph.neighbors(parent)


def test_neighbors_most_recent_first():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    assert graph.neighbors(0) == [3, 2, 1]
    assert graph.neighbors(2) == [0]


def test_edges_are_undirected():
    graph = example_graph()
    for u, v in EDGES:
        assert v in graph.neighbors(u)
        assert u in graph.neighbors(v)


def test_bfs_example_order():
    assert example_graph().bfs(0).order == (0, 2, 1, 4, 3, 5)


def test_dfs_example_order():
    assert example_graph().dfs(0).order == (0, 1, 3, 5, 4, 2)


@pytest.mark.parametrize("start", range(6))
def test_bfs_visits_every_vertex_once(start):
    result = example_graph().bfs(start)
    assert result.order[0] == start
    assert sorted(result.order) == list(range(6))
    assert result.parents[start] is None


@pytest.mark.parametrize("start", range(6))
def test_dfs_visits_every_vertex_once(start):
    result = example_graph().dfs(start)
    assert result.order[0] == start
    assert sorted(result.order) == list(range(6))
    assert result.parents[start] is None


@pytest.mark.parametrize("start", range(6))
def test_tree_edges_are_graph_edges(start):
    graph = example_graph()
    assert_tree_edges_exist(graph, graph.bfs(start))
    assert_tree_edges_exist(graph, graph.dfs(start))


@pytest.mark.parametrize("start", range(6))
def test_parents_visited_before_children(start):
    graph = example_graph()
    for result in (graph.bfs(start), graph.dfs(start)):
        position = {vertex: index for index, vertex in enumerate(result.order)}
        for vertex, parent in enumerate(result.parents):
            if parent is not None:
                assert position[parent] < position[vertex]


def test_bfs_gives_shortest_depths():
    graph = example_graph()
    result = graph.bfs(0)

    def depth(vertex):
        steps = 0
        while result.parents[vertex] is not None:
            vertex = result.parents[vertex]
            steps += 1
        return steps

    depths = [depth(v) for v in result.order]
    assert depths == sorted(depths)
    for u, v in EDGES:
        assert abs(depth(u) - depth(v)) <= 1


def test_disconnected_vertices_are_not_reached():
    graph = Graph(5)
    graph.add_edge(0, 1)
    graph.add_edge(3, 4)
    for result in (graph.bfs(0), graph.dfs(0)):
        assert sorted(result.order) == [0, 1]
        assert result.parents[3] is None
        assert result.parents[4] is None
        assert result.children(3) == []


def test_children_highest_first():
    graph = Graph(4)
    for leaf in (1, 2, 3):
        graph.add_edge(0, leaf)
    result = graph.bfs(0)
    assert result.children(0) == sorted([1, 2, 3], reverse=True)


def test_format_tree_path():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.bfs(0).format_tree("BFS") == (
        "BFS Tree (Adjacency List Representation):\n0: 1 \n1: 2 \n2: No children\n"
    )


def test_format_tree_uses_label():
    result = TraversalResult(start=0, order=(0,), parents=(None,))
    text = result.format_tree("DFS")
    assert text.splitlines()[0] == "DFS Tree (Adjacency List Representation):"
    assert text.splitlines()[1] == "0: No children"


def test_invalid_vertices():
    graph = Graph(3)
    with pytest.raises(ValueError):
        graph.add_edge(0, 3)
    with pytest.raises(ValueError):
        graph.bfs(-1)
    with pytest.raises(ValueError):
        graph.dfs(5)
    with pytest.raises(ValueError):
        Graph(-2)


def test_main_bfs(capsys):
    assert main(["bfs"]) == 0
    out = capsys.readouterr().out
    result = example_graph().bfs(0)
    order = "".join(f"{v} " for v in result.order)
    assert out == (
        "Breadth-First Search starting from vertex 0:\n"
        + order
        + "\n\n"
        + result.format_tree("BFS")
    )


def test_main_dfs(capsys):
    assert main(["dfs"]) == 0
    out = capsys.readouterr().out
    result = example_graph().dfs(0)
    order = "".join(f"{v} " for v in result.order)
    assert out == (
        "Depth-First Search starting from vertex 0: "
        + order
        + "\n\n"
        + result.format_tree("DFS")
    )


def test_main_bad_start(capsys):
    assert main(["bfs", "--start", "9"]) == 1
    assert "out of range" in capsys.readouterr().err