import pytest
from hypothesis import given, strategies as st

from boringkit.graph import Graph, Path, Vertex


def _build(ids, edges):
    graph = Graph()
    for vertex_id in ids:
        graph.add_vertex(vertex_id)
    for source, target, weight in edges:
        graph.add_path(graph.get_vertex(source), graph.get_vertex(target), weight)
    return graph


def test_add_and_get_vertex():
    graph = _build(["a", "b", "c"], [])
    assert len(graph) == 3
    assert [v.vertex_id for v in graph] == ["a", "b", "c"]
    assert graph.get_vertex("b").vertex_id == "b"
    assert graph.get_vertex("z") is None


def test_get_path_and_del_path():
    graph = _build(["a", "b", "c"], [("a", "b", 1.5), ("a", "c", 2.0)])
    a = graph.get_vertex("a")
    path = graph.get_path(a, "c")
    assert isinstance(path, Path)
    assert path.to is graph.get_vertex("c")
    assert path.weight == 2.0
    removed = graph.del_path(a, graph.get_vertex("c"))
    assert removed is path
    assert graph.get_path(a, "c") is None
    assert graph.del_path(a, graph.get_vertex("c")) is None
    assert [p.to.vertex_id for p in a.paths] == ["b"]


def test_paths_matrix_uses_vertex_order():
    graph = _build([10, 20, 30], [(10, 30, 4.0), (30, 20, 1.0)])
    matrix = graph.paths_matrix()
    assert matrix == {(0, 2): 4.0, (2, 1): 1.0}
    assert [v.index for v in graph] == [0, 1, 2]


def test_paths_matrix_later_path_overwrites():
    graph = _build([1, 2], [(1, 2, 3.0), (1, 2, 7.0)])
    assert graph.paths_matrix() == {(0, 1): 7.0}


def test_reverse_transposes_paths():
    graph = _build(["x", "y", "z"], [("x", "y", 1.0), ("y", "z", 2.0)])
    reversed_graph = graph.reverse()
    assert [v.vertex_id for v in reversed_graph] == ["x", "y", "z"]
    assert reversed_graph.paths_matrix() == {(1, 0): 1.0, (2, 1): 2.0}
    y = reversed_graph.get_vertex("y")
    assert reversed_graph.get_path(y, "x").weight == 1.0
    assert reversed_graph.get_path(y, "z") is None


def test_connect_vertexes_rejects_out_of_range():
    graph = _build([1, 2], [])
    with pytest.raises(IndexError):
        graph.connect_vertexes({(0, 1): 1.0, (0, 5): 2.0})
    assert all(len(v.paths) == 0 for v in graph)


def test_connect_vertexes_adds_paths():
    graph = _build([1, 2, 3], [])
    graph.connect_vertexes({(2, 0): 5.0, (0, 1): 1.0})
    assert graph.paths_matrix() == {(2, 0): 5.0, (0, 1): 1.0}


def test_del_vertex_drops_incoming_and_outgoing():
    graph = _build([1, 2, 3], [(1, 2, 1.0), (2, 3, 1.0), (3, 2, 1.0)])
    two = graph.get_vertex(2)
    graph.del_vertex(two)
    assert [v.vertex_id for v in graph] == [1, 3]
    assert len(two.paths) == 0
    assert graph.paths_matrix() == {}
    with pytest.raises(ValueError):
        graph.del_vertex(two)


def test_del_vertex_foreign_vertex():
    graph = _build([1], [])
    with pytest.raises(ValueError):
        graph.del_vertex(Vertex(1))


def test_initialize_exploring_gives_fresh_objects():
    graph = _build([1, 2], [])
    graph.initialize_exploring(dict)
    first, second = list(graph)
    assert first.exploring == {}
    first.exploring["seen"] = True
    assert second.exploring == {}


def test_custom_matchers():
    graph = Graph(
        match_vertex=lambda v, name: 0 if v.vertex_id.lower() == name.lower() else 1,
        match_path=lambda p, name: 0 if p.to.vertex_id.lower() == name.lower() else 1,
    )
    a = graph.add_vertex("Alpha")
    b = graph.add_vertex("Beta")
    graph.add_path(a, b, 1.0)
    assert graph.get_vertex("alpha") is a
    assert graph.get_path(a, "BETA").to is b


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.dictionaries(
                st.tuples(
                    st.integers(min_value=0, max_value=n - 1),
                    st.integers(min_value=0, max_value=n - 1),
                ),
                st.floats(min_value=-100, max_value=100, allow_nan=False),
                max_size=12,
            ),
        )
    )
)
def test_reverse_twice_restores_matrix(data):
    size, matrix = data
    graph = Graph()
    for vertex_id in range(size):
        graph.add_vertex(vertex_id)
    graph.connect_vertexes(matrix)
    assert graph.reverse().reverse().paths_matrix() == graph.paths_matrix()