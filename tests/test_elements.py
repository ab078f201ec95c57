import pytest

from caesar.diag import DiagError
from caesar.graph.elements import Edge, Vertex


def link(a, b, id):
    e = Edge(id)
    a.add_edge(e)
    b.add_edge(e)
    for v in sorted((a, b), key=lambda v: v.id):
        e.add_vertex(v)
    return e


def complete4():
    vs = [Vertex(i) for i in range(4)]
    es = []
    k = 0
    for i in range(4):
        for j in range(i + 1, 4):
            es.append(link(vs[i], vs[j], k))
            k += 1
    return vs, es


def test_vertex_str():
    v = Vertex(3)
    link(v, Vertex(5), 7)
    link(v, Vertex(1), 2)
    assert str(v) == "v3 : edges(7,2)"


def test_edge_str_and_default_color():
    e = link(Vertex(5), Vertex(3), 7)
    assert e.color == -1
    assert str(e) == "e7 : (3-5), color = -1"


def test_degree_isolated_leaf():
    v = Vertex(0)
    assert v.is_isolated()
    assert v.degree() == 0
    link(v, Vertex(1), 0)
    assert v.is_leaf()
    assert not v.is_isolated()
    link(v, Vertex(2), 1)
    assert v.degree() == 2
    assert not v.is_leaf()


def test_neighbour():
    a, b = Vertex(0), Vertex(1)
    e = link(a, b, 0)
    assert a.neighbour(e) is b
    assert b.neighbour(e) is a


def test_neighbour_not_incident_raises():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e = link(a, b, 0)
    with pytest.raises(DiagError):
        c.neighbour(e)


def test_incidence():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e = link(a, b, 0)
    assert a.is_incident(e)
    assert not c.is_incident(e)
    assert e.is_incident(b)
    assert not e.is_incident(c)


def test_find_edge_and_adjacency():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e = link(a, b, 4)
    assert a.find_edge(b) is e
    assert a.find_edge(c) is None
    assert b.is_adjacent(a)
    assert not a.is_adjacent(c)


def test_has_parallel_edges():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    link(a, b, 0)
    link(a, c, 1)
    assert not a.has_parallel_edges()
    link(a, b, 2)
    assert a.has_parallel_edges()
    assert not c.has_parallel_edges()


def test_edges_coloring_correct():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e1 = link(a, b, 0)
    e2 = link(a, c, 1)
    # Two unpainted edges share the color -1.
    assert not a.is_edges_coloring_correct()
    e1.color = 0
    e2.color = 1
    assert a.is_edges_coloring_correct()
    e2.color = 0
    assert not a.is_edges_coloring_correct()


def test_remove_edge():
    a, b = Vertex(0), Vertex(1)
    e = link(a, b, 0)
    a.remove_edge(e)
    assert a.is_isolated()
    assert not a.is_incident(e)
    with pytest.raises(DiagError):
        a.remove_edge(e)


def test_arrange_edges_and_vertices():
    a = Vertex(0)
    link(a, Vertex(1), 5)
    link(a, Vertex(2), 2)
    link(a, Vertex(3), 9)
    a.arrange_edges_increasing_ids()
    ids = [e.id for e in a.edges]
    assert ids == sorted(ids)

    e = Edge(0)
    e.add_vertex(Vertex(8))
    e.add_vertex(Vertex(4))
    e.arrange_vertices_increasing_ids()
    assert e.a.id < e.b.id


def test_end_bounds():
    a, b = Vertex(0), Vertex(1)
    e = link(a, b, 0)
    assert e.end(0) is a
    assert e.end(1) is b
    with pytest.raises(DiagError):
        e.end(2)


def test_is_loop():
    a, b = Vertex(0), Vertex(1)
    assert not link(a, b, 0).is_loop()
    assert link(a, a, 1).is_loop()


def test_unique_reduceable_in_complete4():
    vs, es = complete4()
    assert all(e.is_cubic_graph_unique_reduceable_edge() for e in es)
    assert not any(e.is_cubic_graph_parallel_reduceable_edge() for e in es)


def test_unique_reduceable_requires_degree_three():
    a, b = Vertex(0), Vertex(1)
    e = link(a, b, 0)
    assert not e.is_cubic_graph_unique_reduceable_edge()


def test_parallel_reduceable():
    a, b, c, d = Vertex(0), Vertex(1), Vertex(2), Vertex(3)
    e = link(a, b, 0)
    e2 = link(a, b, 1)
    link(a, c, 2)
    link(b, d, 3)
    assert e.is_cubic_graph_parallel_reduceable_edge()
    assert e2.is_cubic_graph_parallel_reduceable_edge()
    assert not e.is_cubic_graph_unique_reduceable_edge()


def test_parallel_not_reduceable_with_common_neighbour():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e = link(a, b, 0)
    link(a, b, 1)
    link(a, c, 2)
    link(b, c, 3)
    assert not e.is_cubic_graph_parallel_reduceable_edge()


def test_greedy_paint_gives_correct_coloring():
    vs, es = complete4()
    for e in es:
        e.greedy_paint()
    assert all(e.color >= 0 for e in es)
    assert all(v.is_edges_coloring_correct() for v in vs)


def test_greedy_paint_picks_least_free_color():
    a, b, c = Vertex(0), Vertex(1), Vertex(2)
    e1 = link(a, b, 0)
    e2 = link(b, c, 1)
    e1.greedy_paint()
    assert e1.color == 0
    e2.greedy_paint()
    assert e2.color == 1