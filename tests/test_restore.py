import pytest

from caesar.diag import DiagError
from caesar.graph.factory import create_cube_graph, create_tetrahedron_graph
from caesar.graph.graph import Graph
from caesar.graph.history import ReduceHistory, ReduceStep
from caesar.graph.reduce import full_reduce
from caesar.graph.restore import (
    restore,
    restore_step,
    restore_step_parallel_edge,
    restore_step_unique_edge,
)


def _two_digons() -> Graph:
    g = Graph()
    for _ in range(4):
        g.new_vertex()
    g.add_edge(0, 1)
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    g.add_edge(2, 3)
    g.add_edge(0, 2)
    g.add_edge(1, 3)
    return g


@pytest.mark.parametrize(
    "builder", [create_tetrahedron_graph, create_cube_graph, _two_digons]
)
def test_reduce_then_restore_gives_same_graph(builder):
    g = builder()
    reference = builder()
    history = ReduceHistory()
    steps = full_reduce(g, history)
    assert steps == len(history)
    assert g.is_minimal_cubic()
    restore(g, history)
    assert history.is_empty()
    assert Graph.is_strong_isomorphic(g, reference)
    assert g.is_cubic()


def test_restore_step_pops_one_step():
    g = create_cube_graph()
    history = ReduceHistory()
    steps = full_reduce(g, history)
    assert steps >= 1
    order_before = g.order()
    restore_step(g, history)
    assert len(history) == steps - 1
    assert g.order() == order_before + 2


def test_restore_unique_step_on_tetrahedron():
    g = create_tetrahedron_graph()
    history = ReduceHistory()
    full_reduce(g, history)
    step = history.last()
    assert step.is_reduce_by_unique_edge()
    restore_step_unique_edge(g, step)
    assert g.order() == 4
    assert g.size() == 6
    assert g.is_cubic()
    assert g.find_edge_by_id(step.e_id).is_incident(g.find_vertex_by_id(step.v1_id))


def test_restore_parallel_step_on_two_digons():
    g = _two_digons()
    history = ReduceHistory()
    full_reduce(g, history)
    step = history.last()
    assert step.is_reduce_by_parallel_edge()
    restore_step_parallel_edge(g, step)
    assert g.order() == 4
    assert g.is_cubic()
    assert g.has_parallel_edges()


def test_restore_step_from_empty_history_fails():
    with pytest.raises(DiagError):
        restore_step(create_tetrahedron_graph(), ReduceHistory())


def test_restore_unique_rejects_parallel_step():
    step = ReduceStep(0, 1, 0, 4, 1, 5, 1, 6, 6)
    with pytest.raises(DiagError):
        restore_step_unique_edge(Graph(), step)


def test_restore_parallel_rejects_unique_step():
    step = ReduceStep(0, 1, 0, 1, 2, 3, 4, 6, 7)
    with pytest.raises(DiagError):
        restore_step_parallel_edge(Graph(), step)


def test_restore_with_missing_result_edge_fails():
    g = Graph()
    g.new_vertex()
    g.new_vertex()
    step = ReduceStep(5, 6, 10, 11, 12, 13, 14, 100, 101)
    with pytest.raises(DiagError):
        restore_step_unique_edge(g, step)