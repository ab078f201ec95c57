"""Restoring a reduced cubic graph from its reduction history."""

from __future__ import annotations

from caesar.diag import check_error
from caesar.graph.elements import Edge
from caesar.graph.graph import Graph
from caesar.graph.history import ReduceHistory, ReduceStep

__all__ = [
    "restore_step_unique_edge",
    "restore_step_parallel_edge",
    "restore_step",
    "restore",
]


def _existing_edge(graph: Graph, edge_id: int) -> Edge:
    e = graph.find_edge_by_id(edge_id)
    check_error(e is not None, f"no edge e{edge_id} in graph")
    return e


def restore_step_unique_edge(graph: Graph, step: ReduceStep) -> None:
    """Undo a reduction by a unique edge."""
    check_error(
        step.is_reduce_by_unique_edge(), "restore by unique edge can not be applied"
    )

    result_e1 = _existing_edge(graph, step.result_e1_id)
    result_e2 = _existing_edge(graph, step.result_e2_id)

    v1 = graph.new_vertex(step.v1_id)
    v2 = graph.new_vertex(step.v2_id)

    graph.add_edge(v1, v2, step.e_id)
    graph.add_edge(v1, result_e1.a, step.v1_e1_id)
    graph.add_edge(v1, result_e1.b, step.v1_e2_id)
    graph.add_edge(v2, result_e2.a, step.v2_e1_id)
    graph.add_edge(v2, result_e2.b, step.v2_e2_id)

    graph.remove_edge(result_e1)
    graph.remove_edge(result_e2)


def restore_step_parallel_edge(graph: Graph, step: ReduceStep) -> None:
    """Undo a reduction by a parallel edge."""
    check_error(
        step.is_reduce_by_parallel_edge(),
        "restore by parallel edge can not be applied",
    )
    check_error(
        step.v1_e2_id == step.v2_e2_id,
        "second edges for both vertices must be equal",
    )

    result_e = _existing_edge(graph, step.result_e1_id)

    v1 = graph.new_vertex(step.v1_id)
    v2 = graph.new_vertex(step.v2_id)

    graph.add_edge(v1, v2, step.e_id)
    graph.add_edge(v1, v2, step.v1_e2_id)
    graph.add_edge(v1, result_e.a, step.v1_e1_id)
    graph.add_edge(v2, result_e.b, step.v2_e1_id)

    graph.remove_edge(result_e)


def restore_step(graph: Graph, history: ReduceHistory) -> None:
    """Undo the most recent step of ``history`` and drop it."""
    check_error(not history.is_empty(), "can not restore from empty history")
    step = history.last()
    if step.is_reduce_by_unique_edge():
        restore_step_unique_edge(graph, step)
    else:
        restore_step_parallel_edge(graph, step)
    history.pop()


def restore(graph: Graph, history: ReduceHistory) -> None:
    """Undo every step of ``history`` and arrange the graph by identifiers."""
    while not history.is_empty():
        restore_step(graph, history)
    graph.arrange_objects_increasing_ids()