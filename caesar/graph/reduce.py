"""Reduction of cubic graphs down to the minimal cubic graph."""

from __future__ import annotations

from caesar.diag import check_error
from caesar.graph.elements import Edge
from caesar.graph.graph import Graph
from caesar.graph.history import ReduceHistory

__all__ = [
    "unique_reduceable_edge",
    "parallel_reduceable_edge",
    "reduce_by_unique_edge",
    "reduce_by_parallel_edge",
    "full_reduce",
]


def unique_reduceable_edge(graph: Graph) -> Edge | None:
    """First edge that can be reduced as a unique edge, or None."""
    return next(
        (e for e in graph.edges if e.is_cubic_graph_unique_reduceable_edge()), None
    )


def parallel_reduceable_edge(graph: Graph) -> Edge | None:
    """First edge that can be reduced as a parallel edge, or None."""
    return next(
        (e for e in graph.edges if e.is_cubic_graph_parallel_reduceable_edge()), None
    )


def reduce_by_unique_edge(
    graph: Graph, e: Edge, history: ReduceHistory | None = None
) -> None:
    """Remove edge ``e`` with its ends, gluing the edges left at each end."""
    check_error(
        e.is_cubic_graph_unique_reduceable_edge(),
        "edge is not unique reduceable in cubic graph",
    )

    a, b = e.a, e.b
    e_id = e.id

    graph.remove_edge(e)
    check_error(a.degree() == 2, "trying to reduce by edge for non cubic graph")
    check_error(b.degree() == 2, "trying to reduce by edge for non cubic graph")

    v1_id, v2_id = a.id, b.id

    new_e1, v1_e1_id, v1_e2_id = graph.glue_two_incident_edges(a)
    new_e2, v2_e1_id, v2_e2_id = graph.glue_two_incident_edges(b)

    if history is not None:
        history.remember(
            v1_id,
            v2_id,
            e_id,
            v1_e1_id,
            v1_e2_id,
            v2_e1_id,
            v2_e2_id,
            new_e1.id,
            new_e2.id,
        )


def reduce_by_parallel_edge(
    graph: Graph, e: Edge, history: ReduceHistory | None = None
) -> None:
    """Remove doubled edge ``e`` with its twin and ends, joining the far neighbours."""
    check_error(
        e.is_cubic_graph_parallel_reduceable_edge(),
        "edge is not parallel reduceable in cubic graph",
    )

    v1, v2 = e.a, e.b
    e_id = e.id

    graph.remove_edge(e)
    check_error(v1.degree() == 2, "trying to reduce by edge for non cubic graph")
    check_error(v2.degree() == 2, "trying to reduce by edge for non cubic graph")

    e2 = graph.find_edge(v1, v2)
    check_error(e2 is not None, "no duplicate edge is found")
    e2_id = e2.id
    graph.remove_edge(e2)

    v1_id, v2_id = v1.id, v2.id
    v1_e1_id = v1.edges[0].id
    v2_e1_id = v2.edges[0].id

    new_e, is_reversed = graph.glue_two_hanging_edges(v1, v2)

    if history is not None:
        new_e_id = new_e.id
        if not is_reversed:
            history.remember(
                v1_id, v2_id, e_id, v1_e1_id, e2_id, v2_e1_id, e2_id, new_e_id, new_e_id
            )
        else:
            history.remember(
                v2_id, v1_id, e_id, v2_e1_id, e2_id, v1_e1_id, e2_id, new_e_id, new_e_id
            )


def full_reduce(graph: Graph, history: ReduceHistory | None = None) -> int:
    """Reduce while any reduceable edge is left; return the number of steps."""
    steps = 0
    while True:
        e = unique_reduceable_edge(graph)
        if e is not None:
            reduce_by_unique_edge(graph, e, history)
        else:
            e = parallel_reduceable_edge(graph)
            if e is None:
                break
            reduce_by_parallel_edge(graph, e, history)
        steps += 1
    return steps