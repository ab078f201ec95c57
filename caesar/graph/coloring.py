"""Edge coloring of graphs."""

from __future__ import annotations

from caesar.diag import check_error, raise_error
from caesar.graph.bicolor_cycle import BicolorCycle
from caesar.graph.elements import Edge
from caesar.graph.graph import Graph
from caesar.graph.history import ReduceHistory, ReduceStep
from caesar.graph.reduce import full_reduce
from caesar.graph.restore import restore_step_parallel_edge, restore_step_unique_edge

__all__ = ["edges_coloring_greedy", "edges_coloring_for_cubic_graph"]

_TAIT_COLORS = 3


def edges_coloring_greedy(graph: Graph) -> int:
    """Paint each edge with the least color free at its ends; return colors used."""
    for e in graph.edges:
        e.color = -1

    max_color = -1
    for e in graph.edges:
        e.greedy_paint()
        max_color = max(max_color, e.color)

    check_error(graph.is_edges_coloring_correct(), "greedy edges coloring fault")
    return max_color + 1


def _edge(graph: Graph, edge_id: int) -> Edge:
    e = graph.find_edge_by_id(edge_id)
    check_error(e is not None, f"no edge e{edge_id} in graph")
    return e


def _repaint_unique_on_cycle(
    graph: Graph, step: ReduceStep, bc: BicolorCycle, result_e1: Edge, result_e2: Edge
) -> None:
    check_error(
        result_e1 in bc and result_e2 in bc,
        "bicolor cycle must contain both edges",
    )

    # The restored middle edge takes the color the cycle does not use.
    e_color = _TAIT_COLORS - bc.sum_colors()

    bc.switch_colors_between(result_e1, result_e2)
    restore_step_unique_edge(graph, step)

    _edge(graph, step.e_id).color = e_color
    side_edges = [
        _edge(graph, step.v1_e1_id),
        _edge(graph, step.v1_e2_id),
        _edge(graph, step.v2_e1_id),
        _edge(graph, step.v2_e2_id),
    ]
    for e in side_edges:
        e.greedy_paint()

    check_error(
        e_color < _TAIT_COLORS and all(e.color < _TAIT_COLORS for e in side_edges),
        "we can use only [0-2] colors",
    )


def _repaint_unique_eq_colors(
    graph: Graph, step: ReduceStep, result_e1: Edge, result_e2: Edge
) -> None:
    check_error(result_e1.color == result_e2.color, "edges must be the same color")

    for another_color in range(_TAIT_COLORS):
        if another_color == result_e1.color:
            continue
        bc = BicolorCycle()
        bc.build(result_e1, another_color)
        if result_e2 in bc:
            _repaint_unique_on_cycle(graph, step, bc, result_e1, result_e2)
            return

    raise_error("impossible to restore graph with Tait coloring")


def _repaint_unique_ne_colors(
    graph: Graph, step: ReduceStep, result_e1: Edge, result_e2: Edge
) -> None:
    check_error(result_e1.color != result_e2.color, "edges must not be the same color")

    bc = BicolorCycle()
    bc.build(result_e1, result_e2.color)

    if result_e2 in bc:
        _repaint_unique_on_cycle(graph, step, bc, result_e1, result_e2)
    else:
        # Swapping the cycle gives both result edges the same color.
        bc.switch_colors()
        _repaint_unique_eq_colors(graph, step, result_e1, result_e2)


def _repaint_unique(graph: Graph, step: ReduceStep) -> None:
    result_e1 = _edge(graph, step.result_e1_id)
    result_e2 = _edge(graph, step.result_e2_id)
    if result_e1.color == result_e2.color:
        _repaint_unique_eq_colors(graph, step, result_e1, result_e2)
    else:
        _repaint_unique_ne_colors(graph, step, result_e1, result_e2)


def _repaint_parallel(graph: Graph, step: ReduceStep) -> None:
    result_color = _edge(graph, step.result_e1_id).color

    restore_step_parallel_edge(graph, step)

    _edge(graph, step.v1_e1_id).color = result_color
    _edge(graph, step.v2_e1_id).color = result_color
    _edge(graph, step.v1_e2_id).greedy_paint()
    _edge(graph, step.e_id).greedy_paint()


def edges_coloring_for_cubic_graph(graph: Graph) -> None:
    """Paint the edges of a cubic graph in three colors using bicolor cycles."""
    check_error(
        graph.is_cubic(),
        "bicolor cycles algorithm is applicable only for cubic graphs",
    )

    history = ReduceHistory()
    full_reduce(graph, history)

    check_error(graph.is_minimal_cubic(), "reducing to minimal cubic graph faul")

    for i, e in enumerate(graph.edges):
        e.color = i

    while not history.is_empty():
        step = history.last()
        if step.is_reduce_by_unique_edge():
            _repaint_unique(graph, step)
        else:
            _repaint_parallel(graph, step)
        history.pop()

    graph.arrange_objects_increasing_ids()

    check_error(graph.is_edges_coloring_correct(), "greedy edges coloring fault")