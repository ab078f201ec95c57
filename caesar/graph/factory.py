"""Builders of common graphs."""

from __future__ import annotations

from caesar.graph.graph import Graph

__all__ = [
    "create_empty_graph",
    "create_edgeless_graph",
    "create_trivial_graph",
    "create_complete_graph",
    "create_tetrahedron_graph",
    "create_cyclic_graph",
    "create_prism_graph",
    "create_cube_graph",
]


def create_empty_graph() -> Graph:
    """Graph with no vertices and no edges."""
    return Graph()


def create_edgeless_graph(n: int) -> Graph:
    """Graph with ``n`` vertices and no edges."""
    g = create_empty_graph()
    for _ in range(n):
        g.new_vertex()
    return g


def create_trivial_graph() -> Graph:
    """Graph with a single vertex."""
    return create_edgeless_graph(1)


def create_complete_graph(n: int) -> Graph:
    """Complete graph on ``n`` vertices."""
    g = create_edgeless_graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            g.add_edge(i, j)
    return g


def create_tetrahedron_graph() -> Graph:
    """Complete graph on four vertices."""
    return create_complete_graph(4)


def create_cyclic_graph(n: int) -> Graph:
    """Cycle of ``n`` vertices."""
    g = create_edgeless_graph(n)
    g.add_cycle(0, n - 1)
    return g


def create_prism_graph(half_size: int) -> Graph:
    """Two cycles of ``half_size`` vertices joined vertex to vertex."""
    g = create_edgeless_graph(2 * half_size)
    g.add_cycle(0, half_size - 1)
    g.add_cycle(half_size, 2 * half_size - 1)
    for i in range(half_size):
        g.add_edge(i, i + half_size)
    g.arrange_objects_increasing_ids()
    return g


def create_cube_graph() -> Graph:
    """Graph of the cube's vertices and edges."""
    return create_prism_graph(4)