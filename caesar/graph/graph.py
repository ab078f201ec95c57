"""Undirected graph without loops that may hold parallel edges."""

from __future__ import annotations

import random

from caesar.diag import check_error
from caesar.graph.elements import Edge, Vertex

__all__ = ["Graph"]


def _remove_by_identity(items: list, obj: object, what: str) -> None:
    for i, x in enumerate(items):
        if x is obj:
            del items[i]
            return
    check_error(False, f"{what} not found and can not be removed")


class Graph:
    """Graph owning its vertices and edges."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.edges: list[Edge] = []
        self.max_vertex_id = -1
        self.max_edge_id = -1

    def __str__(self) -> str:
        lines = ["Graph:", "vertices:"]
        lines.extend(str(v) for v in self.vertices)
        lines.append("edges:")
        lines.extend(str(e) for e in self.edges)
        return "\n".join(lines)

    # Basic properties.

    def order(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    def size(self) -> int:
        """Number of edges."""
        return len(self.edges)

    def _as_vertex(self, v: Vertex | int) -> Vertex:
        return self.vertices[v] if isinstance(v, int) else v

    # Access.

    def vertex(self, i: int) -> Vertex:
        """Vertex at index ``i``."""
        check_error(0 <= i < self.order(), "wrong graph vertex index")
        return self.vertices[i]

    def edge(self, i: int) -> Edge:
        """Edge at index ``i``."""
        check_error(0 <= i < self.size(), "wrong graph edge index")
        return self.edges[i]

    def random_vertex(self) -> Vertex:
        """A vertex chosen at random."""
        return self.vertex(random.randint(0, self.order() - 1))

    def random_edge(self) -> Edge:
        """An edge chosen at random."""
        return self.edge(random.randint(0, self.size() - 1))

    def find_vertex_by_id(self, id: int) -> Vertex | None:
        """Vertex with identifier ``id``, or None."""
        return next((v for v in self.vertices if v.id == id), None)

    def find_edge_by_id(self, id: int) -> Edge | None:
        """Edge with identifier ``id``, or None."""
        return next((e for e in self.edges if e.id == id), None)

    # Construction.

    def new_vertex(self, id: int | None = None) -> Vertex:
        """Create a vertex; without ``id`` the next free identifier is used."""
        if id is None:
            self.max_vertex_id += 1
            id = self.max_vertex_id
        v = Vertex(id)
        self.vertices.append(v)
        return v

    def find_edge(self, a: Vertex | int, b: Vertex | int) -> Edge | None:
        """Edge between two vertices (given as vertices or indices), or None."""
        return self._as_vertex(a).find_edge(self._as_vertex(b))

    def has_edge(self, a: Vertex | int, b: Vertex | int) -> bool:
        """True if an edge connects the two vertices."""
        return self._as_vertex(a).is_adjacent(self._as_vertex(b))

    def add_edge(self, a: Vertex | int, b: Vertex | int, id: int | None = None) -> Edge:
        """Add an edge; its ends are stored in increasing identifier order."""
        a = self._as_vertex(a)
        b = self._as_vertex(b)
        if id is None:
            self.max_edge_id += 1
            id = self.max_edge_id
        e = Edge(id)
        self.edges.append(e)
        a.add_edge(e)
        b.add_edge(e)
        first, second = (a, b) if a.id < b.id else (b, a)
        e.add_vertex(first)
        e.add_vertex(second)
        return e

    def add_unique_edge(self, a: Vertex | int, b: Vertex | int) -> Edge | None:
        """Add an edge unless one already connects the vertices; else None."""
        if self.has_edge(a, b):
            return None
        return self.add_edge(a, b)

    def add_cycle(self, fromi: int, toi: int) -> None:
        """Connect vertices with indices ``fromi``..``toi`` into a cycle."""
        for i in range(fromi, toi):
            self.add_edge(i, i + 1)
        self.add_edge(fromi, toi)

    def has_parallel_edges(self) -> bool:
        """True if some pair of vertices is connected by several edges."""
        return any(v.has_parallel_edges() for v in self.vertices)

    # Arranging.

    def reset_identifiers(self) -> None:
        """Renumber vertices and edges by their positions."""
        for i, v in enumerate(self.vertices):
            v.id = i
        for i, e in enumerate(self.edges):
            e.id = i

    def arrange_objects_increasing_ids(self) -> None:
        """Sort all vertices and edges, and their links, by identifier."""
        for v in self.vertices:
            v.arrange_edges_increasing_ids()
        for e in self.edges:
            e.arrange_vertices_increasing_ids()
        self.vertices.sort(key=lambda v: v.id)
        self.edges.sort(key=lambda e: e.id)
        if self.vertices:
            self.max_vertex_id = self.vertices[-1].id
        if self.edges:
            self.max_edge_id = self.edges[-1].id

    # Global properties.

    def is_empty(self) -> bool:
        """True if there are no vertices and no edges."""
        return self.order() == 0 and self.size() == 0

    def is_edgeless(self) -> bool:
        """True if there are no edges."""
        return self.size() == 0

    def is_trivial(self) -> bool:
        """True for a single vertex without edges."""
        return self.order() == 1 and self.size() == 0

    def is_complete(self) -> bool:
        """True if every pair of vertices is joined by exactly one edge."""
        n = self.order()
        if self.size() != n * (n - 1) // 2:
            return False
        return all(
            self.has_edge(self.vertices[i], self.vertices[j])
            for i in range(n)
            for j in range(i + 1, n)
        )

    def is_regular(self, d: int) -> bool:
        """True if every vertex has degree ``d``."""
        return all(v.degree() == d for v in self.vertices)

    def is_cubic(self) -> bool:
        """True if every vertex has degree 3."""
        return self.is_regular(3)

    def is_minimal_cubic(self) -> bool:
        """True for two vertices joined by three edges."""
        return self.order() == 2 and self.size() == 3

    @staticmethod
    def is_strong_isomorphic(g1: Graph, g2: Graph) -> bool:
        """True if both graphs have the same identifiers and links in the same order."""
        if g1.order() != g2.order() or g1.size() != g2.size():
            return False
        for v1, v2 in zip(g1.vertices, g2.vertices):
            if v1.id != v2.id or v1.degree() != v2.degree():
                return False
            if any(x.id != y.id for x, y in zip(v1.edges, v2.edges)):
                return False
        for e1, e2 in zip(g1.edges, g2.edges):
            if e1.id != e2.id or e1.a.id != e2.a.id or e1.b.id != e2.b.id:
                return False
        return True

    # Modifications.

    def remove_edge(self, e: Edge) -> None:
        """Remove an edge from the graph and from its ends."""
        e.a.remove_edge(e)
        e.b.remove_edge(e)
        _remove_by_identity(self.edges, e, "edge")

    def remove_vertex(self, v: Vertex) -> None:
        """Remove a vertex together with its incident edges."""
        while v.degree():
            self.remove_edge(v.edges[0])
        _remove_by_identity(self.vertices, v, "vertex")

    def bubble_cubic_graph_vertex(self, v: Vertex | None = None) -> None:
        """Replace a degree-3 vertex (random if not given) with a triangle."""
        if v is None:
            v = self.random_vertex()
        check_error(v.degree() == 3, "bubble is possible only for vertex with degree 3")
        a, b, c = (v.neighbour(e) for e in v.edges[:3])
        self.remove_vertex(v)
        na = self.new_vertex()
        nb = self.new_vertex()
        nc = self.new_vertex()
        self.add_edge(a, na)
        self.add_edge(b, nb)
        self.add_edge(c, nc)
        self.add_edge(na, nb)
        self.add_edge(nb, nc)
        self.add_edge(na, nc)

    def glue_two_incident_edges(self, v: Vertex) -> tuple[Edge, int, int]:
        """Replace path ``C - v - D`` with edge ``C - D``.

        Returns the new edge and the identifiers of the removed edges,
        ordered by the identifiers of their far ends.
        """
        check_error(v.degree() == 2, "can not glue number of edges differ from 2")
        ea, eb = v.edges[0], v.edges[1]
        a = v.neighbour(ea)
        b = v.neighbour(eb)
        if a.id < b.id:
            e1_id, e2_id = ea.id, eb.id
        else:
            e1_id, e2_id = eb.id, ea.id
        self.remove_edge(ea)
        self.remove_edge(eb)
        new_edge = self.add_edge(a, b)
        self.remove_vertex(v)
        return new_edge, e1_id, e2_id

    def glue_two_hanging_edges(self, v1: Vertex, v2: Vertex) -> tuple[Edge, bool]:
        """Replace ``C - v1`` and ``v2 - D`` with edge ``C - D``.

        Returns the new edge and whether its ends come in reversed order
        relative to ``v1``, ``v2``.
        """
        check_error(v1.is_leaf() and v2.is_leaf(), "one or two edges are not hanging")
        v1_e1 = v1.edges[0]
        v2_e1 = v2.edges[0]
        a = v1.neighbour(v1_e1)
        b = v2.neighbour(v2_e1)
        is_reversed = a.id > b.id
        self.remove_edge(v1_e1)
        self.remove_edge(v2_e1)
        new_edge = self.add_edge(a, b)
        self.remove_vertex(v1)
        self.remove_vertex(v2)
        return new_edge, is_reversed

    # Coloring.

    def edges_colors_histogram(self) -> list[int]:
        """Count of edges of each color; unpainted edges are ignored."""
        hist: list[int] = []
        for e in self.edges:
            if e.color < 0:
                continue
            if len(hist) <= e.color:
                hist.extend([0] * (e.color + 1 - len(hist)))
            hist[e.color] += 1
        return hist

    def is_edges_coloring_correct(self) -> bool:
        """True if no two edges at any vertex share a color."""
        return all(v.is_edges_coloring_correct() for v in self.vertices)