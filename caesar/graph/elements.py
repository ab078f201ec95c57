"""Graph vertices and edges."""

from __future__ import annotations

from itertools import chain, count

from caesar.diag import check_error, raise_error

__all__ = ["Vertex", "Edge"]


class Vertex:
    """Graph vertex holding its incident edges."""

    def __init__(self, id: int = -1) -> None:
        self.id = id
        self.edges: list[Edge] = []

    def __repr__(self) -> str:
        return f"Vertex({self.id})"

    def __str__(self) -> str:
        return f"v{self.id} : edges({','.join(str(e.id) for e in self.edges)})"

    # Basic properties.

    def degree(self) -> int:
        """Number of incident edges."""
        return len(self.edges)

    def is_isolated(self) -> bool:
        """True if no edge is incident to the vertex."""
        return self.degree() == 0

    def is_leaf(self) -> bool:
        """True if exactly one edge is incident to the vertex."""
        return self.degree() == 1

    def arrange_edges_increasing_ids(self) -> None:
        """Sort incident edges by identifier."""
        self.edges.sort(key=lambda e: e.id)

    # Relations with other elements.

    def is_incident(self, e: Edge) -> bool:
        """True if ``e`` is one of the incident edges."""
        return any(x is e for x in self.edges)

    def add_edge(self, e: Edge) -> None:
        """Attach an incident edge."""
        self.edges.append(e)

    def neighbour(self, e: Edge) -> Vertex:
        """The other end of incident edge ``e``."""
        a, b = e.a, e.b
        if self is a:
            return b
        if self is b:
            return a
        raise_error(f"edge e{e.id} and vertex v{self.id} are not incident")
        raise AssertionError("unreachable")

    def find_edge(self, v: Vertex) -> Edge | None:
        """First edge leading to ``v``, or None."""
        return next((e for e in self.edges if self.neighbour(e) is v), None)

    def is_adjacent(self, v: Vertex) -> bool:
        """True if some edge connects this vertex with ``v``."""
        return self.find_edge(v) is not None

    def has_parallel_edges(self) -> bool:
        """True if two incident edges lead to the same neighbour."""
        neighbours = [id(self.neighbour(e)) for e in self.edges]
        return len(set(neighbours)) < len(neighbours)

    def is_edges_coloring_correct(self) -> bool:
        """True if all incident edges have distinct colors."""
        colors = [e.color for e in self.edges]
        return len(set(colors)) == len(colors)

    def remove_edge(self, e: Edge) -> None:
        """Detach incident edge ``e``."""
        for i, x in enumerate(self.edges):
            if x is e:
                del self.edges[i]
                return
        raise_error("edge not found and can not be removed")


class Edge:
    """Graph edge with two ends and a color (-1 while unpainted)."""

    ENDS_COUNT = 2

    def __init__(self, id: int = -1) -> None:
        self.id = id
        self.color = -1
        self.vertices: list[Vertex] = []

    def __repr__(self) -> str:
        return f"Edge({self.id})"

    def __str__(self) -> str:
        return (
            f"e{self.id} : ({self.end(0).id}-{self.end(1).id}), "
            f"color = {self.color}"
        )

    # Ends.

    @property
    def a(self) -> Vertex:
        """First end."""
        return self.vertices[0]

    @property
    def b(self) -> Vertex:
        """Second end."""
        return self.vertices[1]

    def end(self, i: int) -> Vertex:
        """End number ``i`` (0 or 1)."""
        check_error(0 <= i < self.ENDS_COUNT, f"wrong number of the end ({i})")
        return self.vertices[i]

    def is_loop(self) -> bool:
        """True if both ends are the same vertex."""
        return self.a is self.b

    def arrange_vertices_increasing_ids(self) -> None:
        """Sort ends by identifier."""
        self.vertices.sort(key=lambda v: v.id)

    def is_incident(self, v: Vertex) -> bool:
        """True if ``v`` is an end of the edge."""
        return any(x is v for x in self.vertices)

    def add_vertex(self, v: Vertex) -> None:
        """Attach an end."""
        self.vertices.append(v)

    # Cubic graph reduction.

    def is_cubic_graph_unique_reduceable_edge(self) -> bool:
        """True if both ends have degree 3 and three distinct neighbours."""
        a, b = self.a, self.b
        if a.degree() != 3 or b.degree() != 3:
            return False
        return not (a.has_parallel_edges() or b.has_parallel_edges())

    def is_cubic_graph_parallel_reduceable_edge(self) -> bool:
        """True if the edge is doubled between degree-3 ends with distinct third neighbours."""
        a, b = self.a, self.b
        if a.degree() != 3 or b.degree() != 3:
            return False

        def count_and_other(v: Vertex, target: Vertex) -> tuple[int, Vertex | None]:
            cnt = 0
            other = None
            for e in v.edges:
                neigh = v.neighbour(e)
                if neigh is target:
                    cnt += 1
                else:
                    other = neigh
            return cnt, other

        a_cnt, c = count_and_other(a, b)
        b_cnt, d = count_and_other(b, a)

        if a_cnt != 2 or b_cnt != 2:
            return False
        return c is not d

    # Painting.

    def greedy_paint(self) -> None:
        """Paint with the least color not used by edges at either end."""
        used = {f.color for f in chain(self.a.edges, self.b.edges) if f.color >= 0}
        self.color = next(c for c in count() if c not in used)