"""Cycle of edges painted alternately in two colors."""

from __future__ import annotations

from caesar.diag import check_error, raise_error
from caesar.graph.elements import Edge

__all__ = ["BicolorCycle"]


class BicolorCycle:
    """Cycle with edges of two colors where no two adjacent edges share a color."""

    def __init__(self) -> None:
        self.edges: list[Edge] = []
        self._ids: set[int] = set()

    def __str__(self) -> str:
        return "BicolorCycle :" + "".join(f" [{e}]" for e in self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __contains__(self, e: Edge) -> bool:
        return e.id in self._ids

    def sum_colors(self) -> int:
        """Sum of the two colors of the cycle."""
        check_error(len(self.edges) >= 2, "bicolor cycle is too short")
        return self.edges[0].color + self.edges[1].color

    def _append(self, e: Edge) -> None:
        self.edges.append(e)
        self._ids.add(e.id)

    def build(self, start_edge: Edge, another_color: int) -> None:
        """Walk the cycle starting with ``start_edge`` and alternating with ``another_color``."""
        self.edges = []
        self._ids = set()

        check_error(
            start_edge.color != another_color,
            "bicolor cycle requires two diffirent colors",
        )

        sum_colors = start_edge.color + another_color
        self._append(start_edge)

        start_vertex = start_edge.a
        next_vertex = start_edge.b
        next_color = another_color

        while next_vertex is not start_vertex:
            next_edge = next(
                (e for e in next_vertex.edges if e.color == next_color), None
            )
            if next_edge is None:
                raise_error(
                    f"no edge of color {next_color} at vertex v{next_vertex.id}"
                )
            self._append(next_edge)
            next_vertex = next_vertex.neighbour(next_edge)
            next_color = sum_colors - next_color

        check_error(len(self.edges) % 2 == 0, "bicolor cycle length must be even")

    def switch_colors(self) -> None:
        """Swap the two colors on every edge of the cycle."""
        total = self.sum_colors()
        for e in self.edges:
            e.color = total - e.color

    def switch_colors_between(self, e1: Edge, e2: Edge) -> None:
        """Swap the two colors on the edges lying strictly between ``e1`` and ``e2``."""
        total = self.sum_colors()
        switching = False
        for e in self.edges:
            is_bound = e is e1 or e is e2
            if switching:
                if is_bound:
                    return
                e.color = total - e.color
            elif is_bound:
                switching = True