"""History of cubic graph reductions, kept so the graph can be restored."""

from __future__ import annotations

from dataclasses import dataclass

from caesar.diag import check_error

__all__ = ["ReduceStep", "ReduceHistory"]


@dataclass(frozen=True)
class ReduceStep:
    """Identifiers of everything touched by one reduction step."""

    v1_id: int = -1
    v2_id: int = -1
    e_id: int = -1
    v1_e1_id: int = -1
    v1_e2_id: int = -1
    v2_e1_id: int = -1
    v2_e2_id: int = -1
    result_e1_id: int = -1
    result_e2_id: int = -1

    def __str__(self) -> str:
        return (
            f"e{self.e_id} [(v{self.v1_id} : e{self.v1_e1_id}, e{self.v1_e2_id}"
            f" -> re{self.result_e1_id}), (v{self.v2_id} : e{self.v2_e1_id}, "
            f"e{self.v2_e2_id} -> re{self.result_e2_id})]"
        )

    def is_reduce_by_parallel_edge(self) -> bool:
        """True if the step removed a doubled edge (a single result edge)."""
        return self.result_e1_id == self.result_e2_id

    def is_reduce_by_unique_edge(self) -> bool:
        """True if the step removed an ordinary edge (two result edges)."""
        return not self.is_reduce_by_parallel_edge()


class ReduceHistory:
    """Stack of reduction steps; the last one is undone first."""

    def __init__(self) -> None:
        self._steps: list[ReduceStep] = []

    def remember(
        self,
        v1_id: int,
        v2_id: int,
        e_id: int,
        v1_e1_id: int,
        v1_e2_id: int,
        v2_e1_id: int,
        v2_e2_id: int,
        result_e1_id: int,
        result_e2_id: int,
    ) -> ReduceStep:
        """Record one step and return it."""
        step = ReduceStep(
            v1_id,
            v2_id,
            e_id,
            v1_e1_id,
            v1_e2_id,
            v2_e1_id,
            v2_e2_id,
            result_e1_id,
            result_e2_id,
        )
        self._steps.append(step)
        return step

    def last(self) -> ReduceStep:
        """The most recent step."""
        check_error(bool(self._steps), "reduce history is empty")
        return self._steps[-1]

    def is_empty(self) -> bool:
        """True if no steps are recorded."""
        return not self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def pop(self) -> ReduceStep:
        """Remove and return the most recent step."""
        check_error(bool(self._steps), "reduce history is empty")
        return self._steps.pop()