"""
Pareto dominance over evaluated solutions.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from moge.foundation.exceptions import ContractViolationError
from moge.foundation.solution import Solution

_SIGN = {"min": 1.0, "max": -1.0}


class SolutionDominance:
    """
    Strict Pareto dominance.

    ``compare(a, b)`` returns -1 if ``a`` dominates ``b``, 1 if ``b`` dominates ``a``
    and 0 otherwise. Objectives marked "max" in ``senses`` are negated before
    comparison so every objective is minimized internally.
    """

    def __init__(self, senses: Sequence[str] | None = None) -> None:
        if senses is None:
            self.senses: tuple[str, ...] | None = None
            self._signs: np.ndarray | None = None
            return
        senses = tuple(str(s).lower() for s in senses)
        unknown = [s for s in senses if s not in _SIGN]
        if unknown:
            raise ValueError(f"Unknown objective sense(s) {unknown}; expected 'min' or 'max'.")
        self.senses = senses
        self._signs = np.array([_SIGN[s] for s in senses])

    @classmethod
    def for_problem(cls, problem) -> "SolutionDominance":
        return cls(getattr(problem, "senses", None))

    def _oriented(self, solution: Solution) -> np.ndarray:
        objectives = solution.objectives
        if objectives is None:
            raise ContractViolationError("Dominance requested on an unevaluated solution.")
        if self._signs is None:
            return objectives
        if objectives.shape[0] != self._signs.shape[0]:
            raise ContractViolationError(
                f"Objective vector has {objectives.shape[0]} entries, expected {self._signs.shape[0]}."
            )
        return objectives * self._signs

    def compare(self, a: Solution, b: Solution) -> int:
        fa = self._oriented(a)
        fb = self._oriented(b)
        if fa.shape != fb.shape:
            raise ContractViolationError(
                f"Cannot compare objective vectors of lengths {fa.shape[0]} and {fb.shape[0]}."
            )
        a_better = bool(np.any(fa < fb))
        b_better = bool(np.any(fb < fa))
        if a_better and not b_better:
            return -1
        if b_better and not a_better:
            return 1
        return 0

    __call__ = compare

    def dominates(self, a: Solution, b: Solution) -> bool:
        return self.compare(a, b) < 0


__all__ = ["SolutionDominance"]
