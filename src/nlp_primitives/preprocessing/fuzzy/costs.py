# src/nlp_primitives/preprocessing/fuzzy/costs.py
from __future__ import annotations

"""
costs.py

Does: Cost models for the grapheme edit distance. The recurrence only talks to
      the CostModel protocol, so a probability-weighted model can replace the
      fixed one without touching it.
Returns: CostModel protocol, UniformCostModel, FunctionCostModel, DEFAULT_COSTS.
Used by: fuzzy.edit_distance (recurrence) and fuzzy.scoring (weights tuple).
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "CostModel",
    "UniformCostModel",
    "FunctionCostModel",
    "DEFAULT_COSTS",
    "INSERTION_COST",
    "DELETION_COST",
    "SUBSTITUTION_COST",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
INSERTION_COST = 1
DELETION_COST = 1
SUBSTITUTION_COST = 2  # a substitution costs as much as delete + insert


@runtime_checkable
class CostModel(Protocol):
    """Per-grapheme edit costs. All costs must be non-negative."""

    def insertion(self, grapheme: str) -> int: ...
    def deletion(self, grapheme: str) -> int: ...
    def substitution(self, source: str, target: str) -> int: ...


@dataclass(frozen=True)
class UniformCostModel:
    """Constant costs; substituting a grapheme for an equal one is free."""

    insertion_cost: int = INSERTION_COST
    deletion_cost: int = DELETION_COST
    substitution_cost: int = SUBSTITUTION_COST

    def __post_init__(self) -> None:
        for name in ("insertion_cost", "deletion_cost", "substitution_cost"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    def insertion(self, grapheme: str) -> int:
        return self.insertion_cost

    def deletion(self, grapheme: str) -> int:
        return self.deletion_cost

    def substitution(self, source: str, target: str) -> int:
        return 0 if source == target else self.substitution_cost

    @property
    def weights(self) -> tuple[int, int, int]:
        """(insertion, deletion, substitution), the order rapidfuzz expects."""
        return (self.insertion_cost, self.deletion_cost, self.substitution_cost)


@dataclass(frozen=True)
class FunctionCostModel:
    """Adapt three plain callables (closures, lookups, …) into a CostModel."""

    insertion: Callable[[str], int]
    deletion: Callable[[str], int]
    substitution: Callable[[str, str], int]


DEFAULT_COSTS = UniformCostModel()
