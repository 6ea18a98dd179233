# src/nlp_primitives/preprocessing/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the grapheme edit distance, its cost models, and similarity scoring.

Returns: Public API for edit_distance/distance_matrix, CostModel implementations,
similarity and closest-candidate lookup.
Used by: nlp_primitives public API and the demo CLI.
"""

from __future__ import annotations

# ── Costs ────────────────────────────────────────────────────────────────────
from .costs import (
    DEFAULT_COSTS,
    CostModel,
    FunctionCostModel,
    UniformCostModel,
)

# ── Distance ─────────────────────────────────────────────────────────────────
from .edit_distance import (
    distance_matrix,
    edit_distance,
)

# ── Scoring ──────────────────────────────────────────────────────────────────
from .scoring import (
    closest,
    similarity,
)

__all__ = [
    # Costs
    "CostModel",
    "UniformCostModel",
    "FunctionCostModel",
    "DEFAULT_COSTS",
    # Distance
    "edit_distance",
    "distance_matrix",
    # Scoring
    "similarity",
    "closest",
]

__docformat__ = "google"
