# src/nlp_primitives/preprocessing/fuzzy/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Grapheme-aware similarity on top of the fixed edit costs: a 0–100 score via
      rapidfuzz's weighted Levenshtein, and a closest-candidate lookup using the
      DP edit distance.
Returns: similarity() → float in [0, 100]; closest() → (candidate, distance) | None.
Used by: demo CLI and callers ranking near-miss spellings.
"""

from typing import Iterable, Optional, Tuple

from rapidfuzz.distance import Levenshtein as rf_lev

from nlp_primitives.preprocessing.fuzzy.costs import DEFAULT_COSTS, CostModel
from nlp_primitives.preprocessing.fuzzy.edit_distance import edit_distance
from nlp_primitives.preprocessing.token.segmenter import graphemes

__all__ = [
    "similarity",
    "closest",
]

__docformat__ = "google"


def similarity(source: str, target: str) -> float:
    """
    Does: 100 × (1 − distance / worst-case distance) over grapheme sequences,
          with the default weights (insert 1, delete 1, substitute 2).
    Returns: Score in [0, 100], rounded to 2 decimals; 100.0 for two empty strings.
    """
    score = rf_lev.normalized_similarity(
        graphemes(source),
        graphemes(target),
        weights=DEFAULT_COSTS.weights,
    )
    return round(score * 100, 2)


def closest(
    query: str,
    candidates: Iterable[str],
    *,
    max_distance: Optional[int] = None,
    costs: CostModel = DEFAULT_COSTS,
) -> Optional[Tuple[str, int]]:
    """
    Does: Pick the candidate with the smallest edit distance to `query`
          (first one wins on ties), optionally bounded by `max_distance`.
    Returns: (candidate, distance) or None when nothing qualifies.
    """
    best: Optional[Tuple[str, int]] = None
    for cand in candidates:
        d = edit_distance(query, cand, costs=costs)
        if max_distance is not None and d > max_distance:
            continue
        if best is None or d < best[1]:
            best = (cand, d)
            if d == 0:
                break
    return best
