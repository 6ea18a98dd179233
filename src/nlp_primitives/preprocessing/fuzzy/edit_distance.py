# src/nlp_primitives/preprocessing/fuzzy/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Weighted Levenshtein distance over grapheme clusters, solved with the full
      (n+1)×(m+1) dynamic-programming matrix (no banding, no early exit).
Returns: edit_distance() → int and distance_matrix() → list[list[int]].
Used by: fuzzy.scoring consumers, demo CLI, and anything comparing two strings.
"""

from nlp_primitives.preprocessing.fuzzy.costs import DEFAULT_COSTS, CostModel
from nlp_primitives.preprocessing.token.segmenter import graphemes

__all__ = ["edit_distance", "distance_matrix"]

__docformat__ = "google"

DistanceMatrix = list[list[int]]


def _fill_matrix(src: list[str], tgt: list[str], costs: CostModel) -> DistanceMatrix:
    n, m = len(src), len(tgt)
    d: DistanceMatrix = [[0] * (m + 1) for _ in range(n + 1)]

    # distance from the empty string
    for i in range(1, n + 1):
        d[i][0] = d[i - 1][0] + costs.deletion(src[i - 1])
    for j in range(1, m + 1):
        d[0][j] = d[0][j - 1] + costs.insertion(tgt[j - 1])

    for i in range(1, n + 1):
        s = src[i - 1]
        row, prev = d[i], d[i - 1]
        for j in range(1, m + 1):
            t = tgt[j - 1]
            row[j] = min(
                prev[j] + costs.deletion(s),
                prev[j - 1] + costs.substitution(s, t),
                row[j - 1] + costs.insertion(t),
            )
    return d


def distance_matrix(source: str, target: str, *, costs: CostModel = DEFAULT_COSTS) -> DistanceMatrix:
    """
    Does: Build the full DP matrix over the grapheme sequences of source/target.
    Returns: Rows indexed by source graphemes (0..n), columns by target (0..m).
    """
    return _fill_matrix(graphemes(source), graphemes(target), costs)


def edit_distance(source: str, target: str, *, costs: CostModel = DEFAULT_COSTS) -> int:
    """
    Does: Minimum total cost of grapheme insertions, deletions and substitutions
          turning `source` into `target` (default: 1 / 1 / 2, equal graphemes free).
    Returns: int >= 0; 0 iff the grapheme sequences are equal under the default costs.
    """
    return distance_matrix(source, target, costs=costs)[-1][-1]
