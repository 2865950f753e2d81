"""
ucc_profiling/matching.py
=========================
Instance-based schema matching between two relations.

  First line  : similarity matrix S[i, j] = Jaccard(values of source column i,
                values of target column j), shape (#source, #target)
  Second line : one-to-one assignment maximising the total similarity,
                returned as a 0/1 correspondence matrix of the same shape

The assignment step is the linear sum assignment problem on the cost matrix
``1 - S``; for non-square matrices the surplus rows (or columns) stay
unmatched.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.optimize import linear_sum_assignment

from .relation import Relation
from .similarity import Jaccard, SimilarityMeasure, Tokenizer


@dataclass(frozen=True, eq=False)
class SimilarityMatrix:
    matrix: np.ndarray
    source: Relation
    target: Relation


@dataclass(frozen=True, eq=False)
class CorrespondenceMatrix:
    matrix: np.ndarray
    source: Relation
    target: Relation

    def pairs(self) -> list[tuple[str, str]]:
        """Matched (source attribute, target attribute) names."""
        rows, cols = np.nonzero(self.matrix)
        return [
            (self.source.attributes[i], self.target.attributes[j])
            for i, j in zip(rows.tolist(), cols.tolist())
        ]


def first_line_match(
    source: Relation,
    target: Relation,
    measure: SimilarityMeasure | None = None,
) -> SimilarityMatrix:
    """
    Score every source column against every target column.

    Each column is handed to *measure* as its list of values; the default is
    set-semantics Jaccard over the distinct values.
    """
    measure = measure or Jaccard(Tokenizer(3, padding=False), bag_semantics=False)
    matrix = np.zeros((source.n_attributes, target.n_attributes), dtype=float)
    for i, source_column in enumerate(source.columns):
        for j, target_column in enumerate(target.columns):
            matrix[i, j] = measure.calculate(list(source_column), list(target_column))
    return SimilarityMatrix(matrix, source, target)


def second_line_match(similarity: SimilarityMatrix) -> CorrespondenceMatrix:
    """Optimal one-to-one correspondence for *similarity*."""
    scores = np.asarray(similarity.matrix, dtype=float)
    if scores.ndim != 2:
        raise ValueError(f"similarity matrix must be 2-D, got shape {scores.shape}")
    correspondence = np.zeros(scores.shape, dtype=int)
    if scores.size:
        rows, cols = linear_sum_assignment(1.0 - scores)
        correspondence[rows, cols] = 1
    return CorrespondenceMatrix(correspondence, similarity.source, similarity.target)
