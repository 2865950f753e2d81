"""
ucc_profiling/partition.py
==========================
Position List Index (PLI) – the stripped partition behind UCC validation.

A partition π(X) groups rows by their combined X-values into equivalence
classes.  The *stripped* variant drops singleton classes: a row alone in its
class already has a unique X-value, and it keeps that property for every
superset of X.

Theory
------
  X is a unique column combination  ⟺  π(X) has only singletons
                                    ⟺  PLI(X).clusters is empty

  PLI(X ∪ Y) is computed from PLI(X) and PLI(Y) without touching raw values:
    for each cluster C ∈ PLI(X):
      split C by the cluster id every row has in PLI(Y)
      rows outside every PLI(Y) cluster are unique under Y → drop them
      keep sub-groups of size ≥ 2 → clusters of PLI(X ∪ Y)

  Cost is linear in the rows held by PLI(X)'s clusters, independent of the
  number of distinct values.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

import numpy as np

from .attributes import AttributeList


NO_CLUSTER: int = -1


class PositionListIndex:
    """
    Stripped partition of the rows of a relation induced by *attributes*.

    Attributes
    ----------
    attributes : AttributeList
        Attribute combination the index is built over.
    clusters : list[tuple[int, ...]]
        Equivalence classes of size ≥ 2, each a sorted row-index tuple, in
        canonical order (lexicographic, ties by size).
    inverted : np.ndarray, shape (n_rows,)
        Cluster id of every row, ``NO_CLUSTER`` for rows in no cluster.
    """

    __slots__ = ("attributes", "clusters", "inverted")

    def __init__(
        self,
        attributes: AttributeList,
        clusters: Iterable[Sequence[int]],
        n_rows: int,
    ) -> None:
        self.attributes = attributes
        self.clusters: list[tuple[int, ...]] = _canonical(clusters)
        self.inverted: np.ndarray = _invert(self.clusters, n_rows)

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def from_values(
        cls,
        attributes: AttributeList,
        values: Sequence[str],
    ) -> PositionListIndex:
        """
        Build the PLI of one column (or of a materialised column projection).

        Rows are grouped by exact equality of their value; groups with a
        single row are stripped.
        """
        groups: dict = defaultdict(list)
        for row, value in enumerate(values):
            groups[value].append(row)

        return cls(
            attributes,
            clusters=[g for g in groups.values() if len(g) >= 2],
            n_rows=len(values),
        )

    # ── Metrics ───────────────────────────────────────────────────────────────

    @property
    def n_rows(self) -> int:
        return len(self.inverted)

    @property
    def n_clusters(self) -> int:
        """Number of non-singleton equivalence classes."""
        return len(self.clusters)

    @property
    def sum_size(self) -> int:
        """Total number of rows across all equivalence classes."""
        return sum(len(c) for c in self.clusters)

    def is_unique(self) -> bool:
        return not self.clusters

    # ── Core operations ───────────────────────────────────────────────────────

    def intersect(self, other: PositionListIndex) -> PositionListIndex:
        """
        Compute the partition product  PLI(X) ⊗ PLI(Y)  =  PLI(X ∪ Y).

        Parameters
        ----------
        other : PositionListIndex
            PLI over the same rows, possibly over different attributes.

        Returns
        -------
        PositionListIndex
            PLI bound to ``self.attributes ∪ other.attributes``.

        Complexity
        ----------
        O(sum_size of self) = O(n_rows) in the worst case.
        """
        if other.n_rows != self.n_rows:
            raise ValueError(
                f"cannot intersect PLIs over {self.n_rows} and {other.n_rows} rows"
            )

        lookup = other.inverted
        new_clusters: list[list[int]] = []

        for cluster in self.clusters:
            sub_groups: dict[int, list[int]] = defaultdict(list)
            for row in cluster:
                cluster_id = int(lookup[row])
                if cluster_id != NO_CLUSTER:
                    sub_groups[cluster_id].append(row)
            for sub in sub_groups.values():
                if len(sub) >= 2:
                    new_clusters.append(sub)

        return PositionListIndex(
            self.attributes.union(other.attributes),
            clusters=new_clusters,
            n_rows=self.n_rows,
        )

    def __repr__(self) -> str:
        return (
            f"PositionListIndex({self.attributes!r}, n_clusters={self.n_clusters}, "
            f"sum_size={self.sum_size}, n_rows={self.n_rows})"
        )


def _canonical(clusters: Iterable[Sequence[int]]) -> list[tuple[int, ...]]:
    """Sort rows inside every cluster, then clusters by (rows, size)."""
    ordered = [tuple(sorted(c)) for c in clusters]
    ordered.sort(key=lambda c: (c, len(c)))
    return ordered


def _invert(clusters: list[tuple[int, ...]], n_rows: int) -> np.ndarray:
    inverted = np.full(n_rows, NO_CLUSTER, dtype=np.int64)
    for cluster_id, cluster in enumerate(clusters):
        inverted[list(cluster)] = cluster_id
    return inverted
