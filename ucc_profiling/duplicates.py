"""
ucc_profiling/duplicates.py
===========================
Duplicate-record detection with the Sorted Neighborhood Method (SNM).

Algorithm outline
-----------------
  For every sorting key (an attribute index):
    1. Sort the records by that attribute's value (stable, lexicographic).
    2. Slide a window of ``window_size`` records over the sorted order and
       compare every record with the ``window_size - 1`` records after it.
    3. A pair whose comparator score reaches the threshold is a duplicate.
  The result is the union of the duplicates of all runs.

A run costs O(n log n) for the sort plus O(n · w) comparisons, instead of
the O(n²) comparisons of the naive all-pairs approach.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .relation import Relation
from .similarity import Jaccard, Levenshtein, SimilarityMeasure, Tokenizer

log = logging.getLogger(__name__)

DEFAULT_THRESHOLD: float = 0.8


@dataclass(frozen=True)
class AttrSimWeight:
    """Compare attribute *attribute* with *measure*, weighted by *weight*."""

    attribute: int
    measure: SimilarityMeasure
    weight: float


class RecordComparator:
    """
    Weighted average of per-attribute similarities.

    ``compare`` returns ``Σ wᵢ · simᵢ / Σ wᵢ`` in [0, 1]; a pair is a duplicate
    iff that score is at least ``threshold``.
    """

    def __init__(self, attr_sim_weights: Sequence[AttrSimWeight], threshold: float) -> None:
        if not attr_sim_weights:
            raise ValueError("a record comparator needs at least one attribute")
        if any(w.weight < 0 for w in attr_sim_weights):
            raise ValueError("attribute weights must be non-negative")
        self.total_weight = sum(w.weight for w in attr_sim_weights)
        if self.total_weight <= 0:
            raise ValueError("attribute weights must not all be zero")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must lie in [0, 1], got {threshold}")
        self.attr_sim_weights = list(attr_sim_weights)
        self.threshold = threshold

    def compare(self, record1: Sequence[str], record2: Sequence[str]) -> float:
        score = sum(
            w.weight * w.measure.calculate(record1[w.attribute], record2[w.attribute])
            for w in self.attr_sim_weights
        )
        return score / self.total_weight

    def is_duplicate(self, similarity: float) -> bool:
        return similarity >= self.threshold


@dataclass(frozen=True)
class Duplicate:
    """
    Two rows of *relation* judged to describe the same entity.

    The row indices are stored ordered, so (3, 1) and (1, 3) are one pair;
    the score takes no part in equality.
    """

    index1: int
    index2: int
    similarity: float = field(compare=False)
    relation: Relation = field(compare=True, repr=False)

    def __post_init__(self) -> None:
        if self.index1 > self.index2:
            low, high = self.index2, self.index1
            object.__setattr__(self, "index1", low)
            object.__setattr__(self, "index2", high)


def detect_duplicates(
    relation: Relation,
    sorting_keys: Sequence[int],
    window_size: int,
    comparator: RecordComparator,
) -> set[Duplicate]:
    """
    Run one SNM pass per sorting key and return the union of duplicates.

    Parameters
    ----------
    relation : Relation
        Relation to deduplicate; never modified.
    sorting_keys : sequence of int
        Attribute indices; every key drives one pass.
    window_size : int
        Number of records in the sliding window (≥ 1; 1 compares nothing).
    comparator : RecordComparator
        Scores record pairs and decides what counts as a duplicate.

    Returns
    -------
    set[Duplicate]
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")
    for key in sorting_keys:
        if not 0 <= key < relation.n_attributes:
            raise ValueError(
                f"sorting key {key} out of range for {relation.n_attributes} attributes"
            )

    records = list(enumerate(relation.records))
    duplicates: set[Duplicate] = set()
    n_comparisons = 0

    for key in sorting_keys:
        # stable: every pass starts from the previous pass's order
        records.sort(key=lambda rec: rec[1][key])
        for i, (index_i, values_i) in enumerate(records):
            for index_j, values_j in records[i + 1:i + window_size]:
                similarity = comparator.compare(values_i, values_j)
                n_comparisons += 1
                if comparator.is_duplicate(similarity):
                    duplicates.add(Duplicate(index_i, index_j, similarity, relation))

    log.info(
        "%s: %d duplicate pairs from %d comparisons over %d passes",
        relation.name, len(duplicates), n_comparisons, len(sorting_keys),
    )
    return duplicates


def suggest_record_comparator(relation: Relation) -> RecordComparator:
    """
    Default comparator derived from the attribute types of *relation*.

      "tokenized_string"  →  trigram Jaccard, weight 0.2
      anything else       →  Levenshtein,     weight 0.1
    """
    weights: list[AttrSimWeight] = []
    for attribute, attr_type in enumerate(relation.types):
        if attr_type == "tokenized_string":
            weights.append(AttrSimWeight(attribute, Jaccard(Tokenizer(3)), 0.2))
        else:
            weights.append(AttrSimWeight(attribute, Levenshtein(), 0.1))
    return RecordComparator(weights, DEFAULT_THRESHOLD)
