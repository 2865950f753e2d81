"""
ucc_profiling/ucc.py
====================
Level-wise discovery of minimal Unique Column Combinations (UCCs).

Algorithm outline
-----------------
The search walks the power-set lattice of attributes bottom-up, one
combination size per level.

  Level 1  :  one PLI per attribute, built straight from the column.
              Unique → UCC.  Non-unique → survivor.
  Level k+1:  every unordered pair of level-k survivors is unioned.
              Only unions of exactly k+1 attributes that were not seen
              before are candidates.  The candidate PLI is the product of
              the two parent PLIs.
              Unique and minimal → UCC.  Non-unique → survivor.

The walk stops as soon as a level has no survivors.

Pruning
~~~~~~~
  Unique combinations never seed the next level: every superset of a key is
  unique but not minimal.  Because a candidate can still be formed from two
  non-unique parents while containing a smaller key built elsewhere (e.g.
  {A,B} key, {A,C} and {B,C} non-unique → {A,B,C}), every unique candidate is
  checked against the UCCs recorded so far before it is emitted.

Minimality
~~~~~~~~~~
Smaller combinations are always recorded on earlier levels, so comparing a
candidate against the UCCs found so far is enough: no UCC recorded later can
be a proper subset of it.
"""

from __future__ import annotations

import logging

from .attributes import UCC, AttributeList
from .partition import PositionListIndex
from .relation import Relation

log = logging.getLogger(__name__)

STRATEGIES: tuple[str, ...] = ("intersect", "materialize")

# joins the per-attribute values of one row when a projection is materialised
VALUE_SEPARATOR = "\x1f"


# ── Candidate validation ──────────────────────────────────────────────────────

def _materialize(relation: Relation, attributes: AttributeList) -> list[str]:
    """
    Combined value of every row over *attributes*, as one string per row.

    The unit-separator control character keeps ("a|b", "c") and ("a", "b|c")
    apart for any printable data.
    """
    columns = [relation.column(i) for i in attributes]
    return [VALUE_SEPARATOR.join(row) for row in zip(*columns)]


def _combine(
    left: PositionListIndex,
    right: PositionListIndex,
    attributes: AttributeList,
    relation: Relation,
    strategy: str,
) -> PositionListIndex:
    if strategy == "intersect":
        return left.intersect(right)
    return PositionListIndex.from_values(attributes, _materialize(relation, attributes))


def _is_minimal(candidate: AttributeList, uniques: list[UCC]) -> bool:
    """True iff no recorded UCC is a subset of *candidate*."""
    return not any(candidate.is_superset_of(u.attributes) for u in uniques)


# ── Main algorithm ────────────────────────────────────────────────────────────

def discover(
    relation: Relation,
    strategy: str = "intersect",
) -> tuple[list[UCC], dict]:
    """
    Run the level-wise search on *relation* and return all minimal UCCs.

    Parameters
    ----------
    relation : Relation
        Input relation; never modified.
    strategy : {"intersect", "materialize"}
        How candidate PLIs are built: as the product of the two parent PLIs
        (default) or from the materialised value projection.  Both yield
        identical clusters.

    Returns
    -------
    uccs : list[UCC]
        Minimal unique column combinations, in discovery order (by size).
    stats : dict
        Internal counters for benchmarking:
          - n_levels              : lattice levels visited
          - n_candidates          : attribute combinations validated
          - n_pli_builds          : PLIs constructed (level 1 included)
          - n_duplicates_skipped  : pairs whose union was already checked
          - n_size_mismatches     : pairs whose union has the wrong size
          - n_non_minimal_pruned  : unique candidates containing a known UCC
          - n_uccs                : UCCs returned
    """
    if not isinstance(relation, Relation):
        raise TypeError(f"expected a Relation, got {type(relation).__name__}")
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}; choose from {STRATEGIES}")

    stats: dict = {
        "n_levels":             0,
        "n_candidates":         0,
        "n_pli_builds":         0,
        "n_duplicates_skipped": 0,
        "n_size_mismatches":    0,
        "n_non_minimal_pruned": 0,
        "n_uccs":               0,
    }
    uniques: list[UCC] = []

    # ── Level 1: single attributes ────────────────────────────────────────────
    current_level: list[PositionListIndex] = []
    for attribute in range(relation.n_attributes):
        attributes = AttributeList(attribute)
        pli = PositionListIndex.from_values(attributes, relation.column(attribute))
        stats["n_pli_builds"] += 1
        stats["n_candidates"] += 1
        if pli.is_unique():
            uniques.append(UCC(relation, attributes))
        else:
            current_level.append(pli)
    if relation.n_attributes:
        stats["n_levels"] = 1
    log.debug(
        "level 1: %d UCCs, %d non-unique survivors", len(uniques), len(current_level)
    )

    # ── Levels 2 … n ──────────────────────────────────────────────────────────
    checked: set[AttributeList] = set()
    size = 2

    while current_level:
        next_level: list[PositionListIndex] = []
        found_before = len(uniques)
        validated_before = stats["n_candidates"]

        for i, left in enumerate(current_level):
            for right in current_level[i + 1:]:
                combined = left.attributes.union(right.attributes)
                if combined.size() != size:
                    stats["n_size_mismatches"] += 1
                    continue
                if combined in checked:
                    stats["n_duplicates_skipped"] += 1
                    continue
                checked.add(combined)

                pli = _combine(left, right, combined, relation, strategy)
                stats["n_pli_builds"] += 1
                stats["n_candidates"] += 1

                if not pli.is_unique():
                    next_level.append(pli)
                elif _is_minimal(combined, uniques):
                    uniques.append(UCC(relation, combined))
                else:
                    stats["n_non_minimal_pruned"] += 1

        if stats["n_candidates"] > validated_before:
            stats["n_levels"] = size
        log.debug(
            "level %d: %d new UCCs, %d non-unique survivors",
            size, len(uniques) - found_before, len(next_level),
        )
        current_level = next_level
        size += 1

    stats["n_uccs"] = len(uniques)
    log.info(
        "%s: %d minimal UCCs from %d candidates over %d levels",
        relation.name, len(uniques), stats["n_candidates"], stats["n_levels"],
    )
    return uniques, stats


def discover_unique_column_combinations(relation: Relation) -> list[UCC]:
    """All minimal, non-trivial unique column combinations of *relation*."""
    uccs, _ = discover(relation)
    return uccs
