"""
ucc_profiling/ind.py
====================
Unary inclusion-dependency (IND) discovery across a set of relations.

  R[A] ⊆ S[B]  holds  ⟺  every value of column A also occurs in column B

Values are compared after stripping surrounding whitespace, and blank cells
are ignored on both sides.  A column without any non-blank value is never
reported as the dependent side: it would be trivially included everywhere.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .attributes import IND
from .relation import Relation

log = logging.getLogger(__name__)


def _value_set(values: Sequence[str]) -> frozenset[str]:
    return frozenset(v.strip() for v in values if v.strip())


def discover(
    relations: Sequence[Relation],
    discover_nary: bool = False,
) -> list[IND]:
    """
    Return every non-trivial unary IND between columns of *relations*.

    Parameters
    ----------
    relations : sequence of Relation
        Relations to profile; a relation may be compared with itself.
    discover_nary : bool
        n-ary INDs are not supported; ``True`` raises NotImplementedError.

    Returns
    -------
    list[IND]
        One entry per (dependent column, referenced column) pair, ordered by
        dependent relation, dependent column, referenced relation, referenced
        column.
    """
    if discover_nary:
        raise NotImplementedError("n-ary inclusion dependency discovery is not supported")

    # value sets are computed once per column instead of once per pair
    value_sets: list[list[frozenset[str]]] = [
        [_value_set(col) for col in rel.columns] for rel in relations
    ]

    inds: list[IND] = []
    for r1, rel1 in enumerate(relations):
        for i, dep_values in enumerate(value_sets[r1]):
            if not dep_values:
                continue
            for r2, rel2 in enumerate(relations):
                for j, ref_values in enumerate(value_sets[r2]):
                    if rel1 is rel2 and i == j:
                        continue
                    if dep_values <= ref_values:
                        inds.append(IND(rel1, i, rel2, j))

    log.info("%d unary INDs across %d relations", len(inds), len(relations))
    return inds
