"""
ucc_profiling/attributes.py
===========================
Value types shared by the profilers.

  AttributeList  – canonical set of attribute indices (lattice node)
  UCC            – one minimal unique column combination of a relation
  IND            – one unary inclusion dependency between two columns

AttributeList compares and hashes by content, so two lists built from the
same indices in any order are interchangeable as set members and dict keys.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterable, Iterator

from .relation import Relation


@dataclass(frozen=True, init=False)
class AttributeList:
    """
    Immutable set of attribute indices, stored as a sorted tuple.

    ``AttributeList(2)`` is the single attribute 2;
    ``AttributeList.of([3, 1, 3])`` is {1, 3}.
    """

    indices: tuple[int, ...]

    def __init__(self, *indices: int) -> None:
        canonical = tuple(sorted(set(_index(i) for i in indices)))
        if canonical and canonical[0] < 0:
            raise ValueError(f"attribute indices must be non-negative, got {canonical}")
        object.__setattr__(self, "indices", canonical)

    @classmethod
    def of(cls, indices: Iterable[int]) -> AttributeList:
        return cls(*indices)

    # ── Set operations ───────────────────────────────────────────────────────

    def union(self, other: AttributeList) -> AttributeList:
        return AttributeList(*self.indices, *other.indices)

    def size(self) -> int:
        return len(self.indices)

    def is_superset_of(self, other: AttributeList) -> bool:
        """True iff every index of *other* is also in self."""
        mine = set(self.indices)
        return all(i in mine for i in other.indices)

    def is_subset_of(self, other: AttributeList) -> bool:
        return other.is_superset_of(self)

    # ── Container protocol ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __lt__(self, other: AttributeList) -> bool:
        # size first, then lexicographic – the order results are reported in
        return (len(self), self.indices) < (len(other), other.indices)

    def __repr__(self) -> str:
        return f"AttributeList{set(self.indices) or '{}'}"


@dataclass(frozen=True)
class UCC:
    """A minimal unique column combination of *relation*."""

    relation: Relation
    attributes: AttributeList

    @property
    def names(self) -> tuple[str, ...]:
        return self.relation.names_of(self.attributes)

    def __str__(self) -> str:
        return f"{self.relation.name}: {{{', '.join(self.names)}}}"


@dataclass(frozen=True)
class IND:
    """
    Unary inclusion dependency  dependent[dep_column] ⊆ referenced[ref_column].
    """

    dependent: Relation
    dep_column: int
    referenced: Relation
    ref_column: int

    def __str__(self) -> str:
        return (
            f"{self.dependent.name}.{self.dependent.attributes[self.dep_column]}"
            f" ⊆ {self.referenced.name}.{self.referenced.attributes[self.ref_column]}"
        )


def _index(value: object) -> int:
    # operator.index accepts int and numpy integers, never floats or strings
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"attribute indices must be integers, got {value!r}"
        ) from None
