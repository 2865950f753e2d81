"""
ucc_profiling
=============
Pure-Python data profiling: exact discovery of minimal Unique Column
Combinations (UCCs) with stripped-partition (PLI) validation, plus unary
inclusion-dependency discovery, sorted-neighborhood duplicate detection,
instance-based schema matching and the string-similarity measures they use.

Public API
----------
  from ucc_profiling import Relation, duplicates, ind, matching, ucc

  relation    = Relation.from_csv("people.csv")
  uccs        = ucc.discover_unique_column_combinations(relation)
  uccs, stats = ucc.discover(relation, strategy="intersect")
  inds        = ind.discover([relation, other])
  dups        = duplicates.detect_duplicates(relation, [0], 4, comparator)
  corr        = matching.second_line_match(matching.first_line_match(a, b))

  uccs  : list[UCC]   – (relation, AttributeList) pairs, minimal and unique
  stats : dict        – internal counters for analysis

See the individual module docstrings for full algorithm descriptions.
"""

from . import duplicates, ind, matching, similarity, ucc
from .attributes import IND, UCC, AttributeList
from .partition import PositionListIndex
from .relation import Relation
from .ucc import discover_unique_column_combinations

__all__ = [
    "duplicates",
    "ind",
    "matching",
    "similarity",
    "ucc",
    "AttributeList",
    "IND",
    "PositionListIndex",
    "Relation",
    "UCC",
    "discover_unique_column_combinations",
]
