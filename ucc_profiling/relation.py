"""
ucc_profiling/relation.py
=========================
Relation – the read-only, column-major table every profiler consumes.

Cells are raw strings.  Two cells are "the same value" iff their strings are
equal; no trimming or case folding happens here, loaders only turn missing
values into the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd


DEFAULT_TYPE = "string"


@dataclass(frozen=True, eq=False)
class Relation:
    """
    Immutable relation with column-major storage.

    Attributes
    ----------
    attributes : tuple[str, ...]
        Attribute (column) names, in column order.
    columns : tuple[tuple[str, ...], ...]
        One tuple of cell values per attribute; all of equal length.
    types : tuple[str, ...]
        Attribute types, ``"string"`` unless the caller says otherwise.
    name : str
        Label used in logs and result tables.
    """

    attributes: tuple[str, ...]
    columns: tuple[tuple[str, ...], ...]
    types: tuple[str, ...] = field(default=())
    name: str = "relation"

    def __post_init__(self) -> None:
        attributes = tuple(str(a) for a in self.attributes)
        columns = tuple(tuple(col) for col in self.columns)
        types = tuple(self.types) or (DEFAULT_TYPE,) * len(attributes)

        if len(attributes) != len(columns):
            raise ValueError(
                f"{self.name}: {len(attributes)} attributes but {len(columns)} columns"
            )
        if len(types) != len(attributes):
            raise ValueError(
                f"{self.name}: {len(types)} types for {len(attributes)} attributes"
            )
        lengths = {len(col) for col in columns}
        if len(lengths) > 1:
            raise ValueError(
                f"{self.name}: ragged columns, lengths {sorted(lengths)}"
            )

        # frozen dataclass → assign the normalised tuples via object.__setattr__
        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "types", types)

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def from_columns(
        cls,
        columns: dict[str, Sequence[object]],
        name: str = "relation",
        types: Sequence[str] = (),
    ) -> Relation:
        """Build from ``{attribute: values}``; values are stringified."""
        return cls(
            attributes=tuple(columns),
            columns=tuple(tuple(_cell(v) for v in vals) for vals in columns.values()),
            types=tuple(types),
            name=name,
        )

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, name: str | None = None) -> Relation:
        """
        Convert a DataFrame into a Relation.

        Every cell becomes its ``str`` form; NaN / None become ``""``.
        """
        columns = tuple(
            tuple(_cell(v) for v in df[col].tolist()) for col in df.columns
        )
        return cls(
            attributes=tuple(str(c) for c in df.columns),
            columns=columns,
            name=name or "relation",
        )

    @classmethod
    def from_csv(
        cls,
        path: str | Path,
        sep: str = ",",
        name: str | None = None,
    ) -> Relation:
        """
        Read a CSV file as a relation of raw strings.

        NA inference and blank-line skipping are disabled so an empty field
        (even a whole empty line of a one-column file) stays the empty string
        and strings like ``"NA"`` keep their literal value.
        """
        path = Path(path)
        df = pd.read_csv(
            path, sep=sep, dtype=str, keep_default_na=False, skip_blank_lines=False,
        )
        return cls.from_dataframe(df, name=name or path.stem)

    # ── Accessors ────────────────────────────────────────────────────────────

    @property
    def n_attributes(self) -> int:
        return len(self.attributes)

    @property
    def n_rows(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    def column(self, index: int) -> tuple[str, ...]:
        return self.columns[index]

    @property
    def records(self) -> list[tuple[str, ...]]:
        """Row-major view of the relation."""
        return list(zip(*self.columns)) if self.columns else []

    def names_of(self, indices: Iterable[int]) -> tuple[str, ...]:
        return tuple(self.attributes[i] for i in indices)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {a: list(col) for a, col in zip(self.attributes, self.columns)},
            columns=list(self.attributes),
        )

    def __repr__(self) -> str:
        return (
            f"Relation(name={self.name!r}, attributes={list(self.attributes)}, "
            f"n_rows={self.n_rows})"
        )


def _cell(value: object) -> str:
    if isinstance(value, str):
        return value
    if not pd.api.types.is_scalar(value):
        raise TypeError(f"cell values must be scalars, got {type(value).__name__}")
    if value is None or pd.isna(value):
        return ""
    return str(value)
