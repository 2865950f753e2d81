import itertools

import pandas as pd
import pytest

from ucc_profiling import PositionListIndex, Relation
from ucc_profiling.attributes import AttributeList


def _brute_force_uccs(relation):
    """Minimal unique attribute sets by exhaustive enumeration."""
    n = relation.n_attributes
    unique = []
    for k in range(1, n + 1):
        for combo in itertools.combinations(range(n), k):
            if any(set(u) <= set(combo) for u in unique):
                continue
            rows = list(zip(*(relation.column(i) for i in combo)))
            if len(set(rows)) == len(rows):
                unique.append(combo)
    return {frozenset(u) for u in unique}


def _pli_of(relation, indices):
    """PLI over *indices* built from tuples of raw values."""
    attrs = AttributeList.of(indices)
    values = list(zip(*(relation.column(i) for i in attrs)))
    return PositionListIndex.from_values(attrs, values)


@pytest.fixture
def brute_force_uccs():
    return _brute_force_uccs


@pytest.fixture
def pli_of():
    return _pli_of


@pytest.fixture
def people():
    # id is a key; (first, last) is a key; city and first alone are not
    return Relation.from_dataframe(
        pd.DataFrame({
            "id":    ["1", "2", "3", "4", "5", "6"],
            "first": ["ann", "bob", "ann", "cid", "bob", "dee"],
            "last":  ["lee", "lee", "kim", "kim", "kim", "lee"],
            "city":  ["rome", "oslo", "rome", "oslo", "rome", "oslo"],
        }),
        name="people",
    )


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, df, sep=","):
        path = tmp_path / name
        df.to_csv(path, index=False, sep=sep)
        return path
    return _write
