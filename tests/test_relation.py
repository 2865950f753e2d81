import numpy as np
import pandas as pd
import pytest

from ucc_profiling import Relation, discover_unique_column_combinations


def test_from_columns_stringifies():
    rel = Relation.from_columns({"a": [1, 2, 3], "b": ["x", None, "z"]})
    assert rel.attributes == ("a", "b")
    assert rel.column(0) == ("1", "2", "3")
    assert rel.column(1) == ("x", "", "z")
    assert rel.types == ("string", "string")
    assert rel.n_rows == 3 and rel.n_attributes == 2


def test_records_are_row_major():
    rel = Relation.from_columns({"a": ["1", "2"], "b": ["x", "y"]})
    assert rel.records == [("1", "x"), ("2", "y")]


def test_ragged_columns_fail_fast():
    with pytest.raises(ValueError, match="ragged"):
        Relation(attributes=("a", "b"), columns=(("1", "2"), ("1",)))


def test_attribute_column_mismatch_fails_fast():
    with pytest.raises(ValueError):
        Relation(attributes=("a",), columns=(("1",), ("2",)))


def test_zero_rows():
    rel = Relation(attributes=("a", "b"), columns=((), ()))
    assert rel.n_rows == 0
    assert rel.records == []


def test_from_dataframe_missing_values():
    df = pd.DataFrame({"a": [1.5, np.nan], "b": ["p", None]})
    rel = Relation.from_dataframe(df, name="df")
    assert rel.column(0) == ("1.5", "")
    assert rel.column(1) == ("p", "")
    assert rel.name == "df"


def test_from_csv_keeps_literal_strings(write_csv):
    path = write_csv("t.csv", pd.DataFrame({"a": ["NA", "", " x"], "b": ["007", "7", "7.0"]}))
    rel = Relation.from_csv(path)
    assert rel.name == "t"
    assert rel.column(0) == ("NA", "", " x")
    assert rel.column(1) == ("007", "7", "7.0")


def test_round_trip_to_dataframe(people):
    df = people.to_dataframe()
    assert list(df.columns) == ["id", "first", "last", "city"]
    assert df.shape == (6, 4)


def test_identity_semantics():
    a = Relation.from_columns({"a": ["1"]})
    b = Relation.from_columns({"a": ["1"]})
    assert a != b
    assert a == a


def test_from_csv_keeps_empty_lines_of_single_column(tmp_path):
    path = tmp_path / "one.csv"
    path.write_text("a\nx\n\n\ny\n", encoding="utf-8")
    rel = Relation.from_csv(path)
    assert rel.column(0) == ("x", "", "", "y")
    # the two empty cells collide, so the column is no key
    assert discover_unique_column_combinations(rel) == []


def test_non_scalar_cell_is_rejected():
    with pytest.raises(TypeError, match="scalars"):
        Relation.from_columns({"a": [[1, 2], [3]]})
    with pytest.raises(TypeError):
        Relation.from_dataframe(pd.DataFrame({"a": [np.array([1, 2]), np.array([3])]}))


def test_types_are_kept():
    rel = Relation.from_columns({"a": ["x"], "b": ["y"]}, types=["string", "tokenized_string"])
    assert rel.types == ("string", "tokenized_string")
