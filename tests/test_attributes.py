import numpy as np
import pytest

from ucc_profiling import UCC, AttributeList, Relation


def test_canonical_order_and_value_equality():
    a = AttributeList.of([3, 1, 3, 2])
    b = AttributeList(1).union(AttributeList(2)).union(AttributeList(3))
    assert a.indices == (1, 2, 3)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_union_and_size():
    ab = AttributeList(0).union(AttributeList(1))
    bc = AttributeList(1).union(AttributeList(2))
    assert ab.union(bc) == AttributeList(0, 1, 2)
    assert ab.union(bc).size() == 3
    assert ab.union(ab) == ab
    assert len(ab) == 2


def test_subset_and_superset():
    big = AttributeList(0, 2, 5)
    assert big.is_superset_of(AttributeList(0, 5))
    assert big.is_superset_of(big)
    assert not big.is_superset_of(AttributeList(1))
    assert AttributeList(2).is_subset_of(big)
    assert not big.is_subset_of(AttributeList(2))


def test_container_protocol_and_ordering():
    attrs = AttributeList(4, 1)
    assert list(attrs) == [1, 4]
    assert 4 in attrs and 2 not in attrs
    assert sorted([AttributeList(0, 1), AttributeList(2), AttributeList(0)]) == [
        AttributeList(0), AttributeList(2), AttributeList(0, 1),
    ]


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        AttributeList(-1)


def test_ucc_names():
    rel = Relation.from_columns({"a": [1, 2], "b": [3, 4]}, name="t")
    u = UCC(rel, AttributeList(1, 0))
    assert u.names == ("a", "b")
    assert str(u) == "t: {a, b}"


@pytest.mark.parametrize("bad", [1.7, 1.0, "1", None])
def test_non_integer_index_rejected(bad):
    with pytest.raises(TypeError, match="integers"):
        AttributeList(bad)


def test_numpy_integer_index_accepted():
    assert AttributeList(np.int64(2), 0) == AttributeList(0, 2)
