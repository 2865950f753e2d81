import numpy as np
import pytest

from ucc_profiling import Relation
from ucc_profiling.matching import SimilarityMatrix, first_line_match, second_line_match
from ucc_profiling.similarity import Jaccard


@pytest.fixture
def source():
    return Relation.from_columns(
        {"id": ["1", "2", "3"], "name": ["ann", "bob", "cid"], "flag": ["y", "n", "y"]},
        name="source",
    )


@pytest.fixture
def target():
    return Relation.from_columns(
        {"person": ["bob", "ann", "dee"], "key": ["3", "2", "1"]}, name="target",
    )


def test_similarity_matrix(source, target):
    sim = first_line_match(source, target)
    assert sim.matrix.shape == (3, 2)
    assert sim.matrix[0, 1] == 1.0        # id ~ key
    assert sim.matrix[1, 0] == 0.5        # name ~ person: {ann, bob} of 4 values
    assert sim.matrix[0, 0] == 0.0
    assert sim.source is source and sim.target is target


def test_assignment_maximises_similarity(source, target):
    corr = second_line_match(first_line_match(source, target))
    assert corr.matrix.tolist() == [[0, 1], [1, 0], [0, 0]]
    assert corr.pairs() == [("id", "key"), ("name", "person")]


def test_assignment_is_one_to_one():
    sim = np.array([[0.9, 0.8], [0.85, 0.1]])
    rel = Relation.from_columns({"a": [], "b": []})
    corr = second_line_match(SimilarityMatrix(sim, rel, rel))
    # greedy would take 0.9 + 0.1; the optimum is 0.8 + 0.85
    assert corr.matrix.tolist() == [[0, 1], [1, 0]]
    assert corr.matrix.sum(axis=0).tolist() == [1, 1]


def test_custom_measure(source):
    sim = first_line_match(source, source, Jaccard(bag_semantics=True))
    assert np.allclose(np.diag(sim.matrix), 0.5)


def test_empty_relation():
    empty = Relation(attributes=(), columns=())
    other = Relation.from_columns({"a": ["1"]})
    corr = second_line_match(first_line_match(empty, other))
    assert corr.matrix.shape == (0, 1)
    assert corr.pairs() == []
