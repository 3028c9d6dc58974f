"""
Tests for Forest vote aggregation, tie-break and label mapping.
"""

from __future__ import annotations

import pytest

from conftest import N_FEATURES, forest_dict, stump
from server.forest import Forest
from shared.errors import InvalidArgumentError, ModelFormatError


def test_single_tree_prediction(single_tree_forest):
    assert single_tree_forest.predict([0.0] * N_FEATURES) == 0
    assert single_tree_forest.predict([10.0] * N_FEATURES) == 1


def test_votes_are_elementwise_sum(majority_vote_forest):
    """Totals equal the arithmetic sum of every tree's leaf pair."""
    vec = [0.0] * N_FEATURES
    vec[2] = 20.0
    assert majority_vote_forest.votes(vec) == (50.0 + 60.0 + 0.0, 25.0 + 20.0 + 60.0)
    assert majority_vote_forest.predict(vec) == 0


def test_weights_not_per_tree_majority(majority_vote_forest):
    """Two of three trees lean class 0, but summed weights favour class 1."""
    vec = [0.0] * N_FEATURES
    assert majority_vote_forest.votes(vec) == (110.0, 135.0)
    assert majority_vote_forest.predict(vec) == 1


def test_zero_trees_plus_fixture_sum():
    """Trees voting (0, 0) contribute nothing to the total."""
    zero = stump(left=(0.0, 0.0), right=(0.0, 0.0))
    fixture = stump(left=(7.0, 3.0), right=(1.0, 2.0))
    forest = Forest.from_dict(forest_dict([zero, zero, fixture, zero]))
    assert forest.votes([0.0] * N_FEATURES) == (7.0, 3.0)
    assert forest.votes([9.0] * N_FEATURES) == (1.0, 2.0)


def test_three_tree_unanimous_class0():
    trees = [stump(left=(100.0, 0.0), right=(0.0, 100.0)) for _ in range(3)]
    forest = Forest.from_dict(forest_dict(trees))
    vec = [3.0] * N_FEATURES
    assert forest.votes(vec) == (300.0, 0.0)
    assert forest.predict(vec) == 0


def test_exact_tie_goes_to_class_1(tie_forest):
    vec = [0.0] * N_FEATURES
    assert tie_forest.votes(vec) == (200.0, 200.0)
    assert tie_forest.predict(vec) == 1


def test_tie_uses_mapped_label():
    trees = [stump(left=(5.0, 5.0), right=(5.0, 5.0))]
    forest = Forest.from_dict(forest_dict(trees, classes=(-1, 1)))
    assert forest.predict([0.0] * N_FEATURES) == 1


def test_label_mapping_shifts_result():
    """Same trees, classes [7, 9] instead of [0, 1]: same decision, mapped label."""
    plain = Forest.from_dict(forest_dict([stump()]))
    mapped = Forest.from_dict(forest_dict([stump()], classes=(7, 9)))

    low = [0.0] * N_FEATURES
    high = [10.0] * N_FEATURES
    assert plain.predict(low) == 0
    assert mapped.predict(low) == 7
    assert plain.predict(high) == 1
    assert mapped.predict(high) == 9


def test_predict_is_idempotent(majority_vote_forest):
    vec = [4.0] * N_FEATURES
    first = majority_vote_forest.predict(vec)
    assert majority_vote_forest.predict(vec) == first
    assert vec == [4.0] * N_FEATURES


@pytest.mark.parametrize("length", [N_FEATURES - 1, N_FEATURES + 1])
def test_length_mismatch_raises(single_tree_forest, length):
    vec = [1.0] * length
    with pytest.raises(InvalidArgumentError) as exc:
        single_tree_forest.predict(vec)
    assert exc.value.actual == length
    assert exc.value.expected == N_FEATURES
    assert vec == [1.0] * length


def test_trees_are_shared_read_only(single_tree_forest):
    assert isinstance(single_tree_forest.trees, tuple)
    assert single_tree_forest.n_estimators == 1


def test_dict_round_trip():
    data = forest_dict([stump(), stump(feature=3, threshold=-1.0)], classes=(7, 9))
    assert Forest.from_dict(data).to_dict() == data


def test_non_binary_rejected():
    data = forest_dict([stump()])
    data["n_classes"] = 3
    with pytest.raises(ModelFormatError):
        Forest.from_dict(data)

    data = forest_dict([stump()], classes=(0, 1, 2))
    with pytest.raises(ModelFormatError):
        Forest.from_dict(data)


@pytest.mark.parametrize(
    "classes", [(0, 1.5), (0.25, 1), ("0", "1"), (False, True), (0, float("nan"))]
)
def test_non_integer_labels_rejected(classes):
    """Labels are not truncated or coerced: 1.5 must not become 1."""
    with pytest.raises(ModelFormatError):
        Forest.from_dict(forest_dict([stump()], classes=classes))


def test_integral_float_labels_accepted():
    forest = Forest.from_dict(forest_dict([stump()], classes=(3.0, 8.0)))
    assert forest.classes == (3, 8)
    assert forest.predict([10.0] * N_FEATURES) == 8


def test_estimator_count_must_match_trees():
    data = forest_dict([stump()])
    data["n_estimators"] = 2
    with pytest.raises(ModelFormatError):
        Forest.from_dict(data)


def test_empty_forest_rejected():
    with pytest.raises(ModelFormatError):
        Forest(trees=[], n_features=N_FEATURES)
