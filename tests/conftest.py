"""
Pytest fixtures: small hand-built trees and forests with known votes.
"""

from __future__ import annotations

import pytest

from server.forest import Forest
from server.scaler import Scaler
from server.tree_traversal import DecisionTree
from shared.config import N_FEATURES


def stump(feature=0, threshold=5.0, left=(50.0, 10.0), right=(10.0, 50.0)):
    """Root split on `feature` with two leaves, as a dict in artifact layout."""
    return {
        "feature": [feature, -2, -2],
        "threshold": [threshold, -2.0, -2.0],
        "children_left": [1, -1, -1],
        "children_right": [2, -1, -1],
        "value": [[[0.0, 0.0]], [list(left)], [list(right)]],
        "n_node_samples": [100, 60, 40],
    }


def forest_dict(trees, classes=(0, 1)):
    return {
        "n_estimators": len(trees),
        "n_features": N_FEATURES,
        "n_classes": 2,
        "classes": list(classes),
        "trees": trees,
    }


def identity_scaler_dict():
    return {"scale": [1.0] * N_FEATURES, "mean": [0.0] * N_FEATURES}


@pytest.fixture
def simple_tree():
    """Root splits feature 0 at 5.0; left leaf (10, 5), right leaf (2, 15)."""
    return DecisionTree.from_dict(stump(left=(10.0, 5.0), right=(2.0, 15.0)))


@pytest.fixture
def multilevel_tree():
    """
    Root (0) splits feature 2 at 10.0
      left (1) splits feature 0 at 50.0 -> leaves 3 (25, 5) and 4 (15, 20)
      right (2) is a leaf (5, 30)
    """
    return DecisionTree(
        feature=[2, 0, -2, -2, -2],
        threshold=[10.0, 50.0, 0.0, 0.0, 0.0],
        children_left=[1, 3, -1, -1, -1],
        children_right=[2, 4, -1, -1, -1],
        value=[[[0.0, 0.0]], [[0.0, 0.0]], [[5.0, 30.0]], [[25.0, 5.0]], [[15.0, 20.0]]],
        n_node_samples=[100, 60, 40, 30, 30],
    )


@pytest.fixture
def identity_scaler():
    return Scaler.from_dict(identity_scaler_dict())


@pytest.fixture
def single_tree_forest():
    return Forest.from_dict(forest_dict([stump()]))


@pytest.fixture
def majority_vote_forest():
    """Three trees on features 0, 1, 2; the first two lean class 0 on the left."""
    return Forest.from_dict(
        forest_dict(
            [
                stump(feature=0, threshold=5.0, left=(50.0, 25.0), right=(0.0, 75.0)),
                stump(feature=1, threshold=10.0, left=(60.0, 20.0), right=(0.0, 80.0)),
                stump(feature=2, threshold=15.0, left=(0.0, 90.0), right=(0.0, 60.0)),
            ]
        )
    )


@pytest.fixture
def tie_forest():
    """Two trees whose every leaf votes (100, 100)."""
    return Forest.from_dict(
        forest_dict(
            [
                stump(feature=0, threshold=5.0, left=(100.0, 100.0), right=(100.0, 100.0)),
                stump(feature=1, threshold=10.0, left=(100.0, 100.0), right=(100.0, 100.0)),
            ]
        )
    )
