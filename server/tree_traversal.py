# server/tree_traversal.py
"""
Single decision tree stored the way scikit-learn exports it: parallel
arrays indexed by node id, node 0 is the root, children_left == -1 marks
a leaf.
"""

import numpy as np

from shared.config import LEAF_SENTINEL, THRESHOLD_EPSILON
from shared.errors import ModelFormatError


def _frozen(values, dtype):
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr


class DecisionTree:
    def __init__(self, feature, threshold, children_left, children_right, value,
                 n_node_samples=None, n_features=None):
        self.feature = _frozen(feature, np.int64)
        self.threshold = _frozen(threshold, float)
        self.children_left = _frozen(children_left, np.int64)
        self.children_right = _frozen(children_right, np.int64)

        if self.children_left.ndim != 1:
            raise ModelFormatError("tree children_left must be a flat list")
        num_nodes = self.children_left.shape[0]
        value = np.array(value, dtype=float)
        if value.size != num_nodes * 2:
            raise ModelFormatError(
                f"tree value must hold one (no, yes) pair per node, got shape {value.shape} "
                f"for {num_nodes} nodes"
            )
        value = value.reshape(num_nodes, 2)
        value.flags.writeable = False
        self.value = value

        if n_node_samples is None:
            n_node_samples = np.zeros(num_nodes, dtype=np.int64)
        self.n_node_samples = _frozen(n_node_samples, np.int64)

        self._validate(n_features)

    @property
    def node_count(self) -> int:
        return int(self.children_left.shape[0])

    def is_leaf(self, node: int) -> bool:
        return self.children_left[node] == LEAF_SENTINEL

    def _validate(self, n_features):
        num_nodes = self.node_count
        if num_nodes == 0:
            raise ModelFormatError("tree has no nodes")

        for name in ("feature", "threshold", "children_right", "n_node_samples"):
            arr = getattr(self, name)
            if arr.ndim != 1 or arr.shape[0] != num_nodes:
                raise ModelFormatError(
                    f"tree {name} has {arr.shape[0] if arr.ndim else 0} entries, expected {num_nodes}"
                )
        if np.any(self.value < 0):
            raise ModelFormatError("tree leaf weights must be non-negative")

        # Walk from the root; a node reached twice means a cycle or a shared child.
        seen = np.zeros(num_nodes, dtype=bool)
        stack = [0]
        while stack:
            node = stack.pop()
            if seen[node]:
                raise ModelFormatError(f"tree node {node} is reachable more than once")
            seen[node] = True
            if self.is_leaf(node):
                continue

            if n_features is not None and not 0 <= self.feature[node] < n_features:
                raise ModelFormatError(
                    f"tree node {node} splits on feature {self.feature[node]}, "
                    f"model has {n_features} features"
                )
            for child in (self.children_left[node], self.children_right[node]):
                if not 0 <= child < num_nodes:
                    raise ModelFormatError(f"tree node {node} has invalid child id {child}")
                stack.append(int(child))

    def apply(self, features) -> int:
        """Return the id of the leaf `features` lands in."""
        node = 0
        while self.children_left[node] != LEAF_SENTINEL:
            sample = features[self.feature[node]]
            threshold = self.threshold[node]

            # x <= threshold (with tolerance) -> left, else right
            if sample <= threshold or abs(sample - threshold) < THRESHOLD_EPSILON:
                node = self.children_left[node]
            else:
                node = self.children_right[node]
        return int(node)

    def predict(self, features):
        """Return the (no_weight, yes_weight) pair stored at the reached leaf."""
        no_weight, yes_weight = self.value[self.apply(features)]
        return float(no_weight), float(yes_weight)

    @classmethod
    def from_dict(cls, data: dict, n_features=None) -> "DecisionTree":
        return cls(
            feature=data["feature"],
            threshold=data["threshold"],
            children_left=data["children_left"],
            children_right=data["children_right"],
            value=data["value"],
            n_node_samples=data.get("n_node_samples"),
            n_features=n_features,
        )

    def to_dict(self) -> dict:
        return {
            "feature": self.feature.tolist(),
            "threshold": self.threshold.tolist(),
            "children_left": self.children_left.tolist(),
            "children_right": self.children_right.tolist(),
            "value": [[pair] for pair in self.value.tolist()],
            "n_node_samples": self.n_node_samples.tolist(),
        }
