# server/convert_tree.py
"""
Export a fitted scikit-learn StandardScaler + RandomForestClassifier to the
JSON model artifact read by server.predictor.

Usage:
    forest-export model/rf_plain.joblib model/forest_model.json

The joblib file may hold a Pipeline (a StandardScaler step followed by a
RandomForestClassifier), a (scaler, forest) tuple or a dict with "scaler"
and "classifier" keys.
"""

import argparse
import json
import os
import sys

import joblib
import numpy as np

from shared.logger import get_logger
from server.forest import Forest
from server.predictor import Predictor
from server.scaler import Scaler
from server.tree_traversal import DecisionTree

logger = get_logger(__name__)


def split_model(obj):
    """Return (scaler, forest) from whatever container the joblib file held."""
    if isinstance(obj, dict):
        return obj["scaler"], obj["classifier"]
    if isinstance(obj, (tuple, list)) and len(obj) == 2:
        return obj[0], obj[1]
    steps = getattr(obj, "steps", None)
    if steps:
        scaler = next(est for _, est in steps if hasattr(est, "mean_"))
        return scaler, steps[-1][1]
    raise ValueError(f"cannot find scaler and forest in {type(obj).__name__}")


def convert_tree(estimator, n_features):
    """Extract one fitted tree's parallel arrays into a DecisionTree."""
    tree = estimator.tree_

    # value is (node_count, n_outputs, n_classes); single output, two classes
    value = np.asarray(tree.value, dtype=float)
    if value.shape[1:] != (1, 2):
        raise ValueError(f"expected binary single-output tree values, got shape {value.shape}")

    return DecisionTree(
        feature=tree.feature,
        threshold=tree.threshold,
        children_left=tree.children_left,
        children_right=tree.children_right,
        value=value,
        n_node_samples=tree.n_node_samples,
        n_features=n_features,
    )


def convert_model(scaler, clf) -> Predictor:
    """Build a validated Predictor from a fitted scaler and forest."""
    classes = np.asarray(clf.classes_)
    if classes.shape[0] != 2:
        raise ValueError(f"only binary classifiers can be exported, got classes {classes.tolist()}")

    n_features = int(clf.n_features_in_)
    trees = [convert_tree(est, n_features) for est in clf.estimators_]
    forest = Forest(trees=trees, n_features=n_features, classes=classes.tolist())
    return Predictor(Scaler(mean=scaler.mean_, scale=scaler.scale_), forest)


def export_model(model_path, output_path):
    """Load a joblib model, convert it and write the JSON artifact."""
    print(f"Loading trained model from {model_path}...")
    scaler, clf = split_model(joblib.load(model_path))
    predictor = convert_model(scaler, clf)

    forest = predictor.forest
    node_counts = [tree.node_count for tree in forest.trees]
    print("Forest extraction complete!")
    print(f"Number of trees: {forest.n_estimators}")
    print(f"Number of features: {forest.n_features}")
    print(f"Classes: {list(forest.classes)}")
    print(f"Nodes per tree (min / max): {min(node_counts)} / {max(node_counts)}")

    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(predictor.to_dict(), f)
    print(f"Saved model artifact to: {output_path}")

    logger.info(
        "model_exported",
        path=str(output_path),
        n_estimators=forest.n_estimators,
        n_features=forest.n_features,
    )
    return predictor


def main(argv=None):
    ap = argparse.ArgumentParser(description="Export a fitted scaler + random forest to JSON.")
    ap.add_argument("model", help="joblib file with the fitted scaler and forest")
    ap.add_argument("output", help="path of the JSON artifact to write")
    args = ap.parse_args(argv)

    if not os.path.exists(args.model):
        print(f"Error: {args.model} not found!", file=sys.stderr)
        return 1

    export_model(args.model, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
