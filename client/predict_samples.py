# client/predict_samples.py
"""
Run the forest over every record of a sample CSV and print the sum of the
predicted labels (with {0, 1} labels: the number of positive samples).

Usage:
    forest-predict <model_json> <sample_csv> [--verbose]
"""

import argparse
import sys

from client.data_utils import load_samples
from server.predictor import load_predictor


def predict_samples(predictor, samples):
    """Return one label per sample, in order."""
    return [predictor.predict(sample.to_vec()) for sample in samples]


def main(argv=None):
    ap = argparse.ArgumentParser(description="Predict labels for a CSV of samples.")
    ap.add_argument("model_json", help="model artifact (JSON)")
    ap.add_argument("sample_csv", help="sample CSV with a header line")
    ap.add_argument("--verbose", action="store_true", help="print each sample's label first")
    args = ap.parse_args(argv)

    try:
        predictor = load_predictor(args.model_json)
        samples = load_samples(args.sample_csv)
        labels = predict_samples(predictor, samples)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        for i, label in enumerate(labels):
            print(f"{i}: {label}")
    print(sum(labels))
    return 0


if __name__ == "__main__":
    sys.exit(main())
