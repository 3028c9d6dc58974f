# client/compare_local_remote.py
import argparse
import sys
import time

import numpy as np

from client.client import remote_predict
from client.data_utils import load_samples
from client.plain_predict import plain_predict
from shared.config import SERVER_URL


def compare(samples, url=SERVER_URL, predictor=None):
    """
    Predict every sample locally and through the server.
    Returns (match_count, remote_times_seconds).
    """
    n = len(samples)
    match_local_remote = 0
    total_times = []

    for i, sample in enumerate(samples):
        x = sample.to_vec()

        y_local = plain_predict(x, predictor=predictor)

        t0 = time.perf_counter()
        y_remote = remote_predict(x, url=url)
        t1 = time.perf_counter()
        total_times.append(t1 - t0)

        if y_local == y_remote:
            match_local_remote += 1

        if (i + 1) % 10 == 0 or i == n - 1:
            print(f"Processed {i+1}/{n} samples...")

    return match_local_remote, np.array(total_times)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare local and server predictions.")
    ap.add_argument("sample_csv")
    ap.add_argument("--url", default=SERVER_URL)
    args = ap.parse_args(argv)

    samples = load_samples(args.sample_csv)
    n = len(samples)
    if n == 0:
        print("No samples found.")
        return 1

    matches, total_times = compare(samples, url=args.url)

    print("\n=== Match Metrics ===")
    print(f"Samples                   : {n}")
    print(f"Local vs remote match     : {matches / n:.3f}")

    print("\n=== Timing (remote request, client-visible) ===")
    print(f"Mean per-sample time      : {total_times.mean()*1000:.2f} ms")
    print(f"Median per-sample time    : {np.median(total_times)*1000:.2f} ms")
    print(f"Min / Max                 : {total_times.min()*1000:.2f} / {total_times.max()*1000:.2f} ms")
    return 0 if matches == n else 2


if __name__ == "__main__":
    sys.exit(main())
