# client/data_utils.py
from client.sample import Sample


def load_samples(path):
    """
    Load Samples from a CSV file. The first line is a header and is skipped,
    as are blank lines.
    """
    samples = []
    with open(path, "r", encoding="utf-8") as f:
        next(f, None)
        for line in f:
            if not line.strip():
                continue
            samples.append(Sample.from_line(line))
    return samples
