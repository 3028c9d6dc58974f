# server/predictor.py
"""
End-to-end inference entry point: scale the feature vector, then let the
forest vote.

A Predictor is built once from a model artifact and shared read-only by
every prediction call afterwards:

{
  "scaler": {"scale": [...], "mean": [...]},
  "model":  {"n_estimators", "n_features", "n_classes", "classes", "trees": [...]}
}
"""

import functools
import json

from shared.config import EMBEDDED_MODEL_PATH
from shared.errors import ModelFormatError
from shared.logger import get_logger
from server.forest import Forest
from server.scaler import Scaler

logger = get_logger(__name__)


class Predictor:
    def __init__(self, scaler: Scaler, forest: Forest):
        if scaler.n_features != forest.n_features:
            raise ModelFormatError(
                f"scaler has {scaler.n_features} features but forest expects {forest.n_features}"
            )
        self.scaler = scaler
        self.forest = forest

    @property
    def n_features(self) -> int:
        return self.forest.n_features

    def predict(self, features) -> int:
        """
        Scale `features` in place and return the forest's label.

        The caller's sequence holds scaled values afterwards; pass a copy if
        the raw values are still needed.
        """
        self.scaler.transform(features, self.forest.n_features)
        return self.forest.predict(features)

    @classmethod
    def from_dict(cls, data: dict) -> "Predictor":
        try:
            scaler = Scaler.from_dict(data["scaler"])
            forest = Forest.from_dict(data["model"])
        except ModelFormatError:
            raise
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise ModelFormatError(f"malformed model artifact: {e!r}") from e
        return cls(scaler, forest)

    def to_dict(self) -> dict:
        return {"scaler": self.scaler.to_dict(), "model": self.forest.to_dict()}


def loads_predictor(blob) -> Predictor:
    """Build a Predictor from an in-memory JSON artifact (bytes or str)."""
    try:
        if isinstance(blob, (bytes, bytearray)):
            blob = blob.decode("utf-8")
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ModelFormatError(f"model artifact is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ModelFormatError("model artifact must be a JSON object")

    predictor = Predictor.from_dict(data)
    logger.info(
        "predictor_loaded",
        n_estimators=predictor.forest.n_estimators,
        n_features=predictor.n_features,
        classes=list(predictor.forest.classes),
    )
    return predictor


def load_predictor(path) -> Predictor:
    """Build a Predictor from a JSON artifact file."""
    logger.debug("predictor_load_file", path=str(path))
    with open(path, "rb") as f:
        return loads_predictor(f.read())


@functools.lru_cache(maxsize=1)
def load_embedded() -> Predictor:
    """Predictor for the artifact shipped with the package (loaded once)."""
    return load_predictor(EMBEDDED_MODEL_PATH)
