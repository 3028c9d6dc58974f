# server/scaler.py
import numpy as np

from shared.errors import InvalidArgumentError, ModelFormatError


class Scaler:
    """
    Per-feature standardization: x[i] = (x[i] - mean[i]) / scale[i].

    mean/scale come from the fitted StandardScaler exported with the forest
    and are read-only after construction.
    """

    def __init__(self, mean, scale):
        mean = np.array(mean, dtype=float)
        scale = np.array(scale, dtype=float)
        if mean.ndim != 1 or scale.ndim != 1:
            raise ModelFormatError("scaler mean and scale must be flat lists")
        if mean.shape != scale.shape:
            raise ModelFormatError(
                f"scaler mean has {mean.shape[0]} entries but scale has {scale.shape[0]}"
            )
        mean.flags.writeable = False
        scale.flags.writeable = False
        self.mean = mean
        self.scale = scale

    @property
    def n_features(self) -> int:
        return int(self.mean.shape[0])

    def transform(self, vector, n_features: int) -> None:
        """
        Standardize `vector` in place (list or 1-D numpy array).

        The length is checked before any element is written. A zero scale
        entry yields inf/nan for that feature instead of raising.
        """
        if len(vector) != n_features:
            raise InvalidArgumentError(len(vector), n_features)
        if n_features != self.n_features:
            raise InvalidArgumentError(n_features, self.n_features, what="scaler input")

        with np.errstate(divide="ignore", invalid="ignore"):
            if isinstance(vector, np.ndarray) and np.issubdtype(vector.dtype, np.floating):
                np.subtract(vector, self.mean, out=vector)
                np.divide(vector, self.scale, out=vector)
                return
            scaled = (np.asarray(vector, dtype=float) - self.mean) / self.scale
        vector[:] = scaled.tolist()

    @classmethod
    def from_dict(cls, data: dict) -> "Scaler":
        return cls(mean=data["mean"], scale=data["scale"])

    def to_dict(self) -> dict:
        return {"scale": self.scale.tolist(), "mean": self.mean.tolist()}
