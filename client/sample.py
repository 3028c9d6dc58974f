# client/sample.py
from dataclasses import astuple, dataclass

from shared.config import N_FEATURES

# Columns of one CSV record, in file order.
SAMPLE_FIELDS = (
    "Nep_index",
    "YE",
    "Nep_Tb",
    "Nep_TOF",
    "NepSumArray",
    "NepPeakArray",
    "NepDArray",
    "YE_TOF",
    "YE_Size",
    "YE_Mean",
    "YE_Median",
    "YE_V",
    "YE_Te",
    "YE_Tc",
    "AF",
)

# Columns the model was trained on, in model feature order.
# Nep_index and YE are record identifiers, not features.
FEATURE_FIELDS = SAMPLE_FIELDS[-N_FEATURES:]


@dataclass(frozen=True)
class Sample:
    Nep_index: float
    YE: float
    Nep_Tb: float
    Nep_TOF: float
    NepSumArray: float
    NepPeakArray: float
    NepDArray: float
    YE_TOF: float
    YE_Size: float
    YE_Mean: float
    YE_Median: float
    YE_V: float
    YE_Te: float
    YE_Tc: float
    AF: float

    @classmethod
    def from_line(cls, line: str) -> "Sample":
        """Parse one comma-separated record, e.g. "0,2.069,38.409,...,0.490"."""
        parts = line.strip().split(",")
        if len(parts) != len(SAMPLE_FIELDS):
            raise ValueError(
                f"sample line has {len(parts)} fields, expected {len(SAMPLE_FIELDS)}: {line.strip()!r}"
            )
        try:
            values = [float(p) for p in parts]
        except ValueError as e:
            raise ValueError(f"non-numeric field in sample line {line.strip()!r}") from e
        return cls(*values)

    def to_line(self) -> str:
        # 17 significant digits round-trips every double exactly
        return ",".join(format(v, ".17g") for v in astuple(self))

    def to_vec(self) -> list:
        """Model feature vector (fresh list, safe to scale in place)."""
        return [getattr(self, name) for name in FEATURE_FIELDS]
