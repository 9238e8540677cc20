from .base import DEFAULT_DURATION, DEFAULT_SAMPLE_RATE, FRAME, GenBase, num_samples, time_axis
from .sine import SineSpec
from .am import AmSpec
from .fm import FmSpec

__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_SAMPLE_RATE",
    "FRAME",
    "GenBase",
    "num_samples",
    "time_axis",
    "SineSpec",
    "AmSpec",
    "FmSpec",
]
