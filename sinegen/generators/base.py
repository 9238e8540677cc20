import math
import numbers
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidParameter

DEFAULT_SAMPLE_RATE = 1000
DEFAULT_DURATION = 1.0
FRAME = 1024


def check_sample_rate(sample_rate) -> int:
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, numbers.Integral):
        raise InvalidParameter(f"Sample rate must be an integer, got {sample_rate!r}")
    if sample_rate <= 0:
        raise InvalidParameter(f"Sample rate must be positive, got {sample_rate}")
    return int(sample_rate)


def check_duration(duration) -> float:
    duration = float(duration)
    if not math.isfinite(duration) or duration < 0:
        raise InvalidParameter(f"Duration must be a finite value >= 0, got {duration}")
    return duration


def num_samples(duration: float, sample_rate: int) -> int:
    """Number of samples in ``duration`` seconds, ``floor(duration * sample_rate)``."""
    return int(math.floor(check_duration(duration) * check_sample_rate(sample_rate)))


def time_axis(duration: float, sample_rate: int) -> np.ndarray:
    """Time of each sample, ``i / sample_rate`` for ``i`` in ``[0, num_samples)``."""
    num = num_samples(duration, sample_rate)
    return np.arange(num, dtype=np.float64) / sample_rate


@dataclass
class GenBase:
    amp: float = 1.0
    sample_rate: int = DEFAULT_SAMPLE_RATE
    frame: int = FRAME

    def __post_init__(self):
        self.sample_rate = check_sample_rate(self.sample_rate)
        if isinstance(self.frame, bool) or not isinstance(self.frame, numbers.Integral) or self.frame < 1:
            raise InvalidParameter(f"Frame size must be a positive integer, got {self.frame!r}")

    def num_samples(self, duration: float) -> int:
        return num_samples(duration, self.sample_rate)

    def _time(self, start: int, n: int) -> np.ndarray:
        # i / sample_rate per index so every frame lines up with time_axis()
        return np.arange(start, start + n, dtype=np.float64) / self.sample_rate

    def _wave(self, t: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _info(self) -> dict:
        raise NotImplementedError

    def generator(self, duration: float):
        num = self.num_samples(duration)
        for i in range(0, num, self.frame):
            n = min(self.frame, num - i)
            yield self._wave(self._time(i, n)), self._info()
