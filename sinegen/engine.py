import threading
from typing import Optional

import numpy as np
from loguru import logger

from .generators import AmSpec, FmSpec, SineSpec, time_axis
from .generators.base import check_duration
from .types import WaveGen


class CancelToken:
    """Cooperative cancellation flag shared between a generation call and its stopper."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class SignalGenerator:
    """Builds sine, AM and FM sample arrays and their time axis.

    Each call drains a waveform spec frame by frame and checks its
    :class:`CancelToken` after every frame. When the token is cancelled the
    samples produced so far are returned; the first frame is always produced,
    so a stopped call never returns an empty array for a non-empty request.

    ``stop()`` cancels every call currently running on the instance. Callers
    wanting finer control pass their own token.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # one entry per running call, a shared token appears once per call
        self._active: list = []

    @property
    def is_generating(self) -> bool:
        with self._lock:
            return bool(self._active)

    def stop(self) -> None:
        with self._lock:
            tokens = set(self._active)
        for token in tokens:
            token.cancel()
        if tokens:
            logger.debug(f"Stop requested for {len(tokens)} generation(s)")

    def generate(self, spec: WaveGen, duration: float, token: Optional[CancelToken] = None) -> np.ndarray:
        duration = check_duration(duration)
        if token is None:
            token = CancelToken()
        num = spec.num_samples(duration)
        with self._lock:
            self._active.append(token)
        try:
            chunks = []
            done = 0
            for chunk, _ in spec.generator(duration):
                chunks.append(chunk)
                done += len(chunk)
                if token.cancelled and done < num:
                    logger.info(f"{type(spec).__name__} generation stopped after {done}/{num} samples")
                    break
        finally:
            with self._lock:
                self._active.remove(token)

        logger.debug(f"Generated {done} samples ({type(spec).__name__}, {duration}s @ {spec.sample_rate}Hz)")
        if not chunks:
            return np.zeros(0, dtype=np.float64)
        return np.concatenate(chunks).astype(np.float64, copy=False)

    def generate_sine(self, amplitude, frequency, phase, duration, sample_rate, token=None, frame=None):
        spec = SineSpec(amp=amplitude, freq=frequency, phase=phase, sample_rate=sample_rate, **_frame(frame))
        return self.generate(spec, duration, token)

    def generate_amplitude_modulated(self, carrier_amplitude, carrier_frequency, message_amplitude,
                                     message_frequency, duration, sample_rate, token=None, frame=None):
        spec = AmSpec(amp=carrier_amplitude, freq=carrier_frequency, message_amp=message_amplitude,
                      message_freq=message_frequency, sample_rate=sample_rate, **_frame(frame))
        return self.generate(spec, duration, token)

    def generate_frequency_modulated(self, carrier_amplitude, carrier_frequency, modulation_index,
                                     message_frequency, duration, sample_rate, token=None, frame=None):
        spec = FmSpec(amp=carrier_amplitude, freq=carrier_frequency, index=modulation_index,
                      message_freq=message_frequency, sample_rate=sample_rate, **_frame(frame))
        return self.generate(spec, duration, token)

    def generate_time_array(self, duration, sample_rate) -> np.ndarray:
        return time_axis(duration, sample_rate)


def _frame(frame):
    return {} if frame is None else {"frame": frame}
