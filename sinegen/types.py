from typing import Generator, Literal, Protocol, TypedDict
import numpy as np

SignalKind = Literal["sine", "am", "fm"]

class ChunkInfo(TypedDict, total=False):
    type: SignalKind
    freq: float
    amp: float
    phase: float
    message_amp: float
    message_freq: float
    index: float

class WaveGen(Protocol):
    sample_rate: int

    def num_samples(self, duration: float) -> int: ...

    def generator(self, duration: float) -> Generator[tuple[np.ndarray, ChunkInfo], None, None]: ...
