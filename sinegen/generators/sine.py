import numpy as np
from dataclasses import dataclass
from .base import GenBase

@dataclass
class SineSpec(GenBase):
    freq: float = 1.0
    phase: float = 0.0

    def _wave(self, t):
        return self.amp * np.sin(2 * np.pi * self.freq * t + self.phase)

    def _info(self):
        return {"type": "sine", "freq": self.freq, "amp": self.amp, "phase": self.phase}
