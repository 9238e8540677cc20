import numpy as np
from dataclasses import dataclass
from .base import GenBase

@dataclass
class FmSpec(GenBase):
    freq: float = 10.0
    index: float = 2.0  # beta
    message_freq: float = 1.0

    def _wave(self, t):
        message = np.sin(2 * np.pi * self.message_freq * t)
        return self.amp * np.sin(2 * np.pi * self.freq * t + self.index * message)

    def _info(self):
        return {
            "type": "fm",
            "freq": self.freq,
            "amp": self.amp,
            "index": self.index,
            "message_freq": self.message_freq,
        }
