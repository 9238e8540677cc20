import numpy as np
from dataclasses import dataclass
from .base import GenBase

@dataclass
class AmSpec(GenBase):
    """Double-sideband AM with carrier.

    ``amp * (1 + message) * sin(2*pi*freq*t)`` where
    ``message = message_amp * sin(2*pi*message_freq*t)``. The message only
    scales the carrier; the carrier phase is untouched.
    """
    freq: float = 10.0
    message_amp: float = 0.5
    message_freq: float = 1.0

    def _wave(self, t):
        message = self.message_amp * np.sin(2 * np.pi * self.message_freq * t)
        return self.amp * (1 + message) * np.sin(2 * np.pi * self.freq * t)

    def _info(self):
        return {
            "type": "am",
            "freq": self.freq,
            "amp": self.amp,
            "message_amp": self.message_amp,
            "message_freq": self.message_freq,
        }
