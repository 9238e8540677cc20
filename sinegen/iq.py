import numpy as np


def quadrature_mix(signal, time, carrier_frequency: float):
    """Map a real signal to (I, Q) points by mixing it with the carrier.

    ``I = s * cos(2*pi*fc*t)`` and ``Q = -s * sin(2*pi*fc*t)``, both divided by
    the peak magnitude so every point lies inside the unit circle. No filtering
    is applied, so the double-frequency mixing term stays in the points.
    """
    s = np.asarray(signal, dtype=np.float64)
    t = np.asarray(time, dtype=np.float64)
    if s.shape != t.shape:
        raise ValueError(f"signal and time differ in shape: {s.shape} != {t.shape}")
    phase = 2 * np.pi * carrier_frequency * t
    i = s * np.cos(phase)
    q = -s * np.sin(phase)
    peak = float(np.max(np.hypot(i, q))) if len(s) else 0.0
    if peak > 0:
        i /= peak
        q /= peak
    return i, q
