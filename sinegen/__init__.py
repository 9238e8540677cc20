from .engine import CancelToken, SignalGenerator
from .errors import InvalidParameter, SinegenError
from .generators import AmSpec, FmSpec, SineSpec, time_axis
from .charts import ConstellationChart, SignalChart
from .iq import quadrature_mix

__all__ = [
    "CancelToken",
    "SignalGenerator",
    "InvalidParameter",
    "SinegenError",
    "SineSpec",
    "AmSpec",
    "FmSpec",
    "time_axis",
    "SignalChart",
    "ConstellationChart",
    "quadrature_mix",
]
