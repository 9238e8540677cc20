"""Line chart for generated signals and scatter chart for IQ constellations.

Both charts own their matplotlib figure. The figure is created on first use,
released by ``dispose()`` and created again by the next ``init()``/``update()``.
Updates with bad input are logged and rejected, leaving the chart as it was.
"""
from typing import Optional, Tuple

import numpy as np
from loguru import logger
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .types import SignalKind

# kind -> (label, line color, fill color)
SIGNAL_STYLES = {
    "sine": ("Sine Wave", (75 / 255, 192 / 255, 192 / 255, 1.0), (75 / 255, 192 / 255, 192 / 255, 0.1)),
    "am": ("Amplitude Modulated Signal", (153 / 255, 102 / 255, 1.0, 1.0), (153 / 255, 102 / 255, 1.0, 0.1)),
    "fm": ("Frequency Modulated Signal", (1.0, 159 / 255, 64 / 255, 1.0), (1.0, 159 / 255, 64 / 255, 0.1)),
}
DEFAULT_STYLE = ("Signal", SIGNAL_STYLES["sine"][1], SIGNAL_STYLES["sine"][2])

HEADROOM = 1.1
IQ_LIMIT = 1.2
IQ_TICK = 0.2


def _as_series(values) -> Optional[np.ndarray]:
    if values is None or isinstance(values, (str, bytes)):
        return None
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError):
        return None
    if arr.ndim != 1 or arr.dtype.kind not in "iuf":
        return None
    # axis limits come from these values and cannot be nan or inf
    if not np.all(np.isfinite(arr)):
        return None
    return arr.astype(np.float64)


def _pair(xs, ys, what: str) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    x = _as_series(xs)
    y = _as_series(ys)
    if x is None or y is None or len(x) != len(y):
        logger.error(f"Invalid data format for {what} update")
        return None
    return x, y


class _Chart:
    figsize = (8, 4)

    def __init__(self):
        self.figure: Optional[Figure] = None
        self.ax = None
        self._x = np.zeros(0)
        self._y = np.zeros(0)

    @property
    def initialized(self) -> bool:
        return self.figure is not None

    @property
    def data(self) -> Tuple[np.ndarray, np.ndarray]:
        return self._x, self._y

    def init(self) -> bool:
        self.dispose()
        self.figure = Figure(figsize=self.figsize)
        FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_subplot(1, 1, 1)
        self._x = np.zeros(0)
        self._y = np.zeros(0)
        self._setup()
        logger.debug(f"{type(self).__name__} initialized")
        return True

    def _setup(self):
        raise NotImplementedError

    def _ensure(self):
        if not self.initialized:
            self.init()

    def save(self, path) -> bool:
        if not self.initialized:
            logger.error(f"{type(self).__name__} has nothing to render")
            return False
        self.figure.savefig(path)
        return True

    def dispose(self) -> None:
        if self.figure is not None:
            self.figure.clear()
            self.figure = None
            self.ax = None
            logger.debug(f"{type(self).__name__} destroyed")


class SignalChart(_Chart):
    """Time vs. amplitude line chart, rescaled to the plotted data on each update."""

    def __init__(self):
        super().__init__()
        self._line = None
        self._fill = None

    def _setup(self):
        label, color, _ = SIGNAL_STYLES["sine"]
        (self._line,) = self.ax.plot([], [], color=color, linewidth=2, label=label)
        self._fill = None
        self.ax.set_xlabel("Time (seconds)")
        self.ax.set_ylabel("Amplitude")
        self.ax.set_xlim(left=0)
        self.ax.legend(loc="upper right")

    def update(self, time, signal, kind: SignalKind = "sine") -> bool:
        pair = _pair(time, signal, "signal chart")
        if pair is None:
            return False
        self._ensure()
        x, y = pair
        label, color, fill_color = SIGNAL_STYLES.get(kind, DEFAULT_STYLE)

        self._line.set_data(x, y)
        self._line.set_color(color)
        self._line.set_label(label)
        if self._fill is not None:
            self._fill.remove()
        self._fill = self.ax.fill_between(x, y, color=fill_color) if len(x) else None
        self.ax.legend(loc="upper right")

        if len(y):
            peak = float(np.max(np.abs(y)))
            if peak > 0:
                self.ax.set_ylim(-peak * HEADROOM, peak * HEADROOM)
            max_time = float(np.max(x))
            if max_time > 0:
                self.ax.set_xlim(0, max_time)

        self._x, self._y = x, y
        logger.debug(f"Signal chart updated with {len(y)} points ({kind})")
        return True


class ConstellationChart(_Chart):
    """Square I/Q scatter with both axes fixed to [-1.2, 1.2]."""

    figsize = (5, 5)

    def __init__(self):
        super().__init__()
        self._points = None

    def _setup(self):
        ticks = np.round(np.arange(-IQ_LIMIT, IQ_LIMIT + IQ_TICK / 2, IQ_TICK), 1)
        self._points = self.ax.scatter([], [], s=9, color=(1.0, 99 / 255, 132 / 255, 1.0))
        self.ax.set_xlabel("In-phase (I)")
        self.ax.set_ylabel("Quadrature (Q)")
        # ticks first, set_ticks may widen the view limits
        self.ax.set_xticks(ticks)
        self.ax.set_yticks(ticks)
        self.ax.set_xlim(-IQ_LIMIT, IQ_LIMIT)
        self.ax.set_ylim(-IQ_LIMIT, IQ_LIMIT)
        self.ax.set_aspect("equal")

    def update(self, i_data, q_data) -> bool:
        pair = _pair(i_data, q_data, "constellation chart")
        if pair is None:
            return False
        self._ensure()
        x, y = pair
        self._points.set_offsets(np.column_stack((x, y)))
        self._x, self._y = x, y
        return True
