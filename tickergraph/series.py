"""Rolling sample buffer and pixel mapping for ticker graphs.

Pure logic, numpy only, so it can be unit tested without a display. The
widget in ``layout/graph.py`` owns one ``GraphSeries`` and asks it where to
put every line it paints.
"""
from collections import deque
from typing import Iterable, Optional, Sequence

import numpy as np

DEFAULT_MIN = 0.0
DEFAULT_MAX = 100.0
DEFAULT_GRID_PITCH = 10.0
DEFAULT_POINT_WIDTH = 1


class GraphSeries:
    """Bounded, append-only sequence of samples plus its data-space config.

    Samples are stored oldest first. The buffer never holds more than
    ``capacity(width)`` samples for the width it was last appended or
    trimmed with, so the newest sample sits on the right edge and the
    oldest one is at most one point width past the left edge.
    """

    def __init__(self) -> None:
        self._data: deque[float] = deque()
        self._data_count = 0
        self._units = ""
        self._min = DEFAULT_MIN
        self._max = DEFAULT_MAX
        self._point_width = DEFAULT_POINT_WIDTH
        self._reference_points: tuple[float, ...] = ()
        self._grid_pitch = DEFAULT_GRID_PITCH

    def __len__(self) -> int:
        return len(self._data)

    @property
    def values(self) -> np.ndarray:
        return np.fromiter(self._data, dtype=np.float64, count=len(self._data))

    @property
    def last(self) -> Optional[float]:
        return self._data[-1] if self._data else None

    @property
    def data_count(self) -> int:
        """Samples appended since the last clear, evicted ones included."""
        return self._data_count

    @property
    def units(self) -> str:
        return self._units

    @property
    def range(self) -> tuple[float, float]:
        return self._min, self._max

    @property
    def point_width(self) -> int:
        return self._point_width

    @property
    def reference_points(self) -> tuple[float, ...]:
        return self._reference_points

    @property
    def grid_pitch(self) -> float:
        return self._grid_pitch

    def set_units(self, units: str) -> bool:
        if units == self._units:
            return False
        self._units = units
        return True

    def set_range(self, min_: float, max_: float) -> bool:
        if not max_ > min_:
            return False
        if min_ == self._min and max_ == self._max:
            return False
        self._min = float(min_)
        self._max = float(max_)
        return True

    def set_point_width(self, width: int) -> bool:
        width = int(width)
        if width < 1 or width == self._point_width:
            return False
        self._point_width = width
        return True

    def set_reference_points(self, points: Iterable[float]) -> bool:
        points = tuple(float(p) for p in points)
        if points == self._reference_points:
            return False
        self._reference_points = points
        return True

    def set_grid_pitch(self, pitch: float) -> bool:
        if pitch == self._grid_pitch:
            return False
        self._grid_pitch = float(pitch)
        return True

    def capacity(self, width: int) -> int:
        return max(width, 0) // self._point_width + 1

    def append(self, value: float, width: int) -> None:
        self._data.append(float(value))
        self._data_count += 1
        self.trim(width)

    def trim(self, width: int) -> None:
        capacity = self.capacity(width)
        while len(self._data) > capacity:
            self._data.popleft()

    def clear(self) -> None:
        self._data.clear()
        self._data_count = 0

    def scale(self, height: int) -> float:
        return height / (self._max - self._min)

    def to_pixels(
        self,
        values: float | Sequence[float] | np.ndarray,
        height: int,
    ) -> np.ndarray:
        """Map data values to y pixels: ``min`` -> ``height``, ``max`` -> 0."""
        values = np.asarray(values, dtype=np.float64)
        return height - self.scale(height) * (values - self._min)

    def polyline(self, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
        n = len(self._data)
        data_width = self._point_width * (n - 1)
        x = width - data_width + self._point_width * np.arange(n)
        return x.astype(np.float64), self.to_pixels(self.values, height)

    def grid_pitch_pixels(self, height: int) -> int:
        return int(self.scale(height) * self._grid_pitch)

    def vertical_grid(self, width: int, height: int) -> list[int]:
        pitch = self.grid_pitch_pixels(height)
        if pitch <= 0:
            return []
        start = -((self._data_count * self._point_width) % pitch)
        return list(range(start, width, pitch))

    def horizontal_grid(self, height: int) -> list[int]:
        pitch = self.grid_pitch_pixels(height)
        if pitch <= 0:
            return []
        offset = 0
        if self._reference_points:
            offset = int(self.to_pixels(self._reference_points[0], height))
        return list(range(-pitch + offset % pitch, height, pitch))

    def format_value(self, value: float) -> str:
        return f"{value:g} {self._units}"

    def format_current(self) -> Optional[str]:
        if not self._data:
            return None
        return f"{self._data[-1]:3.3f} {self._units}"
