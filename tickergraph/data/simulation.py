"""Synthetic feed for the demo window.

Three mean-reverting random walks (voltage, temperature, speed). Speed is
pulled slightly towards the current voltage, everything else is independent.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

VOLTAGE_START = 100.0
TEMPERATURE_START = 20.0
SPEED_START = 100.0

REVERSION = 0.02
SPEED_VOLTAGE_COUPLING = 0.3
_RANDOM_SPAN = 1000


@dataclass
class Sample:
    voltage: float
    temperature: float
    speed: float


class DemoFeed:

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)
        self.voltage = VOLTAGE_START
        self.temperature = TEMPERATURE_START
        self.speed = SPEED_START
        self.ticks = 0

    def _draw(self) -> int:
        return int(self._rng.integers(0, _RANDOM_SPAN))

    def step(self) -> Sample:
        """Advance every walk by one tick and return the new values."""
        self.voltage += (
            9.0 - self._draw() / 50.0
            + REVERSION * (VOLTAGE_START - self.voltage)
        )
        self.temperature += (
            0.5 - self._draw() / 1000.0
            + REVERSION * (TEMPERATURE_START - self.temperature)
        )
        # uses the voltage of this tick
        self.speed += (
            4.9 - self._draw() / 100.0
            + REVERSION * (
                SPEED_START - self.speed
                + SPEED_VOLTAGE_COUPLING * self.voltage
            )
        )
        self.ticks += 1
        return Sample(self.voltage, self.temperature, self.speed)
