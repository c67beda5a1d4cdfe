"""Frame time deltas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """Time elapsed between two frames, in seconds."""

    time: float = 0.0

    @property
    def seconds(self) -> float:
        return self.time

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0

    def __float__(self) -> float:
        return float(self.time)

    def __mul__(self, other: float) -> float:
        return self.time * float(other)

    __rmul__ = __mul__

    def __add__(self, other: float) -> float:
        return self.time + float(other)

    __radd__ = __add__