"""Body state containers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


@dataclass(slots=True)
class BodiesState:
    pos: ArrayF
    vel: ArrayF
    mass: ArrayF
    names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        self.pos = np.ascontiguousarray(self.pos, dtype=np.float64)
        self.vel = np.ascontiguousarray(self.vel, dtype=np.float64)
        self.mass = np.ascontiguousarray(self.mass, dtype=np.float64)
        if self.names is not None:
            self.names = tuple(str(name) for name in self.names)
        self.validate()

    @property
    def count(self) -> int:
        return int(self.pos.shape[0])

    def validate(self) -> None:
        if self.pos.ndim != 2 or self.pos.shape[1] != 3:
            raise ValueError("pos must have shape (N, 3)")
        if self.vel.shape != self.pos.shape:
            raise ValueError("vel must have shape (N, 3)")
        if self.mass.ndim != 1 or self.mass.shape[0] != self.pos.shape[0]:
            raise ValueError("mass must have shape (N,)")
        if np.any(self.mass < 0.0):
            raise ValueError("mass must be non-negative")
        if self.names is not None and len(self.names) != self.pos.shape[0]:
            raise ValueError("names must have one entry per body")

    def copy(self) -> "BodiesState":
        return BodiesState(
            pos=self.pos.copy(),
            vel=self.vel.copy(),
            mass=self.mass.copy(),
            names=self.names,
        )
