"""Force/model interfaces."""

from __future__ import annotations

from typing import Protocol

import numpy as np
from numpy.typing import NDArray

from ..state.bodies import BodiesState


ArrayF = NDArray[np.float64]


class ImpulseModel(Protocol):
    def kick(self, state: BodiesState, dt: float) -> None:
        """Add one step's velocity impulses to state.vel (mutating)."""
