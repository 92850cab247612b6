"""Pairwise Newtonian gravity expressed as per-step velocity impulses."""

from __future__ import annotations

import numpy as np

from .base import ArrayF
from ..math.vector import norm, pair_displacements, pair_indices
from ..state.bodies import BodiesState


class PairwiseGravity:
    """Gravity in units where G = 1, one interaction per unordered pair.

    Pairs are visited in ascending (i, j) order. Body i receives
    ``-d * m_j * mag`` and body j receives ``+d * m_i * mag`` with
    ``d = pos_i - pos_j`` and ``mag = dt / dist**3``.
    """

    def __init__(self) -> None:
        self._pairs: dict[int, tuple[np.ndarray, np.ndarray]] = {}

    def pairs(self, n: int) -> tuple[np.ndarray, np.ndarray]:
        if n not in self._pairs:
            self._pairs[n] = pair_indices(n)
        return self._pairs[n]

    def pair_impulses(
        self, state: BodiesState, dt: float
    ) -> tuple[ArrayF, ArrayF]:
        """Return velocity deltas (for body i, for body j) of every pair."""
        i, j = self.pairs(state.count)
        d = pair_displacements(state.pos, i, j)
        dist = norm(d)
        mag = dt / (dist * dist * dist)
        dv_i = d * state.mass[j][:, np.newaxis] * mag[:, np.newaxis]
        dv_j = d * state.mass[i][:, np.newaxis] * mag[:, np.newaxis]
        return -dv_i, dv_j

    def kick(self, state: BodiesState, dt: float) -> None:
        """Apply every pair impulse to the velocities (mutating).

        Body k collects its increments from pairs (i, k), i < k, before
        those from pairs (k, j), j > k, which is the order a nested
        ``for i: for j > i`` loop produces. ``ufunc.at`` applies repeated
        indices sequentially, so each velocity sees the same sequence of
        roundings as the scalar loop.
        """
        if state.count < 2:
            return
        i, j = self.pairs(state.count)
        dv_i, dv_j = self.pair_impulses(state, dt)
        np.add.at(state.vel, j, dv_j)
        np.add.at(state.vel, i, dv_i)
