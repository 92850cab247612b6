"""Vector utilities for NumPy arrays.

All vectors are expected to be shaped (..., 3). Squared norms are summed
component by component, x then y then z, so results match a scalar
``dx*dx + dy*dy + dz*dz`` bit for bit.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]
ArrayI = NDArray[np.intp]


def norm2(v: ArrayF) -> ArrayF:
    """Return the squared L2 norm along the last axis."""
    return v[..., 0] * v[..., 0] + v[..., 1] * v[..., 1] + v[..., 2] * v[..., 2]


def norm(v: ArrayF) -> ArrayF:
    """Return the L2 norm along the last axis."""
    return np.sqrt(norm2(v))


def pair_indices(n: int) -> tuple[ArrayI, ArrayI]:
    """Return (i, j) index arrays for all pairs i < j in lexicographic order."""
    if n < 0:
        raise ValueError("n must be >= 0")
    i, j = np.triu_indices(n, k=1)
    return i.astype(np.intp), j.astype(np.intp)


def pair_displacements(pos: ArrayF, i: ArrayI, j: ArrayI) -> ArrayF:
    """Return pos[i] - pos[j] for each pair as (P, 3)."""
    return pos[i] - pos[j]
