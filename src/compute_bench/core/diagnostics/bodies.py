"""Body diagnostics.

Energies use G = 1, the unit system of the benchmark's initial
conditions (AU, years, solar masses scaled by 4 pi^2).
"""

from __future__ import annotations

import numpy as np

from ..math.vector import norm, norm2, pair_displacements, pair_indices
from ..state.bodies import BodiesState


def total_mass(state: BodiesState) -> float:
    if state.mass.size == 0:
        return 0.0
    return float(np.sum(state.mass))


def linear_momentum(state: BodiesState) -> np.ndarray:
    if state.mass.size == 0:
        return np.zeros(3, dtype=np.float64)
    return np.sum(state.vel * state.mass[:, np.newaxis], axis=0)


def kinetic_terms(state: BodiesState) -> np.ndarray:
    """Per-body 0.5 * m * |v|^2."""
    return 0.5 * state.mass * norm2(state.vel)


def potential_terms(state: BodiesState) -> np.ndarray:
    """Per-pair m_i * m_j / r_ij, pairs in ascending (i, j) order."""
    i, j = pair_indices(state.count)
    dist = norm(pair_displacements(state.pos, i, j))
    return (state.mass[i] * state.mass[j]) / dist


def kinetic_energy(state: BodiesState) -> float:
    if state.mass.size == 0:
        return 0.0
    return float(np.sum(kinetic_terms(state)))


def potential_energy(state: BodiesState) -> float:
    if state.count < 2:
        return 0.0
    return float(-np.sum(potential_terms(state)))


def energy(state: BodiesState) -> float:
    """Total mechanical energy, kinetic minus pairwise potential.

    Terms are accumulated in the order of the nested scalar loop: the
    kinetic term of body i, then the potential of each pair (i, j > i).
    Reads state only.
    """
    n = state.count
    kinetic = kinetic_terms(state).tolist()
    potential = potential_terms(state).tolist() if n > 1 else []
    e = 0.0
    p = 0
    for i in range(n):
        e += kinetic[i]
        for _ in range(i + 1, n):
            e -= potential[p]
            p += 1
    return e
