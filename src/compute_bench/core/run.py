"""Simulation run loop with optional sampling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .diagnostics.bodies import energy
from .integrators import Integrator
from .state.bodies import BodiesState


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    final_state: BodiesState
    time: np.ndarray | None = None
    pos: np.ndarray | None = None
    vel: np.ndarray | None = None
    energy: np.ndarray | None = None


def run(
    state: BodiesState,
    integrator: Integrator,
    dt: float,
    steps: int,
    sample_every: int | None = None,
    callback: Callable[[int, BodiesState], None] | None = None,
) -> RunResult:
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if sample_every is not None and sample_every <= 0:
        raise ValueError("sample_every must be > 0")

    times: list[float] = []
    pos: list[np.ndarray] = []
    vel: list[np.ndarray] = []
    energies: list[float] = []

    def sample(step: int) -> None:
        times.append(step * dt)
        pos.append(state.pos.copy())
        vel.append(state.vel.copy())
        energies.append(energy(state))

    logger.debug("run: %d bodies, dt=%g, steps=%d", state.count, dt, steps)
    if sample_every is not None:
        sample(0)

    for step in range(1, steps + 1):
        integrator.step(state, dt)
        if callback is not None:
            callback(step, state)
        if sample_every is not None and step % sample_every == 0:
            sample(step)

    if sample_every is None:
        return RunResult(final_state=state)

    logger.debug("run: collected %d samples", len(times))
    return RunResult(
        final_state=state,
        time=np.asarray(times, dtype=np.float64),
        pos=np.asarray(pos, dtype=np.float64),
        vel=np.asarray(vel, dtype=np.float64),
        energy=np.asarray(energies, dtype=np.float64),
    )
