"""Jovian system energy drift, sampled along the run."""

from __future__ import annotations

import numpy as np

from compute_bench.core.diagnostics import linear_momentum
from compute_bench.core.integrators import PairwiseLeapfrog
from compute_bench.core.run import run
from compute_bench.programs.nbody import jovian_system, offset_momentum


if __name__ == "__main__":
    state = jovian_system()
    offset_momentum(state)

    dt = 0.01
    steps = 20_000
    report_every = 2_000

    result = run(state, PairwiseLeapfrog(), dt, steps, sample_every=report_every)
    e0 = result.energy[0]
    for t, e in zip(result.time, result.energy):
        print(f"t={t:8.2f} yr | E={e:.9f} | dE={e - e0:.3e}")

    p = linear_momentum(result.final_state)
    print(f"|p| at end: {np.linalg.norm(p):.3e}")
