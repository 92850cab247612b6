"""N-body benchmark: the Sun and the four Jovian planets.

Prints the total energy before and after a fixed number of leapfrog
steps. Both values are cross-implementation checkpoints, so the initial
conditions and the per-step arithmetic must stay exactly as written.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.diagnostics import energy, linear_momentum
from ..core.integrators import PairwiseLeapfrog
from ..core.run import run
from ..core.state import BodiesState


PI = 3.141592653589793
SOLAR_MASS = 4 * PI * PI
DAYS_PER_YEAR = 365.24


@dataclass(frozen=True, slots=True)
class NBodyConfig:
    steps: int = 500_000
    dt: float = 0.01
    offset_momentum: bool = True

    def validate(self) -> None:
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if not self.dt > 0.0:
            raise ValueError("dt must be > 0")


REFERENCE = NBodyConfig()


def jovian_system() -> BodiesState:
    """Return Sun, Jupiter, Saturn, Uranus, Neptune in AU, AU/year, G = 1."""
    pos = np.array(
        [
            [0.0, 0.0, 0.0],
            [
                4.84143144246472090e00,
                -1.16032004402742839e00,
                -1.03622044471123109e-01,
            ],
            [
                8.34336671824457987e00,
                4.12479856412430479e00,
                -4.03523417114321381e-01,
            ],
            [
                1.28943695621391310e01,
                -1.51111514016986312e01,
                -2.23307578892655734e-01,
            ],
            [
                1.53796971148509165e01,
                -2.59193146099879641e01,
                1.79258772950371181e-01,
            ],
        ],
        dtype=np.float64,
    )
    vel = np.array(
        [
            [0.0, 0.0, 0.0],
            [
                1.66007664274403694e-03 * DAYS_PER_YEAR,
                7.69901118419740425e-03 * DAYS_PER_YEAR,
                -6.90460016972063023e-05 * DAYS_PER_YEAR,
            ],
            [
                -2.76742510726862411e-03 * DAYS_PER_YEAR,
                4.99852801234917238e-03 * DAYS_PER_YEAR,
                2.30417297573763929e-05 * DAYS_PER_YEAR,
            ],
            [
                2.96460137564761618e-03 * DAYS_PER_YEAR,
                2.37847173959480950e-03 * DAYS_PER_YEAR,
                -2.96589568540237556e-05 * DAYS_PER_YEAR,
            ],
            [
                2.68067772490389322e-03 * DAYS_PER_YEAR,
                1.62824170038242295e-03 * DAYS_PER_YEAR,
                -9.51592254519715870e-05 * DAYS_PER_YEAR,
            ],
        ],
        dtype=np.float64,
    )
    mass = np.array(
        [
            SOLAR_MASS,
            9.54791938424326609e-04 * SOLAR_MASS,
            2.85885980666130812e-04 * SOLAR_MASS,
            4.36624404335156298e-05 * SOLAR_MASS,
            5.15138902046611451e-05 * SOLAR_MASS,
        ],
        dtype=np.float64,
    )
    return BodiesState(
        pos=pos,
        vel=vel,
        mass=mass,
        names=("sun", "jupiter", "saturn", "uranus", "neptune"),
    )


def offset_momentum(state: BodiesState, reference_mass: float = SOLAR_MASS) -> None:
    """Shift the velocity of body 0 so total linear momentum is zero."""
    if state.count == 0:
        raise ValueError("cannot offset momentum of an empty system")
    if reference_mass <= 0.0:
        raise ValueError("reference_mass must be > 0")
    p = linear_momentum(state)
    state.vel[0] -= p / reference_mass


def simulate(config: NBodyConfig = REFERENCE) -> tuple[float, float]:
    """Return (energy before, energy after) for one run of the workload."""
    config.validate()
    state = jovian_system()
    if config.offset_momentum:
        offset_momentum(state)
    e0 = energy(state)
    run(state, PairwiseLeapfrog(), config.dt, config.steps)
    return e0, energy(state)


def main() -> int:
    e0, e1 = simulate(REFERENCE)
    print(f"{e0:.9f}")
    print(f"{e1:.9f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
