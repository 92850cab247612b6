"""Integrator interfaces and implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..forces.base import ImpulseModel
from ..forces.nbody_gravity import PairwiseGravity
from ..state.bodies import BodiesState


class Integrator(Protocol):
    def step(self, state: BodiesState, dt: float) -> None:
        """Advance state by one fixed step (mutating)."""


@dataclass(slots=True)
class PairwiseLeapfrog:
    """Kick every velocity from the pair forces, then drift every position.

    All velocity updates are applied before any position moves; the
    drift uses the freshly kicked velocities.
    """

    model: ImpulseModel = field(default_factory=PairwiseGravity)

    def step(self, state: BodiesState, dt: float) -> None:
        self.model.kick(state, dt)
        state.pos += dt * state.vel


_DEFAULT = PairwiseLeapfrog()


def advance(state: BodiesState, dt: float) -> None:
    """Advance ``state`` by one pairwise leapfrog step of size ``dt``."""
    _DEFAULT.step(state, dt)
