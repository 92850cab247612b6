"""Diagnostics namespace."""

from .bodies import (  # noqa: F401
    energy,
    kinetic_energy,
    linear_momentum,
    potential_energy,
    total_mass,
)
