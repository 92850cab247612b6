"""Forces and model utilities."""

from .base import ImpulseModel  # noqa: F401
from .nbody_gravity import PairwiseGravity  # noqa: F401
