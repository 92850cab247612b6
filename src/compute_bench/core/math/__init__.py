"""Math utilities namespace."""

from .vector import norm, norm2, pair_displacements, pair_indices  # noqa: F401
