"""State namespace."""

from .bodies import BodiesState  # noqa: F401
