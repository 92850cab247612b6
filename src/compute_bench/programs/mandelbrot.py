"""Mandelbrot benchmark: count grid points that never escape.

The grid covers [-2, 2) x [-2, 2) with ``size`` samples per axis. A point
is counted when ``max_iter`` iterations of ``z = z**2 + c`` keep
``|z|**2 <= 4``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MandelbrotConfig:
    size: int = 200
    max_iter: int = 50

    def validate(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be > 0")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")


REFERENCE = MandelbrotConfig()


def escape_iterations(x0: float, y0: float, max_iter: int) -> int:
    """Return the number of iterations run before |z|**2 exceeds 4."""
    x = 0.0
    y = 0.0
    iteration = 0
    while x * x + y * y <= 4.0 and iteration < max_iter:
        xtemp = x * x - y * y + x0
        y = 2.0 * x * y + y0
        x = xtemp
        iteration += 1
    return iteration


def count_inside(config: MandelbrotConfig = REFERENCE) -> int:
    config.validate()
    size = config.size
    inside = 0
    for py in range(size):
        y0 = py * 4.0 / size - 2.0
        for px in range(size):
            x0 = px * 4.0 / size - 2.0
            if escape_iterations(x0, y0, config.max_iter) == config.max_iter:
                inside += 1
    return inside


def main() -> int:
    print(count_inside(REFERENCE))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
