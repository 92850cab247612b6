"""Spectral norm benchmark: power iteration on the infinite matrix A.

``A[i, j] = 1 / ((i + j) * (i + j + 1) / 2 + i + 1)`` with integer
division, truncated to ``n x n``. The printed value approximates the
largest singular value of A.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class SpectralNormConfig:
    n: int = 100
    iterations: int = 10

    def validate(self) -> None:
        if self.n <= 0:
            raise ValueError("n must be > 0")
        if self.iterations <= 0:
            raise ValueError("iterations must be > 0")


REFERENCE = SpectralNormConfig()


def matrix_a(n: int) -> ArrayF:
    i, j = np.indices((n, n), dtype=np.int64)
    return 1.0 / ((i + j) * (i + j + 1) // 2 + i + 1)


def multiply_atav(a: ArrayF, v: ArrayF) -> ArrayF:
    """Return A^T (A v)."""
    return a.T @ (a @ v)


def spectral_norm(config: SpectralNormConfig = REFERENCE) -> float:
    config.validate()
    a = matrix_a(config.n)
    u = np.ones(config.n, dtype=np.float64)
    v = np.zeros(config.n, dtype=np.float64)
    for _ in range(config.iterations):
        v = multiply_atav(a, u)
        u = multiply_atav(a, v)
    return float(np.sqrt(np.dot(u, v) / np.dot(v, v)))


def main() -> int:
    print(f"{spectral_norm(REFERENCE):.9f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
