"""Bounds check benchmark: sum an array through a range-checked accessor."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


OUT_OF_RANGE = -1


@dataclass(frozen=True, slots=True)
class BoundsCheckConfig:
    size: int = 10_000
    iterations: int = 1000

    def validate(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be > 0")
        if self.iterations < 0:
            raise ValueError("iterations must be >= 0")


REFERENCE = BoundsCheckConfig()


def make_array(size: int) -> NDArray[np.int64]:
    """Return the values 1..size."""
    if size < 0:
        raise ValueError("size must be >= 0")
    return np.arange(1, size + 1, dtype=np.int64)


def safe_access(values: NDArray[np.int64], size: int, index: int) -> int:
    """Return values[index], or -1 when index is outside [0, size)."""
    if index < 0 or index >= size:
        return OUT_OF_RANGE
    return int(values[index])


def sum_array(values: NDArray[np.int64], size: int) -> int:
    total = 0
    for i in range(size):
        total += safe_access(values, size, i)
    return total


def total_sum(config: BoundsCheckConfig = REFERENCE) -> int:
    config.validate()
    values = make_array(config.size)
    total = 0
    for _ in range(config.iterations):
        total += sum_array(values, config.size)
    return total


def main() -> int:
    print(f"Sum: {total_sum(REFERENCE)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
