"""Naive recursive Fibonacci: measures call overhead and integer adds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FibonacciConfig:
    n: int = 35

    def validate(self) -> None:
        if self.n < 0:
            raise ValueError("n must be >= 0")


REFERENCE = FibonacciConfig()


def fibonacci(n: int) -> int:
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def main() -> int:
    config = REFERENCE
    config.validate()
    print(f"fibonacci({config.n}) = {fibonacci(config.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
