from __future__ import annotations

import pytest

from compute_bench.programs import fibonacci
from compute_bench.programs.fibonacci import FibonacciConfig


@pytest.mark.parametrize(
    ("n", "expected"),
    [(0, 0), (1, 1), (2, 1), (10, 55), (20, 6765)],
)
def test_fibonacci_values(n: int, expected: int) -> None:
    assert fibonacci.fibonacci(n) == expected


def test_negative_input_returns_input() -> None:
    assert fibonacci.fibonacci(-3) == -3


def test_config_validation() -> None:
    assert FibonacciConfig().n == 35
    with pytest.raises(ValueError, match="n must be"):
        FibonacciConfig(n=-1).validate()


@pytest.mark.slow
def test_reference_output(capsys) -> None:
    assert fibonacci.main() == 0
    assert capsys.readouterr().out == "fibonacci(35) = 9227465\n"
