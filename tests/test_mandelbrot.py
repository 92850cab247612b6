from __future__ import annotations

import pytest

from compute_bench.programs import mandelbrot
from compute_bench.programs.mandelbrot import (
    MandelbrotConfig,
    count_inside,
    escape_iterations,
)


@pytest.mark.parametrize(
    ("x0", "y0", "expected"),
    [
        (0.0, 0.0, 50),
        (-2.0, 0.0, 50),
        (-1.0, 0.0, 50),
        (-2.0, -2.0, 1),
        (0.0, -2.0, 2),
        (1.0, 0.0, 3),
    ],
)
def test_escape_iterations(x0: float, y0: float, expected: int) -> None:
    assert escape_iterations(x0, y0, 50) == expected


def test_two_by_two_grid() -> None:
    # samples (-2, -2), (0, -2), (-2, 0), (0, 0); the last two stay bounded
    assert count_inside(MandelbrotConfig(size=2)) == 2


def test_count_never_exceeds_grid() -> None:
    config = MandelbrotConfig(size=20, max_iter=10)
    assert 0 < count_inside(config) < 20 * 20


def test_more_iterations_never_adds_points() -> None:
    loose = count_inside(MandelbrotConfig(size=40, max_iter=5))
    tight = count_inside(MandelbrotConfig(size=40, max_iter=50))
    assert tight <= loose


def test_config_validation() -> None:
    with pytest.raises(ValueError, match="size"):
        MandelbrotConfig(size=0).validate()
    with pytest.raises(ValueError, match="max_iter"):
        MandelbrotConfig(max_iter=0).validate()


@pytest.mark.slow
def test_reference_output_is_a_count(capsys) -> None:
    assert mandelbrot.main() == 0
    out = capsys.readouterr().out.strip()
    assert out.isdigit()
    # the set covers about 1.51 of the 16 square units sampled
    assert 3000 < int(out) < 5000
