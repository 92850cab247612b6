from __future__ import annotations

import numpy as np
import pytest

from compute_bench.programs import bounds_check
from compute_bench.programs.bounds_check import (
    OUT_OF_RANGE,
    BoundsCheckConfig,
    make_array,
    safe_access,
    sum_array,
    total_sum,
)


SIZE = 10_000


def test_make_array_values() -> None:
    values = make_array(SIZE)
    assert values.dtype == np.int64
    assert values[0] == 1
    assert values[-1] == SIZE


@pytest.mark.parametrize("index", [-1, SIZE, SIZE + 5, -SIZE])
def test_out_of_range_returns_sentinel(index: int) -> None:
    values = make_array(SIZE)
    assert safe_access(values, SIZE, index) == OUT_OF_RANGE == -1


def test_in_range_access() -> None:
    values = make_array(SIZE)
    assert safe_access(values, SIZE, 0) == 1
    assert safe_access(values, SIZE, SIZE - 1) == SIZE


def test_declared_size_bounds_the_check() -> None:
    values = make_array(SIZE)
    assert safe_access(values, 10, 10) == -1
    assert sum_array(values, 10) == 55


def test_single_pass_sum() -> None:
    assert sum_array(make_array(SIZE), SIZE) == SIZE * (SIZE + 1) // 2 == 50005000


def test_total_sum_scales_with_iterations() -> None:
    assert total_sum(BoundsCheckConfig(size=SIZE, iterations=3)) == 3 * 50005000
    assert total_sum(BoundsCheckConfig(size=SIZE, iterations=0)) == 0


def test_config_validation() -> None:
    assert BoundsCheckConfig() == BoundsCheckConfig(size=10_000, iterations=1000)
    with pytest.raises(ValueError, match="size"):
        BoundsCheckConfig(size=0).validate()
    with pytest.raises(ValueError, match="iterations"):
        BoundsCheckConfig(iterations=-1).validate()


@pytest.mark.slow
def test_reference_output(capsys) -> None:
    assert bounds_check.main() == 0
    assert capsys.readouterr().out == "Sum: 50005000000\n"
