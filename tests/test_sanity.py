from __future__ import annotations


def test_sanity_import() -> None:
    import compute_bench as cb
    import numpy as np

    assert isinstance(cb.__version__, str)
    assert np.add(1.0, 2.0) == 3.0
