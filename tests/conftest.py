import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def tight_with_two_far() -> list:
    """98 values spread evenly over [24, 26] with two values near 625."""
    values = list(np.linspace(24.0, 26.0, 98))
    values.insert(17, 620.0)
    values.insert(64, 630.0)
    return values


@pytest.fixture
def far_positions() -> list:
    return [17, 64]


@pytest.fixture
def small_sample() -> list:
    return [10, 11, 9, 10, 12, 200, 10, 11]


@pytest.fixture
def frame(tight_with_two_far) -> pd.DataFrame:
    n = len(tight_with_two_far)
    return pd.DataFrame(
        {
            "load": tight_with_two_far,
            "constant": [5.0] * n,
            "label": [f"row{i}" for i in range(n)],
            "ok": [True] * n,
        },
        index=[f"r{i}" for i in range(n)],
    )
