from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from outlier_engine import (
    AllMissingError,
    CriterionIsMissingWarning,
    InvalidCriterionKindError,
    InvalidInputKindError,
    MultipleCriterionValuesWarning,
    NegativeCriterionCorrectedWarning,
    OutlierError,
    detect_outliers,
)


def test_two_far_points_flagged_at_default_crit(tight_with_two_far, far_positions) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = detect_outliers(tight_with_two_far)

    assert result.index == far_positions
    assert result.value == [620.0, 630.0]
    assert result.crit == 4.0
    assert result.n_total == 100
    assert result.n_outliers == 2


def test_lower_crit_returns_superset(tight_with_two_far) -> None:
    at4 = set(detect_outliers(tight_with_two_far, 4).index)
    at3 = set(detect_outliers(tight_with_two_far, 3).index)
    at1 = set(detect_outliers(tight_with_two_far, 1).index)
    assert at4 <= at3 <= at1
    assert len(at1) > len(at4)


def test_values_match_input_positions(tight_with_two_far) -> None:
    result = detect_outliers(tight_with_two_far, 1)
    assert len(result.value) == len(result.index)
    for pos, val in zip(result.index, result.value):
        assert tight_with_two_far[pos] == val
    assert result.index == sorted(set(result.index))
    assert all(0 <= i < len(tight_with_two_far) for i in result.index)


def test_idempotent(small_sample) -> None:
    assert detect_outliers(small_sample, 3) == detect_outliers(small_sample, 3)


def test_crit_zero_flags_everything_off_the_median() -> None:
    result = detect_outliers([1, 2, 3, 4, 5], 0)
    assert result.index == [0, 1, 3, 4]


def test_zero_scale_flags_nothing() -> None:
    result = detect_outliers([5, 5, 5, 5, 100], 0)
    assert result.index == []
    assert result.scale == 0.0


def test_negative_crit_is_corrected(small_sample) -> None:
    with pytest.warns(NegativeCriterionCorrectedWarning):
        corrected = detect_outliers(small_sample, -3)
    assert corrected == detect_outliers(small_sample, 3)


def test_multiple_crit_values_use_first(small_sample) -> None:
    with pytest.warns(MultipleCriterionValuesWarning):
        first_only = detect_outliers(small_sample, [4, 2])
    assert first_only == detect_outliers(small_sample, 4)


def test_multiple_crit_values_from_array(small_sample) -> None:
    with pytest.warns(MultipleCriterionValuesWarning):
        result = detect_outliers(small_sample, np.array([4.0, 0.1]))
    assert result.crit == 4.0


@pytest.mark.parametrize("crit", [None, float("nan"), pd.NA])
def test_missing_crit_flags_nothing(small_sample, crit) -> None:
    with pytest.warns(CriterionIsMissingWarning):
        result = detect_outliers(small_sample, crit)
    assert result.index == []
    assert result.value == []
    assert result.crit is None
    assert result.center == 10.5


def test_multiple_then_missing_warns_twice(small_sample) -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = detect_outliers(small_sample, [None, 4])
    categories = [w.category for w in caught]
    assert categories == [MultipleCriterionValuesWarning, CriterionIsMissingWarning]
    assert result.index == []


def test_strings_rejected() -> None:
    with pytest.raises(InvalidInputKindError, match="x must be numeric"):
        detect_outliers(["a", "b", "c"])


@pytest.mark.parametrize(
    "x",
    [
        "abc",
        [True, False, True],
        np.array([True, False]),
        [1.0, "2", 3.0],
        [1 + 2j, 3.0],
        pd.Series(pd.date_range("2024-01-01", periods=3)),
        np.ones((2, 2)),
        {"a": 1},
    ],
)
def test_non_numeric_inputs_rejected(x) -> None:
    with pytest.raises(InvalidInputKindError):
        detect_outliers(x)


@pytest.mark.parametrize("x", [[None, None, None], [np.nan, np.nan, np.nan], [pd.NA, None, np.nan], []])
def test_all_missing_rejected(x) -> None:
    with pytest.raises(AllMissingError, match="x values are all NA"):
        detect_outliers(x)


@pytest.mark.parametrize("crit", ["4", [], {"crit": 4}, [4, "2"], True])
def test_non_numeric_crit_rejected(small_sample, crit) -> None:
    with pytest.raises(InvalidCriterionKindError, match="crit must be numeric"):
        detect_outliers(small_sample, crit)


def test_validation_order() -> None:
    with pytest.raises(InvalidInputKindError):
        detect_outliers(["a"], "b")
    with pytest.raises(AllMissingError):
        detect_outliers([None], "b")


def test_fatal_errors_share_base_class() -> None:
    with pytest.raises(OutlierError) as exc_info:
        detect_outliers(["a"])
    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.suggestion


def test_missing_values_block_detection_unless_dropped() -> None:
    x = [10, 11, 9, 10, 12, None, 200, 10, 11]

    kept = detect_outliers(x)
    assert kept.index == []
    assert kept.center is None
    assert kept.scale is None

    dropped = detect_outliers(x, drop_missing=True)
    assert dropped.index == [6]
    assert dropped.value == [200.0]
    assert dropped.center == 10.5


def test_nullable_pandas_series() -> None:
    s = pd.Series([10, 11, 9, pd.NA, 10, 12, 200], dtype="Int64")
    result = detect_outliers(s, drop_missing=True)
    assert result.index == [6]


def test_numpy_input_not_mutated() -> None:
    data = np.array([10.0, 11.0, np.nan, 9.0, 200.0])
    before = data.copy()
    detect_outliers(data, drop_missing=True)
    np.testing.assert_array_equal(data, before)


def test_single_number_is_a_sequence_of_one() -> None:
    result = detect_outliers(7)
    assert result.n_total == 1
    assert result.index == []


def test_result_is_frozen(small_sample) -> None:
    result = detect_outliers(small_sample)
    with pytest.raises(ValidationError):
        result.index = [0]


def test_integer_too_large_for_float_rejected() -> None:
    with pytest.raises(InvalidInputKindError, match="x must be numeric"):
        detect_outliers([1, 2, 3, 10**400])


def test_crit_too_large_for_float_rejected(small_sample) -> None:
    with pytest.raises(InvalidCriterionKindError, match="crit must be numeric"):
        detect_outliers(small_sample, 10**400)


def test_large_integers_compared_as_floats() -> None:
    # 2**60 + 1 and 2**60 + 3 both round to 2**60 in float64
    x = [2**60 + 1, 2**60 + 1, 2**60 + 1, 2**60 + 3, 2**62 + 1]
    result = detect_outliers(x, 0)
    assert result.scale == 0.0
    assert result.index == []


@pytest.mark.parametrize("x", [{1.0, 2.0, 300.0}, frozenset([1.0, 2.0]), {"a": 1, "b": 2}.keys()])
def test_unordered_containers_rejected(x) -> None:
    with pytest.raises(InvalidInputKindError):
        detect_outliers(x)
