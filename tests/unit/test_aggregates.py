from unittest.mock import patch

import numpy as np
import pytest

from approximately.aggregates import approx_eq_fraction, approx_eq_seq, approx_eq_set, matching_fraction
from approximately.config import MatchStrategy, ToleranceConfig


def test_approx_eq_seq_pairwise():
    assert approx_eq_seq([1.0, 2.0, 3.0], [1.0001, 1.999, 3.0002], 1e-3)
    assert approx_eq_seq([1.0, 2.0, 3.0], [1.0001, 2.1, 3.0002], 1e-3) is False


def test_approx_eq_seq_order_matters():
    assert approx_eq_seq([1.0, 2.0], [2.0, 1.0], 1e-3) is False


def test_approx_eq_seq_length_mismatch():
    assert approx_eq_seq([1.0, 2.0], [1.0, 2.0, 3.0]) is False


def test_approx_eq_seq_empty():
    assert approx_eq_seq([], [])
    assert approx_eq_seq((), [], 0.0)


def test_approx_eq_seq_default_tolerance_per_element():
    a = [np.float32(1.0), 1.0]
    assert approx_eq_seq(a, [np.float32(1.0005), 1.0000005])
    assert approx_eq_seq(a, [np.float32(1.0005), 1.0005]) is False


def test_approx_eq_seq_numpy_arrays():
    a = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    b = np.array([1.0005, 2.0005, 2.9995], dtype=np.float32)
    assert approx_eq_seq(a, b)
    assert approx_eq_seq(a, b[::-1]) is False


def test_approx_eq_seq_negative_tol():
    assert approx_eq_seq([1.0], [1.0], -1.0) is False


def test_approx_eq_set_order_independent():
    a = {np.float32(1.0), np.float32(2.0), np.float32(3.0)}
    b = {np.float32(3.0001), np.float32(0.999), np.float32(2.0002)}
    assert approx_eq_set(a, b, 1e-3)


def test_approx_eq_set_double_values():
    assert approx_eq_set({1.0, 2.0, 3.0}, {3.0001, 0.9991, 2.0002}, 1e-3)
    assert approx_eq_set([1.0, 2.0, 3.0], [3.0001, 0.9, 2.0002], 1e-3) is False


def test_approx_eq_set_double_values_at_tolerance_edge():
    # 1.0 - 0.999 is 1.0000000000000009e-3 in binary64, just past the tolerance
    assert approx_eq_set({1.0, 2.0, 3.0}, {3.0001, 0.999, 2.0002}, 1e-3) is False
    assert approx_eq_set({1.0, 2.0, 3.0}, {3.0001, 0.999, 2.0002}, 1.001e-3)


def test_approx_eq_set_size_mismatch():
    assert approx_eq_set({1.0, 2.0}, {1.0, 2.0, 3.0}, 1e-3) is False


def test_approx_eq_set_size_mismatch_skips_pairing():
    with patch("approximately.aggregates.is_perfect_matching") as mock_matching:
        assert approx_eq_set([1.0, 2.0], [1.0, 2.0, 3.0], 1e-3) is False
        mock_matching.assert_not_called()


def test_approx_eq_set_empty():
    assert approx_eq_set(set(), frozenset())


def test_approx_eq_set_duplicates_need_distinct_partners():
    assert approx_eq_set([1.0, 1.0, 2.0], [1.0, 2.0, 2.0], 1e-3) is False
    assert approx_eq_set([1.0, 1.0, 2.0], [2.0, 1.0, 1.0], 1e-3)


def test_approx_eq_set_infinities_and_nan():
    inf = float("inf")
    assert approx_eq_set([inf, 1.0], [1.0, inf])
    assert approx_eq_set([-inf, inf], [inf, -inf])
    assert approx_eq_set([float("nan")], [float("nan")], 1.0) is False


def test_approx_eq_set_overlapping_windows():
    # Greedy pairs 0.75 with 0.5 first and strands 0.0; an exact matching exists
    a = [0.0, 0.75]
    b = [0.5, 1.25]
    assert approx_eq_set(a, b, 0.5)
    assert approx_eq_set(a, b, 0.5, config=ToleranceConfig(set_strategy=MatchStrategy.EXACT))
    assert approx_eq_set(a, b, 0.5, config=ToleranceConfig(set_strategy=MatchStrategy.GREEDY)) is False


def test_approx_eq_set_numpy_arrays():
    a = np.array([0.1, 0.2, 0.3])
    b = np.array([0.3, 0.1, 0.2])
    assert approx_eq_set(a, b)


def test_matching_fraction():
    assert matching_fraction([1, 2, 3, 4, 5], [1, 2, 3, 4, 6]) == pytest.approx(0.8)
    assert matching_fraction([1, 2, 3], [1, 2, 3, 4]) == pytest.approx(0.75)
    assert matching_fraction([], []) == 1.0


def test_approx_eq_fraction():
    assert approx_eq_fraction([1, 2, 3, 4, 5], [1, 2, 3, 4, 6])
    assert approx_eq_fraction([1, 2, 3, 4, 5], [1, 2, 3, 5, 6]) is False
    assert approx_eq_fraction([1.0, 2.0], [1.05, 3.0], min_fraction=0.5, tol=0.1)
    assert approx_eq_fraction([1.0], [2.0], min_fraction=0)
    assert approx_eq_fraction([1.0], [1.0], min_fraction=1.5) is False
