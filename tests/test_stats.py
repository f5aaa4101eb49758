"""Unit tests for the descriptive statistics engine (common/stats.py)."""

import numpy as np
import pandas as pd
import pytest

from common.errors import DataValidationError, EmptyInputError
from common.stats import (
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_quartiles,
    describe,
    frequency_distribution,
)


def _random_sequences(count: int = 200, seed: int = 7):
    rng = np.random.default_rng(seed)
    for _ in range(count):
        n = int(rng.integers(1, 40))
        yield rng.integers(0, 9, size=n).tolist()


class TestMean:
    def test_simple(self) -> None:
        assert calculate_mean([2, 0, 1]) == pytest.approx(1.0)

    def test_fractional(self) -> None:
        assert calculate_mean([1, 2]) == pytest.approx(1.5)

    def test_accepts_series(self) -> None:
        assert calculate_mean(pd.Series([3, 4, 5])) == pytest.approx(4.0)


class TestMedian:
    def test_even_count_averages_central_pair(self) -> None:
        assert calculate_median([0, 1, 2, 3]) == 1.5

    def test_odd_count_takes_middle(self) -> None:
        assert calculate_median([0, 1, 2]) == 1

    def test_unsorted_input(self) -> None:
        assert calculate_median([3, 0, 2, 1]) == 1.5

    def test_single_value(self) -> None:
        assert calculate_median([4]) == 4


class TestMode:
    def test_single_mode(self) -> None:
        assert calculate_mode([0, 1, 1, 2, 2, 2]) == (2,)
        assert describe([0, 1, 1, 2, 2, 2]).mode_label == "2"

    def test_all_unique_is_no_mode(self) -> None:
        assert calculate_mode([0, 1, 2]) == ()
        stats = describe([0, 1, 2])
        assert not stats.has_mode
        assert stats.mode_label == "No mode"

    def test_partial_tie_lists_all_tied_values(self) -> None:
        assert calculate_mode([1, 1, 2, 2]) == (1, 2)
        assert describe([1, 1, 2, 2]).mode_label == "1, 2"

    def test_tie_order_is_ascending(self) -> None:
        assert calculate_mode([5, 5, 3, 3, 4]) == (3, 5)

    def test_single_observation_is_no_mode(self) -> None:
        # one value, one distinct value: the tie covers every observation
        assert calculate_mode([3]) == ()


class TestQuartiles:
    FIXED_VECTOR = [5, 1, 4, 2, 0, 3, 2, 1]  # sorted: 0 1 1 2 2 3 4 5

    def test_fixed_vector(self) -> None:
        assert calculate_quartiles(self.FIXED_VECTOR) == (1, 4)

    def test_fixed_vector_is_deterministic_and_not_mutated(self) -> None:
        data = list(self.FIXED_VECTOR)
        results = {calculate_quartiles(data) for _ in range(5)}
        assert results == {(1, 4)}
        assert data == self.FIXED_VECTOR

    def test_small_inputs(self) -> None:
        assert calculate_quartiles([7]) == (7, 7)
        assert calculate_quartiles([1, 9]) == (1, 9)
        assert calculate_quartiles([0, 1, 2]) == (0, 2)

    def test_q1_le_median_le_q3(self) -> None:
        for seq in _random_sequences():
            q1, q3 = calculate_quartiles(seq)
            assert q1 <= calculate_median(seq) <= q3, seq


class TestFrequencyDistribution:
    def test_counts(self) -> None:
        assert frequency_distribution([2, 0, 2, 1, 2]) == {0: 1, 1: 1, 2: 3}

    def test_keys_are_plain_ints(self) -> None:
        freq = frequency_distribution(np.array([1, 1, 3]))
        assert all(type(k) is int and type(v) is int for k, v in freq.items())

    def test_counts_sum_to_length(self) -> None:
        for seq in _random_sequences():
            assert sum(frequency_distribution(seq).values()) == len(seq)


class TestDescribe:
    def test_field_statistics(self) -> None:
        stats = describe([0, 0, 1, 1, 1, 2, 2, 4, 4, 5])
        assert stats.mean == pytest.approx(2.0)
        assert stats.median == 1.5
        assert stats.modes == (1,)
        assert (stats.q1, stats.q3) == (1, 4)
        assert stats.iqr == 3

    def test_does_not_reorder_caller_list(self) -> None:
        data = [3, 1, 2]
        describe(data)
        assert data == [3, 1, 2]


class TestEmptyInput:
    @pytest.mark.parametrize(
        "func",
        [calculate_mean, calculate_median, calculate_mode, calculate_quartiles,
         frequency_distribution, describe],
    )
    def test_raises_empty_input_error(self, func) -> None:
        with pytest.raises(EmptyInputError):
            func([])

    def test_empty_series(self) -> None:
        with pytest.raises(EmptyInputError):
            describe(pd.Series([], dtype="int64"))


class TestNonIntegerInput:
    @pytest.mark.parametrize("values", [[1.5], [0, 2, 2.25], [1, float("nan")], ["two"]])
    def test_rejected(self, values) -> None:
        with pytest.raises(DataValidationError, match="whole-number"):
            describe(values)

    def test_fraction_is_not_truncated(self) -> None:
        with pytest.raises(DataValidationError):
            calculate_mean([1.5, 2.5])

    def test_whole_valued_floats_are_accepted(self) -> None:
        assert calculate_mode(np.array([1.0, 2.0, 2.0])) == (2,)
        assert frequency_distribution(pd.Series([3.0, 3.0])) == {3: 2}
