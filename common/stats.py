"""
Descriptive statistics over a sequence of integer observations.

This module provides explicit, testable replacements for the grouping and
counting helpers a chart library would otherwise hide:
    - `calculate_mean`, `calculate_median`,
    - `calculate_mode` (display text via `FieldStatistics.mode_label`),
    - `calculate_quartiles` (index-based, see below),
    - `frequency_distribution`,
    - `describe`, which bundles the above into a `FieldStatistics`.

Function notes:
    - Inputs may be lists, tuples, numpy arrays or pandas Series. They are
        copied before sorting; the caller's data is never reordered.
    - Every function raises `EmptyInputError` on an empty sequence because
        sorting/indexing an empty array has no meaningful answer.
    - Non-integer input (fractions, NaN, text) raises `DataValidationError`;
        whole-valued floats such as 2.0 are accepted.
    - Quartiles use the index method: Q1 is the element at floor(n * 0.25)
        of the sorted data and Q3 the element at floor(n * 0.75). There is
        no interpolation, and the median element is part of the data that
        is indexed.
"""

#Import libraries
from __future__ import annotations
from typing import Dict, Iterable, Tuple
import numpy as np

from common.errors import DataValidationError, EmptyInputError
from models.analysis_model import FieldStatistics


def _as_array(values: Iterable[int]) -> np.ndarray:
    """Copy `values` into a 1-D integer array; raise on empty or non-integer input."""
    if not isinstance(values, np.ndarray) and not hasattr(values, "to_numpy"):
        values = list(values)
    arr = np.array(values).ravel()  # np.array copies by default
    if arr.size == 0:
        raise EmptyInputError("cannot compute statistics over an empty sequence")
    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(np.int64)
    # whole-valued floats (e.g. 2.0) are accepted; anything else is rejected
    if not np.issubdtype(arr.dtype, np.floating) or not np.all(np.isfinite(arr) & (arr == np.floor(arr))):
        raise DataValidationError(f"expected whole-number observations, got dtype {arr.dtype}: {arr[:5].tolist()}")
    return arr.astype(np.int64)


def calculate_mean(values: Iterable[int]) -> float:
    return float(_as_array(values).mean())


def calculate_median(values: Iterable[int]) -> float:
    """Middle element for odd counts; average of the two central ones otherwise."""
    arr = np.sort(_as_array(values))
    n = arr.size
    mid = n // 2
    if n % 2 == 0:
        return (float(arr[mid - 1]) + float(arr[mid])) / 2.0
    return float(arr[mid])


def _counts(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    # np.unique returns the distinct values already sorted ascending
    return np.unique(arr, return_counts=True)


def calculate_mode(values: Iterable[int]) -> Tuple[int, ...]:
    """
    Return every value tied at the highest frequency, ascending.

    When the tie covers as many values as there are observations (every
    value appears once) the result is the empty tuple, meaning "no mode".
    """
    arr = _as_array(values)
    uniq, counts = _counts(arr)
    modes = uniq[counts == counts.max()]
    if modes.size == arr.size:
        return ()
    return tuple(int(m) for m in modes)


def calculate_quartiles(values: Iterable[int]) -> Tuple[int, int]:
    """Return (Q1, Q3) by direct index into the sorted data."""
    arr = np.sort(_as_array(values))
    n = arr.size
    # n // 4 == floor(n * 0.25) and (3 * n) // 4 == floor(n * 0.75) for n >= 0
    return int(arr[n // 4]), int(arr[(3 * n) // 4])


def frequency_distribution(values: Iterable[int]) -> Dict[int, int]:
    uniq, counts = _counts(_as_array(values))
    return {int(v): int(c) for v, c in zip(uniq, counts)}


def describe(values: Iterable[int]) -> FieldStatistics:
    arr = _as_array(values)
    q1, q3 = calculate_quartiles(arr)
    return FieldStatistics(
        mean=calculate_mean(arr),
        median=calculate_median(arr),
        modes=calculate_mode(arr),
        q1=q1,
        q3=q3,
    )
