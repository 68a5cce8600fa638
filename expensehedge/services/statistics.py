"""Percentiles and summary statistics over simulated outcomes."""

import math
from typing import Sequence

import numpy as np

from expensehedge.models.statistics import SampleStatistics


class EmptySampleError(ValueError):
    """Raised when statistics are requested for an empty sample."""


def _as_sorted_array(samples: Sequence[float]) -> np.ndarray:
    if len(samples) == 0:
        raise EmptySampleError("Cannot calculate statistics for an empty sample")
    # np.sort returns a copy; the caller's sequence is never reordered
    return np.sort(np.asarray(samples, dtype=float))


def _interpolate(ordered: np.ndarray, p: float) -> float:
    index = (p / 100) * (len(ordered) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)

    if lower == upper:
        return float(ordered[lower])

    weight = index - lower
    return float(ordered[lower] + (ordered[upper] - ordered[lower]) * weight)


def percentile(samples: Sequence[float], p: float) -> float:
    """Value at percentile ``p`` (0-100), linearly interpolating between order statistics."""
    return _interpolate(_as_sorted_array(samples), p)


def calculate_stats(samples: Sequence[float]) -> SampleStatistics:
    """Calculate mean, median, 10% worst case and probability of a positive outcome.

    Raises:
        EmptySampleError: if ``samples`` is empty.
    """
    ordered = _as_sorted_array(samples)

    # Shifting by the minimum keeps the mean of a constant sample exact
    shift = ordered[0]
    mean = float(shift + np.mean(ordered - shift))

    return SampleStatistics(
        mean=mean,
        median=_interpolate(ordered, 50),
        worst_case_10=_interpolate(ordered, 10),
        probability_positive=float(np.count_nonzero(ordered > 0) / len(ordered)),
    )
