"""
Sample Statistics
=================

Reductions over samples of real or complex numbers: sum, mean, squared
deviations from the mean, population and sample variance.

Integer samples are promoted to floating point, so the mean and the
variances of an integer sample are floats. Deviations are measured with the
Euclidean distance (:mod:`pysatl_stats.metric`), so the variance of a complex
sample is real.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_stats.metric import squared_distance

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy.typing as npt


def _as_array(data: Iterable[Any] | npt.ArrayLike) -> npt.NDArray[Any]:
    arr = np.asarray(list(data) if not isinstance(data, np.ndarray) else data)
    if arr.ndim != 1:
        raise ValueError(f"Sample must be one-dimensional, got shape {arr.shape}")
    if arr.dtype.kind in "biu":
        arr = arr.astype(np.float64)
    return arr


def total(data: Iterable[Any] | npt.ArrayLike) -> Any:
    """
    Sum of all the elements of the sample.

    Returns 0.0 for an empty sample.
    """
    return np.sum(_as_array(data)).item()


def mean(data: Iterable[Any] | npt.ArrayLike) -> Any:
    """
    Arithmetic mean of the sample.

    Raises
    ------
    ValueError
        If the sample is empty.
    """
    arr = _as_array(data)
    if arr.size == 0:
        raise ValueError("Mean of an empty sample is undefined")
    return (np.sum(arr) / arr.size).item()


def squared_deviations(data: Iterable[Any] | npt.ArrayLike) -> npt.NDArray[np.floating[Any]]:
    """
    Squared Euclidean distances from each element to the sample mean.

    An empty sample has no mean, but is accepted and gives an empty array.
    """
    arr = _as_array(data)
    if arr.size == 0:
        return np.empty(0, dtype=np.float64)
    return np.asarray(squared_distance(arr, np.sum(arr) / arr.size), dtype=np.float64)


def _variance(arr: npt.NDArray[Any], denominator: int) -> float:
    return float(np.sum(squared_deviations(arr)) / denominator)


def population_variance(data: Iterable[Any] | npt.ArrayLike) -> float:
    """
    Population variance, the mean squared deviation from the mean.

    Raises
    ------
    ValueError
        If the sample is empty.
    """
    arr = _as_array(data)
    if arr.size == 0:
        raise ValueError("Population variance of an empty sample is undefined")
    return _variance(arr, arr.size)


def sample_variance(data: Iterable[Any] | npt.ArrayLike) -> float:
    """
    Unbiased sample variance, with ``n - 1`` in the denominator.

    The sample variance is slightly greater than the population variance and
    better estimates the variance of the distribution the values were drawn
    from.

    Raises
    ------
    ValueError
        If the sample has fewer than 2 elements.
    """
    arr = _as_array(data)
    if arr.size < 2:
        raise ValueError(f"Sample variance requires at least 2 elements, got {arr.size}")
    return _variance(arr, arr.size - 1)


def difference_of_means(pairs: Iterable[tuple[Any, Any]]) -> Any:
    """
    Difference between the means of two paired datasets.

    Parameters
    ----------
    pairs : Iterable[tuple]
        Pairs ``(x_i, y_i)``.

    Returns
    -------
    Any
        ``mean(x) - mean(y)``.

    Raises
    ------
    ValueError
        If there are no pairs.
    """
    materialized = list(pairs)
    if not materialized:
        raise ValueError("Difference of means of an empty dataset is undefined")
    xs, ys = zip(*materialized, strict=True)
    return mean(xs) - mean(ys)


__all__ = [
    "total",
    "mean",
    "squared_deviations",
    "population_variance",
    "sample_variance",
    "difference_of_means",
]
