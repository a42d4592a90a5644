"""
Euclidean Metric
================

Distance functions over real and complex numbers, used by the sample
statistics to measure deviations from a mean.

The distance between two values is the length of the line segment between
them, so it satisfies the metric space laws: it is zero only between equal
values, symmetric, and obeys the triangle inequality.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import overload

import numpy as np
import numpy.typing as npt


@overload
def distance(lhs: complex, rhs: complex) -> float: ...
@overload
def distance(lhs: npt.ArrayLike, rhs: npt.ArrayLike) -> npt.NDArray[np.floating]: ...


def distance(lhs, rhs):  # type: ignore[no-untyped-def]
    """
    Euclidean distance between two values.

    Parameters
    ----------
    lhs, rhs : complex or array_like
        Real or complex values (or arrays of them, broadcast together).

    Returns
    -------
    float or numpy.ndarray
        ``|lhs - rhs|``.
    """
    result = np.abs(np.subtract(lhs, rhs))
    if np.ndim(result) == 0:
        return float(result)
    return result


@overload
def squared_distance(lhs: complex, rhs: complex) -> float: ...
@overload
def squared_distance(lhs: npt.ArrayLike, rhs: npt.ArrayLike) -> npt.NDArray[np.floating]: ...


def squared_distance(lhs, rhs):  # type: ignore[no-untyped-def]
    """
    Squared Euclidean distance between two values.

    Computed from the real and imaginary parts directly, without taking a
    square root first.
    """
    diff = np.subtract(lhs, rhs)
    result = np.real(diff) ** 2 + np.imag(diff) ** 2
    if np.ndim(result) == 0:
        return float(result)
    return result


__all__ = ["distance", "squared_distance"]
