"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Stats.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    NORMAL = "Normal"
    EXPONENTIAL = "Exponential"
    POISSON = "Poisson"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type ProbabilityOfTypeIError = float
"""A probability of rejecting a null hypothesis when it is true."""


@dataclass(frozen=True, slots=True)
class Interval:
    """
    1D interval of distribution values with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).

    Examples
    --------
    >>> Interval(0, 1)  # [0, 1]
    Interval(left=0, right=1, left_closed=True, right_closed=True)
    >>> Interval(0, 1, right_closed=False).contains(1)  # [0, 1)
    False
    """

    left: Number = -inf
    right: Number = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))


__all__ = [
    "Kind",
    "FamilyName",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "ProbabilityOfTypeIError",
    "Interval",
]
