"""
Exponential distribution family implementation.

Contains the Exponential family parametrized by its rate.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import cast, overload

import numpy as np

from pysatl_stats.distributions.continuous import ContinuousDistribution
from pysatl_stats.distributions.modality import Unimodal
from pysatl_stats.distributions.moments import Moments, check_moment_order
from pysatl_stats.distributions.quantile import ClosedFormQuantile, check_probability
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametric_family,
)
from pysatl_stats.types import FamilyName, NumericArray


@parametric_family(FamilyName.EXPONENTIAL)
class Exponential(
    Parametrization,
    ContinuousDistribution[float],
    Moments[float, float],
    ClosedFormQuantile[float, float],
    Unimodal[float, float],
):
    """
    Exponential distribution.

    In a process where independent events occur at a constant rate, the
    time between events follows this distribution.

    Probability density function:
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Parameters
    ----------
    rate : float
        Rate parameter (λ) of the distribution.

    Notes
    -----
    Sampling uses the inherited inverse transform sampler,
    ``-ln(1 - U) / λ``.
    """

    rate: float

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.rate > 0

    @property
    def is_symmetric(self) -> bool:
        return False

    @overload
    def probability_density(self, value: float) -> float: ...
    @overload
    def probability_density(self, value: NumericArray) -> NumericArray: ...

    def probability_density(self, value: float | NumericArray) -> float | NumericArray:
        """Density ``λ exp(-λx)`` on ``x >= 0`` and 0 elsewhere; accepts arrays."""
        arr = np.asarray(value, dtype=float)
        with np.errstate(over="ignore"):
            density = np.where(arr >= 0, self.rate * np.exp(-self.rate * arr), 0.0)
        if np.ndim(arr) == 0:
            return float(density)
        return cast(NumericArray, density)

    @overload
    def probability_of_at_most(self, value: float) -> float: ...
    @overload
    def probability_of_at_most(self, value: NumericArray) -> NumericArray: ...

    def probability_of_at_most(self, value: float | NumericArray) -> float | NumericArray:
        """CDF ``1 - exp(-λx)`` on ``x > 0`` and 0 elsewhere; accepts arrays."""
        arr = np.asarray(value, dtype=float)
        with np.errstate(over="ignore"):
            probability = np.where(arr > 0, -np.expm1(-self.rate * arr), 0.0)
        if np.ndim(arr) == 0:
            return float(probability)
        return cast(NumericArray, probability)

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def variance(self) -> float:
        return 1.0 / (self.rate * self.rate)

    @property
    def standard_deviation(self) -> float:
        return 1.0 / self.rate

    @property
    def skewness(self) -> float:
        """Skewness of exponential distribution (always 2)."""
        return 2.0

    def kurtosis(self, excess: bool = False) -> float:
        """Raw (9) or excess (6) kurtosis of exponential distribution."""
        return 6.0 if excess else 9.0

    def moment_generating_function(self, t: int) -> float:
        """
        MGF ``λ / (λ - t)``.

        Raises
        ------
        ValueError
            If ``t`` is negative or ``t >= rate`` (the MGF diverges there).
        """
        check_moment_order(t)
        if t >= self.rate:
            raise ValueError(
                f"Moment-generating function argument must be less than rate {self.rate}, got {t}"
            )
        return self.rate / (self.rate - t)

    @property
    def median(self) -> float:
        return math.log(2) / self.rate

    def quantile(self, p: float) -> float:
        """
        Quantile ``-ln(1 - p) / λ``.

        Returns 0 for ``p = 0`` and infinity for ``p = 1``.
        """
        check_probability(p)
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.rate

    @property
    def mode(self) -> float:
        """The mode of exponential distribution (always 0)."""
        return 0.0


__all__ = ["Exponential"]
