"""
Normal distribution family implementation.

Contains the Normal family, constructed from a mean and either a variance or
a standard deviation.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import cast, overload

import numpy as np
from scipy.special import erfc

from pysatl_stats.distributions.continuous import ContinuousDistribution
from pysatl_stats.distributions.modality import Unimodal
from pysatl_stats.distributions.moments import Moments, check_moment_order
from pysatl_stats.distributions.quantile import ClosedFormQuantile
from pysatl_stats.distributions.sampling import resolve_rng
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametric_family,
)
from pysatl_stats.special.acklam import acklam
from pysatl_stats.types import FamilyName, NumericArray


@parametric_family(FamilyName.NORMAL, init=False)
class Normal(
    Parametrization,
    ContinuousDistribution[float],
    Moments[float, float],
    ClosedFormQuantile[float, float],
    Unimodal[float, float],
):
    """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution
    characterized by its bell-shaped curve. It is symmetric about its mean
    and is defined by two parameters: mean (μ) and variance (σ²), or
    equivalently mean and standard deviation (σ).

    Probability density function:
        f(x) = 1/√(2πσ²) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : float, default 0.0
        Mean μ of the distribution.
    variance : float, optional
        Variance σ² of the distribution. Mutually exclusive with
        ``standard_deviation``.
    standard_deviation : float, optional
        Standard deviation σ of the distribution. Mutually exclusive with
        ``variance``.

    Raises
    ------
    TypeError
        If neither or both of ``variance`` and ``standard_deviation`` are given.
    ValueError
        If the given variance or standard deviation is not positive.

    Notes
    -----
    Both the variance and the standard deviation are stored, so neither is
    recomputed on access.

    Examples
    --------
    >>> Normal(mean=70, standard_deviation=3).variance
    9.0
    >>> Normal(mean=70, variance=9).standard_deviation
    3.0
    """

    mean: float
    variance: float
    standard_deviation: float

    def __init__(
        self,
        mean: float = 0.0,
        *,
        variance: float | None = None,
        standard_deviation: float | None = None,
    ) -> None:
        if (variance is None) == (standard_deviation is None):
            raise TypeError("Exactly one of 'variance' and 'standard_deviation' must be given")

        if standard_deviation is not None:
            variance = standard_deviation**2
        elif variance is not None:
            standard_deviation = math.sqrt(variance) if variance > 0 else math.nan

        object.__setattr__(self, "mean", float(mean))
        object.__setattr__(self, "variance", float(variance))
        object.__setattr__(self, "standard_deviation", float(standard_deviation))
        self.validate()

    @constraint(description="variance > 0")
    def check_variance_positive(self) -> bool:
        """Check that variance is positive."""
        return self.variance > 0

    @constraint(description="standard_deviation > 0")
    def check_standard_deviation_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.standard_deviation > 0

    @classmethod
    def standard(cls) -> Normal:
        """The standard normal distribution, with mean 0 and variance 1."""
        return cls(mean=0.0, standard_deviation=1.0)

    @property
    def is_symmetric(self) -> bool:
        """Always True: the distribution is symmetric about its mean."""
        return True

    @overload
    def probability_density(self, value: float) -> float: ...
    @overload
    def probability_density(self, value: NumericArray) -> NumericArray: ...

    def probability_density(self, value: float | NumericArray) -> float | NumericArray:
        """Density ``exp(-(x - μ)² / 2σ²) / √(2πσ²)``; accepts arrays."""
        arr = np.asarray(value, dtype=float)
        density = np.exp(-((arr - self.mean) ** 2) / self.variance / 2) / math.sqrt(
            2 * math.pi * self.variance
        )
        if np.ndim(arr) == 0:
            return float(density)
        return cast(NumericArray, density)

    @overload
    def probability_of_at_most(self, value: float) -> float: ...
    @overload
    def probability_of_at_most(self, value: NumericArray) -> NumericArray: ...

    def probability_of_at_most(self, value: float | NumericArray) -> float | NumericArray:
        """
        Cumulative distribution function, ``erfc((μ - x) / (σ√2)) / 2``.

        For the standard normal distribution this is usually denoted Φ(x).
        """
        arr = np.asarray(value, dtype=float)
        probability = erfc((self.mean - arr) / (math.sqrt(2) * self.standard_deviation)) / 2
        if np.ndim(arr) == 0:
            return float(probability)
        return cast(NumericArray, probability)

    @property
    def skewness(self) -> float:
        """Skewness of normal distribution (always 0)."""
        return 0.0

    def kurtosis(self, excess: bool = False) -> float:
        """Raw (3) or excess (0) kurtosis of normal distribution."""
        return 0.0 if excess else 3.0

    def moment_generating_function(self, t: int) -> float:
        """MGF ``exp(μt + σ²t²/2)`` for ``t >= 0``."""
        check_moment_order(t)
        with np.errstate(over="ignore"):
            return float(np.exp(self.mean * t + self.variance * t**2 / 2))

    @property
    def median(self) -> float:
        return self.mean

    @property
    def mode(self) -> float:
        return self.mean

    def quantile(self, p: float) -> float:
        """
        Inverse CDF computed with Acklam's algorithm.

        For the standard normal distribution this is the probit function.

        Raises
        ------
        ValueError
            If ``p`` is not in ``(0, 1)``: the normal distribution has
            neither a 0th nor a 1st quantile.
        """
        return acklam(p, standard_deviation=self.standard_deviation, mean=self.mean)

    def sample(self, rng: np.random.Generator | None = None) -> float:
        """
        Draw a value with the Box–Muller transform.

        Only one of the two variates produced by the transform is used, so
        every call consumes exactly two uniforms.
        """
        generator = resolve_rng(rng)
        # 1 - U lies in (0, 1], keeping the logarithm finite.
        uniform1 = 1.0 - generator.random()
        uniform2 = generator.random()

        standard_variate = math.sqrt(-2 * math.log(uniform1)) * math.cos(2 * math.pi * uniform2)
        return standard_variate * self.standard_deviation + self.mean


__all__ = ["Normal"]
