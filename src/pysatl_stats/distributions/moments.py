"""
Moment Capabilities
===================

Distributions that always have a mean, a variance, or all of their moments.

Every distribution with a variance also has a mean, but not the other way
around, so the capabilities refine each other:
:class:`DistributionWithMean` <- :class:`DistributionWithVariance` <-
:class:`Moments`.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import abstractmethod
from typing import Protocol, runtime_checkable

from pysatl_stats.distributions.distribution import ProbabilityDistribution


def check_moment_order(t: int) -> None:
    """
    Validate the argument of a moment-generating function.

    Raises
    ------
    TypeError
        If ``t`` is not an integer.
    ValueError
        If ``t`` is negative.
    """
    if isinstance(t, bool) or not isinstance(t, int):
        raise TypeError(f"Moment-generating function argument must be an integer, got {t!r}")
    if t < 0:
        raise ValueError(f"Moment-generating function argument must be non-negative, got {t}")


@runtime_checkable
class DistributionWithMean[Value, Statistic](ProbabilityDistribution[Value, Statistic], Protocol):
    """A probability distribution that always has a mean."""

    @property
    @abstractmethod
    def mean(self) -> Statistic:
        """The expectation, or first raw moment, of the distribution."""


@runtime_checkable
class DistributionWithVariance[Value, Statistic](
    DistributionWithMean[Value, Statistic], Protocol
):
    """A probability distribution that always has a variance and a standard deviation."""

    @property
    @abstractmethod
    def variance(self) -> Statistic:
        """The second central moment of the distribution."""

    @property
    def standard_deviation(self) -> Statistic:
        """
        The square root of the variance.

        Distributions that know their standard deviation directly (such as
        :class:`~pysatl_stats.families.Normal`) override this property.
        """
        return math.sqrt(self.variance)  # type: ignore[arg-type,return-value]


@runtime_checkable
class Moments[Value, Statistic](DistributionWithVariance[Value, Statistic], Protocol):
    """A probability distribution for which all moments are always defined."""

    @property
    @abstractmethod
    def skewness(self) -> Statistic:
        """The third standardized moment."""

    @abstractmethod
    def kurtosis(self, excess: bool = False) -> Statistic:
        """
        The fourth standardized moment.

        Parameters
        ----------
        excess : bool, default False
            If True, return the excess kurtosis (kurtosis minus 3).
        """

    @abstractmethod
    def moment_generating_function(self, t: int) -> Statistic:
        """
        The moment-generating function (MGF), E[exp(tX)].

        Parameters
        ----------
        t : int
            Non-negative integer argument.

        Returns
        -------
        Statistic
            ``E[exp(t X)]``. ``moment_generating_function(0)`` is always 1.

        Raises
        ------
        ValueError
            If ``t`` is negative (or outside the MGF's domain).
        """


__all__ = [
    "DistributionWithMean",
    "DistributionWithVariance",
    "Moments",
    "check_moment_order",
]
