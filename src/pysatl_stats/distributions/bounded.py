"""
Bounded Distributions
=====================

Capabilities for distributions whose positive-probability values are bounded
below (:class:`LowerBoundedDistribution`) or on both sides
(:class:`BoundedDistribution`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from pysatl_stats.distributions.distribution import ProbabilityDistribution


@runtime_checkable
class LowerBoundedDistribution[Value, Statistic](
    ProbabilityDistribution[Value, Statistic], Protocol
):
    """A probability distribution with a lower bound."""

    @property
    @abstractmethod
    def min(self) -> Value:
        """The lowest value with a positive probability."""


@runtime_checkable
class BoundedDistribution[Value, Statistic](
    LowerBoundedDistribution[Value, Statistic], Protocol
):
    """
    A probability distribution with a lower bound and an upper bound.

    All positive-probability values lie in ``[min, max]``.
    """

    @property
    @abstractmethod
    def max(self) -> Value:
        """The highest value with a positive probability."""

    @property
    def range(self) -> Value:
        """
        The difference between the distribution's maximum and its minimum.

        While technically a statistic, the range has the type of the values.
        """
        return self.max - self.min  # type: ignore[operator,no-any-return]


__all__ = ["LowerBoundedDistribution", "BoundedDistribution"]
