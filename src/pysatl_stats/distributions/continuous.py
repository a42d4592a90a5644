"""
Continuous Distributions
========================

A continuous distribution has a density instead of a mass function. Its
values and its statistics share one real type, so it has a single type
parameter.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from pysatl_stats.distributions.distribution import ProbabilityDistribution
from pysatl_stats.types import Kind


@runtime_checkable
class ContinuousDistribution[Real](ProbabilityDistribution[Real, Real], Protocol):
    """A continuous probability distribution."""

    @property
    def kind(self) -> Kind:
        return Kind.CONTINUOUS

    @abstractmethod
    def probability_density(self, value: Real) -> Real:
        """The probability density function (PDF) of the distribution."""

    def probability_of_exactly(self, value: Real) -> Real:
        """The PMF of a continuous distribution is zero for every ``value``."""
        return 0.0  # type: ignore[return-value]


__all__ = ["ContinuousDistribution"]
