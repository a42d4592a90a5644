"""
Bounded Discrete Distributions
==============================

A probability distribution over a finite set of integer values. Such a
distribution always has every moment and a closed-form quantile.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from pysatl_stats.distributions.bounded import BoundedDistribution
from pysatl_stats.distributions.discrete import LowerBoundedDiscreteDistribution
from pysatl_stats.distributions.moments import Moments
from pysatl_stats.distributions.quantile import ClosedFormQuantile


@runtime_checkable
class BoundedDiscreteDistribution[Statistic](
    LowerBoundedDiscreteDistribution[Statistic],
    BoundedDistribution[int, Statistic],
    Moments[int, Statistic],
    ClosedFormQuantile[int, Statistic],
    Protocol,
):
    """
    A discrete distribution over a finite set of values.

    Attributes
    ----------
    domain : frozenset[int]
        The values that may have a positive probability in *some* member of
        the family. For example, the Bernoulli domain is ``{0, 1}`` even
        though 1 can never be drawn from ``Bernoulli(0)``.
    """

    domain: ClassVar[frozenset[int]]

    @property
    @abstractmethod
    def support(self) -> frozenset[int]:
        """The values with a positive probability in this specific distribution."""


__all__ = ["BoundedDiscreteDistribution"]
