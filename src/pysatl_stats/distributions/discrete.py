"""
Discrete Distributions
======================

This module defines discrete capabilities:

- :class:`DiscreteDistribution` – marker capability for distributions with
  a probability mass function;
- :class:`LowerBoundedDiscreteDistribution` – a discrete distribution over
  the integers with a lower bound, which gets a default CDF by summing the
  PMF from ``min`` up to the queried value.

Notes
-----
The default CDF takes O(``value - min``) time. Distributions are encouraged
to override it with a closed form when one exists.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import Protocol, runtime_checkable

from pysatl_stats.distributions.bounded import LowerBoundedDistribution
from pysatl_stats.distributions.distribution import ProbabilityDistribution
from pysatl_stats.types import Kind

SUMMATION_WARNING_THRESHOLD = 1_000_000
"""Number of PMF terms above which the default CDF warns about its cost."""


@runtime_checkable
class DiscreteDistribution[Value, Statistic](ProbabilityDistribution[Value, Statistic], Protocol):
    """A discrete probability distribution."""

    @property
    def kind(self) -> Kind:
        return Kind.DISCRETE


@runtime_checkable
class LowerBoundedDiscreteDistribution[Statistic](
    DiscreteDistribution[int, Statistic],
    LowerBoundedDistribution[int, Statistic],
    Protocol,
):
    """A discrete distribution over the integers with a lower bound."""

    def probability_of_at_most(self, value: int | float) -> Statistic:
        """
        Cumulative distribution function computed by summation.

        Parameters
        ----------
        value : int or float
            Upper bound of the query. Non-integer values are floored.

        Returns
        -------
        Statistic
            ``sum(probability_of_exactly(k) for k in min..floor(value))``;
            0 below ``min`` and 1 at positive infinity.
        """
        if math.isnan(value) or value < self.min:
            return 0.0  # type: ignore[return-value]
        if math.isinf(value):
            return 1.0  # type: ignore[return-value]

        last = math.floor(value)
        n_terms = last - self.min + 1
        if n_terms > SUMMATION_WARNING_THRESHOLD:
            warnings.warn(
                f"Summing {n_terms} probability masses to evaluate the CDF at {value}. "
                "Consider a distribution with a closed-form CDF.",
                UserWarning,
                stacklevel=2,
            )

        total = math.fsum(self.probability_of_exactly(k) for k in range(self.min, last + 1))  # type: ignore[misc]
        return min(total, 1.0)  # type: ignore[return-value]


__all__ = [
    "DiscreteDistribution",
    "LowerBoundedDiscreteDistribution",
    "SUMMATION_WARNING_THRESHOLD",
]
