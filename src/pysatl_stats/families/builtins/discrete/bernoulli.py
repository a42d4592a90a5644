"""
Bernoulli distribution family implementation.

Contains the Bernoulli family parametrized by the probability of one.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np

from pysatl_stats.distributions.bounded_discrete import BoundedDiscreteDistribution
from pysatl_stats.distributions.modality import FiniteModal
from pysatl_stats.distributions.moments import check_moment_order
from pysatl_stats.distributions.quantile import check_probability
from pysatl_stats.distributions.sampling import resolve_rng
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametric_family,
)
from pysatl_stats.types import FamilyName


@parametric_family(FamilyName.BERNOULLI)
class Bernoulli(
    Parametrization,
    BoundedDiscreteDistribution[float],
    FiniteModal[int, float],
):
    """
    Bernoulli distribution.

    The probability distribution of a random variable that is either 0 or 1.

    Probability mass function:
        P(X = 1) = p,  P(X = 0) = 1 - p

    Parameters
    ----------
    probability_of_one : float
        Probability ``p`` of drawing 1, in ``[0, 1]``.

    Examples
    --------
    >>> coin = Bernoulli.fair()
    >>> coin.mean, coin.variance
    (0.5, 0.25)
    """

    probability_of_one: float

    domain = frozenset({0, 1})

    @constraint(description="0 <= probability_of_one <= 1")
    def check_probability_of_one(self) -> bool:
        """Check that the probability of one is a probability."""
        return 0.0 <= self.probability_of_one <= 1.0

    @classmethod
    def fair(cls) -> Bernoulli:
        """A distribution modeling a fair coin, ``Bernoulli(0.5)``."""
        return cls(probability_of_one=0.5)

    @property
    def probability_of_zero(self) -> float:
        """The probability ``q = 1 - p`` of drawing 0."""
        return 1.0 - self.probability_of_one

    @property
    def is_symmetric(self) -> bool:
        return self.probability_of_one in (0.0, 0.5, 1.0)

    def probability_of_exactly(self, value: int | float) -> float:
        if value == 0:
            return self.probability_of_zero
        if value == 1:
            return self.probability_of_one
        return 0.0

    def probability_of_at_most(self, value: int | float) -> float:
        if value < 0:
            return 0.0
        if value < 1:
            return self.probability_of_zero
        return 1.0

    @property
    def modes(self) -> frozenset[int]:
        if self.probability_of_one < 0.5:
            return frozenset({0})
        if self.probability_of_one == 0.5:
            return frozenset({0, 1})
        return frozenset({1})

    @property
    def min(self) -> int:
        return 1 if self.probability_of_one == 1.0 else 0

    @property
    def max(self) -> int:
        return 0 if self.probability_of_one == 0.0 else 1

    @property
    def support(self) -> frozenset[int]:
        if self.probability_of_one == 0.0:
            return frozenset({0})
        if self.probability_of_one == 1.0:
            return frozenset({1})
        return self.domain

    @property
    def mean(self) -> float:
        return self.probability_of_one

    @property
    def variance(self) -> float:
        return self.probability_of_one * self.probability_of_zero

    @property
    def skewness(self) -> float:
        """
        Skewness ``(q - p) / sqrt(pq)``.

        Infinite (with the sign of ``q - p``) for degenerate distributions.
        """
        p, q = self.probability_of_one, self.probability_of_zero
        if p * q == 0.0:
            return math.copysign(math.inf, q - p)
        return (q - p) / math.sqrt(p * q)

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis, ``(1 - 6pq) / pq`` in excess form.

        Infinite for degenerate distributions.
        """
        pq = self.probability_of_one * self.probability_of_zero
        if pq == 0.0:
            return math.inf
        excess_kurtosis = (1.0 - 6.0 * pq) / pq
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def moment_generating_function(self, t: int) -> float:
        """MGF ``q + p * exp(t)`` for ``t >= 0``."""
        check_moment_order(t)
        if self.probability_of_one == 0.0:
            return 1.0
        with np.errstate(over="ignore"):
            return float(self.probability_of_zero + self.probability_of_one * np.exp(t))

    def quantile(self, p: float) -> int:
        """1 if ``p`` exceeds the probability of zero, otherwise 0."""
        check_probability(p)
        return 1 if p > self.probability_of_zero else 0

    def sample(self, rng: np.random.Generator | None = None) -> int:
        """Draw 1 with probability ``probability_of_one``, otherwise 0."""
        return 1 if resolve_rng(rng).random() < self.probability_of_one else 0


__all__ = ["Bernoulli"]
