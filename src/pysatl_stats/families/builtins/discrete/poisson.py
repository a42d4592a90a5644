"""
Poisson distribution family implementation.

Contains the Poisson family parametrized by its rate.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_stats.distributions.discrete import LowerBoundedDiscreteDistribution
from pysatl_stats.distributions.modality import FiniteModal
from pysatl_stats.distributions.moments import Moments, check_moment_order
from pysatl_stats.distributions.sampling import Samplable, resolve_rng
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametric_family,
)
from pysatl_stats.types import FamilyName

if TYPE_CHECKING:
    from typing import Any

INT64_MAX = np.iinfo(np.int64).max

MULTIPLICATION_SAMPLING_MAX_RATE = 30.0
"""Largest rate sampled by multiplying uniforms; larger rates use rejection sampling."""


@parametric_family(FamilyName.POISSON)
class Poisson(
    Parametrization,
    LowerBoundedDiscreteDistribution[float],
    Moments[int, float],
    FiniteModal[int, float],
    Samplable[int, float],
):
    """
    Poisson distribution.

    In a process where independent events occur at a constant rate, the
    number of events in a unit of time follows this distribution. For
    example, if a call center receives an average of 3 independent calls per
    minute, the number of calls in any given minute follows ``Poisson(3)``.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k!  for k = 0, 1, 2, ...

    Parameters
    ----------
    rate : float
        Rate parameter (λ) of the distribution.

    Notes
    -----
    No closed form of the CDF is provided: it is computed by summing the PMF
    from 0, in O(value) time.
    """

    rate: float

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.rate > 0

    @property
    def is_symmetric(self) -> bool:
        return False

    @property
    def min(self) -> int:
        return 0

    def probability_of_exactly(self, value: Any) -> float:
        """
        Probability mass function.

        Non-integer and negative values have zero probability. Very large
        values are evaluated in log space once the direct product overflows.
        """
        if value < 0 or not math.isfinite(value) or value != math.floor(value):
            return 0.0
        k = int(value)

        with np.errstate(over="ignore", invalid="ignore"):
            if k <= INT64_MAX:
                exponentiated = np.power(np.float64(self.rate), np.int64(k))
            else:
                exponentiated = np.power(np.float64(self.rate), np.float64(k))

            probability = float(exponentiated * np.exp(-self.rate))
            if k >= 2:
                # Terms are converted to float before multiplying to avoid integer overflow.
                probability /= math.prod(float(i) for i in range(2, k + 1))

        if math.isfinite(probability) and probability > 0.0:
            return probability
        return math.exp(k * math.log(self.rate) - self.rate - math.lgamma(k + 1))

    @property
    def modes(self) -> frozenset[int]:
        """
        The modes ``ceil(λ) - 1`` and ``floor(λ)``.

        They coincide for a non-integer rate. For an integer rate both
        ``λ - 1`` and ``λ`` are modes.
        """
        return frozenset({math.ceil(self.rate) - 1, math.floor(self.rate)})

    @property
    def mean(self) -> float:
        return self.rate

    @property
    def variance(self) -> float:
        return self.rate

    @property
    def skewness(self) -> float:
        return 1.0 / math.sqrt(self.rate)

    def kurtosis(self, excess: bool = False) -> float:
        """Raw or excess kurtosis (``1 / λ`` in excess form)."""
        excess_kurtosis = 1.0 / self.rate
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def moment_generating_function(self, t: int) -> float:
        """MGF ``exp(λ (exp(t) - 1))`` for ``t >= 0``."""
        check_moment_order(t)
        with np.errstate(over="ignore"):
            return float(np.exp(self.rate * np.expm1(t)))

    def sample(self, rng: np.random.Generator | None = None) -> int:
        """
        Draw a random count.

        For small rates, uniforms are multiplied together until the product
        falls to ``exp(-λ)`` or below, which takes O(λ) draws on average. For
        larger rates the transformed rejection sampler of
        :meth:`numpy.random.Generator.poisson` is used, since ``exp(-λ)``
        underflows and the loop becomes too slow.
        """
        generator = resolve_rng(rng)
        if self.rate > MULTIPLICATION_SAMPLING_MAX_RATE:
            return int(generator.poisson(self.rate))

        result = 0
        product = 1.0
        threshold = math.exp(-self.rate)
        while True:
            product *= generator.random()
            if product <= threshold:
                return result
            result += 1


__all__ = ["Poisson"]
