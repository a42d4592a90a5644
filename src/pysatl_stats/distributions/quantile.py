"""
Median and Quantile Capabilities
================================

- :class:`ClosedFormMedian` – distributions with a closed-form median;
- :class:`ClosedFormQuantile` – distributions with a closed-form quantile
  function (generalized inverse of the CDF).

A closed-form quantile also gives a median (``quantile(0.5)``) and a sampler
through inverse transform sampling: ``sample() = quantile(U)`` with
``U ~ U[0, 1)``.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_stats.distributions.distribution import ProbabilityDistribution
from pysatl_stats.distributions.sampling import Samplable, resolve_rng

if TYPE_CHECKING:
    import numpy as np


def check_probability(p: float, *, open_interval: bool = False) -> None:
    """
    Validate a quantile fraction.

    Parameters
    ----------
    p : float
        Probability to check.
    open_interval : bool, default False
        If True, require ``0 < p < 1`` instead of ``0 <= p <= 1``.

    Raises
    ------
    ValueError
        If ``p`` is outside the allowed interval (NaN included).
    """
    if open_interval:
        if not 0.0 < p < 1.0:
            raise ValueError(f"Probability must be in (0, 1), got {p}")
    elif not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {p}")


@runtime_checkable
class ClosedFormMedian[Value, Statistic](ProbabilityDistribution[Value, Statistic], Protocol):
    """A probability distribution with a closed-form median."""

    @property
    @abstractmethod
    def median(self) -> Value:
        """A median of the distribution. If there are several, the smallest."""


@runtime_checkable
class ClosedFormQuantile[Value, Statistic](
    ClosedFormMedian[Value, Statistic], Samplable[Value, Statistic], Protocol
):
    """A probability distribution with a closed-form quantile function."""

    @abstractmethod
    def quantile(self, p: Statistic) -> Value:
        """
        The quantile function of the distribution.

        Parameters
        ----------
        p : Statistic
            A probability.

        Returns
        -------
        Value
            The smallest value ``x`` such that ``probability_of_at_most(x) >= p``.
            If the CDF is strictly increasing this is the unique ``x`` with
            ``probability_of_at_most(x) == p``.
        """

    @property
    def median(self) -> Value:
        return self.quantile(0.5)  # type: ignore[arg-type]

    @property
    def bottom_one_percent(self) -> Value:
        """The first percentile of the distribution (smallest if several)."""
        return self.quantile(0.01)  # type: ignore[arg-type]

    @property
    def top_one_percent(self) -> Value:
        """The 99th percentile of the distribution (smallest if several)."""
        return self.quantile(0.99)  # type: ignore[arg-type]

    def sample(self, rng: np.random.Generator | None = None) -> Value:
        """
        Inverse transform sampling.

        Distributions may override this with a faster sampler, as
        :class:`~pysatl_stats.families.Bernoulli` does.
        """
        return self.quantile(resolve_rng(rng).random())  # type: ignore[arg-type]


__all__ = ["ClosedFormMedian", "ClosedFormQuantile", "check_probability"]
