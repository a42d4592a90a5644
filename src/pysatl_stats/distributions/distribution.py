"""
Probability Distribution Interface
==================================

This module defines the root capability of every distribution,
:class:`ProbabilityDistribution`.

A distribution implements two primitives:

- ``probability_of_exactly`` – the probability mass function (PMF);
- ``probability_of_at_most`` – the cumulative distribution function (CDF);

and gets every other probability (tails, complements, ranges, collections)
from them through default methods. Concrete distributions may override any
default with a closed form.

Notes
-----
- Queries outside the support never raise: they return the boundary value
  (0 or 1) consistent with a non-decreasing CDF.
- For continuous distributions the PMF is identically zero, so strict and
  non-strict inequalities give the same probabilities.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_stats.types import Interval

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_stats.types import Kind


@runtime_checkable
class ProbabilityDistribution[Value, Statistic](Protocol):
    """
    A distribution of all possible values of a random variable together with
    their probabilities.

    Type Parameters
    ---------------
    Value
        Type of the outcomes (totally ordered).
    Statistic
        Real type of probabilities and other statistics of the distribution.
    """

    @property
    @abstractmethod
    def kind(self) -> Kind:
        """Whether the distribution is discrete or continuous."""

    @property
    @abstractmethod
    def is_symmetric(self) -> bool:
        """
        Whether the distribution is symmetric.

        The center of symmetry does not have to be a valid value: a fair
        Bernoulli distribution is symmetric about 0.5.
        """

    @abstractmethod
    def probability_of_exactly(self, value: Value) -> Statistic:
        """P(X = value). Zero for every value of a continuous distribution."""

    @abstractmethod
    def probability_of_at_most(self, value: Value) -> Statistic:
        """P(X <= value)."""

    def probability_of_not(self, value: Value) -> Statistic:
        """P(X != value)."""
        return 1 - self.probability_of_exactly(value)  # type: ignore[operator,no-any-return]

    def probability_of_less_than(self, value: Value) -> Statistic:
        """P(X < value)."""
        return self.probability_of_at_most(value) - self.probability_of_exactly(value)  # type: ignore[operator,no-any-return]

    def probability_of_greater_than(self, value: Value) -> Statistic:
        """P(X > value)."""
        return 1 - self.probability_of_at_most(value)  # type: ignore[operator,no-any-return]

    def probability_of_at_least(self, value: Value) -> Statistic:
        """P(X >= value)."""
        return 1 - self.probability_of_less_than(value)  # type: ignore[operator,no-any-return]

    def probability_of_in(self, values: Interval | Iterable[Value]) -> Statistic:
        """
        P(X in values).

        Parameters
        ----------
        values : Interval or Iterable
            Either an :class:`~pysatl_stats.types.Interval` (any closure) or
            a collection of individual values.

        Returns
        -------
        Statistic
            For an interval, the difference of the CDF-derived probabilities
            at its endpoints. For a collection, the sum of the PMF over its
            elements (each element counted as many times as it occurs).
        """
        if isinstance(values, Interval):
            return self._probability_of_interval(values)
        return sum(  # type: ignore[return-value]
            (self.probability_of_exactly(value) for value in values),
            start=0.0,
        )

    def _probability_of_interval(self, interval: Interval) -> Statistic:
        if interval.is_empty:
            return 0.0  # type: ignore[return-value]

        left: Value = interval.left  # type: ignore[assignment]
        right: Value = interval.right  # type: ignore[assignment]

        upper = (
            self.probability_of_at_most(right)
            if interval.right_closed
            else self.probability_of_less_than(right)
        )
        lower = (
            self.probability_of_less_than(left)
            if interval.left_closed
            else self.probability_of_at_most(left)
        )
        return upper - lower  # type: ignore[operator,no-any-return]

    def probability_of_within(self, tolerance: Value, center: Value) -> Statistic:
        """P(|X - center| <= tolerance)."""
        return self.probability_of_in(
            Interval(center - tolerance, center + tolerance)  # type: ignore[operator]
        )


__all__ = ["ProbabilityDistribution"]
