"""
Modal Capabilities
==================

:class:`FiniteModal` distributions have a finite set of most probable values;
:class:`Unimodal` distributions always have exactly one.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from pysatl_stats.distributions.distribution import ProbabilityDistribution


@runtime_checkable
class FiniteModal[Value, Statistic](ProbabilityDistribution[Value, Statistic], Protocol):
    """A probability distribution with a finite set of modes."""

    @property
    @abstractmethod
    def modes(self) -> frozenset[Value]:
        """
        The values that are the most likely to be sampled.

        Examples
        --------
        >>> Poisson(rate=3).modes == {2, 3}
        True
        >>> Bernoulli.fair().modes == {0, 1}
        True
        """


@runtime_checkable
class Unimodal[Value, Statistic](FiniteModal[Value, Statistic], Protocol):
    """
    A probability distribution that always has a single mode.

    A Bernoulli distribution is not unimodal: its mode is not unique when both
    outcomes have probability 0.5.
    """

    @property
    @abstractmethod
    def mode(self) -> Value:
        """The unique most likely value."""

    @property
    def modes(self) -> frozenset[Value]:
        return frozenset({self.mode})


__all__ = ["FiniteModal", "Unimodal"]
