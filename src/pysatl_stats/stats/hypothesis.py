"""
Hypothesis Testing
==================

Generic harness deciding whether a dataset rejects a null hypothesis about a
population parameter.

A hypothesis test is characterized by three functions of the data:

- a *test statistic*;
- a *critical value*, depending on the level (probability of a Type I error)
  and possibly on the data; the test rejects the null hypothesis when the
  statistic exceeds it;
- a *p-value*, the smallest level at which the test rejects.

Use :func:`create_hypothesis_test` for a single-purpose test built from three
callables, or implement :class:`HypothesisTest` for a reusable type of test
such as :class:`~pysatl_stats.stats.wald.WaldTest`.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pysatl_stats.types import ProbabilityOfTypeIError

LOW_PROBABILITY: ProbabilityOfTypeIError = 0.05
"""
A probability of Type I error commonly accepted as low (α = 0.05).

A test at this level is conservative about rejecting the null hypothesis.
"""

VERY_LOW_PROBABILITY: ProbabilityOfTypeIError = 0.01
"""
A probability of Type I error commonly accepted as very low (α = 0.01).

A test at this level is very conservative about rejecting the null hypothesis.
"""


class HypothesisTestOutcome(StrEnum):
    """
    Either reject or fail to reject the null hypothesis.

    Attributes
    ----------
    REJECT : str
        Sufficient evidence against the null hypothesis. This does not mean
        the alternative hypothesis should be accepted: the sample could be
        an outlier.
    FAIL_TO_REJECT : str
        Insufficient evidence against the null hypothesis. This does not mean
        the null hypothesis is true: the sample could be too small.
    """

    REJECT = "reject"
    FAIL_TO_REJECT = "fail_to_reject"


@runtime_checkable
class HypothesisTest[Data](Protocol):
    """Protocol for hypothesis tests over sequences of ``Data``."""

    @abstractmethod
    def test_statistic(self, data: Sequence[Data]) -> float:
        """Statistic characterizing the test; large values speak against the null."""

    @abstractmethod
    def critical_value(self, level: ProbabilityOfTypeIError, data: Sequence[Data]) -> float:
        """Threshold the statistic must exceed to reject at ``level``."""

    @abstractmethod
    def p_value(self, data: Sequence[Data]) -> ProbabilityOfTypeIError:
        """
        Smallest level at which the test rejects the null hypothesis.

        The closer the p-value is to 0, the more confidently the data can be
        called incompatible with the null hypothesis.
        """

    def test(
        self,
        data: Sequence[Data],
        level: ProbabilityOfTypeIError = LOW_PROBABILITY,
    ) -> HypothesisTestOutcome:
        """
        Run the test on ``data``.

        Parameters
        ----------
        data : Sequence
            The data to run the test on.
        level : float, default LOW_PROBABILITY
            Probability of rejecting the null hypothesis when it is true
            (the test size, α).

        Returns
        -------
        HypothesisTestOutcome
            ``REJECT`` if the statistic exceeds the critical value,
            ``FAIL_TO_REJECT`` otherwise.
        """
        if self.test_statistic(data) > self.critical_value(level, data):
            return HypothesisTestOutcome.REJECT
        return HypothesisTestOutcome.FAIL_TO_REJECT


@dataclass(frozen=True, slots=True)
class FunctionalHypothesisTest[Data](HypothesisTest[Data]):
    """
    Hypothesis test delegating to three callables.

    Parameters
    ----------
    statistic : Callable[[Sequence], float]
        Test statistic.
    critical : Callable[[float, Sequence], float]
        Critical value as a function of the level and the data.
    p : Callable[[Sequence], float]
        P-value.
    """

    statistic: Callable[[Sequence[Data]], float]
    critical: Callable[[ProbabilityOfTypeIError, Sequence[Data]], float]
    p: Callable[[Sequence[Data]], ProbabilityOfTypeIError]

    def test_statistic(self, data: Sequence[Data]) -> float:
        return self.statistic(data)

    def critical_value(self, level: ProbabilityOfTypeIError, data: Sequence[Data]) -> float:
        return self.critical(level, data)

    def p_value(self, data: Sequence[Data]) -> ProbabilityOfTypeIError:
        return self.p(data)


def create_hypothesis_test[Data](
    test_statistic: Callable[[Sequence[Data]], float],
    critical_value: Callable[[ProbabilityOfTypeIError, Sequence[Data]], float],
    p_value: Callable[[Sequence[Data]], ProbabilityOfTypeIError],
) -> HypothesisTest[Data]:
    """
    Create a single custom hypothesis test without declaring a new type.

    Parameters
    ----------
    test_statistic : Callable[[Sequence], float]
        Function of the dataset characterizing the test. The test rejects the
        null hypothesis if it exceeds the critical value.
    critical_value : Callable[[float, Sequence], float]
        Function of the level and the dataset giving the critical value.
    p_value : Callable[[Sequence], float]
        Function of the dataset giving the reported p-value.

    Returns
    -------
    HypothesisTest
        Test delegating to the given functions.

    Examples
    --------
    >>> always = create_hypothesis_test(lambda d: 1.0, lambda a, d: 0.0, lambda d: 0.0)
    >>> always.test([1, 2, 3])
    <HypothesisTestOutcome.REJECT: 'reject'>
    """
    return FunctionalHypothesisTest(statistic=test_statistic, critical=critical_value, p=p_value)


__all__ = [
    "LOW_PROBABILITY",
    "VERY_LOW_PROBABILITY",
    "HypothesisTestOutcome",
    "HypothesisTest",
    "FunctionalHypothesisTest",
    "create_hypothesis_test",
]
