"""
Wald Test
=========

Two-sided hypothesis test for a parameter with an approximately normally
distributed estimator.

The Wald test rejects the null hypothesis θ = θ₀ on dataset X at level α if

    |θ̂(X) - θ₀| / se(X) > -Φ⁻¹(α / 2)

where θ̂ estimates the parameter, se estimates the standard error of θ̂ and
Φ⁻¹ is the standard normal quantile function.

For large samples the population mean is such a parameter: by the central
limit theorem the sample mean is approximately normal. For small samples the
test is not appropriate.

Examples
--------
>>> WaldTest.does_mean_equal(0.0).test(sample)            # doctest: +SKIP
>>> WaldTest.do_means_differ(by=0.0).p_value([xs, ys])    # doctest: +SKIP
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pysatl_stats.families.builtins.continuous.normal import Normal
from pysatl_stats.stats.hypothesis import HypothesisTest
from pysatl_stats.stats.sample_statistics import mean, sample_variance

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pysatl_stats.types import ProbabilityOfTypeIError


@dataclass(frozen=True, slots=True)
class WaldTest[Data](HypothesisTest[Data]):
    """
    Wald test of the null hypothesis θ = ``null_value``.

    Parameters
    ----------
    parameter_estimator : Callable[[Sequence], float]
        Estimates the parameter of interest from the data (for example the
        sample mean when the parameter is the population mean).
    null_value : float
        Value of the parameter under the null hypothesis. Usually 0.
    standard_error_estimator : Callable[[Sequence], float]
        Estimates the standard error of ``parameter_estimator`` from the data.
    """

    parameter_estimator: Callable[[Sequence[Data]], float]
    null_value: float
    standard_error_estimator: Callable[[Sequence[Data]], float]

    @classmethod
    def general_case(
        cls,
        parameter_estimator: Callable[[Sequence[Data]], float],
        null_value: float,
        standard_error_estimator: Callable[[Sequence[Data]], float],
    ) -> WaldTest[Data]:
        """Create any Wald test; see the class parameters."""
        return cls(
            parameter_estimator=parameter_estimator,
            null_value=null_value,
            standard_error_estimator=standard_error_estimator,
        )

    @staticmethod
    def does_mean_equal(mean_under_null: float) -> WaldTest[float]:
        """
        Wald test of whether a population mean equals ``mean_under_null``.

        The standard error of the sample mean is estimated by
        ``sqrt(sample_variance / n)``, so the data must have at least 2
        elements.
        """
        return WaldTest(
            parameter_estimator=mean,
            null_value=mean_under_null,
            standard_error_estimator=_standard_error_of_mean,
        )

    @staticmethod
    def do_means_differ(by: float) -> WaldTest[Sequence[float]]:
        """
        Wald test of whether two population means differ by ``by``.

        The data passed to :meth:`test` or :meth:`p_value` must consist of
        exactly two samples ``[xs, ys]``; the null hypothesis is
        ``mean(xs) - mean(ys) == by``.
        """
        return WaldTest(
            parameter_estimator=_difference_of_sample_means,
            null_value=by,
            standard_error_estimator=_standard_error_of_difference,
        )

    def test_statistic(self, data: Sequence[Data]) -> float:
        """The Wald statistic ``|θ̂ - θ₀| / se``."""
        estimate = self.parameter_estimator(data)
        standard_error = self.standard_error_estimator(data)
        if standard_error == 0:
            # A degenerate sample either matches the null exactly or rules it out
            return 0.0 if estimate == self.null_value else math.inf
        return abs((estimate - self.null_value) / standard_error)

    def critical_value(self, level: ProbabilityOfTypeIError, data: Sequence[Data]) -> float:
        """``-Φ⁻¹(level / 2)``; independent of the data."""
        return -Normal.standard().quantile(level / 2)

    def p_value(self, data: Sequence[Data]) -> ProbabilityOfTypeIError:
        """``2Φ(-W)`` where W is the Wald statistic."""
        return 2 * Normal.standard().probability_of_at_most(-self.test_statistic(data))


def _standard_error_of_mean(data: Sequence[float]) -> float:
    return math.sqrt(sample_variance(data) / len(data))


def _check_two_samples(samples: Sequence[Sequence[Any]]) -> None:
    if len(samples) != 2:
        raise ValueError(f"Expected exactly 2 samples, got {len(samples)}")
    if len(samples[0]) == 0 or len(samples[1]) == 0:
        raise ValueError("Both samples must be non-empty")


def _difference_of_sample_means(samples: Sequence[Sequence[float]]) -> float:
    _check_two_samples(samples)
    return float(mean(samples[0]) - mean(samples[1]))


def _standard_error_of_difference(samples: Sequence[Sequence[float]]) -> float:
    _check_two_samples(samples)
    first, second = samples
    return math.sqrt(sample_variance(first) / len(first) + sample_variance(second) / len(second))


__all__ = ["WaldTest"]
