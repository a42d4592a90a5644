"""
Tests for the Wald test.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_stats.families import Normal
from pysatl_stats.stats import (
    LOW_PROBABILITY,
    VERY_LOW_PROBABILITY,
    HypothesisTest,
    HypothesisTestOutcome,
    WaldTest,
    mean,
    sample_variance,
)


class TestWaldTest:
    def setup_method(self) -> None:
        self.data = [0.12, -0.35, 0.8, 0.41, -0.02, 0.57, 0.33, -0.18, 0.66, 0.25]
        self.standard_error = math.sqrt(sample_variance(self.data) / len(self.data))

    def test_is_a_hypothesis_test(self) -> None:
        assert isinstance(WaldTest.does_mean_equal(0.0), HypothesisTest)

    @pytest.mark.parametrize("level", [LOW_PROBABILITY, VERY_LOW_PROBABILITY, 0.2])
    def test_critical_value(self, level: float) -> None:
        wald = WaldTest.does_mean_equal(0.0)
        assert wald.critical_value(level, self.data) == pytest.approx(
            norm.ppf(1 - level / 2), abs=1e-8
        )

    def test_statistic_of_mean(self) -> None:
        wald = WaldTest.does_mean_equal(0.1)
        expected = abs((mean(self.data) - 0.1) / self.standard_error)
        assert wald.test_statistic(self.data) == pytest.approx(expected)

    def test_statistic_is_absolute(self) -> None:
        above = WaldTest.does_mean_equal(mean(self.data) - 0.1)
        below = WaldTest.does_mean_equal(mean(self.data) + 0.1)
        assert above.test_statistic(self.data) == pytest.approx(below.test_statistic(self.data))

    def test_p_value(self) -> None:
        wald = WaldTest.does_mean_equal(0.0)
        statistic = wald.test_statistic(self.data)
        p_value = wald.p_value(self.data)
        assert 0.0 <= p_value <= 1.0
        assert p_value == pytest.approx(2 * norm.cdf(-statistic), abs=1e-10)

    def test_p_value_is_one_at_null(self) -> None:
        wald = WaldTest.does_mean_equal(mean(self.data))
        assert wald.p_value(self.data) == pytest.approx(1.0)
        assert wald.test(self.data) is HypothesisTestOutcome.FAIL_TO_REJECT

    def test_decision_agrees_with_p_value(self) -> None:
        for null in (-0.5, -0.1, 0.0, 0.2, 0.5, 1.0):
            wald = WaldTest.does_mean_equal(null)
            for level in (LOW_PROBABILITY, VERY_LOW_PROBABILITY):
                rejected = wald.test(self.data, level) is HypothesisTestOutcome.REJECT
                assert rejected == (wald.p_value(self.data) < level)

    def test_rejects_distant_mean(self) -> None:
        assert WaldTest.does_mean_equal(5.0).test(self.data) is HypothesisTestOutcome.REJECT

    def test_needs_two_observations(self) -> None:
        with pytest.raises(ValueError):
            WaldTest.does_mean_equal(0.0).test_statistic([1.0])

    def test_constant_sample_away_from_null(self) -> None:
        wald = WaldTest.does_mean_equal(0.0)
        constant = [1.0, 1.0, 1.0]
        assert wald.test_statistic(constant) == math.inf
        assert wald.p_value(constant) == 0.0
        assert wald.test(constant) is HypothesisTestOutcome.REJECT

    def test_constant_sample_at_null(self) -> None:
        wald = WaldTest.does_mean_equal(1.0)
        constant = [1.0, 1.0, 1.0]
        assert wald.test_statistic(constant) == 0.0
        assert wald.p_value(constant) == 1.0
        assert wald.test(constant) is HypothesisTestOutcome.FAIL_TO_REJECT

    def test_general_case(self) -> None:
        wald = WaldTest.general_case(
            parameter_estimator=mean,
            null_value=0.0,
            standard_error_estimator=lambda data: self.standard_error,
        )
        assert wald.test_statistic(self.data) == pytest.approx(
            WaldTest.does_mean_equal(0.0).test_statistic(self.data)
        )
        assert wald.null_value == 0.0


class TestWaldDifferenceOfMeans:
    def setup_method(self) -> None:
        rng = np.random.default_rng(11)
        self.xs = Normal(mean=1.0, variance=1.0).sample_many(400, rng).array.tolist()
        self.ys = Normal(mean=0.0, variance=4.0).sample_many(300, rng).array.tolist()

    def test_statistic(self) -> None:
        wald = WaldTest.do_means_differ(by=0.0)
        standard_error = math.sqrt(
            sample_variance(self.xs) / len(self.xs) + sample_variance(self.ys) / len(self.ys)
        )
        expected = abs((mean(self.xs) - mean(self.ys)) / standard_error)
        assert wald.test_statistic([self.xs, self.ys]) == pytest.approx(expected)

    def test_detects_different_means(self) -> None:
        wald = WaldTest.do_means_differ(by=0.0)
        assert wald.test([self.xs, self.ys]) is HypothesisTestOutcome.REJECT
        assert wald.p_value([self.xs, self.ys]) < VERY_LOW_PROBABILITY

    def test_true_difference_is_not_rejected(self) -> None:
        wald = WaldTest.do_means_differ(by=1.0)
        samples = [[0.0, 1.0, 2.0, 3.0], [-1.0, 0.0, 1.0, 2.0]]
        assert wald.test_statistic(samples) == 0.0
        assert wald.p_value(samples) == pytest.approx(1.0)
        assert wald.test(samples) is HypothesisTestOutcome.FAIL_TO_REJECT

    @pytest.mark.parametrize(
        "samples",
        [[], [[1.0, 2.0]], [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]], [[], [1.0, 2.0]]],
    )
    def test_requires_two_non_empty_samples(self, samples: list[list[float]]) -> None:
        with pytest.raises(ValueError):
            WaldTest.do_means_differ(by=0.0).test_statistic(samples)
