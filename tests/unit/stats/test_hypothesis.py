from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_stats.stats import (
    LOW_PROBABILITY,
    VERY_LOW_PROBABILITY,
    FunctionalHypothesisTest,
    HypothesisTest,
    HypothesisTestOutcome,
    create_hypothesis_test,
    mean,
)


class TestHypothesisHarness:
    def setup_method(self) -> None:
        # Rejects when the sample mean exceeds a level-dependent threshold.
        self.mean_above = create_hypothesis_test(
            test_statistic=mean,
            critical_value=lambda level, data: 10.0 * level,
            p_value=lambda data: 0.5,
        )

    def test_levels(self) -> None:
        assert LOW_PROBABILITY == 0.05
        assert VERY_LOW_PROBABILITY == 0.01

    def test_outcomes(self) -> None:
        assert HypothesisTestOutcome.REJECT == "reject"
        assert HypothesisTestOutcome.FAIL_TO_REJECT == "fail_to_reject"

    def test_created_test_is_a_hypothesis_test(self) -> None:
        assert isinstance(self.mean_above, FunctionalHypothesisTest)
        assert isinstance(self.mean_above, HypothesisTest)

    def test_delegates(self) -> None:
        data = [0.2, 0.4, 0.6]
        assert self.mean_above.test_statistic(data) == pytest.approx(0.4)
        assert self.mean_above.critical_value(0.05, data) == pytest.approx(0.5)
        assert self.mean_above.p_value(data) == 0.5

    def test_default_level(self) -> None:
        assert self.mean_above.test([0.6, 0.6]) is HypothesisTestOutcome.REJECT
        assert self.mean_above.test([0.4, 0.4]) is HypothesisTestOutcome.FAIL_TO_REJECT

    def test_explicit_level(self) -> None:
        assert self.mean_above.test([0.2], level=VERY_LOW_PROBABILITY) is (
            HypothesisTestOutcome.REJECT
        )
        assert self.mean_above.test([0.2], level=0.5) is HypothesisTestOutcome.FAIL_TO_REJECT

    def test_statistic_equal_to_critical_value_fails_to_reject(self) -> None:
        at_threshold = create_hypothesis_test(
            lambda data: 1.0, lambda level, data: 1.0, lambda data: 0.05
        )
        assert at_threshold.test([]) is HypothesisTestOutcome.FAIL_TO_REJECT
