"""
Tests for the capability lattice: which distributions provide which
operations, and the argument checks shared by the capabilities.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_stats.distributions import (
    BoundedDiscreteDistribution,
    BoundedDistribution,
    ClosedFormMedian,
    ClosedFormQuantile,
    ContinuousDistribution,
    DiscreteDistribution,
    DistributionWithMean,
    DistributionWithVariance,
    FiniteModal,
    LowerBoundedDiscreteDistribution,
    LowerBoundedDistribution,
    Moments,
    Samplable,
    Unimodal,
)
from pysatl_stats.distributions.moments import check_moment_order
from pysatl_stats.distributions.quantile import check_probability
from pysatl_stats.families import Bernoulli, Exponential, Normal, Poisson


class TestLattice:
    @pytest.mark.parametrize(
        "distr, capabilities",
        [
            (
                Bernoulli(0.3),
                (
                    BoundedDiscreteDistribution,
                    BoundedDistribution,
                    LowerBoundedDiscreteDistribution,
                    Moments,
                    ClosedFormQuantile,
                    FiniteModal,
                    Samplable,
                ),
            ),
            (
                Poisson(2.0),
                (LowerBoundedDiscreteDistribution, Moments, FiniteModal, Samplable),
            ),
            (
                Exponential(1.5),
                (ContinuousDistribution, Moments, ClosedFormQuantile, Unimodal, Samplable),
            ),
            (
                Normal.standard(),
                (ContinuousDistribution, Moments, ClosedFormQuantile, Unimodal, Samplable),
            ),
        ],
    )
    def test_capabilities(self, distr: object, capabilities: tuple[type, ...]) -> None:
        for capability in capabilities:
            assert isinstance(distr, capability), capability.__name__

    def test_refinements_imply_their_parents(self) -> None:
        # Protocols with properties do not support issubclass(), so walk the MRO.
        assert DistributionWithVariance in Moments.__mro__
        assert DistributionWithMean in DistributionWithVariance.__mro__
        assert ClosedFormMedian in ClosedFormQuantile.__mro__
        assert Samplable in ClosedFormQuantile.__mro__
        assert FiniteModal in Unimodal.__mro__
        assert LowerBoundedDistribution in BoundedDistribution.__mro__
        assert DiscreteDistribution in LowerBoundedDiscreteDistribution.__mro__

    def test_capabilities_that_do_not_apply(self) -> None:
        assert ClosedFormQuantile not in Poisson.__mro__
        assert BoundedDistribution not in Poisson.__mro__
        assert Unimodal not in Bernoulli.__mro__
        assert LowerBoundedDistribution not in Normal.__mro__

    def test_range_of_bounded_distribution(self) -> None:
        assert Bernoulli(0.3).range == 1
        assert Bernoulli(0.0).range == 0
        assert Bernoulli(1.0).range == 0

    def test_derived_standard_deviation(self) -> None:
        assert Poisson(4.0).standard_deviation == pytest.approx(2.0)
        assert Bernoulli(0.5).standard_deviation == pytest.approx(0.5)

    def test_unimodal_modes(self) -> None:
        assert Normal(mean=2.0, variance=1.0).modes == frozenset({2.0})
        assert Exponential(3.0).modes == frozenset({0.0})

    def test_percentiles(self) -> None:
        distr = Normal.standard()
        assert distr.bottom_one_percent == pytest.approx(-2.3263478740, abs=1e-8)
        assert distr.top_one_percent == pytest.approx(2.3263478740, abs=1e-8)


class TestArgumentChecks:
    @pytest.mark.parametrize("t", [0, 1, 5])
    def test_moment_order_accepts_non_negative_integers(self, t: int) -> None:
        check_moment_order(t)

    def test_moment_order_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            check_moment_order(-1)

    @pytest.mark.parametrize("t", [0.5, True, "1"])
    def test_moment_order_rejects_non_integers(self, t: object) -> None:
        with pytest.raises(TypeError):
            check_moment_order(t)  # type: ignore[arg-type]

    @pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
    def test_probability_closed(self, p: float) -> None:
        check_probability(p)

    @pytest.mark.parametrize("p", [-0.1, 1.1, math.nan])
    def test_probability_closed_rejects(self, p: float) -> None:
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            check_probability(p)

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_probability_open_rejects_ends(self, p: float) -> None:
        with pytest.raises(ValueError, match=r"\(0, 1\)"):
            check_probability(p, open_interval=True)
