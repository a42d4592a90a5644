"""
Tests for Acklam's approximation of the normal quantile function.
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
from pysatl_stats.special import acklam, standard_acklam
from pysatl_stats.special.acklam import P_HIGH, P_LOW

PRECISION = 1e-8


class TestStandardAcklam:
    def test_median(self) -> None:
        assert standard_acklam(0.5) == 0.0

    @pytest.mark.parametrize(
        "p",
        [1e-12, 1e-6, 0.001, P_LOW / 2, P_LOW, 0.05, 0.3, 0.5, 0.7, 0.95, P_HIGH, 0.999, 1 - 1e-9],
    )
    def test_matches_scipy(self, p: float) -> None:
        assert standard_acklam(p) == pytest.approx(norm.ppf(p), abs=PRECISION, rel=PRECISION)

    def test_regions_join_continuously(self) -> None:
        for boundary in (P_LOW, P_HIGH):
            below = standard_acklam(math.nextafter(boundary, 0.0))
            above = standard_acklam(math.nextafter(boundary, 1.0))
            assert below == pytest.approx(above, abs=1e-8)

    def test_antisymmetric(self) -> None:
        for p in (0.001, 0.01, 0.2, 0.4):
            assert standard_acklam(p) == pytest.approx(-standard_acklam(1 - p), abs=PRECISION)

    def test_strictly_increasing(self) -> None:
        p = np.linspace(0.0005, 0.9995, 500)
        values = np.array([standard_acklam(x) for x in p])
        assert (np.diff(values) > 0).all()

    def test_round_trip_through_cdf(self) -> None:
        standard = Normal.standard()
        for x in (-4.0, -2.0, -0.3, 0.0, 0.8, 2.5, 3.9):
            assert standard_acklam(standard.probability_of_at_most(x)) == pytest.approx(
                x, abs=1e-7
            )

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.2, 1.3, math.nan])
    def test_outside_open_interval(self, p: float) -> None:
        with pytest.raises(ValueError, match=r"\(0, 1\)"):
            standard_acklam(p)


class TestAcklam:
    def test_scales_and_shifts(self) -> None:
        for p in (0.01, 0.25, 0.5, 0.9):
            assert acklam(p, standard_deviation=3.0, mean=70.0) == pytest.approx(
                norm.ppf(p, loc=70.0, scale=3.0), abs=3 * PRECISION
            )

    def test_median_is_mean(self) -> None:
        assert acklam(0.5, standard_deviation=2.0, mean=-1.5) == -1.5
