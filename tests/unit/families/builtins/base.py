"""
Common fixtures and utilities for distribution family tests.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Precision of the Acklam approximation of the normal quantile
    QUANTILE_PRECISION = 1e-8

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def evaluate(method: Any, values: Any) -> np.ndarray[Any, Any]:
        """Apply a scalar characteristic to every element of ``values``."""
        return np.array([method(value) for value in values], dtype=float)
