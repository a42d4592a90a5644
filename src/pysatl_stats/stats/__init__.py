"""
Stats subpackage

Statistics computed from data:

- sample statistics (:mod:`.sample_statistics`);
- generic hypothesis testing harness (:mod:`.hypothesis`);
- Wald test (:mod:`.wald`).
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .hypothesis import (
    LOW_PROBABILITY,
    VERY_LOW_PROBABILITY,
    FunctionalHypothesisTest,
    HypothesisTest,
    HypothesisTestOutcome,
    create_hypothesis_test,
)
from .sample_statistics import (
    difference_of_means,
    mean,
    population_variance,
    sample_variance,
    squared_deviations,
    total,
)
from .wald import WaldTest

__all__ = [
    # sample statistics
    "total",
    "mean",
    "squared_deviations",
    "population_variance",
    "sample_variance",
    "difference_of_means",
    # hypothesis testing
    "LOW_PROBABILITY",
    "VERY_LOW_PROBABILITY",
    "HypothesisTestOutcome",
    "HypothesisTest",
    "FunctionalHypothesisTest",
    "create_hypothesis_test",
    "WaldTest",
]
