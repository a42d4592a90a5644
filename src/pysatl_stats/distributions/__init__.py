"""
Distributions subpackage

Capability interfaces for probability distributions used by PySATL Stats:

- root protocol with derived probabilities (:mod:`.distribution`);
- bounds (:mod:`.bounded`) and discrete/continuous kinds
  (:mod:`.discrete`, :mod:`.continuous`, :mod:`.bounded_discrete`);
- moments (:mod:`.moments`);
- medians and quantiles (:mod:`.quantile`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- modes (:mod:`.modality`).
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .bounded import BoundedDistribution, LowerBoundedDistribution
from .bounded_discrete import BoundedDiscreteDistribution
from .continuous import ContinuousDistribution
from .discrete import DiscreteDistribution, LowerBoundedDiscreteDistribution
from .distribution import ProbabilityDistribution
from .modality import FiniteModal, Unimodal
from .moments import DistributionWithMean, DistributionWithVariance, Moments
from .quantile import ClosedFormMedian, ClosedFormQuantile
from .sampling import ArraySample, Samplable

__all__ = [
    # root
    "ProbabilityDistribution",
    # bounds and kinds
    "LowerBoundedDistribution",
    "BoundedDistribution",
    "DiscreteDistribution",
    "LowerBoundedDiscreteDistribution",
    "BoundedDiscreteDistribution",
    "ContinuousDistribution",
    # moments
    "DistributionWithMean",
    "DistributionWithVariance",
    "Moments",
    # quantiles
    "ClosedFormMedian",
    "ClosedFormQuantile",
    # sampling
    "Samplable",
    "ArraySample",
    # modes
    "FiniteModal",
    "Unimodal",
]
