"""
Built-in distribution families for PySATL Stats.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Stats.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.continuous import Exponential, Normal
from pysatl_stats.families.builtins.discrete import Bernoulli, Poisson

BUILTIN_FAMILIES = (Bernoulli, Normal, Exponential, Poisson)
"""Families registered by :func:`~pysatl_stats.families.configure_families_register`."""

__all__ = [
    "Bernoulli",
    "Normal",
    "Exponential",
    "Poisson",
    "BUILTIN_FAMILIES",
]
