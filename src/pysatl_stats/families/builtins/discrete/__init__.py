"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.discrete.bernoulli import Bernoulli
from pysatl_stats.families.builtins.discrete.poisson import Poisson

__all__ = [
    "Bernoulli",
    "Poisson",
]
