"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.continuous.exponential import Exponential
from pysatl_stats.families.builtins.continuous.normal import Normal

__all__ = [
    "Normal",
    "Exponential",
]
