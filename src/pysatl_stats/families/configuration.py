"""
Distribution Families Configuration
====================================

This module registers the built-in distribution families of PySATL Stats:

- :class:`~pysatl_stats.families.Bernoulli`: two-point distribution on {0, 1}.
- :class:`~pysatl_stats.families.Normal`: Gaussian distribution.
- :class:`~pysatl_stats.families.Exponential`: waiting time between events.
- :class:`~pysatl_stats.families.Poisson`: number of events per unit of time.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- The built-in classes can also be used directly, without the register.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_stats.families.builtins import BUILTIN_FAMILIES
from pysatl_stats.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Families that are already present (for example, registered by hand
    before this call) are skipped.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of distribution families.
    """
    for family in BUILTIN_FAMILIES:
        if not ParametricFamilyRegister.contains(family.__family_name__):
            ParametricFamilyRegister.register(family)
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
