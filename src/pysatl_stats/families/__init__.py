"""
Distribution families module.

This package provides the built-in probability distributions together with
the machinery for declaring parameters, validating their constraints and
looking families up by name.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import Bernoulli, Exponential, Normal, Poisson
from .configuration import configure_families_register, reset_families_register
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametric_family,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "Bernoulli",
    "Normal",
    "Exponential",
    "Poisson",
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametric_family",
    "configure_families_register",
    "reset_families_register",
]
