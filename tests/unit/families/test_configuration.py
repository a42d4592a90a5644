"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_stats.families import Bernoulli, Exponential, Normal, Poisson
from pysatl_stats.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_register_is_singleton(self):
        assert ParametricFamilyRegister() is self.registry

    def test_families_registered(self):
        assert set(self.registry.family_names()) == {
            FamilyName.BERNOULLI,
            FamilyName.NORMAL,
            FamilyName.EXPONENTIAL,
            FamilyName.POISSON,
        }

    @pytest.mark.parametrize(
        "name, family",
        [
            (FamilyName.BERNOULLI, Bernoulli),
            (FamilyName.NORMAL, Normal),
            (FamilyName.EXPONENTIAL, Exponential),
            (FamilyName.POISSON, Poisson),
        ],
    )
    def test_get_by_name(self, name, family):
        assert self.registry.get(name) is family
        assert self.registry.get(str(name)) is family

    def test_registered_family_builds_distributions(self):
        poisson = self.registry.get(FamilyName.POISSON)(rate=3.0)
        assert poisson.mean == 3.0

    def test_get_unknown_family(self):
        with pytest.raises(ValueError, match="No family Cauchy found in register"):
            self.registry.get("Cauchy")

    def test_duplicate_registration(self):
        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(Poisson)

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.NORMAL)
        registry2 = configure_families_register()
        assert registry1 is not registry2
        assert ParametricFamilyRegister.contains(FamilyName.NORMAL)

    def test_configuration_keeps_hand_registered_families(self):
        reset_families_register()
        ParametricFamilyRegister.register(Normal)
        registry = configure_families_register()
        assert registry.get(FamilyName.NORMAL) is Normal
        assert len(registry.family_names()) == 4
