"""
Global registry for distribution families using singleton pattern.

This module implements a centralized registry that maintains references to all
defined distribution families, enabling access by :class:`FamilyName` across
the application.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_stats.families.parametrizations import Parametrization


class ParametricFamilyRegister:
    """
    Singleton registry for distribution families.

    Maintains a global registry of all distribution families, allowing
    them to be accessed by name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, type[Parametrization]]

    def __new__(cls) -> ParametricFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> type[Parametrization]:
        """
        Retrieve a distribution family by name.

        Parameters
        ----------
        name : str
            Name of the family to retrieve.

        Returns
        -------
        type[Parametrization]
            The distribution class of the family; call it with the family's
            parameters to create a distribution.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family with the given name is registered."""
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: type[Parametrization]) -> None:
        """
        Register a new distribution family.

        Parameters
        ----------
        family : type[Parametrization]
            Distribution class decorated with
            :func:`~pysatl_stats.families.parametrizations.parametric_family`.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        name = family.__family_name__
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family

    @classmethod
    def family_names(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton so the next access starts from an empty register."""
        cls._instance = None
