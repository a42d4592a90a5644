"""
Special functions used by the built-in distribution families.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .acklam import acklam, standard_acklam

__all__ = ["acklam", "standard_acklam"]
