from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

from pysatl_stats.families.configuration import reset_families_register

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_families_register()
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so that sampling tests are reproducible."""
    return np.random.default_rng(20250101)
