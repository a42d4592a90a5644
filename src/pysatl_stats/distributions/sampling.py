"""
Sampling Interfaces
===================

This module defines the :class:`Samplable` capability and the array-backed
container returned when drawing several values at once.

Random numbers come from a :class:`numpy.random.Generator` passed by the
caller. When no generator is given, a fresh ``numpy.random.default_rng()`` is
created for the call, so distributions never share a global random state.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_stats.distributions.distribution import ProbabilityDistribution

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng``, or a freshly seeded generator if it is None."""
    return np.random.default_rng() if rng is None else rng


class ArraySample:
    """
    Array-backed container of independent draws from a univariate distribution.

    Parameters
    ----------
    data : numpy.ndarray
        1D array of shape (n,).

    Raises
    ------
    ValueError
        If data is not 1D.
    """

    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 1:
            raise ValueError("ArraySample expects 1D array of shape (n,).")
        self.data = data

    def __len__(self) -> int:
        """Return the number of draws (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[Any]:
        """Iterate over draws as Python scalars."""
        yield from self.data.tolist()

    def __getitem__(self, index: int) -> Any:
        return self.data[index].item()

    @property
    def array(self) -> npt.NDArray[Any]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n,)."""
        return (len(self),)

    def mean(self) -> float:
        """Empirical mean of the draws."""
        if len(self) == 0:
            raise ValueError("Mean of an empty sample is undefined.")
        return float(self.data.mean())


@runtime_checkable
class Samplable[Value, Statistic](ProbabilityDistribution[Value, Statistic], Protocol):
    """
    A probability distribution that can be randomly sampled.

    Implementing :meth:`sample` is enough: :meth:`sample_many` draws
    repeatedly from it.
    """

    @abstractmethod
    def sample(self, rng: np.random.Generator | None = None) -> Value:
        """
        Generate one random value from the distribution.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Source of uniform random numbers.
        """

    def sample_many(self, count: int, rng: np.random.Generator | None = None) -> ArraySample:
        """
        Generate ``count`` independent random values from the distribution.

        Parameters
        ----------
        count : int
            How many values to generate.
        rng : numpy.random.Generator, optional
            Source of uniform random numbers shared by all draws of this call.

        Returns
        -------
        ArraySample
            Container of ``count`` draws, each produced by one :meth:`sample` call.

        Raises
        ------
        ValueError
            If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"Sample count must be non-negative, got {count}")
        generator = resolve_rng(rng)
        return ArraySample(np.array([self.sample(generator) for _ in range(count)]))


__all__ = ["ArraySample", "Samplable", "resolve_rng"]
