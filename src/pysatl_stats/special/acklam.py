"""
Acklam's Inverse Normal CDF
===========================

Rational-function approximation of the quantile function of the standard
normal distribution (the *probit* function), due to Peter J. Acklam.
The algorithm is public domain: "You can use the algorithm [...] for whatever
purpose you want".

The relative error of the approximation is below 1.15e-9 over the whole of
``(0, 1)``. No iterative refinement is applied.

References
----------
https://web.archive.org/web/20151030215612/http://home.online.no/~pjacklam/notes/invnorm
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_stats.distributions.quantile import check_probability

# Central region, numerator and denominator.
A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)

# Tail regions, numerator and denominator.
C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def _tail(q: float) -> float:
    numerator = ((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]
    denominator = (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1
    return numerator / denominator


def standard_acklam(p: float) -> float:
    """
    Quantile of the standard normal distribution.

    Parameters
    ----------
    p : float
        Probability in the open interval ``(0, 1)``.

    Returns
    -------
    float
        Approximation of ``Φ⁻¹(p)``.

    Raises
    ------
    ValueError
        If ``p`` is not in ``(0, 1)``. A normal distribution is unbounded in
        both directions, so it has neither a 0th nor a 1st quantile.
    """
    check_probability(p, open_interval=True)

    if p < P_LOW:
        return _tail(math.sqrt(-2 * math.log(p)))

    if p <= P_HIGH:
        q = p - 0.5
        r = q * q
        numerator = (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5]) * q
        denominator = ((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1
        return numerator / denominator

    return -_tail(math.sqrt(-2 * math.log(1 - p)))


def acklam(p: float, standard_deviation: float, mean: float) -> float:
    """
    Quantile of a normal distribution with the given parameters.

    Parameters
    ----------
    p : float
        Probability in ``(0, 1)``.
    standard_deviation : float
        Standard deviation of the normal distribution.
    mean : float
        Mean of the normal distribution.

    Returns
    -------
    float
        ``standard_acklam(p) * standard_deviation + mean``.
    """
    return standard_acklam(p) * standard_deviation + mean


__all__ = ["acklam", "standard_acklam"]
