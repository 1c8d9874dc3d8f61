"""
Error Functions via the Standard Normal Distribution

The error function and its relatives are expressed through the standard
normal CDF (Phi) and its inverse:

    erf(x)   = 2 * Phi(x * sqrt(2)) - 1
    erfc(x)  = 2 * (1 - Phi(x * sqrt(2)))
    ierf(x)  = Phi^-1((1 + x) / 2) / sqrt(2)
    ierfc(x) = z / sqrt(2),  where 1 - Phi(z) = x / 2

erfc and ierfc use the upper-tail functions (sf, isf) directly, so they keep
full precision for large arguments where 1 - Phi underflows.

Out-of-domain inputs are not rejected: ierf(2) is NaN and ierf(1) is inf,
exactly as returned by scipy.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

SQRT2 = np.sqrt(2.0)


def erf(x):
    """Error function."""
    return 2.0 * norm.cdf(np.asarray(x) * SQRT2) - 1.0


def erfc(x):
    """Complementary error function, 1 - erf(x)."""
    return 2.0 * norm.sf(np.asarray(x) * SQRT2)


def ierf(x):
    """Inverse error function; defined on [-1, 1]."""
    return norm.ppf((1.0 + np.asarray(x)) / 2.0) / SQRT2


def ierfc(x):
    """Inverse complementary error function; defined on [0, 2]."""
    return norm.isf(np.asarray(x) / 2.0) / SQRT2


def ierfc2(x):
    """
    First repeated integral of erfc.

    ierfc2(x) = exp(-x^2) / sqrt(pi) - x * erfc(x)

    Not an inverse; appears in solutions of the diffusion equation
    (e.g. half-space heating or pore-pressure diffusion).
    """
    x = np.asarray(x)
    return np.exp(-(x**2)) / np.sqrt(np.pi) - x * erfc(x)
