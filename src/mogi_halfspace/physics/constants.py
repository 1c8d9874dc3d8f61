"""
Physical Constants and Defaults for Mogi Source Modelling

All constants include units in their names where they carry units.
Moduli ranges follow the usual crustal values quoted alongside Mogi (1958).
"""

from __future__ import annotations

# Elastic material defaults
DEFAULT_POISSON_RATIO: float = 0.25  # Poisson solid, drained crust
UNDRAINED_POISSON_RATIO: float = 1.0 / 3.0
POISSON_RATIO_BOUNDS: tuple[float, float] = (0.0, 1.0)

# Typical moduli of the surrounding rock (1 GPa = 1e9 Pa)
TYPICAL_SHEAR_MODULUS_PA: tuple[float, float] = (1.0e9, 10.0e9)
TYPICAL_YOUNGS_MODULUS_PA: tuple[float, float] = (10.0e9, 100.0e9)

# =============================================================================
# Point-Source Validity
# =============================================================================

# The point-source approximation degrades once the cavity radius is more than
# a tenth of its depth
MAX_RADIUS_DEPTH_RATIO: float = 0.1

# =============================================================================
# Diagnostics
# =============================================================================

# Significant digits used when printing the source constant(s)
VERBOSE_SIGNIFICANT_DIGITS: int = 6

# Column order of every deformation table
MOGI_COLUMNS: tuple[str, ...] = ("radial_distance", "Ur", "Uz", "Ett", "Err", "Tilt")
