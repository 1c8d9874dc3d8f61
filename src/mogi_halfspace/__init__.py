"""
mogi_halfspace - Mogi Point-Source Deformation in an Elastic Halfspace

This package contains:
- Physics: closed-form Mogi surface displacement, tilt and strain,
  map-view grid helpers, and normal-distribution error functions
- Validation: source geometry and configuration checks
- Presets: typical source/material scenarios
- Config: YAML model configuration

Usage:
    # After installing with: pip install -e .
    from mogi_halfspace import mogi_volume, mogi_pressure
    from mogi_halfspace.physics import erf, erfc, ierf, ierfc, ierfc2
    from mogi_halfspace.config import load_config
"""

# physics must be imported before validation (validation reads physics.constants)
from mogi_halfspace.physics import (
    erf,
    erfc,
    ierf,
    ierfc,
    ierfc2,
    mogi_from_config,
    mogi_kernel,
    mogi_pressure,
    mogi_volume,
)
from mogi_halfspace.exceptions import (
    AccuracyWarning,
    InvalidArgumentError,
    MissingArgumentError,
    MogiError,
)

__version__ = "0.1.0"
__all__ = [
    "mogi_volume",
    "mogi_pressure",
    "mogi_kernel",
    "mogi_from_config",
    "erf",
    "erfc",
    "ierf",
    "ierfc",
    "ierfc2",
    "MogiError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "AccuracyWarning",
]
