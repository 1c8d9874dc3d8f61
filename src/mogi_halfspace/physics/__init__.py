"""
Physics Module

Contains the closed-form Mogi point-source deformation model, map-view
grid helpers, and error functions built on the normal distribution.
"""

from .constants import *
from .error_functions import erf, erfc, ierf, ierfc, ierfc2
from .mogi import (
    mogi_from_config,
    mogi_kernel,
    mogi_pressure,
    mogi_volume,
    shear_from_youngs,
)
from .grid import cart2pol, mogi_volume_grid, surface_grid, undrained_response
