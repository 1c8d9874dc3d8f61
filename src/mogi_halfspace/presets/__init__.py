"""
Source and Material Presets for Mogi Models
"""

from __future__ import annotations

from mogi_halfspace.presets.material_presets import (
    PRESETS,
    PRESSURIZED_CHAMBER_SHEAR,
    PRESSURIZED_CHAMBER_YOUNGS,
    SHALLOW_INFLATION,
    UNDRAINED_CRUST,
    get_preset,
    get_preset_names_and_descriptions,
    list_presets,
)

__all__ = [
    "SHALLOW_INFLATION",
    "UNDRAINED_CRUST",
    "PRESSURIZED_CHAMBER_SHEAR",
    "PRESSURIZED_CHAMBER_YOUNGS",
    "PRESETS",
    "get_preset",
    "get_preset_names_and_descriptions",
    "list_presets",
]
