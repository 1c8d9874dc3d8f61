"""
Source and Material Presets for Mogi Models

Pre-configured source/material scenarios for common use cases. Each preset
follows the config schema (``source``, ``material`` sections), so it can be
handed straight to ``mogi_from_config``.

Typical moduli of crustal rock are 1-10 GPa for the shear modulus and
10-100 GPa for Young's modulus.

Usage:
    from mogi_halfspace.presets import SHALLOW_INFLATION, get_preset
    from mogi_halfspace.physics import mogi_from_config

    table = mogi_from_config([0.0, 0.5, 1.0], get_preset("shallow_inflation"))
"""

from __future__ import annotations

import copy
from typing import Any

# =============================================================================
# Preset Definitions
# =============================================================================


SHALLOW_INFLATION: dict[str, Any] = {
    "name": "Shallow Inflation",
    "description": (
        "1e-5 m^3 volume increase of a source 1 m deep in a Poisson solid. "
        "Peak uplift of about 2.4 microns directly above the source."
    ),
    "source": {
        "type": "volume",
        "sphere_depth_m": 1.0,
        "volume_change_m3": 1.0e-5,
    },
    "material": {
        "poisson_ratio": 0.25,
    },
}


UNDRAINED_CRUST: dict[str, Any] = {
    "name": "Undrained Crust",
    "description": (
        "Same inflation as Shallow Inflation, loaded faster than pore fluid "
        "can flow (nu = 1/3). Smaller response than the drained case."
    ),
    "source": {
        "type": "volume",
        "sphere_depth_m": 1.0,
        "volume_change_m3": 1.0e-5,
    },
    "material": {
        "poisson_ratio": 1.0 / 3.0,
    },
}


PRESSURIZED_CHAMBER_SHEAR: dict[str, Any] = {
    "name": "Pressurized Chamber (shear modulus)",
    "description": (
        "1 cm cavity 1 m deep under a 10 GPa pressure increase, "
        "rigidity 3.08 GPa."
    ),
    "source": {
        "type": "pressure",
        "sphere_depth_m": 1.0,
        "sphere_radius_m": 0.01,
        "pressure_change_pa": 1.0e10,
    },
    "material": {
        "poisson_ratio": 0.25,
        "shear_modulus_pa": 3.08e9,
    },
}


PRESSURIZED_CHAMBER_YOUNGS: dict[str, Any] = {
    "name": "Pressurized Chamber (Young's modulus)",
    "description": (
        "Pressurized Chamber with the rigidity derived from a 10 GPa "
        "Young's modulus (mu = E / 2(1 + nu) = 4 GPa)."
    ),
    "source": {
        "type": "pressure",
        "sphere_depth_m": 1.0,
        "sphere_radius_m": 0.01,
        "pressure_change_pa": 1.0e10,
    },
    "material": {
        "poisson_ratio": 0.25,
        "youngs_modulus_pa": 10.0e9,
    },
}


# =============================================================================
# Preset Registry
# =============================================================================


PRESETS: dict[str, dict[str, Any]] = {
    "shallow_inflation": SHALLOW_INFLATION,
    "undrained_crust": UNDRAINED_CRUST,
    "pressurized_chamber_shear": PRESSURIZED_CHAMBER_SHEAR,
    "pressurized_chamber_youngs": PRESSURIZED_CHAMBER_YOUNGS,
}


def list_presets() -> list[str]:
    """
    List all available preset names.

    Examples
    --------
    >>> list_presets()
    ['shallow_inflation', 'undrained_crust', 'pressurized_chamber_shear', 'pressurized_chamber_youngs']
    """
    return list(PRESETS.keys())


def get_preset(name: str) -> dict[str, Any]:
    """
    Get a preset by name.

    Parameters
    ----------
    name : str
        Preset name (case-insensitive, spaces and hyphens allowed).

    Returns
    -------
    dict
        Independent copy of the preset.

    Raises
    ------
    KeyError
        If preset name not found.

    Examples
    --------
    >>> preset = get_preset("Shallow Inflation")
    >>> preset["source"]["type"]
    'volume'
    """
    normalized = name.lower().replace(" ", "_").replace("-", "_")

    if normalized not in PRESETS:
        available = ", ".join(list_presets())
        raise KeyError(
            f"Preset '{name}' not found. Available presets: {available}"
        )

    # Nested sections must not alias the registry
    return copy.deepcopy(PRESETS[normalized])


def get_preset_names_and_descriptions() -> list[tuple[str, str, str]]:
    """
    Get all preset names with their display names and descriptions.

    Returns
    -------
    list[tuple[str, str, str]]
        List of (key, display_name, description) tuples.
    """
    return [
        (key, preset["name"], preset["description"])
        for key, preset in PRESETS.items()
    ]
