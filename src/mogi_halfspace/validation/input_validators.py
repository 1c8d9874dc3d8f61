"""
Input Validators for Mogi Source Models

Provides validation for:
- Source geometry (non-negative lengths, radius much smaller than depth)
- Poisson's ratio range
- YAML configuration file parsing

Two flavours are offered. The check_* / validate_poisson_ratio functions
raise immediately and are what the deformation routines call. The
validate_* functions never raise and return a result object with
messages and recovery suggestions, for interactive use.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from mogi_halfspace.exceptions import AccuracyWarning, InvalidArgumentError
from mogi_halfspace.physics.constants import (
    MAX_RADIUS_DEPTH_RATIO,
    POISSON_RATIO_BOUNDS,
)

ACCURACY_MESSAGE = "inaccurate results unless sphere_depth >> sphere_radius"


# =============================================================================
# Validation Result Types
# =============================================================================


@dataclass
class GeometryValidationResult:
    """Result of source geometry validation.

    Attributes
    ----------
    is_valid : bool
        True if all lengths are non-negative.
    radius_depth_ratio : float | None
        max(sphere_radius) / min(sphere_depth), None when no radius given.
    warnings : list[str]
        Non-fatal warnings (e.g., source too large for its depth).
    errors : list[str]
        Fatal errors (e.g., negative depth).
    recovery_suggestions : list[str]
        Actionable suggestions for fixing issues.
    """

    is_valid: bool
    radius_depth_ratio: float | None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)


@dataclass
class ConfigValidationResult:
    """Result of YAML configuration file validation.

    Attributes
    ----------
    is_valid : bool
        True if config loaded and validated successfully.
    config : dict | None
        Loaded configuration (None if load failed).
    file_path : Path | None
        Path to the config file (None if using defaults).
    warnings : list[str]
        Non-fatal warnings (e.g., missing optional fields).
    errors : list[str]
        Fatal errors (e.g., parse failures).
    recovery_suggestions : list[str]
        Actionable suggestions for fixing issues.
    """

    is_valid: bool
    config: dict[str, Any] | None
    file_path: Path | None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)


# =============================================================================
# Geometry Validation
# =============================================================================


def _all_non_negative(values) -> bool:
    # NaN compares False, so it fails the check
    return bool(np.all(np.asarray(values, dtype=np.float64) >= 0))


def _radius_depth_ratio(sphere_radius, sphere_depth) -> float:
    radius = np.asarray(sphere_radius, dtype=np.float64)
    depth = np.asarray(sphere_depth, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.max(radius) / np.min(depth))


def check_source_geometry(
    surface_distance,
    sphere_depth,
    sphere_radius=None,
    max_ratio: float = MAX_RADIUS_DEPTH_RATIO,
) -> None:
    """
    Check the physical sanity of a Mogi source geometry.

    Parameters
    ----------
    surface_distance : array_like
        Radial surface distances from the source axis in m.
    sphere_depth : array_like
        Depth of the source centre in m.
    sphere_radius : array_like, optional
        Cavity radius in m. Only pressure sources carry one.
    max_ratio : float, optional
        Largest radius/depth ratio accepted without warning. Default 0.1.

    Raises
    ------
    InvalidArgumentError
        If any length is negative.

    Warns
    -----
    AccuracyWarning
        If max(sphere_radius) / min(sphere_depth) exceeds ``max_ratio``.
        Computation is still allowed to proceed.
    """
    if not _all_non_negative(surface_distance):
        raise InvalidArgumentError("surface_distance must be >= 0")
    if not _all_non_negative(sphere_depth):
        raise InvalidArgumentError("sphere_depth must be >= 0")

    if sphere_radius is None:
        return

    if not _all_non_negative(sphere_radius):
        raise InvalidArgumentError("sphere_radius must be >= 0")
    if _radius_depth_ratio(sphere_radius, sphere_depth) > max_ratio:
        warnings.warn(ACCURACY_MESSAGE, AccuracyWarning, stacklevel=3)


def validate_poisson_ratio(nu) -> None:
    """
    Check that Poisson's ratio lies in [0, 1].

    Raises
    ------
    InvalidArgumentError
        If any element of ``nu`` is outside the closed interval or NaN.
    """
    low, high = POISSON_RATIO_BOUNDS
    nu = np.asarray(nu, dtype=np.float64)
    if not np.all((nu >= low) & (nu <= high)):
        raise InvalidArgumentError(
            f"nu must lie in [{low}, {high}], got {nu.tolist()}"
        )


def validate_source_geometry(
    surface_distance,
    sphere_depth,
    sphere_radius=None,
    max_ratio: float = MAX_RADIUS_DEPTH_RATIO,
) -> GeometryValidationResult:
    """
    Validate a source geometry without raising.

    Parameters
    ----------
    surface_distance, sphere_depth, sphere_radius, max_ratio
        As for :func:`check_source_geometry`.

    Returns
    -------
    GeometryValidationResult
        Validation result with messages and suggestions.

    Examples
    --------
    >>> result = validate_source_geometry([0.0, 1.0], 1.0, 0.5)
    >>> result.is_valid
    True
    >>> result.radius_depth_ratio
    0.5
    >>> result.warnings
    ['INACCURATE SOURCE: ...']
    """
    warnings_ = []
    errors = []
    suggestions = []

    for name, values in (
        ("surface_distance", surface_distance),
        ("sphere_depth", sphere_depth),
        ("sphere_radius", sphere_radius),
    ):
        if values is None:
            continue
        if not _all_non_negative(values):
            errors.append(f"NEGATIVE LENGTH: {name} contains values < 0.")
            suggestions.append(
                f"Lengths are magnitudes in m; pass abs({name}) or fix the sign "
                "convention (depth is positive downward)."
            )

    ratio = None
    if sphere_radius is not None and not errors:
        ratio = _radius_depth_ratio(sphere_radius, sphere_depth)
        if ratio > max_ratio:
            warnings_.append(
                f"INACCURATE SOURCE: radius/depth ratio {ratio:.3g} exceeds "
                f"{max_ratio}; {ACCURACY_MESSAGE}."
            )
            suggestions.append(
                f"Keep sphere_radius below {max_ratio} * min(sphere_depth), "
                "or use a finite-source model."
            )

    return GeometryValidationResult(
        is_valid=len(errors) == 0,
        radius_depth_ratio=ratio,
        warnings=warnings_,
        errors=errors,
        recovery_suggestions=suggestions,
    )


# =============================================================================
# Configuration File Validation
# =============================================================================

# Required sections in config
REQUIRED_CONFIG_SECTIONS = ["source", "material"]

SOURCE_TYPES = ("volume", "pressure")

# Type specifications for validation: (type, min, max)
CONFIG_TYPE_SPECS = {
    "source": {
        "sphere_depth_m": (float, 0.0, 1.0e6),
        "sphere_radius_m": (float, 0.0, 1.0e5),
        "volume_change_m3": (float, -1.0e12, 1.0e12),
        "pressure_change_pa": (float, -1.0e12, 1.0e12),
    },
    "material": {
        "poisson_ratio": (float, 0.0, 1.0),
        "shear_modulus_pa": (float, 1.0e6, 1.0e12),
        "youngs_modulus_pa": (float, 1.0e6, 1.0e12),
    },
    "validation": {
        "max_radius_depth_ratio": (float, 0.0, 1.0),
    },
}


def validate_config_file(
    config_path: Path | str | None = None,
    strict: bool = False,
) -> ConfigValidationResult:
    """
    Load and validate YAML configuration file.

    Provides graceful error handling with helpful messages for:
    - Missing files (falls back to defaults)
    - Malformed YAML (syntax errors)
    - Invalid parameter values (type/range checks, unknown source type)

    Parameters
    ----------
    config_path : Path or str, optional
        Path to YAML config file. If None, uses default_model.yaml.
    strict : bool
        If True, treat warnings as errors. Default False.

    Returns
    -------
    ConfigValidationResult
        Validation result with loaded config and any issues found.
    """
    from mogi_halfspace.config import DEFAULT_CONFIG_PATH, get_default_config

    warnings_ = []
    errors = []
    suggestions = []

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    config = None
    file_exists = config_path.exists()

    if not file_exists:
        warnings_.append(
            f"CONFIG FILE NOT FOUND: '{config_path}' does not exist. "
            "Using built-in defaults."
        )
        suggestions.append(
            f"Create config file at '{config_path}' or use load_config() without path."
        )
        config = get_default_config()
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            if config is None:
                warnings_.append(
                    f"CONFIG FILE EMPTY: '{config_path}' contains no data. "
                    "Using built-in defaults."
                )
                config = get_default_config()
        except yaml.YAMLError as e:
            errors.append(f"YAML PARSE ERROR in '{config_path}': {str(e)}")
            suggestions.append(
                "Check YAML syntax: proper indentation (2 spaces), "
                "colons after keys, no tabs."
            )
            config = get_default_config()
        except IOError as e:
            errors.append(f"FILE READ ERROR for '{config_path}': {str(e)}")
            suggestions.append("Check file permissions and path.")
            config = get_default_config()

    if not isinstance(config, dict):
        errors.append(
            f"INVALID STRUCTURE: top level of '{config_path}' must be a mapping, "
            f"got {type(config).__name__}."
        )
        config = get_default_config()

    defaults = get_default_config()
    for section in REQUIRED_CONFIG_SECTIONS:
        if not isinstance(config.get(section), dict):
            if strict:
                errors.append(
                    f"MISSING REQUIRED SECTION: '{section}' not found in config."
                )
            else:
                warnings_.append(
                    f"MISSING SECTION: '{section}' not found. Using defaults."
                )
            config[section] = defaults[section]

    source_type = config["source"].get("type", "volume")
    if source_type not in SOURCE_TYPES:
        errors.append(
            f"UNKNOWN SOURCE TYPE: source.type='{source_type}', "
            f"expected one of {list(SOURCE_TYPES)}."
        )

    for section, specs in CONFIG_TYPE_SPECS.items():
        if not isinstance(config.get(section), dict):
            continue
        for param, (expected_type, min_val, max_val) in specs.items():
            value = config[section].get(param)
            if value is None:
                continue

            # bool is an int subclass but never a valid number here
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                if strict:
                    errors.append(
                        f"TYPE ERROR: {section}.{param} should be {expected_type.__name__}, "
                        f"got {type(value).__name__}."
                    )
                    continue
                warnings_.append(
                    f"TYPE WARNING: {section}.{param} should be {expected_type.__name__}, "
                    f"got {type(value).__name__}. Attempting conversion."
                )
                try:
                    value = expected_type(value)
                    config[section][param] = value
                except (ValueError, TypeError):
                    errors.append(
                        f"CONVERSION FAILED: Cannot convert {section}.{param} "
                        f"value '{value}' to {expected_type.__name__}."
                    )
                    continue

            if value < min_val or value > max_val:
                warnings_.append(
                    f"RANGE WARNING: {section}.{param}={value} is outside "
                    f"expected range [{min_val}, {max_val}]."
                )

    material = config["material"]
    if source_type == "pressure" and material.get("shear_modulus_pa") is None \
            and material.get("youngs_modulus_pa") is None:
        errors.append(
            "MISSING MODULUS: pressure sources need material.shear_modulus_pa "
            "or material.youngs_modulus_pa."
        )
        suggestions.append("Typical values: shear 1-10 GPa, Young's 10-100 GPa.")

    is_valid = len(errors) == 0
    if strict:
        is_valid = is_valid and len(warnings_) == 0

    return ConfigValidationResult(
        is_valid=is_valid,
        config=config,
        file_path=config_path if file_exists else None,
        warnings=warnings_,
        errors=errors,
        recovery_suggestions=suggestions,
    )
