"""
Validation Module for Mogi Source Models

Provides geometry checks, Poisson's ratio range checks, and YAML
configuration validation.
"""

from __future__ import annotations

from mogi_halfspace.validation.input_validators import (
    ConfigValidationResult,
    GeometryValidationResult,
    check_source_geometry,
    validate_config_file,
    validate_poisson_ratio,
    validate_source_geometry,
)

__all__ = [
    "GeometryValidationResult",
    "ConfigValidationResult",
    "check_source_geometry",
    "validate_poisson_ratio",
    "validate_source_geometry",
    "validate_config_file",
]
