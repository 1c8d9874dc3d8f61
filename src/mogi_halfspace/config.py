"""
Configuration Management for Mogi Source Models

Loads source and material parameters from YAML config files with fallback
to hardcoded defaults in physics.constants.

Usage:
    from mogi_halfspace.config import load_config, get_config_path

    cfg = load_config()  # Load default config
    cfg = load_config("configs/custom.yaml")  # Load custom config

    # Access parameters
    nu = cfg["material"]["poisson_ratio"]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# File is at: src/mogi_halfspace/config.py
# Project root: src/mogi_halfspace -> src -> project_root
_THIS_FILE = Path(__file__)
PROJECT_ROOT = _THIS_FILE.parent.parent.parent

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "default_model.yaml"


def get_config_path(config_name: str = "default_model.yaml") -> Path:
    """
    Get the full path to a config file.

    Parameters
    ----------
    config_name : str
        Name of the config file (with or without .yaml extension).

    Returns
    -------
    Path
        Full path to the config file.
    """
    if not config_name.endswith(".yaml"):
        config_name = f"{config_name}.yaml"
    return PROJECT_ROOT / "configs" / config_name


def get_default_config() -> dict[str, Any]:
    """
    Return hardcoded default configuration.

    Used as fallback when config file is missing. The source matches the
    classic 1 m deep, 1e-5 m^3 inflation example.
    """
    # Import here to avoid circular imports
    from mogi_halfspace.physics.constants import (
        DEFAULT_POISSON_RATIO,
        MAX_RADIUS_DEPTH_RATIO,
    )

    return {
        "source": {
            "type": "volume",
            "sphere_depth_m": 1.0,
            "volume_change_m3": 1.0e-5,
            "sphere_radius_m": 0.01,
            "pressure_change_pa": 1.0e10,
        },
        "material": {
            "poisson_ratio": DEFAULT_POISSON_RATIO,
            "shear_modulus_pa": 3.08e9,
            "youngs_modulus_pa": None,
        },
        "validation": {
            "max_radius_depth_ratio": MAX_RADIUS_DEPTH_RATIO,
        },
        "output": {
            "verbose": False,
        },
    }


def _read_config(config_path: str | Path | None) -> tuple[dict[str, Any], list[str]]:
    """Read a model config, returning defaults plus a message on any failure."""
    path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

    if not path.exists():
        return get_default_config(), [f"Config file not found: {path}. Using defaults."]

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        problem = f"YAML parse error in {path}: {e}. Check indentation and syntax."
    except OSError as e:
        problem = f"Cannot read {path}: {e}."
    else:
        if config is not None:
            return config, []
        problem = f"Config file is empty: {path}."

    return get_default_config(), [f"{problem} Using defaults."]


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load a model configuration, falling back to defaults.

    A missing, empty or unparsable file yields :func:`get_default_config`.
    Use :func:`load_config_safe` or
    :func:`mogi_halfspace.validation.validate_config_file` to see why.

    Examples
    --------
    >>> cfg = load_config()
    >>> cfg["material"]["poisson_ratio"]
    0.25
    >>> cfg["source"]["type"]
    'volume'
    """
    config, _ = _read_config(config_path)
    return config


def load_config_safe(
    config_path: str | Path | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """
    Load a model configuration and report what went wrong.

    Returns
    -------
    tuple[dict, list[str]]
        The config (defaults on failure) and a list of messages, empty when
        the file loaded cleanly.
    """
    return _read_config(config_path)


def save_config(config: dict[str, Any], config_path: str | Path) -> None:
    """
    Save configuration to a YAML file.

    Parameters
    ----------
    config : dict
        Configuration dictionary.
    config_path : str or Path
        Output path for the YAML file.
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
