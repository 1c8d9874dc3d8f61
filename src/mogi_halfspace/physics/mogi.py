"""
Mogi Source Module - Surface Deformation from a Point Source of Dilatation

Computes radial and vertical displacements, ground tilt, and radial and
tangential strain on the free surface of a homogeneous elastic halfspace,
due to a hydrostatic pressure (or volume) change inside a small spherical
cavity at depth (Mogi, 1958).

Mathematical Foundation
-----------------------
Both source descriptions reduce to a single source strength ``src``:

    volume source:    src = dV / pi
    pressure source:  src = a^3 * dP / mu

With R = sqrt(d^2 + r^2) the distance from the source centre and
C = (1 - nu) * src, the surface fields at radial distance r are:

    Ett  = C / R^3                          tangential (hoop) strain
    Ur   = r * Ett                          radial displacement
    Uz   = d * Ett                          vertical displacement
    Tilt = 3 * C * d * r / R^5              d(Uz)/dr
    Err  = C * (d^2 - 2 * r^2) / R^5        radial strain

Sign Convention
---------------
- Strain is positive for extension.
- Inflation (dV > 0 or dP > 0) gives uplift (Uz > 0).

Unit Convention
---------------
- Lengths: m
- Volume change: m^3
- Pressure change and moduli: Pa (1 GPa = 1e9 Pa)

Singularity Handling
--------------------
Directly above a source at zero depth R = 0 and the fields are undefined.
No clamping is applied; the resulting inf/NaN values are returned as-is.

References
----------
Mogi, K. (1958), Relations between the eruptions of various volcanoes and
the deformations of the ground surfaces around them, Bull. Earthquake Res.
Inst. Univ. Tokyo, 36, 99-134.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from mogi_halfspace.exceptions import InvalidArgumentError, MissingArgumentError
from mogi_halfspace.validation.input_validators import (
    check_source_geometry,
    validate_poisson_ratio,
)

from .constants import (
    DEFAULT_POISSON_RATIO,
    MAX_RADIUS_DEPTH_RATIO,
    MOGI_COLUMNS,
    VERBOSE_SIGNIFICANT_DIGITS,
)


def shear_from_youngs(youngs_modulus, nu=DEFAULT_POISSON_RATIO):
    """
    Shear modulus of an isotropic solid from Young's modulus.

    mu = E / (2 * (1 + nu))

    Examples
    --------
    >>> float(shear_from_youngs(10e9, 0.25))
    4000000000.0
    """
    return np.asarray(youngs_modulus, dtype=np.float64) / (2.0 * (1.0 + np.asarray(nu)))


def _format_significant(values, digits: int = VERBOSE_SIGNIFICANT_DIGITS) -> str:
    return " ".join(f"{v:.{digits}g}" for v in np.ravel(values))


def mogi_kernel(
    src,
    surface_distance,
    sphere_depth,
    nu=DEFAULT_POISSON_RATIO,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Evaluate the closed-form Mogi surface fields for a given source strength.

    Parameters
    ----------
    src : array_like
        Source strength (see module docstring).
    surface_distance : array_like
        Radial distance from the source axis, projected onto the surface, in m.
    sphere_depth : array_like
        Depth of the source centre in m (positive downward).
    nu : array_like, optional
        Poisson's ratio of the halfspace, in [0, 1]. Default 0.25.
    verbose : bool, optional
        Print Poisson's ratio and the source constant(s), one value per
        element of ``nu`` and of ``(1 - nu) * src`` as given. Default False.

    Returns
    -------
    pd.DataFrame
        Columns ``radial_distance, Ur, Uz, Ett, Err, Tilt`` with one row per
        element of the broadcast inputs, in input order.

    Raises
    ------
    InvalidArgumentError
        If any ``nu`` is outside [0, 1].

    Examples
    --------
    >>> table = mogi_kernel(1e-5 / np.pi, [0.0, 1.0], 1.0)
    >>> list(table.columns)
    ['radial_distance', 'Ur', 'Uz', 'Ett', 'Err', 'Tilt']
    >>> len(table)
    2
    """
    validate_poisson_ratio(nu)

    if verbose:
        nu_in = np.asarray(nu, dtype=np.float64)
        c_in = (1.0 - nu_in) * np.asarray(src, dtype=np.float64)
        print(f"Poissons ratio:  {_format_significant(nu_in)}")
        print(f"constant(s):  {_format_significant(c_in)}")

    src, r, d, nu = (
        a.ravel()
        for a in np.broadcast_arrays(
            np.asarray(src, dtype=np.float64),
            np.asarray(surface_distance, dtype=np.float64),
            np.asarray(sphere_depth, dtype=np.float64),
            np.asarray(nu, dtype=np.float64),
        )
    )

    # radial distance from source
    radial_distance = np.sqrt(d**2 + r**2)
    c = (1.0 - nu) * src

    # R = 0 gives inf/NaN, which are returned unchanged
    with np.errstate(divide="ignore", invalid="ignore"):
        ett = c / radial_distance**3
        ur = r * ett
        uz = d * ett
        tilt = 3.0 * c * d * r / radial_distance**5
        err = c * (d**2 - 2.0 * r**2) / radial_distance**5

    return pd.DataFrame(
        dict(zip(MOGI_COLUMNS, (radial_distance, ur, uz, ett, err, tilt)))
    )


def mogi_volume(
    surface_distance,
    sphere_depth,
    volume_change,
    nu=DEFAULT_POISSON_RATIO,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Surface deformation from a volume change of a Mogi source.

    Parameters
    ----------
    surface_distance : array_like
        Radial surface distance from the source axis in m.
    sphere_depth : array_like
        Depth of the source centre in m.
    volume_change : array_like
        Volume change of the cavity in m^3 (inflation positive).
    nu : array_like, optional
        Poisson's ratio. Default 0.25.
    verbose : bool, optional
        Print diagnostics from the kernel.

    Returns
    -------
    pd.DataFrame
        Deformation table, see :func:`mogi_kernel`.

    Raises
    ------
    InvalidArgumentError
        If any length is negative or ``nu`` is outside [0, 1].

    Examples
    --------
    >>> table = mogi_volume(1.0, 1.0, 1e-5)
    >>> float(table["radial_distance"].iloc[0])  # sqrt(2)
    1.4142135623730951
    """
    check_source_geometry(surface_distance, sphere_depth)
    validate_poisson_ratio(nu)
    src = np.asarray(volume_change, dtype=np.float64) / np.pi
    return mogi_kernel(src, surface_distance, sphere_depth, nu=nu, verbose=verbose)


def mogi_pressure(
    surface_distance,
    sphere_depth,
    sphere_radius,
    pressure_change,
    shear_modulus=None,
    youngs_modulus=None,
    nu=DEFAULT_POISSON_RATIO,
    verbose: bool = False,
    max_ratio: float = MAX_RADIUS_DEPTH_RATIO,
) -> pd.DataFrame:
    """
    Surface deformation from a pressure change inside a Mogi source.

    Parameters
    ----------
    surface_distance : array_like
        Radial surface distance from the source axis in m.
    sphere_depth : array_like
        Depth of the source centre in m.
    sphere_radius : array_like
        Radius of the cavity in m. Should be much smaller than the depth.
    pressure_change : array_like
        Hydrostatic pressure change in Pa (inflation positive).
    shear_modulus : array_like, optional
        Shear modulus (rigidity) of the halfspace in Pa.
    youngs_modulus : array_like, optional
        Young's modulus in Pa. Required when ``shear_modulus`` is omitted.
    nu : array_like, optional
        Poisson's ratio. Default 0.25.
    verbose : bool, optional
        Print diagnostics from the kernel.
    max_ratio : float, optional
        Radius/depth ratio above which an AccuracyWarning is issued.

    Returns
    -------
    pd.DataFrame
        Deformation table, see :func:`mogi_kernel`.

    Raises
    ------
    InvalidArgumentError
        If any length is negative or ``nu`` is outside [0, 1].
    MissingArgumentError
        If neither ``shear_modulus`` nor ``youngs_modulus`` is given.

    Warns
    -----
    AccuracyWarning
        If the cavity is not small compared to its depth.

    Examples
    --------
    >>> a = mogi_pressure([0.0, 1.0], 1.0, 0.01, 1e10, shear_modulus=3.08e9)
    >>> b = mogi_pressure([0.0, 1.0], 1.0, 0.01, 1e10, youngs_modulus=7.7e9)
    >>> np.allclose(a.to_numpy(), b.to_numpy())
    True
    """
    check_source_geometry(surface_distance, sphere_depth, sphere_radius, max_ratio)
    validate_poisson_ratio(nu)

    if shear_modulus is None:
        if youngs_modulus is None:
            raise MissingArgumentError(
                "youngs_modulus cannot be missing if shear_modulus is missing"
            )
        shear_modulus = shear_from_youngs(youngs_modulus, nu)

    src = (
        np.asarray(sphere_radius, dtype=np.float64) ** 3
        * np.asarray(pressure_change, dtype=np.float64)
        / np.asarray(shear_modulus, dtype=np.float64)
    )
    return mogi_kernel(src, surface_distance, sphere_depth, nu=nu, verbose=verbose)


def mogi_from_config(
    surface_distance,
    config: dict[str, Any] | None = None,
    verbose: bool | None = None,
) -> pd.DataFrame:
    """
    Evaluate a Mogi source described by a configuration mapping.

    Parameters
    ----------
    surface_distance : array_like
        Radial surface distances in m.
    config : dict, optional
        Mapping with ``source`` and ``material`` sections, as produced by
        :func:`mogi_halfspace.config.load_config` or a preset. Default is the
        project's default config.
    verbose : bool, optional
        Overrides ``output.verbose`` from the config.

    Returns
    -------
    pd.DataFrame
        Deformation table, see :func:`mogi_kernel`.

    Raises
    ------
    InvalidArgumentError
        If ``source.type`` is neither "volume" nor "pressure".
    """
    if config is None:
        from mogi_halfspace.config import load_config

        config = load_config()

    source = config["source"]
    material = config.get("material") or {}
    if verbose is None:
        verbose = bool((config.get("output") or {}).get("verbose", False))
    nu = material.get("poisson_ratio", DEFAULT_POISSON_RATIO)
    source_type = source.get("type", "volume")

    if source_type == "volume":
        return mogi_volume(
            surface_distance,
            source["sphere_depth_m"],
            source["volume_change_m3"],
            nu=nu,
            verbose=verbose,
        )
    if source_type == "pressure":
        return mogi_pressure(
            surface_distance,
            source["sphere_depth_m"],
            source["sphere_radius_m"],
            source["pressure_change_pa"],
            shear_modulus=material.get("shear_modulus_pa"),
            youngs_modulus=material.get("youngs_modulus_pa"),
            nu=nu,
            verbose=verbose,
            max_ratio=(config.get("validation") or {}).get(
                "max_radius_depth_ratio", MAX_RADIUS_DEPTH_RATIO
            ),
        )
    raise InvalidArgumentError(
        f"Unknown source type: {source_type}. Use 'volume' or 'pressure'."
    )
