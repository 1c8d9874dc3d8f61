"""
Map-View Evaluation of Mogi Sources

Helpers for evaluating the axisymmetric Mogi fields on a Cartesian surface
grid centred above the source, e.g. for contour maps.
"""

from __future__ import annotations

import numpy as np

from .constants import DEFAULT_POISSON_RATIO, MOGI_COLUMNS, UNDRAINED_POISSON_RATIO
from .mogi import mogi_volume


def cart2pol(x, y) -> tuple[np.ndarray, np.ndarray]:
    """
    Convert Cartesian coordinates to polar coordinates.

    Returns
    -------
    theta : np.ndarray
        Azimuth in radians, in (-pi, pi].
    radius : np.ndarray
        Distance from the origin.

    Examples
    --------
    >>> theta, radius = cart2pol(3.0, 4.0)
    >>> float(radius)
    5.0
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return np.arctan2(y, x), np.hypot(x, y)


def surface_grid(x, y) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Build a surface grid and the radial distance of each node from the origin.

    Parameters
    ----------
    x, y : array_like
        1D coordinate vectors in m.

    Returns
    -------
    xx, yy, radius : np.ndarray
        Arrays with shape (len(y), len(x)).
    """
    xx, yy = np.meshgrid(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
    _, radius = cart2pol(xx, yy)
    return xx, yy, radius


def mogi_volume_grid(
    x,
    y,
    sphere_depth: float,
    volume_change: float,
    nu: float = DEFAULT_POISSON_RATIO,
    verbose: bool = False,
) -> dict[str, np.ndarray]:
    """
    Evaluate a volume source on a map-view grid centred above it.

    Parameters
    ----------
    x, y : array_like
        1D coordinate vectors in m.
    sphere_depth : float
        Source depth in m.
    volume_change : float
        Volume change in m^3.
    nu : float, optional
        Poisson's ratio. Default 0.25.
    verbose : bool, optional
        Print kernel diagnostics.

    Returns
    -------
    dict[str, np.ndarray]
        One (len(y), len(x)) array per deformation column.

    Examples
    --------
    >>> fields = mogi_volume_grid([-1.0, 0.0, 1.0], [0.0, 1.0], 1.0, 1e-5)
    >>> fields["Uz"].shape
    (2, 3)
    """
    _, _, radius = surface_grid(x, y)
    table = mogi_volume(radius.ravel(), sphere_depth, volume_change, nu=nu, verbose=verbose)
    return {name: table[name].to_numpy().reshape(radius.shape) for name in MOGI_COLUMNS}


def undrained_response(
    x,
    y,
    sphere_depth: float,
    volume_change: float,
    nu_drained: float = DEFAULT_POISSON_RATIO,
    nu_undrained: float = UNDRAINED_POISSON_RATIO,
    field: str = "Uz",
) -> np.ndarray:
    """
    Drained minus undrained response of one deformation field.

    A fluid-saturated crust responds to rapid loading with a higher Poisson's
    ratio than at long times. Since the fields scale with (1 - nu), the
    difference is positive for inflation when nu_undrained > nu_drained.

    Returns
    -------
    np.ndarray
        Array with shape (len(y), len(x)).

    Raises
    ------
    KeyError
        If ``field`` is not a deformation column.
    """
    if field not in MOGI_COLUMNS:
        raise KeyError(f"Unknown field '{field}'. Available: {list(MOGI_COLUMNS)}")
    drained = mogi_volume_grid(x, y, sphere_depth, volume_change, nu=nu_drained)
    undrained = mogi_volume_grid(x, y, sphere_depth, volume_change, nu=nu_undrained)
    return drained[field] - undrained[field]
