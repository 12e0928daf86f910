"""Vectorised coordinate conversion over numpy arrays.

Same formulas and the same WGS84 hub routing as the per-point functions, for
bulk workloads (thousands of survey points, raster cell centres, ...). Angles
are in decimal degrees; cartesian arrays have shape (n, 3).
"""

import logging
from typing import Optional

import numpy as np

from . import config
from .datums import OSGB36, WGS84
from .errors import NonConvergenceError, OutOfRangeError
from .projection import AIRY_A, F0, N0, PHI0, meridional_arc, project, unproject
from .schemas import Datum, Ellipsoid
from .transform import conversion_hops

logger = logging.getLogger(__name__)


def to_cartesian_array(lats: np.ndarray, lons: np.ndarray, ellipsoid: Ellipsoid) -> np.ndarray:
    """Geocentric x/y/z for each latitude/longitude pair on ``ellipsoid``."""
    phi = np.radians(np.asarray(lats, dtype=float))
    lam = np.radians(np.asarray(lons, dtype=float))
    e2 = ellipsoid.eccentricity_squared
    nu = ellipsoid.major / np.sqrt(1 - e2 * np.sin(phi) ** 2)
    x = nu * np.cos(phi) * np.cos(lam)
    y = nu * np.cos(phi) * np.sin(lam)
    z = nu * (1 - e2) * np.sin(phi)
    return np.column_stack([x, y, z])


def apply_transform_array(xyz: np.ndarray, transform) -> np.ndarray:
    """Linearised Helmert transform applied row-wise to an (n, 3) array."""
    tx, ty, tz, s, rx, ry, rz = transform
    s1 = s / 1e6 + 1
    rx, ry, rz = np.radians(np.array([rx, ry, rz]) / 3600)
    helmert = np.array([
        [s1, -rz, ry],
        [rz, s1, -rx],
        [-ry, rx, s1],
    ])
    return xyz @ helmert.T + np.array([tx, ty, tz])


def to_geodetic_array(xyz: np.ndarray, ellipsoid: Ellipsoid) -> tuple[np.ndarray, np.ndarray]:
    """Bowring inverse: (lats, lons) in degrees for an (n, 3) cartesian array."""
    a = ellipsoid.major
    b = ellipsoid.minor
    e2 = ellipsoid.eccentricity_squared
    eps2 = e2 / (1 - e2)
    x, y, z = xyz[:, 0], xyz[:, 1], xyz[:, 2]
    p = np.hypot(x, y)
    r = np.hypot(p, z)
    beta = np.arctan2(b * z * (1 + eps2 * b / r), a * p)
    phi = np.arctan2(z + eps2 * b * np.sin(beta) ** 3, p - e2 * a * np.cos(beta) ** 3)
    lam = np.arctan2(y, x)
    lons = np.degrees(lam)
    lons = np.where(lons <= -180, 180.0, lons)  # antimeridian is reported as +180°
    return np.degrees(phi), lons


def convert_datum_arrays(
    lats: np.ndarray,
    lons: np.ndarray,
    from_datum: Datum,
    to_datum: Datum,
) -> tuple[np.ndarray, np.ndarray]:
    """Convert arrays of latitude/longitude from one datum to another."""
    lats = np.asarray(lats, dtype=float)
    lons = np.asarray(lons, dtype=float)
    source = from_datum
    for transform, target in conversion_hops(from_datum, to_datum):
        xyz = to_cartesian_array(lats, lons, source.ellipsoid)
        lats, lons = to_geodetic_array(apply_transform_array(xyz, transform), target.ellipsoid)
        source = target
    return lats, lons


def to_grid_arrays(
    lats: np.ndarray,
    lons: np.ndarray,
    datum: Datum = WGS84,
) -> tuple[np.ndarray, np.ndarray]:
    """Project latitude/longitude arrays (on ``datum``) to National Grid eastings/northings."""
    lats, lons = convert_datum_arrays(lats, lons, datum, OSGB36)
    eastings, northings = project(np.radians(lats), np.radians(lons))
    return np.round(eastings, 3), np.round(northings, 3)


def from_grid_arrays(
    eastings: np.ndarray,
    northings: np.ndarray,
    datum: Datum = WGS84,
    max_iterations: Optional[int] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Inverse projection of easting/northing arrays to latitude/longitude on ``datum``.

    Raises:
        NonConvergenceError: any northing fails to converge within
            ``max_iterations`` (defaults to ``config.GRID_MAX_ITERATIONS``).
        OutOfRangeError: any point lands outside the valid latitude/longitude
            range, or yields NaN.
    """
    if max_iterations is None:
        max_iterations = config.GRID_MAX_ITERATIONS
    eastings = np.asarray(eastings, dtype=float)
    northings = np.asarray(northings, dtype=float)

    phi = np.full(northings.shape, PHI0)
    residual = northings - N0
    for _ in range(max_iterations):
        phi = residual / (AIRY_A * F0) + phi
        residual = northings - N0 - meridional_arc(phi)
        if np.all(np.abs(residual) < config.GRID_CONVERGENCE_TOLERANCE):
            break
    else:
        worst = int(np.argmax(np.where(np.isnan(residual), np.inf, np.abs(residual))))
        logger.error("Inverse projection failed to converge for %d point(s)",
                     int(np.count_nonzero(~(np.abs(residual) < config.GRID_CONVERGENCE_TOLERANCE))))
        raise NonConvergenceError(float(northings[worst]), max_iterations, float(residual[worst]))

    lats, lons = np.degrees(unproject(phi, eastings))
    valid = (np.abs(lats) <= 90) & (lons > -180) & (lons <= 180)
    if not np.all(valid):
        bad = int(np.argmin(valid))
        raise OutOfRangeError(
            f"Grid reference {eastings[bad]},{northings[bad]} is outside the projection's "
            f"domain (latitude {lats[bad]}, longitude {lons[bad]})"
        )
    return convert_datum_arrays(lats, lons, OSGB36, datum)
