"""Ordnance Survey National Grid transverse Mercator projection.

Converts OSGB36 latitude/longitude to grid easting/northing and back using
the Redfearn series as published by the OS ("A guide to coordinate systems in
Great Britain", annex C). The formulation is inferior to Krüger's as used by
e.g. Karney 2011, but is the one the grid is defined by.

The series helpers accept floats or numpy arrays alike.
"""

import logging
import math
from typing import Optional

import numpy as np

from . import config
from .datums import OSGB36, WGS84
from .errors import NonConvergenceError, OutOfRangeError
from .gridref import OsGridRef
from .latlon import LatLon
from .schemas import Datum
from .transform import convert_datum

logger = logging.getLogger(__name__)

# Airy 1830 ellipsoid (OSGB36)
AIRY_A = OSGB36.ellipsoid.major
AIRY_B = OSGB36.ellipsoid.minor
AIRY_E2 = 1 - (AIRY_B ** 2) / (AIRY_A ** 2)  # eccentricity squared

# National Grid projection constants
F0 = 0.9996012717              # scale factor on central meridian
PHI0 = math.radians(49.0)      # latitude of true origin
LAMBDA0 = math.radians(-2.0)   # longitude of true origin and central meridian
N0 = -100000.0                 # northing of true origin
E0 = 400000.0                  # easting of true origin


def meridional_arc(phi, a: float = AIRY_A, b: float = AIRY_B):
    """Meridional arc (metres, scaled by F0) from the true origin latitude to ``phi`` (radians)."""
    n = (a - b) / (a + b)
    n2 = n * n
    n3 = n2 * n

    dphi = phi - PHI0
    sphi = phi + PHI0

    ma = (1 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * dphi
    mb = (3 * n + 3 * n2 + (21.0 / 8.0) * n3) * np.sin(dphi) * np.cos(sphi)
    mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * np.sin(2 * dphi) * np.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * np.sin(3 * dphi) * np.cos(3 * sphi)

    return b * F0 * (ma - mb + mc - md)


def radii(phi):
    """Transverse (nu) and meridional (rho) radii of curvature at ``phi``, and eta²."""
    sin2 = np.sin(phi) ** 2
    nu = AIRY_A * F0 / np.sqrt(1 - AIRY_E2 * sin2)
    rho = AIRY_A * F0 * (1 - AIRY_E2) / (1 - AIRY_E2 * sin2) ** 1.5
    return nu, rho, nu / rho - 1


def project(phi, lam):
    """Redfearn forward series: OSGB36 radians -> unrounded (easting, northing)."""
    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    cos3 = cos_phi ** 3
    cos5 = cos_phi ** 5
    tan2 = np.tan(phi) ** 2
    tan4 = tan2 * tan2
    nu, rho, eta2 = radii(phi)

    I = meridional_arc(phi) + N0
    II = (nu / 2) * sin_phi * cos_phi
    III = (nu / 24) * sin_phi * cos3 * (5 - tan2 + 9 * eta2)
    IIIA = (nu / 720) * sin_phi * cos5 * (61 - 58 * tan2 + tan4)
    IV = nu * cos_phi
    V = (nu / 6) * cos3 * (nu / rho - tan2)
    VI = (nu / 120) * cos5 * (5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2)

    dlam = lam - LAMBDA0
    northing = I + II * dlam ** 2 + III * dlam ** 4 + IIIA * dlam ** 6
    easting = E0 + IV * dlam + V * dlam ** 3 + VI * dlam ** 5
    return easting, northing


def unproject(phi, easting):
    """Redfearn inverse series from footpoint latitude ``phi``: -> OSGB36 (lat, lon) radians."""
    nu, rho, eta2 = radii(phi)
    tan_phi = np.tan(phi)
    tan2 = tan_phi * tan_phi
    tan4 = tan2 * tan2
    tan6 = tan4 * tan2
    sec_phi = 1 / np.cos(phi)
    nu3 = nu ** 3
    nu5 = nu ** 5
    nu7 = nu ** 7

    VII = tan_phi / (2 * rho * nu)
    VIII = tan_phi / (24 * rho * nu3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_phi / (720 * rho * nu5) * (61 + 90 * tan2 + 45 * tan4)
    X = sec_phi / nu
    XI = sec_phi / (6 * nu3) * (nu / rho + 2 * tan2)
    XII = sec_phi / (120 * nu5) * (5 + 28 * tan2 + 24 * tan4)
    XIIA = sec_phi / (5040 * nu7) * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)

    de = easting - E0
    lat = phi - VII * de ** 2 + VIII * de ** 4 - IX * de ** 6
    lon = LAMBDA0 + X * de - XI * de ** 3 + XII * de ** 5 - XIIA * de ** 7
    return lat, lon


def to_grid_ref(point: LatLon) -> OsGridRef:
    """Project a latitude/longitude point onto the National Grid.

    Points on other datums are converted to OSGB36 first; ``point`` itself is
    left untouched. Easting/northing are rounded to millimetres.
    """
    if point.datum != OSGB36:
        point = convert_datum(point, OSGB36)

    easting, northing = project(math.radians(point.latitude), math.radians(point.longitude))

    grid_ref = OsGridRef(easting=round(float(easting), 3), northing=round(float(northing), 3))
    if not grid_ref.in_standard_range:
        logger.warning("Grid reference %r falls outside the standard National Grid area", grid_ref)
    return grid_ref


def _footpoint_latitude(northing: float, max_iterations: int) -> float:
    """Latitude whose meridional arc matches ``northing``, by fixed-point iteration."""
    phi = PHI0
    residual = northing - N0
    for _ in range(max_iterations):
        phi = residual / (AIRY_A * F0) + phi
        residual = northing - N0 - float(meridional_arc(phi))
        if abs(residual) < config.GRID_CONVERGENCE_TOLERANCE:
            return phi
    logger.error("Inverse projection failed to converge for northing %s", northing)
    raise NonConvergenceError(northing, max_iterations, residual)


def to_lat_lon(
    grid_ref: OsGridRef,
    datum: Datum = WGS84,
    max_iterations: Optional[int] = None,
) -> LatLon:
    """Latitude/longitude of the south-west corner of ``grid_ref``.

    The point is computed on OSGB36 and converted to ``datum`` when that
    differs.

    Raises:
        NonConvergenceError: the latitude iteration exceeded ``max_iterations``
            (defaults to ``config.GRID_MAX_ITERATIONS``), which happens only
            for input far outside the grid's domain.
        OutOfRangeError: the series lands outside ±90° latitude or
            (-180°, 180°] longitude, or yields NaN.
    """
    if max_iterations is None:
        max_iterations = config.GRID_MAX_ITERATIONS

    phi = _footpoint_latitude(grid_ref.northing, max_iterations)
    lat, lon = unproject(phi, grid_ref.easting)
    lat, lon = math.degrees(lat), math.degrees(lon)

    # NaN fails every comparison
    if not (-90 <= lat <= 90 and -180 < lon <= 180):
        raise OutOfRangeError(
            f"Grid reference {grid_ref.easting},{grid_ref.northing} is outside the projection's "
            f"domain (latitude {lat}, longitude {lon})"
        )

    point = LatLon(latitude=lat, longitude=lon, datum=OSGB36)
    if datum != OSGB36:
        point = convert_datum(point, datum)
    return point
