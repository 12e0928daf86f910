"""Conversion between geodetic latitude/longitude and geocentric cartesian coordinates.

Height above the ellipsoid is taken as zero throughout.
"""

import math

from .latlon import LatLon
from .schemas import Datum
from .vector import Vector3D


def to_cartesian(point: LatLon) -> Vector3D:
    """Geocentric x/y/z (metres) of ``point`` on its own datum's ellipsoid."""
    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude)
    a = point.datum.ellipsoid.major
    e2 = point.datum.ellipsoid.eccentricity_squared

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)

    # radius of curvature in prime vertical
    nu = a / math.sqrt(1 - e2 * sin_phi * sin_phi)

    return Vector3D(
        x=nu * cos_phi * math.cos(lam),
        y=nu * cos_phi * math.sin(lam),
        z=nu * (1 - e2) * sin_phi,
    )


def to_geodetic(vector: Vector3D, datum: Datum) -> LatLon:
    """Latitude/longitude of a geocentric point on ``datum``'s ellipsoid.

    Bowring's (1985) closed form: micrometre precision with no iteration, and
    stable near the poles and the equator.
    """
    a = datum.ellipsoid.major
    b = datum.ellipsoid.minor
    e2 = datum.ellipsoid.eccentricity_squared
    eps2 = e2 / (1 - e2)                                # 2nd eccentricity squared
    x, y, z = vector.x, vector.y, vector.z
    p = math.sqrt(x * x + y * y)                        # distance from minor axis
    r = math.sqrt(p * p + z * z)                        # polar radius

    # parametric latitude (Bowring eqn 17); atan2 keeps p == 0 well-defined
    beta = math.atan2(b * z * (1 + eps2 * b / r), a * p)
    sin_beta = math.sin(beta)
    cos_beta = math.cos(beta)

    # geodetic latitude (Bowring eqn 18)
    phi = math.atan2(z + eps2 * b * sin_beta ** 3, p - e2 * a * cos_beta ** 3)
    lon = math.degrees(math.atan2(y, x))
    if lon <= -180:  # antimeridian is reported as +180°
        lon = 180.0

    return LatLon(latitude=math.degrees(phi), longitude=lon, datum=datum)
