"""Datum conversion routed through WGS84.

Helmert parameters are only published between each datum and WGS84, so any
other pair of datums is converted in two hops with WGS84 in the middle.
"""

import logging

from .datums import WGS84
from .geocentric import to_cartesian, to_geodetic
from .latlon import LatLon
from .schemas import Datum, HelmertParams

logger = logging.getLogger(__name__)


def inverse_transform(transform: HelmertParams) -> HelmertParams:
    """Negate every parameter; the exact inverse of the linearised Helmert form."""
    return tuple(-p for p in transform)


def conversion_hops(from_datum: Datum, to_datum: Datum) -> list[tuple[HelmertParams, Datum]]:
    """Helmert parameters and target datum for each hop from ``from_datum`` to ``to_datum``.

    Returns an empty list when the datums are the same, one hop when either
    end is WGS84 and two hops otherwise.
    """
    if from_datum == to_datum:
        return []
    if from_datum == WGS84:
        return [(to_datum.transform, to_datum)]
    if to_datum == WGS84:
        # catalog entry is never modified
        return [(inverse_transform(from_datum.transform), WGS84)]
    return conversion_hops(from_datum, WGS84) + conversion_hops(WGS84, to_datum)


def convert_datum(point: LatLon, to_datum: Datum) -> LatLon:
    """Re-express ``point`` (on its own datum) as latitude/longitude on ``to_datum``.

    Each hop goes geodetic -> cartesian on the source ellipsoid, applies the
    Helmert transform, then cartesian -> geodetic on the target ellipsoid.
    """
    hops = conversion_hops(point.datum, to_datum)
    if not hops:
        return point.model_copy()

    logger.debug("Converting %s from %s to %s in %d hop(s)", point, point.datum, to_datum, len(hops))
    for transform, target in hops:
        cartesian = to_cartesian(point).apply_transform(transform)
        point = to_geodetic(cartesian, target)
    return point
