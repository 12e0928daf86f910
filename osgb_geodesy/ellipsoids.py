"""Reference ellipsoid catalog: major axis (a), minor axis (b) and flattening (f)."""

from types import MappingProxyType

from .errors import UnknownDatumError
from .schemas import Ellipsoid

WGS84 = Ellipsoid(name="WGS84", major=6378137, minor=6356752.314245, flattening=1 / 298.257223563)
AIRY_1830 = Ellipsoid(name="Airy1830", major=6377563.396, minor=6356256.909, flattening=1 / 299.3249646)
AIRY_MODIFIED = Ellipsoid(name="AiryModified", major=6377340.189, minor=6356034.448, flattening=1 / 299.3249646)
BESSEL_1841 = Ellipsoid(name="Bessel1841", major=6377397.155, minor=6356078.962818, flattening=1 / 299.1528128)
CLARKE_1866 = Ellipsoid(name="Clarke1866", major=6378206.4, minor=6356583.8, flattening=1 / 294.978698214)
CLARKE_1880_IGN = Ellipsoid(name="Clarke1880IGN", major=6378249.2, minor=6356515.0, flattening=1 / 293.466021294)
GRS80 = Ellipsoid(name="GRS80", major=6378137, minor=6356752.314140, flattening=1 / 298.257222101)
INTL_1924 = Ellipsoid(name="Intl1924", major=6378388, minor=6356911.946, flattening=1 / 297)  # aka Hayford
WGS72 = Ellipsoid(name="WGS72", major=6378135, minor=6356750.5, flattening=1 / 298.26)

ELLIPSOIDS = MappingProxyType({
    e.name: e
    for e in (
        WGS84, AIRY_1830, AIRY_MODIFIED, BESSEL_1841, CLARKE_1866,
        CLARKE_1880_IGN, GRS80, INTL_1924, WGS72,
    )
})


def get_ellipsoid(name: str) -> Ellipsoid:
    """Look up a catalog ellipsoid by name (case-insensitive)."""
    for key, ellipsoid in ELLIPSOIDS.items():
        if key.lower() == name.lower():
            return ellipsoid
    raise UnknownDatumError(f"Unknown ellipsoid '{name}'")
