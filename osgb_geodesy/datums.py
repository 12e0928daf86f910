"""Datum catalog: each datum's ellipsoid and its Helmert transform into WGS84.

Precision varies between datums, and WGS84 itself is not defined to better
than about a metre, so no transformation here should be taken as accurate to
better than a metre; for many datums somewhat less.

Parameter sources:
    ED50:       www.gov.uk/guidance/oil-and-gas-petroleum-operations-notices#pon-4
    Irl1975:    www.osi.ie/wp-content/uploads/2015/05/transformations_booklet.pdf
    NAD27:      en.wikipedia.org/wiki/Helmert_transformation
    NAD83:      www.uvm.edu/giv/resources/WGS84_NAD83.pdf (2009)
    NTF:        geodesie.ign.fr/contenu/fichiers/Changement_systeme_geodesique.pdf
    OSGB36:     www.ordnancesurvey.co.uk/docs/support/guide-coordinate-systems-great-britain.pdf
    Potsdam:    kartoweb.itc.nl/geometrics/Coordinate%20transformations/coordtrans.html
    TokyoJapan: www.geocachingtoolbox.com?page=datumEllipsoidDetails
    WGS72:      www.icao.int/safety/pbn/documentation/eurocontrol/eurocontrol wgs 84 implementation manual.pdf
"""

from types import MappingProxyType

from . import ellipsoids
from .errors import UnknownDatumError
from .schemas import Datum

ED50 = Datum(name="ED50", ellipsoid=ellipsoids.INTL_1924,
             transform=(89.5, 93.8, 123.1, -1.2, 0.0, 0.0, 0.156))
IRL_1975 = Datum(name="Irl1975", ellipsoid=ellipsoids.AIRY_MODIFIED,
                 transform=(-482.530, 130.596, -564.557, -8.150, -1.042, -0.214, -0.631))
NAD27 = Datum(name="NAD27", ellipsoid=ellipsoids.CLARKE_1866,
              transform=(8, -160, -176, 0, 0, 0, 0))
# functionally equivalent to WGS84
NAD83 = Datum(name="NAD83", ellipsoid=ellipsoids.GRS80,
              transform=(1.004, -1.910, -0.515, -0.0015, 0.0267, 0.00034, 0.011))
NTF = Datum(name="NTF", ellipsoid=ellipsoids.CLARKE_1880_IGN,
            transform=(168, 60, -320, 0, 0, 0, 0))
OSGB36 = Datum(name="OSGB36", ellipsoid=ellipsoids.AIRY_1830,
               transform=(-446.448, 125.157, -542.060, 20.4894, -0.1502, -0.2470, -0.8421))
POTSDAM = Datum(name="Potsdam", ellipsoid=ellipsoids.BESSEL_1841,
                transform=(-582, -105, -414, -8.3, 1.04, 0.35, -3.08))
TOKYO_JAPAN = Datum(name="TokyoJapan", ellipsoid=ellipsoids.BESSEL_1841,
                    transform=(148, -507, -685, 0, 0, 0, 0))
WGS72 = Datum(name="WGS72", ellipsoid=ellipsoids.WGS72,
              transform=(0, 0, -4.5, -0.22, 0, 0, 0.554))
WGS84 = Datum(name="WGS84", ellipsoid=ellipsoids.WGS84,
              transform=(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0))

DATUMS = MappingProxyType({
    d.name: d
    for d in (ED50, IRL_1975, NAD27, NAD83, NTF, OSGB36, POTSDAM, TOKYO_JAPAN, WGS72, WGS84)
})


def get_datum(name: str) -> Datum:
    """Look up a catalog datum by name (case-insensitive)."""
    for key, datum in DATUMS.items():
        if key.lower() == name.lower():
            return datum
    raise UnknownDatumError(f"Unknown datum '{name}'")
