"""Geodetic latitude/longitude points tied to a datum."""

from typing import Optional

from pydantic import BaseModel, Field

from . import dms
from .datums import WGS84
from .schemas import Datum


class LatLon(BaseModel):
    """Latitude/longitude in decimal degrees on a given datum.

    Points are immutable: every conversion returns a new point. Two points are
    equal only when latitude, longitude and datum all match, so the same place
    expressed on two datums compares unequal.

    Example:
        >>> from osgb_geodesy.datums import OSGB36
        >>> greenwich = LatLon(latitude=51.4778, longitude=-0.0016)
        >>> round(greenwich.convert_datum(OSGB36).latitude, 4)
        51.4773
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(gt=-180, le=180)
    datum: Datum = WGS84

    model_config = {"frozen": True}

    def convert_datum(self, to_datum: Datum) -> "LatLon":
        from .transform import convert_datum
        return convert_datum(self, to_datum)

    def to_cartesian(self):
        from .geocentric import to_cartesian
        return to_cartesian(self)

    def to_grid_ref(self):
        """OS National Grid reference for this point, converting to OSGB36 first if needed."""
        from .projection import to_grid_ref
        return to_grid_ref(self)

    def to_string(self, fmt: str = "dms", decimals: Optional[int] = None) -> str:
        """Render as ``'<lat>, <lon>'`` in ``d``, ``dm`` or ``dms`` format."""
        return f"{dms.to_lat(self.latitude, fmt, decimals)}, {dms.to_lon(self.longitude, fmt, decimals)}"

    def __str__(self):
        return self.to_string()
