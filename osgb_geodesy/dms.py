"""Degrees/minutes/seconds text <-> decimal degrees.

Parsing is forgiving about separators (``3° 37′ 09″W``, ``3 37 9 W``,
``-3.619``); formatting zero-pads degrees to three digits and places the
configured separator between components.
"""

import math
import re
from typing import Optional, Union

from . import config
from .errors import InvalidFormatError, OutOfRangeError

# Default decimal places per output format
_DEFAULT_DECIMALS = {
    "d": 4, "deg": 4,
    "dm": 2, "deg+min": 2,
    "dms": 0, "deg+min+sec": 0,
}

_CARDINALS = {
    1: ["N", "E", "S", "W"],
    2: ["N", "NE", "E", "SE", "S", "SW", "W", "NW"],
    3: ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
        "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"],
}


def parse_dms(text: str) -> float:
    """Parse degrees, or degrees/minutes/seconds, into signed decimal degrees.

    Accepts signed decimal degrees, or d/m/s groups separated by any
    non-numeric characters, optionally suffixed by a compass letter. A leading
    '-' or a trailing S/W makes the result negative.

    Raises:
        InvalidFormatError: empty input, or text with no usable d/m/s groups.
        OutOfRangeError: minutes or seconds of 60 or more.
    """
    if text is None or not str(text).strip():
        raise InvalidFormatError("Empty degrees/minutes/seconds string")
    text = str(text).strip()

    # signed decimal degrees without compass letter
    try:
        value = float(text)
    except ValueError:
        value = None
    if value is not None and math.isfinite(value):
        return value

    cleaned = re.sub(r"^-", "", text)
    cleaned = re.sub(r"[NSEWnsew]$", "", cleaned)
    parts = [p for p in re.split(r"[^0-9.]+", cleaned) if p]
    if not 1 <= len(parts) <= 3:
        raise InvalidFormatError(f"Cannot parse degrees/minutes/seconds from '{text}'")

    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        raise InvalidFormatError(f"Cannot parse degrees/minutes/seconds from '{text}'") from None

    if any(n >= 60 for n in numbers[1:]):
        raise OutOfRangeError(f"Minutes and seconds must be below 60 in '{text}'")

    degrees = numbers[0]
    if len(numbers) > 1:
        degrees += numbers[1] / 60
    if len(numbers) > 2:
        degrees += numbers[2] / 3600

    if re.search(r"^-|[WSws]$", text):
        degrees = -degrees
    return degrees


def _pad(value: float, int_digits: int, decimals: int) -> str:
    width = int_digits + (decimals + 1 if decimals else 0)
    return f"{value:0{width}.{decimals}f}"


def to_dms(degrees: float, fmt: Optional[str] = "dms", decimals: Optional[int] = None) -> str:
    """Format unsigned degrees as ``d``, ``dm`` or ``dms`` text.

    The sign is discarded and no compass letter is added. ``decimals`` defaults
    to 4, 2 or 0 for d, dm or dms. An unknown format falls back to ``dms``, or
    to ``d`` when ``decimals`` is given.
    """
    if fmt not in _DEFAULT_DECIMALS:
        fmt = "dms" if decimals is None else "d"
    if decimals is None:
        decimals = _DEFAULT_DECIMALS[fmt]
    sep = config.DMS_SEPARATOR
    degrees = abs(degrees)

    if fmt in ("d", "deg"):
        return _pad(round(degrees, decimals), 3, decimals) + "°"

    if fmt in ("dm", "deg+min"):
        d = math.floor(degrees)
        m = round((degrees * 60) % 60, decimals)
        if m == 60:  # rounded up
            m = 0
            d += 1
        return f"{d:03d}°{sep}{_pad(m, 2, decimals)}′"

    d = math.floor(degrees)
    m = math.floor(degrees * 3600 / 60) % 60
    s = round(degrees * 3600 % 60, decimals)
    if s == 60:  # rounded up
        s = 0
        m += 1
    if m == 60:
        m = 0
        d += 1
    return f"{d:03d}°{sep}{m:02d}′{sep}{_pad(s, 2, decimals)}″"


def _as_degrees(value: Union[float, str]) -> float:
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise InvalidFormatError(f"Not a decimal degree value: '{value}'") from None
    return value


def to_lat(degrees: Union[float, str], fmt: str = "dms", decimals: Optional[int] = None) -> str:
    """Latitude text with N/S suffix and two-digit degrees, e.g. ``51° 12′ 00″ N``."""
    degrees = _as_degrees(degrees)
    text = to_dms(degrees, fmt, decimals)[1:]  # knock off leading '0' for latitude
    return text + config.DMS_SEPARATOR + ("S" if degrees < 0 else "N")


def to_lon(degrees: Union[float, str], fmt: str = "dms", decimals: Optional[int] = None) -> str:
    """Longitude text with E/W suffix and three-digit degrees."""
    degrees = _as_degrees(degrees)
    return to_dms(degrees, fmt, decimals) + config.DMS_SEPARATOR + ("W" if degrees < 0 else "E")


def to_bearing(degrees: float, fmt: str = "dms", decimals: Optional[int] = None) -> str:
    """Bearing text normalised to 0..360°."""
    degrees = (degrees + 360) % 360
    return to_dms(degrees, fmt, decimals).replace("360", "0")  # rounding may reach 360


def compass_point(bearing: float, precision: int = 3) -> str:
    """Compass point for ``bearing``: precision 1 = 4 cardinals, 2 = 8 points, 3 = 16 points."""
    if precision not in _CARDINALS:
        raise OutOfRangeError("Precision must be 1, 2 or 3")
    bearing = ((bearing % 360) + 360) % 360
    cardinals = _CARDINALS[precision]
    points = len(cardinals)
    return cardinals[round(bearing / 360 * points) % points]
