"""OS National Grid references: numeric easting/northing and the lettered text form.

The grid is split into 100 km squares, each named by two letters drawn from
the 25-letter alphabet without 'I'. The first letter picks a 500 km square
and the second a 100 km square within it; the false origin sits in square SV.
"""

import math
import re
from typing import Optional

from pydantic import BaseModel

from . import config
from .datums import WGS84
from .errors import InvalidFormatError, OutOfRangeError
from .schemas import Datum

MAX_EASTING = 700000
MAX_NORTHING = 1300000

_NUMERIC_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)$")
_LETTERED_RE = re.compile(r"^([A-Z]{2})\s*([0-9\s]*)$")


def _format_metres(value: float) -> str:
    """Six-digit (zero-padded) metres, with millimetres only when non-zero."""
    text = f"{value:010.3f}"
    return text[:-4] if text.endswith(".000") else text


def _tile_letters(e100k: int, n100k: int) -> str:
    l1 = (19 - n100k) - (19 - n100k) % 5 + (e100k + 10) // 5
    l2 = (19 - n100k) * 5 % 25 + e100k % 5
    # compensate for skipped 'I'
    if l1 > 7:
        l1 += 1
    if l2 > 7:
        l2 += 1
    return chr(l1 + ord("A")) + chr(l2 + ord("A"))


def _tile_indices(letters: str) -> tuple[int, int]:
    l1 = ord(letters[0]) - ord("A")
    l2 = ord(letters[1]) - ord("A")
    # shuffle down letters after 'I'
    if l1 > 7:
        l1 -= 1
    if l2 > 7:
        l2 -= 1
    # letters before 'C' in first place are west of the grid; fmod keeps them negative
    e100k = int(math.fmod(l1 - 2, 5)) * 5 + l2 % 5
    n100k = (19 - (l1 // 5) * 5) - l2 // 5
    return e100k, n100k


class OsGridRef(BaseModel):
    """Easting/northing in metres from the OS National Grid false origin (OSGB36).

    Example:
        >>> OsGridRef(easting=438700, northing=114800).to_string(6)
        'SU 387 148'
    """

    easting: float
    northing: float

    model_config = {"frozen": True}

    @property
    def in_standard_range(self) -> bool:
        return 0 <= self.easting < MAX_EASTING and 0 <= self.northing < MAX_NORTHING

    def to_lat_lon(self, datum: Datum = WGS84, max_iterations: Optional[int] = None):
        """Latitude/longitude of the south-west corner of this grid square.

        Defaults to WGS84; pass ``datums.OSGB36`` for the historical grid datum.
        """
        from .projection import to_lat_lon
        return to_lat_lon(self, datum, max_iterations=max_iterations)

    def to_string(self, digits: Optional[int] = None) -> str:
        """Lettered grid reference at ``digits`` precision (10 = metres).

        ``digits`` must be even and 0..16; 0 returns the numeric ``E,N`` form
        in metres, which also accepts references outside the lettered grid.

        Raises:
            OutOfRangeError: invalid precision, or a point outside the 100 km
                squares SV..JM.
        """
        if digits is None:
            digits = config.GRID_DEFAULT_DIGITS
        if digits % 2 != 0 or not 0 <= digits <= 16:
            raise OutOfRangeError(f"Invalid grid reference precision {digits}")

        e, n = self.easting, self.northing
        if digits == 0:
            return f"{_format_metres(e)},{_format_metres(n)}"

        e100k = math.floor(e / 100000)
        n100k = math.floor(n / 100000)
        if not (0 <= e100k <= 6 and 0 <= n100k <= 12):
            raise OutOfRangeError(f"Easting {e}, northing {n} is outside the lettered National Grid")

        # strip 100km-grid indices and reduce precision
        half = digits // 2
        scale = 10 ** (5 - half)
        e_part = math.floor(round((e % 100000) / scale, 6))
        n_part = math.floor(round((n % 100000) / scale, 6))

        return f"{_tile_letters(e100k, n100k)} {e_part:0{half}d} {n_part:0{half}d}"

    def __str__(self):
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "OsGridRef":
        """Parse a lettered (``'SU 387 148'``, ``'SU387148'``) or numeric (``'438700,114800'``) reference.

        Digit groups are read as the leading digits of a metre (or finer)
        value, so ``'SU 387 148'`` is the south-west corner of a 100 m square.

        Raises:
            InvalidFormatError: empty or malformed text, letters naming a
                square outside SV..JM, or digit groups of differing lengths
                or longer than 8 digits.
        """
        if text is None or not str(text).strip():
            raise InvalidFormatError("Empty grid reference")
        text = str(text).strip()

        match = _NUMERIC_RE.match(text)
        if match:
            return cls(easting=float(match.group(1)), northing=float(match.group(2)))

        match = _LETTERED_RE.match(text.upper())
        if not match:
            raise InvalidFormatError(f"Invalid grid reference '{text}'")
        letters, digits = match.group(1), match.group(2)
        if "I" in letters:
            raise InvalidFormatError(f"Invalid grid letters '{letters}'")

        groups = digits.split()
        if len(groups) == 1:
            # e/n not whitespace separated: split half way
            half = len(groups[0]) // 2
            groups = [groups[0][:half], groups[0][half:]]
        elif not groups:
            groups = ["", ""]
        if len(groups) != 2 or len(groups[0]) != len(groups[1]):
            raise InvalidFormatError(f"Mismatched easting/northing digits in '{text}'")
        if len(groups[0]) > 8:
            raise InvalidFormatError(f"Too many digits in '{text}'")

        e100k, n100k = _tile_indices(letters)
        if not (0 <= e100k <= 6 and 0 <= n100k <= 12):
            raise InvalidFormatError(f"Grid letters '{letters}' are outside the National Grid")

        return cls(
            easting=_group_metres(groups[0], e100k * 100000),
            northing=_group_metres(groups[1], n100k * 100000),
        )


def _group_metres(group: str, square_origin: int) -> float:
    """Metres from the false origin for a digit group read within the 100 km square at ``square_origin``."""
    if len(group) <= 5:
        # standardise to 10-digit refs (metres)
        return square_origin + int((group + "00000")[:5])
    # sub-metre digits: one division, so the result is the double nearest the decimal text
    scale = 10 ** (len(group) - 5)
    return (square_origin * scale + int(group)) / scale
