"""Reference-data models shared by the ellipsoid and datum catalogs."""

from pydantic import BaseModel, Field, model_validator

# --- Ellipsoid ---

class Ellipsoid(BaseModel):
    """Semi-major axis, semi-minor axis (metres) and flattening of an Earth model.

    Flattening is kept alongside the axes rather than derived from them, so the
    published constant is used as-is.
    """

    name: str
    major: float = Field(gt=0)
    minor: float = Field(gt=0)
    flattening: float = Field(gt=0, lt=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_axes(self):
        if self.minor >= self.major:
            raise ValueError(f"Ellipsoid {self.name}: minor axis must be shorter than major axis")
        return self

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, (a²-b²)/a²."""
        return 2 * self.flattening - self.flattening * self.flattening


# --- Datum ---

HelmertParams = tuple[float, float, float, float, float, float, float]


class Datum(BaseModel):
    """An ellipsoid plus the Helmert transform that takes it into WGS84.

    ``transform`` is ``(tx, ty, tz, s, rx, ry, rz)``: translations in metres,
    scale in parts-per-million, rotations in arc-seconds.
    """

    name: str
    ellipsoid: Ellipsoid
    transform: HelmertParams

    model_config = {"frozen": True}

    def __str__(self):
        return self.name
