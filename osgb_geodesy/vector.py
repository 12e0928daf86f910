"""Three-dimensional vector algebra and the Helmert datum transform.

Geocentric (earth-centred, earth-fixed) cartesian points are carried as
``Vector3D`` values in metres.
"""

import math
from typing import Optional, Sequence

import numpy as np
from pydantic import BaseModel


class Vector3D(BaseModel):
    x: float
    y: float
    z: float

    model_config = {"frozen": True}

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3D":
        x, y, z = (float(v) for v in values)
        return cls(x=x, y=y, z=z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    # ── Arithmetic ──────────────────────────────────────────────

    def __add__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, other: "Vector3D") -> "Vector3D":
        """Elementwise product."""
        return Vector3D(x=self.x * other.x, y=self.y * other.y, z=self.z * other.z)

    def __truediv__(self, other: "Vector3D") -> "Vector3D":
        """Elementwise quotient."""
        return Vector3D(x=self.x / other.x, y=self.y / other.y, z=self.z / other.z)

    def __neg__(self) -> "Vector3D":
        return self.negate()

    @property
    def length(self) -> float:
        """Magnitude (norm) of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    # ── Products ────────────────────────────────────────────────

    def dot(self, other: "Vector3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def negate(self) -> "Vector3D":
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)

    def unit(self) -> "Vector3D":
        """Normalise to a unit vector; zero-length and unit vectors are returned unchanged."""
        norm = self.length
        if norm == 1 or norm == 0:
            return self
        return Vector3D(x=self.x / norm, y=self.y / norm, z=self.z / norm)

    def angle_to(self, other: "Vector3D", normal: Optional["Vector3D"] = None) -> float:
        """Angle in radians between this vector and ``other``.

        Without ``normal`` the result is 0..π. With a plane normal the result
        is -π..+π, positive when this->other is clockwise looking along the normal.
        """
        sign = 1.0 if normal is None else float(np.sign(self.cross(other).dot(normal)))
        sin_theta = self.cross(other).length * sign
        cos_theta = self.dot(other)
        return math.atan2(sin_theta, cos_theta)

    def rotate_around(self, axis: "Vector3D", theta: float) -> "Vector3D":
        """Rotate the direction of this vector about ``axis`` by ``theta`` radians.

        Uses the quaternion-derived rotation matrix; the point is normalised
        first, so the result is a unit vector.
        """
        p = self.unit().to_array()
        a = axis.unit()
        s = math.sin(theta)
        c = math.cos(theta)
        q = np.array([
            [a.x * a.x * (1 - c) + c, a.x * a.y * (1 - c) - a.z * s, a.x * a.z * (1 - c) + a.y * s],
            [a.y * a.x * (1 - c) + a.z * s, a.y * a.y * (1 - c) + c, a.y * a.z * (1 - c) - a.x * s],
            [a.z * a.x * (1 - c) - a.y * s, a.z * a.y * (1 - c) + a.x * s, a.z * a.z * (1 - c) + c],
        ])
        return Vector3D.from_array(q @ p)

    # ── Helmert ─────────────────────────────────────────────────

    def apply_transform(self, transform: Sequence[float]) -> "Vector3D":
        """Apply a 7-parameter Helmert transform ``(tx, ty, tz, s, rx, ry, rz)``.

        Translations in metres, scale in ppm, rotations in arc-seconds. This is
        the linearised small-angle form, not a full rotation matrix.
        """
        tx, ty, tz, s, rx, ry, rz = transform
        s1 = s / 1e6 + 1                    # ppm -> (s+1)
        rx = math.radians(rx / 3600)        # arc-seconds -> radians
        ry = math.radians(ry / 3600)
        rz = math.radians(rz / 3600)

        x1, y1, z1 = self.x, self.y, self.z
        return Vector3D(
            x=tx + x1 * s1 - y1 * rz + z1 * ry,
            y=ty + x1 * rz + y1 * s1 - z1 * rx,
            z=tz - x1 * ry + y1 * rx + z1 * s1,
        )

    def to_lat_lon(self, datum):
        """Geodetic latitude/longitude of this geocentric point on ``datum``."""
        from .geocentric import to_geodetic
        return to_geodetic(self, datum)

    def to_string(self, precision: int = 3) -> str:
        return f"[{self.x:.{precision}f},{self.y:.{precision}f},{self.z:.{precision}f}]"

    def __str__(self):
        return self.to_string()
