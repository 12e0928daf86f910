"""Exception types raised by the conversion engine."""


class GeodesyError(ValueError):
    """Base class for all conversion errors."""


class InvalidFormatError(GeodesyError):
    """Malformed grid reference or degrees/minutes/seconds text."""


class OutOfRangeError(GeodesyError):
    """Value outside the domain an operation accepts (grid tiles, minutes, precision)."""


class NonConvergenceError(GeodesyError):
    """Inverse grid projection did not settle within its iteration bound."""

    def __init__(self, northing: float, iterations: int, residual: float):
        self.northing = northing
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"Latitude for northing {northing} did not converge after "
            f"{iterations} iterations (residual {residual} m)"
        )


class UnknownDatumError(GeodesyError, KeyError):
    """No ellipsoid or datum is registered under the requested name."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""
