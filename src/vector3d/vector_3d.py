"""Immutable three-dimensional vector.

``Vector3D`` is a frozen pydantic model holding three float components. Every
operation returns a new instance; nothing mutates after construction.

Display rounding follows Python's ``"%.2f"``: the exact binary value of each
component is rounded to two decimals, ties to even. ``1.005`` is stored as
1.00499999999999989... and therefore displays as ``1.00``.

Example:
    >>> v = Vector3D(3, 4, 0)
    >>> v.get_magnitude()
    5.0
    >>> str(v.normalize())
    '(0.60, 0.80, 0.00)'
"""

import math

from pydantic import BaseModel, ConfigDict

from . import constants


class ZeroMagnitudeError(ValueError):
    """Raised when an operation is undefined for a zero-magnitude vector."""


def _format_component(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return constants.DISPLAY_FORMAT % value


class Vector3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x=x, y=y, z=z)

    def _new(self, x: float, y: float, z: float) -> "Vector3D":
        if constants.SKIP_VALIDATION:
            return type(self).model_construct(x=x, y=y, z=z)
        return type(self)(x, y, z)

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_z(self) -> float:
        return self.z

    def get_magnitude(self) -> float:
        """Euclidean length. NaN if any component is NaN."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3D":
        """Return the unit vector pointing the same way.

        Raises:
            ZeroMagnitudeError: If the magnitude is exactly 0.0. Tiny but
                nonzero magnitudes are divided through as-is.
        """
        magnitude = self.get_magnitude()
        if magnitude == 0:
            raise ZeroMagnitudeError("Normalization impossible with zero magnitude")
        return self._new(self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def add(self, other: "Vector3D") -> "Vector3D":
        return self._new(self.x + other.x, self.y + other.y, self.z + other.z)

    def multiply(self, scalar: float) -> "Vector3D":
        return self._new(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot_product(self, other: "Vector3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle_between(self, other: "Vector3D") -> float:
        """Angle to ``other`` in degrees, in [0, 180].

        The cosine is clamped to [-1, 1] before ``acos`` to absorb rounding
        overshoot. NaN components propagate to a NaN angle.

        Raises:
            ZeroMagnitudeError: If either vector has magnitude exactly 0.0.
        """
        magnitude1 = self.get_magnitude()
        magnitude2 = other.get_magnitude()

        if magnitude1 == 0 or magnitude2 == 0:
            raise ZeroMagnitudeError("Angle impossible with zero vector")

        dot = self.dot_product(other)
        cos_theta = dot / (magnitude1 * magnitude2)

        # min/max do not propagate NaN
        if not math.isnan(cos_theta):
            cos_theta = max(-1.0, min(1.0, cos_theta))
        return math.degrees(math.acos(cos_theta))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __add__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: object) -> "Vector3D":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: object) -> "Vector3D":
        return self.__mul__(scalar)

    # ------------------------------------------------------------------
    # Comparison, hashing and display
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        return (
            f"({_format_component(self.x)}, "
            f"{_format_component(self.y)}, "
            f"{_format_component(self.z)})"
        )
