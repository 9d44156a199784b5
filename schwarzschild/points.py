"""Points that carry their coordinate system.

Vec4 leaves it to the caller to remember whether a vector holds rectangular
or Schwarzschild components. RectPoint and SchwarzschildPoint make that part
of the type so a point can't be converted from the wrong system by accident.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from schwarzschild.coords import from_schwarzschild, to_schwarzschild
from schwarzschild.errors import CoordinateSystemError
from schwarzschild.vec4 import Vec4


class CoordinateSystem(enum.Enum):
    RECT = "rect"
    SCHWARZSCHILD = "schwarzschild"


@dataclass(frozen=True)
class RectPoint:
    """Point in rectangular coordinates (x, y, z, t)."""

    x: float
    y: float
    z: float
    t: float

    @property
    def system(self) -> CoordinateSystem:
        return CoordinateSystem.RECT

    def to_vec4(self) -> Vec4:
        return Vec4(self.x, self.y, self.z, self.t)

    def to_schwarzschild(self) -> SchwarzschildPoint:
        r, phi, theta, t = to_schwarzschild(self.x, self.y, self.z, self.t)
        return SchwarzschildPoint(r, phi, theta, t)


@dataclass(frozen=True)
class SchwarzschildPoint:
    """Point in Schwarzschild coordinates (r, phi, theta, t).

    Attributes:
        r: Radial coordinate
        phi: Azimuthal angle in radians
        theta: Polar angle from the north pole in radians
        t: Time coordinate
    """

    r: float
    phi: float
    theta: float
    t: float

    @property
    def system(self) -> CoordinateSystem:
        return CoordinateSystem.SCHWARZSCHILD

    def to_vec4(self) -> Vec4:
        return Vec4(self.r, self.phi, self.theta, self.t)

    def to_rect(self) -> RectPoint:
        x, y, z, t = from_schwarzschild(self.r, self.phi, self.theta, self.t)
        return RectPoint(x, y, z, t)


def tag(v: Vec4, system: CoordinateSystem) -> RectPoint | SchwarzschildPoint:
    """Attach a coordinate system to an untagged vector.

    The caller states which system v's components are in; nothing is
    converted.
    """
    if system is CoordinateSystem.RECT:
        return RectPoint(*v.dat)
    if system is CoordinateSystem.SCHWARZSCHILD:
        return SchwarzschildPoint(*v.dat)
    raise CoordinateSystemError(f"Unknown coordinate system: {system!r}")


def as_rect(point: RectPoint | SchwarzschildPoint) -> RectPoint:
    """Return point in rectangular coordinates, converting if needed."""
    if isinstance(point, RectPoint):
        return point
    if isinstance(point, SchwarzschildPoint):
        return point.to_rect()
    raise CoordinateSystemError(
        f"Expected RectPoint or SchwarzschildPoint, got {type(point).__name__}; "
        "use tag() to state the coordinate system of a Vec4"
    )
