"""Schwarzschild <-> rectangular conversions for single vectors.

Schwarzschild coordinates are used here only through their spatial part,
which is ordinary spherical coordinates:

    x = r sin(theta) cos(phi)
    y = r sin(theta) sin(phi)
    z = r cos(theta)

theta is measured from the +z axis (north pole), phi is the azimuth in the
xy-plane. The time component is the same in both systems.

Nothing here validates ranges. A negative radius or an angle outside its
usual interval gives the value the formulas produce; NaN and inf propagate
(sin and cos of an infinite angle are NaN, not an error).
"""

import numpy as np

from schwarzschild import defaults
from schwarzschild.vec4 import Vec4


def _trig(phi: float, theta: float) -> tuple[float, float, float, float]:
    """sin/cos of both angles, each evaluated once."""
    with np.errstate(invalid='ignore'):
        return np.sin(phi), np.cos(phi), np.sin(theta), np.cos(theta)


def from_schwarzschild(r: float, phi: float, theta: float, t: float) -> Vec4:
    """Rectangular vector for the point with Schwarzschild coordinates (r, phi, theta, t).

    Args:
        r: Radial coordinate
        phi: Azimuthal angle in radians
        theta: Polar angle from the north pole in radians
        t: Time coordinate

    Returns:
        Vec4 holding (x, y, z, t)
    """
    sin_phi, cos_phi, sin_theta, cos_theta = _trig(phi, theta)

    with np.errstate(invalid='ignore', over='ignore'):
        return Vec4(
            float(r * sin_theta * cos_phi),
            float(r * sin_theta * sin_phi),
            float(r * cos_theta),
            t,
        )


def vector_from_schwarzschild(v: Vec4) -> Vec4:
    """Rectangular copy of a vector holding (r, phi, theta, t). v is not modified."""
    return from_schwarzschild(v.dat[0], v.dat[1], v.dat[2], v.dat[3])


def convert_schwarzschild_to_rect_in_place(v: Vec4) -> None:
    """Overwrite a vector holding (r, phi, theta, t) with (x, y, z, t).

    Slot 0 is reused for x, so r has to be read out before anything is
    written. Slot 3 (time) is left alone.
    """
    r = v.dat[0]
    sin_phi, cos_phi, sin_theta, cos_theta = _trig(v.dat[1], v.dat[2])

    with np.errstate(invalid='ignore', over='ignore'):
        v.dat[0] = float(r * sin_theta * cos_phi)
        v.dat[1] = float(r * sin_theta * sin_phi)
        v.dat[2] = float(r * cos_theta)


def to_schwarzschild(x: float, y: float, z: float, t: float) -> Vec4:
    """Inverse of from_schwarzschild.

    Returns (r, phi, theta, t) with r >= 0, phi in [0, 2*pi) and theta in
    [0, pi]. The origin maps to (0, 0, 0, t); on the z axis phi is 0.
    """
    # -0.0 would send atan2 to pi on the axes
    x, y, z = x + 0.0, y + 0.0, z + 0.0
    with np.errstate(invalid='ignore', over='ignore'):
        rho = np.hypot(x, y)
        r = np.hypot(rho, z)
        phi = np.mod(np.arctan2(y, x), defaults.TWO_PI)
        theta = np.arctan2(rho, z)
    # a tiny negative azimuth rounds up to exactly 2*pi under the modulo
    if phi >= defaults.TWO_PI:
        phi = 0.0
    return Vec4(float(r), float(phi), float(theta), t)
