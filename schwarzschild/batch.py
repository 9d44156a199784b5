"""Element-wise coordinate transforms over arrays.

Same formulas and conventions as :mod:`schwarzschild.coords`, applied to
whole grids of points at once. Every function accepts numpy arrays or torch
tensors; tensors stay on their device and keep their dtype.
"""

from __future__ import annotations

import logging

import numpy as np

from schwarzschild import _backend as B
from schwarzschild import defaults
from schwarzschild._backend import Array
from schwarzschild.errors import VectorShapeError

logger = logging.getLogger(__name__)


def schwarzschild_to_rect(r: Array, phi: Array, theta: Array, t: Array) -> tuple[Array, Array, Array, Array]:
    """(r, phi, theta, t) -> (x, y, z, t). Angles in radians, theta from the +z axis."""
    r, phi, theta = B.asarray(r), B.asarray(phi), B.asarray(theta)

    with np.errstate(invalid='ignore', over='ignore'):
        sin_phi = B.sin(phi)
        cos_phi = B.cos(phi)
        sin_theta = B.sin(theta)
        cos_theta = B.cos(theta)

        x = r * sin_theta * cos_phi
        y = r * sin_theta * sin_phi
        z = r * cos_theta

    return x, y, z, t


def rect_to_schwarzschild(x: Array, y: Array, z: Array, t: Array) -> tuple[Array, Array, Array, Array]:
    """(x, y, z, t) -> (r, phi, theta, t). Returns phi in [0, 2*pi), theta in [0, pi]."""
    x, y, z = B.asarray(x), B.asarray(y), B.asarray(z)
    # -0.0 would send atan2 to pi on the axes
    x, y, z = x + 0.0, y + 0.0, z + 0.0

    with np.errstate(invalid='ignore', over='ignore'):
        rho = B.hypot(x, y)
        r = B.hypot(rho, z)
        phi = B.remainder(B.atan2(y, x), defaults.TWO_PI)
        # Wrap to [0, 2*pi); tiny negative angles round up to 2*pi
        phi = B.where(phi >= defaults.TWO_PI, B.zeros_like(phi), phi)
        theta = B.atan2(rho, z)

    return r, phi, theta, t


def _check_points(points: Array) -> Array:
    points = B.asarray(points)
    if points.ndim == 0 or points.shape[-1] != defaults.VEC4_SIZE:
        raise VectorShapeError(
            f"Expected points with shape (..., {defaults.VEC4_SIZE}), got {tuple(points.shape)}"
        )
    logger.debug(
        "Converting %s points on %s backend",
        tuple(points.shape[:-1]), 'torch' if B.is_torch(points) else 'numpy',
    )
    return points


def points_from_schwarzschild(points: Array) -> Array:
    """Convert an (..., 4) array of (r, phi, theta, t) rows to (x, y, z, t) rows.

    Args:
        points: Array whose last axis holds (r, phi, theta, t)

    Returns:
        New array of the same shape holding (x, y, z, t). The input is not modified.

    Raises:
        VectorShapeError: If the last axis does not have length 4
    """
    points = _check_points(points)
    return B.stack(list(schwarzschild_to_rect(*B.unstack_last(points))), axis=-1)


def points_to_schwarzschild(points: Array) -> Array:
    """Convert an (..., 4) array of (x, y, z, t) rows to (r, phi, theta, t) rows."""
    points = _check_points(points)
    return B.stack(list(rect_to_schwarzschild(*B.unstack_last(points))), axis=-1)
