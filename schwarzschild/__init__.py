"""Spacetime vectors and Schwarzschild <-> rectangular coordinate transforms.

This package provides:
- Vec4: four-component (x, y, z, t) / (r, phi, theta, t) vector
- Scalar conversions, by value or in place
- Array conversions for numpy arrays or torch tensors
- RectPoint / SchwarzschildPoint: points tagged with their coordinate system

Example:
    from math import pi
    from schwarzschild import from_schwarzschild

    v = from_schwarzschild(1.0, 0.0, pi / 2, 5.0)   # ~ Vec4(1, 0, 0, 5)
"""

from .vec4 import Vec4, make_vector

from .coords import (
    from_schwarzschild,
    vector_from_schwarzschild,
    convert_schwarzschild_to_rect_in_place,
    to_schwarzschild,
)

from .batch import (
    schwarzschild_to_rect,
    rect_to_schwarzschild,
    points_from_schwarzschild,
    points_to_schwarzschild,
)

from .points import (
    CoordinateSystem,
    RectPoint,
    SchwarzschildPoint,
    tag,
    as_rect,
)

from .errors import CoordinateError, VectorShapeError, CoordinateSystemError

__all__ = [
    # Vector type
    'Vec4',
    'make_vector',
    # Scalar conversions
    'from_schwarzschild',
    'vector_from_schwarzschild',
    'convert_schwarzschild_to_rect_in_place',
    'to_schwarzschild',
    # Array conversions
    'schwarzschild_to_rect',
    'rect_to_schwarzschild',
    'points_from_schwarzschild',
    'points_to_schwarzschild',
    # Tagged points
    'CoordinateSystem',
    'RectPoint',
    'SchwarzschildPoint',
    'tag',
    'as_rect',
    # Errors
    'CoordinateError',
    'VectorShapeError',
    'CoordinateSystemError',
]
