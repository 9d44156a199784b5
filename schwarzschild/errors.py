"""Errors raised on API misuse.

The coordinate transforms themselves never raise: out-of-range inputs
produce ordinary floating-point results.
"""


class CoordinateError(Exception):
    """Base class for coordinate errors."""
    pass


class VectorShapeError(CoordinateError, ValueError):
    """Input does not have exactly four components."""
    pass


class CoordinateSystemError(CoordinateError, TypeError):
    """Point is not tagged with the coordinate system the operation needs."""
    pass
