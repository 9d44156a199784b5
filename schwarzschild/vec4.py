"""Four-component spacetime vector."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from schwarzschild import defaults
from schwarzschild.errors import VectorShapeError


class Vec4:
    """Point in four-dimensional spacetime.

    Components live in ``dat`` positionally. The same type is used for
    rectangular ``(x, y, z, t)`` and Schwarzschild ``(r, phi, theta, t)``
    coordinates; nothing on the instance records which one it holds. Use
    :mod:`schwarzschild.points` when the system should travel with the data.

    Attributes:
        dat: List of the four components, each independently mutable
    """

    __slots__ = ('dat',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, t: float = 0.0):
        self.dat = [x, y, z, t]

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Vec4:
        """Build a vector from any iterable of exactly four numbers."""
        values = list(values)
        if len(values) != defaults.VEC4_SIZE:
            raise VectorShapeError(
                f"Vec4 needs {defaults.VEC4_SIZE} components, got {len(values)}"
            )
        return cls(*values)

    def __len__(self) -> int:
        return defaults.VEC4_SIZE

    def __getitem__(self, index: int) -> float:
        return self.dat[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.dat[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self.dat)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return all(a == b for a, b in zip(self.dat, other.dat))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return "Vec4({}, {}, {}, {})".format(*self.dat)

    def copy(self) -> Vec4:
        return Vec4(*self.dat)

    def as_array(self) -> np.ndarray:
        """Components as a float64 array of shape (4,)."""
        return np.array(self.dat, dtype=defaults.DEFAULT_DTYPE)

    def isclose(
        self,
        other: Vec4,
        rtol: float = defaults.DEFAULT_RTOL,
        atol: float = defaults.DEFAULT_ATOL,
    ) -> bool:
        """Component-wise approximate equality (NaN never matches)."""
        if not isinstance(other, Vec4):
            return False
        return bool(np.allclose(self.dat, other.dat, rtol=rtol, atol=atol))


def make_vector(x: float, y: float, z: float, t: float) -> Vec4:
    """Create a vector from its four components, in order."""
    return Vec4(x, y, z, t)
