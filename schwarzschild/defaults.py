"""Central place for package-wide numeric defaults."""

from math import pi

import numpy as np

# Angles
TWO_PI: float = 2.0 * pi

# Tolerances used when comparing converted coordinates
DEFAULT_RTOL: float = 1e-9
DEFAULT_ATOL: float = 1e-12

# Number of components in a spacetime vector (x, y, z, t) / (r, phi, theta, t)
VEC4_SIZE: int = 4

# dtype used by the numpy helpers (Vec4.as_array, batch conversions)
DEFAULT_DTYPE = np.float64
