"""Array backend dispatch for the batched coordinate transforms.

Lets the same conversion code run on numpy arrays and torch tensors.
Torch is only imported the first time a tensor is seen, so numpy-only
callers never pay for it.
"""

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

Array = Any  # numpy.ndarray, numpy scalar or torch.Tensor

_torch = None


def _get_torch():
    """Return the torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        logger.debug("Loaded torch %s for tensor input", torch.__version__)
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """True if x is a torch tensor (checked without importing torch)."""
    return type(x).__module__.startswith('torch')


def asarray(x: Array) -> Array:
    """Pass tensors through untouched, coerce everything else to float64 numpy."""
    if is_torch(x):
        return x
    return np.asarray(x, dtype=np.float64)


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def hypot(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().hypot(x, y)
    return np.hypot(x, y)


def atan2(y: Array, x: Array) -> Array:
    if is_torch(y):
        return _get_torch().atan2(y, x)
    return np.arctan2(y, x)


def remainder(x: Array, m: float) -> Array:
    """Floored modulo (result takes the sign of m, like Python's %)."""
    if is_torch(x):
        return _get_torch().remainder(x, m)
    return np.mod(x, m)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def zeros_like(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().zeros_like(x)
    return np.zeros_like(x)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    """Stack arrays along a new axis."""
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)


def unstack_last(x: Array) -> tuple[Array, ...]:
    """Split an (..., n) array into n arrays of shape (...)."""
    return tuple(x[..., i] for i in range(x.shape[-1]))
