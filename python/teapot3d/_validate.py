# python/teapot3d/_validate.py
# Argument coercion and precondition checks for tessellation inputs
# Exists to reject bad resolutions and patch arrays before any evaluation runs
# RELEVANT FILES: python/teapot3d/bezier.py, python/teapot3d/geometry.py, tests/test_teapot_mesh.py
from __future__ import annotations

from typing import Any, Tuple

import numpy as np

_MAX_INDEX = int(np.iinfo(np.uint32).max)


def _as_int(name: str, v: Any) -> int:
    # bool is an int subclass
    if isinstance(v, (bool, np.bool_)):
        raise ValueError(f"{name} must be an integer, got bool")
    if isinstance(v, (float, np.floating)) and not float(v).is_integer():
        raise ValueError(f"{name} must be an integer, got {v!r}")
    try:
        i = int(v)
    except Exception as e:
        raise ValueError(f"{name} must be an integer, got {type(v).__name__}") from e
    return i


def resolution(rows: Any, cols: Any, patch_count: int = 1) -> Tuple[int, int]:
    """Validate a ``rows x cols`` sampling grid.

    Raises ``ValueError`` when either axis has fewer than two samples, or when
    ``patch_count`` grids of that size would not be addressable by 32-bit
    indices.
    """
    r = _as_int("rows", rows)
    c = _as_int("cols", cols)
    if r < 2:
        raise ValueError(f"rows must be >= 2, got {r}")
    if c < 2:
        raise ValueError(f"cols must be >= 2, got {c}")
    if patch_count * r * c - 1 > _MAX_INDEX:
        raise ValueError(
            f"{patch_count} patches at {r}x{c} samples exceed the uint32 index range"
        )
    return r, c


def patch_array(patch: Any) -> np.ndarray:
    """Return ``patch`` as a ``(4, 4, 3)`` float64 control-point grid."""
    arr = np.asarray(patch, dtype=np.float64)
    if arr.ndim != 3 or arr.shape[:2] != (4, 4) or arr.shape[2] not in (3, 4):
        raise ValueError(f"patch must have shape (4, 4, 3) or (4, 4, 4), got {arr.shape}")
    return np.ascontiguousarray(arr[:, :, :3])


def worker_count(value: Any) -> int:
    n = _as_int("max_workers", value)
    if n < 1:
        raise ValueError(f"max_workers must be >= 1, got {n}")
    return n
