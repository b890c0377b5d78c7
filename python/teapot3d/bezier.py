"""
Bicubic Bezier patch evaluation and tessellation

Provides functions for:
1. Evaluating the cubic Bernstein basis and its derivative
2. Evaluating a 4x4 control-point patch (position and both tangents) at (u, v)
3. Sampling a patch on a uniform grid into positions, normals, UVs and indices
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from . import _validate

# Squared tangent length below which a tangent is left unnormalized.
DEGENERATE_EPSILON_SQ = 1e-20


def bernstein_basis(t) -> np.ndarray:
    """Cubic Bernstein weights ``[(1-t)^3, 3(1-t)^2 t, 3(1-t) t^2, t^3]``.

    Accepts a scalar or an array; the weights are stacked on a trailing axis
    of length 4.
    """
    t = np.asarray(t, dtype=np.float64)
    mt = 1.0 - t
    return np.stack([mt * mt * mt, 3.0 * mt * mt * t, 3.0 * mt * t * t, t * t * t], axis=-1)


def bernstein_derivative(t) -> np.ndarray:
    """Derivative of :func:`bernstein_basis` with respect to ``t``."""
    t = np.asarray(t, dtype=np.float64)
    mt = 1.0 - t
    t2 = t * t
    return np.stack(
        [
            -3.0 * mt * mt,
            3.0 * (1.0 - 4.0 * t + 3.0 * t2),
            3.0 * (2.0 * t - 3.0 * t2),
            3.0 * t2,
        ],
        axis=-1,
    )


def _normalize(v: np.ndarray) -> np.ndarray:
    # vectors shorter than the degeneracy threshold pass through unchanged
    v = np.asarray(v, dtype=np.float64)
    l2 = np.einsum("...k,...k->...", v, v)
    ok = l2 > DEGENERATE_EPSILON_SQ
    inv = np.where(ok, 1.0 / np.sqrt(np.where(ok, l2, 1.0)), 1.0)
    return v * inv[..., None]


def surface_normal(tangent_u, tangent_v, renormalize: bool = True) -> np.ndarray:
    """Cross product of the individually normalized tangents.

    The raw cross has length ``sin`` of the angle between the tangents, so it
    is normalized once more under the same degeneracy threshold and every
    non-degenerate normal comes out unit length. ``renormalize=False`` returns
    the raw cross.
    """
    n = np.cross(_normalize(tangent_u), _normalize(tangent_v))
    if renormalize:
        n = _normalize(n)
    return n


def evaluate_patch(patch, u: float, v: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate a patch at a single ``(u, v)``.

    Returns ``(position, tangent_u, tangent_v)`` as float64 3-vectors. Rows of
    the control grid follow ``v``, columns follow ``u``.
    """
    cp = _validate.patch_array(patch)
    bu = bernstein_basis(u)
    du = bernstein_derivative(u)
    bv = bernstein_basis(v)
    dv = bernstein_derivative(v)
    position = np.einsum("a,b,abk->k", bv, bu, cp)
    tangent_u = np.einsum("a,b,abk->k", bv, du, cp)
    tangent_v = np.einsum("a,b,abk->k", dv, bu, cp)
    return position, tangent_u, tangent_v


def patch_indices(rows: int, cols: int) -> np.ndarray:
    """Triangle indices for a ``rows x cols`` grid of row-major samples.

    Each cell ``(r, c)`` yields ``[(r,c), (r,c+1), (r+1,c+1)]`` followed by
    ``[(r,c), (r+1,c+1), (r+1,c)]``, where ``(r, c)`` maps to ``r * cols + c``.
    """
    rows, cols = _validate.resolution(rows, cols)
    r = np.arange(rows - 1, dtype=np.int64)[:, None]
    c = np.arange(cols - 1, dtype=np.int64)[None, :]
    i00 = r * cols + c
    i01 = i00 + 1
    i10 = i00 + cols
    i11 = i10 + 1
    tris = np.stack([i00, i01, i11, i00, i11, i10], axis=-1)
    return np.ascontiguousarray(tris.reshape(-1), dtype=np.uint32)


def tessellate_patch(
    patch,
    rows: int,
    cols: int,
    renormalize: bool = True,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Sample a bicubic Bezier patch on a uniform ``rows x cols`` grid.

    Parameters
    ----------
    patch : array-like
        4x4 grid of control points, shape (4, 4, 3) or (4, 4, 4). A fourth
        homogeneous component is ignored.
    rows : int
        Samples along ``v`` (must be >= 2)
    cols : int
        Samples along ``u`` (must be >= 2)
    renormalize : bool, default True
        Normalize the crossed normal again (see :func:`surface_normal`)

    Returns
    -------
    positions : np.ndarray
        (rows*cols, 4) float32, w fixed at 1.0
    normals : np.ndarray
        (rows*cols, 3) float32
    uvs : np.ndarray
        (rows*cols, 2) float32, equal to the surface parameters (u, v)
    indices : np.ndarray
        (6*(rows-1)*(cols-1),) uint32, local to this patch

    Raises
    ------
    ValueError
        If rows or cols is less than 2, or the patch has the wrong shape
    """
    rows, cols = _validate.resolution(rows, cols)
    cp = _validate.patch_array(patch)

    u = np.arange(cols, dtype=np.float64) / (cols - 1)
    v = np.arange(rows, dtype=np.float64) / (rows - 1)
    bu, du = bernstein_basis(u), bernstein_derivative(u)
    bv, dv = bernstein_basis(v), bernstein_derivative(v)

    points = np.einsum("ra,cb,abk->rck", bv, bu, cp).reshape(-1, 3)
    tangent_u = np.einsum("ra,cb,abk->rck", bv, du, cp).reshape(-1, 3)
    tangent_v = np.einsum("ra,cb,abk->rck", dv, bu, cp).reshape(-1, 3)

    positions = np.ones((rows * cols, 4), dtype=np.float32)
    positions[:, :3] = points
    normals = np.ascontiguousarray(surface_normal(tangent_u, tangent_v, renormalize), dtype=np.float32)

    uu, vv = np.meshgrid(u, v)
    uvs = np.ascontiguousarray(np.stack([uu.ravel(), vv.ravel()], axis=-1), dtype=np.float32)

    return positions, normals, uvs, patch_indices(rows, cols)
