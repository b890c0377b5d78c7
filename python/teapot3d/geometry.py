# python/teapot3d/geometry.py
# Teapot mesh assembly, mesh container, and CPU-side mesh validation
# Exists to combine the 32 independently tessellated patches into one indexed mesh
# RELEVANT FILES: python/teapot3d/bezier.py, python/teapot3d/_teapot_data.py, python/teapot3d/config.py, tests/test_teapot_mesh.py

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from . import _validate
from ._teapot_data import PATCH_COUNT, TEAPOT_PATCHES
from .bezier import tessellate_patch
from .config import ConfigSource, load_teapot_config, split_teapot_overrides

logger = logging.getLogger(__name__)

# x y z w | nx ny nz | u v, all float32
VERTEX_FLOATS = 9
VERTEX_STRIDE_BYTES = VERTEX_FLOATS * 4

PatchBuffers = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]


@dataclass
class MeshBuffers:
    """Indexed triangle mesh laid out for direct vertex/index buffer upload."""

    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.size // 3)

    @property
    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    @property
    def nbytes(self) -> int:
        return int(self.positions.nbytes + self.normals.nbytes + self.uvs.nbytes + self.indices.nbytes)

    def interleaved(self) -> np.ndarray:
        """Pack each vertex as ``[x, y, z, w, nx, ny, nz, u, v]`` (float32)."""
        return np.ascontiguousarray(
            np.concatenate([self.positions, self.normals, self.uvs], axis=1),
            dtype=np.float32,
        )

    def vertex_bytes(self) -> bytes:
        return self.interleaved().astype("<f4", copy=False).tobytes()

    def index_bytes(self) -> bytes:
        return self.indices.astype("<u4", copy=False).tobytes()

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {
            "positions": self.positions,
            "normals": self.normals,
            "uvs": self.uvs,
            "indices": self.indices,
        }


def _assemble(parts: Sequence[PatchBuffers]) -> MeshBuffers:
    positions: List[np.ndarray] = []
    normals: List[np.ndarray] = []
    uvs: List[np.ndarray] = []
    indices: List[np.ndarray] = []
    base = 0
    for patch_positions, patch_normals, patch_uvs, patch_indices in parts:
        positions.append(patch_positions)
        normals.append(patch_normals)
        uvs.append(patch_uvs)
        indices.append(patch_indices + np.uint32(base))
        base += patch_positions.shape[0]
    return MeshBuffers(
        positions=np.ascontiguousarray(np.concatenate(positions), dtype=np.float32),
        normals=np.ascontiguousarray(np.concatenate(normals), dtype=np.float32),
        uvs=np.ascontiguousarray(np.concatenate(uvs), dtype=np.float32),
        indices=np.ascontiguousarray(np.concatenate(indices), dtype=np.uint32),
    )


def generate_teapot_mesh(
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    config: ConfigSource = None,
    **overrides: Any,
) -> MeshBuffers:
    """Tessellate all 32 teapot patches into a single indexed mesh.

    ``rows`` and ``cols`` take precedence over the configured resolution.
    Each patch contributes its own copy of its boundary samples; shared
    edges are not welded. Patch order, and therefore index layout, is
    always table order, including when ``parallel=True``.

    Raises ``ValueError`` for a resolution below 2x2 and ``TypeError`` for
    unknown options.
    """
    options, unknown = split_teapot_overrides(overrides)
    if unknown:
        raise TypeError(f"generate_teapot_mesh() got unexpected options: {sorted(unknown)}")
    if rows is not None:
        options["rows"] = rows
    if cols is not None:
        options["cols"] = cols
    cfg = load_teapot_config(config, options)

    rows, cols = _validate.resolution(cfg.tessellation.rows, cfg.tessellation.cols, PATCH_COUNT)
    renormalize = cfg.normals.renormalize

    def _tessellate(index: int) -> PatchBuffers:
        result = tessellate_patch(TEAPOT_PATCHES[index], rows, cols, renormalize)
        if logger.isEnabledFor(logging.DEBUG):
            degenerate = int(np.count_nonzero(np.linalg.norm(result[1], axis=1) < 1e-6))
            logger.debug(f"Patch {index}: {result[0].shape[0]} vertices, {degenerate} degenerate normals")
        return result

    if cfg.execution.parallel:
        # map() yields in submission order, which keeps index bases stable
        with ThreadPoolExecutor(max_workers=cfg.execution.max_workers) as executor:
            parts = list(executor.map(_tessellate, range(PATCH_COUNT)))
    else:
        parts = [_tessellate(i) for i in range(PATCH_COUNT)]

    mesh = _assemble(parts)
    logger.info(
        f"Teapot mesh {rows}x{cols}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles"
        f" ({'parallel' if cfg.execution.parallel else 'serial'})"
    )
    return mesh


def validate_mesh(mesh: MeshBuffers, tolerance: float = 1e-3) -> Dict[str, Any]:
    """Check buffer layout and index integrity of a mesh.

    Returns
    -------
    Dict[str, Any]
        - 'valid': bool - True if all checks pass
        - 'errors': List[str] - validation error messages
        - 'aligned_ok': bool - positions, normals and uvs have equal length
        - 'indices_ok': bool - index count is a multiple of 3 and all in range
        - 'w_ok': bool - every position has w == 1
        - 'normals_ok': bool - no normal is longer than 1 + tolerance
        - 'degenerate_normals': int - normals shorter than tolerance
    """
    errors: List[str] = []
    positions = np.asarray(mesh.positions)
    normals = np.asarray(mesh.normals)
    uvs = np.asarray(mesh.uvs)
    indices = np.asarray(mesh.indices)

    count = positions.shape[0]
    aligned_ok = normals.shape[0] == count and uvs.shape[0] == count
    if not aligned_ok:
        errors.append(
            f"Attribute lengths differ: positions={count}, normals={normals.shape[0]}, uvs={uvs.shape[0]}"
        )

    indices_ok = True
    if indices.size % 3 != 0:
        errors.append(f"Index count {indices.size} is not a multiple of 3")
        indices_ok = False
    if indices.size and int(indices.max()) >= count:
        errors.append(f"Index {int(indices.max())} out of range for {count} vertices")
        indices_ok = False

    w_ok = bool(np.all(positions[:, 3] == 1.0)) if positions.ndim == 2 and positions.shape[1] == 4 else False
    if not w_ok:
        errors.append("Positions must be (N, 4) with w == 1.0")

    lengths = np.linalg.norm(normals, axis=1) if normals.size else np.zeros(0)
    normals_ok = bool(np.all(lengths <= 1.0 + tolerance))
    if not normals_ok:
        errors.append(f"Normal length {float(lengths.max()):.6f} exceeds 1")
    degenerate = int(np.count_nonzero(lengths < tolerance))

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "aligned_ok": aligned_ok,
        "indices_ok": indices_ok,
        "w_ok": w_ok,
        "normals_ok": normals_ok,
        "degenerate_normals": degenerate,
    }
