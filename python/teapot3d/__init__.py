# python/teapot3d/__init__.py
# Public Python API for procedural Utah teapot mesh generation
# Exists to expose the tessellator, mesh assembler and configuration in one namespace
# RELEVANT FILES: python/teapot3d/geometry.py, python/teapot3d/bezier.py, python/teapot3d/config.py, tests/test_teapot_mesh.py
from ._teapot_data import PATCH_COUNT, PATCH_GROUPS, TEAPOT_PATCHES
from .bezier import (
    DEGENERATE_EPSILON_SQ,
    bernstein_basis,
    bernstein_derivative,
    evaluate_patch,
    patch_indices,
    surface_normal,
    tessellate_patch,
)
from .config import TeapotConfig, load_teapot_config
from .geometry import (
    VERTEX_STRIDE_BYTES,
    MeshBuffers,
    generate_teapot_mesh,
    validate_mesh,
)

__version__ = "0.1.0"

__all__ = [
    "PATCH_COUNT",
    "PATCH_GROUPS",
    "TEAPOT_PATCHES",
    "DEGENERATE_EPSILON_SQ",
    "bernstein_basis",
    "bernstein_derivative",
    "evaluate_patch",
    "patch_indices",
    "surface_normal",
    "tessellate_patch",
    "TeapotConfig",
    "load_teapot_config",
    "VERTEX_STRIDE_BYTES",
    "MeshBuffers",
    "generate_teapot_mesh",
    "validate_mesh",
    "__version__",
]
