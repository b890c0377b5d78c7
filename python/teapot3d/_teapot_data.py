# python/teapot3d/_teapot_data.py
# Bicubic Bezier control points for the 32 patches of the Utah teapot
# Exists to hold the fixed patch table consumed by the tessellator
# RELEVANT FILES: python/teapot3d/bezier.py, python/teapot3d/geometry.py, tests/test_teapot_mesh.py
from __future__ import annotations

from typing import Dict, Tuple

Point3 = Tuple[float, float, float]
PatchRow = Tuple[Point3, Point3, Point3, Point3]
Patch = Tuple[PatchRow, PatchRow, PatchRow, PatchRow]

# Contiguous patch ranges in table order (start inclusive, stop exclusive).
PATCH_GROUPS: Dict[str, Tuple[int, int]] = {
    "rim": (0, 4),
    "upper_body": (4, 8),
    "lower_body": (8, 12),
    "handle": (12, 16),
    "spout": (16, 20),
    "lid_top": (20, 24),
    "lid_bottom": (24, 28),
    "bottom": (28, 32),
}

PATCH_COUNT = 32

# 32 patches x 4 rows x 4 columns; row 0 is v = 0, column 0 is u = 0.
TEAPOT_PATCHES: Tuple[Patch, ...] = (
    # 0 (rim)
    (
        ((1.4, 0.0, 2.4), (1.4, -0.784, 2.4), (0.784, -1.4, 2.4), (0.0, -1.4, 2.4)),
        ((1.3375, 0.0, 2.53125), (1.3375, -0.749, 2.53125), (0.749, -1.3375, 2.53125), (0.0, -1.3375, 2.53125)),
        ((1.4375, 0.0, 2.53125), (1.4375, -0.805, 2.53125), (0.805, -1.4375, 2.53125), (0.0, -1.4375, 2.53125)),
        ((1.5, 0.0, 2.4), (1.5, -0.84, 2.4), (0.84, -1.5, 2.4), (0.0, -1.5, 2.4)),
    ),
    # 1 (rim)
    (
        ((0.0, -1.4, 2.4), (-0.784, -1.4, 2.4), (-1.4, -0.784, 2.4), (-1.4, 0.0, 2.4)),
        ((0.0, -1.3375, 2.53125), (-0.749, -1.3375, 2.53125), (-1.3375, -0.749, 2.53125), (-1.3375, 0.0, 2.53125)),
        ((0.0, -1.4375, 2.53125), (-0.805, -1.4375, 2.53125), (-1.4375, -0.805, 2.53125), (-1.4375, 0.0, 2.53125)),
        ((0.0, -1.5, 2.4), (-0.84, -1.5, 2.4), (-1.5, -0.84, 2.4), (-1.5, 0.0, 2.4)),
    ),
    # 2 (rim)
    (
        ((-1.4, 0.0, 2.4), (-1.4, 0.784, 2.4), (-0.784, 1.4, 2.4), (0.0, 1.4, 2.4)),
        ((-1.3375, 0.0, 2.53125), (-1.3375, 0.749, 2.53125), (-0.749, 1.3375, 2.53125), (0.0, 1.3375, 2.53125)),
        ((-1.4375, 0.0, 2.53125), (-1.4375, 0.805, 2.53125), (-0.805, 1.4375, 2.53125), (0.0, 1.4375, 2.53125)),
        ((-1.5, 0.0, 2.4), (-1.5, 0.84, 2.4), (-0.84, 1.5, 2.4), (0.0, 1.5, 2.4)),
    ),
    # 3 (rim)
    (
        ((0.0, 1.4, 2.4), (0.784, 1.4, 2.4), (1.4, 0.784, 2.4), (1.4, 0.0, 2.4)),
        ((0.0, 1.3375, 2.53125), (0.749, 1.3375, 2.53125), (1.3375, 0.749, 2.53125), (1.3375, 0.0, 2.53125)),
        ((0.0, 1.4375, 2.53125), (0.805, 1.4375, 2.53125), (1.4375, 0.805, 2.53125), (1.4375, 0.0, 2.53125)),
        ((0.0, 1.5, 2.4), (0.84, 1.5, 2.4), (1.5, 0.84, 2.4), (1.5, 0.0, 2.4)),
    ),
    # 4 (upper_body)
    (
        ((1.5, 0.0, 2.4), (1.5, -0.84, 2.4), (0.84, -1.5, 2.4), (0.0, -1.5, 2.4)),
        ((1.75, 0.0, 1.875), (1.75, -0.98, 1.875), (0.98, -1.75, 1.875), (0.0, -1.75, 1.875)),
        ((2.0, 0.0, 1.35), (2.0, -1.12, 1.35), (1.12, -2.0, 1.35), (0.0, -2.0, 1.35)),
        ((2.0, 0.0, 0.9), (2.0, -1.12, 0.9), (1.12, -2.0, 0.9), (0.0, -2.0, 0.9)),
    ),
    # 5 (upper_body)
    (
        ((0.0, -1.5, 2.4), (-0.84, -1.5, 2.4), (-1.5, -0.84, 2.4), (-1.5, 0.0, 2.4)),
        ((0.0, -1.75, 1.875), (-0.98, -1.75, 1.875), (-1.75, -0.98, 1.875), (-1.75, 0.0, 1.875)),
        ((0.0, -2.0, 1.35), (-1.12, -2.0, 1.35), (-2.0, -1.12, 1.35), (-2.0, 0.0, 1.35)),
        ((0.0, -2.0, 0.9), (-1.12, -2.0, 0.9), (-2.0, -1.12, 0.9), (-2.0, 0.0, 0.9)),
    ),
    # 6 (upper_body)
    (
        ((-1.5, 0.0, 2.4), (-1.5, 0.84, 2.4), (-0.84, 1.5, 2.4), (0.0, 1.5, 2.4)),
        ((-1.75, 0.0, 1.875), (-1.75, 0.98, 1.875), (-0.98, 1.75, 1.875), (0.0, 1.75, 1.875)),
        ((-2.0, 0.0, 1.35), (-2.0, 1.12, 1.35), (-1.12, 2.0, 1.35), (0.0, 2.0, 1.35)),
        ((-2.0, 0.0, 0.9), (-2.0, 1.12, 0.9), (-1.12, 2.0, 0.9), (0.0, 2.0, 0.9)),
    ),
    # 7 (upper_body)
    (
        ((0.0, 1.5, 2.4), (0.84, 1.5, 2.4), (1.5, 0.84, 2.4), (1.5, 0.0, 2.4)),
        ((0.0, 1.75, 1.875), (0.98, 1.75, 1.875), (1.75, 0.98, 1.875), (1.75, 0.0, 1.875)),
        ((0.0, 2.0, 1.35), (1.12, 2.0, 1.35), (2.0, 1.12, 1.35), (2.0, 0.0, 1.35)),
        ((0.0, 2.0, 0.9), (1.12, 2.0, 0.9), (2.0, 1.12, 0.9), (2.0, 0.0, 0.9)),
    ),
    # 8 (lower_body)
    (
        ((2.0, 0.0, 0.9), (2.0, -1.12, 0.9), (1.12, -2.0, 0.9), (0.0, -2.0, 0.9)),
        ((2.0, 0.0, 0.45), (2.0, -1.12, 0.45), (1.12, -2.0, 0.45), (0.0, -2.0, 0.45)),
        ((1.5, 0.0, 0.225), (1.5, -0.84, 0.225), (0.84, -1.5, 0.225), (0.0, -1.5, 0.225)),
        ((1.5, 0.0, 0.15), (1.5, -0.84, 0.15), (0.84, -1.5, 0.15), (0.0, -1.5, 0.15)),
    ),
    # 9 (lower_body)
    (
        ((0.0, -2.0, 0.9), (-1.12, -2.0, 0.9), (-2.0, -1.12, 0.9), (-2.0, 0.0, 0.9)),
        ((0.0, -2.0, 0.45), (-1.12, -2.0, 0.45), (-2.0, -1.12, 0.45), (-2.0, 0.0, 0.45)),
        ((0.0, -1.5, 0.225), (-0.84, -1.5, 0.225), (-1.5, -0.84, 0.225), (-1.5, 0.0, 0.225)),
        ((0.0, -1.5, 0.15), (-0.84, -1.5, 0.15), (-1.5, -0.84, 0.15), (-1.5, 0.0, 0.15)),
    ),
    # 10 (lower_body)
    (
        ((-2.0, 0.0, 0.9), (-2.0, 1.12, 0.9), (-1.12, 2.0, 0.9), (0.0, 2.0, 0.9)),
        ((-2.0, 0.0, 0.45), (-2.0, 1.12, 0.45), (-1.12, 2.0, 0.45), (0.0, 2.0, 0.45)),
        ((-1.5, 0.0, 0.225), (-1.5, 0.84, 0.225), (-0.84, 1.5, 0.225), (0.0, 1.5, 0.225)),
        ((-1.5, 0.0, 0.15), (-1.5, 0.84, 0.15), (-0.84, 1.5, 0.15), (0.0, 1.5, 0.15)),
    ),
    # 11 (lower_body)
    (
        ((0.0, 2.0, 0.9), (1.12, 2.0, 0.9), (2.0, 1.12, 0.9), (2.0, 0.0, 0.9)),
        ((0.0, 2.0, 0.45), (1.12, 2.0, 0.45), (2.0, 1.12, 0.45), (2.0, 0.0, 0.45)),
        ((0.0, 1.5, 0.225), (0.84, 1.5, 0.225), (1.5, 0.84, 0.225), (1.5, 0.0, 0.225)),
        ((0.0, 1.5, 0.15), (0.84, 1.5, 0.15), (1.5, 0.84, 0.15), (1.5, 0.0, 0.15)),
    ),
    # 12 (handle)
    (
        ((-1.6, 0.0, 2.025), (-1.6, -0.3, 2.025), (-1.5, -0.3, 2.25), (-1.5, 0.0, 2.25)),
        ((-2.3, 0.0, 2.025), (-2.3, -0.3, 2.025), (-2.5, -0.3, 2.25), (-2.5, 0.0, 2.25)),
        ((-2.7, 0.0, 2.025), (-2.7, -0.3, 2.025), (-3.0, -0.3, 2.25), (-3.0, 0.0, 2.25)),
        ((-2.7, 0.0, 1.8), (-2.7, -0.3, 1.8), (-3.0, -0.3, 1.8), (-3.0, 0.0, 1.8)),
    ),
    # 13 (handle)
    (
        ((-1.5, 0.0, 2.25), (-1.5, 0.3, 2.25), (-1.6, 0.3, 2.025), (-1.6, 0.0, 2.025)),
        ((-2.5, 0.0, 2.25), (-2.5, 0.3, 2.25), (-2.3, 0.3, 2.025), (-2.3, 0.0, 2.025)),
        ((-3.0, 0.0, 2.25), (-3.0, 0.3, 2.25), (-2.7, 0.3, 2.025), (-2.7, 0.0, 2.025)),
        ((-3.0, 0.0, 1.8), (-3.0, 0.3, 1.8), (-2.7, 0.3, 1.8), (-2.7, 0.0, 1.8)),
    ),
    # 14 (handle)
    (
        ((-2.7, 0.0, 1.8), (-2.7, -0.3, 1.8), (-3.0, -0.3, 1.8), (-3.0, 0.0, 1.8)),
        ((-2.7, 0.0, 1.575), (-2.7, -0.3, 1.575), (-3.0, -0.3, 1.35), (-3.0, 0.0, 1.35)),
        ((-2.5, 0.0, 1.125), (-2.5, -0.3, 1.125), (-2.65, -0.3, 0.9375), (-2.65, 0.0, 0.9375)),
        ((-2.0, 0.0, 0.9), (-2.0, -0.3, 0.9), (-1.9, -0.3, 0.6), (-1.9, 0.0, 0.6)),
    ),
    # 15 (handle)
    (
        ((-3.0, 0.0, 1.8), (-3.0, 0.3, 1.8), (-2.7, 0.3, 1.8), (-2.7, 0.0, 1.8)),
        ((-3.0, 0.0, 1.35), (-3.0, 0.3, 1.35), (-2.7, 0.3, 1.575), (-2.7, 0.0, 1.575)),
        ((-2.65, 0.0, 0.9375), (-2.65, 0.3, 0.9375), (-2.5, 0.3, 1.125), (-2.5, 0.0, 1.125)),
        ((-1.9, 0.0, 0.6), (-1.9, 0.3, 0.6), (-2.0, 0.3, 0.9), (-2.0, 0.0, 0.9)),
    ),
    # 16 (spout)
    (
        ((1.7, 0.0, 1.425), (1.7, -0.66, 1.425), (1.7, -0.66, 0.6), (1.7, 0.0, 0.6)),
        ((2.6, 0.0, 1.425), (2.6, -0.66, 1.425), (3.1, -0.66, 0.825), (3.1, 0.0, 0.825)),
        ((2.3, 0.0, 2.1), (2.3, -0.25, 2.1), (2.4, -0.25, 2.025), (2.4, 0.0, 2.025)),
        ((2.7, 0.0, 2.4), (2.7, -0.25, 2.4), (3.3, -0.25, 2.4), (3.3, 0.0, 2.4)),
    ),
    # 17 (spout)
    (
        ((1.7, 0.0, 0.6), (1.7, 0.66, 0.6), (1.7, 0.66, 1.425), (1.7, 0.0, 1.425)),
        ((3.1, 0.0, 0.825), (3.1, 0.66, 0.825), (2.6, 0.66, 1.425), (2.6, 0.0, 1.425)),
        ((2.4, 0.0, 2.025), (2.4, 0.25, 2.025), (2.3, 0.25, 2.1), (2.3, 0.0, 2.1)),
        ((3.3, 0.0, 2.4), (3.3, 0.25, 2.4), (2.7, 0.25, 2.4), (2.7, 0.0, 2.4)),
    ),
    # 18 (spout)
    (
        ((2.7, 0.0, 2.4), (2.7, -0.25, 2.4), (3.3, -0.25, 2.4), (3.3, 0.0, 2.4)),
        ((2.8, 0.0, 2.475), (2.8, -0.25, 2.475), (3.525, -0.25, 2.49375), (3.525, 0.0, 2.49375)),
        ((2.9, 0.0, 2.475), (2.9, -0.15, 2.475), (3.45, -0.15, 2.5125), (3.45, 0.0, 2.5125)),
        ((2.8, 0.0, 2.4), (2.8, -0.15, 2.4), (3.2, -0.15, 2.4), (3.2, 0.0, 2.4)),
    ),
    # 19 (spout)
    (
        ((3.3, 0.0, 2.4), (3.3, 0.25, 2.4), (2.7, 0.25, 2.4), (2.7, 0.0, 2.4)),
        ((3.525, 0.0, 2.49375), (3.525, 0.25, 2.49375), (2.8, 0.25, 2.475), (2.8, 0.0, 2.475)),
        ((3.45, 0.0, 2.5125), (3.45, 0.15, 2.5125), (2.9, 0.15, 2.475), (2.9, 0.0, 2.475)),
        ((3.2, 0.0, 2.4), (3.2, 0.15, 2.4), (2.8, 0.15, 2.4), (2.8, 0.0, 2.4)),
    ),
    # 20 (lid_top)
    (
        ((0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15)),
        ((0.8, 0.0, 3.15), (0.8, -0.45, 3.15), (0.45, -0.8, 3.15), (0.0, -0.8, 3.15)),
        ((0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85)),
        ((0.2, 0.0, 2.7), (0.2, -0.112, 2.7), (0.112, -0.2, 2.7), (0.0, -0.2, 2.7)),
    ),
    # 21 (lid_top)
    (
        ((0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15)),
        ((0.0, -0.8, 3.15), (-0.45, -0.8, 3.15), (-0.8, -0.45, 3.15), (-0.8, 0.0, 3.15)),
        ((0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85)),
        ((0.0, -0.2, 2.7), (-0.112, -0.2, 2.7), (-0.2, -0.112, 2.7), (-0.2, 0.0, 2.7)),
    ),
    # 22 (lid_top)
    (
        ((0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15)),
        ((-0.8, 0.0, 3.15), (-0.8, 0.45, 3.15), (-0.45, 0.8, 3.15), (0.0, 0.8, 3.15)),
        ((0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85)),
        ((-0.2, 0.0, 2.7), (-0.2, 0.112, 2.7), (-0.112, 0.2, 2.7), (0.0, 0.2, 2.7)),
    ),
    # 23 (lid_top)
    (
        ((0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15), (0.0, 0.0, 3.15)),
        ((0.0, 0.8, 3.15), (0.45, 0.8, 3.15), (0.8, 0.45, 3.15), (0.8, 0.0, 3.15)),
        ((0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85), (0.0, 0.0, 2.85)),
        ((0.0, 0.2, 2.7), (0.112, 0.2, 2.7), (0.2, 0.112, 2.7), (0.2, 0.0, 2.7)),
    ),
    # 24 (lid_bottom)
    (
        ((0.2, 0.0, 2.7), (0.2, -0.112, 2.7), (0.112, -0.2, 2.7), (0.0, -0.2, 2.7)),
        ((0.4, 0.0, 2.55), (0.4, -0.224, 2.55), (0.224, -0.4, 2.55), (0.0, -0.4, 2.55)),
        ((1.3, 0.0, 2.55), (1.3, -0.728, 2.55), (0.728, -1.3, 2.55), (0.0, -1.3, 2.55)),
        ((1.3, 0.0, 2.4), (1.3, -0.728, 2.4), (0.728, -1.3, 2.4), (0.0, -1.3, 2.4)),
    ),
    # 25 (lid_bottom)
    (
        ((0.0, -0.2, 2.7), (-0.112, -0.2, 2.7), (-0.2, -0.112, 2.7), (-0.2, 0.0, 2.7)),
        ((0.0, -0.4, 2.55), (-0.224, -0.4, 2.55), (-0.4, -0.224, 2.55), (-0.4, 0.0, 2.55)),
        ((0.0, -1.3, 2.55), (-0.728, -1.3, 2.55), (-1.3, -0.728, 2.55), (-1.3, 0.0, 2.55)),
        ((0.0, -1.3, 2.4), (-0.728, -1.3, 2.4), (-1.3, -0.728, 2.4), (-1.3, 0.0, 2.4)),
    ),
    # 26 (lid_bottom)
    (
        ((-0.2, 0.0, 2.7), (-0.2, 0.112, 2.7), (-0.112, 0.2, 2.7), (0.0, 0.2, 2.7)),
        ((-0.4, 0.0, 2.55), (-0.4, 0.224, 2.55), (-0.224, 0.4, 2.55), (0.0, 0.4, 2.55)),
        ((-1.3, 0.0, 2.55), (-1.3, 0.728, 2.55), (-0.728, 1.3, 2.55), (0.0, 1.3, 2.55)),
        ((-1.3, 0.0, 2.4), (-1.3, 0.728, 2.4), (-0.728, 1.3, 2.4), (0.0, 1.3, 2.4)),
    ),
    # 27 (lid_bottom)
    (
        ((0.0, 0.2, 2.7), (0.112, 0.2, 2.7), (0.2, 0.112, 2.7), (0.2, 0.0, 2.7)),
        ((0.0, 0.4, 2.55), (0.224, 0.4, 2.55), (0.4, 0.224, 2.55), (0.4, 0.0, 2.55)),
        ((0.0, 1.3, 2.55), (0.728, 1.3, 2.55), (1.3, 0.728, 2.55), (1.3, 0.0, 2.55)),
        ((0.0, 1.3, 2.4), (0.728, 1.3, 2.4), (1.3, 0.728, 2.4), (1.3, 0.0, 2.4)),
    ),
    # 28 (bottom)
    (
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
        ((1.425, 0.0, 0.0), (1.425, 0.798, 0.0), (0.798, 1.425, 0.0), (0.0, 1.425, 0.0)),
        ((1.5, 0.0, 0.075), (1.5, 0.84, 0.075), (0.84, 1.5, 0.075), (0.0, 1.5, 0.075)),
        ((1.5, 0.0, 0.15), (1.5, 0.84, 0.15), (0.84, 1.5, 0.15), (0.0, 1.5, 0.15)),
    ),
    # 29 (bottom)
    (
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
        ((0.0, 1.425, 0.0), (-0.798, 1.425, 0.0), (-1.425, 0.798, 0.0), (-1.425, 0.0, 0.0)),
        ((0.0, 1.5, 0.075), (-0.84, 1.5, 0.075), (-1.5, 0.84, 0.075), (-1.5, 0.0, 0.075)),
        ((0.0, 1.5, 0.15), (-0.84, 1.5, 0.15), (-1.5, 0.84, 0.15), (-1.5, 0.0, 0.15)),
    ),
    # 30 (bottom)
    (
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
        ((-1.425, 0.0, 0.0), (-1.425, -0.798, 0.0), (-0.798, -1.425, 0.0), (0.0, -1.425, 0.0)),
        ((-1.5, 0.0, 0.075), (-1.5, -0.84, 0.075), (-0.84, -1.5, 0.075), (0.0, -1.5, 0.075)),
        ((-1.5, 0.0, 0.15), (-1.5, -0.84, 0.15), (-0.84, -1.5, 0.15), (0.0, -1.5, 0.15)),
    ),
    # 31 (bottom)
    (
        ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
        ((0.0, -1.425, 0.0), (0.798, -1.425, 0.0), (1.425, -0.798, 0.0), (1.425, 0.0, 0.0)),
        ((0.0, -1.5, 0.075), (0.84, -1.5, 0.075), (1.5, -0.84, 0.075), (1.5, 0.0, 0.075)),
        ((0.0, -1.5, 0.15), (0.84, -1.5, 0.15), (1.5, -0.84, 0.15), (1.5, 0.0, 0.15)),
    ),
)
