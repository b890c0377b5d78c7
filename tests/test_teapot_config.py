# tests/test_teapot_config.py
# Tests for teapot generation configuration parsing and validation
# Exists to ensure config sources, overrides and error types behave consistently
# RELEVANT FILES: python/teapot3d/config.py, python/teapot3d/geometry.py, tests/test_teapot_mesh.py

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from teapot3d import TeapotConfig, generate_teapot_mesh, load_teapot_config
from teapot3d.config import split_teapot_overrides


def test_defaults_roundtrip() -> None:
    cfg = load_teapot_config()
    assert cfg.to_dict() == {
        "tessellation": {"rows": 16, "cols": 16},
        "execution": {"parallel": False, "max_workers": None},
        "normals": {"renormalize": True},
    }
    assert TeapotConfig.from_mapping(cfg.to_dict()) == cfg


def test_mapping_and_overrides() -> None:
    cfg = load_teapot_config(
        {"tessellation": {"rows": 4}, "execution": {"parallel": True}},
        overrides={"cols": 6, "workers": 2, "unit_normals": True},
    )
    assert (cfg.tessellation.rows, cfg.tessellation.cols) == (4, 6)
    assert cfg.execution.parallel is True
    assert cfg.execution.max_workers == 2
    assert cfg.normals.renormalize is True


def test_resolution_tuple_is_not_an_option() -> None:
    with pytest.raises(TypeError, match="Unknown teapot option"):
        load_teapot_config(overrides={"resolution": (3, 9)})
    with pytest.raises(TypeError, match="unexpected options"):
        generate_teapot_mesh(grid=(3, 9))


def test_load_from_json(tmp_path: Path) -> None:
    path = tmp_path / "teapot.json"
    path.write_text(json.dumps({"tessellation": {"rows": 5, "cols": 3}}), encoding="utf-8")
    cfg = load_teapot_config(path)
    assert (cfg.tessellation.rows, cfg.tessellation.cols) == (5, 3)
    mesh = generate_teapot_mesh(config=str(path))
    assert mesh.vertex_count == 5 * 3 * 32


def test_unsupported_file_format(tmp_path: Path) -> None:
    path = tmp_path / "teapot.yaml"
    path.write_text("tessellation: {}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported"):
        load_teapot_config(path)


def test_copy_is_independent() -> None:
    cfg = TeapotConfig()
    loaded = load_teapot_config(cfg, overrides={"rows": 3})
    assert cfg.tessellation.rows == 16
    assert loaded.tessellation.rows == 3


@pytest.mark.parametrize(
    "data",
    [
        {"tessellation": {"rows": 1}},
        {"tessellation": {"cols": 0}},
        {"execution": {"max_workers": 0}},
    ],
)
def test_invalid_values_raise_value_error(data) -> None:
    with pytest.raises(ValueError):
        load_teapot_config(data)


def test_non_mapping_section_raises_type_error() -> None:
    with pytest.raises(TypeError, match="tessellation must be a mapping"):
        load_teapot_config({"tessellation": [4, 4]})


def test_unknown_override_raises_type_error() -> None:
    with pytest.raises(TypeError, match="Unknown teapot option"):
        load_teapot_config(overrides={"lod": 2})


def test_bad_config_type_raises() -> None:
    with pytest.raises(TypeError):
        load_teapot_config(42)


def test_split_overrides() -> None:
    overrides, remaining = split_teapot_overrides({"rows": 4, "parallel": True, "color": "red"})
    assert overrides == {"rows": 4, "parallel": True}
    assert remaining == {"color": "red"}


def test_explicit_arguments_beat_config() -> None:
    mesh = generate_teapot_mesh(2, 3, config={"tessellation": {"rows": 9, "cols": 9}})
    assert mesh.vertex_count == 2 * 3 * 32


def test_default_mesh_normals_are_unit_length() -> None:
    mesh = generate_teapot_mesh(16, 16)
    lengths = np.linalg.norm(mesh.normals, axis=1)
    assert np.all((np.abs(lengths - 1.0) < 1e-5) | (lengths < 1e-6))
    assert np.count_nonzero(lengths < 1e-6) > 0


def test_raw_normal_length_is_opt_out() -> None:
    mesh = generate_teapot_mesh(6, 6, renormalize=False)
    lengths = np.linalg.norm(mesh.normals, axis=1)
    assert np.all(lengths <= 1.0 + 1e-6)
    # handle and spout tangents are far from orthogonal
    assert np.count_nonzero((lengths > 1e-6) & (lengths < 0.99)) > 0
