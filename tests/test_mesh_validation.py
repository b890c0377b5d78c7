# tests/test_mesh_validation.py
# Covers mesh validation reports and the packed vertex/index upload helpers
# Exists to ensure buffer layout stays compatible with 36-byte interleaved vertex streams
# RELEVANT FILES: python/teapot3d/geometry.py, tests/test_teapot_mesh.py

import numpy as np

from teapot3d import VERTEX_STRIDE_BYTES, MeshBuffers, generate_teapot_mesh, validate_mesh


def _copy(mesh: MeshBuffers) -> MeshBuffers:
    return MeshBuffers(
        positions=mesh.positions.copy(),
        normals=mesh.normals.copy(),
        uvs=mesh.uvs.copy(),
        indices=mesh.indices.copy(),
    )


def test_generated_mesh_is_valid() -> None:
    report = validate_mesh(generate_teapot_mesh(4, 4))
    assert report["valid"], report["errors"]
    assert report["aligned_ok"] and report["indices_ok"] and report["w_ok"] and report["normals_ok"]
    # lid and bottom patches collapse one edge to a point
    assert report["degenerate_normals"] > 0


def test_out_of_range_index_is_reported() -> None:
    mesh = _copy(generate_teapot_mesh(2, 2))
    mesh.indices[-1] = mesh.vertex_count
    report = validate_mesh(mesh)
    assert not report["valid"]
    assert not report["indices_ok"]
    assert any("out of range" in e for e in report["errors"])


def test_partial_triangle_is_reported() -> None:
    mesh = _copy(generate_teapot_mesh(2, 2))
    mesh.indices = mesh.indices[:-1]
    assert not validate_mesh(mesh)["indices_ok"]


def test_misaligned_attributes_are_reported() -> None:
    mesh = _copy(generate_teapot_mesh(2, 2))
    mesh.normals = mesh.normals[:-1]
    report = validate_mesh(mesh)
    assert not report["aligned_ok"]
    assert not report["valid"]


def test_w_component_is_checked() -> None:
    mesh = _copy(generate_teapot_mesh(2, 2))
    mesh.positions[5, 3] = 0.0
    assert not validate_mesh(mesh)["w_ok"]


def test_interleaved_layout() -> None:
    mesh = generate_teapot_mesh(3, 2)
    packed = mesh.interleaved()
    assert packed.shape == (mesh.vertex_count, 9)
    assert packed.dtype == np.float32
    assert packed.strides[0] == VERTEX_STRIDE_BYTES
    assert np.array_equal(packed[:, :4], mesh.positions)
    assert np.array_equal(packed[:, 4:7], mesh.normals)
    assert np.array_equal(packed[:, 7:], mesh.uvs)


def test_upload_bytes() -> None:
    mesh = generate_teapot_mesh(3, 3)
    vbytes = mesh.vertex_bytes()
    ibytes = mesh.index_bytes()
    assert len(vbytes) == mesh.vertex_count * VERTEX_STRIDE_BYTES
    assert len(ibytes) == mesh.indices.size * 4
    assert np.array_equal(np.frombuffer(vbytes, dtype="<f4").reshape(-1, 9), mesh.interleaved())
    assert np.array_equal(np.frombuffer(ibytes, dtype="<u4"), mesh.indices)
    assert mesh.nbytes == len(vbytes) + len(ibytes)


def test_triangles_view() -> None:
    mesh = generate_teapot_mesh(2, 2)
    assert mesh.triangles.shape == (mesh.triangle_count, 3)
    assert mesh.triangles[0].tolist() == [0, 1, 3]
    assert mesh.triangles[2].tolist() == [4, 5, 7]
