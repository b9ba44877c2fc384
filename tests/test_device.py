import struct

import pytest

from zintl.device import DeviceMesh, DevicePoint, DeviceVertex, ortho_matrix
from zintl.geometry import ScaleFactor, TexturePoint, Viewport
from zintl.mesh import Mesh, Vertex
from zintl.units import (
    PhysicalPixelsFPoint,
    PhysicalPixelsPoint,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
)


def _viewport(width, height):
    return Viewport(width, height, ScaleFactor(96.0, 1.25))


def _project(matrix, x, y):
    vec = (x, y, 0.0, 1.0)
    return tuple(sum(matrix.m[col][row] * vec[col] for col in range(4)) for row in range(4))


def _rect(x0, y0, x1, y1):
    return PhysicalPixelsRect(
        PhysicalPixelsPoint.from_values(x0, y0), PhysicalPixelsPoint.from_values(x1, y1)
    )


def test_ortho_maps_top_left_to_clip_corner():
    clip = _project(ortho_matrix(_viewport(800, 600)), 0.0, 0.0)
    assert clip[0] == pytest.approx(-1.0)
    assert clip[1] == pytest.approx(1.0)
    assert clip[3] == pytest.approx(1.0)


def test_ortho_maps_bottom_right_to_clip_corner():
    clip = _project(ortho_matrix(_viewport(800, 600)), 800.0, 600.0)
    assert clip[0] == pytest.approx(1.0)
    assert clip[1] == pytest.approx(-1.0)


def test_ortho_maps_center_to_origin():
    clip = _project(ortho_matrix(_viewport(640, 480)), 320.0, 240.0)
    assert clip[0] == pytest.approx(0.0)
    assert clip[1] == pytest.approx(0.0)


def test_ortho_rejects_empty_viewport():
    with pytest.raises(ValueError):
        ortho_matrix(_viewport(0, 600))


def test_device_point_from_whole_and_float_points():
    assert DevicePoint.from_point(PhysicalPixelsPoint.from_values(3, 4)) == DevicePoint(3.0, 4.0)
    assert DevicePoint.from_point(PhysicalPixelsFPoint.from_values(1.5, 2.5)) == DevicePoint(1.5, 2.5)


def test_device_point_rejects_other_types():
    with pytest.raises(TypeError):
        DevicePoint.from_point((1, 2))


def test_device_vertex_normalizes_texture_coordinates():
    vertex = Vertex(
        PhysicalPixelsPoint.from_values(10, 20), PhysicalPixelsPoint.from_values(50, 25)
    )
    dv = DeviceVertex.from_vertex(vertex, PhysicalPixelsSize.from_values(100, 50))
    assert dv.position == DevicePoint(10.0, 20.0)
    assert dv.tex_coords.x * 100 == pytest.approx(50)
    assert dv.tex_coords.y * 50 == pytest.approx(25)


def test_device_vertex_zero_texture_size_raises():
    vertex = Vertex(PhysicalPixelsPoint.zero(), PhysicalPixelsPoint.from_values(1, 1))
    with pytest.raises(ValueError):
        DeviceVertex.from_vertex(vertex, PhysicalPixelsSize.from_values(0, 10))


def test_device_vertex_bytes_round_trip():
    dv = DeviceVertex(DevicePoint(7.0, 9.0), TexturePoint(0.25, 0.75))
    data = dv.to_bytes()
    assert len(data) == 16
    assert struct.unpack("<4f", data) == (7.0, 9.0, 0.25, 0.75)


def test_device_mesh_from_quad():
    mesh = Mesh.from_device_rect(_rect(0, 0, 10, 10), 3, _rect(0, 0, 4, 4))
    dm = DeviceMesh.from_mesh(mesh, PhysicalPixelsSize.from_values(8, 8))
    assert dm.indices == [0, 1, 2, 0, 2, 3]
    assert dm.texture_id == 3
    assert len(dm.vertices) == 4
    assert [v.position for v in dm.vertices] == [
        DevicePoint(0, 0),
        DevicePoint(10, 0),
        DevicePoint(10, 10),
        DevicePoint(0, 10),
    ]
    assert dm.vertices[0].tex_coords == TexturePoint(0.0, 0.0)


def test_device_mesh_ignores_children():
    child = Mesh.from_device_rect(_rect(0, 0, 1, 1), None, _rect(0, 0, 1, 1))
    dm = DeviceMesh.from_mesh(Mesh.from_children([child]), PhysicalPixelsSize.from_values(1, 1))
    assert dm.vertices == []
    assert dm.indices == []
    assert dm.texture_id is None


def test_device_mesh_buffers_round_trip():
    mesh = Mesh.from_device_rect(_rect(2, 3, 6, 9), 0, _rect(0, 0, 2, 2))
    dm = DeviceMesh.from_mesh(mesh, PhysicalPixelsSize.from_values(4, 4))
    vertex_data = dm.vertex_bytes()
    assert len(vertex_data) == 16 * len(dm.vertices)
    assert vertex_data[:16] == dm.vertices[0].to_bytes()
    index_data = dm.index_bytes()
    assert list(struct.unpack(f"<{len(dm.indices)}I", index_data)) == dm.indices


def test_empty_device_mesh_buffers():
    dm = DeviceMesh()
    assert dm.vertex_bytes() == b""
    assert dm.index_bytes() == b""