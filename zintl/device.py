"""GPU-ready vertex and mesh data, and the orthographic projection for a viewport."""

import struct
from dataclasses import dataclass, field
from typing import List, Optional, Union

from zintl.geometry import TexturePoint, Viewport
from zintl.linalg import Mat4
from zintl.mesh import Mesh, Vertex
from zintl.units import PhysicalPixelsFPoint, PhysicalPixelsPoint, PhysicalPixelsSize

_VERTEX_FORMAT = struct.Struct("<4f")


def ortho_matrix(viewport: Viewport) -> Mat4:
    """Orthographic projection mapping device pixels (origin top-left) to clip space.

    The matrix is stored column by column, as a GPU uniform expects it.
    """
    left, right = 0.0, float(viewport.device_width.value)
    bottom, top = float(viewport.device_height.value), 0.0
    near, far = -1.0, 1.0
    if right == left or top == bottom:
        raise ValueError("viewport has no area")
    width = right - left
    height = top - bottom
    depth = far - near
    return Mat4(
        (
            (2.0 / width, 0.0, 0.0, 0.0),
            (0.0, 2.0 / height, 0.0, 0.0),
            (0.0, 0.0, -2.0 / depth, 0.0),
            (
                -(right + left) / width,
                -(top + bottom) / height,
                -(far + near) / depth,
                1.0,
            ),
        )
    )


@dataclass(frozen=True)
class DevicePoint:
    """A position in device pixels as two floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_point(
        cls, point: Union[PhysicalPixelsPoint, PhysicalPixelsFPoint]
    ) -> "DevicePoint":
        if not isinstance(point, (PhysicalPixelsPoint, PhysicalPixelsFPoint)):
            raise TypeError(f"cannot make a device point from {type(point).__name__}")
        return cls(float(point.x.value), float(point.y.value))


@dataclass(frozen=True)
class DeviceVertex:
    """A vertex with a device position and normalized texture coordinates."""

    position: DevicePoint
    tex_coords: TexturePoint

    @classmethod
    def from_vertex(
        cls, vertex: Vertex, texture_size: PhysicalPixelsSize
    ) -> "DeviceVertex":
        """Normalize the vertex's texture coordinates by ``texture_size``."""
        tex = TexturePoint.from_physical_point(vertex.tex_coords, texture_size)
        if tex is None:
            raise ValueError("texture size must not be zero")
        return cls(DevicePoint.from_point(vertex.position), tex)

    def to_bytes(self) -> bytes:
        """Position then texture coordinates, as four little-endian 32-bit floats."""
        return _VERTEX_FORMAT.pack(
            self.position.x, self.position.y, self.tex_coords.x, self.tex_coords.y
        )


@dataclass
class DeviceMesh:
    """A mesh ready for upload: vertices, 32-bit indices and a texture id."""

    vertices: List[DeviceVertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    texture_id: Optional[int] = None

    @classmethod
    def from_mesh(cls, mesh: Mesh, texture_size: PhysicalPixelsSize) -> "DeviceMesh":
        """Convert one mesh (without its children) for a texture of ``texture_size``."""
        return cls(
            vertices=[DeviceVertex.from_vertex(v, texture_size) for v in mesh.vertices],
            indices=list(mesh.indices),
            texture_id=mesh.texture_id,
        )

    def vertex_bytes(self) -> bytes:
        return b"".join(vertex.to_bytes() for vertex in self.vertices)

    def index_bytes(self) -> bytes:
        return struct.pack(f"<{len(self.indices)}I", *self.indices)