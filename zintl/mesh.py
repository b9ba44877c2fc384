"""Triangle meshes in physical device pixels."""

from dataclasses import dataclass, field
from typing import List, Optional

from zintl.units import PhysicalPixelsPoint, PhysicalPixelsRect

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class Vertex:
    """A vertex in device pixels; texture coordinates are not normalized."""

    position: PhysicalPixelsPoint
    tex_coords: PhysicalPixelsPoint


@dataclass
class Mesh:
    """Indexed triangles in device pixels, optionally textured, with child meshes."""

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    texture_id: Optional[int] = None
    children: List["Mesh"] = field(default_factory=list)

    @classmethod
    def from_children(cls, children: List["Mesh"]) -> "Mesh":
        """An empty mesh that only groups other meshes."""
        return cls(children=list(children))

    @classmethod
    def from_device_rect(
        cls,
        rect: PhysicalPixelsRect,
        texture_id: Optional[int],
        tex_bounds: PhysicalPixelsRect,
    ) -> "Mesh":
        """A quad of two triangles covering ``rect``, sampling ``tex_bounds``."""
        corners = (
            (rect.min.x, rect.min.y, tex_bounds.min.x, tex_bounds.min.y),
            (rect.max.x, rect.min.y, tex_bounds.max.x, tex_bounds.min.y),
            (rect.max.x, rect.max.y, tex_bounds.max.x, tex_bounds.max.y),
            (rect.min.x, rect.max.y, tex_bounds.min.x, tex_bounds.max.y),
        )
        vertices = [
            Vertex(PhysicalPixelsPoint(x, y), PhysicalPixelsPoint(u, v))
            for x, y, u, v in corners
        ]
        return cls(
            vertices=vertices,
            indices=list(_QUAD_INDICES),
            texture_id=texture_id,
        )