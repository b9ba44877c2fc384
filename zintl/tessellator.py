"""Turns composed text into textured meshes."""

from typing import List, Optional

from zintl.geometry import Viewport
from zintl.mesh import Mesh
from zintl.text import Galley, PositionedGlyph
from zintl.units import PhysicalPixelsPoint, PhysicalPixelsRect

TessellationJob = Optional[Galley]

_GLYPH_TEXTURE_ID = 0


class Tessellator:
    """Builds device-pixel meshes from layout results."""

    def _glyph_mesh(self, positioned: PositionedGlyph) -> Mesh:
        origin = positioned.rect.min
        glyph_rect = positioned.glyph.rect
        bounds = glyph_rect.bounds
        mesh_rect = PhysicalPixelsRect(
            PhysicalPixelsPoint(
                (origin.x + bounds.min.x).to_whole(),
                (origin.y + bounds.min.y).to_whole(),
            ),
            PhysicalPixelsPoint(
                (origin.x + bounds.max.x).to_whole(),
                (origin.y + bounds.max.y).to_whole(),
            ),
        )
        return Mesh.from_device_rect(
            mesh_rect, _GLYPH_TEXTURE_ID, glyph_rect.texture_bounds
        )

    def tessellate_galley(self, galley: Galley) -> List[Mesh]:
        """One textured quad per glyph."""
        return [self._glyph_mesh(positioned) for positioned in galley.glyphs]

    def tessellate(self, job: TessellationJob, viewport: Viewport) -> List[Mesh]:
        """Meshes for a job; an empty job yields none."""
        if isinstance(job, Galley):
            return self.tessellate_galley(job)
        return []