# zintl

A small, declarative GUI toolkit core. It provides the pieces between a view
tree and a GPU: unit-safe pixel geometry, views and widgets that render into a
render tree, single-line text layout backed by a glyph atlas, tessellation of
laid-out text into quads, and packing of those quads into vertex and index
bytes ready for upload.

## Installation

```
pip install zintl
```

Glyph rendering uses Pillow's FreeType support. To run the test suite:

```
pip install "zintl[test]"
pytest
```

## Modules

- `zintl.units` – pixel units `PhysicalPixels` (whole, unsigned 32-bit),
  `PhysicalPixelsF` and `LogicalPixels`, each with a matching `...Point`,
  `...Rect` and `...Size`. Values of different units do not mix; division
  and remainder come as `checked_div` / `checked_div_value` /
  `checked_rem` / `checked_rem_value`, which return `None` for a zero
  divisor. `to_float()` and `to_whole()` convert between whole and fractional
  physical pixels.
- `zintl.geometry` – `ScaleFactor` (DPI and device pixel ratio, both must be
  positive), `Viewport`, `Alignment` with `align_size`, `TexturePoint` and
  `TextureBounds`, and the conversions `in_physical_scale(item,
  scale_factor, whole=True)` and `in_logical_scale(item, scale_factor)`,
  which work on units, points, rects and sizes.
- `zintl.linalg` – `Vec2`, `Mat3` and `Mat4` (`Mat4.to_bytes()` gives 16
  little-endian 32-bit floats).
- `zintl.render` – the render tree: `RenderNode`, `RenderObject`,
  `RenderContent`, `Shape`, `Metrics`, `Position`.
- `zintl.view` – `View`, the abstract `Composable`, `Context`, `Storage`, and
  `v(*views)`, which turns views into a list of child generators.
- `zintl.widget` – the widgets `Base` (renders nothing), `Label` (a text run)
  and `Stack` (a container whose content is its children).
- `zintl.app` – `App`, which renders a root view once and keeps the result in
  `root`.
- `zintl.texture` – `Atlas`, an RGBA buffer that packs images row by row and
  grows in height as needed.
- `zintl.text` – `Font`, `Glyph`, `GlyphRect`, `FontProperties`, `Typecase`,
  `Typesetter`, `Galley`, `PositionedGlyph` and `TextAlignment`.
- `zintl.mesh` – `Vertex` and `Mesh` (`Mesh.from_device_rect` builds a
  two-triangle quad).
- `zintl.tessellator` – `Tessellator`, which turns a `Galley` into one
  textured quad per glyph.
- `zintl.device` – `DevicePoint`, `DeviceVertex`, `DeviceMesh` with
  normalized texture coordinates and `vertex_bytes()` / `index_bytes()`, and
  `ortho_matrix(viewport)` for a top-left-origin orthographic projection.

## Example: a view tree

```python
from zintl.app import App
from zintl.view import Composable, v
from zintl.widget import Label, Stack


class HelloWorld(Composable):
    def compose(self):
        return Stack().children(v(Label("HelloWorld")))


app = App(HelloWorld())
print(app.root)
```

## Example: geometry with units

```python
from zintl.geometry import Alignment
from zintl.units import LogicalPixelsRect, LogicalPixelsSize

bounds = LogicalPixelsRect.with_size(
    LogicalPixelsRect.zero().min, LogicalPixelsSize.from_values(100.0, 100.0)
)
placed = Alignment.CENTER.align_size(bounds, LogicalPixelsSize.from_values(20.0, 10.0))
```

## Example: text to GPU-ready bytes

No font is bundled; supply TrueType or OpenType data of your own.

```python
from pathlib import Path

from zintl.device import DeviceMesh
from zintl.geometry import Alignment, ScaleFactor, Viewport
from zintl.tessellator import Tessellator
from zintl.text import FontProperties, TextAlignment, Typecase, Typesetter
from zintl.units import LogicalPixelsRect, LogicalPixelsSize

scale = ScaleFactor(96.0, 1.25)
typecase = Typecase(scale)
typecase.load_font("Body", Path("MyFont.ttf").read_bytes())
font = typecase.get_font(FontProperties("Body", "32.0"))

bounds = LogicalPixelsRect.with_size(
    LogicalPixelsRect.zero().min, LogicalPixelsSize.from_values(800.0, 600.0)
)
galley = Typesetter().compose(
    "Hello", font, bounds, TextAlignment.LEFT, Alignment.TOP_LEFT, scale
)
meshes = Tessellator().tessellate(galley, Viewport(800, 600, scale))

atlas_size = font.atlas_size()
atlas_rgba = font.atlas_pixels()
buffers = [DeviceMesh.from_mesh(mesh, atlas_size) for mesh in meshes]
vertex_data = b"".join(mesh.vertex_bytes() for mesh in buffers)
```

## What this package does not do

It opens no window, runs no event loop and draws nothing on screen: it stops
at render trees, atlas pixels and packed vertex/index bytes, which a host
application must upload and draw with a graphics library of its choice.
Layout is a single line of text; `TextAlignment` is accepted but does not yet
change placement, and `View.padding` records nothing that affects rendering.
`Storage` is a plain in-memory dictionary with no persistence.