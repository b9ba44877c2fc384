"""Sized fonts with glyph atlases, and single-line text layout."""

import enum
import io
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from zintl.geometry import Alignment, ScaleFactor, in_logical_scale, in_physical_scale
from zintl.texture import Atlas
from zintl.units import (
    LogicalPixels,
    LogicalPixelsRect,
    PhysicalPixels,
    PhysicalPixelsF,
    PhysicalPixelsFPoint,
    PhysicalPixelsFRect,
    PhysicalPixelsFSize,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
)

FontSource = Union[bytes, bytearray, memoryview, str, os.PathLike]

_REFERENCE_SIZE = 1000
_MIN_ATLAS_WIDTH = PhysicalPixels(1024)
_MIN_ATLAS_HEIGHT = PhysicalPixels(32)


def _read_source(source: FontSource) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        return Path(source).read_bytes()
    raise TypeError(f"cannot load a font from {type(source).__name__}")


def _open_face(data: bytes, size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(
            io.BytesIO(data), size, layout_engine=ImageFont.Layout.BASIC
        )
    except OSError as exc:
        raise ValueError("invalid font data") from exc


@dataclass(frozen=True)
class GlyphRect:
    """A glyph's advance box, its mesh bounds and where it sits in the atlas."""

    width: PhysicalPixelsF = field(default_factory=PhysicalPixelsF.zero)
    height: PhysicalPixelsF = field(default_factory=PhysicalPixelsF.zero)
    bounds: PhysicalPixelsFRect = field(default_factory=PhysicalPixelsFRect.zero)
    texture_bounds: PhysicalPixelsRect = field(default_factory=PhysicalPixelsRect.zero)


@dataclass(frozen=True)
class Glyph:
    """A rendered glyph; the default value stands for an empty glyph."""

    id: int = 0
    char: str = ""
    rect: GlyphRect = field(default_factory=GlyphRect)


class Font:
    """A typeface at one physical size, rendering glyphs into its own atlas."""

    def __init__(self, source: FontSource, type_face: str, scale, scale_factor: ScaleFactor):
        logical = scale if isinstance(scale, LogicalPixels) else LogicalPixels(scale)
        physical = in_physical_scale(logical, scale_factor)
        data = _read_source(source)

        reference = _open_face(data, _REFERENCE_SIZE)
        ref_ascent, ref_descent = reference.getmetrics()
        span = ref_ascent + ref_descent
        if span <= 0:
            raise ValueError("font has no vertical extent")

        self.type_face = type_face
        self.atlas = Atlas(physical.max(_MIN_ATLAS_WIDTH), physical.max(_MIN_ATLAS_HEIGHT))
        self.scale = physical.to_float()
        size = self.scale.value
        # The pixel size spans ascent to descent, so pick the em size that yields it.
        self._face = _open_face(data, max(1, round(size * _REFERENCE_SIZE / span)))
        self.height = PhysicalPixelsF(size)
        self.ascent = PhysicalPixelsF(size * ref_ascent / span)
        self.descent = PhysicalPixelsF(-size * ref_descent / span)
        self.line_gap = PhysicalPixelsF.zero()
        self.glyphs: Dict[str, Glyph] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Font(type_face={self.type_face!r}, scale={self.scale.value})"

    def get_glyph(self, char: str) -> Glyph:
        """The glyph for ``char``, rendering it into the atlas on first use."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        with self._lock:
            cached = self.glyphs.get(char)
            if cached is not None:
                return cached
            if char.isspace() or not char.isprintable():
                return Glyph()

            left, top, right, bottom = self._face.getbbox(char, anchor="la")
            width, height = right - left, bottom - top
            if width <= 0 or height <= 0:
                return Glyph()
            canvas = Image.new("L", (width, height), 0)
            ImageDraw.Draw(canvas).text(
                (-left, -top), char, font=self._face, fill=255, anchor="la"
            )
            coverage = canvas.tobytes()
            if not any(coverage):
                return Glyph()

            texture_bounds = self.atlas.create_image(
                PhysicalPixels(width), PhysicalPixels(height)
            )
            self.atlas._draw_coverage(texture_bounds, coverage)
            glyph = Glyph(
                id=ord(char),
                char=char,
                rect=GlyphRect(
                    width=PhysicalPixelsF(float(self._face.getlength(char))),
                    height=self.height,
                    bounds=PhysicalPixelsFRect(
                        (float(left), float(top)), (float(right), float(bottom))
                    ),
                    texture_bounds=texture_bounds,
                ),
            )
            self.glyphs[char] = glyph
            return glyph

    def kern(self, left: Glyph, right: Glyph) -> PhysicalPixelsF:
        """The horizontal adjustment between two adjacent glyphs."""
        if not left.char or not right.char:
            return PhysicalPixelsF.zero()
        pair = self._face.getlength(left.char + right.char)
        alone = self._face.getlength(left.char) + self._face.getlength(right.char)
        return PhysicalPixelsF(float(pair - alone))

    def atlas_pixels(self) -> bytes:
        with self._lock:
            return self.atlas.pixels()

    def atlas_size(self) -> PhysicalPixelsSize:
        with self._lock:
            return PhysicalPixelsSize(self.atlas.width, self.atlas.height)


@dataclass(frozen=True)
class FontProperties:
    """A font name and a size given as text, usable as a dictionary key."""

    name: str = ""
    scale_string: str = ""


class Typecase:
    """Loaded typefaces and the sized fonts made from them."""

    def __init__(self, scale_factor: ScaleFactor) -> None:
        self.fonts: Dict[str, bytes] = {}
        self.sized_fonts: Dict[FontProperties, Font] = {}
        self.scale_factor = scale_factor

    def load_font(self, name: str, data: bytes) -> None:
        """Register font data under ``name``; raises ValueError if it is not a font."""
        data = bytes(data)
        _open_face(data, 10)
        self.fonts[name] = data

    def get_font(self, font: FontProperties) -> Optional[Font]:
        """The sized font for these properties, or None if the name is unknown."""
        existing = self.sized_fonts.get(font)
        if existing is not None:
            return existing
        data = self.fonts.get(font.name)
        if data is None:
            return None
        try:
            scale = float(font.scale_string)
        except ValueError as exc:
            raise ValueError("Invalid scale string") from exc
        sized = Font(data, font.name, LogicalPixels(scale), self.scale_factor)
        self.sized_fonts[font] = sized
        return sized


@dataclass(frozen=True)
class PositionedGlyph:
    glyph: Glyph
    rect: PhysicalPixelsFRect


class TextAlignment(enum.Enum):
    LEFT = enum.auto()
    CENTER = enum.auto()
    RIGHT = enum.auto()


@dataclass
class Galley:
    """Composed glyphs, ready for rendering."""

    glyphs: List[PositionedGlyph]
    rect: LogicalPixelsRect


class Typesetter:
    """Lays text out on a single line."""

    def compose(
        self,
        text: str,
        font: Font,
        bounds: LogicalPixelsRect,
        text_alignment: TextAlignment,
        alignment: Alignment,
        scale_factor: ScaleFactor,
    ) -> Galley:
        glyphs: List[PositionedGlyph] = []
        cursor_x = PhysicalPixelsF.zero()
        width = PhysicalPixelsF.zero()
        height = PhysicalPixelsF.zero()
        previous: Optional[Glyph] = None
        for char in text:
            glyph = font.get_glyph(char)
            if previous is not None:
                cursor_x = cursor_x + font.kern(previous, glyph)
            if width < glyph.rect.height:
                height = glyph.rect.height
            glyphs.append(
                PositionedGlyph(
                    glyph,
                    PhysicalPixelsFRect.with_size(
                        PhysicalPixelsFPoint(cursor_x, PhysicalPixelsF.zero()),
                        PhysicalPixelsFSize(glyph.rect.width, glyph.rect.height),
                    ),
                )
            )
            previous = glyph
            cursor_x = cursor_x + glyph.rect.width
            width = width + glyph.rect.width

        size = in_logical_scale(PhysicalPixelsFSize(width, height), scale_factor)
        return Galley(glyphs=glyphs, rect=alignment.align_size(bounds, size))