"""A growable RGBA texture atlas packed row by row."""

from zintl.units import PhysicalPixels, PhysicalPixelsPoint, PhysicalPixelsRect


def _as_pixels(value) -> PhysicalPixels:
    return value if isinstance(value, PhysicalPixels) else PhysicalPixels(value)


class Atlas:
    """Rendered images packed into a single RGBA pixel buffer."""

    def __init__(self, initial_width, initial_height) -> None:
        self.width = _as_pixels(initial_width)
        self.height = _as_pixels(initial_height)
        self._cursor = PhysicalPixelsPoint.zero()
        self._row_height = PhysicalPixels.zero()
        self._pixels = bytearray(self.width.value * self.height.value * 4)

    def __repr__(self) -> str:
        return f"Atlas(width={self.width.value}, height={self.height.value})"

    def resize_pixels(self, new_height) -> None:
        """Grow the atlas to ``new_height`` rows; never shrinks."""
        new_height = _as_pixels(new_height)
        if new_height > self.height:
            new_size = self.width.value * new_height.value * 4
            self._pixels.extend(bytes(new_size - len(self._pixels)))
            self.height = new_height

    def create_image(self, width, height) -> PhysicalPixelsRect:
        """Reserve a region of the given size and return its pixel bounds."""
        width = _as_pixels(width)
        height = _as_pixels(height)
        if self._cursor.x + width > self.width:
            self._cursor = PhysicalPixelsPoint(
                PhysicalPixels.zero(), self._cursor.y + self._row_height
            )
            self._row_height = PhysicalPixels.zero()
        self._row_height = self._row_height.max(height)
        self.resize_pixels(self._cursor.y + self._row_height)

        pos = self._cursor
        self._cursor = PhysicalPixelsPoint(pos.x + width, pos.y)
        return PhysicalPixelsRect(pos, PhysicalPixelsPoint(pos.x + width, pos.y + height))

    def _draw_coverage(self, rect: PhysicalPixelsRect, coverage: bytes) -> None:
        """Write an 8-bit coverage mask, row-major with the rect's width, into ``rect``."""
        left, top = rect.min.x.value, rect.min.y.value
        row_width = rect.width().value
        if row_width == 0:
            return
        stride = self.width.value
        for row_index in range(len(coverage) // row_width):
            row = coverage[row_index * row_width:(row_index + 1) * row_width]
            base = ((top + row_index) * stride + left) * 4
            for col, value in enumerate(row):
                if not value:
                    continue
                alpha = value / 255.0
                shade = int((1.0 - alpha) * 255.0)
                start = base + col * 4
                self._pixels[start:start + 4] = bytes(
                    (shade, shade, shade, int(alpha * 255.0))
                )

    def pixels(self) -> bytes:
        """A copy of the RGBA pixel data."""
        return bytes(self._pixels)