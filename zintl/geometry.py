"""Viewport, scale factors, alignment and normalized texture coordinates."""

import enum
import math
from dataclasses import dataclass, field
from typing import Optional, Union

from zintl.units import (
    LogicalPixels,
    LogicalPixelsPoint,
    LogicalPixelsRect,
    LogicalPixelsSize,
    PhysicalPixels,
    PhysicalPixelsF,
    PhysicalPixelsFPoint,
    PhysicalPixelsFRect,
    PhysicalPixelsFSize,
    PhysicalPixelsPoint,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
    Unit,
    UnitPoint,
    UnitRect,
    UnitSize,
    _round_to_u32,
)


def _round_half_away(value: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class ScaleFactor:
    """Screen density (DPI) and device pixel ratio (DPR)."""

    dpi: float
    dpr: float

    def __post_init__(self) -> None:
        if not self.dpi > 0.0:
            raise ValueError("DPI must be greater than 0")
        if not self.dpr > 0.0:
            raise ValueError("DPR must be greater than 0")
        object.__setattr__(self, "dpi", float(self.dpi))
        object.__setattr__(self, "dpr", float(self.dpr))


def _as_physical(value) -> PhysicalPixels:
    return value if isinstance(value, PhysicalPixels) else PhysicalPixels(value)


@dataclass(frozen=True)
class Viewport:
    """The drawable area in physical device pixels."""

    device_width: PhysicalPixels
    device_height: PhysicalPixels
    scale_factor: ScaleFactor
    rect: PhysicalPixelsRect = field(init=False)

    def __post_init__(self) -> None:
        width = _as_physical(self.device_width)
        height = _as_physical(self.device_height)
        object.__setattr__(self, "device_width", width)
        object.__setattr__(self, "device_height", height)
        rect = PhysicalPixelsRect.with_size(
            PhysicalPixelsPoint.zero(), PhysicalPixelsSize(width, height)
        )
        object.__setattr__(self, "rect", rect)


_PHYSICAL_TARGETS = {
    True: (PhysicalPixels, PhysicalPixelsPoint, PhysicalPixelsRect, PhysicalPixelsSize),
    False: (
        PhysicalPixelsF,
        PhysicalPixelsFPoint,
        PhysicalPixelsFRect,
        PhysicalPixelsFSize,
    ),
}

_LOGICAL_TARGETS = (LogicalPixels, LogicalPixelsPoint, LogicalPixelsRect, LogicalPixelsSize)

Scalable = Union[Unit, UnitPoint, UnitRect, UnitSize]


def _convert(item, source_types, targets, scale_value):
    unit_t, point_t, rect_t, size_t = targets
    if isinstance(item, Unit):
        if type(item) not in source_types:
            raise TypeError(f"cannot scale {type(item).__name__}")
        return unit_t(scale_value(item.value))
    if isinstance(item, UnitPoint):
        return point_t(*(_convert(c, source_types, targets, scale_value) for c in item))
    if isinstance(item, UnitRect):
        return rect_t(
            _convert(item.min, source_types, targets, scale_value),
            _convert(item.max, source_types, targets, scale_value),
        )
    if isinstance(item, UnitSize):
        return size_t(
            _convert(item.width, source_types, targets, scale_value),
            _convert(item.height, source_types, targets, scale_value),
        )
    raise TypeError(f"cannot scale {type(item).__name__}")


def in_physical_scale(item: Scalable, scale_factor: ScaleFactor, whole: bool = True):
    """Scale a logical value up to physical pixels, rounding to whole pixels.

    With ``whole`` the result is in PhysicalPixels, otherwise in PhysicalPixelsF.
    """
    if whole:
        def scale(value):
            return _round_to_u32(value * scale_factor.dpr)
    else:
        def scale(value):
            return _round_half_away(value * scale_factor.dpr)
    return _convert(item, (LogicalPixels,), _PHYSICAL_TARGETS[bool(whole)], scale)


def in_logical_scale(item: Scalable, scale_factor: ScaleFactor):
    """Scale a physical value down to logical pixels, rounding to whole pixels."""

    def scale(value):
        return _round_half_away(float(value) / scale_factor.dpr)

    return _convert(item, (PhysicalPixels, PhysicalPixelsF), _LOGICAL_TARGETS, scale)


class Alignment(enum.Enum):
    """Where a box is placed inside its bounds."""

    TOP_LEFT = enum.auto()
    TOP_RIGHT = enum.auto()
    BOTTOM_LEFT = enum.auto()
    BOTTOM_RIGHT = enum.auto()
    CENTER = enum.auto()
    CENTER_LEFT = enum.auto()
    CENTER_RIGHT = enum.auto()
    CENTER_TOP = enum.auto()
    CENTER_BOTTOM = enum.auto()

    def align_size(
        self, bounds: LogicalPixelsRect, size: LogicalPixelsSize
    ) -> LogicalPixelsRect:
        """Place a box of ``size`` inside ``bounds``."""
        free_x = bounds.width() - size.width
        free_y = bounds.height() - size.height
        half_x = free_x.checked_div_value(2.0)
        half_y = free_y.checked_div_value(2.0)
        zero = LogicalPixels.zero()

        offsets = {
            Alignment.TOP_LEFT: (zero, zero),
            Alignment.TOP_RIGHT: (free_x, zero),
            Alignment.BOTTOM_LEFT: (zero, free_y),
            Alignment.BOTTOM_RIGHT: (free_x, free_y),
            Alignment.CENTER: (half_x, half_y),
            Alignment.CENTER_LEFT: (zero, half_y),
            Alignment.CENTER_RIGHT: (free_x, half_y),
            Alignment.CENTER_TOP: (half_x, zero),
            Alignment.CENTER_BOTTOM: (half_x, free_y),
        }
        dx, dy = offsets[self]
        corner = LogicalPixelsPoint(bounds.min.x + dx, bounds.min.y + dy)
        return LogicalPixelsRect.with_size(corner, size)


@dataclass(frozen=True)
class TexturePoint:
    """A normalized texture coordinate, nominally within [0.0, 1.0]."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_physical_point(
        cls, point: PhysicalPixelsPoint, texture_size: PhysicalPixelsSize
    ) -> Optional["TexturePoint"]:
        """Normalize a pixel position by the texture size; None if it has no area."""
        fpoint = point.to_float()
        x = fpoint.x.checked_div_value(float(texture_size.width.value))
        if x is None:
            return None
        y = fpoint.y.checked_div_value(float(texture_size.height.value))
        if y is None:
            return None
        return cls(x.value, y.value)


@dataclass(frozen=True)
class TextureBounds:
    """A normalized texture rectangle."""

    min: TexturePoint = field(default_factory=TexturePoint)
    max: TexturePoint = field(default_factory=TexturePoint)

    @classmethod
    def from_physical_rect(
        cls, rect: PhysicalPixelsRect, texture_size: PhysicalPixelsSize
    ) -> Optional["TextureBounds"]:
        low = TexturePoint.from_physical_point(rect.min, texture_size)
        if low is None:
            return None
        high = TexturePoint.from_physical_point(rect.max, texture_size)
        if high is None:
            return None
        return cls(low, high)