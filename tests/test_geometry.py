import pytest

from zintl.geometry import (
    Alignment,
    ScaleFactor,
    TextureBounds,
    TexturePoint,
    Viewport,
    in_logical_scale,
    in_physical_scale,
)
from zintl.units import (
    LogicalPixels,
    LogicalPixelsPoint,
    LogicalPixelsRect,
    LogicalPixelsSize,
    PhysicalPixels,
    PhysicalPixelsF,
    PhysicalPixelsFSize,
    PhysicalPixelsPoint,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
)


@pytest.fixture
def bounds():
    return LogicalPixelsRect(
        LogicalPixelsPoint.from_values(0.0, 0.0),
        LogicalPixelsPoint.from_values(100.0, 100.0),
    )


@pytest.mark.parametrize("dpi,dpr", [(0.0, 1.0), (96.0, 0.0), (-1.0, 1.0), (96.0, -2.0)])
def test_scale_factor_rejects_non_positive(dpi, dpr):
    with pytest.raises(ValueError):
        ScaleFactor(dpi, dpr)


def test_scale_factor_keeps_values():
    sf = ScaleFactor(96.0, 1.25)
    assert (sf.dpi, sf.dpr) == (96.0, 1.25)


def test_viewport_rect_covers_device():
    vp = Viewport(800, 600, ScaleFactor(96.0, 1.25))
    assert vp.device_width == PhysicalPixels(800)
    assert vp.rect.min == PhysicalPixelsPoint.zero()
    assert vp.rect.width() == vp.device_width
    assert vp.rect.height() == vp.device_height


@pytest.mark.parametrize("alignment", list(Alignment))
def test_alignment_keeps_size(alignment, bounds):
    size = LogicalPixelsSize.from_values(20.0, 10.0)
    rect = alignment.align_size(bounds, size)
    assert rect.width() == size.width
    assert rect.height() == size.height


def test_alignment_corners(bounds):
    size = LogicalPixelsSize.from_values(20.0, 10.0)
    assert Alignment.TOP_LEFT.align_size(bounds, size).min == bounds.min
    assert Alignment.BOTTOM_RIGHT.align_size(bounds, size).max == bounds.max
    top_right = Alignment.TOP_RIGHT.align_size(bounds, size)
    assert top_right.max.x == bounds.max.x
    assert top_right.min.y == bounds.min.y
    bottom_left = Alignment.BOTTOM_LEFT.align_size(bounds, size)
    assert bottom_left.min.x == bounds.min.x
    assert bottom_left.max.y == bounds.max.y


def test_alignment_centers(bounds):
    size = LogicalPixelsSize.from_values(20.0, 10.0)
    assert Alignment.CENTER.align_size(bounds, size).center() == bounds.center()
    left = Alignment.CENTER_LEFT.align_size(bounds, size)
    assert left.center().y == bounds.center().y
    assert left.min.x == bounds.min.x
    right = Alignment.CENTER_RIGHT.align_size(bounds, size)
    assert right.center().y == bounds.center().y
    assert right.max.x == bounds.max.x
    top = Alignment.CENTER_TOP.align_size(bounds, size)
    assert top.center().x == bounds.center().x
    assert top.min.y == bounds.min.y
    bottom = Alignment.CENTER_BOTTOM.align_size(bounds, size)
    assert bottom.center().x == bounds.center().x
    assert bottom.max.y == bounds.max.y


def test_physical_round_trip_matches_logical():
    sf = ScaleFactor(1.0, 1.5)
    logical = LogicalPixels(16.0)
    physical = in_physical_scale(logical, sf, True)
    assert isinstance(physical, PhysicalPixels)
    assert in_logical_scale(physical, sf) == logical


def test_physical_scale_rounds_half_away():
    sf = ScaleFactor(96.0, 1.25)
    assert in_physical_scale(LogicalPixels(2.0), sf, True) == PhysicalPixels(3)
    assert in_physical_scale(LogicalPixels(2.0), sf, False) == PhysicalPixelsF(3.0)


def test_physical_scale_clamps_negative_whole():
    sf = ScaleFactor(96.0, 2.0)
    assert in_physical_scale(LogicalPixels(-5.0), sf, True) == PhysicalPixels(0)


def test_scaling_composite_values():
    sf = ScaleFactor(1.0, 1.5)
    size = LogicalPixelsSize.from_values(16.0, 16.0)
    physical = in_physical_scale(size, sf, False)
    assert isinstance(physical, PhysicalPixelsFSize)
    assert in_logical_scale(physical, sf) == size
    rect = LogicalPixelsRect(
        LogicalPixelsPoint.from_values(0.0, 0.0),
        LogicalPixelsPoint.from_values(16.0, 16.0),
    )
    scaled = in_physical_scale(rect, sf, True)
    assert isinstance(scaled, PhysicalPixelsRect)
    assert in_logical_scale(scaled, sf) == rect


def test_scaling_rejects_wrong_unit():
    sf = ScaleFactor(1.0, 1.0)
    with pytest.raises(TypeError):
        in_physical_scale(PhysicalPixels(3), sf, True)
    with pytest.raises(TypeError):
        in_logical_scale(LogicalPixels(3.0), sf)
    with pytest.raises(TypeError):
        in_logical_scale(3.0, sf)


def test_texture_point_normalizes():
    size = PhysicalPixelsSize.from_values(64, 32)
    far = TexturePoint.from_physical_point(PhysicalPixelsPoint.from_values(64, 32), size)
    assert far == TexturePoint(1.0, 1.0)
    origin = TexturePoint.from_physical_point(PhysicalPixelsPoint.zero(), size)
    assert origin == TexturePoint(0.0, 0.0)


def test_texture_point_zero_size_is_none():
    point = PhysicalPixelsPoint.from_values(1, 1)
    assert TexturePoint.from_physical_point(point, PhysicalPixelsSize.from_values(0, 4)) is None
    assert TexturePoint.from_physical_point(point, PhysicalPixelsSize.from_values(4, 0)) is None


def test_texture_bounds_from_rect():
    size = PhysicalPixelsSize.from_values(64, 32)
    rect = PhysicalPixelsRect(PhysicalPixelsPoint.zero(), PhysicalPixelsPoint.from_values(64, 32))
    bounds = TextureBounds.from_physical_rect(rect, size)
    assert bounds == TextureBounds(TexturePoint(0.0, 0.0), TexturePoint(1.0, 1.0))
    assert TextureBounds.from_physical_rect(rect, PhysicalPixelsSize.zero()) is None