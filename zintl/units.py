"""Typed pixel units and the points, rectangles and sizes built from them."""

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional

_U32_MAX = 0xFFFF_FFFF


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _round_to_u32(value: float) -> int:
    """Round half away from zero, saturating into the unsigned 32-bit range."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return int(whole)


@dataclass(frozen=True, order=True)
class Unit:
    """A scalar tagged with its unit; only values of the same unit combine."""

    value: float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self._normalize(self.value))

    @classmethod
    def _normalize(cls, value):
        raise TypeError(f"{cls.__name__} is an abstract unit")

    @classmethod
    def _accepts(cls, raw) -> bool:
        return _is_number(raw)

    @staticmethod
    def _div(a, b):
        return a / b

    @staticmethod
    def _rem(a, b):
        return math.fmod(a, b)

    def _operand(self, other):
        if isinstance(other, Unit):
            return other.value if type(other) is type(self) else None
        if self._accepts(other):
            return other
        return None

    def _same_unit(self, other: "Unit") -> "Unit":
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other

    def _raw(self, other):
        if not self._accepts(other):
            raise TypeError(f"{type(self).__name__} cannot combine with {other!r}")
        return other

    @classmethod
    def zero(cls) -> "Unit":
        return cls()

    def is_zero(self) -> bool:
        return self.value == 0

    def checked_div(self, other: "Unit") -> Optional["Unit"]:
        """Divide by another value of this unit; None when it is zero."""
        other = self._same_unit(other)
        if other.is_zero():
            return None
        return type(self)(self._div(self.value, other.value))

    def checked_div_value(self, other) -> Optional["Unit"]:
        """Divide by a raw number; None when it is zero."""
        other = self._raw(other)
        if other == 0:
            return None
        return type(self)(self._div(self.value, other))

    def checked_rem(self, other: "Unit") -> Optional["Unit"]:
        """Remainder by another value of this unit; None when it is zero."""
        other = self._same_unit(other)
        if other.is_zero():
            return None
        return type(self)(self._rem(self.value, other.value))

    def checked_rem_value(self, other) -> Optional["Unit"]:
        """Remainder by a raw number; None when it is zero."""
        other = self._raw(other)
        if other == 0:
            return None
        return type(self)(self._rem(self.value, other))

    def max(self, other: "Unit") -> "Unit":
        other = self._same_unit(other)
        return type(self)(max(self.value, other.value))

    def min(self, other: "Unit") -> "Unit":
        other = self._same_unit(other)
        return type(self)(min(self.value, other.value))

    def __add__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self.value + rhs)

    def __radd__(self, other):
        if isinstance(other, Unit) or not self._accepts(other):
            return NotImplemented
        return type(self)(other + self.value)

    def __sub__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self.value - rhs)

    def __rsub__(self, other):
        if isinstance(other, Unit) or not self._accepts(other):
            return NotImplemented
        return type(self)(other - self.value)

    def __mul__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self.value * rhs)

    def __rmul__(self, other):
        if isinstance(other, Unit) or not self._accepts(other):
            return NotImplemented
        return type(self)(other * self.value)


class PhysicalPixels(Unit):
    """Whole device pixels, an unsigned 32-bit quantity."""

    @classmethod
    def _normalize(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"PhysicalPixels takes an int, got {value!r}")
        if not 0 <= value <= _U32_MAX:
            raise OverflowError(f"PhysicalPixels out of range: {value}")
        return value

    @classmethod
    def _accepts(cls, raw) -> bool:
        return isinstance(raw, int) and not isinstance(raw, bool)

    @staticmethod
    def _div(a, b):
        return a // b

    @staticmethod
    def _rem(a, b):
        return a % b

    def to_float(self) -> "PhysicalPixelsF":
        return PhysicalPixelsF(float(self.value))


class _FloatUnit(Unit):
    @classmethod
    def _normalize(cls, value):
        if not _is_number(value):
            raise TypeError(f"{cls.__name__} takes a number, got {value!r}")
        return float(value)


class PhysicalPixelsF(_FloatUnit):
    """Fractional device pixels."""

    def to_whole(self) -> PhysicalPixels:
        """Round to the nearest whole pixel, saturating at the u32 limits."""
        return PhysicalPixels(_round_to_u32(self.value))


class LogicalPixels(_FloatUnit):
    """Device-independent pixels."""


def _coerce_unit(unit: type, value) -> Unit:
    if value is None:
        return unit.zero()
    if isinstance(value, Unit):
        if type(value) is not unit:
            raise TypeError(f"expected {unit.__name__}, got {type(value).__name__}")
        return value
    return unit(value)


@dataclass(frozen=True)
class UnitPoint:
    """A two-dimensional point in one unit."""

    unit: ClassVar[type] = Unit
    x: Unit = None
    y: Unit = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _coerce_unit(self.unit, self.x))
        object.__setattr__(self, "y", _coerce_unit(self.unit, self.y))

    @classmethod
    def zero(cls) -> "UnitPoint":
        return cls(cls.unit.zero(), cls.unit.zero())

    @classmethod
    def from_values(cls, x, y) -> "UnitPoint":
        return cls(cls.unit(x), cls.unit(y))

    def _check(self, other: "UnitPoint") -> "UnitPoint":
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other

    def distance(self, other: "UnitPoint") -> float:
        other = self._check(other)
        return math.hypot(
            float(self.x.value) - float(other.x.value),
            float(self.y.value) - float(other.y.value),
        )

    def checked_div(self, other: "UnitPoint") -> Optional["UnitPoint"]:
        """Divide component-wise; None when either divisor is zero."""
        other = self._check(other)
        if other.x.is_zero() or other.y.is_zero():
            return None
        return type(self)(self.x.checked_div(other.x), self.y.checked_div(other.y))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x * other.x, self.y * other.y)

    def __iter__(self) -> Iterator[Unit]:
        yield self.x
        yield self.y


class PhysicalPixelsPoint(UnitPoint):
    unit = PhysicalPixels

    def to_float(self) -> "PhysicalPixelsFPoint":
        return PhysicalPixelsFPoint(self.x.to_float(), self.y.to_float())


class PhysicalPixelsFPoint(UnitPoint):
    unit = PhysicalPixelsF

    def to_whole(self) -> PhysicalPixelsPoint:
        return PhysicalPixelsPoint(self.x.to_whole(), self.y.to_whole())


class LogicalPixelsPoint(UnitPoint):
    unit = LogicalPixels


@dataclass(frozen=True)
class UnitSize:
    """A width and height in one unit."""

    unit: ClassVar[type] = Unit
    width: Unit = None
    height: Unit = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _coerce_unit(self.unit, self.width))
        object.__setattr__(self, "height", _coerce_unit(self.unit, self.height))

    @classmethod
    def zero(cls) -> "UnitSize":
        return cls(cls.unit.zero(), cls.unit.zero())

    @classmethod
    def from_values(cls, width, height) -> "UnitSize":
        return cls(cls.unit(width), cls.unit(height))

    def is_zero(self) -> bool:
        return self.width.is_zero() and self.height.is_zero()

    def area(self):
        """The raw product of width and height."""
        return (self.width * self.height).value


class PhysicalPixelsSize(UnitSize):
    unit = PhysicalPixels

    def to_float(self) -> "PhysicalPixelsFSize":
        return PhysicalPixelsFSize(self.width.to_float(), self.height.to_float())


class PhysicalPixelsFSize(UnitSize):
    unit = PhysicalPixelsF

    def to_whole(self) -> PhysicalPixelsSize:
        return PhysicalPixelsSize(self.width.to_whole(), self.height.to_whole())


class LogicalPixelsSize(UnitSize):
    unit = LogicalPixels


def _coerce_point(point_cls: type, value) -> UnitPoint:
    if value is None:
        return point_cls.zero()
    if isinstance(value, UnitPoint):
        if type(value) is not point_cls:
            raise TypeError(
                f"expected {point_cls.__name__}, got {type(value).__name__}"
            )
        return value
    return point_cls(*value)


@dataclass(frozen=True)
class UnitRect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    point: ClassVar[type] = UnitPoint
    min: UnitPoint = None
    max: UnitPoint = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _coerce_point(self.point, self.min))
        object.__setattr__(self, "max", _coerce_point(self.point, self.max))

    @classmethod
    def zero(cls) -> "UnitRect":
        return cls(cls.point.zero(), cls.point.zero())

    @classmethod
    def with_size(cls, min, size) -> "UnitRect":
        corner = _coerce_point(cls.point, min)
        far = cls.point(corner.x + size.width, corner.y + size.height)
        return cls(corner, far)

    def width(self) -> Unit:
        return self.max.x - self.min.x

    def height(self) -> Unit:
        return self.max.y - self.min.y

    def checked_div(self, other: "UnitRect") -> Optional["UnitRect"]:
        """Divide corner-wise; None when any coordinate of the divisor is zero."""
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        if any(c.is_zero() for c in (*other.min, *other.max)):
            return None
        return type(self)(
            self.min.checked_div(other.min), self.max.checked_div(other.max)
        )

    def center(self) -> UnitPoint:
        unit = self.point.unit
        return self.point(
            unit(unit._div(self.min.x.value + self.max.x.value, 2)),
            unit(unit._div(self.min.y.value + self.max.y.value, 2)),
        )


class PhysicalPixelsRect(UnitRect):
    point = PhysicalPixelsPoint


class PhysicalPixelsFRect(UnitRect):
    point = PhysicalPixelsFPoint


class LogicalPixelsRect(UnitRect):
    point = LogicalPixelsPoint