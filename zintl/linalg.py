"""Small vector and matrix types for rendering."""

import struct
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class Vec2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]
    X_AXIS: ClassVar["Vec2"]
    Y_AXIS: ClassVar["Vec2"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_tuple(cls, pair) -> "Vec2":
        x, y = pair
        return cls(float(x), float(y))

    def checked_div(self, other: "Vec2") -> Optional["Vec2"]:
        """Divide component-wise; None when either divisor is zero."""
        if other.x == 0.0 or other.y == 0.0:
            return None
        return Vec2(self.x / other.x, self.y / other.y)

    def checked_div_scalar(self, scalar: float) -> Optional["Vec2"]:
        """Divide by a scalar; None when it is zero."""
        if scalar == 0.0:
            return None
        return Vec2(self.x / scalar, self.y / scalar)

    def min(self, other: "Vec2") -> "Vec2":
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Vec2") -> "Vec2":
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(scalar * self.x, scalar * self.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.X_AXIS = Vec2(1.0, 0.0)
Vec2.Y_AXIS = Vec2(0.0, 1.0)


def _square(rows, n: int) -> Tuple[Tuple[float, ...], ...]:
    result = tuple(tuple(float(v) for v in row) for row in rows)
    if len(result) != n or any(len(row) != n for row in result):
        raise ValueError(f"expected a {n}x{n} matrix")
    return result


def _zeros(n: int):
    return tuple((0.0,) * n for _ in range(n))


@dataclass(frozen=True)
class Mat3:
    """A 3x3 float matrix, stored as rows of the underlying array."""

    m: Tuple[Tuple[float, ...], ...] = field(default_factory=lambda: _zeros(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 3))


@dataclass(frozen=True)
class Mat4:
    """A 4x4 float matrix, stored as rows of the underlying array."""

    m: Tuple[Tuple[float, ...], ...] = field(default_factory=lambda: _zeros(4))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 4))

    def to_bytes(self) -> bytes:
        """The matrix as 16 little-endian 32-bit floats in storage order."""
        return struct.pack("<16f", *(v for row in self.m for v in row))