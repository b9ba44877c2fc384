"""The render tree that views produce: objects, their content and layout hints."""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Shape:
    """A primitive shape to draw."""

    class Kind(enum.Enum):
        RECTANGLE = enum.auto()
        TEXT = enum.auto()

    kind: "Shape.Kind" = Kind.RECTANGLE
    content: str = ""
    font_size: float = 0.0

    @classmethod
    def rectangle(cls) -> "Shape":
        return cls(cls.Kind.RECTANGLE)

    @classmethod
    def text(cls, text: str, font_size: float) -> "Shape":
        return cls(cls.Kind.TEXT, text, float(font_size))


@dataclass(frozen=True)
class RenderContent:
    """What a render object shows: nothing, text, an image or a shape."""

    class Kind(enum.Enum):
        EMPTY = enum.auto()
        TEXT = enum.auto()
        IMAGE = enum.auto()
        SHAPE = enum.auto()

    kind: "RenderContent.Kind" = Kind.EMPTY
    payload: Union[None, str, Shape] = None

    @classmethod
    def empty(cls) -> "RenderContent":
        return cls()

    @classmethod
    def text(cls, text: str) -> "RenderContent":
        return cls(cls.Kind.TEXT, text)

    @classmethod
    def image(cls, source: str) -> "RenderContent":
        return cls(cls.Kind.IMAGE, source)

    @classmethod
    def shape(cls, shape: Shape) -> "RenderContent":
        return cls(cls.Kind.SHAPE, shape)


@dataclass(frozen=True)
class Metrics:
    """Sizing of a render object: automatic, or a fixed width and height."""

    width: Optional[float] = None
    height: Optional[float] = None

    @classmethod
    def auto(cls) -> "Metrics":
        return cls()

    @classmethod
    def fixed(cls, width: float, height: float) -> "Metrics":
        return cls(float(width), float(height))

    @property
    def is_auto(self) -> bool:
        return self.width is None and self.height is None

    @property
    def size(self) -> Optional[Tuple[float, float]]:
        """The fixed (width, height), or None when sized automatically."""
        if self.is_auto:
            return None
        return (self.width, self.height)


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class RenderObject:
    """A single drawable item with its position and sizing."""

    content: RenderContent = field(default_factory=RenderContent)
    position: Position = field(default_factory=Position)
    metrics: Metrics = field(default_factory=Metrics)

    @classmethod
    def empty(cls) -> "RenderObject":
        return cls(RenderContent.empty(), Position(0.0, 0.0), Metrics.auto())


@dataclass
class RenderNode:
    """A node of the render tree: an object, an optional inner node and children."""

    object: RenderObject = field(default_factory=RenderObject)
    inner: Optional["RenderNode"] = None
    children: List["RenderNode"] = field(default_factory=list)

    def set_inner(self, node: "RenderNode") -> None:
        self.inner = node

    def push_child(self, child: "RenderNode") -> None:
        self.children.append(child)