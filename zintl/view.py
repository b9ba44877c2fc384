"""Views, their shared context and the storage they render with."""

import abc
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List

from zintl.render import RenderNode, RenderObject

_log = logging.getLogger(__name__)


@dataclass
class Storage:
    """Persistent key-value storage for views."""

    data: Dict[str, Any] = field(default_factory=dict)


Generator = Callable[[Storage], RenderNode]


class Context:
    """Style properties, layout and child generators used to render a view."""

    def __init__(self) -> None:
        self._children: List[Generator] = []

    def __repr__(self) -> str:
        return "Context { ... }"

    def set_style_property(self) -> None:
        """Record a style change; styles do not yet affect rendering."""

    def render_children(self, storage: Storage) -> RenderNode:
        """An empty node holding the rendered children, in order."""
        node = RenderNode(RenderObject.empty())
        for child in self._children:
            node.push_child(child(storage))
        return node

    def set_children(self, children: Iterable[Generator]) -> None:
        self._children = list(children)


class View:
    """A renderable component that has a context."""

    def __init__(self) -> None:
        self.context = Context()

    def render(self, storage: Storage) -> RenderNode:
        return RenderNode(RenderObject.empty())

    def padding(self, top: float, bottom: float, left: float, right: float) -> "View":
        self.context.set_style_property()
        return self


class Composable(View, abc.ABC):
    """A view built from another view returned by ``compose``."""

    @abc.abstractmethod
    def compose(self) -> View:
        """The view this one is made of."""

    def children(self, children: Iterable[Generator]) -> "Composable":
        self.context.set_children(children)
        return self

    def render(self, storage: Storage) -> RenderNode:
        node = RenderNode(RenderObject.empty())
        node.set_inner(self.compose().render(storage))
        _log.debug("composed %r", node)
        node.push_child(self.context.render_children(storage))
        return node


def _generator(view: View) -> Generator:
    def generate(storage: Storage) -> RenderNode:
        return view.render(storage)

    return generate


def v(*args: View) -> List[Generator]:
    """Child generators for the given views; each must be a View."""
    for arg in args:
        if not isinstance(arg, View):
            raise TypeError(f"expected a View, got {type(arg).__name__}")
    return [_generator(view) for view in args]