"""Basic widgets: an empty base view, a text label and a stack."""

from zintl.render import Metrics, Position, RenderContent, RenderNode, RenderObject
from zintl.view import Composable, Storage, View


class Base(View):
    """A view that renders nothing."""


class Label(View):
    """A single run of text."""

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def render(self, storage: Storage) -> RenderNode:
        return RenderNode(
            RenderObject(
                RenderContent.text(self.text),
                Position(0.0, 0.0),
                Metrics.auto(),
            )
        )


class Stack(Composable):
    """A container whose content is its children."""

    def compose(self) -> View:
        return Base()