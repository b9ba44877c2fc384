"""The application root: renders a view tree once into storage."""

import logging

from zintl.render import RenderNode
from zintl.view import Storage, View

_log = logging.getLogger(__name__)


class App:
    """Holds the storage and the render tree of a root view."""

    def __init__(self, view: View) -> None:
        self.storage = Storage()
        self.root: RenderNode = view.render(self.storage)
        _log.debug("rendered %r", self.root)

    def __repr__(self) -> str:
        return f"App(root={self.root!r})"