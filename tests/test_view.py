import pytest

from zintl.render import RenderContent, RenderNode, RenderObject
from zintl.view import Composable, Context, Storage, View, v


class TextView(View):
    def __init__(self, text):
        super().__init__()
        self.text = text
        self.seen = []

    def render(self, storage):
        self.seen.append(storage)
        return RenderNode(RenderObject(RenderContent.text(self.text)))


class Wrapper(Composable):
    def __init__(self, inner):
        super().__init__()
        self.inner = inner

    def compose(self):
        return self.inner


def test_storage_starts_empty():
    assert Storage().data == {}


def test_render_children_without_children():
    node = Context().render_children(Storage())
    assert node == RenderNode(RenderObject.empty())
    assert node.children == []


def test_render_children_in_order_with_storage():
    context = Context()
    storage = Storage()
    first, second = TextView("a"), TextView("b")
    context.set_children(v(first, second))
    node = context.render_children(storage)
    assert [c.object.content for c in node.children] == [
        RenderContent.text("a"),
        RenderContent.text("b"),
    ]
    assert first.seen == [storage]
    assert second.seen == [storage]


def test_set_children_replaces():
    context = Context()
    context.set_children(v(TextView("a")))
    context.set_children(v(TextView("b")))
    node = context.render_children(Storage())
    assert [c.object.content.payload for c in node.children] == ["b"]


def test_v_rejects_non_views():
    with pytest.raises(TypeError):
        v(TextView("a"), "not a view")


def test_v_generators_render_every_call():
    view = TextView("a")
    (gen,) = v(view)
    gen(Storage())
    gen(Storage())
    assert len(view.seen) == 2


def test_default_view_renders_empty_node():
    assert View().render(Storage()) == RenderNode(RenderObject.empty())


def test_padding_returns_same_view():
    view = View()
    assert view.padding(1.0, 2.0, 3.0, 4.0) is view


def test_composable_render_structure():
    wrapper = Wrapper(TextView("inner")).children(v(TextView("c")))
    node = wrapper.render(Storage())
    assert node.object == RenderObject.empty()
    assert node.inner.object.content == RenderContent.text("inner")
    assert len(node.children) == 1
    assert node.children[0].children[0].object.content == RenderContent.text("c")


def test_composable_children_returns_self():
    wrapper = Wrapper(View())
    assert wrapper.children([]) is wrapper


def test_composable_requires_compose():
    with pytest.raises(TypeError):
        Composable()