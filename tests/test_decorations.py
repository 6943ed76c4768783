from inkmark.core.document import ElementNode, TextNode, to_html
from inkmark.core.search import (
    DecorationNode,
    HighlightColor,
    HighlightKind,
    MatchSpan,
    apply_decorations,
    remove_decoration,
)
from inkmark.core.search.constants import PINNED_HIGHLIGHT_CLASS, SEARCH_HIGHLIGHT_CLASS


def _transient(text, match_text):
    return DecorationNode(text, match_text, HighlightKind.TRANSIENT)


def test_apply_splits_leaf_into_text_and_decorations():
    leaf = TextNode("a foo and a foo")
    parent = ElementNode("p", children=[leaf])

    decorations = apply_decorations(leaf, [MatchSpan(2, 5), MatchSpan(12, 15)], _transient)

    assert [d.text_content for d in decorations] == ["foo", "foo"]
    assert [type(child).__name__ for child in parent.children] == [
        "TextNode", "DecorationNode", "TextNode", "DecorationNode",
    ]
    assert parent.text_content == "a foo and a foo"
    assert leaf.parent is None


def test_remove_merges_text_back():
    leaf = TextNode("x foo y")
    parent = ElementNode("p", children=[leaf])
    original = to_html(parent)

    decoration, = apply_decorations(leaf, [MatchSpan(2, 5)], _transient)
    remove_decoration(decoration)

    assert to_html(parent) == original
    assert len(parent.children) == 1


def test_apply_without_spans_or_parent_does_nothing():
    leaf = TextNode("foo")
    assert apply_decorations(leaf, [MatchSpan(0, 3)], _transient) == []

    parent = ElementNode("p", children=[leaf])
    assert apply_decorations(leaf, [], _transient) == []
    assert parent.children == [leaf]


def test_decoration_attributes():
    transient = _transient("foo", "foo")
    assert transient.classes == [SEARCH_HIGHLIGHT_CLASS]
    assert transient.attrs["id"] == transient.anchor_name

    pinned = DecorationNode(
        "foo", "foo", HighlightKind.PERSISTENT,
        owner_id="ps_1", color=HighlightColor.BLUE,
    )
    assert pinned.classes == [PINNED_HIGHLIGHT_CLASS, "highlight-blue"]
    assert pinned.attrs["data-color"] == "blue"
    assert pinned.attrs["data-pinned-id"] == "ps_1"


def test_overlap_is_measured_from_match_text():
    decoration = _transient("a", "aa")
    assert decoration.overlap == 1
