"""
Translation between rendered HTML and the editable document model.
"""

import html
import logging
from typing import Dict, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .models import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

CONTENT_ROOT_CLASS = "markdown-body"

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


def parse_html(markup: str, root_class: str = CONTENT_ROOT_CLASS) -> ElementNode:
    """
    Parse rendered HTML into a document tree.

    Args:
        markup: HTML produced by the renderer
        root_class: Class of the content container inside the markup

    Returns:
        The content root. When the markup has no element with
        ``root_class``, a ``div`` with that class wraps everything.
    """
    soup = BeautifulSoup(markup, "html.parser")
    container = soup.find(class_=root_class)

    if container is not None:
        return _convert_tag(container)

    root = ElementNode("div", {"class": root_class})
    for child in soup.contents:
        node = _convert(child)
        if node is not None:
            root.append_child(node)
    root.normalize()
    return root


def _convert(element) -> Optional[Node]:
    # Comments, doctypes and CDATA are all PreformattedString subclasses
    if isinstance(element, PreformattedString):
        return None
    if isinstance(element, NavigableString):
        return TextNode(str(element))
    if isinstance(element, Tag):
        return _convert_tag(element)
    return None


def _convert_tag(tag: Tag) -> ElementNode:
    attrs: Dict[str, str] = {}
    for name, value in tag.attrs.items():
        attrs[name] = " ".join(value) if isinstance(value, list) else str(value)

    node = ElementNode(tag.name, attrs)
    for child in tag.contents:
        converted = _convert(child)
        if converted is not None:
            node.append_child(converted)
    node.normalize()
    return node


def to_html(node: Node, tag_map: Optional[Dict[str, str]] = None,
            attr_map: Optional[Dict[str, str]] = None) -> str:
    """
    Serialise a document tree back to HTML.

    Args:
        node: Node to serialise (usually the content root)
        tag_map: Optional tag renames, e.g. ``{"mark": "a"}`` for viewers
            that do not know the ``mark`` element
        attr_map: Optional attribute renames applied to every element

    Returns:
        HTML markup
    """
    parts = []
    _write(node, parts, tag_map or {}, attr_map or {})
    return "".join(parts)


def _write(node: Node, parts, tag_map: Dict[str, str], attr_map: Dict[str, str]) -> None:
    if isinstance(node, TextNode):
        parts.append(html.escape(node.text, quote=False))
        return
    if not isinstance(node, ElementNode):
        logger.debug("Skipping unknown node type %r", node)
        return

    tag = tag_map.get(node.tag, node.tag)
    parts.append(f"<{tag}")
    if node.classes:
        parts.append(f' class="{html.escape(" ".join(node.classes))}"')
    for name, value in node.attrs.items():
        parts.append(f' {attr_map.get(name, name)}="{html.escape(value)}"')
    parts.append(">")

    if tag in VOID_ELEMENTS:
        return

    for child in node.children:
        _write(child, parts, tag_map, attr_map)
    parts.append(f"</{tag}>")
