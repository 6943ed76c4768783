"""
Enumeration of searchable text leaves.
"""

from typing import Iterator

from ..document.models import ElementNode, Node, TextNode
from .constants import EXCLUDED_CLASSES, EXCLUDED_TAGS


def is_excluded_element(element: ElementNode) -> bool:
    """Check whether an element starts a subtree search must skip."""
    if element.tag in EXCLUDED_TAGS:
        return True
    return any(cls in EXCLUDED_CLASSES for cls in element.classes)


def is_excluded(node: Node) -> bool:
    """Check whether any ancestor of ``node`` is a code block, diagram or decoration."""
    return any(is_excluded_element(ancestor) for ancestor in node.ancestors())


def iter_text_leaves(root: ElementNode) -> Iterator[TextNode]:
    """
    Yield searchable text leaves under ``root`` in document order.

    Excluded subtrees are pruned instead of walked. Callers that mutate
    the tree must materialise the result first.
    """
    if is_excluded_element(root) or is_excluded(root):
        return
    yield from _walk(root)


def _walk(element: ElementNode) -> Iterator[TextNode]:
    for child in element.children:
        if isinstance(child, TextNode):
            yield child
        elif isinstance(child, ElementNode) and not is_excluded_element(child):
            yield from _walk(child)
