"""
Detection of what kind of content a context menu was opened on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import ElementNode, Node


class ContextType(Enum):
    """Kinds of content a right-click can land on."""

    GENERAL = "general"
    LINK = "link"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    MERMAID = "mermaid"


@dataclass
class ContentContext:
    """Content under the pointer when the context menu opened."""

    type: ContextType = ContextType.GENERAL
    href: Optional[str] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    content: Optional[str] = None
    language: Optional[str] = None
    source: Optional[str] = None


@dataclass
class ContextMenuData:
    """Everything the menu needs to build its actions."""

    context: ContentContext
    x: int
    y: int
    has_selection: bool = False
    selected_text: str = ""


def detect_context(target: Node, root: ElementNode) -> ContentContext:
    """
    Detect the context of a right-click by walking up from the target.

    Args:
        target: Node under the pointer
        root: Content root; the walk stops there

    Returns:
        The innermost recognised context, or a general one
    """
    current = target if isinstance(target, ElementNode) else target.parent

    while current is not None and current is not root:
        if current.has_class("preprocessed-mermaid"):
            source_el = current.find_first(_has_class("mermaid-source"))
            source = source_el.text_content if source_el else ""
            return ContentContext(ContextType.MERMAID, source=source)

        if current.tag == "pre":
            code_el = current.find_first(_is_tag("code"))
            if code_el is not None:
                return ContentContext(
                    ContextType.CODE_BLOCK,
                    content=code_el.text_content,
                    language=extract_language(code_el),
                )

        if current.tag == "code" and current.parent is not None and current.parent.tag == "pre":
            return ContentContext(
                ContextType.CODE_BLOCK,
                content=current.text_content,
                language=extract_language(current),
            )

        if current.tag == "img":
            return ContentContext(
                ContextType.IMAGE,
                src=current.get("src", ""),
                alt=current.get("alt") or None,
            )

        if current.has_class("markdown-link"):
            return ContentContext(ContextType.LINK, href=current.get("data-path", ""))

        if current.tag == "a":
            return ContentContext(ContextType.LINK, href=current.get("href", ""))

        current = current.parent

    return ContentContext()


def extract_language(code_el: Optional[ElementNode]) -> Optional[str]:
    """Get the language from a ``language-*`` class, if any."""
    if code_el is None:
        return None
    for cls in code_el.classes:
        if cls.startswith("language-"):
            return cls[len("language-"):]
    return None


def _has_class(name: str):
    return lambda node: isinstance(node, ElementNode) and node.has_class(name)


def _is_tag(tag: str):
    return lambda node: isinstance(node, ElementNode) and node.tag == tag
