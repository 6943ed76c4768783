"""
Rendered document model and its HTML adapter.
"""

from .context_menu import (
    ContentContext,
    ContextMenuData,
    ContextType,
    detect_context,
    extract_language,
)
from .html_adapter import CONTENT_ROOT_CLASS, parse_html, to_html
from .models import ElementNode, Node, TextNode
from .renderer import MarkdownRenderer

__all__ = [
    "Node",
    "TextNode",
    "ElementNode",
    "CONTENT_ROOT_CLASS",
    "parse_html",
    "to_html",
    "MarkdownRenderer",
    "ContentContext",
    "ContextMenuData",
    "ContextType",
    "detect_context",
    "extract_language",
]
