"""
Single-line context previews around matches.
"""

from typing import Optional, Tuple

from ..document.models import ElementNode, Node
from .constants import CONTEXT_CHARS
from .decorations import DecorationNode
from .models import ContextSnippet


def extract_context(decoration: DecorationNode, root: ElementNode,
                    max_chars: int = CONTEXT_CHARS) -> ContextSnippet:
    """
    Collect the text around a decoration.

    Text is gathered from siblings outward, climbing to parents while
    inside ``root``, and stops at the first line break on each side.

    Args:
        decoration: Decoration to describe
        root: Content root; its own siblings are never read
        max_chars: Character budget on each side

    Returns:
        Preview text with the match offsets inside it
    """
    match_text = decoration.match_text
    lead = decoration.overlap

    before = _text_before(decoration, root, max_chars + lead)
    if lead:
        # The previous decoration holds the first characters of this match
        before = before[:max(len(before) - lead, 0)]
    if len(before) > max_chars:
        before = before[-max_chars:]

    after = _text_after(decoration, root, max_chars)

    text = before + match_text + after
    match_start = len(before)
    return ContextSnippet(text, match_start, match_start + len(match_text))


def split_context(context: str, start: int, end: int) -> Tuple[str, str, str]:
    """Split a context string into (before, matched, after)."""
    start = max(0, min(start, len(context)))
    end = max(start, min(end, len(context)))
    return context[:start], context[start:end], context[end:]


def _text_before(start: Node, root: ElementNode, max_chars: int) -> str:
    text = ""
    node: Optional[Node] = start

    while node is not None and len(text) < max_chars:
        sibling = node.previous_sibling
        if sibling is not None:
            node = sibling
            content = sibling.text_content
            newline = content.rfind("\n")
            if newline != -1:
                text = content[newline + 1:] + text
                break
            text = content + text
        else:
            node = node.parent
            if node is None or node is root:
                break

    if len(text) > max_chars:
        text = text[-max_chars:]
    return text


def _text_after(start: Node, root: ElementNode, max_chars: int) -> str:
    text = ""
    node: Optional[Node] = start

    while node is not None and len(text) < max_chars:
        sibling = node.next_sibling
        if sibling is not None:
            node = sibling
            content = sibling.text_content
            newline = content.find("\n")
            if newline != -1:
                text = text + content[:newline]
                break
            text = text + content
        else:
            node = node.parent
            if node is None or node is root:
                break

    if len(text) > max_chars:
        text = text[:max_chars]
    return text
