"""
Editable model of a rendered document.

The renderer's HTML is parsed into this tree once; the search engine then
rewrites text leaves in place and the viewer projects the tree back to HTML.
"""

import itertools
from typing import Callable, Dict, Iterator, List, Optional

_node_ids = itertools.count(1)


class Node:
    """Base class for every node of a rendered document."""

    def __init__(self):
        self.node_id: int = next(_node_ids)
        self.parent: Optional["ElementNode"] = None

    @property
    def text_content(self) -> str:
        raise NotImplementedError

    def ancestors(self) -> Iterator["ElementNode"]:
        """Yield parents from the nearest one up to the top of the tree."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_inside(self, root: "ElementNode") -> bool:
        """Check whether this node is ``root`` or one of its descendants."""
        if self is root:
            return True
        return any(ancestor is root for ancestor in self.ancestors())

    @property
    def previous_sibling(self) -> Optional["Node"]:
        if self.parent is None:
            return None
        index = self.parent.index_of(self)
        return self.parent.children[index - 1] if index > 0 else None

    @property
    def next_sibling(self) -> Optional["Node"]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = self.parent.index_of(self)
        return siblings[index + 1] if index + 1 < len(siblings) else None


class TextNode(Node):
    """A run of plain text."""

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text

    @property
    def text_content(self) -> str:
        return self.text

    def __repr__(self):
        return f"TextNode({self.text!r})"


class ElementNode(Node):
    """
    A tagged element with attributes, CSS classes and ordered children.

    The ``class`` attribute is kept separately in ``classes`` so lookups
    like ``has_class`` do not re-split the attribute string.
    """

    def __init__(self, tag: str, attrs: Optional[Dict[str, str]] = None,
                 children: Optional[List[Node]] = None):
        super().__init__()
        self.tag = tag.lower()
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.classes: List[str] = self.attrs.pop("class", "").split()
        self.children: List[Node] = []

        for child in children or []:
            self.append_child(child)

    # ------------------------------------------------------------------
    # Attributes and classes
    # ------------------------------------------------------------------

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute value (``class`` included)."""
        if name == "class":
            return " ".join(self.classes) if self.classes else default
        return self.attrs.get(name, default)

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def index_of(self, child: Node) -> int:
        """Position of ``child`` among the children, compared by identity."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of <{self.tag}>")

    def append_child(self, child: Node) -> Node:
        self._adopt(child)
        self.children.append(child)
        return child

    def insert_child(self, index: int, child: Node) -> Node:
        self._adopt(child)
        self.children.insert(index, child)
        return child

    def remove_child(self, child: Node) -> Node:
        del self.children[self.index_of(child)]
        child.parent = None
        return child

    def replace_child(self, old: Node, new_nodes: List[Node]) -> None:
        """Replace ``old`` with a sequence of nodes at the same position."""
        index = self.index_of(old)
        for node in new_nodes:
            if node.parent is not None:
                node.parent.remove_child(node)
            node.parent = self
        self.children[index:index + 1] = new_nodes
        old.parent = None

    def normalize(self) -> None:
        """Merge adjacent text children and drop empty ones."""
        merged: List[Node] = []
        for child in self.children:
            if isinstance(child, TextNode):
                if not child.text:
                    child.parent = None
                    continue
                if merged and isinstance(merged[-1], TextNode):
                    merged[-1].text += child.text
                    child.parent = None
                    continue
            merged.append(child)
        self.children = merged

    def _adopt(self, child: Node) -> None:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    def iter_descendants(self) -> Iterator[Node]:
        """Yield all descendants in pre-order (document order)."""
        for child in self.children:
            yield child
            if isinstance(child, ElementNode):
                yield from child.iter_descendants()

    def find_first(self, predicate: Callable[[Node], bool]) -> Optional[Node]:
        for node in self.iter_descendants():
            if predicate(node):
                return node
        return None

    def find_by_id(self, node_id: int) -> Optional[Node]:
        if self.node_id == node_id:
            return self
        return self.find_first(lambda node: node.node_id == node_id)

    def __repr__(self):
        classes = "." + ".".join(self.classes) if self.classes else ""
        return f"<{self.tag}{classes} ({len(self.children)} children)>"
