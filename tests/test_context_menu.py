from inkmark.core.document import (
    ContextType,
    ElementNode,
    MarkdownRenderer,
    TextNode,
    detect_context,
    extract_language,
    parse_html,
)

MARKDOWN = """\
# Notes

Plain paragraph with a [link](https://example.com/page).

![diagram alt](images/plot.png)

```python
print("hi")
```

```mermaid
graph TD
  A --> B
```
"""


def _leaf(root, text):
    return root.find_first(lambda node: isinstance(node, TextNode) and text in node.text)


def _element(root, tag):
    return root.find_first(lambda node: isinstance(node, ElementNode) and node.tag == tag)


def test_general_context():
    root = MarkdownRenderer().render_document(MARKDOWN)
    assert detect_context(_leaf(root, "Plain paragraph"), root).type == ContextType.GENERAL


def test_link_context():
    root = MarkdownRenderer().render_document(MARKDOWN)
    context = detect_context(_leaf(root, "link"), root)
    assert context.type == ContextType.LINK
    assert context.href == "https://example.com/page"


def test_markdown_link_uses_data_path():
    root = parse_html('<p><a class="markdown-link" href="#" data-path="docs/other.md">other</a></p>')
    context = detect_context(_leaf(root, "other"), root)
    assert context.type == ContextType.LINK
    assert context.href == "docs/other.md"


def test_image_context():
    root = MarkdownRenderer().render_document(MARKDOWN)
    context = detect_context(_element(root, "img"), root)
    assert context.type == ContextType.IMAGE
    assert context.src == "images/plot.png"
    assert context.alt == "diagram alt"


def test_code_block_context():
    root = MarkdownRenderer().render_document(MARKDOWN)
    context = detect_context(_leaf(root, "print"), root)
    assert context.type == ContextType.CODE_BLOCK
    assert context.language == "python"
    assert context.content == 'print("hi")\n'


def test_mermaid_context():
    root = MarkdownRenderer().render_document(MARKDOWN)
    diagram = root.find_first(lambda node: isinstance(node, ElementNode) and node.has_class("mermaid"))
    context = detect_context(diagram.children[0], root)
    assert context.type == ContextType.MERMAID
    assert context.source == "graph TD\n  A --> B\n"


def test_walk_stops_at_root():
    leaf = TextNode("inner")
    root = ElementNode("div", {"class": "markdown-body"}, [ElementNode("p", children=[leaf])])
    ElementNode("a", {"href": "https://outer.example"}, [root])

    assert detect_context(leaf, root).type == ContextType.GENERAL


def test_extract_language():
    assert extract_language(ElementNode("code", {"class": "hljs language-rust"})) == "rust"
    assert extract_language(ElementNode("code")) is None
    assert extract_language(None) is None
