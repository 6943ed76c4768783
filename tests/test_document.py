from inkmark.core.document import (
    CONTENT_ROOT_CLASS,
    ElementNode,
    MarkdownRenderer,
    TextNode,
    parse_html,
    to_html,
)
from inkmark.core.search import HighlightEngine


def test_parse_finds_content_root():
    root = parse_html('<html><body><nav>menu</nav><div class="markdown-body"><p>hi</p></div></body></html>')
    assert root.has_class(CONTENT_ROOT_CLASS)
    assert root.text_content == "hi"


def test_parse_wraps_fragment_without_root():
    root = parse_html("<p>one</p><!-- note --><p>two</p>")
    assert root.tag == "div"
    assert root.has_class(CONTENT_ROOT_CLASS)
    assert [child.tag for child in root.children] == ["p", "p"]


def test_to_html_round_trip_escapes():
    markup = '<div class="markdown-body"><p title="a &quot;b&quot;">x &lt; y &amp; z<br></p></div>'
    assert to_html(parse_html(markup)) == markup


def test_to_html_renames_tags_and_attributes():
    root = ElementNode("div", children=[ElementNode("mark", {"id": "hl-1"}, [TextNode("x")])])
    assert to_html(root, {"mark": "a"}, {"id": "name"}) == '<div><a name="hl-1">x</a></div>'


def test_node_ids_are_unique_and_findable():
    root = parse_html("<p>a <b>b</b></p>")
    bold = root.find_first(lambda node: isinstance(node, ElementNode) and node.tag == "b")
    ids = [node.node_id for node in root.iter_descendants()]
    assert len(ids) == len(set(ids))
    assert root.find_by_id(bold.node_id) is bold


def test_normalize_merges_text():
    paragraph = ElementNode("p", children=[TextNode("a"), TextNode(""), TextNode("b")])
    paragraph.normalize()
    assert len(paragraph.children) == 1
    assert paragraph.children[0].text == "ab"


def test_renderer_wraps_output_in_content_root():
    html = MarkdownRenderer().render_html("Some *text*")
    assert html.startswith(f'<div class="{CONTENT_ROOT_CLASS}">')
    assert "<em>text</em>" in html


def test_renderer_supports_tables_and_strikethrough():
    html = MarkdownRenderer().render_html("| a |\n|---|\n| b |\n\n~~gone~~")
    assert "<table>" in html
    assert "<s>gone</s>" in html


def test_rendered_code_and_diagrams_are_not_searchable():
    markdown = "word\n\n```\nword\n```\n\n```mermaid\ngraph word\n```\n\n`word`\n"
    root = MarkdownRenderer().render_document(markdown)
    assert HighlightEngine(root).find("word").count == 2


def test_render_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Heading\n\nBody\n", encoding="utf-8")
    root = MarkdownRenderer().render_file(str(path))
    assert "Heading" in root.text_content
