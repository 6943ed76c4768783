from inkmark.core.document import TextNode, parse_html
from inkmark.core.search import is_excluded, iter_text_leaves


def _texts(markup):
    return [leaf.text for leaf in iter_text_leaves(parse_html(markup))]


def test_leaves_in_document_order():
    assert _texts("<h1>Title</h1><p>one <b>two</b> three</p>") == [
        "Title", "one ", "two", " three",
    ]


def test_code_blocks_and_diagrams_are_pruned():
    markup = (
        "<p>before</p>"
        '<pre><code class="language-py">x = 1</code></pre>'
        '<div class="mermaid">graph TD</div>'
        "<p>after <code>inline</code></p>"
    )
    assert _texts(markup) == ["before", "after ", "inline"]


def test_is_excluded_checks_ancestors():
    root = parse_html("<pre><span>deep</span></pre><p>free</p>")
    leaves = [node for node in root.iter_descendants() if isinstance(node, TextNode)]
    by_text = {leaf.text: leaf for leaf in leaves}

    assert is_excluded(by_text["deep"])
    assert not is_excluded(by_text["free"])


def test_excluded_root_yields_nothing():
    root = parse_html("<pre>code</pre>")
    pre = root.children[0]
    assert list(iter_text_leaves(pre)) == []
