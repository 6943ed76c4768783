from inkmark.core.document import parse_html
from inkmark.core.search import HighlightEngine, extract_context, split_context


def _first_match(markup, query):
    engine = HighlightEngine(parse_html(markup))
    return engine.find(query).matches


def test_context_surrounds_match():
    match, = _first_match("<p>hello world foo bar baz</p>", "foo")
    assert match.context == "hello world foo bar baz"
    assert match.context[match.context_start:match.context_end] == "foo"


def test_context_stops_at_line_break():
    match, = _first_match("<p>line one\nsecond foo here\nlast line</p>", "foo")
    assert match.context == "second foo here"
    assert (match.context_start, match.context_end) == (7, 10)


def test_context_is_truncated_to_max_chars():
    match, = _first_match("<p>" + "x" * 50 + "foo" + "y" * 50 + "</p>", "foo")
    assert match.context == "x" * 30 + "foo" + "y" * 30


def test_context_crosses_inline_elements():
    match, = _first_match("<p>see <em>the</em> foo <b>now</b></p>", "foo")
    assert match.context == "see the foo now"


def test_context_stays_inside_root():
    page = parse_html(
        '<div class="page"><p>outside </p><div class="content"><p>foo</p></div></div>',
        root_class="page",
    )
    root = page.children[1]
    engine = HighlightEngine(root)

    match, = engine.find("foo").matches
    assert match.context == "foo"


def test_overlapping_match_context_contains_full_match():
    matches = _first_match("<p>aaaa</p>", "aa")
    second = matches[1]
    assert second.text == "aa"
    assert second.context == "aaaa"
    assert second.context[second.context_start:second.context_end] == "aa"


def test_extract_context_max_chars_argument():
    root = parse_html("<p>abcdef foo ghijkl</p>")
    engine = HighlightEngine(root)
    engine.find("foo")

    snippet = extract_context(engine.search_results[0], root, max_chars=3)

    assert snippet.text == "ef foo gh"
    assert snippet.text[snippet.match_start:snippet.match_end] == "foo"


def test_split_context():
    assert split_context("the foo bar", 4, 7) == ("the ", "foo", " bar")
    assert split_context("short", 2, 99) == ("sh", "ort", "")
