from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QTextBrowser

from inkmark.core.selection import CapturedSelection, capture_selection, restore_selection


def _select(view, anchor, position):
    cursor = view.textCursor()
    cursor.setPosition(anchor)
    cursor.setPosition(position, QTextCursor.KeepAnchor)
    view.setTextCursor(cursor)


def test_capture_without_selection_returns_none():
    view = QTextBrowser()
    view.setPlainText("hello world")
    assert capture_selection(view) is None


def test_selection_survives_rehighlight():
    view = QTextBrowser()
    view.setHtml("<p>hello world</p>")
    _select(view, 6, 11)

    captured = capture_selection(view)
    assert captured == CapturedSelection(6, 11, "world")

    # Same text, new markup
    view.setHtml('<p>hello <a name="hl-1" class="search-highlight">world</a></p>')
    assert restore_selection(view, captured)
    assert view.textCursor().selectedText() == "world"


def test_backwards_selection_keeps_direction():
    view = QTextBrowser()
    view.setPlainText("hello world")
    _select(view, 5, 0)

    captured = capture_selection(view)
    assert (captured.start, captured.end) == (0, 5)

    view.setPlainText("hello world")
    restore_selection(view, captured)
    cursor = view.textCursor()
    assert (cursor.anchor(), cursor.position()) == (5, 0)


def test_multi_paragraph_selection_uses_newlines():
    view = QTextBrowser()
    view.setHtml("<p>one</p><p>two</p>")
    _select(view, 0, 7)
    assert capture_selection(view).text == "one\ntwo"


def test_restore_ignores_none_and_stale_ranges():
    view = QTextBrowser()
    view.setPlainText("hello world")
    assert not restore_selection(view, None)
    assert not restore_selection(view, CapturedSelection(0, 500, "x"))
