from PyQt5.QtWidgets import QWidget

from inkmark.core.search import HighlightColor
from inkmark.core.search.constants import (
    PINNED_HIGHLIGHT_DISABLED_CLASS,
    SEARCH_HIGHLIGHT_ACTIVE_CLASS,
    SEARCH_HIGHLIGHT_CLASS,
)
from inkmark.styles import ThemeManager
from inkmark.utils import get_app_data_dir


def test_document_stylesheet_covers_highlight_classes():
    for dark_mode in (True, False):
        stylesheet = ThemeManager.document_stylesheet(dark_mode)
        assert f".{SEARCH_HIGHLIGHT_CLASS} " in stylesheet
        assert f".{SEARCH_HIGHLIGHT_ACTIVE_CLASS} " in stylesheet
        for color in HighlightColor:
            assert f".{color.css_class} " in stylesheet
        # Disabled pinned searches stay unstyled
        assert PINNED_HIGHLIGHT_DISABLED_CLASS not in stylesheet


def test_themes_differ():
    assert ThemeManager.get_theme_colors(True) != ThemeManager.get_theme_colors(False)


def test_apply_theme_sets_stylesheet():
    widget = QWidget()
    ThemeManager.apply_theme(widget, dark_mode=False)
    assert ThemeManager.LIGHT_THEME.bg_primary in widget.styleSheet()


def test_app_data_dir_override(data_dir):
    assert get_app_data_dir() == data_dir
    assert data_dir.is_dir()
