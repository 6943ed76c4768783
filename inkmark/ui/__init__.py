"""
Qt widgets for the Inkmark reader.
"""
from .document_view import DocumentView
from .main_window import MainWindow
from .pinned_panel import PinnedPanel
from .search_bar import SearchBar, SearchLineEdit

__all__ = ['DocumentView', 'MainWindow', 'PinnedPanel', 'SearchBar', 'SearchLineEdit']
