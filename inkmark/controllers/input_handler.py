from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence


class UserInputHandler:
    """
    Handles keyboard shortcuts for the reader window.
    """
    def __init__(self, main_window):
        """
        Args:
            main_window (MainWindow): The window whose actions the shortcuts trigger.
        """
        self.main_window = main_window

    def handle_key_press(self, event):
        """
        Dispatch a key press to the matching window action.

        Returns:
            bool: True if the event was handled
        """
        if event.matches(QKeySequence.Find):
            self.main_window.show_search_bar()
        elif event.matches(QKeySequence.Open):
            self.main_window.open_document()
        elif event.matches(QKeySequence.Close):
            self.main_window.close_document()
        elif event.matches(QKeySequence.Refresh):
            self.main_window.reload_document()
        elif event.matches(QKeySequence.FindNext):
            self.main_window.find_next()
        elif event.matches(QKeySequence.FindPrevious):
            self.main_window.find_prev()
        elif event.key() == Qt.Key_T and event.modifiers() & Qt.ControlModifier:
            self.main_window.toggle_theme()
        elif event.key() == Qt.Key_Escape and self.main_window.search_bar.isVisible():
            self.main_window.hide_search_bar()
        else:
            event.ignore()
            return False

        event.accept()
        return True
