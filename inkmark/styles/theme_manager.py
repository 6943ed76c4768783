"""
Theme management and styling for the application and the rendered document.
"""
from PyQt5.QtWidgets import QWidget

from ..core.search.constants import (
    PINNED_HIGHLIGHT_FLASH_CLASS,
    SEARCH_HIGHLIGHT_ACTIVE_CLASS,
    SEARCH_HIGHLIGHT_CLASS,
)
from ..core.search.models import HighlightColor
from .models import ThemeColors


class ThemeManager:
    """Manages application themes and highlight styling."""

    DARK_THEME = ThemeColors(
        # Backgrounds
        bg_primary="#2e2e2e",
        bg_secondary="#3e3e3e",
        bg_tertiary="#4e4e4e",

        # Text
        text_primary="#f0f0f0",
        text_secondary="#B5B5C5",
        text_muted="#8899AA",

        # Accent
        accent_primary="#4a9eff",
        accent_hover="#3a8eef",

        # Borders
        border_primary="#555555",
        border_secondary="#3e3e3e",

        code_bg="#262626",

        # Highlights
        search_highlight="#8a7a1a",
        search_highlight_active="#d9a400",
        pinned_flash="#ffffff",
        pinned_highlights={
            "green": "#2f6b3a",
            "blue": "#2c5282",
            "pink": "#8a2f5e",
            "orange": "#9c4a12",
            "purple": "#5b3a8c",
        },
    )

    LIGHT_THEME = ThemeColors(
        # Backgrounds
        bg_primary="#f0f0f0",
        bg_secondary="#ffffff",
        bg_tertiary="#e0e0e0",

        # Text
        text_primary="#2e2e2e",
        text_secondary="#7A899C",
        text_muted="#8899AA",

        # Accent
        accent_primary="#4a9eff",
        accent_hover="#3a8eef",

        # Borders
        border_primary="#cccccc",
        border_secondary="#e0e0e0",

        code_bg="#f3f4f6",

        # Highlights
        search_highlight="#fff3a3",
        search_highlight_active="#ffc107",
        pinned_flash="#ff5722",
        pinned_highlights={
            "green": "#c6f6d5",
            "blue": "#bee3f8",
            "pink": "#fed7e2",
            "orange": "#feebc8",
            "purple": "#e9d8fd",
        },
    )

    @classmethod
    def get_theme_colors(cls, dark_mode: bool) -> ThemeColors:
        """
        Get theme colors for the current mode.

        Args:
            dark_mode: Whether to get dark theme colors

        Returns:
            ThemeColors object
        """
        return cls.DARK_THEME if dark_mode else cls.LIGHT_THEME

    @classmethod
    def apply_theme(cls, widget: QWidget, dark_mode: bool) -> None:
        """
        Apply theme to a widget and its children.

        Args:
            widget: Widget to style
            dark_mode: Whether to use dark theme
        """
        theme = cls.get_theme_colors(dark_mode)
        widget.setStyleSheet(cls._generate_stylesheet(theme))

    @classmethod
    def document_stylesheet(cls, dark_mode: bool) -> str:
        """
        Stylesheet for the rendered document, including highlight classes.

        Disabled pinned searches get no rule at all, so they stay invisible.
        """
        theme = cls.get_theme_colors(dark_mode)
        rules = [
            f"body {{ color: {theme.text_primary}; }}",
            f"pre, code {{ background-color: {theme.code_bg}; }}",
            f".{SEARCH_HIGHLIGHT_CLASS} {{ background-color: {theme.search_highlight}; }}",
            f".{SEARCH_HIGHLIGHT_ACTIVE_CLASS} {{ background-color: {theme.search_highlight_active}; }}",
        ]
        for color in HighlightColor:
            background = theme.pinned_highlights[color.value]
            rules.append(
                f".{color.css_class} {{ background-color: {background}; }}"
            )
        rules.append(
            f".{PINNED_HIGHLIGHT_FLASH_CLASS} {{ background-color: {theme.pinned_flash}; }}"
        )
        return "\n".join(rules)

    @classmethod
    def _generate_stylesheet(cls, theme: ThemeColors) -> str:
        """
        Generate the widget stylesheet from theme colors.

        Args:
            theme: Theme colors to use

        Returns:
            Complete Qt stylesheet string
        """
        return f"""
            /* --- GENERAL STYLES --- */
            QMainWindow, QWidget, QLineEdit, QLabel, QFrame {{
                background-color: {theme.bg_primary};
                color: {theme.text_primary};
                border: none;
            }}

            /* --- TOOL BUTTONS --- */
            QToolButton {{
                background-color: transparent;
                color: {theme.text_secondary};
                border: none;
                border-radius: 4px;
                padding: 4px;
            }}
            QToolButton:hover {{
                background-color: {theme.bg_secondary};
            }}
            QToolButton:checked {{
                background-color: {theme.accent_primary};
                color: white;
            }}

            /* --- INPUTS --- */
            QLineEdit {{
                background-color: {theme.bg_secondary};
                border: 1px solid {theme.border_primary};
                border-radius: 6px;
                padding: 6px 10px;
                color: {theme.text_primary};
            }}
            QLineEdit:focus {{
                border: 1px solid {theme.accent_primary};
            }}

            /* --- DOCUMENT VIEW --- */
            QTextBrowser {{
                background-color: {theme.bg_secondary};
                color: {theme.text_primary};
                border: none;
            }}

            /* --- FLOATING TOOLBARS --- */
            #SearchBar {{
                background-color: {theme.bg_primary};
                border: 1px solid {theme.border_secondary};
                border-radius: 8px;
            }}

            /* --- PINNED LIST --- */
            QListWidget {{
                background-color: {theme.bg_primary};
                color: {theme.text_primary};
                border: 1px solid {theme.border_secondary};
                outline: none;
            }}
            QListWidget::item:selected {{
                background-color: {theme.accent_primary};
                color: white;
            }}

            /* --- MENU --- */
            QMenu {{
                background-color: {theme.bg_secondary};
                border: 1px solid {theme.border_primary};
                border-radius: 4px;
                padding: 4px;
            }}
            QMenu::item:selected {{
                background-color: {theme.accent_primary};
                color: white;
            }}
        """
