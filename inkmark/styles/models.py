from dataclasses import dataclass
from typing import Dict


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    # Background colors
    bg_primary: str
    bg_secondary: str
    bg_tertiary: str

    # Text colors
    text_primary: str
    text_secondary: str
    text_muted: str

    # Accent colors
    accent_primary: str
    accent_hover: str

    # Border colors
    border_primary: str
    border_secondary: str

    # Code blocks
    code_bg: str

    # Search highlights
    search_highlight: str
    search_highlight_active: str
    pinned_flash: str

    # Pinned highlight palette, keyed by HighlightColor value
    pinned_highlights: Dict[str, str]
