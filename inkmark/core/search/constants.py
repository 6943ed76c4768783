"""
Shared constants for search highlighting.
"""

# Characters of context collected on each side of a match
CONTEXT_CHARS = 30

# How long a pinned match keeps its flash cue after being scrolled to
FLASH_DURATION_MS = 500

SEARCH_HIGHLIGHT_CLASS = "search-highlight"
SEARCH_HIGHLIGHT_ACTIVE_CLASS = "search-highlight-active"
PINNED_HIGHLIGHT_CLASS = "pinned-highlight"
PINNED_HIGHLIGHT_DISABLED_CLASS = "pinned-highlight-disabled"
PINNED_HIGHLIGHT_FLASH_CLASS = "pinned-highlight-flash"

DECORATION_CLASSES = (
    SEARCH_HIGHLIGHT_CLASS,
    PINNED_HIGHLIGHT_CLASS,
    PINNED_HIGHLIGHT_DISABLED_CLASS,
)

# Code blocks and diagram sources are never searched.
# Inline <code> outside <pre> stays searchable.
EXCLUDED_TAGS = ("pre",)
EXCLUDED_CLASSES = ("mermaid",) + DECORATION_CLASSES
