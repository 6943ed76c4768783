"""
Inkmark: a Markdown reader with live search and pinned highlights.
"""

__version__ = "0.1.0"
