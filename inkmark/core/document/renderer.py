"""
Markdown to HTML rendering for the document view.
"""

import html
from pathlib import Path

from markdown_it import MarkdownIt

from .html_adapter import CONTENT_ROOT_CLASS, parse_html
from .models import ElementNode


class MarkdownRenderer:
    """Converts Markdown to HTML wrapped in the content root container."""

    def __init__(self):
        self._md = MarkdownIt(
            "commonmark",
            {"html": False, "linkify": False, "typographer": False},
        ).enable("table").enable("strikethrough")

        default_fence = self._md.renderer.rules["fence"]

        def custom_fence(tokens, idx, options, env):
            # Diagram fences keep their source out of reach of search
            token = tokens[idx]
            info = token.info.strip().split(maxsplit=1)[0].lower() if token.info else ""
            if info == "mermaid":
                source = html.escape(token.content)
                return (
                    '<div class="preprocessed-mermaid">'
                    f'<pre class="mermaid-source">{source}</pre>'
                    f'<div class="mermaid">{source}</div>'
                    "</div>\n"
                )
            return default_fence(tokens, idx, options, env)

        self._md.renderer.rules["fence"] = custom_fence

    def render_html(self, markdown_text: str) -> str:
        """Render Markdown text to an HTML fragment."""
        body = self._md.render(markdown_text)
        return f'<div class="{CONTENT_ROOT_CLASS}">\n{body}</div>'

    def render_document(self, markdown_text: str) -> ElementNode:
        """Render Markdown text straight into an editable document tree."""
        return parse_html(self.render_html(markdown_text))

    def render_file(self, file_path: str) -> ElementNode:
        """
        Render a Markdown file.

        Args:
            file_path: Path to the Markdown file

        Returns:
            Content root of the rendered document

        Raises:
            OSError: If the file cannot be read
        """
        text = Path(file_path).read_text(encoding="utf-8")
        return self.render_document(text)
