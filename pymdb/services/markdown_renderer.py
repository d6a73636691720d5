from __future__ import annotations

import markdown

from pymdb.domain.interfaces import IMarkdownRenderer
from pymdb.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

DEFAULT_EXTENSIONS: tuple[str, ...] = ("extra", "sane_lists", "toc", "smarty")


class MarkdownRenderer(IMarkdownRenderer):
    """Converts Markdown to a standalone HTML page for the preview pane."""

    def __init__(self, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = list(extensions)

    def to_html(self, markdown_text: str) -> str:
        body = markdown.markdown(
            markdown_text,
            extensions=self.extensions,
            output_format="html",
        )
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body)
