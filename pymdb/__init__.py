"""PyMarkdownBrowser: browse a directory of markdown documents, edit one, preview it live."""

__version__ = "0.1.0"
