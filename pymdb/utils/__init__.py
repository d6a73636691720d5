"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    DEFAULT_DOCUMENT,
    DEFAULT_SUFFIX,
    HTML_TEMPLATE,
    MARKDOWN_SUFFIXES,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
    WINDOW_TITLE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "WINDOW_TITLE",
    "MARKDOWN_SUFFIXES",
    "DEFAULT_SUFFIX",
    "DEFAULT_DOCUMENT",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
]
