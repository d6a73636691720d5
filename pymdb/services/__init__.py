"""Concrete service implementations: document discovery, storage, session and preview."""

from .document_scanner import DocumentScanner, is_markdown_file
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .session import Session
from .settings_service import SettingsService

__all__ = [
    "DocumentScanner",
    "FileService",
    "MarkdownRenderer",
    "Session",
    "SettingsService",
    "is_markdown_file",
]
