"""Domain layer: interfaces, simple models (dataclasses) and the error taxonomy."""

from .errors import (
    DocumentIOError,
    InvalidDocumentName,
    NoActiveDirectory,
    NoActiveDocument,
    SessionError,
)
from .interfaces import (
    IConfigService,
    IDocumentScanner,
    IFileService,
    IMarkdownRenderer,
    ISettingsService,
)
from .models import Document, SessionState

__all__ = [
    "IMarkdownRenderer",
    "IDocumentScanner",
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "Document",
    "SessionState",
    "SessionError",
    "DocumentIOError",
    "NoActiveDocument",
    "NoActiveDirectory",
    "InvalidDocumentName",
]
