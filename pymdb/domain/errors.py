from __future__ import annotations

from pathlib import Path


class SessionError(Exception):
    """Base class for every failure reported by the document session."""


class DocumentIOError(SessionError, OSError):
    """
    A filesystem operation (scan, read, write, create) failed.

    Carries the attempted operation and path plus the underlying cause, so the
    presentation layer can render a message without inspecting the traceback.
    """

    def __init__(self, operation: str, path: Path, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot {operation} {self.path}{detail}")
        self.errno = getattr(cause, "errno", None)


class NoActiveDocument(SessionError):
    """save() was requested while no document is open."""

    def __init__(self) -> None:
        super().__init__("Please open or create a file first")


class NoActiveDirectory(SessionError):
    """A new document was requested while no directory is open."""

    def __init__(self) -> None:
        super().__init__("Please open a directory first")


class InvalidDocumentName(SessionError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid document name: {name!r}")
