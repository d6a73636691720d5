from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Document:
    path: Path | None
    text: str
    modified: bool = False


@dataclass(frozen=True)
class SessionState:
    """Snapshot of what the session currently has open."""

    directory: Path | None = None
    document: Path | None = None
    files: tuple[Path, ...] = field(default_factory=tuple)
    dirty: bool = False

    @property
    def is_empty(self) -> bool:
        return self.document is None
