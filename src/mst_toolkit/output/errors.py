"""Exception raised when an exporter cannot write its file."""

from __future__ import annotations

from pathlib import Path


class ExportError(Exception):
    """Error writing an output artifact.

    Attributes:
        path: File that could not be written
        reason: Underlying error description
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")
