"""Custom exception types used by the kickstart scaffolder."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Raised when a project skeleton cannot be written to :attr:`path`."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
