from __future__ import annotations

from pathlib import Path


class OutputWriteFailure(Exception):
    """The batch could not be written to its destination."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not write {path}: {reason}")
        self.path = path
        self.reason = reason
