# -*- coding: utf-8 -*-
"""Error types raised by the store and reported by the engine."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class CornError(Exception):
    """Base class for every failure the engine knows how to report."""


class StoreIOError(CornError):
    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class CorruptSaveError(CornError):
    def __init__(self, path: Path, line: Optional[int] = None) -> None:
        super().__init__(f"Failed to load game data, the following file is corrupted: {path}")
        self.path = path
        self.line = line


class InvalidArgument(CornError):
    def __init__(self, message: str, argument: str = "") -> None:
        super().__init__(message)
        self.argument = argument
