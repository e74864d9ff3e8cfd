# -*- coding: utf-8 -*-
"""Argument parsing for command handlers (no exceptions for control flow)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cornfarm.errors import InvalidArgument


@dataclass(frozen=True)
class Parsed:
    value: int = 0
    error: Optional[InvalidArgument] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_quantity(args: List[str], index: int, action: str, default: int = 1) -> Parsed:
    """Read args[index] as a non-negative count, `default` when absent."""
    if len(args) <= index:
        return Parsed(default)
    raw = args[index]
    message = f'Invalid argument "{raw}" for number of items to {action}.'
    text = raw.strip()
    if not text.isdigit() or not text.isascii():
        return Parsed(error=InvalidArgument(message, raw))
    return Parsed(int(text))
