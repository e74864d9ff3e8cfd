# -*- coding: utf-8 -*-
"""Output/input channels handed to the engine.

The engine never prints or reads by itself: it emits severity-tagged text and
asks for one token of input through a Channel. Console, in-memory and null
implementations live here.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from rich.console import Console


class Severity(str, Enum):
    LOG = "log"
    WARNING = "warning"
    ERROR = "error"


class Channel:
    def emit(self, text: str, severity: Severity = Severity.LOG, *, end: str = "\n") -> bool:
        raise NotImplementedError

    def request(self) -> str:
        raise NotImplementedError


class ConsoleChannel(Channel):
    """LOG goes to stdout, WARNING/ERROR to stderr (yellow/red)."""

    STYLES = {
        Severity.LOG: None,
        Severity.WARNING: "yellow",
        Severity.ERROR: "bold red",
    }

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None) -> None:
        self.out = out or Console()
        self.err = err or Console(stderr=True)

    def emit(self, text: str, severity: Severity = Severity.LOG, *, end: str = "\n") -> bool:
        console = self.out if severity == Severity.LOG else self.err
        console.print(
            text,
            style=self.STYLES.get(severity),
            markup=False,
            emoji=False,
            highlight=False,
            end=end,
            soft_wrap=True,
        )
        return True

    def request(self) -> str:
        try:
            line = self.out.input()
        except EOFError:
            return ""
        parts = line.split()
        return parts[0] if parts else ""


class MemoryChannel(Channel):
    """Records messages and answers requests from a queue."""

    def __init__(self, responses: Iterable[str] = ()) -> None:
        self.messages: List[Tuple[Severity, str]] = []
        self.responses: List[str] = list(responses)

    def emit(self, text: str, severity: Severity = Severity.LOG, *, end: str = "\n") -> bool:
        self.messages.append((severity, text))
        return True

    def request(self) -> str:
        return self.responses.pop(0) if self.responses else ""

    def texts(self, severity: Optional[Severity] = None) -> List[str]:
        return [text for sev, text in self.messages if severity is None or sev == severity]

    @property
    def output(self) -> str:
        return "\n".join(self.texts())


class NullChannel(Channel):
    def emit(self, text: str, severity: Severity = Severity.LOG, *, end: str = "\n") -> bool:
        return True

    def request(self) -> str:
        return ""
