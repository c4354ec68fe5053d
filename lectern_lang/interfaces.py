import sys
from abc import ABC, abstractmethod
from typing import List, Optional


def _resolve_print():
    lectern_mod = sys.modules.get("lectern")
    return getattr(lectern_mod, "print", print)


class IOHandler(ABC):
    """Abstracts I/O so drills and scripts can be hosted in different frontends."""

    @abstractmethod
    def emit(self, message: str, symbol: str = "") -> None: ...

    @abstractmethod
    def read_input(self, prompt: str) -> str: ...


def _format_line(message: str, symbol: str) -> str:
    return f"{symbol} {message}" if symbol else message


class ConsoleIO(IOHandler):
    """Console-backed I/O used by the CLI and REPL."""

    def emit(self, message: str, symbol: str = "") -> None:
        line = _format_line(message, symbol)
        try:
            _resolve_print()(line)
        except UnicodeEncodeError:
            _resolve_print()(line.encode("ascii", errors="replace").decode("ascii"))

    def read_input(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            return ""


class BufferedIO(IOHandler):
    """Keeps emitted lines in memory and replays scripted input."""

    def __init__(self, inputs: Optional[List[str]] = None):
        self.lines: List[str] = []
        self._inputs = list(inputs or [])

    def emit(self, message: str, symbol: str = "") -> None:
        self.lines.append(_format_line(message, symbol))

    def read_input(self, prompt: str) -> str:
        return self._inputs.pop(0) if self._inputs else ""
