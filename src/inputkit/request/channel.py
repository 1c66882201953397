from collections import deque
from collections.abc import Iterable
from typing import Protocol, TextIO

from rich.console import Console


class LineChannel(Protocol):
    """
    Line-oriented text I/O used by the acquisition loop.

    ``read_line`` blocks until a line is available and raises ``EOFError``
    once the underlying source is exhausted.
    """

    def write_line(self, text: str) -> None: ...

    def read_line(self) -> str: ...


class ConsoleChannel:
    """Line channel backed by a rich ``Console``.

    Written text is printed literally (no markup, highlighting, emoji or
    wrapping). Reads come from ``stream`` when given, otherwise from stdin via
    the builtin ``input``.
    """

    def __init__(
        self, *, console: Console | None = None, stream: TextIO | None = None
    ) -> None:
        self.console = console or Console()
        self.stream = stream

    def write_line(self, text: str) -> None:
        self.console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def read_line(self) -> str:
        if self.stream is None:
            return self.console.input()

        # readline() signals EOF with "" instead of raising
        c_line = self.stream.readline()
        if not c_line:
            raise EOFError("Input stream exhausted.")
        return c_line.rstrip("\r\n")


class ScriptedChannel:
    """Replay a fixed sequence of input lines and record everything written."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: deque[str] = deque(lines)
        self.written: list[str] = []

    @property
    def n_remaining(self) -> int:
        return len(self._lines)

    def write_line(self, text: str) -> None:
        self.written.append(text)

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError("Scripted input exhausted.")
        return self._lines.popleft()
