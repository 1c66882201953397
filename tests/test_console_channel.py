from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

from inputkit.cli.console import CliHeadings  # noqa: E402
from inputkit.request import ConsoleChannel, request_int  # noqa: E402


def _build_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=80, color_system=None), buffer


def test_write_line_prints_text_literally() -> None:
    console, buffer = _build_console()
    channel = ConsoleChannel(console=console)

    channel.write_line("Pick one of [1, 3, 5] :smile:")

    assert buffer.getvalue() == "Pick one of [1, 3, 5] :smile:\n"


def test_read_line_uses_builtin_input(monkeypatch: pytest.MonkeyPatch) -> None:
    console, _ = _build_console()
    monkeypatch.setattr("builtins.input", lambda *args: "42")

    assert ConsoleChannel(console=console).read_line() == "42"


def test_read_line_from_stream_raises_eof_at_end() -> None:
    console, _ = _build_console()
    channel = ConsoleChannel(console=console, stream=io.StringIO("7\r\n8\n"))

    assert channel.read_line() == "7"
    assert channel.read_line() == "8"
    with pytest.raises(EOFError):
        channel.read_line()


def test_request_int_over_console_channel(monkeypatch: pytest.MonkeyPatch) -> None:
    console, buffer = _build_console()
    answers = iter(["eleven", "11"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))

    assert request_int("How many?", channel=ConsoleChannel(console=console)) == 11
    assert buffer.getvalue().splitlines() == [
        "How many?",
        "Input contained characters other than digits. Please enter only a number.",
        "How many?",
    ]


def test_headings_escape_markup() -> None:
    console, buffer = _build_console()
    headings = CliHeadings(console=console)

    headings.title("Request int")
    headings.detail("one of [1, 3]")

    c_out = buffer.getvalue()
    assert "Request int" in c_out
    assert "one of [1, 3]" in c_out


def test_console_channel_belongs_to_request_layer() -> None:
    assert ConsoleChannel.__module__ == "inputkit.request.channel"
