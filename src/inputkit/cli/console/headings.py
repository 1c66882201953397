from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.style import Style


@dataclass(frozen=True, slots=True)
class SpecCliTheme:
    title: str = "#7C3AED"
    detail: str = "#00FFFF"


class CliHeadings:
    """Rule-style headings printed above an interactive request."""

    def __init__(
        self, *, console: Console | None = None, theme: SpecCliTheme | None = None
    ):
        self.console = console or Console()
        self.theme = theme or SpecCliTheme()

    def title(self, text: str) -> None:
        self.console.rule(
            f"[bold]{escape(text)}[/bold]",
            style=Style(color=self.theme.title, bold=True),
            characters="=",
        )

    def detail(self, text: str) -> None:
        self.console.rule(
            escape(text), style=Style(color=self.theme.detail), characters="─"
        )
