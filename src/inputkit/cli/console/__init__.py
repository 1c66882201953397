from .headings import CliHeadings, SpecCliTheme

__all__ = ["CliHeadings", "SpecCliTheme"]
