from rich_argparse import ArgumentDefaultsRichHelpFormatter, RawTextRichHelpFormatter


class SmartFormatter(ArgumentDefaultsRichHelpFormatter, RawTextRichHelpFormatter):
    """
    Keep manual newlines/indentation AND show (default: ...) in help.
    """

    pass
