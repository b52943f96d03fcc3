"""
Pretty output formatting for the CLI.

Consistent, colorized terminal output for analysis summaries.
"""

from colorama import Fore, Style
import os


class PrettyOutput:
    """
    Pretty output formatter for the quality analyzer CLI.

    Provides colored headers, metrics and compact tables so every
    command renders its results the same way.
    """

    # Color scheme
    PRIMARY = Fore.CYAN
    SUCCESS = Fore.GREEN
    WARNING = Fore.YELLOW
    ERROR = Fore.RED
    HEADER = Fore.WHITE + Style.BRIGHT
    DIM = Style.DIM
    RESET = Style.RESET_ALL

    # Symbols
    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"

    @staticmethod
    def get_terminal_width():
        """Get terminal width, default to 80 if cannot determine."""
        try:
            return os.get_terminal_size().columns
        except OSError:
            return 80

    @staticmethod
    def header(text, width=None):
        """
        Print a major header with box drawing.

        Args:
            text: Header text
            width: Box width (default: terminal width, capped at 80)
        """
        if width is None:
            width = min(PrettyOutput.get_terminal_width(), 80)

        padding = (width - len(text) - 2) // 2
        line = "═" * width

        print(f"\n{PrettyOutput.PRIMARY}╔{line}╗")
        print(f"║{' ' * padding}{text}{' ' * (width - len(text) - padding)}║")
        print(f"╚{line}╝{PrettyOutput.RESET}\n")

    @staticmethod
    def section(text, width=None):
        """Print a section header."""
        if width is None:
            width = min(PrettyOutput.get_terminal_width(), 80)

        line = "─" * width
        print(f"\n{PrettyOutput.HEADER}{line}")
        print(f"{PrettyOutput.ARROW} {text}")
        print(f"{line}{PrettyOutput.RESET}\n")

    @staticmethod
    def error(message, indent=0):
        """Print an error message with cross."""
        spaces = " " * indent
        print(f"{spaces}{PrettyOutput.ERROR}{PrettyOutput.CROSS}{PrettyOutput.RESET} {message}")

    @staticmethod
    def metric(label, value, color=None, indent=2):
        """
        Print a metric with label and value.

        Args:
            label: Metric label
            value: Metric value
            color: Optional color for value
            indent: Indentation spaces
        """
        spaces = " " * indent
        color = color or PrettyOutput.PRIMARY
        print(f"{spaces}{PrettyOutput.DIM}{label}:{PrettyOutput.RESET} {color}{value}{PrettyOutput.RESET}")

    @staticmethod
    def output_file(label, path, indent=2):
        """Print an output file path."""
        spaces = " " * indent
        print(f"{spaces}{PrettyOutput.ARROW} {PrettyOutput.DIM}{label}:{PrettyOutput.RESET} {path}")

    @staticmethod
    def quality_indicator(score, width=20):
        """
        Return a visual quality indicator bar.

        Args:
            score: Quality score 0-100
            width: Bar width in characters

        Returns:
            Formatted quality bar string
        """
        filled = int(width * score / 100)
        empty = width - filled

        if score >= 90:
            color = PrettyOutput.SUCCESS
        elif score >= 70:
            color = PrettyOutput.WARNING
        else:
            color = PrettyOutput.ERROR

        bar = f"{color}{'█' * filled}{PrettyOutput.DIM}{'░' * empty}{PrettyOutput.RESET}"
        return f"{bar} {score:.0f}%"

    @staticmethod
    def analysis_summary(rows, cols, quality, duplicate_rows, duration=None):
        """
        Print a compact one-line summary of a quality report.

        Args:
            rows: Number of data rows
            cols: Number of columns
            quality: Composite quality score 0-100
            duplicate_rows: Number of duplicate rows
            duration: Optional processing time in seconds
        """
        quality_bar = PrettyOutput.quality_indicator(quality, width=15)

        parts = [
            f"{PrettyOutput.PRIMARY}{rows:,}{PrettyOutput.RESET} rows",
            f"{PrettyOutput.PRIMARY}{cols}{PrettyOutput.RESET} cols",
            f"{PrettyOutput.PRIMARY}{duplicate_rows:,}{PrettyOutput.RESET} duplicate rows",
            f"Quality: {quality_bar}",
        ]
        if duration is not None:
            parts.append(f"{PrettyOutput.DIM}{duration:.1f}s{PrettyOutput.RESET}")

        print(f"\n{PrettyOutput.CHECK} {' │ '.join(parts)}")

    @staticmethod
    def compact_table(headers, rows, col_widths=None):
        """
        Print a compact table.

        Args:
            headers: List of header strings
            rows: List of row tuples
            col_widths: Optional list of column widths
        """
        if not col_widths:
            col_widths = [max(len(str(h)), max(len(str(r[i])) for r in rows) if rows else 0)
                          for i, h in enumerate(headers)]

        header_str = "  ".join(f"{h:<{col_widths[i]}}" for i, h in enumerate(headers))
        print(f"  {PrettyOutput.HEADER}{header_str}{PrettyOutput.RESET}")
        print(f"  {PrettyOutput.DIM}{'─' * len(header_str)}{PrettyOutput.RESET}")

        for row in rows:
            row_str = "  ".join(f"{str(v):<{col_widths[i]}}" for i, v in enumerate(row))
            print(f"  {row_str}")
