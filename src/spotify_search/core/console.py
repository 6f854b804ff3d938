"""Centralized Rich Console management.

Results go to stdout through one Console; diagnostics go to a second
Console bound to stderr so they never interleave with piped results.
"""

from rich.console import Console

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get or create the global stdout Console instance."""
    global _console
    if _console is None:
        _console = Console(highlight=False, emoji=False)
    return _console


def get_error_console() -> Console:
    """Get or create the global stderr Console instance."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, highlight=False, emoji=False)
    return _error_console


def print_line(message: str) -> None:
    """Print a plain line, with Rich markup and wrapping disabled."""
    get_console().print(message, markup=False, soft_wrap=True)


def print_error(message: str, style: str | None = "yellow") -> None:
    """Print a diagnostic to stderr.

    Args:
        message: The message to print
        style: Optional Rich style string (e.g., "bold red", "yellow")
    """
    get_error_console().print(message, style=style, markup=False, soft_wrap=True)
