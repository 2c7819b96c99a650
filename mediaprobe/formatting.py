"""Rich console output for the command-line interface"""

from datetime import timedelta

from rich.console import Console
from rich.text import Text

console = Console()

def format_duration(duration: timedelta) -> str:
    """Format a duration as H:MM:SS.mmm"""
    total_ms = duration // timedelta(milliseconds=1)
    seconds, ms = divmod(total_ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{ms:03d}"

def _print_marked(mark: str, mark_style: str, message: str, message_style: str) -> None:
    console.print(Text(f"{mark} ", style=mark_style) + Text(message, style=message_style))

def print_error(message: str) -> None:
    """Report a file whose duration could not be determined."""
    _print_marked("✗", "bold red", message, "bold")

def print_success(message: str) -> None:
    """Report a determined duration."""
    _print_marked("✓", "green", message, "green")

def print_info(message: str) -> None:
    """Report progress."""
    _print_marked("ℹ", "bold blue", message, "blue")
