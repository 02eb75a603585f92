"""Terminal colour escapes and log line formatting."""

from __future__ import annotations

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
DEEPGREEN = "\033[36m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
REVERSED = "\033[7m"

CLEAR = "\033[0m"

COLOR1 = "\033[38;2;255;135;00m"
COLOR2 = "\033[38;2;255;135;95m"
COLOR3 = "\033[38;2;255;135;135m"
COLOR4 = "\033[38;2;255;135;175m"
COLOR5 = "\033[38;2;255;135;215m"
COLOR6 = "\033[38;2;255;135;255m"

_LOG_START = "\33[1;35m"
_ERROR_START = "\33[1;31m"
_RESET = "\33[0m"


def fg_color(r, g, b) -> str:
    """Escape sequence selecting a 24-bit foreground colour."""
    return f"\033[38;2;{r};{g};{b}m"


def bg_color(r, g, b) -> str:
    """Escape sequence selecting a 24-bit background colour."""
    return f"\033[48;2;{r};{g};{b}m"


def format_log(file: str, line: int, func: str, message: str) -> str:
    """A purple log line tagged with its source location."""
    return f"{_LOG_START}[{file},{line},{func}] {message}{_RESET}\n"


def format_error(file: str, line: int, func: str, message: str) -> str:
    """A red error line tagged with its source location."""
    return f"{_ERROR_START}[{file},{line},{func}] {message}{_RESET}\n"