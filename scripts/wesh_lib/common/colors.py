"""
ANSI color codes and logging utilities for the WeSh shell.

Colors are dropped when stdout is not a terminal or NO_COLOR is set, so
piped sessions get plain tags.
"""

import os
import sys


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def use_color() -> bool:
    """True when output goes to a terminal that accepts ANSI codes."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, color: str) -> str:
    """Wrap text in a color code when colors are enabled."""
    if not use_color():
        return text
    return f"{color}{text}{Colors.NC}"


def log(msg: str) -> None:
    """Log a success message in green."""
    print(f"{paint('[+]', Colors.GREEN)} {msg}")


def warn(msg: str) -> None:
    """Log a warning message in yellow."""
    print(f"{paint('[!]', Colors.YELLOW)} {msg}")


def error(msg: str) -> None:
    """Log an error message in red."""
    print(f"{paint('[ERROR]', Colors.RED)} {msg}")


def info(msg: str) -> None:
    """Log an informational message in cyan."""
    print(f"{paint('[i]', Colors.CYAN)} {msg}")
