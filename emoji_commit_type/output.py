"""Terminal Output Formatting for commit type listings"""

import os
import sys
from typing import Iterable, Optional, TextIO

from emoji_commit_type.commit_type import BumpLevel, CommitType


HEADER = "The emoji commit types are:"


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


COLORS_ENABLED = _supports_color()


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


BUMP_LEVEL_COLORS = {
    BumpLevel.MAJOR: Colors.RED,
    BumpLevel.MINOR: Colors.GREEN,
    BumpLevel.PATCH: Colors.YELLOW,
    BumpLevel.NONE: Colors.DIM,
}


def colorize_commit_type(commit_type: CommitType, text: str) -> str:
    """Color text with the color of the commit type's bump level."""
    return _colorize(text, BUMP_LEVEL_COLORS[commit_type.bump_level()])


def format_commit_type(commit_type: CommitType) -> str:
    """One listing line: emoji, two spaces, dash, description."""
    return f"{commit_type.emoji()}  - {commit_type.description()}"


def format_commit_types(commit_types: Optional[Iterable[CommitType]] = None) -> str:
    if commit_types is None:
        commit_types = CommitType.all_variants()
    return '\n'.join(format_commit_type(ct) for ct in commit_types)


def print_commit_types(file: Optional[TextIO] = None) -> None:
    """Print the header and one colored line per commit type."""
    print(bold(HEADER), file=file)
    for commit_type in CommitType.iter_variants():
        line = format_commit_type(commit_type)
        print(colorize_commit_type(commit_type, line), file=file)


__all__ = [
    "Colors", "COLORS_ENABLED", "HEADER",
    "bold",
    "BUMP_LEVEL_COLORS", "colorize_commit_type",
    "format_commit_type", "format_commit_types", "print_commit_types",
]
