"""Terminal Output Formatting Package

Progress lines are dimmed, errors go to stderr, and the generated message is
framed with a left rule so it stands out from the surrounding chatter.
"""

import os
import sys

RESET = '\033[0m'
BOLD = '\033[1m'
RED = '\033[31m'
GREEN = '\033[32m'
YELLOW = '\033[33m'
CYAN = '\033[36m'
GRAY = '\033[90m'

BOX_WIDTH = 65


def _color_enabled(stream=None) -> bool:
    """NO_COLOR wins over FORCE_COLOR; otherwise color only on a terminal."""
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    stream = stream or sys.stdout
    if not getattr(stream, 'isatty', None) or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
        except (AttributeError, OSError):
            return False
    return True


def _emoji_enabled() -> bool:
    encoding = getattr(sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '✨📋❌'.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _color_enabled()
UNICODE_ENABLED = _emoji_enabled()

CHECK = '📋' if UNICODE_ENABLED else '[OK]'
CROSS = '❌' if UNICODE_ENABLED else '[X]'
SPARKLES = '✨' if UNICODE_ENABLED else '*'
TIP = '💡' if UNICODE_ENABLED else 'Tip:'
NOTE = '📝' if UNICODE_ENABLED else '-'
WARN = '⚠' if UNICODE_ENABLED else '[!]'


def _paint(code: str, text: str) -> str:
    return f"{code}{text}{RESET}" if COLORS_ENABLED else text


def success(text: str) -> str:
    return _paint(GREEN, text)


def error(text: str) -> str:
    return _paint(RED, text)


def warning(text: str) -> str:
    return _paint(YELLOW, text)


def info(text: str) -> str:
    return _paint(CYAN, text)


def dim(text: str) -> str:
    return _paint(GRAY, text)


def bold(text: str) -> str:
    return _paint(BOLD, text)


def print_error(message: str) -> None:
    print(f"{CROSS} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(warning(f"{WARN} {message}"))


def print_info(message: str) -> None:
    print(dim(message))


def print_box(text: str) -> None:
    """Print text between two rules, each line behind a "│ " gutter.

    The subject line is bolded. Lines are never wrapped so the message can
    be copied out of the terminal exactly as generated.
    """
    rule, side = ('─', '│') if UNICODE_ENABLED else ('-', '|')
    corner_top, corner_bottom = ('┌', '└') if UNICODE_ENABLED else ('+', '+')

    print(info(corner_top + rule * BOX_WIDTH))
    for index, line in enumerate(text.split('\n')):
        print(f"{info(side)} {bold(line) if index == 0 else line}")
    print(info(corner_bottom + rule * BOX_WIDTH))


__all__ = [
    "COLORS_ENABLED", "UNICODE_ENABLED", "BOX_WIDTH",
    "CHECK", "CROSS", "SPARKLES", "TIP", "NOTE", "WARN",
    "success", "error", "warning", "info", "dim", "bold",
    "print_error", "print_warning", "print_info", "print_box",
]
