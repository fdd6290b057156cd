"""CLI Utility Functions"""

import shutil
import subprocess
import sys

# Linux clipboard utilities in preference order; the first found on PATH wins
LINUX_CLIPBOARD_COMMANDS = [
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard', '--input'],
    ['wl-copy'],
]


def clipboard_command(platform: str | None = None) -> tuple[list[str] | None, str]:
    """Pick the clipboard utility for this platform. Returns (command, failure_reason)."""
    platform = platform or sys.platform
    if platform == 'darwin':
        return ['pbcopy'], ""
    if platform == 'win32':
        return ['clip'], ""
    if platform.startswith('linux'):
        for command in LINUX_CLIPBOARD_COMMANDS:
            if shutil.which(command[0]):
                return command, ""
        return None, "no clipboard utility found (install xclip, xsel, or wl-copy)"
    return None, f"unsupported operating system: {platform}"


def copy_to_clipboard(text: str, platform: str | None = None) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason)."""
    command, reason = clipboard_command(platform)
    if command is None:
        return False, reason
    try:
        subprocess.run(command, input=text.encode('utf-8'), check=True)
        return True, ""
    except FileNotFoundError:
        return False, f"{command[0]} not found"
    except (subprocess.CalledProcessError, OSError) as e:
        return False, f"Clipboard command failed: {e}"
