"""CLI Argument Parsing

Only the first token is inspected: -v/--version and -h/--help are the sole
flags. Everything else, including unknown flags, is joined into free-text
context for the prompt.
"""

import argparse
from dataclasses import dataclass
from enum import Enum

import argcomplete

from genie import APP_NAME, __version__
from genie.config import DEFAULT_MODEL
from genie.llm import API_KEY_ENV
from genie.llm.gemini import API_KEY_URL

VERSION_FLAGS = ('-v', '--version')
HELP_FLAGS = ('-h', '--help')


class Mode(Enum):
    VERSION = "version"
    HELP = "help"
    RUN = "run"


@dataclass(frozen=True)
class InvocationArgs:
    mode: Mode = Mode.RUN
    context: str | None = None


def build_parser() -> argparse.ArgumentParser:
    """Parser used to render --help and drive shell completion."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        usage=f'{APP_NAME} [OPTIONS]\n       {APP_NAME} [CONTEXT]',
        description=f'{APP_NAME} v{__version__} - AI-powered Git commit message generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""\
setup:
  1. Get your Gemini API key from: {API_KEY_URL}
  2. Set the environment variable: export {API_KEY_ENV}=your_api_key_here
  3. Run {APP_NAME} in any git repository with changes

description:
  {APP_NAME} analyzes your git changes and generates commit messages using
  Google's Gemini AI. It follows conventional commit standards, includes a
  fitting emoji, and copies the message to your clipboard.

  Staged changes (files added with 'git add') are analyzed first. Without
  them, unstaged changes are used, and failing that, untracked files.

configuration:
  .genierc (JSON, current or home directory) sets "model", "copy", "tips"
  and "verbose". Environment overrides:
    GENIE_MODEL     Gemini model name (default: {DEFAULT_MODEL})
    GENIE_VERBOSE   Set to 1 to show prompt size and token usage

examples:
  {APP_NAME}                              # Generate commit message for changes
  {APP_NAME} "Bot API 9.0 migration"      # Generate with context
  {APP_NAME} performance improvements     # Context need not be quoted
  {APP_NAME} --version                    # Show version
""",
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s v{__version__}')
    parser.add_argument(
        'context',
        nargs='*',
        metavar='CONTEXT',
        help='Optional context to help generate better commit messages '
             '(e.g., "changes from Bot API 9.0", "refactor for performance")',
    )
    return parser


def format_help() -> str:
    return build_parser().format_help()


def parse_args(argv: list[str]) -> InvocationArgs:
    argcomplete.autocomplete(build_parser())

    if not argv:
        return InvocationArgs()

    first = argv[0]
    if first in VERSION_FLAGS:
        return InvocationArgs(mode=Mode.VERSION)
    if first in HELP_FLAGS:
        return InvocationArgs(mode=Mode.HELP)

    return InvocationArgs(context=" ".join(argv))
