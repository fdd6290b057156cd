"""CLI Main Entry Point"""

import os
import sys

from genie import APP_NAME, __version__
from genie.cli.args import Mode, format_help, parse_args
from genie.cli.utils import copy_to_clipboard
from genie.config import Config, load_config
from genie.git import ChangeKind, ChangeSet, GitAnalyzer, GitError, NotARepositoryError
from genie.llm import LLMClient, LLMError, MissingAPIKeyError, get_client
from genie.prompts import PromptBuilder
from genie.output import (
    SPARKLES, CHECK, NOTE, TIP,
    bold, dim, success,
    print_box, print_error, print_info, print_warning,
)

ANALYSIS_MESSAGES = {
    ChangeKind.STAGED: "Analyzing staged changes...",
    ChangeKind.UNSTAGED: "No staged changes, analyzing unstaged changes...",
    ChangeKind.UNTRACKED: "Analyzing untracked files...",
}

STAGE_TIPS = {
    ChangeKind.UNSTAGED: "Run 'git add .' to stage changes first",
    ChangeKind.UNTRACKED: "Run 'git add .' to stage files first",
}


def _report_analysis(changes: ChangeSet, config: Config):
    print_info(ANALYSIS_MESSAGES[changes.kind])
    if config.tips and changes.kind in STAGE_TIPS:
        print_info(f"{TIP} Tip: {STAGE_TIPS[changes.kind]}")


def _display_message(message):
    """Display the commit message framed for readability."""
    print()
    print(bold(f"{SPARKLES} Generated commit message:"))
    print_box(message)


def _copy_and_report(message, enabled):
    """Copy message to clipboard and print result. Never fails the run."""
    if not enabled:
        return
    copied, reason = copy_to_clipboard(message)
    if copied:
        print(f"{success(CHECK)} {dim('Copied to clipboard')}")
    else:
        print_warning(f"Could not copy to clipboard{': ' + reason if reason else ''}")
        print(dim("  Copy the message manually:"))
        print()
        print(message)


def _print_verbose_stats(prompt, response):
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    print(dim(f"  Response: {response.tokens_used} tokens"))


def _collect_changes(analyzer: GitAnalyzer) -> ChangeSet:
    try:
        return analyzer.collect()
    except GitError as e:
        raise GitError(f"Error getting git changes: {e}") from e


def _generate_commit_flow(context, config: Config, client: LLMClient, analyzer: GitAnalyzer) -> int:
    """Collect changes, ask the model, present the result.

    Returns:
        int: Exit code
    """
    if context:
        print_info(f'{NOTE} Context: "{context}"')

    try:
        changes = _collect_changes(analyzer)
    except GitError as e:
        print_error(str(e))
        return 1

    if changes.is_empty:
        print(f"{SPARKLES} No changes detected. Nothing to commit!")
        return 0

    _report_analysis(changes, config)

    prompt = PromptBuilder().build(changes, context)
    print_info(f"Generating commit message with {client.name}...")

    try:
        response = client.generate(prompt)
    except LLMError as e:
        print_error(f"Error generating commit message: {e}")
        return 1

    if config.verbose:
        _print_verbose_stats(prompt, response)

    _display_message(response.content)
    _copy_and_report(response.content, config.copy)
    return 0


def main(argv: list[str] | None = None, environ=None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    args = parse_args(argv)

    if args.mode is Mode.VERSION:
        print(f"{APP_NAME} v{__version__}")
        return 0
    if args.mode is Mode.HELP:
        print(format_help())
        return 0

    try:
        analyzer = GitAnalyzer()
    except NotARepositoryError as e:
        print_error(f"Error: {e}")
        return 1
    except GitError as e:
        print_error(str(e))
        return 1

    # Env overrides beat the config file
    config = load_config()
    config.apply_env(environ)

    try:
        client = get_client(environ, model=config.model, api_url=config.api_url)
    except MissingAPIKeyError as e:
        print_error(f"Error: {e}")
        return 1

    return _generate_commit_flow(args.context, config, client, analyzer)


if __name__ == "__main__":
    sys.exit(main())
