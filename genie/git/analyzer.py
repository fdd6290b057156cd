"""Git Analyzer - Collect staged, unstaged or untracked changes from git."""

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

UNTRACKED_HEADER = "New untracked files:"


class ChangeKind(Enum):
    """Which source the collected changes came from."""
    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"

    @property
    def description(self) -> str:
        return CHANGE_DESCRIPTIONS[self]


CHANGE_DESCRIPTIONS = {
    ChangeKind.STAGED: "staged changes (ready to commit)",
    ChangeKind.UNSTAGED: "unstaged changes (not yet staged)",
    ChangeKind.UNTRACKED: "untracked files (new, not yet added)",
}


@dataclass(frozen=True)
class ChangeSet:
    """Everything the prompt needs to know about the working tree."""
    diff: str = ""
    status: str = ""
    kind: Optional[ChangeKind] = None

    @property
    def is_empty(self) -> bool:
        return not self.diff.strip()


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""
    pass


class GitAnalyzer:
    """Extracts changes from git, preferring staged over unstaged over untracked."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git {' '.join(args)}: {e}")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise NotARepositoryError("Not a git repository")

    def collect(self) -> ChangeSet:
        """Collect the highest-priority non-empty changes plus porcelain status.

        Returns an empty ChangeSet when there is nothing to commit.
        """
        diff, kind = self._collect_diff()
        if not diff:
            return ChangeSet()
        return ChangeSet(diff=diff, status=self.get_status(), kind=kind)

    def _collect_diff(self) -> tuple[str, Optional[ChangeKind]]:
        staged = self._run_git('diff', '--cached').strip()
        if staged:
            return staged, ChangeKind.STAGED

        unstaged = self._run_git('diff').strip()
        if unstaged:
            return unstaged, ChangeKind.UNSTAGED

        untracked = self.get_untracked_files()
        if untracked:
            return summarize_untracked(untracked), ChangeKind.UNTRACKED

        return "", None

    def get_untracked_files(self) -> list[str]:
        """Untracked paths not excluded by .gitignore rules."""
        output = self._run_git('ls-files', '--others', '--exclude-standard')
        return [line for line in output.splitlines() if line.strip()]

    def get_status(self) -> str:
        return self._run_git('status', '--porcelain')


def summarize_untracked(paths: list[str]) -> str:
    """Stand-in 'diff' for files git has never seen."""
    lines = [UNTRACKED_HEADER]
    lines.extend(f"+ {path}" for path in paths)
    return "\n".join(lines) + "\n"
