"""Git Operations Package"""

from genie.git.analyzer import (
    GitAnalyzer, GitError, NotARepositoryError,
    ChangeSet, ChangeKind, summarize_untracked,
)

__all__ = [
    "GitAnalyzer",
    "GitError",
    "NotARepositoryError",
    "ChangeSet",
    "ChangeKind",
    "summarize_untracked",
]
