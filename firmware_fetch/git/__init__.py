"""
Git operations for fetching firmware sources.

Layers, leaf first:
    runner      run an executable and capture its result
    executable  locate a working git binary once per process
    sync        clone or refresh one repository directory
    checkout    move the working tree to a tag, branch or commit
    describe    report on the clones under a base directory
"""

from .checkout import GitFirmwareDownloader
from .describe import describe_checkouts
from .executable import (
    ExecutableHandle,
    GitExecutableCell,
    find_git_executable,
    git_executable,
)
from .runner import CommandResult, run_command
from .sync import RepositorySynchronizer

__all__ = [
    "CommandResult",
    "ExecutableHandle",
    "GitExecutableCell",
    "GitFirmwareDownloader",
    "RepositorySynchronizer",
    "describe_checkouts",
    "find_git_executable",
    "git_executable",
    "run_command",
]
