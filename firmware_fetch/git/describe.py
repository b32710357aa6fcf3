"""Describe the repository clones kept under a firmware base directory."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from git import Git, Repo
from git.exc import (
    GitCommandError,
    GitCommandNotFound,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from firmware_fetch.exceptions import GitCommandFailedError
from .executable import git_executable as default_git_executable

logger = logging.getLogger(__name__)


def use_git_executable(path: str) -> None:
    """
    Make GitPython's own git calls go through ``path``.

    Raises:
        GitCommandFailedError: If ``path`` does not run as git
    """
    try:
        has_git = Git.refresh(path)
    except GitCommandNotFound as e:
        raise GitCommandFailedError([path, "version"], stderr=str(e)) from e
    if not has_git:
        raise GitCommandFailedError([path, "version"])


def describe_checkouts(
    base_directory: Path, git_executable: Optional[str] = None
) -> List[Dict[str, str]]:
    """
    Describe the status of the clones under ``base_directory``.

    Args:
        base_directory: Firmware base directory
        git_executable: Git executable to query with (defaults to the located one)

    Returns:
        List of dictionaries, sorted by directory name, with:
        - name: Directory name (basename of the repository URL)
        - path: Absolute path of the clone
        - url: Origin URL, or "unknown"
        - head: HEAD commit hash
        - branch: Current branch name, or "detached"
    """
    if not base_directory.is_dir():
        return []

    if git_executable is None:
        git_executable = default_git_executable.get().path
    use_git_executable(git_executable)

    results = []
    for repo_path in sorted(base_directory.iterdir()):
        if not (repo_path / ".git").exists():
            continue

        try:
            with Repo(repo_path) as repo:
                head = repo.head.commit.hexsha
                if repo.head.is_detached:
                    branch = "detached"
                else:
                    branch = repo.active_branch.name
                if "origin" in repo.remotes:
                    url = repo.remotes.origin.url
                else:
                    url = ""
        except (
            InvalidGitRepositoryError,
            NoSuchPathError,
            GitCommandError,
            ValueError,
        ) as e:
            logger.debug(f"Failed to read repo at {repo_path}: {e}")
            continue

        results.append(
            {
                "name": repo_path.name,
                "path": str(repo_path),
                "url": url or "unknown",
                "head": head,
                "branch": branch,
            }
        )

    return results
