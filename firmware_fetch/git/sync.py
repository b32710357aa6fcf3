"""
Keep a local clone of a firmware repository in sync with its remote.

Each repository gets one directory under the base directory, named after the
basename of its URL:

    <base_directory>/
    ├── ExpressLRS/          # partial clone, full or sparse working tree
    │   ├── .git/
    │   └── src/
    └── ExpressLRS.lock      # serializes checkouts across synchronizers

An empty directory is populated with a blob-less clone without checkout,
followed by either a full checkout or a sparse checkout of one folder. A
directory that already holds a clone is hard-reset and its tags refreshed from
``origin``; the sparse configuration of the first clone is kept.
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from git import Git
from git.exc import GitCommandNotFound

from firmware_fetch.exceptions import GitCommandFailedError, WorkspaceError
from firmware_fetch.git.executable import git_executable as default_git_executable
from firmware_fetch.model.repository import LocalCheckout, normalize_sparse_folder

logger = logging.getLogger(__name__)


class RepositorySynchronizer:
    """
    Prepares local clones of remote repositories under ``base_directory``.

    Git commands issued through one synchronizer never run concurrently.
    """

    def __init__(
        self,
        base_directory: Union[str, Path],
        git_executable: Optional[str] = None,
    ):
        self.base_directory = Path(base_directory).expanduser().resolve()
        self._git_executable = git_executable
        self._git_lock = threading.Lock()

    @property
    def git_executable(self) -> str:
        if self._git_executable is None:
            self._git_executable = default_git_executable.get().path
        return self._git_executable

    def local_checkout(
        self, repository: str, sparse_folder: Optional[str] = None
    ) -> LocalCheckout:
        return LocalCheckout.for_repository(
            self.base_directory, repository, sparse_folder
        )

    def get_repo_directory(self, repository: str) -> Path:
        return self.local_checkout(repository).repository_directory

    def git(self, directory: Path, *args: str) -> str:
        """
        Run git with ``args`` inside ``directory`` and return its stdout.

        Raises:
            GitCommandFailedError: If git cannot be started or exits non-zero
        """
        command = [self.git_executable, *args]
        logger.debug(f"Running `{' '.join(command)}` in {directory}")

        with self._git_lock:
            try:
                status, stdout, stderr = Git(str(directory)).execute(
                    command,
                    with_extended_output=True,
                    with_exceptions=False,
                )
            except GitCommandNotFound as e:
                raise GitCommandFailedError(command, stderr=str(e)) from e

        if status != 0:
            raise GitCommandFailedError(command, status, stderr)
        return stdout

    def sync(self, repository: str, sparse_folder: Optional[str] = None) -> Path:
        """
        Clone ``repository`` or refresh the existing clone.

        Args:
            repository: Git repository URL
            sparse_folder: Folder to restrict the working tree to; surrounding
                slashes are ignored, and nothing left means the whole tree

        Returns:
            Path to the repository directory

        Raises:
            WorkspaceError: If the repository directory cannot be created or listed
            GitCommandFailedError: If any git command fails
        """
        directory = self.get_repo_directory(repository)

        try:
            directory.mkdir(parents=True, exist_ok=True)
            is_empty = not any(directory.iterdir())
        except OSError as e:
            raise WorkspaceError(str(directory), str(e)) from e

        if is_empty:
            logger.info(f"Cloning {repository} to {directory}")
            self.git(
                directory,
                "clone",
                "--no-checkout",
                "--filter=blob:none",
                repository,
                str(directory),
            )
            folder = normalize_sparse_folder(sparse_folder)
            if folder:
                logger.info(f"Restricting {directory} to {folder}")
                self.git(directory, "sparse-checkout", "set", folder)
            else:
                self.git(directory, "checkout")
        else:
            logger.info(f"Updating existing clone at {directory}")
            self.git(directory, "reset", "--hard")
            self.git(directory, "fetch", "origin", "--tags")

        return directory
