"""Check out tags, branches and commits of firmware repositories."""

import logging
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

from firmware_fetch.exceptions import WorkspaceError
from firmware_fetch.model.repository import FirmwareResult, RefKind, RepositoryRef
from .sync import RepositorySynchronizer

logger = logging.getLogger(__name__)


class GitFirmwareDownloader:
    """
    Fetches firmware sources at a given ref into ``base_directory``.

    Usage:
        downloader = GitFirmwareDownloader(Path("~/firmware"))
        result = downloader.checkout_tag(
            "https://github.com/ExpressLRS/ExpressLRS", "src", "3.3.0"
        )
        result.path  # ~/firmware/ExpressLRS/src
    """

    def __init__(
        self,
        base_directory: Union[str, Path],
        git_executable: Optional[str] = None,
    ):
        self.synchronizer = RepositorySynchronizer(base_directory, git_executable)

    @property
    def base_directory(self) -> Path:
        return self.synchronizer.base_directory

    def _lock_for(self, repo_directory: Path) -> FileLock:
        # kept next to the clone so it never makes the clone directory non-empty
        lock_path = repo_directory.parent / f"{repo_directory.name}.lock"
        try:
            lock_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceError(str(lock_path.parent), str(e)) from e
        return FileLock(lock_path)

    def checkout(self, ref: RepositoryRef) -> FirmwareResult:
        """
        Synchronize the repository of ``ref`` and check out its ref.

        Returns:
            FirmwareResult pointing at the sparse folder (or the repository
            root when there is none) and the checked out commit

        Raises:
            GitCommandFailedError: If synchronizing or checking out fails
            WorkspaceError: If the repository directory or its lock cannot be
                prepared
        """
        local = self.synchronizer.local_checkout(ref.url, ref.sparse_folder)
        directory = local.repository_directory

        with self._lock_for(directory):
            self.synchronizer.sync(ref.url, ref.sparse_folder)

            target = ref.checkout_target
            logger.info(f"Checking out {ref.url}@{target}")
            self.synchronizer.git(directory, "checkout", target)
            commit = self.synchronizer.git(directory, "rev-parse", "HEAD").strip()

        logger.info(f"Checked out {ref.url}@{commit[:7]} to {local.resolved_path}")
        return FirmwareResult(path=local.resolved_path, commit=commit)

    def checkout_tag(
        self, repository: str, sparse_folder: str, tag_name: str
    ) -> FirmwareResult:
        return self.checkout(
            RepositoryRef(
                url=repository,
                ref_kind=RefKind.tag,
                ref_value=tag_name,
                sparse_folder=sparse_folder,
            )
        )

    def checkout_branch(
        self, repository: str, sparse_folder: str, branch: str
    ) -> FirmwareResult:
        return self.checkout(
            RepositoryRef(
                url=repository,
                ref_kind=RefKind.branch,
                ref_value=branch,
                sparse_folder=sparse_folder,
            )
        )

    def checkout_commit(
        self, repository: str, sparse_folder: str, commit: str
    ) -> FirmwareResult:
        return self.checkout(
            RepositoryRef(
                url=repository,
                ref_kind=RefKind.commit,
                ref_value=commit,
                sparse_folder=sparse_folder,
            )
        )
