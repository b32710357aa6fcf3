"""Turn target device options into a local firmware source directory."""

import logging
from pathlib import Path

from firmware_fetch.exceptions import InvalidRequestError, WorkspaceError
from firmware_fetch.git import GitFirmwareDownloader
from firmware_fetch.model import FirmwareResult, FirmwareSource, TargetDeviceOptions

logger = logging.getLogger(__name__)


def resolve_local_path(local_path: str) -> Path:
    """
    Resolve a LocalPath source to an existing absolute directory.

    Raises:
        InvalidRequestError: If no local path was given
        WorkspaceError: If the path is not a directory
    """
    if not local_path or not local_path.strip():
        raise InvalidRequestError("No local path given for source LocalPath")

    path = Path(local_path.strip()).expanduser().resolve()
    if not path.is_dir():
        raise WorkspaceError(str(path), "local firmware path is not a directory")
    return path


def fetch_firmware(
    options: TargetDeviceOptions,
    repository: str,
    sparse_folder: str,
    downloader: GitFirmwareDownloader,
) -> FirmwareResult:
    """
    Fetch the firmware sources selected by ``options``.

    LocalPath sources are used in place. Every other source (or a pull
    request) is checked out from ``repository`` by ``downloader``.
    """
    if options.source == FirmwareSource.LocalPath and options.git_pull_request is None:
        path = resolve_local_path(options.local_path)
        logger.info(f"Using local firmware sources at {path}")
        return FirmwareResult(path=path)

    ref = options.to_repository_ref(repository, sparse_folder)
    logger.debug(
        f"Fetching {options.target} firmware from {ref.url} "
        f"({ref.ref_kind.value} {ref.ref_value})"
    )
    return downloader.checkout(ref)
