import io

import pytest
import logging

from pathlib import Path

from firmware_fetch.git import GitFirmwareDownloader
from .git_remote import GIT, FirmwareRemote


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("firmware_fetch")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()


# git fixtures


@pytest.fixture
def firmware_remote(tmp_path) -> FirmwareRemote:
    """A repository with a README, a firmware source tree and docs, tagged 1.0.0."""
    remote = FirmwareRemote(tmp_path / "remote" / "ExpressLRS").init()
    remote.write("README.md", "ExpressLRS firmware\n")
    remote.write("firmware/src/main.c", "int version = 1;\n")
    remote.write("docs/guide.md", "flashing guide\n")
    remote.commit("Initial firmware")
    remote.tag("1.0.0")
    return remote


@pytest.fixture
def firmware_dir(tmp_path) -> Path:
    return (tmp_path / "firmware").resolve()


@pytest.fixture
def downloader(firmware_dir) -> GitFirmwareDownloader:
    return GitFirmwareDownloader(firmware_dir, git_executable=GIT)
