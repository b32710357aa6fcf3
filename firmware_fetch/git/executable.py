"""
Locate a working git executable.

The search walks an ordered list of directories (usually ``PATH``) and probes
each candidate with ``--version``. The first candidate that exits successfully
is used; probe failures only move the search on to the next candidate.

The located executable is cached per process in a ``GitExecutableCell``, so
repeated requests do not re-probe the filesystem.
"""

import logging
import os
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from firmware_fetch.config import get_git_search_path
from firmware_fetch.exceptions import GitCommandFailedError, GitExecutableNotFoundError
from firmware_fetch.git.runner import run_command

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform.startswith("win")


@dataclass(frozen=True)
class ExecutableHandle:
    path: str


def candidate_names(is_windows: Optional[bool] = None) -> List[str]:
    """Executable names to try in each directory, in order."""
    if is_windows is None:
        is_windows = IS_WINDOWS
    return ["git.exe", "git"] if is_windows else ["git"]


def find_git_executable(
    search_path: Iterable[str], is_windows: Optional[bool] = None
) -> str:
    """
    Find the first git executable on the search path that answers ``--version``.

    Args:
        search_path: Directories to search, in order
        is_windows: Override platform detection for the candidate names

    Returns:
        Normalized path of the first working executable

    Raises:
        GitExecutableNotFoundError: If no candidate in any directory works
    """
    locations = list(search_path)
    names = candidate_names(is_windows)

    for location in locations:
        for name in names:
            executable = os.path.normpath(os.path.join(location, name)).replace(
                '"', ""
            )
            if not os.path.isfile(executable):
                continue

            try:
                result = run_command([executable, "--version"])
            except GitCommandFailedError as e:
                logger.warning(f"{executable}: {e}")
                continue

            logger.debug(f"tested git exec {executable}")
            if result.success:
                logger.info(f"confirmed git exec {executable}")
                return executable

    raise GitExecutableNotFoundError(locations)


class GitExecutableCell:
    """
    Initialize-once holder for the git executable of this process.

    The first call to ``get`` runs the search; concurrent callers wait for it
    and then share the result. A failed search is not cached, so the next call
    searches again.
    """

    def __init__(self, search_path_provider: Callable[[], List[str]]):
        self._search_path_provider = search_path_provider
        self._lock = threading.Lock()
        self._handle: Optional[ExecutableHandle] = None

    def get(self) -> ExecutableHandle:
        handle = self._handle
        if handle is not None:
            return handle

        with self._lock:
            if self._handle is None:
                path = find_git_executable(self._search_path_provider())
                self._handle = ExecutableHandle(path=path)
            return self._handle


git_executable = GitExecutableCell(get_git_search_path)
