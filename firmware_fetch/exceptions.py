"""
Exception classes for firmware_fetch.
"""

from typing import List, Optional, Sequence


class FirmwareFetchError(Exception):
    """Base exception for all firmware fetching errors."""

    pass


class GitExecutableNotFoundError(FirmwareFetchError):
    """Raised when no working git executable exists on the search path."""

    def __init__(self, search_path: Sequence[str]):
        self.search_path = list(search_path)
        super().__init__(
            f"git exec not found (searched {len(self.search_path)} directories)"
        )


class GitCommandFailedError(FirmwareFetchError):
    """Raised when a git invocation exits non-zero or cannot be started."""

    def __init__(
        self,
        command: List[str],
        status: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.status = status
        self.stderr = stderr.strip()

        rendered = " ".join(str(part) for part in self.command)
        if status is None:
            message = f"Could not start `{rendered}`"
        else:
            message = f"`{rendered}` failed with exit status {status}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class WorkspaceError(FirmwareFetchError):
    """Raised when a workspace directory cannot be created or read."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        if reason:
            super().__init__(f"Workspace error for {path}: {reason}")
        else:
            super().__init__(f"Workspace error for {path}")


class InvalidRequestError(FirmwareFetchError, ValueError):
    """Raised when a request or repository ref does not describe a fetchable source."""

    pass
