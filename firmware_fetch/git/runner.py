"""Run external executables and capture their result."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from firmware_fetch.exceptions import GitCommandFailedError


@dataclass
class CommandResult:
    command: List[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(
    command: List[str],
    cwd: Optional[Union[str, Path]] = None,
) -> CommandResult:
    """
    Run a command without a shell and capture its output.

    Args:
        command: Executable followed by its arguments
        cwd: Working directory for the process

    Returns:
        CommandResult with the exit status and decoded output

    Raises:
        GitCommandFailedError: If the process cannot be started; a non-zero
            exit is reported in the result, not raised
    """
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise GitCommandFailedError(command, stderr=str(e)) from e

    return CommandResult(
        command=list(command),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
