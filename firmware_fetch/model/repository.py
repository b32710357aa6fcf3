"""
Repository references and local checkout locations.

A ``RepositoryRef`` names what to fetch. A ``LocalCheckout`` names where it
lands on disk: the repository directory is ``base_directory / basename(url)``,
so two URLs with the same basename share one directory.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from firmware_fetch.exceptions import InvalidRequestError


class RefKind(str, Enum):
    """Kinds of git refs that can be checked out."""

    tag = "tag"
    branch = "branch"
    commit = "commit"


def normalize_sparse_folder(sparse_folder: Optional[str]) -> str:
    """
    Sparse folder relative to the repository root, without surrounding slashes.

    An empty result means the whole tree is checked out; ``None``, ``""``,
    ``"/"`` and ``"//"`` all normalize to it.
    """
    return (sparse_folder or "").strip("/\\")


def repository_directory_name(url: str) -> str:
    """Last path component of a repository URL, ignoring trailing slashes."""
    return os.path.basename(url.rstrip("/\\"))


@dataclass(frozen=True)
class RepositoryRef:
    """A repository URL, an optional sparse folder and the ref to check out."""

    url: str
    ref_kind: RefKind
    ref_value: str
    sparse_folder: str = ""

    def __post_init__(self):
        try:
            object.__setattr__(self, "ref_kind", RefKind(self.ref_kind))
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e
        object.__setattr__(
            self, "sparse_folder", normalize_sparse_folder(self.sparse_folder)
        )

        if not self.url or not self.url.strip():
            raise InvalidRequestError("Repository url must be a non-empty string")
        if not self.ref_value or not self.ref_value.strip():
            raise InvalidRequestError(
                f"A {self.ref_kind.value} name must be a non-empty string"
            )
        if not repository_directory_name(self.url):
            raise InvalidRequestError(
                f"Cannot derive a directory name from {self.url!r}"
            )

    @property
    def checkout_target(self) -> str:
        # branches always follow the remote head, never a local branch
        if self.ref_kind is RefKind.branch:
            return f"origin/{self.ref_value}"
        return self.ref_value


@dataclass(frozen=True)
class LocalCheckout:
    """Filesystem locations derived from a repository URL and sparse folder."""

    base_directory: Path
    repository_directory: Path
    resolved_path: Path

    @classmethod
    def for_repository(
        cls,
        base_directory: Union[str, Path],
        url: str,
        sparse_folder: Optional[str] = None,
    ) -> "LocalCheckout":
        base = Path(base_directory)
        repository_directory = base / repository_directory_name(url)

        resolved_path = repository_directory
        relative = normalize_sparse_folder(sparse_folder)
        if relative:
            resolved_path = repository_directory / relative

        return cls(
            base_directory=base,
            repository_directory=repository_directory,
            resolved_path=resolved_path,
        )


@dataclass(frozen=True)
class FirmwareResult:
    """Where the requested firmware sources are, and which commit they are at."""

    path: Path
    commit: Optional[str] = None
