"""Pydantic models for the target device options a firmware request carries."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from firmware_fetch.exceptions import InvalidRequestError
from .repository import RefKind, RepositoryRef

DEFAULT_TARGET = "DIY_2400_TX_ESP32_SX1280_E28_via_UART"


class FirmwareSource(str, Enum):
    """Where the firmware sources come from."""

    GitBranch = "GitBranch"
    GitTag = "GitTag"
    GitCommit = "GitCommit"
    LocalPath = "LocalPath"


class PullRequest(BaseModel):
    """An open pull request whose head commit can be built."""

    id: int = Field(..., description="Pull request id")
    number: int = Field(..., description="Pull request number")
    title: str = Field("", description="Pull request title")
    head_commit_hash: str = Field(..., description="Commit at the head of the PR")

    @field_validator("head_commit_hash")
    @classmethod
    def validate_head_commit_hash(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("head_commit_hash must be a non-empty string")
        return v


class TargetDeviceOptions(BaseModel):
    """Device target and firmware source selection."""

    target: str = Field(DEFAULT_TARGET, description="Firmware build target")
    source: FirmwareSource = Field(
        FirmwareSource.GitBranch, description="Firmware source type"
    )
    git_tag: str = Field("", description="Tag to fetch for GitTag sources")
    git_branch: str = Field("", description="Branch to fetch for GitBranch sources")
    git_commit: str = Field("", description="Commit to fetch for GitCommit sources")
    local_path: str = Field("", description="Directory used for LocalPath sources")
    git_pull_request: Optional[PullRequest] = Field(
        None, description="Pull request to fetch instead of the selected source"
    )

    def to_repository_ref(self, url: str, sparse_folder: str = "") -> RepositoryRef:
        """
        Assemble the repository ref these options select.

        A pull request takes precedence over ``source`` and resolves to its
        head commit.

        Raises:
            InvalidRequestError: For LocalPath sources, or when the ref for the
                selected source is empty
        """
        if self.git_pull_request is not None:
            return RepositoryRef(
                url=url,
                ref_kind=RefKind.commit,
                ref_value=self.git_pull_request.head_commit_hash,
                sparse_folder=sparse_folder,
            )

        if self.source == FirmwareSource.LocalPath:
            raise InvalidRequestError("LocalPath sources are not fetched from git")

        ref_kind, ref_value = {
            FirmwareSource.GitTag: (RefKind.tag, self.git_tag),
            FirmwareSource.GitBranch: (RefKind.branch, self.git_branch),
            FirmwareSource.GitCommit: (RefKind.commit, self.git_commit),
        }[self.source]

        if not ref_value.strip():
            raise InvalidRequestError(
                f"No {ref_kind.value} given for source {self.source.value}"
            )

        return RepositoryRef(
            url=url,
            ref_kind=ref_kind,
            ref_value=ref_value.strip(),
            sparse_folder=sparse_folder,
        )
