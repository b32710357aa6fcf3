from .options import DEFAULT_TARGET, FirmwareSource, PullRequest, TargetDeviceOptions
from .repository import (
    FirmwareResult,
    LocalCheckout,
    RefKind,
    RepositoryRef,
    normalize_sparse_folder,
    repository_directory_name,
)

__all__ = [
    "DEFAULT_TARGET",
    "FirmwareResult",
    "FirmwareSource",
    "LocalCheckout",
    "PullRequest",
    "RefKind",
    "RepositoryRef",
    "TargetDeviceOptions",
    "normalize_sparse_folder",
    "repository_directory_name",
]
