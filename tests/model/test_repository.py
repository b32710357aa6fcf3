"""Tests for repository refs and local checkout paths."""

from pathlib import Path

import pytest

from firmware_fetch.exceptions import FirmwareFetchError, InvalidRequestError
from firmware_fetch.model import (
    LocalCheckout,
    RefKind,
    RepositoryRef,
    normalize_sparse_folder,
    repository_directory_name,
)

URL = "https://github.com/ExpressLRS/ExpressLRS"


class TestRepositoryRef:
    @pytest.mark.short
    def test_branch_targets_remote_head(self):
        ref = RepositoryRef(url=URL, ref_kind=RefKind.branch, ref_value="master")
        assert ref.checkout_target == "origin/master"

    @pytest.mark.short
    @pytest.mark.parametrize("kind", [RefKind.tag, RefKind.commit])
    def test_tags_and_commits_are_literal(self, kind):
        ref = RepositoryRef(url=URL, ref_kind=kind, ref_value="3.3.0")
        assert ref.checkout_target == "3.3.0"

    @pytest.mark.short
    def test_kind_accepts_plain_strings(self):
        ref = RepositoryRef(url=URL, ref_kind="tag", ref_value="3.3.0")
        assert ref.ref_kind is RefKind.tag

    @pytest.mark.short
    def test_is_immutable(self):
        ref = RepositoryRef(url=URL, ref_kind=RefKind.tag, ref_value="3.3.0")
        with pytest.raises(AttributeError):
            ref.ref_value = "3.4.0"

    @pytest.mark.short
    def test_none_sparse_folder_becomes_empty(self):
        ref = RepositoryRef(
            url=URL, ref_kind=RefKind.tag, ref_value="1", sparse_folder=None
        )
        assert ref.sparse_folder == ""

    @pytest.mark.short
    @pytest.mark.parametrize(
        "url, ref_value",
        [("", "main"), ("   ", "main"), (URL, ""), (URL, "  "), ("/", "main")],
    )
    def test_rejects_empty_values(self, url, ref_value):
        with pytest.raises(InvalidRequestError):
            RepositoryRef(url=url, ref_kind=RefKind.branch, ref_value=ref_value)

    @pytest.mark.short
    def test_unknown_kind_is_a_fetch_error(self):
        with pytest.raises(FirmwareFetchError):
            RepositoryRef(url=URL, ref_kind="release", ref_value="3.3.0")

    @pytest.mark.short
    def test_sparse_folder_is_normalized(self):
        ref = RepositoryRef(
            url=URL, ref_kind=RefKind.tag, ref_value="1", sparse_folder="/src/"
        )
        assert ref.sparse_folder == "src"


class TestLocalCheckout:
    @pytest.mark.short
    def test_repository_root_without_sparse_folder(self):
        local = LocalCheckout.for_repository(Path("/fw"), URL, "")

        assert local.repository_directory == Path("/fw/ExpressLRS")
        assert local.resolved_path == Path("/fw/ExpressLRS")

    @pytest.mark.short
    @pytest.mark.parametrize("sparse_folder", ["/", "//"])
    def test_root_marker_resolves_to_repository_root(self, sparse_folder):
        local = LocalCheckout.for_repository(Path("/fw"), URL, sparse_folder)
        assert local.resolved_path == Path("/fw/ExpressLRS")

    @pytest.mark.short
    @pytest.mark.parametrize("sparse_folder", ["src", "/src", "src/", "/src/"])
    def test_sparse_folder_is_joined(self, sparse_folder):
        local = LocalCheckout.for_repository(Path("/fw"), URL, sparse_folder)
        assert local.resolved_path == Path("/fw/ExpressLRS/src")

    @pytest.mark.short
    def test_nested_sparse_folder(self):
        local = LocalCheckout.for_repository("/fw", URL, "firmware/src")
        assert local.resolved_path == Path("/fw/ExpressLRS/firmware/src")


@pytest.mark.short
@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://github.com/ExpressLRS/ExpressLRS", "ExpressLRS"),
        ("https://github.com/ExpressLRS/ExpressLRS/", "ExpressLRS"),
        ("https://github.com/ExpressLRS/ExpressLRS.git", "ExpressLRS.git"),
        ("git@github.com:ExpressLRS/ExpressLRS.git", "ExpressLRS.git"),
        ("/srv/git/firmware", "firmware"),
    ],
)
def test_repository_directory_name(url, expected):
    assert repository_directory_name(url) == expected


@pytest.mark.short
@pytest.mark.parametrize(
    "sparse_folder, expected",
    [
        (None, ""),
        ("", ""),
        ("/", ""),
        ("//", ""),
        ("src", "src"),
        ("/firmware/src/", "firmware/src"),
    ],
)
def test_normalize_sparse_folder(sparse_folder, expected):
    assert normalize_sparse_folder(sparse_folder) == expected
