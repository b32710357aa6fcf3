"""CLI commands for fetching and inspecting firmware checkouts"""

import sys
from pathlib import Path
from typing import Optional

import click

from firmware_fetch.cli.utils.logging import logger
from firmware_fetch.config import get_firmware_dir, get_git_search_path, split_search_path
from firmware_fetch.exceptions import FirmwareFetchError, InvalidRequestError
from firmware_fetch.git import (
    GitFirmwareDownloader,
    describe_checkouts,
    find_git_executable,
)
from firmware_fetch.model import RefKind, RepositoryRef


def _base_dir(base_dir: Optional[str]) -> Path:
    if base_dir:
        return Path(base_dir).expanduser().resolve()
    return get_firmware_dir()


@click.command("checkout")
@click.argument("repository")
@click.option("--sparse", "sparse_folder", default="", help="Only check out this folder.")
@click.option("--tag", help="Tag to check out.")
@click.option("--branch", help="Remote branch to check out.")
@click.option("--commit", help="Commit hash to check out.")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    help="Directory holding the repository clones.",
)
def checkout(
    repository: str,
    sparse_folder: str,
    tag: Optional[str],
    branch: Optional[str],
    commit: Optional[str],
    base_dir: Optional[str],
):
    """Check out REPOSITORY at a tag, branch or commit and print its path.

    Example:

      fwfetch checkout https://github.com/ExpressLRS/ExpressLRS --sparse src --tag 3.3.0
    """
    refs = [
        (kind, value)
        for kind, value in (
            (RefKind.tag, tag),
            (RefKind.branch, branch),
            (RefKind.commit, commit),
        )
        if value
    ]
    if len(refs) != 1:
        raise click.UsageError("Pass exactly one of --tag, --branch or --commit.")

    ref_kind, ref_value = refs[0]
    try:
        ref = RepositoryRef(
            url=repository,
            ref_kind=ref_kind,
            ref_value=ref_value,
            sparse_folder=sparse_folder,
        )
    except InvalidRequestError as e:
        raise click.UsageError(str(e))

    try:
        downloader = GitFirmwareDownloader(_base_dir(base_dir))
        result = downloader.checkout(ref)
    except FirmwareFetchError as e:
        logger.error(f"Failed to fetch {repository}: {e}")
        sys.exit(1)

    click.echo(str(result.path))


@click.command("locate-git")
@click.option(
    "--search-path",
    help="Directories to search, separated like PATH (defaults to PATH).",
)
def locate_git(search_path: Optional[str]):
    """Print the git executable that would be used."""
    locations = (
        split_search_path(search_path) if search_path else get_git_search_path()
    )
    try:
        executable = find_git_executable(locations)
    except FirmwareFetchError as e:
        logger.error(str(e))
        sys.exit(1)

    click.echo(executable)


@click.command("list")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    help="Directory holding the repository clones.",
)
def list_checkouts(base_dir: Optional[str]):
    """List the repository clones and the commit each one is at."""
    try:
        checkouts = describe_checkouts(_base_dir(base_dir))
    except FirmwareFetchError as e:
        logger.error(str(e))
        sys.exit(1)

    if not checkouts:
        logger.info("No checkouts found")
        return

    for entry in checkouts:
        click.echo(
            f"{entry['name']}\t{entry['head'][:7]}\t{entry['branch']}\t{entry['url']}"
        )
