"""Tests for the fwfetch command line interface."""

import pytest
from click.testing import CliRunner

from firmware_fetch import __version__
from firmware_fetch.cli.main import cli
from firmware_fetch.git.executable import ExecutableHandle
from tests.git_remote import GIT, make_fake_git, posix_only, requires_git


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def located_git(monkeypatch):
    """Make the process-wide executable cell answer with the git on PATH."""

    class FixedCell:
        def get(self):
            return ExecutableHandle(path=GIT)

    monkeypatch.setattr("firmware_fetch.git.sync.default_git_executable", FixedCell())
    monkeypatch.setattr(
        "firmware_fetch.git.describe.default_git_executable", FixedCell()
    )


@pytest.mark.short
def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.short
@pytest.mark.parametrize(
    "ref_args",
    [[], ["--tag", "1.0.0", "--branch", "main"]],
)
def test_checkout_needs_exactly_one_ref(runner, tmp_path, ref_args):
    result = runner.invoke(
        cli,
        ["checkout", "https://example.com/fw", "--base-dir", str(tmp_path), *ref_args],
    )

    assert result.exit_code == 2
    assert "exactly one of --tag, --branch or --commit" in result.output


@requires_git
@pytest.mark.short
def test_checkout_prints_path(runner, firmware_remote, tmp_path, located_git):
    base_dir = tmp_path / "fw"

    result = runner.invoke(
        cli,
        [
            "checkout",
            firmware_remote.url,
            "--sparse",
            "firmware/src",
            "--tag",
            "1.0.0",
            "--base-dir",
            str(base_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    expected = base_dir.resolve() / "ExpressLRS" / "firmware" / "src"
    assert result.output.strip().splitlines()[-1] == str(expected)
    assert (expected / "main.c").exists()


@requires_git
@pytest.mark.short
def test_checkout_failure_exits_with_error(
    runner, firmware_remote, tmp_path, located_git
):
    result = runner.invoke(
        cli,
        [
            "checkout",
            firmware_remote.url,
            "--tag",
            "9.9.9",
            "--base-dir",
            str(tmp_path / "fw"),
        ],
    )

    assert result.exit_code == 1


@requires_git
@pytest.mark.short
def test_list_shows_checkouts(runner, firmware_remote, tmp_path, located_git):
    base_dir = tmp_path / "fw"
    runner.invoke(
        cli,
        ["checkout", firmware_remote.url, "--branch", "main", "--base-dir", str(base_dir)],
    )

    result = runner.invoke(cli, ["list", "--base-dir", str(base_dir)])

    assert result.exit_code == 0, result.output
    assert "ExpressLRS" in result.output
    assert "detached" in result.output
    assert firmware_remote.url in result.output


@posix_only
@pytest.mark.short
def test_locate_git_uses_search_path(runner, tmp_path):
    fake = make_fake_git(tmp_path / "bin")

    result = runner.invoke(cli, ["locate-git", "--search-path", str(fake.parent)])

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1] == str(fake)


@pytest.mark.short
def test_locate_git_not_found(runner, tmp_path):
    result = runner.invoke(
        cli, ["locate-git", "--search-path", str(tmp_path / "empty")]
    )

    assert result.exit_code == 1



@posix_only
@pytest.mark.short
@pytest.mark.parametrize(
    "args",
    [
        ["--debug", "locate-git"],
        ["locate-git", "--debug"],
    ],
)
def test_debug_logs_probes_with_level(runner, tmp_path, args):
    fake = make_fake_git(tmp_path / "bin")

    result = runner.invoke(cli, [*args, "--search-path", str(fake.parent)])

    assert result.exit_code == 0, result.output
    assert f"DEBUG firmware_fetch.git.executable: tested git exec {fake}" in (
        result.output
    )
    assert result.output.strip().splitlines()[-1] == str(fake)
