"""Tests for repository root discovery."""

from pathlib import Path

import pytest

from pretti.features.changes import RepositoryLocator
from pretti.shared.commands import CommandResult
from pretti.shared.errors import RepositoryNotFoundError


def test_locate_trims_output(fake_runner) -> None:
    fake_runner.respond("git", "rev-parse", CommandResult(exit_code=0, stdout="/repo\n"))

    root = RepositoryLocator(fake_runner).locate()

    assert root == Path("/repo")
    call = fake_runner.calls[0]
    assert call.name == "git"
    assert call.args == ("rev-parse", "--show-toplevel")
    assert call.capture is True


def test_not_a_repository_wraps_git_message(fake_runner) -> None:
    fake_runner.respond(
        "git",
        "rev-parse",
        CommandResult(
            exit_code=128,
            stderr="fatal: not a git repository (or any of the parent directories): .git\n",
        ),
    )

    with pytest.raises(RepositoryNotFoundError, match="not a git repository"):
        _ = RepositoryLocator(fake_runner).locate()


def test_missing_git_is_repository_not_found(fake_runner) -> None:
    fake_runner.respond(
        "git",
        "rev-parse",
        CommandResult(exit_code=None, started=False, error_message="No such file or directory"),
    )

    with pytest.raises(RepositoryNotFoundError, match="git rev-parse failed: No such file"):
        _ = RepositoryLocator(fake_runner).locate()
