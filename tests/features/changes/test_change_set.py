"""Tests for listing unstaged changes."""

from pathlib import Path

import pytest

from pretti.features.changes import ChangeSetLister
from pretti.shared.commands import CommandResult
from pretti.shared.errors import ChangeListFailedError


def test_lines_are_joined_onto_root(fake_runner) -> None:
    fake_runner.respond("git", "diff", CommandResult(exit_code=0, stdout="a/b.js\nc.txt\n"))

    files = ChangeSetLister(fake_runner).list_changes(Path("/repo"))

    assert files == [Path("/repo/a/b.js"), Path("/repo/c.txt")]
    assert fake_runner.calls[0].args == ("diff", "--name-only")


def test_empty_output_is_empty_list(fake_runner) -> None:
    fake_runner.respond("git", "diff", CommandResult(exit_code=0, stdout=""))

    assert ChangeSetLister(fake_runner).list_changes(Path("/repo")) == []


def test_blank_lines_are_skipped(fake_runner) -> None:
    fake_runner.respond("git", "diff", CommandResult(exit_code=0, stdout="\na.js\n\nb.js\n\n"))

    files = ChangeSetLister(fake_runner).list_changes(Path("/repo"))

    assert files == [Path("/repo/a.js"), Path("/repo/b.js")]


def test_git_failure_raises(fake_runner) -> None:
    fake_runner.respond("git", "diff", CommandResult(exit_code=129, stderr="usage: git diff\n"))

    with pytest.raises(ChangeListFailedError, match="git diff failed: usage"):
        _ = ChangeSetLister(fake_runner).list_changes(Path("/repo"))
