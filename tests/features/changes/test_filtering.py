"""Tests for the extension filter."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from pretti.features.changes import ExtensionSet, filter_paths
from pretti.features.changes.adapters import LocalFileSystemGateway


@pytest.fixture
def files(tmp_path: Path) -> dict[str, Path]:
    """Create a handful of files in ``tmp_path``."""

    names = ["a.md", "b.js", "c.MD", "d.ts", "e.txt"]
    created: dict[str, Path] = {}
    for name in names:
        path = tmp_path / name
        _ = path.write_text("x")
        created[name] = path
    return created


def test_case_sensitive_selection(files: dict[str, Path]) -> None:
    candidates = [files["a.md"], files["b.js"], files["c.MD"]]
    result = filter_paths(candidates, ExtensionSet.parse(".md,.txt", ()), LocalFileSystemGateway())
    assert result == [files["a.md"]]


def test_missing_files_are_dropped_silently(files: dict[str, Path], tmp_path: Path) -> None:
    gone = tmp_path / "deleted.js"
    candidates = [files["b.js"], gone, files["d.ts"]]
    result = filter_paths(candidates, ExtensionSet((".js", ".ts")), LocalFileSystemGateway())
    assert result == [files["b.js"], files["d.ts"]]


def test_sentinel_keeps_every_existing_path_in_order(
    files: dict[str, Path], tmp_path: Path
) -> None:
    candidates = [files["e.txt"], tmp_path / "missing", files["a.md"], files["c.MD"]]
    result = filter_paths(candidates, ExtensionSet(("",)), LocalFileSystemGateway())
    assert result == [files["e.txt"], files["a.md"], files["c.MD"]]


def test_output_is_subsequence_and_keeps_duplicates(files: dict[str, Path]) -> None:
    candidates = [files["b.js"], files["a.md"], files["b.js"]]
    result = filter_paths(candidates, ExtensionSet((".js",)), LocalFileSystemGateway())
    assert result == [files["b.js"], files["b.js"]]


def test_empty_input_yields_empty_list() -> None:
    assert filter_paths([], ExtensionSet((".js",)), LocalFileSystemGateway()) == []


def test_uses_injected_filesystem() -> None:
    class OnlyExisting:
        def __init__(self, existing: set[Path]) -> None:
            self.existing = existing

        def exists(self, path: Path) -> bool:
            return path in self.existing

    a = Path("/repo/a.js")
    b = Path("/repo/b.js")
    result = filter_paths([a, b], ExtensionSet((".js",)), OnlyExisting({b}))
    assert result == [b]


def test_local_gateway_keeps_paths_it_cannot_stat(mocker: MockerFixture) -> None:
    path = Path("/locked/dir/a.js")
    _ = mocker.patch.object(Path, "stat", side_effect=PermissionError(13, "Permission denied"))

    assert LocalFileSystemGateway().exists(path) is True
    assert filter_paths([path], ExtensionSet((".js",)), LocalFileSystemGateway()) == [path]


def test_local_gateway_drops_dangling_symlink(tmp_path: Path) -> None:
    link = tmp_path / "gone.js"
    link.symlink_to(tmp_path / "missing-target.js")

    assert LocalFileSystemGateway().exists(link) is False
