"""Smoke tests for unified entry points.

These tests assert that `python -m pretti` and the console script
both resolve to the CLI's `main` function exposed under `pretti.ui.cli`.
"""

from importlib import import_module

from pytest_mock import MockerFixture


def test_module_entry_point_exposes_main() -> None:
    """`python -m pretti` path exposes a `main` callable."""
    m = import_module("pretti.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `pretti.ui.cli:main` and is importable."""
    m = import_module("pretti.ui.cli")
    assert hasattr(m, "main")


def test_main_returns_zero_on_success(mocker: MockerFixture) -> None:
    process = mocker.patch("pretti.ui.cli.cli.CommandProcessor.process_command")
    from pretti.ui.cli import main

    assert main() == 0
    process.assert_called_once_with()
