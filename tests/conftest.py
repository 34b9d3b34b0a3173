"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from pretti.shared.commands import CommandResult


@dataclass
class RecordedCall:
    name: str
    args: tuple[str, ...]
    capture: bool


@dataclass
class FakeCommandRunner:
    """CommandRunner double that returns canned results keyed by program and first argument."""

    responses: dict[tuple[str, str], CommandResult] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def respond(self, name: str, first_arg: str, result: CommandResult) -> None:
        self.responses[(name, first_arg)] = result

    def run(
        self,
        name: str,
        args: Sequence[str],
        *,
        capture: bool = True,
    ) -> CommandResult:
        self.calls.append(RecordedCall(name=name, args=tuple(args), capture=capture))
        key = (name, args[0] if args else "")
        if key in self.responses:
            return self.responses[key]
        return CommandResult(exit_code=0)

    def calls_to(self, name: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.name == name]


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """Provide a runner that never spawns real processes."""

    return FakeCommandRunner()


@pytest.fixture
def git_repo(tmp_path, fake_runner: FakeCommandRunner):
    """Point the fake git at ``tmp_path`` as repository root with no changes."""

    fake_runner.respond("git", "rev-parse", CommandResult(exit_code=0, stdout=f"{tmp_path}\n"))
    fake_runner.respond("git", "diff", CommandResult(exit_code=0, stdout=""))
    return tmp_path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the developer's real configuration file."""

    from pretti.config.paths import ENV_CONFIG_PATH

    config_path = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))
    return config_path
