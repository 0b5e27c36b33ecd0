"""Shared pytest fixtures and test helpers for devctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

from devctl.commands._context import AppContext
from devctl.infrastructure.process import ProcessRunner

_DEVCTL_ENV_VARS = (
    "DEVCTL_CONFIG",
    "DEVCTL_ENVIRONMENT",
    "DEVCTL_DUMP_SERVER__INTERPRETER",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
)


class FakeProcessRunner(ProcessRunner):
    """In-memory ProcessRunner that records argv instead of spawning."""

    def __init__(self, exit_code: int = 0, error: OSError | None = None) -> None:
        self.exit_code = exit_code
        self.error = error
        self.calls: list[list[str]] = []

    def run_inheriting_io(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self.exit_code


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own DEVCTL_* and color settings out of the tests."""
    for name in _DEVCTL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dev = logging.getLogger("devctl")
    dev_level = dev.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dev.setLevel(dev_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project directory with a devctl.toml selecting the local environment."""
    (tmp_path / "devctl.toml").write_text('environment = "local"\n', encoding="utf-8")
    return tmp_path


@pytest.fixture
def dump_server_binary(project_root: Path) -> Path:
    """An installed ``vendor/bin/var-dump-server`` inside the project."""
    binary = project_root / "vendor" / "bin" / "var-dump-server"
    binary.parent.mkdir(parents=True)
    binary.write_text("#!/usr/bin/env php\n<?php\n", encoding="utf-8")
    return binary


@pytest.fixture
def _in_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from inside the project directory.

    Use via ``@pytest.mark.usefixtures("_in_project")``.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeProcessRunner:
    """Replace the CLI's process runner with a recording fake."""
    runner = FakeProcessRunner()
    monkeypatch.setattr(AppContext, "runner", property(lambda self: runner))
    return runner
