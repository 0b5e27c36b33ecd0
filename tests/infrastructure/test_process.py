"""Tests for SubprocessRunner and command helpers."""

from __future__ import annotations

import shlex
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from devctl.infrastructure.process import (
    ProcessRunner,
    SubprocessRunner,
    render_command,
    resolve_interpreter,
)


def _script(directory: Path, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    script = directory / "var-dump-server"
    script.write_text(body, encoding="utf-8")
    return script


class TestSubprocessRunner:
    def test_is_a_process_runner(self) -> None:
        assert isinstance(SubprocessRunner(), ProcessRunner)

    def test_runs_exactly_the_intended_file(self, tmp_path: Path) -> None:
        hostile = tmp_path / "dir with space; touch injected"
        script = _script(
            hostile,
            "import sys\n"
            "from pathlib import Path\n"
            "Path(__file__).with_name('ran').write_text(repr(sys.argv[1:]))\n",
        )

        code = SubprocessRunner().run_inheriting_io([sys.executable, str(script)])

        assert code == 0
        assert (hostile / "ran").read_text() == "[]"
        assert not (Path.cwd() / "injected").exists()
        assert not (tmp_path / "injected").exists()

    def test_returns_child_exit_code(self, tmp_path: Path) -> None:
        script = _script(tmp_path, "raise SystemExit(3)\n")
        assert SubprocessRunner().run_inheriting_io([sys.executable, str(script)]) == 3

    def test_stdio_is_inherited(self, tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
        script = _script(tmp_path, "print('dump server output')\n")
        SubprocessRunner().run_inheriting_io([sys.executable, str(script)])
        assert "dump server output" in capfd.readouterr().out

    def test_missing_program_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SubprocessRunner().run_inheriting_io([str(tmp_path / "no-such-php"), "x"])

    def test_interrupt_waits_for_child(self) -> None:
        proc = MagicMock()
        proc.wait.side_effect = [KeyboardInterrupt, 130]
        popen = MagicMock()
        popen.return_value.__enter__.return_value = proc

        with patch("devctl.infrastructure.process.subprocess.Popen", popen):
            code = SubprocessRunner().run_inheriting_io(("php", "/app/vendor/bin/var-dump-server"))

        assert code == 130
        assert proc.wait.call_count == 2
        popen.assert_called_once_with(["php", "/app/vendor/bin/var-dump-server"])


class TestRenderCommand:
    def test_plain_paths_unquoted(self) -> None:
        argv = ["/usr/bin/php", "/app/vendor/bin/var-dump-server"]
        assert render_command(argv) == "/usr/bin/php /app/vendor/bin/var-dump-server"

    @pytest.mark.parametrize(
        "binary",
        [
            "/my app/vendor/bin/var-dump-server",
            "/app; rm -rf /vendor/bin/var-dump-server",
            "/app/$(whoami)/vendor/bin/var-dump-server",
            "/it's/vendor/bin/var-dump-server",
        ],
    )
    def test_metacharacters_are_escaped(self, binary: str) -> None:
        argv = ["/usr/bin/php", binary]
        rendered = render_command(argv)
        assert shlex.split(rendered) == argv


class TestResolveInterpreter:
    def test_default_is_running_interpreter(self) -> None:
        assert resolve_interpreter(None) == sys.executable
        assert resolve_interpreter("") == sys.executable

    def test_path_is_returned_unchanged(self) -> None:
        assert resolve_interpreter("/opt/php/bin/php") == "/opt/php/bin/php"

    def test_bare_name_is_looked_up_on_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "devctl.infrastructure.process.shutil.which", lambda name: f"/usr/bin/{name}"
        )
        assert resolve_interpreter("php") == "/usr/bin/php"

    def test_unknown_name_falls_back_to_itself(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("devctl.infrastructure.process.shutil.which", lambda name: None)
        assert resolve_interpreter("php") == "php"
