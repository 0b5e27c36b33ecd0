"""DumpServerService: launch the VarDumper dump server for local development.

The service gates on the environment mode, resolves
``<project-root>/vendor/bin/var-dump-server``, checks that it exists, and
runs it in the foreground under the configured interpreter. All outcomes
are returned as :class:`ServiceResult`; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from devctl.config.models import DumpServerConfig
from devctl.infrastructure.environment import EnvironmentProvider
from devctl.infrastructure.process import ProcessRunner, render_command, resolve_interpreter
from devctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "dump_server"

# The only environment the server may run in; not configurable.
LOCAL_ENVIRONMENT = "local"
BINARY_PATH = "vendor/bin/var-dump-server"

ENVIRONMENT_REJECTED = "ENVIRONMENT_REJECTED"
BINARY_NOT_FOUND = "BINARY_NOT_FOUND"
SUBPROCESS_FAILED = "SUBPROCESS_FAILED"

INSTALL_HINT = "Run composer install (or composer require --dev symfony/var-dumper)."

AnnounceCallback = Callable[[Path, Sequence[str]], None]


class DumpServerService:
    """Environment-gated launcher for the dump server binary.

    Both capabilities are injected so the gate and the constructed
    command line can be checked without spawning anything.
    """

    def __init__(
        self,
        environment: EnvironmentProvider,
        runner: ProcessRunner,
        project_root: Path,
        config: DumpServerConfig | None = None,
    ) -> None:
        self._environment = environment
        self._runner = runner
        self._project_root = Path(project_root)
        self._config = config or DumpServerConfig()

    def resolve_binary(self) -> Path:
        """Return ``<project-root>/vendor/bin/var-dump-server``; no resolution."""
        return self._project_root.joinpath(*BINARY_PATH.split("/"))

    def build_argv(self, binary: Path) -> list[str]:
        """Interpreter followed by the binary path as its sole argument."""
        return [resolve_interpreter(self._config.interpreter), str(binary)]

    def prepare(self) -> ServiceResult:
        """Check the environment and the binary; return the argv to run."""
        mode = self._environment.current()
        if mode != LOCAL_ENVIRONMENT:
            logger.debug("dev:dump-server refused in environment %r", mode)
            return ServiceResult.failure(
                OP,
                ENVIRONMENT_REJECTED,
                "dev:dump-server is intended for local development only.",
                data={"environment": mode},
            )

        binary = self.resolve_binary()
        logger.debug("Resolved dump server binary: %s", binary)
        if not binary.is_file():
            return ServiceResult.failure(
                OP,
                BINARY_NOT_FOUND,
                f"Could not find {BINARY_PATH}.",
                hint=INSTALL_HINT,
                data={"binary": str(binary)},
            )

        argv = self.build_argv(binary)
        return ServiceResult.success(
            OP,
            binary=str(binary),
            argv=argv,
            command=render_command(argv),
        )

    def launch(self, argv: Sequence[str]) -> ServiceResult:
        """Run *argv* in the foreground and map its exit code.

        Only a zero exit is success; every other code becomes the generic
        failure code, with the child's own code kept in ``data``.
        """
        command = render_command(argv)
        logger.debug("Launching dump server: %s", command)
        try:
            code = self._runner.run_inheriting_io(argv)
        except OSError as exc:
            logger.debug("Dump server failed to start: %s", exc)
            return ServiceResult.failure(
                OP,
                SUBPROCESS_FAILED,
                f"Could not start dump server: {exc}",
                data={"command": command},
            )

        logger.debug("Dump server exited with code %d", code)
        data = {"command": command, "process_exit_code": code}
        if code == 0:
            return ServiceResult.success(OP, **data)
        return ServiceResult.failure(
            OP,
            SUBPROCESS_FAILED,
            f"Dump server exited with code {code}.",
            data=data,
        )

    def run(self, announce: AnnounceCallback | None = None) -> ServiceResult:
        """Prepare, announce, and launch. ``result.exit_code`` is the CLI exit code."""
        prepared = self.prepare()
        if not prepared.ok:
            return prepared

        binary = prepared.data["binary"]
        argv: list[str] = prepared.data["argv"]
        if announce is not None:
            announce(Path(binary), argv)
        result = self.launch(argv)
        return result.model_copy(update={"data": {"binary": binary, **result.data}})
