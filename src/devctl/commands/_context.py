"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the service collaborators lazily and owns
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from devctl.config.settings import DevSettings
    from devctl.infrastructure.environment import EnvironmentProvider
    from devctl.infrastructure.process import ProcessRunner
    from devctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    ``environment`` and ``runner`` are created on first access so
    ``--help`` and ``--version`` never touch them.
    """

    def __init__(self, settings: DevSettings) -> None:
        self.settings = settings
        self._environment: EnvironmentProvider | None = None
        self._runner: ProcessRunner | None = None

        from devctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def environment(self) -> EnvironmentProvider:
        """Environment mode provider backed by the resolved settings."""
        if self._environment is None:
            from devctl.infrastructure.environment import SettingsEnvironment

            self._environment = SettingsEnvironment(self.settings)
        return self._environment

    @property
    def runner(self) -> ProcessRunner:
        """Foreground process runner."""
        if self._runner is None:
            from devctl.infrastructure.process import SubprocessRunner

            self._runner = SubprocessRunner()
        return self._runner

    def emit(self, result: ServiceResult, *, silent_failure: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr
          unless JSON output already carries them.
        * Failure: writes to stderr and exits with ``result.exit_code``.
          With *silent_failure* the human-readable message is skipped
          (JSON output is still written).
        """
        settings = self.output_settings
        if result.ok:
            click.echo(format_result(result, settings=settings))
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return
        if settings.json_output or not silent_failure:
            click.echo(format_result(result, settings=settings), err=True)
        raise SystemExit(result.exit_code)
