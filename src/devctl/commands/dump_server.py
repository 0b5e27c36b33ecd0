"""dev:dump-server: run the Symfony VarDumper server in the foreground."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devctl.commands._base import DevCommand

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from devctl.commands._context import AppContext


@click.command(
    "dev:dump-server",
    cls=DevCommand,
    examples="""\
  # Start the dump server (only allowed in the "local" environment)
  devctl --env local dev:dump-server

  # Same, with the environment taken from devctl.toml or DEVCTL_ENVIRONMENT
  devctl dev:dump-server

  # Run the server script with PHP instead of the current interpreter
  DEVCTL_DUMP_SERVER__INTERPRETER=php devctl dev:dump-server""",
)
@click.pass_obj
def dump_server(app: AppContext) -> None:
    """Start the local Symfony VarDumper server for dump() output."""
    from devctl.services.dump_server import DumpServerService

    svc = DumpServerService(
        environment=app.environment,
        runner=app.runner,
        project_root=app.settings.project_root,
        config=app.settings.dump_server,
    )

    def announce(binary: Path, _argv: Sequence[str]) -> None:
        if app.settings.json_output or app.settings.quiet:
            return
        from devctl.output.renderers import render_launch_notice

        click.echo(render_launch_notice(binary), nl=False)

    result = svc.run(announce=announce)
    if result.ok:
        # The server's own output is the result in human mode.
        if app.settings.json_output:
            app.emit(result)
        return

    # A nonzero exit from the server speaks for itself.
    app.emit(result, silent_failure="process_exit_code" in result.data)
