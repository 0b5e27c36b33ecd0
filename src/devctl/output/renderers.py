"""Rich renderers for ServiceResult and the dump server banner.

Each renderer writes to a StringIO-backed Console; callers get the
rendered text back as a string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from devctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from devctl.services.result import ServiceResult

# Keys shown in generic success output; argv duplicates command.
_HIDDEN_KEYS = frozenset({"argv"})


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_success(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.ok:
        return f"OK: {result.op}"
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {msg}"


def render_launch_notice(binary: Path) -> str:
    """Banner printed right before the dump server takes over the terminal."""
    console = create_console()
    console.print(Text("Starting Symfony VarDumper server...", style="dev.info"))
    console.print(Text("Binary: ", style="dev.key"), Text(str(binary), style="dev.path"), sep="")
    console.print("Press Ctrl+C to stop.")
    console.print()
    return get_output(console)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="dev.key")
    style = "dev.path" if key == "binary" else ("dev.code" if key.endswith("exit_code") else "")
    console.print(k, Text(str(value), style=style), sep="")


def _render_success(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="dev.ok"), Text(f"  {result.op}", style="dev.op"), sep="")
    for key, value in result.data.items():
        if key in _HIDDEN_KEYS and not verbose:
            continue
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="dev.error"), Text(f"  {message}", style=""), sep="")
    if error and error.hint:
        console.print(Text(error.hint, style="dev.hint"))
    if verbose:
        if error:
            _field(console, "code", error.code)
        for key, value in result.data.items():
            _field(console, key, value)
