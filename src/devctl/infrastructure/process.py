"""Foreground process execution.

:class:`ProcessRunner` is the seam between services and the operating
system. The real implementation starts the child from an argument vector
(no shell), lets it inherit stdin/stdout/stderr, and blocks until it exits.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class ProcessRunner(ABC):
    """Runs a command in the foreground and reports its exit code."""

    @abstractmethod
    def run_inheriting_io(self, argv: Sequence[str]) -> int:
        """Run *argv* with the parent's stdio and wait for it to exit.

        Args:
            argv: Program followed by its arguments. Never passed to a shell.

        Returns:
            The child's exit code (negative for signal termination on POSIX).

        Raises:
            OSError: If the program cannot be started.
        """
        ...


class SubprocessRunner(ProcessRunner):
    """:class:`ProcessRunner` backed by :class:`subprocess.Popen`."""

    def run_inheriting_io(self, argv: Sequence[str]) -> int:
        logger.debug("Spawning %s", render_command(argv))
        with subprocess.Popen(list(argv)) as proc:
            try:
                return proc.wait()
            except KeyboardInterrupt:
                # Ctrl+C is delivered to the child as well; let it shut down.
                return proc.wait()


def render_command(argv: Sequence[str]) -> str:
    """Shell-escaped form of *argv* for display and logs."""
    return shlex.join(argv)


def resolve_interpreter(configured: str | None = None) -> str:
    """Return the interpreter used to run helper scripts.

    ``None`` means the interpreter running devctl. A bare command name is
    looked up on ``PATH``; anything else is returned unchanged.
    """
    if not configured:
        return sys.executable
    if "/" in configured or "\\" in configured:
        return configured
    return shutil.which(configured) or configured
