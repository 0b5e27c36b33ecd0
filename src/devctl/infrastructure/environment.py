"""Environment mode lookup.

Services ask an :class:`EnvironmentProvider` for the current mode instead
of reading settings or ``os.environ`` themselves, so tests can pin the mode
without touching process-wide state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from devctl.config.settings import DevSettings


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Anything that can name the current environment mode."""

    def current(self) -> str: ...


class SettingsEnvironment:
    """Environment mode taken from resolved :class:`DevSettings`."""

    def __init__(self, settings: DevSettings) -> None:
        self._settings = settings

    def current(self) -> str:
        return self._settings.environment


class StaticEnvironment:
    """Fixed environment mode."""

    def __init__(self, name: str) -> None:
        self._name = name

    def current(self) -> str:
        return self._name
