from __future__ import annotations

import abc
import typing as t

if t.TYPE_CHECKING:
    from releaserc.application import Application

T = t.TypeVar("T")


class ApplicationPlugin(t.Generic[T], abc.ABC):
    """A plugin that is activated on application load, usually used to register additional CLI commands."""

    ENTRYPOINT = "releaserc.plugins.application"

    def __init__(self, app: Application) -> None:
        self.app = app

    @abc.abstractmethod
    def load_configuration(self, app: Application) -> T:
        """Load the configuration of the plugin. Use #Application.config to access the application configuration."""

    @abc.abstractmethod
    def activate(self, app: Application, config: T) -> None:
        """Activate the plugin. Usually registers a #Command to #Application.cleo."""
