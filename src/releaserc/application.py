""" With the application object we manage the CLI commands, which are registered by #ApplicationPlugin#s, and the
access to the release configuration in the working directory. """

from __future__ import annotations

import dataclasses
import logging
import textwrap
import typing as t
from pathlib import Path

from cleo.application import Application as BaseCleoApplication  # type: ignore[import]
from cleo.commands.command import Command as _BaseCommand  # type: ignore[import]
from cleo.helpers import argument, option  # type: ignore[import]
from cleo.io.io import IO  # type: ignore[import]

from releaserc import __version__
from releaserc.configuration import Configuration
from releaserc.util.once import Once

if t.TYPE_CHECKING:
    from releaserc.model import ReleaseConfiguration

__all__ = ["Command", "argument", "option", "IO", "Application", "ApplicationConfig", "USER_CONFIG_FILE"]
logger = logging.getLogger(__name__)

#: The user-level configuration of the application.
USER_CONFIG_FILE = Path.home() / ".config" / "releaserc" / "config.toml"


class Command(_BaseCommand):
    help: str
    description: str

    def __init_subclass__(cls) -> None:
        if not cls.help:
            first_line, remainder = (cls.__doc__ or "").partition("\n")[::2]
            cls.help = (first_line.strip() + "\n" + textwrap.dedent(remainder)).strip()
        cls.description = cls.description or (cls.help.strip().splitlines()[0] if cls.help else None) or ""


class CleoApplication(BaseCleoApplication):
    from cleo.formatters.style import Style  # type: ignore[import]
    from cleo.io.inputs.input import Input  # type: ignore[import]
    from cleo.io.outputs.output import Output  # type: ignore[import]

    _styles: dict[str, Style]

    def __init__(self, init: t.Callable[[IO], t.Any], name: str = "console", version: str = "") -> None:
        super().__init__(name, version)
        self._init_callback = init
        self._styles = {}

        self._initialized = True
        from releaserc.util.cleo import HelpCommand

        self.add(HelpCommand())
        self._default_command = "help"

        self.add_style("b", options=["bold"])
        self.add_style("code", "dark_gray")
        self.add_style("warning", "magenta")
        self.add_style("u", options=["underline"])
        self.add_style("i", options=["italic"])
        self.add_style("s", "yellow")
        self.add_style("opt", "cyan", options=["italic"])

    def add_style(self, name: str, fg: str | None = None, bg: str | None = None, options: list[str] | None = None):
        self._styles[name] = self.Style(fg, bg, options)

    def create_io(
        self, input: Input | None = None, output: Output | None = None, error_output: Output | None = None
    ) -> IO:
        from releaserc.util.cleo import add_style

        io = super().create_io(input, output, error_output)
        for style_name, style in self._styles.items():
            add_style(io, style_name, style)
        return io

    def render_error(self, error: Exception, io: IO) -> None:
        import subprocess as sp

        if isinstance(error, sp.CalledProcessError):
            msg = "Uncaught CalledProcessError raised for command <subj>%s</subj> (exit code: <val>%s</val>)."
            args: tuple[t.Any, ...] = (error.args[1], error.returncode)
            stderr: str | None = error.stderr.decode() if error.stderr else None
            if stderr:
                msg += "\n  stderr:\n%s"
                args += (textwrap.indent(stderr, "    "),)
            logger.error(msg, *args)

        return super().render_error(error, io)

    def _configure_io(self, io: IO) -> None:
        from releaserc.util.logging import TerminalColorFormatter

        fmt = "%(message)s"
        if io.input.has_parameter_option("-vvv"):
            fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            level = logging.DEBUG
        elif io.input.has_parameter_option("-vv"):
            level = logging.DEBUG
        elif io.input.has_parameter_option("-v"):
            level = logging.INFO
        elif io.input.has_parameter_option("-q"):
            level = logging.ERROR
        else:
            level = logging.WARNING

        logging.basicConfig(level=level)
        TerminalColorFormatter(fmt, colored=True).install("tty")
        TerminalColorFormatter(fmt, colored=False).install("notty")

        super()._configure_io(io)
        self._init_callback(io)


@dataclasses.dataclass
class ApplicationConfig:
    #: A list of application plugins to _not_ activate.
    disable: list[str] = dataclasses.field(default_factory=list)


class Application:
    """The application object is the main hub for command-line interactions. It gives access to the release
    configuration in the working directory and provides the #cleo command-line application that
    #ApplicationPlugin#s register their commands to."""

    #: The release configuration files in the working directory.
    configuration: Configuration

    #: The application configuration loaded once from #USER_CONFIG_FILE.
    config: Once[ApplicationConfig]

    #: The cleo application to which new commands can be registered via #ApplicationPlugin#s.
    cleo: CleoApplication

    def __init__(
        self,
        directory: Path | None = None,
        name: str = "releaserc",
        version: str = __version__,
        user_config_file: Path = USER_CONFIG_FILE,
    ) -> None:
        self.directory = directory or Path.cwd()
        self.user_config_file = user_config_file
        self.configuration = Configuration(self.directory)
        self.config = Once(self._get_application_configuration)
        self.cleo = CleoApplication(self._cleo_init, name, version)
        self._plugins_loaded = False

    def _get_application_configuration(self) -> ApplicationConfig:
        import databind.json
        import tomli
        from databind.core.settings import ExtraKeys

        raw_config: dict[str, t.Any] = {}
        if self.user_config_file.is_file():
            logger.debug("Reading application configuration from <val>%s</val>", self.user_config_file)
            with self.user_config_file.open("rb") as fp:
                raw_config = tomli.load(fp)
        return databind.json.load(
            raw_config, ApplicationConfig, filename=str(self.user_config_file), settings=[ExtraKeys(True)]
        )

    def release_configuration(self, default: bool = False) -> ReleaseConfiguration:
        """Loads the release configuration from the working directory, or returns a copy of the default
        configuration if *default* is set."""

        if default:
            from releaserc.model import get_default_configuration

            return get_default_configuration()
        return self.configuration.load()

    def load_plugins(self) -> None:
        """Loads all application plugins (see #ApplicationPlugin) and activates them, except for those listed in
        the `disable` option of the application configuration."""

        from releaserc.plugins import ApplicationPlugin
        from releaserc.util.plugins import iter_entrypoints

        assert not self._plugins_loaded
        self._plugins_loaded = True

        disable = self.config().disable

        logger.debug("Loading application plugins")

        for plugin_name, loader in iter_entrypoints(ApplicationPlugin):  # type: ignore[type-abstract]
            if plugin_name in disable:
                logger.debug("Skipping disabled plugin <subj>%s</subj>", plugin_name)
                continue
            try:
                plugin = loader()(self)
            except Exception:
                logger.exception("Could not load plugin <subj>%s</subj> due to an exception", plugin_name)
            else:
                plugin_config = plugin.load_configuration(self)
                plugin.activate(self, plugin_config)

    def _cleo_init(self, io: IO) -> None:
        self.load_plugins()

    def run(self) -> None:
        """Loads and activates application plugins and then invokes the CLI."""

        self.cleo.run()
