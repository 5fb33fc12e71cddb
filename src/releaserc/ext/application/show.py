from __future__ import annotations

from releaserc.application import Application, Command, option
from releaserc.deser import FORMATS, get_deser
from releaserc.model import ReleaseConfigurationError
from releaserc.plugins import ApplicationPlugin


class ShowCommandPlugin(Command, ApplicationPlugin):
    """Print the release configuration of the project.

    The configuration is read from the first of the files that the release engine would
    read it from, e.g. <u>.releaserc.json</u> or the <fg=green>[tool.releaserc]</fg> section of <u>pyproject.toml</u>,
    and is printed in the format given with <opt>--format, -f</opt>.
    """

    app: Application

    name = "show"
    options = [
        option("format", "f", f"The output format. [{'|'.join(FORMATS)}]", flag=False, default="json"),
        option("default", None, "Show the default configuration instead of the one in the working directory."),
    ]

    def __init__(self, app: Application) -> None:
        Command.__init__(self)
        ApplicationPlugin.__init__(self, app)

    def load_configuration(self, app: Application) -> None:
        return None

    def activate(self, app: Application, config: None) -> None:
        app.cleo.add(self)

    def handle(self) -> int:
        from databind.core.converter import ConversionError

        try:
            deser = get_deser(self.option("format"))
        except ValueError as exc:
            self.line_error(f"error: {exc}", "error")
            return 1

        try:
            config = self.app.release_configuration(default=self.option("default"))
        except (ReleaseConfigurationError, ConversionError) as exc:
            self.line_error(f"error: {exc}", "error")
            return 1

        self.io.write(deser.dump(config))
        return 0
