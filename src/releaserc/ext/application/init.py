from __future__ import annotations

from releaserc.application import Application, Command, option
from releaserc.deser import FORMATS
from releaserc.model import get_default_configuration
from releaserc.plugins import ApplicationPlugin


class InitCommandPlugin(Command, ApplicationPlugin):
    """Write the default release configuration to the working directory.

    The file is named <u>.releaserc.FORMAT</u>. An existing file is only replaced when
    <opt>--force</opt> is given.
    """

    app: Application

    name = "init"
    options = [
        option("format", "f", f"The file format. [{'|'.join(FORMATS)}]", flag=False, default="json"),
        option("force", None, "Overwrite the file if it exists."),
    ]

    def __init__(self, app: Application) -> None:
        Command.__init__(self)
        ApplicationPlugin.__init__(self, app)

    def load_configuration(self, app: Application) -> None:
        return None

    def activate(self, app: Application, config: None) -> None:
        app.cleo.add(self)

    def handle(self) -> int:
        try:
            path = self.app.configuration.save(
                get_default_configuration(), self.option("format"), force=self.option("force")
            )
        except ValueError as exc:
            self.line_error(f"error: {exc}", "error")
            return 1
        except FileExistsError as exc:
            self.line_error(f'error: "{exc.args[0]}" already exists, use <opt>--force</opt> to overwrite it', "error")
            return 1

        self.line(f"Wrote <s>{path}</s>")
        return 0
