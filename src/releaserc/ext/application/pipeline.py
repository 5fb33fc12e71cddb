from __future__ import annotations

from releaserc.application import Application, Command, option
from releaserc.lifecycle import KNOWN_PLUGINS, get_pipeline
from releaserc.model import ReleaseConfigurationError
from releaserc.plugins import ApplicationPlugin


class PipelineCommandPlugin(Command, ApplicationPlugin):
    """Show the steps of the release pipeline and the plugins that run at each step."""

    app: Application

    name = "pipeline"
    options = [
        option("default", None, "Use the default configuration instead of the one in the working directory."),
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
            config = self.app.release_configuration(default=self.option("default"))
        except (ReleaseConfigurationError, ConversionError) as exc:
            self.line_error(f"error: {exc}", "error")
            return 1

        for pipeline_step in get_pipeline(config):
            plugins = ", ".join(pipeline_step.plugins) if pipeline_step.plugins else "<i>none</i>"
            self.line(f"<b>{pipeline_step.step.value}</b>: {plugins}")

        unknown = [p for p in config.plugins if p not in KNOWN_PLUGINS]
        if unknown:
            self.line_error(f"warning: unknown plugins are not shown: {', '.join(unknown)}", "warning")
        return 0
