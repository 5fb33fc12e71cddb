from __future__ import annotations

import logging

from releaserc.application import Application, Command, option
from releaserc.model import ReleaseConfigurationError
from releaserc.plugins import ApplicationPlugin
from releaserc.validation import Severity, validate

logger = logging.getLogger(__name__)
COLORS = {
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class CheckCommandPlugin(Command, ApplicationPlugin):
    """Check the release configuration for problems.

    Reports the problems that the release engine would reject the configuration for,
    such as duplicate branch names, invalid prerelease tags or a missing release branch,
    as well as plugins that are not known. The command exits with status 1 if there is
    at least one error.
    """

    app: Application

    name = "check"
    options = [
        option("warnings-as-errors", "w", "Treat warnings as errors."),
        option("default", None, "Check the default configuration instead of the one in the working directory."),
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

        problems = validate(config)
        logger.info("Found <val>%d</val> problem(s) in the release configuration", len(problems))

        for problem in problems:
            color = COLORS[problem.severity]
            severity = problem.severity.name.ljust(7)
            self.line(f"  <fg={color};options=bold>{severity}</fg> <b>{problem.code}</b>: {problem.message}")

        errors = sum(1 for p in problems if p.severity == Severity.ERROR)
        warnings = len(problems) - errors
        if errors or (warnings and self.option("warnings-as-errors")):
            exit_code = 1
        else:
            exit_code = 0

        self.line(f"Summary: {errors} error(s), {warnings} warning(s), exit code: {exit_code}")
        return exit_code
