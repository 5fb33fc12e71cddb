from __future__ import annotations

from releaserc.application import Application, Command, argument
from releaserc.model import ReleaseConfigurationError
from releaserc.plugins import ApplicationPlugin
from releaserc.util.git import Git, GitError


class BranchCommandPlugin(Command, ApplicationPlugin):
    """Show the release rule that applies to a branch.

    If no <opt>branch</opt> is given, the current Git branch is used. The command exits with
    status 1 if releases are not made from the branch.
    """

    app: Application

    name = "branch"
    arguments = [
        argument("branch", "The name of the branch. Defaults to the current Git branch.", optional=True),
    ]

    def __init__(self, app: Application) -> None:
        Command.__init__(self)
        ApplicationPlugin.__init__(self, app)

    def load_configuration(self, app: Application) -> None:
        return None

    def activate(self, app: Application, config: None) -> None:
        app.cleo.add(self)

    def handle(self) -> int:
        import subprocess as sp

        from databind.core.converter import ConversionError

        branch_name: str | None = self.argument("branch")
        if not branch_name:
            try:
                branch_name = Git(self.app.directory).get_current_branch_name()
            except (GitError, sp.CalledProcessError, FileNotFoundError):
                self.line_error("error: could not determine the current Git branch", "error")
                return 1

        try:
            rule = self.app.release_configuration().get_branch(branch_name)
        except (ReleaseConfigurationError, ConversionError) as exc:
            self.line_error(f"error: {exc}", "error")
            return 1

        self.line(f"Branch <s>{branch_name}</s> matches rule <opt>{rule.name}</opt>")
        if rule.is_prerelease:
            self.line(f"  releases: <b>prerelease</b> (tag: <s>{rule.prerelease_tag}</s>)")
        elif rule.is_maintenance:
            self.line("  releases: <b>maintenance</b>")
        else:
            self.line("  releases: <b>stable</b>")
        if rule.channel:
            self.line(f"  channel: <s>{rule.channel}</s>")
        return 0
