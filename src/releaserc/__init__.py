""" Declarative release configuration for the project: the branches that are eligible for automated releases and
the plugins that the release engine runs, plus tooling to load, validate and inspect such configurations. """

__version__ = "1.0.0"

from releaserc.model import DEFAULT_CONFIGURATION, BranchRule, ReleaseConfiguration, get_default_configuration

__all__ = ["DEFAULT_CONFIGURATION", "BranchRule", "ReleaseConfiguration", "get_default_configuration"]
