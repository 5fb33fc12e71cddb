""" Checks a #ReleaseConfiguration for the problems that the release engine would reject it for when loading it. """

from __future__ import annotations

import collections
import dataclasses
import enum
import re
import typing as t

from releaserc.model import ReleaseConfiguration, ReleaseConfigurationError

__all__ = ["Severity", "Problem", "InvalidConfigurationError", "validate", "assert_valid"]

#: A prerelease tag must be usable as the prerelease part of a semantic version.
PRERELEASE_TAG = re.compile(r"[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*\Z")
MIN_RELEASE_BRANCHES = 1
MAX_RELEASE_BRANCHES = 3


class Severity(enum.IntEnum):
    WARNING = enum.auto()
    ERROR = enum.auto()


@dataclasses.dataclass
class Problem:
    #: The error code, named like the one the release engine reports for the same problem.
    code: str
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidConfigurationError(ReleaseConfigurationError, ValueError):
    """Raised by #assert_valid() if the configuration has at least one problem of #Severity.ERROR."""

    def __init__(self, problems: t.Sequence[Problem]) -> None:
        super().__init__(problems)
        self.problems = list(problems)

    def __str__(self) -> str:
        return "invalid release configuration:\n" + "\n".join(f"  {p}" for p in self.problems)


def _check_branches(config: ReleaseConfiguration) -> t.Iterator[Problem]:
    if not config.branches:
        yield Problem("ENOBRANCHES", "at least one branch must be configured")
        return

    for index, branch in enumerate(config.branches):
        if not branch.name or not branch.name.strip():
            yield Problem("EINVALIDBRANCHNAME", f"branch at index {index} has an empty name")

    counts = collections.Counter(b.name for b in config.branches if b.name)
    for name, count in counts.items():
        if count > 1:
            yield Problem("EDUPLICATEBRANCHES", f'branch "{name}" is configured {count} times')

    num_release = len(config.release_branches())
    if not MIN_RELEASE_BRANCHES <= num_release <= MAX_RELEASE_BRANCHES:
        yield Problem(
            "ERELEASEBRANCHES",
            f"between {MIN_RELEASE_BRANCHES} and {MAX_RELEASE_BRANCHES} release branches are required, "
            f"found {num_release}",
        )

    tags: dict[str, list[str]] = collections.defaultdict(list)
    for branch in config.prerelease_branches():
        tag = branch.prerelease_tag
        if not tag or not PRERELEASE_TAG.match(tag):
            yield Problem("EPRERELEASEBRANCH", f'branch "{branch.name}" has an invalid prerelease tag: {tag!r}')
        else:
            tags[tag].append(branch.name)
    for tag, names in tags.items():
        if len(names) > 1:
            yield Problem(
                "EPRERELEASEBRANCHES",
                f'prerelease tag "{tag}" is used by more than one branch: {", ".join(names)}',
            )


def _check_plugins(config: ReleaseConfiguration) -> t.Iterator[Problem]:
    from releaserc.lifecycle import KNOWN_PLUGINS

    for index, plugin in enumerate(config.plugins):
        if not plugin or not plugin.strip():
            yield Problem("EPLUGINSCONF", f"plugin at index {index} has an empty identifier")

    counts = collections.Counter(p for p in config.plugins if p)
    for plugin, count in counts.items():
        if count > 1:
            yield Problem("EPLUGINSCONF", f'plugin "{plugin}" is listed {count} times')
        if plugin not in KNOWN_PLUGINS:
            yield Problem("EUNKNOWNPLUGIN", f'plugin "{plugin}" is not a known plugin', Severity.WARNING)


def validate(config: ReleaseConfiguration) -> list[Problem]:
    """Returns all problems found in *config*. An empty list means that the configuration is valid."""

    return [*_check_branches(config), *_check_plugins(config)]


def assert_valid(config: ReleaseConfiguration) -> list[Problem]:
    """Like #validate(), but raises an #InvalidConfigurationError if any of the problems is an error. Returns the
    remaining warnings."""

    problems = validate(config)
    errors = [p for p in problems if p.severity == Severity.ERROR]
    if errors:
        raise InvalidConfigurationError(errors)
    return problems
