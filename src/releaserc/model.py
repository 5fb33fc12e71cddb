""" The data model of a release configuration. """

from __future__ import annotations

import copy
import dataclasses
import functools
import re
import typing as t

__all__ = [
    "ReleaseConfigurationError",
    "NoSuchBranchRuleError",
    "BranchRule",
    "ReleaseConfiguration",
    "DEFAULT_CONFIGURATION",
    "get_default_configuration",
]


class ReleaseConfigurationError(Exception):
    """Base class for errors raised when a release configuration can not be loaded or used."""


class NoSuchBranchRuleError(ReleaseConfigurationError, LookupError):
    """Raised when no branch rule matches a branch name."""

    def __init__(self, branch: str) -> None:
        super().__init__(branch)
        self.branch = branch

    def __str__(self) -> str:
        return f'no release rule matches branch "{self.branch}"'


_MAINTENANCE_BRANCH = re.compile(r"\d+(\.(\d+|x))?\.x\Z")


@functools.lru_cache(maxsize=None)
def _compile_branch_pattern(pattern: str) -> re.Pattern[str]:
    """Compiles a branch glob pattern. `*` and `?` never match a `/`, `**` matches across path separators."""

    parts = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if pattern.startswith("**", index):
            parts.append(".*")
            index += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            # A "]" directly after "[" or "[!" belongs to the set.
            start = index + 1
            if start < len(pattern) and pattern[start] == "!":
                start += 1
            if start < len(pattern) and pattern[start] == "]":
                start += 1
            end = pattern.find("]", start)
            if end == -1:
                parts.append(re.escape(char))
            else:
                body = pattern[index + 1 : end].replace("\\", "\\\\").replace("[", "\\[")
                if body.startswith("!"):
                    body = "^" + body[1:]
                elif body.startswith("^"):
                    body = "\\" + body
                parts.append(f"[{body}]")
                index = end
        else:
            parts.append(re.escape(char))
        index += 1
    return re.compile("".join(parts) + r"\Z")


@dataclasses.dataclass
class BranchRule:
    """A rule that makes a source-control branch (or all branches matching a glob pattern) eligible for releases."""

    #: The name of the branch, or a glob pattern.
    name: str

    #: When set to a string, releases cut from the branch are prereleases labelled with that tag. When set to
    #: `True`, the branch name itself is used as the tag. Releases are stable when not set.
    prerelease: str | bool | None = None

    #: The distribution channel that releases from this branch are published to. The release engine picks
    #: a default channel when this is not set.
    channel: str | None = None

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None and self.prerelease is not False

    @property
    def prerelease_tag(self) -> str | None:
        if self.prerelease is True:
            return self.name
        if isinstance(self.prerelease, str):
            return self.prerelease
        return None

    @property
    def is_maintenance(self) -> bool:
        """Maintenance branches are named after the version range they maintain, e.g. `1.x` or `1.2.x`."""

        return not self.is_prerelease and _MAINTENANCE_BRANCH.match(self.name) is not None

    @property
    def is_glob(self) -> bool:
        return any(c in self.name for c in "*?[")

    def matches(self, branch: str) -> bool:
        """Returns `True` if *branch* is the branch named by this rule or matches its glob pattern."""

        if branch == self.name:
            return True
        if not self.is_glob:
            return False
        try:
            pattern = _compile_branch_pattern(self.name)
        except re.error:
            return False
        return pattern.match(branch) is not None


@dataclasses.dataclass
class ReleaseConfiguration:
    """The release configuration that is read by the release engine once per invocation."""

    #: The ordered list of branch rules.
    branches: list[BranchRule]

    #: Plugin identifiers. The release engine invokes them in this order at every step of its pipeline.
    plugins: list[str] = dataclasses.field(default_factory=list)

    #: Options that are not described by this model, but that are preserved when the configuration is
    #: loaded and saved again (e.g. `tagFormat` or `repositoryUrl`).
    extra: dict[str, t.Any] = dataclasses.field(default_factory=dict)

    def get_branch(self, name: str) -> BranchRule:
        """Returns the rule for the branch *name*. Rules naming the branch exactly take precedence over glob
        rules, otherwise the first matching glob rule is returned."""

        for rule in self.branches:
            if rule.name == name:
                return rule
        for rule in self.branches:
            if rule.matches(name):
                return rule
        raise NoSuchBranchRuleError(name)

    def release_branches(self) -> list[BranchRule]:
        return [b for b in self.branches if not b.is_prerelease and not b.is_maintenance]

    def maintenance_branches(self) -> list[BranchRule]:
        return [b for b in self.branches if b.is_maintenance]

    def prerelease_branches(self) -> list[BranchRule]:
        return [b for b in self.branches if b.is_prerelease]


DEFAULT_CONFIGURATION = ReleaseConfiguration(
    branches=[
        BranchRule("main"),
        BranchRule("next"),
        BranchRule("ci/improve-no-pr", prerelease="2.29-ignore-me"),
    ],
    plugins=[
        "@semantic-release/commit-analyzer",
        "@semantic-release/release-notes-generator",
        "@semantic-release/github",
    ],
)


def get_default_configuration() -> ReleaseConfiguration:
    """Returns a copy of #DEFAULT_CONFIGURATION that can be modified freely."""

    return copy.deepcopy(DEFAULT_CONFIGURATION)
