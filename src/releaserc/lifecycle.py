""" Describes the pipeline that the release engine runs and the steps at which it invokes the configured plugins.
Nothing in this module executes a step, it only tells which plugins would run and in which order. """

from __future__ import annotations

import dataclasses
import enum
import typing as t

if t.TYPE_CHECKING:
    from releaserc.model import ReleaseConfiguration

__all__ = ["Step", "KnownPlugin", "KNOWN_PLUGINS", "PipelineStep", "get_pipeline", "plugin_role"]


class Step(enum.Enum):
    """The steps of the release pipeline, in the order in which the release engine runs them."""

    VERIFY_CONDITIONS = "verifyConditions"
    ANALYZE_COMMITS = "analyzeCommits"
    VERIFY_RELEASE = "verifyRelease"
    GENERATE_NOTES = "generateNotes"
    PREPARE = "prepare"
    PUBLISH = "publish"
    ADD_CHANNEL = "addChannel"
    SUCCESS = "success"
    FAIL = "fail"


@dataclasses.dataclass(frozen=True)
class KnownPlugin:
    #: The step that the plugin exists for, e.g. #Step.PUBLISH for a plugin that creates releases.
    role: Step

    #: All steps that the plugin implements, including #role.
    steps: frozenset[Step]


KNOWN_PLUGINS: dict[str, KnownPlugin] = {
    "@semantic-release/commit-analyzer": KnownPlugin(Step.ANALYZE_COMMITS, frozenset({Step.ANALYZE_COMMITS})),
    "@semantic-release/release-notes-generator": KnownPlugin(Step.GENERATE_NOTES, frozenset({Step.GENERATE_NOTES})),
    "@semantic-release/github": KnownPlugin(
        Step.PUBLISH,
        frozenset({Step.VERIFY_CONDITIONS, Step.PUBLISH, Step.ADD_CHANNEL, Step.SUCCESS, Step.FAIL}),
    ),
    "@semantic-release/gitlab": KnownPlugin(
        Step.PUBLISH,
        frozenset({Step.VERIFY_CONDITIONS, Step.PUBLISH, Step.SUCCESS, Step.FAIL}),
    ),
    "@semantic-release/npm": KnownPlugin(
        Step.PUBLISH,
        frozenset({Step.VERIFY_CONDITIONS, Step.PREPARE, Step.PUBLISH, Step.ADD_CHANNEL}),
    ),
    "@semantic-release/git": KnownPlugin(Step.PREPARE, frozenset({Step.VERIFY_CONDITIONS, Step.PREPARE})),
    "@semantic-release/changelog": KnownPlugin(Step.PREPARE, frozenset({Step.VERIFY_CONDITIONS, Step.PREPARE})),
    "@semantic-release/exec": KnownPlugin(Step.PUBLISH, frozenset(Step)),
}


@dataclasses.dataclass
class PipelineStep:
    step: Step

    #: The plugins that run at this step, in the order in which they are configured.
    plugins: list[str]


def get_pipeline(config: ReleaseConfiguration) -> list[PipelineStep]:
    """Returns every #Step in pipeline order along with the configured plugins that implement it. Plugins that are
    not listed in #KNOWN_PLUGINS are not assigned to any step."""

    result = []
    for step in Step:
        plugins = [p for p in config.plugins if p in KNOWN_PLUGINS and step in KNOWN_PLUGINS[p].steps]
        result.append(PipelineStep(step, plugins))
    return result


def plugin_role(identifier: str) -> Step | None:
    """Returns the step that the plugin exists for, or `None` if the plugin is unknown."""

    plugin = KNOWN_PLUGINS.get(identifier)
    return plugin.role if plugin else None
