from releaserc.lifecycle import KNOWN_PLUGINS, Step, get_pipeline, plugin_role
from releaserc.model import DEFAULT_CONFIGURATION, BranchRule, ReleaseConfiguration


def test__plugin_role__default_plugins_analyze_then_generate_notes_then_publish():
    roles = [plugin_role(p) for p in DEFAULT_CONFIGURATION.plugins]
    assert roles == [Step.ANALYZE_COMMITS, Step.GENERATE_NOTES, Step.PUBLISH]
    assert plugin_role("unknown-plugin") is None


def test__KNOWN_PLUGINS__role_is_one_of_the_steps():
    for plugin in KNOWN_PLUGINS.values():
        assert plugin.role in plugin.steps


def test__get_pipeline__default_configuration():
    pipeline = {s.step: s.plugins for s in get_pipeline(DEFAULT_CONFIGURATION)}
    assert list(pipeline) == list(Step)
    assert pipeline[Step.VERIFY_CONDITIONS] == ["@semantic-release/github"]
    assert pipeline[Step.ANALYZE_COMMITS] == ["@semantic-release/commit-analyzer"]
    assert pipeline[Step.VERIFY_RELEASE] == []
    assert pipeline[Step.GENERATE_NOTES] == ["@semantic-release/release-notes-generator"]
    assert pipeline[Step.PREPARE] == []
    assert pipeline[Step.PUBLISH] == ["@semantic-release/github"]
    assert pipeline[Step.FAIL] == ["@semantic-release/github"]


def test__get_pipeline__keeps_configured_plugin_order():
    config = ReleaseConfiguration(
        [BranchRule("main")],
        ["@semantic-release/git", "@semantic-release/changelog", "custom-plugin", "@semantic-release/npm"],
    )
    pipeline = {s.step: s.plugins for s in get_pipeline(config)}
    assert pipeline[Step.PREPARE] == ["@semantic-release/git", "@semantic-release/changelog", "@semantic-release/npm"]
    assert all("custom-plugin" not in plugins for plugins in pipeline.values())
