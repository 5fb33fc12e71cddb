import pytest

from releaserc.model import (
    DEFAULT_CONFIGURATION,
    BranchRule,
    NoSuchBranchRuleError,
    ReleaseConfiguration,
    get_default_configuration,
)


def test__DEFAULT_CONFIGURATION__branch_names_are_unique_and_not_empty():
    names = [b.name for b in DEFAULT_CONFIGURATION.branches]
    assert names == ["main", "next", "ci/improve-no-pr"]
    assert all(isinstance(n, str) and n for n in names)
    assert len(set(names)) == len(names)


def test__DEFAULT_CONFIGURATION__only_the_ci_branch_is_a_prerelease():
    assert DEFAULT_CONFIGURATION.get_branch("ci/improve-no-pr").prerelease == "2.29-ignore-me"
    assert DEFAULT_CONFIGURATION.get_branch("main").prerelease is None
    assert DEFAULT_CONFIGURATION.get_branch("next").prerelease is None
    assert DEFAULT_CONFIGURATION.release_branches() == [BranchRule("main"), BranchRule("next")]
    assert DEFAULT_CONFIGURATION.prerelease_branches() == [BranchRule("ci/improve-no-pr", "2.29-ignore-me")]


def test__DEFAULT_CONFIGURATION__plugins_in_pipeline_order():
    assert DEFAULT_CONFIGURATION.plugins == [
        "@semantic-release/commit-analyzer",
        "@semantic-release/release-notes-generator",
        "@semantic-release/github",
    ]
    assert DEFAULT_CONFIGURATION.extra == {}


def test__get_default_configuration__returns_an_independent_copy():
    config = get_default_configuration()
    assert config == DEFAULT_CONFIGURATION
    config.branches.append(BranchRule("beta", prerelease=True))
    config.plugins.clear()
    assert len(DEFAULT_CONFIGURATION.branches) == 3
    assert len(DEFAULT_CONFIGURATION.plugins) == 3


def test__BranchRule__prerelease_tag():
    assert BranchRule("main").prerelease_tag is None
    assert not BranchRule("main").is_prerelease
    assert BranchRule("beta", prerelease=True).prerelease_tag == "beta"
    assert BranchRule("beta", prerelease="rc").prerelease_tag == "rc"
    assert BranchRule("beta", prerelease="rc").is_prerelease
    assert not BranchRule("beta", prerelease=False).is_prerelease


def test__BranchRule__is_maintenance():
    assert BranchRule("1.x").is_maintenance
    assert BranchRule("1.2.x").is_maintenance
    assert BranchRule("1.x.x").is_maintenance
    assert not BranchRule("main").is_maintenance
    assert not BranchRule("1.2.3").is_maintenance
    assert not BranchRule("1.x", prerelease="alpha").is_maintenance


def test__BranchRule__matches_exact_names():
    rule = BranchRule("ci/improve-no-pr")
    assert not rule.is_glob
    assert rule.matches("ci/improve-no-pr")
    assert not rule.matches("ci/improve-no-pr-2")
    assert not rule.matches("ci")


def test__BranchRule__matches_glob_patterns():
    rule = BranchRule("release/*")
    assert rule.is_glob
    assert rule.matches("release/1.0")
    assert not rule.matches("release/1.0/hotfix")
    assert not rule.matches("releases/1.0")

    rule = BranchRule("release/**")
    assert rule.matches("release/1.0/hotfix")

    rule = BranchRule("v?")
    assert rule.matches("v1")
    assert not rule.matches("v10")

    rule = BranchRule("[!m]ain")
    assert rule.matches("rain")
    assert not rule.matches("main")


def test__ReleaseConfiguration__get_branch_prefers_exact_matches():
    config = ReleaseConfiguration([BranchRule("ci/*", prerelease="ci"), BranchRule("ci/main")])
    assert config.get_branch("ci/main") == BranchRule("ci/main")
    assert config.get_branch("ci/other") == BranchRule("ci/*", prerelease="ci")


def test__ReleaseConfiguration__get_branch_raises_for_unknown_branches():
    with pytest.raises(NoSuchBranchRuleError) as excinfo:
        DEFAULT_CONFIGURATION.get_branch("feature/foo")
    assert excinfo.value.branch == "feature/foo"
    assert str(excinfo.value) == 'no release rule matches branch "feature/foo"'


def test__ReleaseConfiguration__maintenance_branches_are_not_release_branches():
    config = ReleaseConfiguration([BranchRule("1.x"), BranchRule("main")])
    assert config.maintenance_branches() == [BranchRule("1.x")]
    assert config.release_branches() == [BranchRule("main")]


def test__BranchRule__matches_with_unterminated_or_empty_sets():
    assert not BranchRule("[]x").matches("foo")
    assert not BranchRule("[!]x").matches("foo")
    assert BranchRule("[]x").matches("[]x")
    assert BranchRule("[!]x").matches("[!]x")

    rule = BranchRule("[]a]x")
    assert rule.matches("]x")
    assert rule.matches("ax")
    assert not rule.matches("bx")

    rule = BranchRule("[!]a]x")
    assert rule.matches("bx")
    assert not rule.matches("]x")

    assert BranchRule("v[\\]").matches("v\\")
    assert not BranchRule("[z-a]").matches("b")


def test__ReleaseConfiguration__get_branch_with_malformed_glob():
    with pytest.raises(NoSuchBranchRuleError):
        ReleaseConfiguration([BranchRule("[]x")]).get_branch("foo")
