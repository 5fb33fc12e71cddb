import json
from pathlib import Path

import pytest

from releaserc.configuration import Configuration, ConfigurationNotFoundError, get_configuration_sources
from releaserc.model import DEFAULT_CONFIGURATION, BranchRule, ReleaseConfiguration


def test__Configuration__raises_when_there_is_no_configuration(tmp_path: Path):
    configuration = Configuration(tmp_path)
    assert not configuration.exists()
    assert configuration.source() is None
    assert configuration.raw_config() == {}
    with pytest.raises(ConfigurationNotFoundError) as excinfo:
        configuration.load()
    assert excinfo.value.directory == tmp_path


def test__Configuration__reads_pyproject_section(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "example"\n\n[tool.releaserc]\nbranches = ["main"]\n'
    )
    configuration = Configuration(tmp_path)
    source = configuration.source()
    assert source is not None
    assert source.path == tmp_path / "pyproject.toml"
    assert source.section == ("tool", "releaserc")
    assert configuration.load() == ReleaseConfiguration([BranchRule("main")])


def test__Configuration__ignores_pyproject_and_package_json_without_section(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "example"\n')
    (tmp_path / "package.json").write_text(json.dumps({"name": "example"}))
    assert not Configuration(tmp_path).exists()


def test__Configuration__reads_package_json_release_key(tmp_path: Path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "example", "release": {"branches": ["next"]}}))
    assert Configuration(tmp_path).load() == ReleaseConfiguration([BranchRule("next")])


def test__Configuration__prefers_releaserc_files(tmp_path: Path):
    (tmp_path / "package.json").write_text(json.dumps({"release": {"branches": ["next"]}}))
    (tmp_path / ".releaserc.yaml").write_text("branches:\n  - main\n")
    (tmp_path / ".releaserc").write_text('{"branches": ["stable"]}')
    configuration = Configuration(tmp_path)
    assert configuration.source().path == tmp_path / ".releaserc"
    assert configuration.load() == ReleaseConfiguration([BranchRule("stable")])


def test__Configuration__save_writes_file_and_refuses_to_overwrite(tmp_path: Path):
    configuration = Configuration(tmp_path)
    path = configuration.save(DEFAULT_CONFIGURATION, "toml")
    assert path == tmp_path / ".releaserc.toml"
    assert configuration.load() == DEFAULT_CONFIGURATION

    with pytest.raises(FileExistsError):
        configuration.save(DEFAULT_CONFIGURATION, "toml")

    config = ReleaseConfiguration([BranchRule("main")])
    configuration.save(config, "toml", force=True)
    assert configuration.load() == config


def test__get_configuration_sources__order(tmp_path: Path):
    names = [s.path.name for s in get_configuration_sources(tmp_path)]
    assert names == [
        ".releaserc",
        ".releaserc.json",
        ".releaserc.yaml",
        ".releaserc.yml",
        ".releaserc.toml",
        "release.config.toml",
        "package.json",
        "pyproject.toml",
    ]


def test__Configuration__load_reports_data_of_the_cached_source(tmp_path: Path):
    (tmp_path / ".releaserc.yaml").write_text("branches:\n  - main\n")
    configuration = Configuration(tmp_path)
    assert configuration.load() == ReleaseConfiguration([BranchRule("main")])

    (tmp_path / ".releaserc").write_text(json.dumps({"branches": ["stable"]}))
    assert configuration.source().path == tmp_path / ".releaserc"
    assert configuration.load() == ReleaseConfiguration([BranchRule("main")])

    configuration.flush()
    assert configuration.load() == ReleaseConfiguration([BranchRule("stable")])
    assert configuration.raw_config() == {"branches": ["stable"]}
