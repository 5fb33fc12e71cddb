from pathlib import Path

import pytest

from releaserc.application import Application
from releaserc.ext.application.check import CheckCommandPlugin
from releaserc.ext.application.show import ShowCommandPlugin
from releaserc.model import DEFAULT_CONFIGURATION


def _broken_loader():
    raise ImportError("broken plugin")


def test__Application__load_plugins_skips_disabled_and_broken_plugins(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    import releaserc.util.plugins

    entrypoints = [
        ("show", lambda: ShowCommandPlugin),
        ("check", lambda: CheckCommandPlugin),
        ("broken", _broken_loader),
    ]
    monkeypatch.setattr(releaserc.util.plugins, "iter_entrypoints", lambda group: iter(entrypoints))
    (tmp_path / "config.toml").write_text('disable = ["check"]\n')

    app = Application(tmp_path, user_config_file=tmp_path / "config.toml")
    assert app.config().disable == ["check"]
    app.load_plugins()
    assert app.cleo.has("show")
    assert not app.cleo.has("check")


def test__Application__config_defaults_without_user_config(tmp_path: Path):
    app = Application(tmp_path, user_config_file=tmp_path / "config.toml")
    assert app.config().disable == []


def test__Application__release_configuration(tmp_path: Path):
    app = Application(tmp_path, user_config_file=tmp_path / "config.toml")
    config = app.release_configuration(default=True)
    assert config == DEFAULT_CONFIGURATION
    assert config is not DEFAULT_CONFIGURATION
