""" Conversion of release configurations from and to JSON, TOML and YAML. """

from __future__ import annotations

import abc
import typing as t

from releaserc.model import ReleaseConfiguration

__all__ = [
    "ConfigurationDeser",
    "JsonConfigurationDeser",
    "TomlConfigurationDeser",
    "YamlConfigurationDeser",
    "FORMATS",
    "get_deser",
    "from_raw",
    "to_raw",
]

#: The top-level keys that are described by #ReleaseConfiguration. All other keys are kept in
#: #ReleaseConfiguration.extra.
MODEL_KEYS = ("branches", "plugins")


def _normalize_branches(branches: t.Any) -> t.Any:
    # The release engine accepts a plain string in place of `{name = ...}`, also for the whole list.
    if isinstance(branches, str):
        branches = [branches]
    if isinstance(branches, list):
        branches = [{"name": b} if isinstance(b, str) else b for b in branches]
    return branches


def from_raw(data: t.Mapping[str, t.Any], filename: str | None = None) -> ReleaseConfiguration:
    """Converts the raw configuration *data*, as it is stored in a configuration file, into a
    #ReleaseConfiguration. Raises a #databind.core.converter.ConversionError if the data is malformed."""

    import databind.json

    known = {k: data[k] for k in MODEL_KEYS if k in data}
    if "branches" in known:
        known["branches"] = _normalize_branches(known["branches"])
    config = databind.json.load(known, ReleaseConfiguration, filename=filename)
    config.extra = {k: v for k, v in data.items() if k not in MODEL_KEYS}
    return config


def to_raw(config: ReleaseConfiguration) -> dict[str, t.Any]:
    """Converts *config* into the raw data that is stored in a configuration file. Optional fields that are not
    set are omitted."""

    import databind.json
    from databind.core.settings import SerializeDefaults

    data = t.cast(dict, databind.json.dump(config, ReleaseConfiguration, settings=[SerializeDefaults(False)]))
    data.pop("extra", None)
    data.update(config.extra)
    return data


class ConfigurationDeser(abc.ABC):
    """Base class for reading and writing a #ReleaseConfiguration in a particular file format."""

    #: The file suffix (without the leading dot) for files in this format.
    suffix: t.ClassVar[str]

    @abc.abstractmethod
    def load_raw(self, fp: t.TextIO, filename: str) -> dict[str, t.Any]: ...

    @abc.abstractmethod
    def dump_raw(self, data: dict[str, t.Any]) -> str: ...

    def load(self, fp: t.TextIO, filename: str) -> ReleaseConfiguration:
        return from_raw(self.load_raw(fp, filename), filename)

    def dump(self, config: ReleaseConfiguration) -> str:
        return self.dump_raw(to_raw(config))

    def save(self, config: ReleaseConfiguration, fp: t.TextIO, filename: str) -> None:
        fp.write(self.dump(config))


class JsonConfigurationDeser(ConfigurationDeser):
    suffix = "json"

    def load_raw(self, fp: t.TextIO, filename: str) -> dict[str, t.Any]:
        import json

        return json.load(fp)

    def dump_raw(self, data: dict[str, t.Any]) -> str:
        import json

        return json.dumps(data, indent=2) + "\n"


def _drop_none(value: t.Any) -> t.Any:
    # TOML has no null value.
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value if v is not None]
    return value


class TomlConfigurationDeser(ConfigurationDeser):
    suffix = "toml"

    def load_raw(self, fp: t.TextIO, filename: str) -> dict[str, t.Any]:
        import tomli

        return tomli.loads(fp.read())

    def dump_raw(self, data: dict[str, t.Any]) -> str:
        import tomli_w

        return tomli_w.dumps(_drop_none(data))


class YamlConfigurationDeser(ConfigurationDeser):
    """Reads and writes YAML. Because YAML is a superset of JSON, this is also used for `.releaserc` files which
    may contain either."""

    suffix = "yaml"

    def load_raw(self, fp: t.TextIO, filename: str) -> dict[str, t.Any]:
        import yaml

        return yaml.safe_load(fp) or {}

    def dump_raw(self, data: dict[str, t.Any]) -> str:
        import yaml

        return yaml.safe_dump(data, sort_keys=False)


FORMATS: dict[str, type[ConfigurationDeser]] = {
    "json": JsonConfigurationDeser,
    "toml": TomlConfigurationDeser,
    "yaml": YamlConfigurationDeser,
    "yml": YamlConfigurationDeser,
}


def get_deser(format: str) -> ConfigurationDeser:
    """Returns the deser for the format name *format* (`json`, `toml`, `yaml` or `yml`)."""

    try:
        return FORMATS[format.lower()]()
    except KeyError:
        raise ValueError(f"unsupported configuration format: {format!r} (expected one of {', '.join(FORMATS)})")
