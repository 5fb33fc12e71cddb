from __future__ import annotations

import dataclasses
import logging
import typing as t
from pathlib import Path

from releaserc.deser import (
    ConfigurationDeser,
    JsonConfigurationDeser,
    TomlConfigurationDeser,
    YamlConfigurationDeser,
    get_deser,
)
from releaserc.model import ReleaseConfiguration, ReleaseConfigurationError
from releaserc.util.once import Once

logger = logging.getLogger(__name__)


class ConfigurationNotFoundError(ReleaseConfigurationError, FileNotFoundError):
    """Raised when a directory contains no release configuration."""

    def __init__(self, directory: Path) -> None:
        super().__init__(directory)
        self.directory = directory

    def __str__(self) -> str:
        return f'no release configuration found in "{self.directory}"'


@dataclasses.dataclass(frozen=True)
class ConfigurationSource:
    """A file that may contain the release configuration, optionally nested under a key path in that file."""

    path: Path
    deser: ConfigurationDeser = dataclasses.field(compare=False)
    section: tuple[str, ...] = ()

    def exists(self) -> bool:
        if not self.path.is_file():
            return False
        if not self.section:
            return True
        return self._get_section(self._read()) is not None

    def value(self) -> dict[str, t.Any]:
        """Reads the raw configuration from the file. Returns an empty dictionary if the section does not exist."""

        return self._get_section(self._read()) or {}

    def _read(self) -> dict[str, t.Any]:
        logger.debug("Reading <val>%s</val>", self.path)
        with self.path.open(encoding="utf8") as fp:
            return self.deser.load_raw(fp, str(self.path))

    def _get_section(self, data: dict[str, t.Any]) -> dict[str, t.Any] | None:
        value: t.Any = data
        for key in self.section:
            if not isinstance(value, dict) or key not in value:
                return None
            value = value[key]
        return value

    def __str__(self) -> str:
        if self.section:
            return f"{self.path} ({'.'.join(self.section)})"
        return str(self.path)


def get_configuration_sources(directory: Path) -> list[ConfigurationSource]:
    """Returns the files that may contain the release configuration in *directory*, in the order in which they
    are looked up by the release engine."""

    return [
        ConfigurationSource(directory / ".releaserc", YamlConfigurationDeser()),
        ConfigurationSource(directory / ".releaserc.json", JsonConfigurationDeser()),
        ConfigurationSource(directory / ".releaserc.yaml", YamlConfigurationDeser()),
        ConfigurationSource(directory / ".releaserc.yml", YamlConfigurationDeser()),
        ConfigurationSource(directory / ".releaserc.toml", TomlConfigurationDeser()),
        ConfigurationSource(directory / "release.config.toml", TomlConfigurationDeser()),
        ConfigurationSource(directory / "package.json", JsonConfigurationDeser(), ("release",)),
        ConfigurationSource(directory / "pyproject.toml", TomlConfigurationDeser(), ("tool", "releaserc")),
    ]


class Configuration:
    """Represents the release configuration stored in a directory, which is read from the first of the files
    returned by #get_configuration_sources() that exists."""

    #: The directory in which the configuration is looked up.
    directory: Path

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._contents: Once[tuple[ConfigurationSource | None, dict[str, t.Any]]] = Once(self._read_contents)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(directory="{self.directory}")'

    def source(self) -> ConfigurationSource | None:
        for source in get_configuration_sources(self.directory):
            if source.exists():
                return source
        return None

    def _read_contents(self) -> tuple[ConfigurationSource | None, dict[str, t.Any]]:
        source = self.source()
        if source is None:
            logger.debug("No release configuration found in <subj>%s</subj>", self.directory)
            return None, {}
        logger.debug("Reading configuration for <subj>%s</subj> from <val>%s</val>", self, source)
        return source, source.value()

    def raw_config(self) -> dict[str, t.Any]:
        """Returns the raw configuration data, read once from #source(). Empty if there is no configuration."""

        return self._contents()[1]

    def flush(self) -> None:
        """Forget the configuration read so far, causing the next access to look up and read the files again."""

        self._contents.flush()

    def exists(self) -> bool:
        return self.source() is not None

    def load(self) -> ReleaseConfiguration:
        """Loads the release configuration. Raises a #ConfigurationNotFoundError if there is none."""

        from releaserc.deser import from_raw

        source, data = self._contents()
        if source is None:
            raise ConfigurationNotFoundError(self.directory)
        return from_raw(data, str(source.path))

    def save(self, config: ReleaseConfiguration, format: str = "json", force: bool = False) -> Path:
        """Writes *config* to `.releaserc.<format>` in the directory and returns the path of the file. Raises a
        #FileExistsError if the file exists, unless *force* is set."""

        deser = get_deser(format)
        path = self.directory / f".releaserc.{deser.suffix}"
        if path.exists() and not force:
            raise FileExistsError(path)
        logger.info("Writing release configuration to <val>%s</val>", path)
        with path.open("w", encoding="utf8") as fp:
            deser.save(config, fp, str(path))
        self.flush()
        return path
