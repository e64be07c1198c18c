"""Service configuration read from an INI file."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG_DIR = "/etc/numbered-mutation-xml/"
CONFIG_FILENAME = "config.ini"


@dataclass
class MusicXMLConfig:
    path: str = ""
    file_prefix: str = ""


@dataclass
class WebServerConfig:
    port: str = ""


@dataclass
class SQLiteConfig:
    db_path: str = ""


@dataclass
class Config:
    webserver: WebServerConfig = field(default_factory=WebServerConfig)
    musicxml: MusicXMLConfig = field(default_factory=MusicXMLConfig)
    sqlite: SQLiteConfig = field(default_factory=SQLiteConfig)


_SECTIONS: dict[str, tuple[type, dict[str, str]]] = {
    "webserver": (WebServerConfig, {"port": "port"}),
    "musicxml": (MusicXMLConfig, {"path": "path", "fileprefix": "file_prefix"}),
    "sqlite": (SQLiteConfig, {"dbpath": "db_path"}),
}


def _normalize(name: str) -> str:
    return name.replace("-", "").replace("_", "").lower()


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def load_config(path: str | Path = DEFAULT_CONFIG_DIR) -> Config:
    """Read the configuration from ``path``, a file or a directory holding ``config.ini``."""
    target = Path(path)
    if target.is_dir():
        target = target / CONFIG_FILENAME

    parser = configparser.ConfigParser(interpolation=None)
    try:
        with target.open(encoding="utf-8") as handle:
            parser.read_file(handle)
    except configparser.Error as exc:
        raise ValueError(f"invalid configuration in {target}: {exc}") from exc

    if parser.defaults():
        raise ValueError("invalid section: DEFAULT")

    sections: dict[str, object] = {}
    for section in parser.sections():
        key = _normalize(section)
        if key not in _SECTIONS:
            raise ValueError(f"invalid section: {section}")
        kind, variables = _SECTIONS[key]
        values: dict[str, str] = {}
        for name, value in parser.items(section, raw=True):
            attribute = variables.get(_normalize(name))
            if attribute is None:
                raise ValueError(f"invalid variable: {section}.{name}")
            values[attribute] = _unquote(value)
        sections[key] = kind(**values)

    return Config(**sections)