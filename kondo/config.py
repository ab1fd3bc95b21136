"""Loading of the user's configuration file, with environment overrides."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

DEFAULT_CONFIG = """
[kondo]
# Default deadline in days from now.
default_deadline = 7
editor = "vim"
"""

_ENV_PREFIX = "KONDO_"


@dataclass(frozen=True)
class KondoSettings:
    """Settings from the ``[kondo]`` table."""

    default_deadline: str
    editor: str


@dataclass(frozen=True)
class Configuration:
    """The whole configuration."""

    kondo: KondoSettings


def default_config_path(home: Path | str) -> Path:
    """Return the configuration file location below ``home``."""
    return Path(home) / ".config" / "kondo" / "kondo.toml"


def _as_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def load_configuration(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Configuration:
    """Read the configuration, writing the default file first if it is missing.

    Environment variables ``KONDO_<SETTING>`` override values from the file.
    Raises ``ValueError`` when the file cannot be read into a configuration.
    """
    path = Path(config_path) if config_path is not None else default_config_path(Path.home())
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG.strip() + "\n", encoding="utf-8")

    with path.open("rb") as handle:
        data = tomllib.load(handle)

    section = data.get("kondo")
    if not isinstance(section, dict):
        raise ValueError("Couldn't deserialize configuration: missing [kondo] table")

    values = dict(section)
    env = os.environ if environ is None else environ
    names = [field.name for field in fields(KondoSettings)]
    for name in names:
        key = _ENV_PREFIX + name.upper()
        if key in env:
            values[name] = env[key]

    missing = [name for name in names if name not in values]
    if missing:
        raise ValueError(
            "Couldn't deserialize configuration: missing field "
            + ", ".join(repr(name) for name in missing)
        )

    settings = KondoSettings(**{name: _as_text(values[name]) for name in names})
    return Configuration(kondo=settings)