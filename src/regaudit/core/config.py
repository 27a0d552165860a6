"""
Audit configuration management.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from regaudit.ports.config import ConfigKey
from regaudit.ports.errors import ConfigError

DEFAULT_SINK_PATH = ".regaudit/audit.jsonl"

# Environment variable -> AuditConfig attribute
ENV_OVERRIDES: dict[str, str] = {
    "REGAUDIT_APPLICATION_ID": "application_id",
    "REGAUDIT_APPLICATION_NAME": "application_name",
    "REGAUDIT_FALLBACK_HOST_IP": "fallback_host_ip",
    "REGAUDIT_FALLBACK_HOST_NAME": "fallback_host_name",
    "REGAUDIT_SINK_BACKEND": "sink_backend",
    "REGAUDIT_SINK_PATH": "sink_path",
}

_KEY_ATTRIBUTES: dict[ConfigKey, str] = {
    ConfigKey.APPLICATION_ID: "application_id",
    ConfigKey.APPLICATION_NAME: "application_name",
    ConfigKey.FALLBACK_HOST_IP: "fallback_host_ip",
    ConfigKey.FALLBACK_HOST_NAME: "fallback_host_name",
}


def _str(value: Any) -> str | None:
    return None if value is None else str(value)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping", code="invalid_layout")
    return section


def _as_key(key: ConfigKey | str) -> ConfigKey | None:
    try:
        return ConfigKey(key)
    except ValueError:
        return None


@dataclass
class AuditConfig:
    """
    Complete audit configuration.

    Loaded from .regaudit/config.yaml and REGAUDIT_* environment
    variables. Implements the ConfigSource port.
    """

    # Application identity stamped on every record
    application_id: str | None = None
    application_name: str | None = None

    # Used only when the local host cannot be resolved
    fallback_host_ip: str | None = None
    fallback_host_name: str | None = None

    # Sink selection: jsonl, log, memory
    sink_backend: str = "jsonl"
    sink_path: str = DEFAULT_SINK_PATH

    def get(self, key: ConfigKey | str) -> str | None:
        """Look up a value by ConfigKey; unknown keys return None."""
        config_key = _as_key(key)
        if config_key is None:
            return None
        return getattr(self, _KEY_ATTRIBUTES[config_key])

    @classmethod
    def from_file(cls, path: Path) -> "AuditConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}", code="invalid_yaml") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}", code="unreadable") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {path}", code="invalid_layout")

        root = data.get("regaudit", data)
        if root is None:
            root = {}
        if not isinstance(root, dict):
            raise ConfigError(f"Expected a mapping under 'regaudit' in {path}", code="invalid_layout")

        return cls.from_dict(root)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuditConfig":
        """
        Create config from dictionary.

        Raises:
            ConfigError: If a section is not a mapping.
        """
        config = cls()

        if "application" in data:
            a = _section(data, "application")
            config.application_id = _str(a.get("id"))
            config.application_name = _str(a.get("name"))

        if "host" in data:
            h = _section(data, "host")
            config.fallback_host_ip = _str(h.get("fallback_ip"))
            config.fallback_host_name = _str(h.get("fallback_name"))

        if "sink" in data:
            s = _section(data, "sink")
            config.sink_backend = _str(s.get("backend")) or "jsonl"
            config.sink_path = _str(s.get("path")) or DEFAULT_SINK_PATH

        return config

    def with_env(self, environ: Mapping[str, str] | None = None) -> "AuditConfig":
        """Return a copy with REGAUDIT_* environment variables applied."""
        if environ is None:
            environ = os.environ

        values = self._values()
        for var, attribute in ENV_OVERRIDES.items():
            if var in environ:
                values[attribute] = environ[var]
        return AuditConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "regaudit": {
                "application": {
                    "id": self.application_id,
                    "name": self.application_name,
                },
                "host": {
                    "fallback_ip": self.fallback_host_ip,
                    "fallback_name": self.fallback_host_name,
                },
                "sink": {
                    "backend": self.sink_backend,
                    "path": self.sink_path,
                },
            }
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    def _values(self) -> dict[str, Any]:
        return {
            "application_id": self.application_id,
            "application_name": self.application_name,
            "fallback_host_ip": self.fallback_host_ip,
            "fallback_host_name": self.fallback_host_name,
            "sink_backend": self.sink_backend,
            "sink_path": self.sink_path,
        }


class MappingConfigSource:
    """ConfigSource backed by a plain mapping of key strings to values."""

    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: ConfigKey | str) -> str | None:
        config_key = _as_key(key)
        if config_key is None:
            return None
        return self._values.get(config_key.value)


def config_path(project_path: Path | None = None) -> Path:
    """Location of the project's audit config file."""
    if project_path is None:
        project_path = Path.cwd()
    return project_path / ".regaudit" / "config.yaml"


def load_config(
    project_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AuditConfig:
    """
    Load audit configuration.

    Reads .regaudit/config.yaml in the project directory, falling back
    to defaults if not found, then applies environment overrides.

    Raises:
        ConfigError: If the config file exists but cannot be parsed.
    """
    return AuditConfig.from_file(config_path(project_path)).with_env(environ)
