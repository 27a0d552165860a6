"""
Configuration source port.

The emitter reads a fixed set of static values. Adapters may back them
with YAML files, environment variables or plain dictionaries.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class ConfigKey(str, Enum):
    """Configuration keys recognized by the audit emitter."""

    APPLICATION_ID = "application-id"
    APPLICATION_NAME = "application-name"
    FALLBACK_HOST_IP = "fallback-host-ip"
    FALLBACK_HOST_NAME = "fallback-host-name"


@runtime_checkable
class ConfigSource(Protocol):
    """Protocol for read-only static configuration lookups."""

    def get(self, key: ConfigKey | str) -> str | None:
        """
        Look up a configuration value.

        Args:
            key: A ConfigKey member or its string value.

        Returns:
            The configured value, or None if it is not set.
        """
        ...
