"""
Audit configuration.
"""

from regaudit.core.config import (
    AuditConfig,
    MappingConfigSource,
    config_path,
    load_config,
)

__all__ = [
    "AuditConfig",
    "MappingConfigSource",
    "config_path",
    "load_config",
]
