"""
Registration audit - Audit domain models.

Architecture Rules:
- No side effects on import
- No framework-specific imports
- All models are immutable

Usage:
    from regaudit.audit import AuditRecord, EventDescriptor, ModuleDescriptor

    login = EventDescriptor(id="EVT01", name="LOGIN", type="USER")
"""

from regaudit.audit.model import (
    NOT_AVAILABLE,
    AuditRecord,
    EventDescriptor,
    ModuleDescriptor,
)

__all__ = [
    "AuditRecord",
    "EventDescriptor",
    "ModuleDescriptor",
    "NOT_AVAILABLE",
]
