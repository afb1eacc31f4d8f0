# textops - Core Module
"""
Core infrastructure for textops.
Settings and audit logging shared by the file operations and the CLI.
"""

from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus
from .settings import Settings

__all__ = [
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "Settings",
]

__version__ = "0.1.0"
