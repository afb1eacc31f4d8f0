"""
Audit Logger for textops.

Provides append-only logging of every file operation with timestamps,
targets and outcomes for auditing and debugging.
"""

import csv
import io
import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any
from enum import Enum


CSV_FIELDS = ["timestamp", "action_type", "action_description", "target", "status", "result"]


class ActionType(Enum):
    """Types of actions that can be logged."""
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class ActionStatus(Enum):
    """Outcome of an action."""
    EXECUTED = "executed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""
    timestamp: str
    action_type: str
    action_description: str
    target: Optional[str]
    status: str
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        action_description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an audit entry with current timestamp."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            action_description=action_description,
            target=target,
            status=status.value,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        """Convert entry to JSON string."""
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        """Create entry from JSON string."""
        data = json.loads(json_str)
        return cls(**data)


class AuditLogger:
    """
    Append-only audit logger.

    All file operations are logged to a JSONL file, one entry per line.
    """

    def __init__(self, log_path: str = "data/audit_log.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        self.log_path = Path(log_path)
        self._ensure_log_directory()

    def _ensure_log_directory(self) -> None:
        """Create the log directory and file if they don't exist."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.log_path.exists():
            self.log_path.touch()

    def log(self, entry: AuditEntry) -> None:
        """
        Append an audit entry to the log.

        Args:
            entry: The AuditEntry to log
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Convenience method to create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            action_description=description,
            target=target,
            status=status,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def _iter_entries(self):
        """Yield entries in file order, skipping corrupt lines."""
        if not self.log_path.exists():
            return

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield AuditEntry.from_json(line)
                except (json.JSONDecodeError, TypeError):
                    continue

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        entries = list(self._iter_entries())
        return list(reversed(entries[-limit:])) if limit > 0 else []

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """
        Get audit entries filtered by action type, oldest first.
        """
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.action_type == action_type.value:
                entries.append(entry)
        return entries

    def get_failed(self, limit: int = 50) -> List[AuditEntry]:
        """Get actions that failed with an I/O error."""
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.status == ActionStatus.FAILED.value:
                entries.append(entry)
        return entries

    def export(self, format: str = "json", limit: int = 10000) -> str:
        """
        Export the audit log.

        Args:
            format: Export format ("json" or "csv")
            limit: Maximum number of recent entries to include

        Returns:
            String containing the exported data
        """
        entries = self.get_recent(limit=limit)

        if format == "json":
            return json.dumps([asdict(e) for e in entries], indent=2)
        elif format == "csv":
            buffer = io.StringIO()
            writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS, extrasaction="ignore", lineterminator="\n")
            writer.writeheader()
            for e in entries:
                writer.writerow(asdict(e))
            return buffer.getvalue()
        else:
            raise ValueError(f"Unsupported export format: {format}")
