"""
Diagnostic log for CoreOS.

Failed file operations are appended to a JSONL file, tagged with the kind
of operation that failed, and optionally echoed to the console.
"""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any

from rich.console import Console


class OperationKind(Enum):
    """Kinds of operations that can be reported."""
    DELETE = "delete"
    COPY = "copy"
    MOVE = "move"
    OVERWRITE = "overwrite"
    LOOKUP = "lookup"

    @property
    def label(self) -> str:
        """Console label for a failure of this kind."""
        return _KIND_LABELS.get(self, self.value)


# Overwrite failures are reported by their delete or copy step.
_KIND_LABELS = {
    OperationKind.DELETE: "Error Deleting File",
    OperationKind.COPY: "Error Copying File",
    OperationKind.MOVE: "Error moving File",
    OperationKind.LOOKUP: "Error Locating Directory",
}


@dataclass
class DiagnosticEntry:
    """One reported failure."""
    kind: str
    error: str
    source: Optional[str] = None
    destination: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def label(self) -> str:
        return OperationKind(self.kind).label

    @classmethod
    def from_line(cls, line: str) -> Optional["DiagnosticEntry"]:
        """Parse a log line, or None if it isn't a well-formed entry."""
        try:
            return cls(**json.loads(line))
        except (json.JSONDecodeError, TypeError, ValueError):
            return None


class DiagnosticLog:
    """
    Append-only diagnostic sink for CoreOS.

    Reporting never raises for the caller's failure.
    """

    def __init__(
        self,
        log_path: str = "data/diagnostics.jsonl",
        echo: bool = True,
        console: Optional[Console] = None
    ):
        """
        Initialize the diagnostic log.

        Args:
            log_path: Path to the JSONL log file
            echo: Print reported failures to the console
            console: Console to echo to (default: stderr console)
        """
        self.log_path = Path(log_path)
        self.echo = echo
        self.console = console or Console(stderr=True, highlight=False)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_path.touch(exist_ok=True)

    def report(
        self,
        kind: OperationKind,
        error: BaseException,
        source: Optional[str] = None,
        destination: Optional[str] = None
    ) -> DiagnosticEntry:
        """
        Report a failed operation.

        If the log file cannot be written the failure is only echoed.

        Args:
            kind: Kind of operation that failed
            error: Error raised by the operation
            source: Path the operation acted on
            destination: Destination path, for two-path operations

        Returns:
            The DiagnosticEntry describing the failure
        """
        entry = DiagnosticEntry(
            kind=kind.value,
            error=str(error),
            source=source,
            destination=destination
        )

        if self.echo:
            self.console.print(f"CoreOS - {kind.label} - {error}", markup=False)

        try:
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(asdict(entry), ensure_ascii=False) + "\n")
        except OSError as e:
            if self.echo:
                self.console.print(f"CoreOS - Error Writing Log - {e}", markup=False)

        return entry

    def _read_entries(self) -> List[DiagnosticEntry]:
        if not self.log_path.exists():
            return []

        with open(self.log_path, "r", encoding="utf-8") as f:
            parsed = (DiagnosticEntry.from_line(line) for line in f if line.strip())
            return [entry for entry in parsed if entry is not None]

    def get_recent(self, limit: int = 100) -> List[DiagnosticEntry]:
        """
        Get the most recent failures.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of DiagnosticEntry objects, most recent first
        """
        if limit <= 0:
            return []
        return list(reversed(self._read_entries()[-limit:]))

    def get_by_kind(self, kind: OperationKind, limit: int = 100) -> List[DiagnosticEntry]:
        """Get failures of one kind, oldest first."""
        return [e for e in self._read_entries() if e.kind == kind.value][:limit]
