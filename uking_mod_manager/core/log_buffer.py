"""Append-only activity log."""
import threading
from typing import Any, List, Tuple


class ActivityLog:
    """Ordered store of log records fed by the host log channel.

    Records are kept verbatim and never removed or reordered.
    """

    def __init__(self):
        self._records: List[Any] = []
        self._lock = threading.Lock()

    def append(self, record: Any) -> None:
        """Add a record to the end of the log."""
        with self._lock:
            self._records.append(record)

    def records(self) -> Tuple[Any, ...]:
        """Return a snapshot of all records."""
        with self._lock:
            return tuple(self._records)

    def since(self, index: int) -> Tuple[Any, ...]:
        """Return the records appended after the first `index` ones."""
        with self._lock:
            return tuple(self._records[max(index, 0):])

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
