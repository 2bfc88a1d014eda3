"""
History Ledger - the ten most recent conversions, newest first.
"""

import threading
from typing import Iterator, List, Tuple

from .models import ConversionResult

HISTORY_CAPACITY = 10
EXPORT_SEPARATOR = "-" * 22

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_timestamp(moment) -> str:
    """Medium date, short time: "Oct 18, 2026 at 4:29 PM"."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    month = MONTHS[moment.month - 1]
    return f"{month} {moment.day}, {moment.year} at {hour}:{moment.minute:02d} {meridiem}"


def format_entry(result: ConversionResult) -> str:
    return (
        f"Format: {result.scheme.display_name}\n"
        f"Input: {result.input}\n"
        f"Output: {result.output}\n"
        f"Date: {format_timestamp(result.timestamp)}\n"
        f"{EXPORT_SEPARATOR}"
    )


class HistoryLedger:
    """
    Bounded most-recent-first buffer of ConversionResult.

    All access goes through one lock so the ledger can be shared between
    threads.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: List[ConversionResult] = []
        self._lock = threading.Lock()

    def record(self, result: ConversionResult):
        """Insert at the front, dropping the oldest entry beyond capacity."""
        with self._lock:
            self._entries.insert(0, result)
            if len(self._entries) > self.capacity:
                self._entries.pop()

    def entries(self) -> Tuple[ConversionResult, ...]:
        with self._lock:
            return tuple(self._entries)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def export(self) -> str:
        """Plain-text report, one four-line block per entry, newest first."""
        return "\n".join(format_entry(result) for result in self.entries())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __getitem__(self, index: int) -> ConversionResult:
        with self._lock:
            return self._entries[index]

    def __iter__(self) -> Iterator[ConversionResult]:
        return iter(self.entries())
