"""
Identifier generation for store records.
Record ids come from a per-store counter. Receipt numbers keep the printed
format: fixed prefix + last 6 digits of the millisecond clock.
"""

import time
from typing import Callable, Iterable, Optional, Set

RECEIPT_SUFFIX_DIGITS = 6
_SUFFIX_SPACE = 10 ** RECEIPT_SUFFIX_DIGITS


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """Monotonic string ids; never reissues a value for the lifetime of the generator."""

    def __init__(self, start: int = 0) -> None:
        self._next = start + 1

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        return str(value)

    def advance_past(self, values: Iterable[str]) -> None:
        """Skip over numeric ids already in use (e.g. seeded records)."""
        numeric = [int(v) for v in values if v.isascii() and v.isdigit()]
        if not numeric:
            return
        # Only moves forward: ids of deleted records are never handed out again.
        self._next = max(self._next, max(numeric) + 1)


class ReceiptNumberGenerator:
    """
    Generate receipt numbers such as RCP483920.

    Rules:
    - Prefix (default RCP).
    - Last 6 digits of the current millisecond timestamp.
    - If that number was already issued, the suffix moves forward until a free one is found.

    Examples:
        1718000483920 ms -> RCP483920
        same ms again    -> RCP483921
    """

    def __init__(self, prefix: str = "RCP", clock: Optional[Callable[[], int]] = None) -> None:
        self.prefix = prefix
        self._clock = clock or _clock_ms
        self._issued: Set[str] = set()

    def reserve(self, receipt_number: str) -> None:
        self._issued.add(receipt_number)

    def next_receipt_number(self) -> str:
        suffix = self._clock() % _SUFFIX_SPACE
        for _ in range(_SUFFIX_SPACE):
            candidate = f"{self.prefix}{suffix:0{RECEIPT_SUFFIX_DIGITS}d}"
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
            suffix = (suffix + 1) % _SUFFIX_SPACE
        raise RuntimeError(f"All {_SUFFIX_SPACE} receipt numbers for prefix {self.prefix!r} are in use")
