"""Analysis cache: violations per (document identity, version).

Bounded, evicts the oldest inserted entry first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberorder.domain.model.violation import Violation

DEFAULT_CAPACITY = 50

CacheKey = tuple[str, int]


@dataclass
class AnalysisCache:
    """Least-recently-inserted cache of analysis results.

    In-memory only, no persistence between runs.
    Not thread-safe: the host serializes calls onto one thread.

    Attributes:
        capacity: Maximum number of entries kept
        _entries: (uri, version) → violations, in insertion order
    """

    capacity: int = DEFAULT_CAPACITY
    _entries: dict[CacheKey, tuple[Violation, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")

    def get(self, uri: str, version: int) -> tuple[Violation, ...] | None:
        """Cached violations, None on miss."""
        return self._entries.get((uri, version))

    def put(self, uri: str, version: int, violations: tuple[Violation, ...]) -> None:
        """Insert violations, evicting the oldest entries over capacity.

        Re-inserting an existing key keeps its original position.
        """
        self._entries[(uri, version)] = violations
        while len(self._entries) > self.capacity:
            oldest = next(iter(self._entries))
            del self._entries[oldest]

    def invalidate(self, uri: str) -> None:
        """Drop every version cached for a document."""
        for key in [key for key in self._entries if key[0] == uri]:
            del self._entries[key]

    def clear(self) -> None:
        """Clear entire cache."""
        self._entries.clear()

    def __len__(self) -> int:
        """Number of cached entries."""
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Check if a (uri, version) key is cached."""
        return key in self._entries
