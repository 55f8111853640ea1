"""Class body range value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BodyRange:
    """Line span of a class-like body.

    Both ends inclusive and 0-based: start_line holds the opening brace,
    end_line holds the matching closing brace.

    Attributes:
        start_line: Line of the opening brace (>= 0)
        end_line: Line of the closing brace (>= start_line)
    """

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start_line < 0:
            raise ValueError(f"start_line must be >= 0, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
