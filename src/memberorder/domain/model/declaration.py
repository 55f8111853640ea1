"""Logical declaration produced by the reassembler."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Declaration:
    """One logical declaration folded from one or more physical lines.

    Attributes:
        text: Joined declaration text (physical lines joined by a single space)
        attributed: True if a serialization attribute decorates it
        line: First physical line (0-based)
        line_count: Physical lines consumed, including the first
    """

    text: str
    attributed: bool
    line: int
    line_count: int = 1

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.line_count < 1:
            raise ValueError(f"line_count must be >= 1, got {self.line_count}")
