"""Text range value object."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_END_COLUMN = 200


@dataclass(frozen=True, slots=True)
class TextRange:
    """Span inside a document, 0-based lines and columns.

    Attributes:
        start_line: First line (>= 0)
        start_column: First column (>= 0)
        end_line: Last line (>= start_line)
        end_column: Column after the last character (>= 0)
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start_line < 0:
            raise ValueError(f"start_line must be >= 0, got {self.start_line}")
        if self.start_column < 0:
            raise ValueError(f"start_column must be >= 0, got {self.start_column}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
        if self.end_column < 0:
            raise ValueError(f"end_column must be >= 0, got {self.end_column}")

    @classmethod
    def whole_line(cls, line: int, lines: list[str]) -> TextRange:
        """Range covering one line from column 0 to its end.

        Falls back to DEFAULT_END_COLUMN when the line is not in lines.
        """
        end_column = len(lines[line]) if 0 <= line < len(lines) else DEFAULT_END_COLUMN
        return cls(start_line=line, start_column=0, end_line=line, end_column=end_column)

    def __str__(self) -> str:
        """Format as 1-based line:column."""
        return f"{self.start_line + 1}:{self.start_column + 1}"
