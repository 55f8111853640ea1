"""Classified class member."""

from dataclasses import dataclass

from memberorder.domain.model.enums import MemberCategory

UNKNOWN_NAME = "unknown"


@dataclass(frozen=True, slots=True)
class Member:
    """Class member found in a body range.

    Attributes:
        name: Member identifier, UNKNOWN_NAME if it could not be extracted
        category: Semantic category
        line: First physical line of the declaration (0-based)
    """

    name: str
    category: MemberCategory
    line: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")

    def __str__(self) -> str:
        """Format as category "name"."""
        return f'{self.category.label} "{self.name}"'
