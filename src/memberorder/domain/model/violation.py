"""Member order violation entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from memberorder.domain.model.enums import Severity
from memberorder.domain.model.member import Member
from memberorder.domain.model.text_range import TextRange

SOURCE_TAG = "memberorder"


@dataclass(frozen=True, slots=True)
class Violation:
    """Out-of-order member.

    Attributes:
        message: Human-readable message
        span: Whole declaration line of the offending member
        member: The member that appears too late
        expected_before: Label of the category it should precede
        severity: Always WARNING for order violations
        source: Fixed tag identifying the producer
    """

    message: str
    span: TextRange
    member: Member
    expected_before: str
    severity: Severity = Severity.WARNING
    source: str = field(default=SOURCE_TAG)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if self.span.start_line != self.member.line:
            raise ValueError(
                f"span starts at line {self.span.start_line}, "
                f"member is declared at line {self.member.line}"
            )
        if not self.source:
            raise ValueError("source must not be empty")

    @classmethod
    def out_of_order(cls, member: Member, expected_before: str, lines: list[str]) -> Violation:
        """Build the violation for a member found after a later category."""
        return cls(
            message=(
                f"Order violation: {member.category.label} \"{member.name}\" "
                f"should appear before {expected_before}"
            ),
            span=TextRange.whole_line(member.line, lines),
            member=member,
            expected_before=expected_before,
        )

    @property
    def line(self) -> int:
        """Declaration line (0-based)."""
        return self.span.start_line

    def __str__(self) -> str:
        """Format violation for display."""
        return f"{self.span} [{self.severity.name}] {self.message} ({self.source})"
