"""Check result aggregate for a batch of files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from memberorder.domain.model.enums import Severity

if TYPE_CHECKING:
    from pathlib import Path

    from memberorder.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class FileReport:
    """Violations found in one file.

    Attributes:
        path: Analysed file
        violations: Violations in line order of discovery
    """

    path: Path
    violations: tuple[Violation, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")

    @property
    def passed(self) -> bool:
        """Check if file has no violations."""
        return not self.violations


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking a batch of files.

    Immutable aggregate used by reporters.

    Attributes:
        files: One report per analysed file, in analysis order
    """

    files: tuple[FileReport, ...]

    @property
    def passed(self) -> bool:
        """Check if no file has violations."""
        return all(report.passed for report in self.files)

    @property
    def file_count(self) -> int:
        """Number of analysed files."""
        return len(self.files)

    @property
    def violation_count(self) -> int:
        """Number of violations across all files."""
        return sum(len(report.violations) for report in self.files)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity violations."""
        return sum(
            1
            for report in self.files
            for violation in report.violations
            if violation.severity == Severity.WARNING
        )

    @property
    def failed_files(self) -> tuple[FileReport, ...]:
        """Reports with at least one violation."""
        return tuple(report for report in self.files if not report.passed)
