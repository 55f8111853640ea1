"""Plain text reporter using print().

Stdlib-only reporter, one "path:line:column: message" line per violation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberorder.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult, FileReport


class PlainTextReporter(BaseReporter):
    """Plain text reporter in compiler-diagnostic format.

    Line and column numbers are 1-based.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for file_report in result.failed_files:
            self._report_file(file_report)
        self._report_summary(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_file(self, file_report: FileReport) -> None:
        """Print violations of one file."""
        for violation in file_report.violations:
            self._write(
                f"{file_report.path}:{violation.span}: "
                f"{violation.severity.name.lower()}: {violation.message} [{violation.source}]"
            )

    def _report_summary(self, result: CheckResult) -> None:
        """Print summary line."""
        if result.passed:
            self._write(f"All {result.file_count} file(s) in order.")
            return
        self._write(
            f"Found {result.violation_count} violation(s) "
            f"in {len(result.failed_files)} of {result.file_count} file(s)."
        )
