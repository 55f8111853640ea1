"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from memberorder.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from typing import TextIO

    from memberorder.domain.model.check_result import CheckResult, FileReport
    from memberorder.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration or editors.
    Lines and columns keep the 0-based convention of TextRange.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "file_count": result.file_count,
                "violation_count": result.violation_count,
                "warning_count": result.warning_count,
            },
            "files": [self._file_to_dict(report) for report in result.files],
        }

    def _file_to_dict(self, report: FileReport) -> dict[str, object]:
        """Convert FileReport to dict."""
        return {
            "path": str(report.path),
            "violations": [self._violation_to_dict(v) for v in report.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        """Convert Violation to dict."""
        return {
            "message": violation.message,
            "severity": violation.severity.name,
            "source": violation.source,
            "range": {
                "start_line": violation.span.start_line,
                "start_column": violation.span.start_column,
                "end_line": violation.span.end_line,
                "end_column": violation.span.end_column,
            },
            "member": {
                "name": violation.member.name,
                "category": violation.member.category.label,
            },
            "expected_before": violation.expected_before,
        }
