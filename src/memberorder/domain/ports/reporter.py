"""Reporter protocol for output formatting.

Users extend memberorder by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from memberorder.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    memberorder provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class CountReporter:
            def report(self, result: CheckResult) -> None:
                print(f"Violations: {result.violation_count}")
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with one report per file
        """
        ...
