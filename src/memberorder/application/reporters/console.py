"""Console reporter: CheckResult → rich tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from memberorder.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from typing import TextIO

    from memberorder.domain.model.check_result import CheckResult, FileReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_passed: List files without violations in the summary.
        max_violations: Max violations shown per file. None = unlimited.
        width: Console width in characters.
        force_terminal: Emit colors even when output is not a TTY.
    """

    show_passed: bool = False
    max_violations: int | None = None
    width: int = 120
    force_terminal: bool | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 1:
            raise ValueError(f"max_violations must be >= 1, got {self.max_violations}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: one rich table per file with violations."""

    def __init__(
        self,
        output: TextIO | None = None,
        config: ConsoleConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        super().__init__(output)
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> None:
        """Render check results.

        Args:
            result: Complete check result
        """
        console = Console(
            file=self._output,
            width=self._config.width,
            force_terminal=self._config.force_terminal,
        )

        console.print()
        console.rule("[bold]MEMBER ORDER[/bold]")
        console.print()

        for file_report in result.files:
            if file_report.violations:
                self._render_file(console, file_report)
            elif self._config.show_passed:
                console.print(f"[green]✓[/green] {file_report.path}")

        self._render_summary(console, result)

    def _render_file(self, console: Console, file_report: FileReport) -> None:
        """Render violations of one file as a table."""
        table = Table(title=str(file_report.path), title_justify="left", expand=False)
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Member", style="yellow")
        table.add_column("Category")
        table.add_column("Should appear before", style="magenta")

        violations = file_report.violations
        if self._config.max_violations is not None:
            violations = violations[: self._config.max_violations]

        for violation in violations:
            table.add_row(
                str(violation.line + 1),
                violation.member.name,
                violation.member.category.label,
                violation.expected_before,
            )

        console.print(table)

        hidden = len(file_report.violations) - len(violations)
        if hidden > 0:
            console.print(f"[dim]... {hidden} more[/dim]")
        console.print()

    def _render_summary(self, console: Console, result: CheckResult) -> None:
        """Render summary line."""
        if result.passed:
            console.print(f"[bold green]All {result.file_count} file(s) in order[/bold green]")
            return
        console.print(
            f"[bold red]Violations:[/bold red] {result.violation_count} "
            f"in {len(result.failed_files)} of {result.file_count} file(s)"
        )
