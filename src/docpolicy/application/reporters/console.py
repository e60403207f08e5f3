"""Console reporter: CheckResult → rich formatted output."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from docpolicy.application.reporters._base import BaseReporter
from docpolicy.application.reporters.strategies import ByDocTypeStrategy, GroupStrategy

if TYPE_CHECKING:
    from docpolicy.domain.model.check_result import CheckResult
    from docpolicy.domain.model.configuration import DocsConfig
    from docpolicy.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        policy: Active policy to show as a table. None = not shown.
        max_violations: Max violations to display. None = unlimited.
        group_by: Strategy for grouping violations. None = ByDocTypeStrategy().
        width: Console width in characters.
    """

    policy: DocsConfig | None = None
    max_violations: int | None = None
    group_by: GroupStrategy | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text."""

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
        """Write rich formatted check result to output.

        Args:
            result: Complete check result
        """
        self.output.write(self.render(result))

    def render(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        buffer = StringIO()
        console = Console(file=buffer, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        if self._config.policy is not None:
            self._render_policy(console, self._config.policy)

        violations = self._limit(result.violations)
        if violations:
            strategy = self._config.group_by or ByDocTypeStrategy()
            strategy.render(console, strategy.group(violations))

        hidden = result.violation_count - len(violations)
        if hidden:
            console.print(f"[dim]... {hidden} more violation(s) not shown[/dim]")
            console.print()

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print("[bold red]FAILED[/bold red]")

        return buffer.getvalue()

    def _limit(self, violations: tuple[Violation, ...]) -> tuple[Violation, ...]:
        if self._config.max_violations is None:
            return violations
        return violations[: self._config.max_violations]

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.print()
        console.rule("[bold]DOCUMENTATION CHECK[/bold]")
        console.print()
        console.print(
            f"[bold]Checked:[/bold] {result.checked_count}  "
            f"[bold]Exempt:[/bold] {result.exempt_count}  "
            f"[bold]Documented:[/bold] {result.documented_count}  "
            f"[bold]Undocumented:[/bold] {result.violation_count} "
            f"(errors: {result.error_count}, warnings: {result.warning_count})"
        )
        console.print()

    def _render_policy(self, console: Console, policy: DocsConfig) -> None:
        table = Table(title="Policy", show_header=True, header_style="bold", box=None)
        table.add_column("Doc type", style="cyan")
        table.add_column("Requires documentation for")

        for doc_type, requirement in sorted(policy.requirements.items(), key=lambda i: i[0].value):
            table.add_row(doc_type.value, requirement.describe())

        console.print(table)
        console.print()
