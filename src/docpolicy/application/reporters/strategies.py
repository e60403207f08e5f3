"""Group strategies for console reporter.

GroupStrategy Protocol defines interface for grouping and rendering violations.
Built-in strategies: ByFileStrategy, ByDocTypeStrategy.
User can implement custom strategies with same Protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rich.table import Table

from docpolicy.domain.model.enums import DocType, Severity

if TYPE_CHECKING:
    from rich.console import Console

    from docpolicy.domain.model.source_span import SourceSpan
    from docpolicy.domain.model.violation import Violation


class GroupStrategy(Protocol):
    """Protocol for violation grouping and rendering.

    Built-in strategies are NOT special - same interface, same status.
    """

    def group(self, violations: tuple[Violation, ...]) -> dict[str, list[Violation]]:
        """Group violations by strategy-specific key.

        Args:
            violations: Violations to group.

        Returns:
            Dict mapping group key to list of violations.
        """
        ...

    def render(self, console: Console, grouped: dict[str, list[Violation]]) -> None:
        """Render grouped violations to console.

        Args:
            console: Rich console for output.
            grouped: Violations grouped by key.
        """
        ...


def format_span_short(span: SourceSpan) -> str:
    """Format span as short string: file:line."""
    return f"{span.file.name}:{span.line}"


def severity_style(severity: Severity) -> str:
    """Rich style for a severity."""
    match severity:
        case Severity.ERROR:
            return "red"
        case Severity.WARNING:
            return "yellow"


@dataclass(frozen=True, slots=True)
class ByFileStrategy:
    """Group violations by source file."""

    def group(self, violations: tuple[Violation, ...]) -> dict[str, list[Violation]]:
        """Group violations by file path."""
        by_file: dict[str, list[Violation]] = {}
        for violation in violations:
            by_file.setdefault(str(violation.span.file), []).append(violation)
        return by_file

    def render(self, console: Console, grouped: dict[str, list[Violation]]) -> None:
        """Render violations grouped by file."""
        for file_path, violations in sorted(grouped.items()):
            console.print(f"[bold]{file_path}[/bold]")
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("line", style="dim")
            table.add_column("type", style="cyan")
            table.add_column("subject")

            for violation in sorted(violations, key=lambda v: v.span.line):
                style = severity_style(violation.severity)
                table.add_row(
                    f":{violation.span.line}",
                    violation.doc_type.value,
                    f"[{style}]{violation.subject}[/{style}]",
                )

            console.print(table)
            console.print()


@dataclass(frozen=True, slots=True)
class ByDocTypeStrategy:
    """Group violations by doc type (classes, methods, ...).

    Attributes:
        show_severity: Show severity column.
    """

    show_severity: bool = True

    def group(self, violations: tuple[Violation, ...]) -> dict[str, list[Violation]]:
        """Group violations by doc type."""
        by_type: dict[str, list[Violation]] = {}
        for violation in violations:
            by_type.setdefault(violation.doc_type.value, []).append(violation)
        return by_type

    def render(self, console: Console, grouped: dict[str, list[Violation]]) -> None:
        """Render violations grouped by doc type with tables."""
        for doc_type in DocType:
            violations = grouped.get(doc_type.value, [])
            if not violations:
                continue

            console.print(f"[bold]{doc_type.value.upper()}[/bold] ({len(violations)})")
            table = Table(show_header=True, header_style="bold", box=None)
            table.add_column("Location", style="cyan")
            table.add_column("Subject")
            if self.show_severity:
                table.add_column("Severity")

            for violation in violations:
                row = [format_span_short(violation.span), violation.subject]
                if self.show_severity:
                    style = severity_style(violation.severity)
                    row.append(f"[{style}]{violation.severity.name}[/{style}]")
                table.add_row(*row)

            console.print(table)
            console.print()
