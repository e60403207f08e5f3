"""Plain text reporter in compiler-diagnostic layout.

Violations are grouped under their file, one ``line:column`` row each,
so the output reads like linter output in CI logs:

    Documentation check: 5 checked, 1 exempt, 2 documented, 2 undocumented

    src/shop/models.py
      12:4  error    Documentation must exist for method 'shop.models.Order.total'

    FAILED: 1 error(s), 0 warning(s)
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING

from docpolicy.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from docpolicy.domain.model.check_result import CheckResult
    from docpolicy.domain.model.violation import Violation


class PlainTextReporter(BaseReporter):
    """Uncolored text reporter, stdlib only."""

    def report(self, result: CheckResult) -> None:
        """Write summary, per-file violations and verdict."""
        self._write(_summary_line(result))

        for file, violations in _by_file(result.violations):
            self._write()
            self._write(str(file))
            for violation in violations:
                self._write(_violation_line(violation))

        self._write()
        self._write(_verdict_line(result))

    def _write(self, text: str = "") -> None:
        print(text, file=self.output)


def _summary_line(result: CheckResult) -> str:
    return (
        f"Documentation check: {result.checked_count} checked, "
        f"{result.exempt_count} exempt, "
        f"{result.documented_count} documented, "
        f"{result.violation_count} undocumented"
    )


def _by_file(violations: tuple[Violation, ...]) -> Iterator[tuple[Path, list[Violation]]]:
    """Group violations by file, files sorted, rows by position."""
    ordered = sorted(violations, key=lambda v: (str(v.span.file), v.span.line, v.span.column))
    for file, group in groupby(ordered, key=lambda v: v.span.file):
        yield file, list(group)


def _violation_line(violation: Violation) -> str:
    position = f"{violation.span.line}:{violation.span.column}"
    return f"  {position:<6}{violation.severity.name.lower():<9}{violation.message}"


def _verdict_line(result: CheckResult) -> str:
    status = "PASSED" if result.passed else "FAILED"
    return f"{status}: {result.error_count} error(s), {result.warning_count} warning(s)"
