"""JSON reporter for machine-readable output.

One JSON document per report, keys stable for CI tooling.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from docpolicy.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from docpolicy.domain.model.check_result import CheckResult
    from docpolicy.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
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
        json.dump(data, self.output, indent=self._indent)
        self.output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "checked_count": result.checked_count,
                "exempt_count": result.exempt_count,
                "documented_count": result.documented_count,
                "violation_count": result.violation_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        """Convert Violation to JSON-serializable dict."""
        return {
            "doc_type": violation.doc_type.value,
            "subject": violation.subject,
            "severity": violation.severity.name,
            "message": violation.message,
            "location": {
                "file": str(violation.span.file),
                "line": violation.span.line,
                "column": violation.span.column,
            },
        }
