"""Tests for application/reporters/plain_text.py."""

from io import StringIO

from docpolicy.application.reporters.plain_text import PlainTextReporter
from docpolicy.domain.model.check_result import CheckResult
from docpolicy.domain.model.enums import Severity
from tests.factories import make_violation


def _render(result: CheckResult) -> list[str]:
    output = StringIO()
    PlainTextReporter(output).report(result)
    return output.getvalue().splitlines()


class TestPlainTextReporter:
    """Tests for PlainTextReporter output."""

    def test_passed(self) -> None:
        lines = _render(CheckResult(violations=(), checked_count=3))
        assert lines == [
            "Documentation check: 3 checked, 0 exempt, 3 documented, 0 undocumented",
            "",
            "PASSED: 0 error(s), 0 warning(s)",
        ]

    def test_failed_groups_by_file(self) -> None:
        violations = (
            make_violation(subject="b.run", file="b.py", line=9),
            make_violation(subject="a.stop", file="a.py", line=7, severity=Severity.WARNING),
            make_violation(subject="a.run", file="a.py", line=2),
        )
        result = CheckResult(violations=violations, checked_count=5, exempt_count=1)

        lines = _render(result)

        assert lines[0] == "Documentation check: 5 checked, 1 exempt, 1 documented, 3 undocumented"
        assert lines[1:] == [
            "",
            "a.py",
            "  2:0   error    Documentation must exist for function 'a.run'",
            "  7:0   warning  Documentation must exist for function 'a.stop'",
            "",
            "b.py",
            "  9:0   error    Documentation must exist for function 'b.run'",
            "",
            "FAILED: 2 error(s), 1 warning(s)",
        ]

    def test_warnings_only_pass(self) -> None:
        result = CheckResult(
            violations=(make_violation(severity=Severity.WARNING),), checked_count=1
        )
        assert _render(result)[-1] == "PASSED: 0 error(s), 1 warning(s)"
