"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from docpolicy.domain.model.enums import Severity
from docpolicy.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a documentation check.

    Attributes:
        violations: All violations found
        checked_count: Declarations whose doc type is configured
        exempt_count: Checked declarations exempted by policy
    """

    violations: tuple[Violation, ...]
    checked_count: int
    exempt_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.checked_count < 0:
            raise ValueError(f"checked_count must be >= 0, got {self.checked_count}")
        if self.exempt_count < 0:
            raise ValueError(f"exempt_count must be >= 0, got {self.exempt_count}")
        if self.exempt_count + len(self.violations) > self.checked_count:
            raise ValueError("exempt_count + violations must not exceed checked_count")

    @property
    def passed(self) -> bool:
        """True if no ERROR violations were found."""
        return self.error_count == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity violations."""
        return sum(1 for v in self.violations if v.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity violations."""
        return sum(1 for v in self.violations if v.severity is Severity.WARNING)

    @property
    def documented_count(self) -> int:
        """Required declarations that carry documentation."""
        return self.checked_count - self.exempt_count - self.violation_count

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, nothing checked)."""
        return cls(violations=(), checked_count=0)
