"""Missing documentation violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docpolicy.domain.model.enums import DocType, Severity
    from docpolicy.domain.model.source_span import SourceSpan


@dataclass(frozen=True, slots=True)
class Violation:
    """Declaration required to be documented but lacking a docstring.

    Attributes:
        doc_type: Documentation category of the subject
        subject: Qualified name of the undocumented declaration
        span: Source position
        severity: ERROR/WARNING
        message: Human-readable message
    """

    doc_type: DocType
    subject: str
    span: SourceSpan
    severity: Severity
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format violation for display."""
        return f"[{self.severity.name}] {self.span}: {self.message}"
