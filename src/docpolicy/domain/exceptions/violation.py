"""Missing documentation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpolicy.domain.exceptions.base import DocPolicyError

if TYPE_CHECKING:
    from docpolicy.domain.model.violation import Violation


class UndocumentedError(DocPolicyError):
    """Required documentation is missing.

    Raised by assert_documented() when violations found.

    Attributes:
        violations: All found violations
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("UndocumentedError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} undocumented declaration(s):"]
        for v in violations:
            msg_parts.append(str(v))

        super().__init__("\n".join(msg_parts))
