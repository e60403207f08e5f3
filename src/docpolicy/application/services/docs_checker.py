"""Main facade for documentation checking.

DocsChecker applies a DocsConfig to collected declarations: exclusions
decide which declarations must be documented, the docstring flag set by
the collector decides which of those are violations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from docpolicy.domain.exclusions.block import BlockExclusion
from docpolicy.domain.exclusions.member import MemberExclusion
from docpolicy.domain.model.check_result import CheckResult
from docpolicy.domain.model.enums import DocType, MemberCategory
from docpolicy.domain.model.violation import Violation

if TYPE_CHECKING:
    from docpolicy.domain.model.configuration import DocsConfig
    from docpolicy.domain.model.declaration import Declaration
    from docpolicy.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

_DOC_TYPE_LABELS: dict[DocType, str] = {
    DocType.CLASSES: "class",
    DocType.ENUMS: "enum",
    DocType.ENUM_MEMBERS: "enum member",
    DocType.FUNCTIONS: "function",
    DocType.INTERFACES: "protocol",
    DocType.METHODS: "method",
    DocType.PROPERTIES: "property",
    DocType.VARIABLES: "variable",
}


class DocsChecker:
    """Checks declarations against a documentation policy.

    Exclusions are built once per configuration, one per (doc type,
    category) pair, and shared by every check() call.

    Example:
        declarations = ASTSourceParser(root).parse_directory(root)
        result = DocsChecker(config).check(declarations)
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        config: DocsConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            config: Documentation policy
            reporter: Optional reporter for output

        Raises:
            TypeError: If config is None (FAIL-FIRST)
        """
        if config is None:
            raise TypeError("config must not be None")

        self._config = config
        self._reporter = reporter
        self._member_exclusions: dict[tuple[DocType, MemberCategory], MemberExclusion] = {}
        self._block_exclusions: dict[DocType, BlockExclusion] = {}

        for doc_type, requirement in config.requirements.items():
            if requirement.member is not None:
                for category in MemberCategory:
                    self._member_exclusions[(doc_type, category)] = MemberExclusion(
                        requirement.member, category
                    )
            if requirement.block is not None:
                self._block_exclusions[doc_type] = BlockExclusion(requirement.block)

    @property
    def config(self) -> DocsConfig:
        """Documentation policy in use."""
        return self._config

    def check(self, declarations: Iterable[Declaration]) -> CheckResult:
        """Check declarations and report results.

        Args:
            declarations: Collected declarations

        Returns:
            CheckResult with violations for undocumented required declarations
        """
        violations: list[Violation] = []
        checked_count = 0
        exempt_count = 0

        for declaration in declarations:
            if self._config.requirement_for(declaration.doc_type) is None:
                continue

            checked_count += 1

            if self.is_exempt(declaration):
                exempt_count += 1
                logger.debug("Exempt: %s", declaration.qualified_name)
                continue

            if not declaration.has_docstring:
                violations.append(self._make_violation(declaration))

        result = CheckResult(
            violations=tuple(violations),
            checked_count=checked_count,
            exempt_count=exempt_count,
        )

        logger.info(
            "Checked %d declarations: %d exempt, %d undocumented",
            checked_count,
            exempt_count,
            result.violation_count,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def is_exempt(self, declaration: Declaration) -> bool:
        """Check if declaration is exempt under the configured policy.

        Declarations of unconfigured doc types are exempt.

        Args:
            declaration: Declaration to evaluate

        Returns:
            True if no documentation is required
        """
        requirement = self._config.requirement_for(declaration.doc_type)
        if requirement is None:
            return True

        if declaration.member is not None and declaration.category is not None:
            exclusion = self._member_exclusions.get((declaration.doc_type, declaration.category))
            if exclusion is None:
                return False
            return exclusion.excludes(declaration.member)

        if declaration.block is not None:
            block_exclusion = self._block_exclusions.get(declaration.doc_type)
            if block_exclusion is None:
                return False
            return block_exclusion.excludes(declaration.block)

        return False

    def _make_violation(self, declaration: Declaration) -> Violation:
        label = _DOC_TYPE_LABELS[declaration.doc_type]
        return Violation(
            doc_type=declaration.doc_type,
            subject=declaration.qualified_name,
            span=declaration.span,
            severity=self._config.severity,
            message=f"Documentation must exist for {label} '{declaration.qualified_name}'",
        )
