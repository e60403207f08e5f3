"""Fluent entry point for documentation checks.

Example:
    policy = DocPolicy.from_path(Path("src/myapp"), load_config(Path("pyproject.toml")))
    policy.only(DocType.METHODS, DocType.PROPERTIES).assert_documented()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docpolicy.application.services.docs_checker import DocsChecker
from docpolicy.domain.exceptions.violation import UndocumentedError
from docpolicy.domain.model.configuration import DocsConfig
from docpolicy.infrastructure.adapters.ast_parser import ASTSourceParser
from docpolicy.infrastructure.analyzers.base import find_module_root

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from docpolicy.domain.model.check_result import CheckResult
    from docpolicy.domain.model.declaration import Declaration
    from docpolicy.domain.model.enums import DocType
    from docpolicy.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class DocPolicy:
    """Immutable query over collected declarations.

    Filters narrow the declarations before checking; every filter returns
    a new DocPolicy.

    Attributes:
        declarations: Collected declarations
        config: Documentation policy
    """

    declarations: tuple[Declaration, ...]
    config: DocsConfig
    _filters: tuple[Callable[[Declaration], bool], ...] = ()

    @classmethod
    def from_path(cls, path: Path, config: DocsConfig | None = None) -> DocPolicy:
        """Collect declarations under a source directory or from one file.

        Args:
            path: Source root, package directory or single .py file.
                Module names start at the nearest non-package ancestor.
            config: Documentation policy (default: DocsConfig.default())

        Returns:
            DocPolicy over all collected declarations

        Raises:
            ParsingError: If any file cannot be parsed
        """
        parser = ASTSourceParser(root_path=find_module_root(path))
        if path.is_file():
            declarations = parser.parse_file(path)
        else:
            declarations = parser.parse_directory(path)
        return cls(declarations=declarations, config=config or DocsConfig.default())

    def only(self, *doc_types: DocType) -> DocPolicy:
        """Keep declarations of the given doc types."""
        if not doc_types:
            raise ValueError("at least one doc type required")
        wanted = frozenset(doc_types)
        return self._with_filter(lambda d: d.doc_type in wanted)

    def in_module(self, prefix: str) -> DocPolicy:
        """Keep declarations whose qualified name is under a module prefix."""
        if not prefix:
            raise ValueError("prefix must not be empty")
        return self._with_filter(
            lambda d: d.qualified_name == prefix or d.qualified_name.startswith(f"{prefix}.")
        )

    def that(self, predicate: Callable[[Declaration], bool]) -> DocPolicy:
        """Keep declarations matching a custom predicate."""
        return self._with_filter(predicate)

    def selected(self) -> tuple[Declaration, ...]:
        """Declarations passing every filter."""
        return tuple(d for d in self.declarations if all(f(d) for f in self._filters))

    def result(self) -> CheckResult:
        """Check selected declarations."""
        return DocsChecker(self.config).check(self.selected())

    def violations(self) -> tuple[Violation, ...]:
        """Violations of selected declarations."""
        return self.result().violations

    def assert_documented(self) -> None:
        """Fail if any ERROR violation is found.

        Raises:
            UndocumentedError: If check did not pass
        """
        result = self.result()
        if not result.passed:
            raise UndocumentedError(result.violations)

    def _with_filter(self, predicate: Callable[[Declaration], bool]) -> DocPolicy:
        return DocPolicy(
            declarations=self.declarations,
            config=self.config,
            _filters=(*self._filters, predicate),
        )
