"""Declaration collector: walks a module AST and gathers documentable declarations."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from docpolicy.domain.model.declaration import Declaration
from docpolicy.domain.model.enums import DeclarationKind, DocType, MemberCategory
from docpolicy.domain.model.facts import BlockFacts
from docpolicy.infrastructure.analyzers.base import (
    ENUM_BASES,
    PROTOCOL_BASES,
    extract_all_names,
    extract_base_names,
    is_accessor_companion,
    is_dunder,
    is_exported,
    is_sunder,
    make_span,
    target_names,
)
from docpolicy.infrastructure.analyzers.docstring_detector import DocstringDetector
from docpolicy.infrastructure.analyzers.member_analyzer import MemberAnalyzer

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class DeclarationCollector:
    """Collects Declaration objects from a parsed module.

    Stateless collector - no state between collect() calls.

    Collected:
        module-level functions → FUNCTIONS
        module-level classes → CLASSES / ENUMS / INTERFACES (Protocol)
        module-level name bindings (not dunder) → VARIABLES
        class body methods and attributes → METHODS / PROPERTIES
        Enum body members → ENUM_MEMBERS
        nested classes → as module-level classes, exported only if owner is
    """

    def __init__(self) -> None:
        self._member_analyzer = MemberAnalyzer()
        self._detector = DocstringDetector()

    def collect(self, tree: ast.Module, path: Path, module_name: str) -> tuple[Declaration, ...]:
        """Collect declarations of one module.

        Args:
            tree: Parsed module
            path: Source file path
            module_name: Fully qualified module name

        Returns:
            Declarations in source order

        Raises:
            TypeError: If tree or path is None (FAIL-FIRST)
            ValueError: If module_name is empty (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if tree is None:
            raise TypeError("tree must not be None")
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        all_names = extract_all_names(tree)
        return tuple(self._collect_module_body(tree.body, path, module_name, all_names))

    def _collect_module_body(
        self,
        body: list[ast.stmt],
        path: Path,
        module_name: str,
        all_names: frozenset[str] | None,
    ) -> Iterator[Declaration]:
        for index, node in enumerate(body):
            match node:
                case ast.FunctionDef() | ast.AsyncFunctionDef():
                    yield Declaration(
                        doc_type=DocType.FUNCTIONS,
                        qualified_name=f"{module_name}.{node.name}",
                        span=make_span(node, path),
                        has_docstring=self._detector.has_docstring(body, index),
                        block=BlockFacts(node.name, is_exported(node.name, all_names)),
                    )

                case ast.ClassDef():
                    yield from self._collect_class(
                        node,
                        self._detector.has_docstring(body, index),
                        path,
                        module_name,
                        is_exported(node.name, all_names),
                    )

                case ast.Assign() | ast.AnnAssign():
                    has_docstring = self._detector.has_docstring(body, index)
                    for name in target_names(node):
                        if is_dunder(name):
                            continue
                        yield Declaration(
                            doc_type=DocType.VARIABLES,
                            qualified_name=f"{module_name}.{name}",
                            span=make_span(node, path),
                            has_docstring=has_docstring,
                            block=BlockFacts(name, is_exported(name, all_names)),
                        )

    def _collect_class(
        self,
        node: ast.ClassDef,
        has_docstring: bool,
        path: Path,
        owner_name: str,
        exported: bool,
    ) -> Iterator[Declaration]:
        qualified_name = f"{owner_name}.{node.name}"
        bases = extract_base_names(node)
        is_protocol = any(base in PROTOCOL_BASES for base in bases)
        is_enum = any(base in ENUM_BASES for base in bases)

        if is_protocol:
            doc_type = DocType.INTERFACES
        elif is_enum:
            doc_type = DocType.ENUMS
        else:
            doc_type = DocType.CLASSES

        yield Declaration(
            doc_type=doc_type,
            qualified_name=qualified_name,
            span=make_span(node, path),
            has_docstring=has_docstring,
            block=BlockFacts(node.name, exported),
        )

        category = MemberCategory.INTERFACE_MEMBER if is_protocol else MemberCategory.CLASS_MEMBER
        yield from self._collect_class_body(
            node.body,
            path,
            qualified_name,
            category,
            is_enum=is_enum,
            exported=exported,
        )

    def _collect_class_body(
        self,
        body: list[ast.stmt],
        path: Path,
        class_name: str,
        category: MemberCategory,
        *,
        is_enum: bool,
        exported: bool,
    ) -> Iterator[Declaration]:
        in_protocol = category is MemberCategory.INTERFACE_MEMBER

        for index, node in enumerate(body):
            match node:
                case ast.FunctionDef() | ast.AsyncFunctionDef():
                    # Setter/deleter share the getter's documentation
                    if is_accessor_companion(node):
                        continue
                    facts = self._member_analyzer.analyze_function(node, in_protocol)
                    doc_type = (
                        DocType.PROPERTIES
                        if facts.kind is DeclarationKind.ACCESSOR
                        else DocType.METHODS
                    )
                    yield Declaration(
                        doc_type=doc_type,
                        qualified_name=f"{class_name}.{node.name}",
                        span=make_span(node, path),
                        has_docstring=self._detector.has_docstring(body, index),
                        member=facts,
                        category=category,
                    )

                case ast.ClassDef():
                    yield from self._collect_class(
                        node,
                        self._detector.has_docstring(body, index),
                        path,
                        class_name,
                        exported and not node.name.startswith("_"),
                    )

                case ast.Assign() | ast.AnnAssign():
                    yield from self._collect_attribute(
                        node,
                        self._detector.has_docstring(body, index),
                        path,
                        class_name,
                        category,
                        is_enum=is_enum,
                    )

    def _collect_attribute(
        self,
        node: ast.Assign | ast.AnnAssign,
        has_docstring: bool,
        path: Path,
        class_name: str,
        category: MemberCategory,
        *,
        is_enum: bool,
    ) -> Iterator[Declaration]:
        in_protocol = category is MemberCategory.INTERFACE_MEMBER

        for name in target_names(node):
            if is_dunder(name):
                continue

            if is_enum:
                if is_sunder(name):
                    continue
                yield Declaration(
                    doc_type=DocType.ENUM_MEMBERS,
                    qualified_name=f"{class_name}.{name}",
                    span=make_span(node, path),
                    has_docstring=has_docstring,
                )
                continue

            yield Declaration(
                doc_type=DocType.PROPERTIES,
                qualified_name=f"{class_name}.{name}",
                span=make_span(node, path),
                has_docstring=has_docstring,
                member=self._member_analyzer.analyze_attribute(node, name, in_protocol),
                category=category,
            )
