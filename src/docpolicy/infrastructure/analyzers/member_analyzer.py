"""Member fact extractor."""

from __future__ import annotations

import ast

from docpolicy.domain.model.enums import DeclarationKind
from docpolicy.domain.model.facts import DeclarationFacts
from docpolicy.infrastructure.analyzers.base import get_visibility, has_decorator
from docpolicy.infrastructure.analyzers.type_analyzer import (
    is_classvar_annotation,
    is_simple_annotation,
    is_simply_typed_function,
)

CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__"})
ACCESSOR_DECORATORS = ("property", "cached_property")


class MemberAnalyzer:
    """Extracts DeclarationFacts from class and Protocol body members.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze_function(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        in_protocol: bool,
    ) -> DeclarationFacts:
        """Analyze method AST node.

        Args:
            node: Function defined in a class body
            in_protocol: Owning class is a Protocol

        Returns:
            Member facts

        Raises:
            TypeError: If node is None (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")

        return DeclarationFacts(
            name=node.name,
            kind=self._function_kind(node, in_protocol),
            visibility=get_visibility(node.name),
            is_static=self._is_static_function(node),
            is_simply_typed=is_simply_typed_function(node, is_method=True),
        )

    def analyze_attribute(
        self,
        node: ast.Assign | ast.AnnAssign,
        name: str,
        in_protocol: bool,
    ) -> DeclarationFacts:
        """Analyze class-body assignment for one bound name.

        Annotated attributes are instance fields unless marked ClassVar.
        Unannotated assignments bind class attributes and are static.

        Args:
            node: Assignment in a class body
            name: Bound name
            in_protocol: Owning class is a Protocol

        Returns:
            Member facts

        Raises:
            TypeError: If node is None (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")

        if in_protocol:
            kind = DeclarationKind.PROPERTY_SIGNATURE
        else:
            kind = DeclarationKind.PROPERTY_DECLARATION

        match node:
            case ast.AnnAssign(annotation=annotation):
                is_static = is_classvar_annotation(annotation)
                is_simply_typed = is_simple_annotation(annotation)
            case _:
                is_static = True
                is_simply_typed = False

        return DeclarationFacts(
            name=name,
            kind=kind,
            visibility=get_visibility(name),
            is_static=is_static,
            is_simply_typed=is_simply_typed,
        )

    def is_accessor(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
        """Check if method is a @property style getter."""
        return any(has_decorator(node.decorator_list, name) for name in ACCESSOR_DECORATORS)

    def _function_kind(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        in_protocol: bool,
    ) -> DeclarationKind:
        if node.name in CONSTRUCTOR_NAMES:
            return DeclarationKind.CONSTRUCTOR
        if self.is_accessor(node):
            return DeclarationKind.ACCESSOR
        if in_protocol or has_decorator(node.decorator_list, "overload"):
            return DeclarationKind.METHOD_SIGNATURE
        return DeclarationKind.METHOD_DECLARATION

    def _is_static_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
        return has_decorator(node.decorator_list, "staticmethod") or has_decorator(
            node.decorator_list, "classmethod"
        )
