"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from docpolicy.domain.model.enums import Visibility

if TYPE_CHECKING:
    from pathlib import Path

    from docpolicy.domain.model.source_span import SourceSpan

PROTOCOL_BASES = frozenset({"Protocol", "typing.Protocol", "typing_extensions.Protocol"})

ENUM_BASES = frozenset(
    {
        "Enum",
        "IntEnum",
        "StrEnum",
        "Flag",
        "IntFlag",
        "enum.Enum",
        "enum.IntEnum",
        "enum.StrEnum",
        "enum.Flag",
        "enum.IntFlag",
    }
)


def make_span(node: ast.stmt, path: Path) -> SourceSpan:
    """Create SourceSpan from AST node.

    Args:
        node: Statement node with position info
        path: Source file path

    Returns:
        SourceSpan pointing to node

    Raises:
        ParsingError: If node has no line info (FAIL-FIRST)
    """
    from docpolicy.domain.exceptions.parsing import ParsingError
    from docpolicy.domain.model.source_span import SourceSpan

    # FAIL-FIRST: node must have line info
    lineno = getattr(node, "lineno", None)
    if lineno is None:
        raise ParsingError(path, f"{type(node).__name__} node has no line info")

    return SourceSpan(
        file=path,
        line=lineno,
        column=node.col_offset,
        end_line=node.end_lineno,
    )


def get_visibility(name: str) -> Visibility:
    """Determine visibility from Python naming convention.

    Args:
        name: Identifier name

    Returns:
        Visibility based on underscore prefix

    Rules:
        __name__ (dunder) → PUBLIC (special methods)
        __name (not __name__) → PRIVATE (mangled)
        _name → PROTECTED
        name → PUBLIC
    """
    # Dunder methods (__init__, __str__, etc.) are PUBLIC
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    # Name-mangled private attributes
    if name.startswith("__"):
        return Visibility.PRIVATE
    # Protected by convention
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def is_dunder(name: str) -> bool:
    """Check if name is __dunder__."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def is_sunder(name: str) -> bool:
    """Check if name is _sunder_ (reserved by enum)."""
    return (
        len(name) > 2
        and name.startswith("_")
        and name.endswith("_")
        and not name.startswith("__")
        and not name.endswith("__")
    )


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute fully qualified module name from file path.

    Args:
        file_path: Path to .py file
        root_path: Source root path

    Returns:
        Fully qualified module name

    Raises:
        ParsingError: If path is invalid (FAIL-FIRST)
    """
    from docpolicy.domain.exceptions.parsing import ParsingError

    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    for part in parts:
        if not part.isidentifier():
            raise ParsingError(file_path, f"'{part}' is not valid Python identifier")

    if not parts:
        raise ParsingError(file_path, "cannot determine module name (empty)")

    return ".".join(parts)


def find_module_root(path: Path) -> Path:
    """Find the directory module names are computed from.

    Climbs out of packages: src/myapp (a package) → src,
    src/myapp/__init__.py → src, scripts/tool.py → scripts.

    Args:
        path: Source directory or .py file

    Returns:
        Nearest ancestor directory that is not itself a package
    """
    directory = path if path.is_dir() else path.parent
    while (directory / "__init__.py").is_file() and directory.parent != directory:
        directory = directory.parent
    return directory


def base_name(node: ast.expr) -> str:
    """Base class name as written, without generic parameters.

    Protocol[T] → "Protocol", typing.Protocol → "typing.Protocol".
    """
    match node:
        case ast.Subscript(value=value):
            return ast.unparse(value)
    return ast.unparse(node)


def extract_base_names(class_node: ast.ClassDef) -> tuple[str, ...]:
    """Extract base class names from class definition.

    Args:
        class_node: Class AST node

    Returns:
        Tuple of base class names as they appear in code
    """
    return tuple(base_name(base) for base in class_node.bases)


def has_decorator(
    decorators: list[ast.expr],
    name: str,
) -> bool:
    """Check if decorator list contains decorator with given name.

    Args:
        decorators: List of decorator expressions
        name: Decorator name to find

    Returns:
        True if decorator found
    """
    for dec in decorators:
        if isinstance(dec, ast.Name) and dec.id == name:
            return True
        if isinstance(dec, ast.Attribute) and dec.attr == name:
            return True
        if isinstance(dec, ast.Call):
            if isinstance(dec.func, ast.Name) and dec.func.id == name:
                return True
            if isinstance(dec.func, ast.Attribute) and dec.func.attr == name:
                return True
    return False


def is_accessor_companion(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function is a @x.setter or @x.deleter of a property.

    Args:
        node: Function node

    Returns:
        True if decorated with <property>.setter/.deleter
    """
    for dec in node.decorator_list:
        match dec:
            case ast.Attribute(value=ast.Name(), attr="setter" | "deleter"):
                return True
    return False


def target_names(node: ast.Assign | ast.AnnAssign) -> tuple[str, ...]:
    """Plain names bound by an assignment.

    Attribute and subscript targets are ignored; tuple targets are unpacked.

    Args:
        node: Assignment statement

    Returns:
        Bound names in target order
    """
    targets = node.targets if isinstance(node, ast.Assign) else [node.target]
    names: list[str] = []
    stack = list(reversed(targets))
    while stack:
        target = stack.pop()
        match target:
            case ast.Name(id=name):
                names.append(name)
            case ast.Tuple(elts=elts) | ast.List(elts=elts):
                stack.extend(reversed(elts))
            case ast.Starred(value=value):
                stack.append(value)
    return tuple(names)


def extract_all_names(tree: ast.Module) -> frozenset[str] | None:
    """Extract a literal __all__ from module body.

    Args:
        tree: Module AST

    Returns:
        Names listed in __all__, None if module defines no literal __all__
    """
    for node in tree.body:
        match node:
            case ast.Assign(
                targets=[ast.Name(id="__all__")],
                value=ast.List(elts=elts) | ast.Tuple(elts=elts),
            ) | ast.AnnAssign(
                target=ast.Name(id="__all__"),
                value=ast.List(elts=elts) | ast.Tuple(elts=elts),
            ):
                return frozenset(
                    elt.value
                    for elt in elts
                    if isinstance(elt, ast.Constant) and isinstance(elt.value, str)
                )
    return None


def is_exported(name: str, all_names: frozenset[str] | None) -> bool:
    """Check if module-level name is part of the public surface.

    Args:
        name: Declared name
        all_names: Module __all__, None if absent

    Returns:
        Membership in __all__ if defined, else no leading underscore
    """
    if all_names is not None:
        return name in all_names
    return not name.startswith("_")
