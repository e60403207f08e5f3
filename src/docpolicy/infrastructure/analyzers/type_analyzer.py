"""Simply-typed annotation analysis."""

from __future__ import annotations

import ast

SIMPLE_TYPE_NAMES = frozenset({"bool", "bytes", "complex", "float", "int", "str", "None"})

# Qualifiers whose single argument decides simplicity
_TRANSPARENT_WRAPPERS = frozenset({"Optional", "ClassVar", "Final"})

_SELF_NAMES = frozenset({"self", "cls"})


def is_simple_annotation(node: ast.expr | None) -> bool:
    """Check if annotation names a trivial type.

    Simple: bool, bytes, complex, float, int, str, None, unions of those,
    and Optional/ClassVar/Final of a simple type. String annotations are
    parsed and checked the same way.

    Args:
        node: Annotation expression, None if unannotated

    Returns:
        True if annotation is simple
    """
    match node:
        case None:
            return False
        case ast.Name(id=name):
            return name in SIMPLE_TYPE_NAMES
        case ast.Constant(value=None):
            return True
        case ast.Constant(value=str(source)):
            try:
                parsed = ast.parse(source, mode="eval")
            except SyntaxError:
                return False
            return is_simple_annotation(parsed.body)
        case ast.BinOp(left=left, op=ast.BitOr(), right=right):
            return is_simple_annotation(left) and is_simple_annotation(right)
        case ast.Subscript(value=ast.Name(id=wrapper) | ast.Attribute(attr=wrapper), slice=inner):
            return wrapper in _TRANSPARENT_WRAPPERS and is_simple_annotation(inner)
    return False


def is_classvar_annotation(node: ast.expr) -> bool:
    """Check if annotation is ClassVar or ClassVar[...]."""
    match node:
        case ast.Name(id="ClassVar") | ast.Attribute(attr="ClassVar"):
            return True
        case ast.Subscript(value=value):
            return is_classvar_annotation(value)
        case ast.Constant(value=str(source)):
            return source.split("[", 1)[0].rsplit(".", 1)[-1].strip() == "ClassVar"
    return False


def is_simply_typed_function(
    node: ast.FunctionDef | ast.AsyncFunctionDef,
    *,
    is_method: bool,
) -> bool:
    """Check if every annotation of a function is simple.

    Requires a simple return annotation and a simple annotation on each
    parameter. A method's leading self/cls parameter is skipped.

    Args:
        node: Function node
        is_method: Function is defined in a class body

    Returns:
        True if function is simply typed
    """
    if not is_simple_annotation(node.returns):
        return False

    args = node.args
    positional = [*args.posonlyargs, *args.args]
    if is_method and positional and positional[0].arg in _SELF_NAMES:
        positional = positional[1:]

    params = [*positional, *args.kwonlyargs]
    if args.vararg is not None:
        params.append(args.vararg)
    if args.kwarg is not None:
        params.append(args.kwarg)

    return all(is_simple_annotation(param.annotation) for param in params)
