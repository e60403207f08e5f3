"""Docstring detection.

The only component that looks at documentation. Exclusions never do.
"""

from __future__ import annotations

import ast


class DocstringDetector:
    """Decides whether a declaration carries a docstring.

    Stateless detector - no state between calls.

    Functions and classes use their own docstring. Assignments use the
    attribute-docstring convention: a string literal statement directly
    after the assignment in the same body.
    """

    def has_docstring(self, body: list[ast.stmt], index: int) -> bool:
        """Check declaration at body[index] for a docstring.

        Args:
            body: Statement list owning the declaration
            index: Position of the declaration in body

        Returns:
            True if documented

        Raises:
            IndexError: If index is outside body (FAIL-FIRST)
        """
        if not 0 <= index < len(body):
            raise IndexError(f"index {index} outside body of {len(body)} statements")

        node = body[index]
        match node:
            case ast.FunctionDef() | ast.AsyncFunctionDef() | ast.ClassDef():
                return self._has_own_docstring(node)
            case ast.Assign() | ast.AnnAssign():
                return self._has_attribute_docstring(body, index)
        return False

    def _has_own_docstring(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef,
    ) -> bool:
        docstring = ast.get_docstring(node, clean=True)
        return bool(docstring and docstring.strip())

    def _has_attribute_docstring(self, body: list[ast.stmt], index: int) -> bool:
        if index + 1 >= len(body):
            return False
        match body[index + 1]:
            case ast.Expr(value=ast.Constant(value=str(text))):
                return bool(text.strip())
        return False
