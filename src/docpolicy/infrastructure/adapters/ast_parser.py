"""AST-based source parser adapter.

Implements SourceParserPort using Python AST.
"""

from __future__ import annotations

import ast
import logging
from typing import TYPE_CHECKING

from docpolicy.domain.exceptions.parsing import ParsingError
from docpolicy.domain.ports.source_parser import SourceParserPort
from docpolicy.infrastructure.analyzers.base import compute_module_name
from docpolicy.infrastructure.analyzers.declaration_collector import DeclarationCollector

if TYPE_CHECKING:
    from pathlib import Path

    from docpolicy.domain.model.declaration import Declaration

logger = logging.getLogger(__name__)


class ASTSourceParser(SourceParserPort):
    """Parser using Python AST to collect documentable declarations.

    Stateless between parse_file() calls.

    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def __init__(self, root_path: Path) -> None:
        """Initialize parser with root path.

        Args:
            root_path: Root path for computing module names

        Raises:
            TypeError: If root_path is None
        """
        if root_path is None:
            raise TypeError("root_path must not be None")

        self._root_path = root_path
        self._collector = DeclarationCollector()

    def parse_file(self, path: Path) -> tuple[Declaration, ...]:
        """Collect declarations of a single Python file.

        FAIL-FIRST: raises ParsingError on file errors, syntax errors.

        Args:
            path: Path to .py file

        Returns:
            Declarations in source order

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        # Parse AST - FAIL-FIRST on syntax errors
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e

        module_name = compute_module_name(path, self._root_path)
        declarations = self._collector.collect(tree, path, module_name)

        logger.debug("Collected %d declarations from %s", len(declarations), path)
        return declarations

    def parse_directory(self, path: Path) -> tuple[Declaration, ...]:
        """Collect declarations of every .py file under a directory.

        Skips __pycache__. Files are visited in sorted order so results
        are reproducible.

        Args:
            path: Root directory path

        Returns:
            Declarations of all files

        Raises:
            ParsingError: If path is not a directory or any file cannot be parsed
        """
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        declarations: list[Declaration] = []
        file_count = 0

        for py_file in sorted(path.rglob("*.py")):
            # Skip __pycache__ directories
            if "__pycache__" in py_file.parts:
                continue

            declarations.extend(self.parse_file(py_file))
            file_count += 1

        logger.info(
            "Parsed %d files under %s: %d declarations", file_count, path, len(declarations)
        )
        return tuple(declarations)
